"""Interactive tool for adding restaurants to the site's JSON data."""

__version__ = "0.1.0"
