"""Services that build and store restaurant entries."""

from restaurant_entry.services.assembler import RecordAssembler
from restaurant_entry.services.asset_provisioner import AssetProvisioner
from restaurant_entry.services.collector import (
    InteractiveCollector,
    parse_bool,
    parse_list,
)
from restaurant_entry.services.lookup_loader import (
    LookupLoader,
    load_area_keys,
    load_cuisine_names,
    read_table,
)
from restaurant_entry.services.store import RestaurantStore

__all__ = [
    "AssetProvisioner",
    "InteractiveCollector",
    "LookupLoader",
    "RecordAssembler",
    "RestaurantStore",
    "load_area_keys",
    "load_cuisine_names",
    "parse_bool",
    "parse_list",
    "read_table",
]
