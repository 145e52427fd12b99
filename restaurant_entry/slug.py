"""URL-safe identifiers for restaurant pages."""

import re
import unicodedata

_APOSTROPHES = re.compile(r"['’]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")
_HYPHEN_RUNS = re.compile(r"-+")


def normalize(text: str | None) -> str:
    """Turn free text into a slug.

    ``"O'Brien's & Sons"`` becomes ``"obriens-and-sons"``. An empty result
    means no identifier could be derived and must be handled by the caller.

    Accents are dropped, so ``"Crème Brûlée"`` becomes ``"creme-brulee"``.
    Older entries may hold slugs that split accented letters instead
    (``"cre-me-bru-le-e"``); such a slug does not collide with the one
    produced here for the same name.
    """
    value = unicodedata.normalize("NFKD", str(text or "").strip().lower())
    # Drop the accents split off by NFKD so "crème" keeps its letters together.
    value = "".join(ch for ch in value if not unicodedata.combining(ch))
    value = _APOSTROPHES.sub("", value)
    value = value.replace("&", " and ")
    value = _NON_ALNUM.sub("-", value)
    value = _EDGE_HYPHENS.sub("", value)
    return _HYPHEN_RUNS.sub("-", value)
