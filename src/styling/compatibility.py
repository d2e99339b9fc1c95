"""
Category compatibility graph.

Declares which catalog categories pair well with which others. The table
is directional: WAISTCOATS lists SHOES but SHOES does not list
WAISTCOATS. It is read exactly as authored and never symmetrized.

Categories missing from the table (TRENDING, or anything added to the
store later) pair with every category that appears anywhere as a value,
minus themselves.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple


_COMPATIBLE_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "BAGS": ("DRESSES/JUMPSUITS", "BLAZERS", "JACKETS", "SHIRTS", "T-SHIRT/TOPS", "SKIRTS", "SHOES"),
    "BLAZERS": ("SHIRTS", "T-SHIRT/TOPS", "SKIRTS", "DRESSES/JUMPSUITS", "WAISTCOATS", "BAGS"),
    "DRESSES/JUMPSUITS": ("BLAZERS", "JACKETS", "SHOES", "BAGS"),
    "JACKETS": ("SHIRTS", "T-SHIRT/TOPS", "SWEATERS", "SKIRTS", "DRESSES/JUMPSUITS", "SHOES", "BAGS"),
    "SHIRTS": ("BLAZERS", "JACKETS", "WAISTCOATS", "SKIRTS", "SHOES", "BAGS"),
    "SHOES": ("DRESSES/JUMPSUITS", "SKIRTS", "SHIRTS", "T-SHIRT/TOPS", "BAGS"),
    "SWEATERS": ("SHIRTS", "SKIRTS", "JACKETS", "SHOES", "BAGS"),
    "WAISTCOATS": ("SHIRTS", "BLAZERS", "SKIRTS", "SHOES"),
    "SKIRTS": ("SHIRTS", "T-SHIRT/TOPS", "SWEATERS", "BLAZERS", "JACKETS", "SHOES", "BAGS"),
    "T-SHIRT/TOPS": ("SKIRTS", "JACKETS", "BLAZERS", "SHOES", "BAGS"),
}

COMPATIBLE_CATEGORIES: Mapping[str, Tuple[str, ...]] = MappingProxyType(_COMPATIBLE_CATEGORIES)


def _all_declared_values(table: Mapping[str, Tuple[str, ...]]) -> Tuple[str, ...]:
    seen: List[str] = []
    for values in table.values():
        for value in values:
            if value not in seen:
                seen.append(value)
    return tuple(seen)


_ALL_DECLARED: Tuple[str, ...] = _all_declared_values(COMPATIBLE_CATEGORIES)


def compatible_categories(category: str) -> Tuple[str, ...]:
    """
    Return the categories that pair well with ``category``.

    The lookup key is uppercased. Known categories return their declared
    tuple verbatim (declared order). Unknown categories return every
    declared value except the category itself, in first-seen order.
    """
    key = (category or "").strip().upper()
    declared = COMPATIBLE_CATEGORIES.get(key)
    if declared is not None:
        return declared
    return tuple(c for c in _ALL_DECLARED if c != key)
