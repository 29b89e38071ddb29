from .filter import (
    filter,
    filter_indexed,
    filter_map,
    filter_map_indexed,
    find_map,
    find_map_indexed,
)
from .map import enumerate, flat_map, flat_map_indexed, map, map_indexed

__all__ = (
    # Lazy
    "enumerate",
    "filter_map",
    "filter_map_indexed",
    "flat_map",
    "flat_map_indexed",
    "map",
    "map_indexed",
    # Terminal
    "filter",
    "filter_indexed",
    "find_map",
    "find_map_indexed",
)
