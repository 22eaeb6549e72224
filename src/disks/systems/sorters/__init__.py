from disks.systems.sorters.base import Sorter, SwapTally, is_out_of_order
from disks.systems.sorters.lawnmower import sort_lawnmower
from disks.systems.sorters.left_to_right import sort_left_to_right
from disks.systems.sorters.registry import (
    SorterRegistry,
    create_sorter_registry,
    default_sorter_registry,
    get_sorter,
)

__all__ = [
    "Sorter",
    "SorterRegistry",
    "SwapTally",
    "create_sorter_registry",
    "default_sorter_registry",
    "get_sorter",
    "is_out_of_order",
    "sort_lawnmower",
    "sort_left_to_right",
]
