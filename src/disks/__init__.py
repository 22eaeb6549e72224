"""Alternating disks: a row of light and dark disks plus two adjacent-swap sorters."""
from disks.components.disk_color import DiskColor
from disks.components.disk_row import DiskRow
from disks.components.sorted_disks import SortedDisks
from disks.events.bus import EventBus
from disks.systems.sorters import (
    SorterRegistry,
    create_sorter_registry,
    get_sorter,
    sort_lawnmower,
    sort_left_to_right,
)

__all__ = [
    "DiskColor",
    "DiskRow",
    "EventBus",
    "SortedDisks",
    "SorterRegistry",
    "create_sorter_registry",
    "get_sorter",
    "sort_lawnmower",
    "sort_left_to_right",
]
