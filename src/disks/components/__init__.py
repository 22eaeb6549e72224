from disks.components.disk_color import DiskColor
from disks.components.disk_row import DiskRow
from disks.components.sort_request import SortRequest
from disks.components.sorted_disks import SortedDisks

__all__ = [
    "DiskColor",
    "DiskRow",
    "SortRequest",
    "SortedDisks",
]
