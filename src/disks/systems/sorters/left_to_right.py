from __future__ import annotations

from disks.components.disk_row import DiskRow
from disks.components.sorted_disks import SortedDisks
from disks.constants import ALGORITHM_LEFT_TO_RIGHT, DIRECTION_FORWARD
from disks.events.bus import EventBus
from disks.systems.sorters.base import SwapTally


def sort_left_to_right(before: DiskRow, *, event_bus: EventBus | None = None) -> SortedDisks:
    """Sort an alternating row with repeated left-to-right passes.

    Each pass walks every adjacent pair from the left and swaps a dark disk
    that sits directly before a light one. ``total_count() // 2`` passes are
    always run; that bound is enough for any alternating row.
    """
    tally = SwapTally.start(ALGORITHM_LEFT_TO_RIGHT, before, event_bus)
    total = tally.row.total_count()
    for pass_index in range(total // 2):
        for index in range(total - 1):
            tally.swap_if_out_of_order(index, DIRECTION_FORWARD)
        tally.end_pass(pass_index)
    return tally.finish()
