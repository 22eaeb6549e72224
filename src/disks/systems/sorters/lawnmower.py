from __future__ import annotations

from disks.components.disk_row import DiskRow
from disks.components.sorted_disks import SortedDisks
from disks.constants import ALGORITHM_LAWNMOWER, DIRECTION_BACKWARD, DIRECTION_FORWARD
from disks.events.bus import EventBus
from disks.systems.sorters.base import SwapTally


def sort_lawnmower(before: DiskRow, *, event_bus: EventBus | None = None) -> SortedDisks:
    """Sort an alternating row by sweeping forward and then back again.

    Every iteration runs a forward sweep from index 0 followed by a backward
    sweep from the last pair down to index 0. Both sweeps use the same swap
    rule: dark directly before light. Swaps from both sweeps are counted.
    """
    tally = SwapTally.start(ALGORITHM_LAWNMOWER, before, event_bus)
    total = tally.row.total_count()
    for pass_index in range(total // 2):
        for index in range(total - 1):
            tally.swap_if_out_of_order(index, DIRECTION_FORWARD)
        for index in range(total - 2, -1, -1):
            tally.swap_if_out_of_order(index, DIRECTION_BACKWARD)
        tally.end_pass(pass_index)
    return tally.finish()
