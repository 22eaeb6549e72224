from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from disks.components.disk_color import DiskColor
from disks.components.disk_row import DiskRow
from disks.components.sorted_disks import SortedDisks
from disks.events.bus import (
    EventBus,
    EVENT_DISKS_SWAPPED,
    EVENT_SORT_PASS_COMPLETE,
    EVENT_SORT_COMPLETE,
)

log = logging.getLogger(__name__)


class Sorter(Protocol):
    """Callable shared by every sorting strategy."""

    def __call__(self, before: DiskRow, *, event_bus: EventBus | None = None) -> SortedDisks:
        ...


def is_out_of_order(row: DiskRow, left_index: int) -> bool:
    """A dark disk directly followed by a light one."""
    return row.get(left_index) is DiskColor.DARK and row.get(left_index + 1) is DiskColor.LIGHT


@dataclass(slots=True)
class SwapTally:
    """Working state for one sort run.

    Owns a private copy of the input row, counts swaps, and reports progress
    on the optional event bus.
    """

    algorithm: str
    row: DiskRow
    event_bus: EventBus | None = None
    swap_count: int = 0
    _pass_swaps: int = field(default=0, init=False, repr=False)

    @classmethod
    def start(cls, algorithm: str, before: DiskRow, event_bus: EventBus | None = None) -> SwapTally:
        return cls(algorithm=algorithm, row=before.copy(), event_bus=event_bus)

    def swap_if_out_of_order(self, left_index: int, direction: str) -> bool:
        if not is_out_of_order(self.row, left_index):
            return False
        self.row.swap(left_index)
        self.swap_count += 1
        self._pass_swaps += 1
        if self.event_bus is not None:
            self.event_bus.emit(
                EVENT_DISKS_SWAPPED,
                algorithm=self.algorithm,
                index=left_index,
                direction=direction,
                swap_count=self.swap_count,
            )
        return True

    def end_pass(self, pass_index: int) -> None:
        swaps = self._pass_swaps
        self._pass_swaps = 0
        if self.event_bus is not None:
            self.event_bus.emit(
                EVENT_SORT_PASS_COMPLETE,
                algorithm=self.algorithm,
                pass_index=pass_index,
                swaps=swaps,
                swap_count=self.swap_count,
            )

    def finish(self) -> SortedDisks:
        result = SortedDisks(after=self.row, swap_count=self.swap_count)
        log.debug(
            "%s sorted %d disks with %d swaps",
            self.algorithm,
            result.after.total_count(),
            result.swap_count,
        )
        if self.event_bus is not None:
            self.event_bus.emit(
                EVENT_SORT_COMPLETE,
                algorithm=self.algorithm,
                swap_count=result.swap_count,
                after=result.after,
            )
        return result
