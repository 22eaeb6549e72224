from __future__ import annotations

from disks.components.disk_row import DiskRow


class SortedDisks:
    """Output of a sorter: the final row and how many swaps produced it.

    The row is copied on construction and ``after`` hands out a fresh copy on
    every read, so nothing outside the result can change what it reports.
    Results compare by value and are unhashable, like rows.
    """

    __slots__ = ("_after", "_swap_count")

    def __init__(self, after: DiskRow, swap_count: int):
        if isinstance(swap_count, bool) or not isinstance(swap_count, int):
            raise TypeError(f"swap_count must be an int, got {type(swap_count).__name__}")
        if swap_count < 0:
            raise ValueError(f"swap_count must be non-negative, got {swap_count}")
        self._after = after.copy()
        self._swap_count = swap_count

    @property
    def after(self) -> DiskRow:
        return self._after.copy()

    @property
    def swap_count(self) -> int:
        return self._swap_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SortedDisks):
            return NotImplemented
        return self._after == other._after and self._swap_count == other._swap_count

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SortedDisks(after={self._after!r}, swap_count={self._swap_count})"
