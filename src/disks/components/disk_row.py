from __future__ import annotations

from typing import Iterator, List

from disks.components.disk_color import DiskColor
from disks.constants import DISPLAY_SEPARATOR


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass but never a valid count or index
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


class DiskRow:
    """One row of light and dark disks.

    A row is built in alternating order (light at index 0, dark at index 1,
    and so on) and afterwards only changes through ``swap``. The number of
    light and dark disks is fixed for the lifetime of the row.
    """

    __slots__ = ("_colors",)

    def __init__(self, light_count: int):
        _require_int("light_count", light_count)
        if light_count < 1:
            raise ValueError(f"a row needs at least one dark disk, got light_count={light_count}")
        self._colors: List[DiskColor] = [
            DiskColor.LIGHT if i % 2 == 0 else DiskColor.DARK
            for i in range(light_count * 2)
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiskRow):
            return NotImplemented
        return self._colors == other._colors

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return len(self._colors)

    def __iter__(self) -> Iterator[DiskColor]:
        return iter(self._colors)

    def __repr__(self) -> str:
        return f"DiskRow({self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()

    def copy(self) -> DiskRow:
        clone = DiskRow.__new__(DiskRow)
        clone._colors = list(self._colors)
        return clone

    def total_count(self) -> int:
        return len(self._colors)

    def dark_count(self) -> int:
        return self.total_count() // 2

    def light_count(self) -> int:
        return self.dark_count()

    def count(self, color: DiskColor) -> int:
        return self._colors.count(color)

    def is_index(self, index: int) -> bool:
        _require_int("index", index)
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        if not self.is_index(index):
            raise IndexError(f"disk index {index} out of range for row of {self.total_count()}")
        return self._colors[index]

    def swap(self, left_index: int) -> None:
        """Exchange the disks at ``left_index`` and ``left_index + 1``."""
        _require_int("left_index", left_index)
        right_index = left_index + 1
        if not (self.is_index(left_index) and self.is_index(right_index)):
            raise IndexError(
                f"cannot swap {left_index} and {right_index} in row of {self.total_count()}"
            )
        colors = self._colors
        colors[left_index], colors[right_index] = colors[right_index], colors[left_index]

    def to_string(self) -> str:
        return DISPLAY_SEPARATOR.join(color.glyph for color in self._colors)

    def is_alternating(self) -> bool:
        """True when even indices hold light disks and odd indices hold dark ones."""
        for index, color in enumerate(self._colors):
            expected = DiskColor.LIGHT if index % 2 == 0 else DiskColor.DARK
            if color is not expected:
                return False
        return True

    def is_sorted(self) -> bool:
        """True when every light disk sits left of every dark disk."""
        half = self.total_count() // 2
        for index, color in enumerate(self._colors):
            expected = DiskColor.LIGHT if index < half else DiskColor.DARK
            if color is not expected:
                return False
        return True
