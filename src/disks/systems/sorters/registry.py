from __future__ import annotations

from typing import Dict, Iterable, Tuple

from disks.constants import ALGORITHM_LAWNMOWER, ALGORITHM_LEFT_TO_RIGHT
from disks.systems.sorters.base import Sorter
from disks.systems.sorters.lawnmower import sort_lawnmower
from disks.systems.sorters.left_to_right import sort_left_to_right


class SorterRegistry:
    """In-memory map of sorter names to sorting callables."""

    def __init__(self) -> None:
        self._sorters: Dict[str, Sorter] = {}

    def register(self, name: str, sorter: Sorter) -> None:
        if name in self._sorters:
            raise ValueError(f"Sorter '{name}' already registered")
        self._sorters[name] = sorter

    def get(self, name: str) -> Sorter:
        try:
            return self._sorters[name]
        except KeyError as exc:
            raise KeyError(f"Sorter '{name}' is not registered") from exc

    def has(self, name: str) -> bool:
        return name in self._sorters

    def names(self) -> Tuple[str, ...]:
        return tuple(self._sorters)


def create_sorter_registry(extra: Iterable[Tuple[str, Sorter]] = ()) -> SorterRegistry:
    """Registry holding the built-in sorters plus any ``(name, sorter)`` extras."""
    registry = SorterRegistry()
    registry.register(ALGORITHM_LEFT_TO_RIGHT, sort_left_to_right)
    registry.register(ALGORITHM_LAWNMOWER, sort_lawnmower)
    for name, sorter in extra:
        registry.register(name, sorter)
    return registry


default_sorter_registry = create_sorter_registry()


def get_sorter(name: str) -> Sorter:
    return default_sorter_registry.get(name)
