from dataclasses import dataclass

from disks.constants import DEFAULT_ALGORITHM


@dataclass(slots=True)
class SortRequest:
    """Marks a row entity as waiting for the named sorter to run."""
    algorithm: str = DEFAULT_ALGORITHM
