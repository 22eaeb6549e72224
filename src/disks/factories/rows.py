from __future__ import annotations

import esper

from disks.components.disk_row import DiskRow
from disks.components.sort_request import SortRequest
from disks.constants import DEFAULT_ALGORITHM
from disks.systems.sorters.registry import SorterRegistry, default_sorter_registry


def create_disk_row_entity(
    light_count: int,
    algorithm: str = DEFAULT_ALGORITHM,
    *,
    registry: SorterRegistry | None = None,
) -> int:
    """Create an entity holding a fresh alternating row queued for ``algorithm``."""
    # Resolve up front so an unknown name fails here rather than at process time.
    (registry or default_sorter_registry).get(algorithm)
    return esper.create_entity(DiskRow(light_count), SortRequest(algorithm=algorithm))
