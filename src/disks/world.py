from __future__ import annotations

from typing import Iterable

import esper

from disks.constants import DEFAULT_ALGORITHM, DEFAULT_WORLD_NAME
from disks.factories.rows import create_disk_row_entity


def create_world(
    name: str = DEFAULT_WORLD_NAME,
    *,
    light_counts: Iterable[int] = (),
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Switch esper to a clean world called ``name`` and seed it with rows.

    One row entity is created per entry of ``light_counts``, each queued for
    ``algorithm``. Returns the world name so callers can switch back later.
    """
    esper.switch_world(name)
    esper.clear_database()
    for light_count in light_counts:
        create_disk_row_entity(light_count, algorithm)
    return name
