from __future__ import annotations

from typing import Any, Dict, List, Tuple

from disks.components.disk_color import DiskColor
from disks.components.disk_row import DiskRow
from disks.events.bus import EventBus


def record_events(bus: EventBus, *names: str) -> List[Tuple[str, Dict[str, Any]]]:
    """Subscribe to ``names`` and collect every emission as ``(name, payload)``."""

    received: List[Tuple[str, Dict[str, Any]]] = []
    for name in names:
        bus.subscribe(name, lambda sender, _name=name, **kwargs: received.append((_name, kwargs)))
    return received


def colors_of(row: DiskRow) -> str:
    """Compact ``LDLD`` form of a row for assertions."""

    return "".join('L' if color is DiskColor.LIGHT else 'D' for color in row)
