from __future__ import annotations

import logging
from typing import Dict

import esper

from disks.components.disk_row import DiskRow
from disks.components.sort_request import SortRequest
from disks.components.sorted_disks import SortedDisks
from disks.events.bus import EventBus, EVENT_SORT_REQUEST, EVENT_ROW_SORTED
from disks.systems.sorters.registry import SorterRegistry, default_sorter_registry

log = logging.getLogger(__name__)


class SortSystem:
    """Runs queued sorters against row entities in the current esper world.

    Logic:
      - An entity with DiskRow + SortRequest is sorted with the requested sorter.
      - The SortedDisks result is attached to the entity and the SortRequest removed.
      - The entity's DiskRow keeps its original arrangement.
      - On EVENT_SORT_REQUEST: sort the entity named in the payload.
    """
    def __init__(self, event_bus: EventBus, registry: SorterRegistry | None = None):
        self.event_bus = event_bus
        self.registry = registry or default_sorter_registry
        self.event_bus.subscribe(EVENT_SORT_REQUEST, self.on_sort_request)

    def on_sort_request(self, sender, **kwargs):
        self.sort_entity(kwargs['entity'])

    def sort_entity(self, entity: int) -> SortedDisks:
        row = esper.component_for_entity(entity, DiskRow)
        request = esper.component_for_entity(entity, SortRequest)
        sorter = self.registry.get(request.algorithm)
        result = sorter(row, event_bus=self.event_bus)
        esper.add_component(entity, result)
        esper.remove_component(entity, SortRequest)
        log.debug("entity %d sorted by %s in %d swaps", entity, request.algorithm, result.swap_count)
        self.event_bus.emit(EVENT_ROW_SORTED, entity=entity, algorithm=request.algorithm, result=result)
        return result

    def process(self) -> Dict[int, SortedDisks]:
        """Sort every entity still holding a SortRequest."""
        pending = [ent for ent, _ in esper.get_components(DiskRow, SortRequest)]
        results: Dict[int, SortedDisks] = {}
        for ent in pending:
            results[ent] = self.sort_entity(ent)
        return results
