from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so lambdas and unstored systems keep receiving events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# SORTING
# ============================================================================
EVENT_DISKS_SWAPPED = "disks_swapped"              # payload: algorithm=str, index=int, direction=str, swap_count=int
EVENT_SORT_PASS_COMPLETE = "sort_pass_complete"    # payload: algorithm=str, pass_index=int, swaps=int, swap_count=int
EVENT_SORT_COMPLETE = "sort_complete"              # payload: algorithm=str, swap_count=int, after=DiskRow


# ============================================================================
# BATCH WORLD
# ============================================================================
EVENT_SORT_REQUEST = "sort_request"                # payload: entity=int
EVENT_ROW_SORTED = "row_sorted"                    # payload: entity=int, algorithm=str, result=SortedDisks
