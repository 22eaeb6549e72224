import pytest

from disks.components.disk_color import DiskColor
from disks.components.disk_row import DiskRow
from disks.events.bus import EventBus, EVENT_DISKS_SWAPPED, EVENT_SORT_PASS_COMPLETE, EVENT_SORT_COMPLETE
from disks.systems.sorters.lawnmower import sort_lawnmower
from disks.systems.sorters.left_to_right import sort_left_to_right
from tests.helpers import colors_of, record_events


def test_two_disks_need_no_swaps():
    before = DiskRow(1)
    result = sort_lawnmower(before)
    assert colors_of(result.after) == 'LD'
    assert result.swap_count == 0


def test_eight_disks():
    result = sort_lawnmower(DiskRow(4))
    assert colors_of(result.after) == 'LLLLDDDD'
    assert result.swap_count == 6


@pytest.mark.parametrize("light_count", range(1, 13))
def test_sorts_every_alternating_row(light_count):
    before = DiskRow(light_count)
    result = sort_lawnmower(before)
    assert result.after.is_sorted()
    assert result.after.count(DiskColor.LIGHT) == light_count
    assert result.after.count(DiskColor.DARK) == light_count
    assert result.swap_count == light_count * (light_count - 1) // 2
    assert before == DiskRow(light_count), 'Input row must not be mutated'


@pytest.mark.parametrize("light_count", [1, 2, 4, 7, 10])
def test_never_swaps_more_than_left_to_right(light_count):
    row = DiskRow(light_count)
    lawnmower = sort_lawnmower(row)
    left_to_right = sort_left_to_right(row)
    assert lawnmower.swap_count <= left_to_right.swap_count
    assert lawnmower.after == left_to_right.after


def test_backward_sweep_swaps_within_the_first_iteration():
    bus = EventBus()
    received = record_events(bus, EVENT_DISKS_SWAPPED, EVENT_SORT_PASS_COMPLETE)
    sort_lawnmower(DiskRow(4), event_bus=bus)

    swaps = [payload for name, payload in received if name == EVENT_DISKS_SWAPPED]
    passes = [payload for name, payload in received if name == EVENT_SORT_PASS_COMPLETE]

    assert [(p['index'], p['direction']) for p in swaps] == [
        (1, 'forward'), (3, 'forward'), (5, 'forward'),
        (4, 'backward'), (2, 'backward'),
        (3, 'forward'),
    ]
    # Lawnmower finishes in fewer productive iterations than four left-to-right passes
    assert [p['swaps'] for p in passes] == [5, 1, 0, 0]
    assert passes[-1]['swap_count'] == 6


def test_complete_event_names_algorithm():
    bus = EventBus()
    completed = {}
    bus.subscribe(EVENT_SORT_COMPLETE, lambda s, **k: completed.update(k))
    result = sort_lawnmower(DiskRow(3), event_bus=bus)
    assert completed['algorithm'] == 'lawnmower'
    assert completed['swap_count'] == result.swap_count == 3


def test_already_sorted_input_costs_nothing():
    before = DiskRow(4)
    for index in (1, 3, 5, 2, 4, 3):
        before.swap(index)
    assert before.is_sorted()
    result = sort_lawnmower(before)
    assert result.swap_count == 0
    assert result.after == before
