import math

import pytest

from nestoolkit.widgets import SinSignal, StatefulList, TabsState


def test_sin_signal_points():
    signal = SinSignal(math.pi / 2, 1.0, 2.0)
    assert iter(signal) is signal
    first, second, third = next(signal), next(signal), next(signal)
    assert first == (0.0, 0.0)
    assert second[0] == pytest.approx(math.pi / 2)
    assert second[1] == pytest.approx(2.0)
    assert third[0] == pytest.approx(math.pi)
    assert third[1] == pytest.approx(0.0, abs=1e-9)


def test_sin_signal_x_advances_by_interval():
    signal = SinSignal(0.25, 3.0, 5.0)
    xs = [x for x, _ in (next(signal) for _ in range(5))]
    assert xs == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])


def test_tabs_wrap_forward_and_back():
    tabs = TabsState(["a", "b", "c"])
    assert tabs.index == 0
    tabs.previous()
    assert tabs.index == 2
    tabs.next()
    assert tabs.index == 0
    tabs.next()
    tabs.next()
    tabs.next()
    assert tabs.index == 0


def test_tabs_empty_raises():
    tabs = TabsState([])
    with pytest.raises(IndexError):
        tabs.next()
    with pytest.raises(IndexError):
        tabs.previous()


def test_stateful_list_next_and_previous():
    items = StatefulList.with_items(["x", "y", "z"])
    assert items.selected is None
    items.next()
    assert items.selected == 0
    items.next()
    items.next()
    assert items.selected == 2
    items.next()
    assert items.selected == 0
    items.previous()
    assert items.selected == 2
    items.previous()
    assert items.selected == 1


def test_stateful_list_previous_from_none_selects_first():
    items = StatefulList(["x", "y"])
    items.previous()
    assert items.selected == 0


def test_stateful_list_unselect():
    items = StatefulList(["x"])
    items.next()
    items.unselect()
    assert items.selected is None


def test_stateful_list_empty_with_selection_raises():
    items = StatefulList()
    assert items.items == []
    items.next()
    assert items.selected == 0
    with pytest.raises(IndexError):
        items.next()