import threading

import pytest

from algorithms.sorting import bubble_sort
from algorithms.step import Step
from engine import ControllerTable


def test_checkout_creates_one_controller_per_session():
    table = ControllerTable(max_sessions=4, idle_seconds=60)
    with table.checkout("a", now=0) as first:
        pass
    with table.checkout("a", now=1) as again:
        pass
    with table.checkout("b", now=2) as other:
        pass

    assert first is again
    assert first is not other
    assert len(table) == 2


def test_least_recently_used_session_is_evicted_and_stopped():
    table = ControllerTable(max_sessions=2, idle_seconds=600)
    with table.checkout("a", now=0) as a:
        a.start_step_by_step(bubble_sort([3, 2, 1]))
        a.step_forward()
    with table.checkout("b", now=1):
        pass
    with table.checkout("a", now=2):
        pass
    with table.checkout("c", now=3):
        pass

    assert "b" not in table
    assert "a" in table and "c" in table
    assert a.has_active_producer


def test_evicted_controller_releases_its_run():
    table = ControllerTable(max_sessions=1, idle_seconds=600)
    with table.checkout("a", now=0) as a:
        a.start_step_by_step(bubble_sort([3, 2, 1]))
        a.step_forward()
    with table.checkout("b", now=1):
        pass

    assert "a" not in table
    assert not a.has_active_producer
    assert a.history == []


def test_idle_sessions_are_evicted():
    table = ControllerTable(max_sessions=10, idle_seconds=60)
    with table.checkout("a", now=0):
        pass
    with table.checkout("b", now=30):
        pass
    with table.checkout("c", now=75):
        pass

    assert "a" not in table
    assert "b" in table and "c" in table


def test_clear_stops_everything():
    table = ControllerTable()
    with table.checkout("a") as a:
        a.start_step_by_step(bubble_sort([2, 1]))
    table.clear()
    assert len(table) == 0
    assert not a.has_active_producer


def test_table_needs_room_for_one_session():
    with pytest.raises(ValueError):
        ControllerTable(max_sessions=0)


def test_concurrent_checkouts_never_pull_from_a_running_generator():
    table = ControllerTable()
    entered, release = threading.Event(), threading.Event()

    def slow():
        entered.set()
        release.wait(5)
        yield Step(line=1)
        yield Step(line=2)

    with table.checkout("a") as c:
        c.start_step_by_step(slow())

    errors, results = [], []

    def step():
        try:
            with table.checkout("a") as controller:
                results.append(controller.step_forward())
        except Exception as exc:
            errors.append(exc)

    first = threading.Thread(target=step)
    first.start()
    assert entered.wait(5)

    second = threading.Thread(target=step)
    second.start()
    second.join(0.1)
    assert second.is_alive()

    release.set()
    first.join(5)
    second.join(5)

    assert errors == []
    assert results == [True, True]
    with table.checkout("a") as c:
        assert c.has_active_producer
        assert [s.line for s in c.history] == [1, 2]
