import asyncio
import time

import pytest

from algorithms.pathfinding import dijkstra
from algorithms.searching import binary_search
from algorithms.sorting import bubble_sort, quick_sort, selection_sort
from algorithms.step import Step
from engine import PAUSE_POLL_SECONDS, ControllerState, PlaybackController
from grid import Grid

SAMPLE = [64, 34, 25, 12, 22, 11, 90]


def counted(producer):
    """Wrap a producer and record every step actually pulled from it."""
    pulled = []

    def wrapper():
        for step in producer:
            pulled.append(step)
            yield step

    return wrapper(), pulled


def drain(controller):
    while controller.step_forward():
        pass


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------
def test_new_controller_is_idle():
    c = PlaybackController(array=[3, 1, 2])
    assert c.state is ControllerState.IDLE
    assert c.is_paused
    assert not c.has_active_producer
    assert c.history == [] and c.history_index == -1
    assert c.array == [3, 1, 2]
    assert c.step_forward() is False
    assert c.step_backward() is False


def test_start_step_by_step_attaches_paused_without_pulling():
    producer, pulled = counted(bubble_sort([3, 1, 2]))
    c = PlaybackController(array=[3, 1, 2])
    c.start_step_by_step(producer)

    assert c.state is ControllerState.PAUSED
    assert c.has_active_producer
    assert pulled == []


def test_toggle_pause_when_idle_is_a_no_op():
    c = PlaybackController()
    assert c.toggle_pause() is True
    assert c.state is ControllerState.IDLE


def test_toggle_pause_flips_between_running_and_paused():
    c = PlaybackController()
    c.start_step_by_step(bubble_sort([2, 1]))
    assert c.toggle_pause() is False
    assert c.state is ControllerState.RUNNING
    assert c.toggle_pause() is True
    assert c.state is ControllerState.PAUSED


# ---------------------------------------------------------------------------
# Stepping and history
# ---------------------------------------------------------------------------
def test_forward_back_forward_replays_without_pulling_again():
    producer, pulled = counted(bubble_sort(list(SAMPLE)))
    c = PlaybackController(array=SAMPLE)
    c.start_step_by_step(producer)

    c.step_forward()
    c.step_forward()
    first = c.current
    assert c.step_backward() is True
    assert c.history_index == 0
    assert c.step_forward() is True

    assert c.current == first
    assert c.snapshot() == first
    assert len(pulled) == 2
    assert len(c.history) == 2


def test_step_backward_stops_at_first_entry():
    c = PlaybackController(array=[2, 1])
    c.start_step_by_step(bubble_sort([2, 1]))
    c.step_forward()
    assert not c.can_step_back
    assert c.step_backward() is False
    assert c.history_index == 0

    c.step_forward()
    assert c.can_step_back


def test_trace_only_steps_keep_the_array_but_republish_highlights():
    arr = [1, 3, 5, 7, 9]
    c = PlaybackController(array=arr)
    c.start_step_by_step(binary_search(list(arr), 9))

    seen = []
    while c.step_forward():
        seen.append((c.active_line, list(c.comparing)))
        assert c.array == arr

    assert any(comparing for _, comparing in seen)
    after_compare = [s for s in seen if s[0] == 5]
    assert after_compare and all(comparing == [] for _, comparing in after_compare)


def test_found_is_published_and_survives_exhaustion():
    arr = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25]
    c = PlaybackController(array=arr)
    c.start_step_by_step(binary_search(list(arr), 13))
    drain(c)
    assert c.found == 6


def test_exhaustion_resets_highlights_pauses_and_keeps_history():
    c = PlaybackController(array=SAMPLE)
    c.start_step_by_step(bubble_sort(list(SAMPLE)))
    drain(c)

    assert c.state is ControllerState.IDLE
    assert c.is_paused
    assert not c.has_active_producer
    assert c.active_line == 0
    assert c.comparing == []
    assert c.array == sorted(SAMPLE)
    assert len(c.history) > 0
    assert c.history_index == len(c.history) - 1

    assert c.step_forward() is False
    assert c.step_backward() is True
    assert c.step_forward() is True


def test_stop_clears_history_but_keeps_array_and_grid():
    grid = Grid(2, 2)
    c = PlaybackController(array=SAMPLE, grid=grid)
    c.start_step_by_step(bubble_sort(list(SAMPLE)))
    for _ in range(10):
        c.step_forward()
    published = list(c.array)

    c.stop()
    assert c.state is ControllerState.IDLE
    assert c.history == [] and c.history_index == -1
    assert c.active_line == 0 and c.comparing == [] and c.found is None
    assert c.array == published
    assert c.grid is grid
    assert c.step_forward() is False


def test_goto_jumps_within_history():
    c = PlaybackController(array=SAMPLE)
    c.start_step_by_step(bubble_sort(list(SAMPLE)))
    for _ in range(5):
        c.step_forward()
    target = c.history[1]

    assert c.goto(1) is True
    assert c.current == target
    assert c.goto(99) is False
    assert c.history_index == 1


def test_history_entries_do_not_share_the_published_array():
    c = PlaybackController(array=[2, 1])
    c.start_step_by_step(bubble_sort([2, 1]))
    drain(c)
    c.array.append(99)
    assert 99 not in c.history[-1].array


def test_on_step_fires_for_pulls_and_replays():
    published = []
    c = PlaybackController(array=[2, 1], on_step=published.append)
    c.start_step_by_step(bubble_sort([2, 1]))
    c.step_forward()
    c.step_forward()
    c.step_backward()
    assert len(published) == 3
    assert published[-1] == c.history[0]


def test_grid_steps_publish_the_grid():
    grid = Grid(3, 3)
    c = PlaybackController(grid=grid)
    c.start_step_by_step(dijkstra(grid.prepared(), (0, 0), (2, 2)))
    drain(c)

    assert c.grid is not grid
    assert c.grid.node(2, 2).is_path

    c.goto(0)
    assert c.grid is grid


def test_producer_errors_propagate_and_drop_the_producer():
    def broken():
        yield Step(line=1)
        raise RuntimeError("boom")

    c = PlaybackController()
    c.start_step_by_step(broken())
    assert c.step_forward() is True
    with pytest.raises(RuntimeError):
        c.step_forward()
    assert not c.has_active_producer


# ---------------------------------------------------------------------------
# Speed
# ---------------------------------------------------------------------------
def test_speed_settings():
    c = PlaybackController()
    c.set_speed(250)
    assert c.speed_ms == 250
    c.set_speed(-5)
    assert c.speed_ms == 0
    c.set_speed_preset("turbo")
    assert c.speed_ms == 50
    with pytest.raises(ValueError):
        c.set_speed_preset("ludicrous")


def test_tick_paces_steps_by_speed():
    c = PlaybackController(array=SAMPLE, speed_ms=100)
    c.start_step_by_step(bubble_sort(list(SAMPLE)))
    assert c.tick() is False

    c.toggle_pause()
    t0 = time.monotonic()
    assert c.tick(now=t0 + 0.2) is True
    assert c.tick(now=t0 + 0.25) is False
    assert c.tick(now=t0 + 0.35) is True
    assert len(c.history) == 2


# ---------------------------------------------------------------------------
# Continuous run loop
# ---------------------------------------------------------------------------
def test_run_drives_producer_to_completion():
    arr = list(SAMPLE)
    c = PlaybackController(array=SAMPLE, speed_ms=0)

    finished = asyncio.run(c.run(quick_sort(arr)))

    assert finished is True
    assert c.array == sorted(SAMPLE)
    assert c.state is ControllerState.IDLE
    assert len(c.history) == len(list(quick_sort(list(SAMPLE))))


def test_pause_and_resume_gives_the_same_result_as_an_uninterrupted_run():
    reference = PlaybackController(array=SAMPLE, speed_ms=0)
    asyncio.run(reference.run(quick_sort(list(SAMPLE))))

    async def interrupted():
        c = PlaybackController(array=SAMPLE, speed_ms=0)
        task = asyncio.create_task(c.run(quick_sort(list(SAMPLE))))
        for _ in range(5):
            await asyncio.sleep(0)
        c.toggle_pause()
        paused_at = len(c.history)
        await asyncio.sleep(PAUSE_POLL_SECONDS * 3)
        assert len(c.history) == paused_at
        c.toggle_pause()
        return c, await task

    c, finished = asyncio.run(interrupted())
    assert finished is True
    assert c.array == reference.array == sorted(SAMPLE)
    assert c.history == reference.history


def test_run_with_the_attached_producer_resumes_instead_of_restarting():
    async def scenario():
        c = PlaybackController(array=SAMPLE, speed_ms=0)
        producer, pulled = counted(bubble_sort(list(SAMPLE)))
        task = asyncio.create_task(c.run(producer))
        await asyncio.sleep(0)
        await asyncio.sleep(0)
        c.toggle_pause()
        again = await c.run(producer)
        assert again is False
        assert not c.is_paused
        return c, pulled, await task

    c, pulled, finished = asyncio.run(scenario())
    assert finished is True
    assert len(pulled) == len(c.history)
    assert c.array == sorted(SAMPLE)


def test_run_continues_from_the_step_by_step_cursor():
    producer, pulled = counted(bubble_sort(list(SAMPLE)))
    c = PlaybackController(array=SAMPLE, speed_ms=0)
    c.start_step_by_step(producer)
    for _ in range(3):
        c.step_forward()
    c.step_backward()

    assert asyncio.run(c.run(producer)) is True
    assert len(pulled) == len(c.history) == len(list(bubble_sort(list(SAMPLE))))


def test_run_on_an_exhausted_producer_keeps_its_history():
    producer, pulled = counted(bubble_sort(list(SAMPLE)))
    c = PlaybackController(array=SAMPLE, speed_ms=0)
    c.start_step_by_step(producer)
    drain(c)
    history, index = list(c.history), c.history_index

    assert asyncio.run(c.run(producer)) is False
    c.start_step_by_step(producer)

    assert c.history == history
    assert c.history_index == index
    assert c.state is ControllerState.IDLE
    assert len(pulled) == len(history)


def test_stop_forgets_the_exhausted_producer():
    c = PlaybackController(array=[2, 1], speed_ms=0)
    producer = bubble_sort([2, 1])
    c.start_step_by_step(producer)
    drain(c)
    c.stop()

    assert asyncio.run(c.run(producer)) is True
    assert c.history == []


def test_stop_cancels_a_running_loop_within_one_interval():
    async def scenario():
        c = PlaybackController(array=SAMPLE, speed_ms=10)
        task = asyncio.create_task(c.run(bubble_sort(list(SAMPLE))))
        await asyncio.sleep(0.035)
        c.stop()
        result = await asyncio.wait_for(task, timeout=1)
        return c, result

    c, result = asyncio.run(scenario())
    assert result is False
    assert c.history == []
    assert c.state is ControllerState.IDLE
    assert sorted(c.array) == sorted(SAMPLE)


def test_stop_cancels_a_paused_loop():
    async def scenario():
        c = PlaybackController(array=SAMPLE, speed_ms=0)
        task = asyncio.create_task(c.run(bubble_sort(list(SAMPLE))))
        await asyncio.sleep(0)
        c.toggle_pause()
        await asyncio.sleep(PAUSE_POLL_SECONDS)
        c.stop()
        return await asyncio.wait_for(task, timeout=1)

    assert asyncio.run(scenario()) is False


def test_running_a_new_producer_replaces_the_old_run():
    async def scenario():
        c = PlaybackController(array=SAMPLE, speed_ms=5)
        first = asyncio.create_task(c.run(bubble_sort(list(SAMPLE))))
        await asyncio.sleep(0.02)
        c.load_array([3, 2, 1])
        second = await c.run(selection_sort([3, 2, 1]))
        return c, await first, second

    c, first, second = asyncio.run(scenario())
    assert first is False
    assert second is True
    assert c.array == [1, 2, 3]
