import pytest

from crop_helper.timers import SimulatedTask


def test_task_completes_once_after_delay() -> None:
    task = SimulatedTask(3000)

    assert task.start(1000)
    assert task.running
    assert not task.poll(3999)
    assert task.poll(4000)
    assert not task.running
    assert task.completed
    assert not task.poll(5000)


def test_task_cannot_restart_while_running() -> None:
    task = SimulatedTask(3000)
    task.start(0)

    assert not task.start(100)
    assert task.started_at == 0


def test_task_restarts_after_completion() -> None:
    task = SimulatedTask(10)
    task.start(0)
    task.poll(10)

    assert task.start(50)
    assert task.running
    assert not task.completed


def test_progress_is_clamped() -> None:
    task = SimulatedTask(1000)
    assert task.progress(0) == 0.0

    task.start(100)
    assert task.progress(600) == pytest.approx(0.5)
    assert task.progress(50) == 0.0
    assert task.progress(5000) == 1.0


def test_zero_duration_finishes_on_first_poll() -> None:
    task = SimulatedTask(0)
    task.start(7)

    assert task.progress(7) == 1.0
    assert task.poll(7)


def test_reset_clears_state() -> None:
    task = SimulatedTask(100)
    task.start(0)
    task.reset()

    assert not task.running
    assert task.started_at is None
    assert not task.poll(1000)
