from crop_helper.sample_data import SIMULATED_ANALYSIS
from crop_helper.screens.pest_detection import PestDetectionState
from crop_helper.timers import SimulatedTask


def test_initial_state_shows_capture_options() -> None:
    state = PestDetectionState()

    assert not state.image_selected
    assert not state.analyzing
    assert state.result is None
    assert state.task.duration_ms == 3000


def test_analysis_reports_fixed_result_after_delay() -> None:
    state = PestDetectionState(task=SimulatedTask(3000))

    assert state.start_analysis(500, "camera")
    assert state.image_selected
    assert state.analyzing
    assert state.source == "camera"

    assert not state.update(3499)
    assert state.result is None

    assert state.update(3500)
    assert not state.analyzing
    assert state.result == SIMULATED_ANALYSIS
    assert state.result.pest == "Aphids"
    assert state.result.confidence == 92


def test_second_start_while_analyzing_is_ignored() -> None:
    state = PestDetectionState(task=SimulatedTask(3000))
    state.start_analysis(0, "camera")

    assert not state.start_analysis(100, "gallery")
    assert state.source == "camera"
    assert state.task.started_at == 0


def test_reset_is_refused_while_analyzing() -> None:
    state = PestDetectionState(task=SimulatedTask(3000))
    state.start_analysis(0, "gallery")

    assert not state.reset()
    assert state.image_selected
    assert state.analyzing


def test_analyze_another_returns_to_capture() -> None:
    state = PestDetectionState(task=SimulatedTask(10))
    state.start_analysis(0, "gallery")
    state.update(10)

    assert state.reset()
    assert not state.image_selected
    assert state.result is None
    assert state.source is None

    assert state.start_analysis(20, "camera")
    assert state.update(30)
    assert state.result == SIMULATED_ANALYSIS
