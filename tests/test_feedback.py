import importlib

import pytest

import crop_helper.localization as localization_module
from crop_helper.screens.feedback import (
    VOICE_RECORDED_SUFFIX,
    FeedbackState,
    rating_label,
)
from crop_helper.timers import SimulatedTask


@pytest.fixture()
def state() -> FeedbackState:
    return FeedbackState(recording=SimulatedTask(3000), banner=SimulatedTask(2000))


def test_submit_needs_text_or_rating(state: FeedbackState) -> None:
    assert not state.can_submit
    assert not state.submit(0)

    state.type_text("   ")
    assert not state.can_submit

    state.set_rating(3)
    assert state.can_submit


def test_text_alone_enables_submit(state: FeedbackState) -> None:
    state.type_text("Great app")

    assert state.can_submit
    assert state.submit(0)
    assert state.showing_thanks


def test_rating_is_clamped(state: FeedbackState) -> None:
    assert state.set_rating(9) == 5
    assert state.set_rating(-2) == 0
    assert state.set_rating(4) == 4


def test_erase_removes_last_character(state: FeedbackState) -> None:
    state.type_text("ok")
    state.erase()
    state.erase()
    state.erase()

    assert state.text == ""


def test_recording_appends_confirmation_after_delay(state: FeedbackState) -> None:
    state.type_text("Pump broke.")

    assert state.start_recording(1000)
    assert state.is_recording
    assert not state.start_recording(1500)

    state.update(3999)
    assert state.text == "Pump broke."

    state.update(4000)
    assert not state.is_recording
    assert state.text == "Pump broke." + VOICE_RECORDED_SUFFIX

    state.update(9000)
    assert state.text.count(VOICE_RECORDED_SUFFIX.strip()) == 1


def test_recording_alone_makes_feedback_submittable(state: FeedbackState) -> None:
    state.start_recording(0)
    state.update(3000)

    assert state.can_submit


def test_banner_clears_form_when_it_expires(state: FeedbackState) -> None:
    state.type_text("Nice")
    state.set_rating(5)
    state.text_active = True

    assert state.submit(100)
    assert not state.text_active
    assert not state.submit(200)

    state.update(2099)
    assert state.showing_thanks
    assert state.text == "Nice"

    state.update(2100)
    assert not state.showing_thanks
    assert state.text == ""
    assert state.rating == 0


def test_faq_toggles_independently(state: FeedbackState) -> None:
    assert state.toggle_faq(0)
    assert state.toggle_faq(2)
    assert state.open_faqs == {0, 2}

    assert not state.toggle_faq(0)
    assert state.open_faqs == {2}


def test_rating_label_matches_rating() -> None:
    importlib.reload(localization_module).set_language("en")

    assert rating_label(0) == "Tap stars to rate"
    assert rating_label(1) == "Poor - Needs improvement"
    assert rating_label(5) == "Excellent - Loved it!"
    assert rating_label(12) == "Excellent - Loved it!"
