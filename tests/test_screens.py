from __future__ import annotations

import json
from copy import deepcopy
from pathlib import Path
from typing import Any

import pygame
import pytest

from crop_helper import windowing
from crop_helper.config import DEFAULT_CONFIG
from crop_helper.crop_helper import SCREEN_RUNNERS, build_screen_runner
from crop_helper.input_utils import CommonAction, InputSnapshot
from crop_helper.localization import set_language
from crop_helper.navigation import NavigationController
from crop_helper.screens import ScreenContext, ScreenID
from crop_helper.screens import base
from crop_helper.screens.base import BACK_TARGET
from crop_helper.screens.dashboard import MENU_TARGET, language_label
from crop_helper.screens.feedback import SUBMIT_TARGET, TEXT_TARGET
from crop_helper.screens.onboarding import CONTINUE_TARGET
from crop_helper.screens.pest_detection import TAKE_PHOTO_TARGET
from crop_helper.screens.pricing import LOCATION_TARGET, SEARCH_TARGET


@pytest.fixture(autouse=True)
def _pygame_fonts() -> Any:
    pygame.font.init()
    set_language("en")
    yield


@pytest.fixture()
def context(tmp_path: Path) -> ScreenContext:
    return ScreenContext(
        screen=pygame.Surface((360, 640)),
        clock=pygame.time.Clock(),
        config=deepcopy(DEFAULT_CONFIG),
        fps=30,
        config_path=tmp_path / "config.json",
    )


def _controller_at(screen_id: ScreenID) -> NavigationController:
    controller = NavigationController()
    if screen_id is not ScreenID.ONBOARDING:
        controller.complete_onboarding()
    if screen_id not in (ScreenID.ONBOARDING, ScreenID.DASHBOARD):
        controller.navigate(screen_id)
    return controller


def _click(runner: Any, target_id: Any) -> None:
    """Scroll ``target_id`` into view the way keyboard focus does, then click it."""
    runner.focus = target_id
    runner._scroll_to_focus = True
    runner.render(0)
    runner.render(0)
    rect = runner.click_map.rect_for(target_id)
    assert rect is not None, f"{target_id!r} was not drawn"
    assert rect.width and rect.height, f"{target_id!r} is off screen"
    runner.handle_snapshot(InputSnapshot(clicks=(rect.center,)))


def _topmost_rect(runner: Any, target_id: Any) -> Any:
    matches = [t.rect for t in runner.click_map.targets if t.target_id == target_id]
    assert matches, f"{target_id!r} was not drawn"
    return matches[-1]


def test_every_screen_has_a_runner() -> None:
    assert set(SCREEN_RUNNERS) == set(ScreenID)


@pytest.mark.parametrize("screen_id", list(ScreenID))
def test_every_screen_renders(screen_id: ScreenID, context: ScreenContext) -> None:
    controller = _controller_at(screen_id)
    runner = build_screen_runner(screen_id, controller, context)

    runner.render(0)

    assert runner.click_map.targets
    assert runner.content_height > 0


@pytest.mark.parametrize(
    "screen_id",
    [ScreenID.SOIL_HEALTH, ScreenID.WEATHER, ScreenID.PRICING, ScreenID.FEEDBACK],
)
def test_every_tab_renders(screen_id: ScreenID, context: ScreenContext) -> None:
    runner: Any = build_screen_runner(screen_id, _controller_at(screen_id), context)

    for index in range(len(runner.tab_labels)):
        runner.select_tab(index)
        runner.render(0)
        assert runner.active_tab == index
        assert runner.click_map.rect_for(("tab", index)) is not None


@pytest.mark.parametrize(
    "screen_id",
    [
        ScreenID.SOIL_HEALTH,
        ScreenID.PEST_DETECTION,
        ScreenID.WEATHER,
        ScreenID.PRICING,
        ScreenID.FEEDBACK,
    ],
)
def test_detail_back_button_returns_to_dashboard(
    screen_id: ScreenID, context: ScreenContext
) -> None:
    controller = _controller_at(screen_id)
    runner = build_screen_runner(screen_id, controller, context)
    runner.render(0)

    _click(runner, BACK_TARGET)

    assert runner.finished
    assert controller.current is ScreenID.DASHBOARD


def test_escape_on_detail_screen_goes_back(context: ScreenContext) -> None:
    controller = _controller_at(ScreenID.WEATHER)
    runner = build_screen_runner(ScreenID.WEATHER, controller, context)
    runner.render(0)

    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.BACK})))

    assert runner.finished
    assert controller.current is ScreenID.DASHBOARD


def test_onboarding_continue_needs_a_language(context: ScreenContext) -> None:
    controller = NavigationController()
    runner: Any = build_screen_runner(ScreenID.ONBOARDING, controller, context)
    runner.render(0)

    runner.activate(CONTINUE_TARGET)
    assert not runner.finished
    assert controller.current is ScreenID.ONBOARDING

    _click(runner, ("language", "ta"))
    runner.render(0)
    _click(runner, CONTINUE_TARGET)

    assert runner.finished
    assert controller.current is ScreenID.DASHBOARD
    saved = json.loads(context.config_path.read_text(encoding="utf-8"))
    assert saved["language"] == "ta"


def test_onboarding_ignores_unknown_language(context: ScreenContext) -> None:
    runner: Any = build_screen_runner(ScreenID.ONBOARDING, NavigationController(), context)

    runner.activate(("language", "xx"))

    assert runner.state.selected is None


def test_dashboard_opens_detail_screens(context: ScreenContext) -> None:
    controller = _controller_at(ScreenID.DASHBOARD)
    runner = build_screen_runner(ScreenID.DASHBOARD, controller, context)
    runner.render(0)

    _click(runner, ("open", ScreenID.WEATHER))

    assert runner.finished
    assert controller.current is ScreenID.WEATHER


def test_dashboard_quick_action_uses_string_target(context: ScreenContext) -> None:
    controller = _controller_at(ScreenID.DASHBOARD)
    runner = build_screen_runner(ScreenID.DASHBOARD, controller, context)
    runner.render(0)

    _click(runner, ("open", "pest-detection"))

    assert controller.current is ScreenID.PEST_DETECTION


def test_dashboard_menu_lists_destinations(context: ScreenContext) -> None:
    controller = _controller_at(ScreenID.DASHBOARD)
    runner: Any = build_screen_runner(ScreenID.DASHBOARD, controller, context)
    runner.render(0)

    _click(runner, MENU_TARGET)
    runner.render(0)
    assert runner.state.menu_open

    # The menu row sits on top of the content button with the same target.
    rect = _topmost_rect(runner, ("open", ScreenID.FEEDBACK))
    runner.handle_snapshot(InputSnapshot(clicks=(rect.center,)))
    assert not runner.state.menu_open
    assert controller.current is ScreenID.FEEDBACK


def test_dashboard_escape_closes_menu(context: ScreenContext) -> None:
    runner: Any = build_screen_runner(
        ScreenID.DASHBOARD, _controller_at(ScreenID.DASHBOARD), context
    )
    runner.state.menu_open = True

    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.BACK})))

    assert not runner.state.menu_open
    assert not runner.finished


def test_dashboard_rejects_invalid_target(
    context: ScreenContext, capsys: pytest.CaptureFixture[str]
) -> None:
    controller = _controller_at(ScreenID.DASHBOARD)
    runner = build_screen_runner(ScreenID.DASHBOARD, controller, context)

    runner.activate(("open", "market"))

    assert not runner.finished
    assert controller.current is ScreenID.DASHBOARD
    assert "Navigation rejected" in capsys.readouterr().out


def test_dashboard_keyboard_focus_activates(context: ScreenContext) -> None:
    controller = _controller_at(ScreenID.DASHBOARD)
    runner = build_screen_runner(ScreenID.DASHBOARD, controller, context)
    runner.render(0)

    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.DOWN})))
    assert runner.focus is not None
    runner.focus = ("open", ScreenID.PRICING)
    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.CONFIRM})))

    assert controller.current is ScreenID.PRICING


def test_pest_detection_take_photo_starts_analysis(context: ScreenContext) -> None:
    runner: Any = build_screen_runner(
        ScreenID.PEST_DETECTION, _controller_at(ScreenID.PEST_DETECTION), context
    )
    runner.render(0)

    _click(runner, TAKE_PHOTO_TARGET)
    assert runner.state.analyzing
    runner.render(0)

    runner.update(runner.state.task.started_at + runner.state.task.duration_ms)
    runner.render(0)
    assert runner.state.result is not None


def test_pricing_search_typing_filters(context: ScreenContext) -> None:
    runner: Any = build_screen_runner(
        ScreenID.PRICING, _controller_at(ScreenID.PRICING), context
    )
    runner.render(0)

    _click(runner, SEARCH_TARGET)
    assert runner.text_active
    runner.handle_snapshot(InputSnapshot(text_input="zzz"))
    runner.render(0)
    assert runner.state.filtered_prices() == []

    # Escape leaves the search field before leaving the screen.
    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.BACK})))
    assert not runner.text_active
    assert not runner.finished


def test_pricing_location_cycles_on_click(context: ScreenContext) -> None:
    runner: Any = build_screen_runner(
        ScreenID.PRICING, _controller_at(ScreenID.PRICING), context
    )
    runner.render(0)

    _click(runner, LOCATION_TARGET)

    assert runner.state.location.name == "Haryana"


def test_feedback_submit_shows_thanks(context: ScreenContext) -> None:
    runner: Any = build_screen_runner(
        ScreenID.FEEDBACK, _controller_at(ScreenID.FEEDBACK), context
    )
    runner.render(0)

    _click(runner, ("star", 4))
    assert runner.state.rating == 4

    _click(runner, TEXT_TARGET)
    assert runner.text_active
    runner.handle_snapshot(InputSnapshot(text_input="Good"))
    assert runner.state.text == "Good"

    runner.render(0)
    _click(runner, SUBMIT_TARGET)
    assert runner.state.showing_thanks
    runner.render(0)


def test_feedback_tab_keys_move_between_tabs(context: ScreenContext) -> None:
    runner: Any = build_screen_runner(
        ScreenID.FEEDBACK, _controller_at(ScreenID.FEEDBACK), context
    )

    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.RIGHT})))
    assert runner.active_tab == 1
    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.LEFT})))
    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.LEFT})))
    assert runner.active_tab == 2


def test_hover_moves_focus_without_activating(context: ScreenContext) -> None:
    controller = _controller_at(ScreenID.DASHBOARD)
    runner = build_screen_runner(ScreenID.DASHBOARD, controller, context)
    runner.render(0)
    rect = runner.click_map.rect_for(MENU_TARGET)
    assert rect is not None

    runner.handle_snapshot(InputSnapshot(hover_pos=rect.center))

    assert runner.focus == MENU_TARGET
    assert not runner.finished
    assert controller.current is ScreenID.DASHBOARD


def test_hover_over_blank_space_keeps_focus(context: ScreenContext) -> None:
    runner = build_screen_runner(
        ScreenID.WEATHER, _controller_at(ScreenID.WEATHER), context
    )
    runner.render(0)
    runner.focus = BACK_TARGET

    runner.handle_snapshot(InputSnapshot(hover_pos=(-10, -10)))

    assert runner.focus == BACK_TARGET


def test_zoom_keys_save_window_scale(
    context: ScreenContext, monkeypatch: pytest.MonkeyPatch
) -> None:
    def fake_nudge(multiplier: float) -> None:
        windowing.current_window_scale = windowing.clamp_window_scale(
            windowing.current_window_scale * multiplier
        )

    monkeypatch.setattr(windowing, "current_window_scale", 1.0)
    monkeypatch.setattr(base, "nudge_window_scale", fake_nudge)
    runner = build_screen_runner(
        ScreenID.WEATHER, _controller_at(ScreenID.WEATHER), context
    )

    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.ZOOM_IN})))
    saved = json.loads(context.config_path.read_text(encoding="utf-8"))
    assert saved["window"]["scale"] == 2.0

    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.ZOOM_OUT})))
    runner.handle_snapshot(InputSnapshot(actions=frozenset({CommonAction.ZOOM_OUT})))
    saved = json.loads(context.config_path.read_text(encoding="utf-8"))
    assert saved["window"]["scale"] == 0.5
    assert context.config["window"]["scale"] == 0.5
    assert saved["language"] == "en"


def test_language_label_names_known_codes() -> None:
    assert language_label("en") == "English"
    assert language_label("ta") == "Tamil"
    assert language_label("xx") == "xx"


def test_dashboard_shows_chosen_language(context: ScreenContext) -> None:
    set_language("kn")
    runner: Any = build_screen_runner(
        ScreenID.DASHBOARD, _controller_at(ScreenID.DASHBOARD), context
    )

    runner.render(0)

    assert runner.language_name == "Kannada"


def test_feedback_quick_buttons_are_decorative(context: ScreenContext) -> None:
    runner: Any = build_screen_runner(
        ScreenID.FEEDBACK, _controller_at(ScreenID.FEEDBACK), context
    )
    runner.render(0)

    assert "thumbs-up" not in runner.click_map.enabled_ids()
    assert "thumbs-down" not in runner.click_map.enabled_ids()
    assert runner.state.rating == 0
