import pygame

from crop_helper.input_utils import (
    ClickTarget,
    ClickableMap,
    CommonAction,
    InputHelper,
    MouseUiGuard,
)


def _key(key: int, text: str = "") -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=text)


def test_keyboard_events_map_to_actions() -> None:
    snapshot = InputHelper().snapshot(
        [_key(pygame.K_RETURN), _key(pygame.K_ESCAPE), _key(pygame.K_TAB)]
    )

    assert snapshot.pressed(CommonAction.CONFIRM)
    assert snapshot.pressed(CommonAction.BACK)
    assert snapshot.pressed(CommonAction.NEXT)
    assert not snapshot.pressed(CommonAction.UP)


def test_text_is_only_collected_when_requested() -> None:
    events = [_key(pygame.K_w, "w"), _key(pygame.K_h, "h")]

    assert InputHelper().snapshot(events).text_input == ""
    assert InputHelper().snapshot(events, include_text=True).text_input == "wh"


def test_action_keys_are_not_typed_as_text() -> None:
    snapshot = InputHelper().snapshot(
        [_key(pygame.K_BACKSPACE, "\b"), _key(pygame.K_a, "a")],
        include_text=True,
    )

    assert snapshot.pressed(CommonAction.ERASE)
    assert snapshot.text_input == "a"


def test_brackets_zoom_unless_typing() -> None:
    events = [_key(pygame.K_LEFTBRACKET, "["), _key(pygame.K_RIGHTBRACKET, "]")]

    zoom = InputHelper().snapshot(events)
    typed = InputHelper().snapshot(events, include_text=True)

    assert zoom.pressed(CommonAction.ZOOM_OUT)
    assert zoom.pressed(CommonAction.ZOOM_IN)
    assert typed.text_input == "[]"
    assert not typed.actions


def test_mouse_clicks_and_wheel() -> None:
    events = [
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 20)),
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(30, 40)),
        pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=2),
        pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 6), rel=(0, 0), buttons=(0, 0, 0)),
    ]

    snapshot = InputHelper().snapshot(events)

    assert snapshot.clicks == ((10, 20),)
    assert snapshot.scroll == -2
    assert snapshot.hover_pos == (5, 6)


def test_clickable_map_prefers_topmost_enabled_target() -> None:
    click_map = ClickableMap()
    click_map.set_targets(
        [
            ClickTarget("card", pygame.Rect(0, 0, 100, 100)),
            ClickTarget("menu", pygame.Rect(50, 50, 100, 100)),
            ClickTarget("disabled", pygame.Rect(0, 0, 200, 200), enabled=False),
        ]
    )

    assert click_map.pick_click((60, 60)) == "menu"
    assert click_map.pick_click((10, 10)) == "card"
    assert click_map.pick_click((180, 180)) is None
    assert click_map.enabled_ids() == ["card", "menu"]
    assert click_map.rect_for("menu") == pygame.Rect(50, 50, 100, 100)
    assert click_map.rect_for("missing") is None


def test_mouse_guard_skips_one_frame_after_focus_gain() -> None:
    guard = MouseUiGuard()
    assert guard.can_process_mouse()

    guard.handle_focus_event(pygame.event.Event(pygame.WINDOWFOCUSGAINED))
    assert not guard.can_process_mouse()

    guard.end_frame()
    assert guard.can_process_mouse()
