from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Iterable

import pygame


class CommonAction(Enum):
    CONFIRM = auto()
    BACK = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    NEXT = auto()
    ERASE = auto()
    ZOOM_OUT = auto()
    ZOOM_IN = auto()
    FULLSCREEN = auto()


@dataclass(frozen=True)
class InputSnapshot:
    actions: frozenset[CommonAction] = frozenset()
    text_input: str = ""
    clicks: tuple[tuple[int, int], ...] = ()
    scroll: int = 0
    hover_pos: tuple[int, int] | None = None

    def pressed(self, action: CommonAction) -> bool:
        return action in self.actions


@dataclass(frozen=True)
class ClickTarget:
    target_id: Any
    rect: pygame.Rect
    enabled: bool = True


class ClickableMap:
    """Simple rect-based target map for hover/click selection."""

    def __init__(self) -> None:
        self._targets: list[ClickTarget] = []

    def set_targets(self, targets: Iterable[ClickTarget]) -> None:
        self._targets = list(targets)

    @property
    def targets(self) -> list[ClickTarget]:
        return list(self._targets)

    def enabled_ids(self) -> list[Any]:
        return [target.target_id for target in self._targets if target.enabled]

    def rect_for(self, target_id: Any) -> pygame.Rect | None:
        for target in self._targets:
            if target.target_id == target_id:
                return target.rect
        return None

    def pick_hover(self, pos: tuple[int, int]) -> Any | None:
        # Later targets are drawn on top (menus, overlays).
        for target in reversed(self._targets):
            if target.enabled and target.rect.collidepoint(pos):
                return target.target_id
        return None

    def pick_click(self, pos: tuple[int, int]) -> Any | None:
        return self.pick_hover(pos)


class MouseUiGuard:
    """Focus-aware mouse gate with one-frame suppression after focus regain."""

    def __init__(self, *, regain_guard_frames: int = 1) -> None:
        self._regain_guard_frames = max(0, int(regain_guard_frames))
        self._guard_frames = 0

    def handle_focus_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.WINDOWFOCUSGAINED:
            self._guard_frames = self._regain_guard_frames

    def can_process_mouse(self) -> bool:
        return self._guard_frames == 0

    def end_frame(self) -> None:
        if self._guard_frames > 0:
            self._guard_frames -= 1


class InputHelper:
    """Normalize keyboard and mouse input into action-based snapshots."""

    _KEYBOARD_ACTION_KEYS: dict[CommonAction, tuple[int, ...]] = {
        CommonAction.CONFIRM: (pygame.K_RETURN, pygame.K_KP_ENTER),
        CommonAction.BACK: (pygame.K_ESCAPE,),
        CommonAction.UP: (pygame.K_UP,),
        CommonAction.DOWN: (pygame.K_DOWN,),
        CommonAction.LEFT: (pygame.K_LEFT,),
        CommonAction.RIGHT: (pygame.K_RIGHT,),
        CommonAction.NEXT: (pygame.K_TAB,),
        CommonAction.ERASE: (pygame.K_BACKSPACE,),
        CommonAction.FULLSCREEN: (pygame.K_F11,),
    }
    # Window zoom keys would swallow typed brackets, so they only count
    # when no text field is active.
    _ZOOM_KEYS: dict[int, CommonAction] = {
        pygame.K_LEFTBRACKET: CommonAction.ZOOM_OUT,
        pygame.K_RIGHTBRACKET: CommonAction.ZOOM_IN,
    }

    def snapshot(
        self,
        events: Iterable[pygame.event.Event],
        *,
        include_text: bool = False,
    ) -> InputSnapshot:
        actions: set[CommonAction] = set()
        text_parts: list[str] = []
        clicks: list[tuple[int, int]] = []
        scroll = 0
        hover_pos: tuple[int, int] | None = None

        for event in events:
            if event.type == pygame.KEYDOWN:
                key = int(event.key)
                if not include_text and key in self._ZOOM_KEYS:
                    actions.add(self._ZOOM_KEYS[key])
                    continue
                matched = self._mark_keyboard_action(actions, key)
                if include_text and not matched:
                    text = getattr(event, "unicode", "")
                    if text and text.isprintable():
                        text_parts.append(text)
                continue
            if event.type == pygame.MOUSEBUTTONDOWN:
                # Wheel motion arrives separately as MOUSEWHEEL.
                if getattr(event, "button", 1) == 1:
                    clicks.append(tuple(event.pos))
                continue
            if event.type == pygame.MOUSEWHEEL:
                scroll -= int(getattr(event, "y", 0))
                continue
            if event.type == pygame.MOUSEMOTION:
                hover_pos = tuple(event.pos)

        return InputSnapshot(
            actions=frozenset(actions),
            text_input="".join(text_parts),
            clicks=tuple(clicks),
            scroll=scroll,
            hover_pos=hover_pos,
        )

    def _mark_keyboard_action(self, target: set[CommonAction], key: int) -> bool:
        matched = False
        for action, action_keys in self._KEYBOARD_ACTION_KEYS.items():
            if key in action_keys:
                target.add(action)
                matched = True
        return matched
