from __future__ import annotations

from typing import Any, Callable

import pygame

from .. import windowing
from ..colors import BACKGROUND
from ..config import save_config
from ..input_utils import (
    ClickTarget,
    ClickableMap,
    CommonAction,
    InputHelper,
    InputSnapshot,
    MouseUiGuard,
)
from ..localization import translate as tr
from ..localization import translate_list
from ..render import LayoutCursor, draw_focus, draw_header, draw_tab_bar
from ..screen_constants import CONTENT_PADDING, HEADER_HEIGHT, SCROLL_STEP
from ..windowing import (
    nudge_window_scale,
    present,
    sync_window_size,
    toggle_fullscreen,
)
from . import ScreenContext

BACK_TARGET = "back"
TAB_BAR_HEIGHT = 40


class ScreenRunner:
    """Event loop shared by every screen.

    Subclasses draw their content with ``draw_content`` and react to
    activated targets in ``activate``. Click targets are registered again on
    every frame, so whatever was drawn last frame is what the mouse and the
    keyboard focus can reach.

    ``run`` returns False when the window was closed and True once the screen
    has handed control back through one of its navigation callbacks.
    """

    header_height = HEADER_HEIGHT

    def __init__(self, context: ScreenContext) -> None:
        self.context = context
        self.screen = context.screen
        self.clock = context.clock
        self.fps = context.fps
        self.config = context.config
        self.width, self.height = self.screen.get_size()

        self.input_helper = InputHelper()
        self.mouse_ui_guard = MouseUiGuard()
        self.click_map = ClickableMap()

        self.focus: Any | None = None
        self.scroll = 0
        self.content_height = 0
        self.finished = False
        self._content_rects: dict[Any, pygame.Rect] = {}
        self._scroll_to_focus = False

    # --- loop ---
    def run(self) -> bool:
        while not self.finished:
            events = pygame.event.get()
            for event in events:
                if event.type == pygame.QUIT:
                    return False
                if event.type in (pygame.WINDOWSIZECHANGED, pygame.VIDEORESIZE):
                    sync_window_size(event)
                self.mouse_ui_guard.handle_focus_event(event)

            snapshot = self.input_helper.snapshot(events, include_text=self.text_active)
            self.handle_snapshot(snapshot)
            if self.finished:
                break

            now = pygame.time.get_ticks()
            self.update(now)
            self.render(now)
            present(self.screen)
            self.clock.tick(self.fps)
            self.mouse_ui_guard.end_frame()
        return True

    def finish(self, callback: Callable[..., Any], *args: Any) -> None:
        """Hand control back through a navigation callback."""
        callback(*args)
        self.finished = True

    # --- input ---
    @property
    def text_active(self) -> bool:
        return False

    def handle_snapshot(self, snapshot: InputSnapshot) -> None:
        if snapshot.pressed(CommonAction.ZOOM_OUT):
            self.zoom_window(0.5)
        if snapshot.pressed(CommonAction.ZOOM_IN):
            self.zoom_window(2.0)
        if snapshot.pressed(CommonAction.FULLSCREEN):
            toggle_fullscreen()
        if snapshot.scroll:
            self.scroll_by(snapshot.scroll * SCROLL_STEP)

        if self.mouse_ui_guard.can_process_mouse():
            if snapshot.hover_pos is not None:
                hover_target = self.click_map.pick_hover(snapshot.hover_pos)
                if hover_target is not None:
                    self.focus = hover_target
            for pos in snapshot.clicks:
                target_id = self.click_map.pick_click(pos)
                if target_id is None:
                    self.on_blank_click()
                    continue
                self.focus = target_id
                self.activate(target_id)
                if self.finished:
                    return

        if snapshot.pressed(CommonAction.BACK):
            self.on_back_pressed()
            if self.finished:
                return
        if snapshot.pressed(CommonAction.UP):
            self.move_focus(-1)
        if snapshot.pressed(CommonAction.DOWN) or snapshot.pressed(CommonAction.NEXT):
            self.move_focus(1)
        if snapshot.pressed(CommonAction.LEFT):
            self.on_horizontal(-1)
        if snapshot.pressed(CommonAction.RIGHT):
            self.on_horizontal(1)
        if self.text_active and (snapshot.text_input or snapshot.pressed(CommonAction.ERASE)):
            self.on_text(snapshot.text_input, erase=snapshot.pressed(CommonAction.ERASE))
        if snapshot.pressed(CommonAction.CONFIRM) and self.focus is not None:
            if self.focus in self.click_map.enabled_ids():
                self.activate(self.focus)

    def zoom_window(self, multiplier: float) -> None:
        """Resize the window and remember the new scale for the next launch."""
        nudge_window_scale(multiplier)
        window = self.config.get("window")
        if not isinstance(window, dict):
            window = self.config["window"] = {}
        window["scale"] = windowing.current_window_scale
        save_config(self.config, self.context.config_path)

    def activate(self, target_id: Any) -> None:
        pass

    def on_back_pressed(self) -> None:
        pass

    def on_blank_click(self) -> None:
        pass

    def on_horizontal(self, direction: int) -> None:
        pass

    def on_text(self, text: str, *, erase: bool) -> None:
        pass

    def move_focus(self, delta: int) -> None:
        ids = self.click_map.enabled_ids()
        if not ids:
            return
        if self.focus not in ids:
            idx = 0 if delta > 0 else len(ids) - 1
        else:
            idx = (ids.index(self.focus) + delta) % len(ids)
        self.focus = ids[idx]
        self._scroll_to_focus = True

    def scroll_by(self, amount: int) -> None:
        self.scroll = self._clamp_scroll(self.scroll + amount)

    def _clamp_scroll(self, value: int) -> int:
        visible = self.height - self.header_height
        limit = max(0, self.content_height - visible)
        return max(0, min(limit, value))

    # --- frame ---
    def update(self, now: int) -> None:
        pass

    @property
    def content_rect(self) -> pygame.Rect:
        return pygame.Rect(0, self.header_height, self.width, self.height - self.header_height)

    def render(self, now: int) -> None:
        self.screen.fill(BACKGROUND)
        viewport = self.content_rect
        content_targets: list[ClickTarget] = []
        cursor = LayoutCursor(
            x=CONTENT_PADDING,
            y=viewport.top + CONTENT_PADDING - self.scroll,
            width=self.width - CONTENT_PADDING * 2,
        )
        self.screen.set_clip(viewport)
        self.draw_content(cursor, content_targets, now)
        self.screen.set_clip(None)
        self.content_height = cursor.y + self.scroll - viewport.top + CONTENT_PADDING

        self._content_rects = {target.target_id: target.rect for target in content_targets}
        # Content scrolled under the header must not take clicks.
        visible_targets = [
            ClickTarget(target.target_id, target.rect.clip(viewport), target.enabled)
            for target in content_targets
        ]
        chrome_targets: list[ClickTarget] = []
        self.draw_chrome(chrome_targets, now)
        self.click_map.set_targets(visible_targets + chrome_targets)

        if self.focus is not None and self.focus not in self.click_map.enabled_ids():
            self.focus = None
        if self._scroll_to_focus:
            self._scroll_to_focus = False
            self._reveal_focus()
        if self.focus is not None:
            rect = self.click_map.rect_for(self.focus)
            if rect is not None and rect.width and rect.height:
                draw_focus(self.screen, rect)

    def _reveal_focus(self) -> None:
        rect = self._content_rects.get(self.focus)
        if rect is None:
            return
        viewport = self.content_rect
        if rect.top < viewport.top:
            self.scroll = self._clamp_scroll(self.scroll - (viewport.top - rect.top) - CONTENT_PADDING)
        elif rect.bottom > viewport.bottom:
            self.scroll = self._clamp_scroll(
                self.scroll + (rect.bottom - viewport.bottom) + CONTENT_PADDING
            )

    def draw_content(
        self, cursor: LayoutCursor, targets: list[ClickTarget], now: int
    ) -> None:
        raise NotImplementedError

    def draw_chrome(self, targets: list[ClickTarget], now: int) -> None:
        """Draw fixed elements over the scrolled content."""


class DetailScreenRunner(ScreenRunner):
    """A screen opened from the dashboard; it can only go back."""

    title_key = ""
    subtitle_key: str | None = None
    tabs_key: str | None = None

    def __init__(self, context: ScreenContext, *, on_back: Callable[[], Any]) -> None:
        super().__init__(context)
        self.on_back = on_back
        self.active_tab = 0

    @property
    def tab_labels(self) -> list[str]:
        if self.tabs_key is None:
            return []
        return [str(label) for label in translate_list(self.tabs_key)]

    def select_tab(self, index: int) -> None:
        labels = self.tab_labels
        if not labels:
            return
        index %= len(labels)
        if index != self.active_tab:
            self.active_tab = index
            self.scroll = 0

    def on_back_pressed(self) -> None:
        self.finish(self.on_back)

    def on_horizontal(self, direction: int) -> None:
        if self.tab_labels and not self.text_active:
            self.select_tab(self.active_tab + direction)

    def activate(self, target_id: Any) -> None:
        if target_id == BACK_TARGET:
            self.finish(self.on_back)
            return
        if isinstance(target_id, tuple) and target_id[0] == "tab":
            self.select_tab(target_id[1])
            return
        self.activate_content(target_id)

    def activate_content(self, target_id: Any) -> None:
        pass

    def draw_tabs(self, cursor: LayoutCursor, targets: list[ClickTarget]) -> None:
        labels = self.tab_labels
        rect = cursor.take(TAB_BAR_HEIGHT, gap=14)
        for idx, tab_rect in enumerate(draw_tab_bar(self.screen, rect, labels, self.active_tab)):
            targets.append(ClickTarget(("tab", idx), tab_rect))

    def draw_chrome(self, targets: list[ClickTarget], now: int) -> None:
        subtitle = tr(self.subtitle_key) if self.subtitle_key else None
        back_rect = draw_header(self.screen, tr(self.title_key), subtitle, self.header_height)
        targets.append(ClickTarget(BACK_TARGET, back_rect))


__all__ = ["BACK_TARGET", "DetailScreenRunner", "ScreenRunner"]
