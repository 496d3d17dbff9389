"""Window and presentation helpers for crop_helper."""

from __future__ import annotations

import pygame
from pygame import surface

from .screen_constants import (
    DEFAULT_WINDOW_SCALE,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WINDOW_CAPTION,
    WINDOW_SCALE_MAX,
    WINDOW_SCALE_MIN,
)

current_window_scale = DEFAULT_WINDOW_SCALE  # Applied to the OS window only
current_fullscreen = False
current_window_size = (
    int(SCREEN_WIDTH * DEFAULT_WINDOW_SCALE),
    int(SCREEN_HEIGHT * DEFAULT_WINDOW_SCALE),
)
last_logged_window_size = current_window_size

__all__ = [
    "present",
    "apply_window_scale",
    "clamp_window_scale",
    "nudge_window_scale",
    "toggle_fullscreen",
    "sync_window_size",
]


def present(logical_surface: surface.Surface) -> None:
    """Scale the logical surface to the window and flip buffers."""
    window = pygame.display.get_surface()
    if window is None:
        return
    logical_size = logical_surface.get_size()
    target_size = window.get_size()
    if _use_scaled_display() or logical_size == target_size:
        if window is not logical_surface:
            window.blit(logical_surface, (0, 0))
    else:
        # Preserve aspect ratio with letterboxing.
        scale = min(
            target_size[0] / max(1, logical_size[0]),
            target_size[1] / max(1, logical_size[1]),
        )
        scaled_width = max(1, int(logical_size[0] * scale))
        scaled_height = max(1, int(logical_size[1] * scale))
        window.fill((0, 0, 0))
        scaled_surface = pygame.transform.smoothscale(
            logical_surface, (scaled_width, scaled_height)
        )
        offset_x = (target_size[0] - scaled_width) // 2
        offset_y = (target_size[1] - scaled_height) // 2
        window.blit(scaled_surface, (offset_x, offset_y))
    pygame.display.flip()


def clamp_window_scale(scale: float) -> float:
    try:
        value = float(scale)
    except (TypeError, ValueError):
        value = DEFAULT_WINDOW_SCALE
    return max(WINDOW_SCALE_MIN, min(WINDOW_SCALE_MAX, value))


def apply_window_scale(scale: float) -> surface.Surface:
    """Resize the OS window; the logical render size stays constant."""
    global current_window_scale, current_fullscreen

    current_window_scale = clamp_window_scale(scale)
    current_fullscreen = False
    window_size = (
        max(1, int(SCREEN_WIDTH * current_window_scale)),
        max(1, int(SCREEN_HEIGHT * current_window_scale)),
    )

    flags = pygame.RESIZABLE
    if _use_scaled_display():
        flags |= pygame.SCALED
        window = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)
        _set_window_size(window_size)
    else:
        window = pygame.display.set_mode(window_size, flags)
    _update_window_size(window_size, source="apply_scale")
    pygame.display.set_caption(WINDOW_CAPTION)
    return window


def nudge_window_scale(multiplier: float) -> surface.Surface:
    """Scale the window relative to the current zoom level."""
    return apply_window_scale(current_window_scale * multiplier)


def toggle_fullscreen() -> None:
    """Toggle fullscreen without persisting the setting."""
    global current_fullscreen
    try:
        pygame.display.toggle_fullscreen()
    except pygame.error as exc:
        print(f"Fullscreen toggle failed: {exc}")
        return
    current_fullscreen = not current_fullscreen
    window = pygame.display.get_surface()
    if window is not None:
        _update_window_size(_fetch_window_size(window), source="toggle_fullscreen")


def sync_window_size(event: pygame.event.Event) -> None:
    """Synchronize tracked window size and scale with SDL window events."""
    global current_window_scale
    size = getattr(event, "size", None)
    if not size:
        width = getattr(event, "x", None)
        height = getattr(event, "y", None)
        if width is not None and height is not None:
            size = (width, height)
    if not size:
        return
    window_width = max(1, int(size[0]))
    window_height = max(1, int(size[1]))
    _update_window_size((window_width, window_height), source="window_event")
    if not current_fullscreen:
        current_window_scale = clamp_window_scale(
            min(window_width / SCREEN_WIDTH, window_height / SCREEN_HEIGHT)
        )


def _fetch_window_size(window: surface.Surface | None) -> tuple[int, int]:
    if hasattr(pygame.display, "get_window_size"):
        size = pygame.display.get_window_size()
        if size != (0, 0):
            return max(1, int(size[0])), max(1, int(size[1]))
    if window is not None:
        width, height = window.get_size()
        return max(1, width), max(1, height)
    return current_window_size


def _set_window_size(size: tuple[int, int]) -> None:
    setter = getattr(pygame.display, "set_window_size", None)
    if callable(setter):
        try:
            setter(size)
            return
        except pygame.error:
            pass
    try:
        from pygame import _sdl2 as sdl2  # type: ignore[import-not-found]
    except ImportError:
        return
    try:
        window = sdl2.Window.from_display_module()
        window.size = size
    except (pygame.error, AttributeError):
        return


def _use_scaled_display() -> bool:
    return hasattr(pygame, "SCALED")


def _update_window_size(size: tuple[int, int], *, source: str) -> None:
    global current_window_size, last_logged_window_size
    current_window_size = size
    if size != last_logged_window_size:
        print(f"WINDOW_SIZE {source}={size[0]}x{size[1]}")
        last_logged_window_size = size
