"""Screen and window related constants."""

from __future__ import annotations

SCREEN_WIDTH = 360  # Logical phone-portrait render width
SCREEN_HEIGHT = 640  # Logical phone-portrait render height
DEFAULT_WINDOW_SCALE = 1.0
WINDOW_SCALE_MIN = 0.5
WINDOW_SCALE_MAX = 2.0
FPS = 30
HEADER_HEIGHT = 64
CONTENT_PADDING = 14
SCROLL_STEP = 40
WINDOW_CAPTION = "AI Crop Helper"

__all__ = [
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
    "DEFAULT_WINDOW_SCALE",
    "WINDOW_SCALE_MIN",
    "WINDOW_SCALE_MAX",
    "FPS",
    "HEADER_HEIGHT",
    "CONTENT_PADDING",
    "SCROLL_STEP",
    "WINDOW_CAPTION",
]
