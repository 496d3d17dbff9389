from __future__ import annotations

from contextlib import contextmanager
from importlib import resources
from pathlib import Path
from typing import Iterator

import pygame

_FONT_CACHE: dict[tuple[str | None, int, bool], pygame.font.Font] = {}


@contextmanager
def _resource_path(resource: str | None) -> Iterator[Path | None]:
    if not resource:
        yield None
        return

    try:
        font = resources.files("crop_helper")
        for part in Path(resource).parts:
            font = font.joinpath(part)
        with resources.as_file(font) as path:
            yield path
    except (FileNotFoundError, ModuleNotFoundError):
        yield None


def load_font(resource: str | None, size: int, *, bold: bool = False) -> pygame.font.Font:
    """Load and cache a pygame font for the given resource, size and weight."""
    normalized_size = max(1, int(size))
    cache_key = (resource, normalized_size, bold)
    cached = _FONT_CACHE.get(cache_key)
    if cached is not None:
        return cached

    if not pygame.font.get_init():
        pygame.font.init()
    with _resource_path(resource) as path:
        font = pygame.font.Font(str(path) if path else None, normalized_size)
    font.set_bold(bold)

    _FONT_CACHE[cache_key] = font
    return font


def clear_font_cache() -> None:
    _FONT_CACHE.clear()
