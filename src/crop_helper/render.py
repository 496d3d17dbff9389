from __future__ import annotations

import math
from dataclasses import dataclass

import pygame
from pygame import surface

from .colors import (
    BORDER,
    CARD,
    DESTRUCTIVE,
    FOCUS_RING,
    FOREGROUND,
    GRAY,
    MUTED,
    MUTED_FOREGROUND,
    PRIMARY,
    PRIMARY_FOREGROUND,
    RAIN_BLUE,
    SECONDARY,
    SECONDARY_FOREGROUND,
    STAR_EMPTY,
    STAR_YELLOW,
    WHITE,
    WARN_YELLOW,
)
from .font_utils import load_font
from .localization import get_font_settings
from .models import Sky

BADGE_COLORS: dict[str, tuple[tuple[int, int, int], tuple[int, int, int]]] = {
    "default": (PRIMARY, PRIMARY_FOREGROUND),
    "secondary": (SECONDARY, SECONDARY_FOREGROUND),
    "destructive": (DESTRUCTIVE, WHITE),
    "outline": (CARD, FOREGROUND),
}


def severity_badge_variant(level: str) -> str:
    """Badge variant for a priority or severity label (any case)."""
    normalized = level.strip().lower()
    if normalized == "high":
        return "destructive"
    if normalized == "medium":
        return "secondary"
    return "outline"


@dataclass
class LayoutCursor:
    """Stacks blocks top to bottom inside a fixed-width column."""

    x: int
    y: int
    width: int

    def take(self, height: int, *, gap: int = 10) -> pygame.Rect:
        rect = pygame.Rect(self.x, self.y, self.width, max(0, height))
        self.y += rect.height + gap
        return rect

    def space(self, amount: int) -> None:
        self.y += amount


def get_font(size: int, *, bold: bool = False) -> pygame.font.Font:
    font_settings = get_font_settings()
    return load_font(font_settings.resource, font_settings.scaled_size(size), bold=bold)


def draw_text(
    screen: surface.Surface,
    text: str,
    size: int,
    color: tuple[int, int, int],
    position: tuple[int, int],
    *,
    anchor: str = "topleft",
    bold: bool = False,
) -> pygame.Rect:
    try:
        text_surface = get_font(size, bold=bold).render(text, True, color)
        text_rect = text_surface.get_rect(**{anchor: position})
        screen.blit(text_surface, text_rect)
        return text_rect
    except pygame.error as e:
        print(f"Error rendering font or surface: {e}")
        return pygame.Rect(position, (0, 0))


def _wrap_long_segment(
    segment: str, font: pygame.font.Font, max_width: int
) -> list[str]:
    lines: list[str] = []
    current = ""
    for char in segment:
        candidate = current + char
        if font.size(candidate)[0] <= max_width or not current:
            current = candidate
        else:
            lines.append(current)
            current = char
    if current:
        lines.append(current)
    return lines


def wrap_text(text: str, font: pygame.font.Font, max_width: int) -> list[str]:
    if max_width <= 0:
        return [text]
    paragraphs = text.splitlines() or [text]
    lines: list[str] = []
    for paragraph in paragraphs:
        if not paragraph:
            lines.append("")
            continue
        current = ""
        for word in paragraph.split(" "):
            candidate = f"{current} {word}".strip() if current else word
            if font.size(candidate)[0] <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
            if font.size(word)[0] <= max_width:
                current = word
            else:
                pieces = _wrap_long_segment(word, font, max_width)
                lines.extend(pieces[:-1])
                current = pieces[-1] if pieces else ""
        if current:
            lines.append(current)
    return lines


def text_block_height(text: str, size: int, max_width: int, *, bold: bool = False) -> int:
    font = get_font(size, bold=bold)
    return max(1, len(wrap_text(text, font, max_width))) * font.get_linesize()


def blit_text_wrapped(
    screen: surface.Surface,
    text: str,
    size: int,
    color: tuple[int, int, int],
    topleft: tuple[int, int],
    max_width: int,
    *,
    bold: bool = False,
    center: bool = False,
) -> int:
    """Draw word-wrapped text and return the height it used."""
    font = get_font(size, bold=bold)
    line_height = font.get_linesize()
    x, y = topleft
    lines = wrap_text(text, font, max_width)
    try:
        for idx, line in enumerate(lines):
            line_surface = font.render(line, True, color)
            if center:
                rect = line_surface.get_rect(midtop=(x + max_width // 2, y + idx * line_height))
            else:
                rect = line_surface.get_rect(topleft=(x, y + idx * line_height))
            screen.blit(line_surface, rect)
    except pygame.error as e:
        print(f"Error rendering font or surface: {e}")
    return max(1, len(lines)) * line_height


def draw_card(
    screen: surface.Surface,
    rect: pygame.Rect,
    *,
    fill: tuple[int, int, int] = CARD,
    border: tuple[int, int, int] = BORDER,
    radius: int = 10,
    accent: tuple[int, int, int] | None = None,
) -> pygame.Rect:
    """Draw a rounded card; returns the padded inner rect."""
    pygame.draw.rect(screen, fill, rect, border_radius=radius)
    pygame.draw.rect(screen, border, rect, width=1, border_radius=radius)
    if accent is not None:
        pygame.draw.rect(
            screen,
            accent,
            pygame.Rect(rect.x, rect.y, 4, rect.height),
            border_top_left_radius=radius,
            border_bottom_left_radius=radius,
        )
    return rect.inflate(-24, -20)


def draw_button(
    screen: surface.Surface,
    rect: pygame.Rect,
    label: str,
    *,
    variant: str = "default",
    enabled: bool = True,
    size: int = 15,
) -> None:
    if variant == "default":
        fill, text_color, border = PRIMARY, PRIMARY_FOREGROUND, PRIMARY
    elif variant == "destructive":
        fill, text_color, border = DESTRUCTIVE, WHITE, DESTRUCTIVE
    else:
        fill, text_color, border = CARD, FOREGROUND, BORDER
    if not enabled:
        fill, text_color, border = MUTED, GRAY, BORDER
    pygame.draw.rect(screen, fill, rect, border_radius=8)
    pygame.draw.rect(screen, border, rect, width=1, border_radius=8)
    draw_text(screen, label, size, text_color, rect.center, anchor="center", bold=True)


def draw_badge(
    screen: surface.Surface,
    text: str,
    position: tuple[int, int],
    *,
    variant: str = "default",
    anchor: str = "topleft",
    size: int = 11,
) -> pygame.Rect:
    fill, text_color = BADGE_COLORS.get(variant, BADGE_COLORS["outline"])
    font = get_font(size, bold=True)
    width, height = font.size(text)
    rect = pygame.Rect(0, 0, width + 12, height + 4)
    setattr(rect, anchor, position)
    pygame.draw.rect(screen, fill, rect, border_radius=rect.height // 2)
    if variant == "outline":
        pygame.draw.rect(screen, BORDER, rect, width=1, border_radius=rect.height // 2)
    draw_text(screen, text, size, text_color, rect.center, anchor="center", bold=True)
    return rect


def draw_progress(
    screen: surface.Surface,
    rect: pygame.Rect,
    fraction: float,
    color: tuple[int, int, int],
) -> None:
    pygame.draw.rect(screen, MUTED, rect, border_radius=rect.height // 2)
    filled = rect.copy()
    filled.width = int(rect.width * max(0.0, min(1.0, fraction)))
    if filled.width > 0:
        pygame.draw.rect(screen, color, filled, border_radius=rect.height // 2)


def draw_tab_bar(
    screen: surface.Surface,
    rect: pygame.Rect,
    labels: list[str],
    active_index: int,
) -> list[pygame.Rect]:
    pygame.draw.rect(screen, MUTED, rect, border_radius=8)
    if not labels:
        return []
    tab_width = rect.width // len(labels)
    rects: list[pygame.Rect] = []
    for idx, label in enumerate(labels):
        tab_rect = pygame.Rect(rect.x + idx * tab_width, rect.y, tab_width, rect.height)
        inner = tab_rect.inflate(-6, -6)
        if idx == active_index:
            pygame.draw.rect(screen, CARD, inner, border_radius=6)
            color = FOREGROUND
        else:
            color = MUTED_FOREGROUND
        draw_text(screen, label, 13, color, inner.center, anchor="center", bold=idx == active_index)
        rects.append(tab_rect)
    return rects


def draw_header(
    screen: surface.Surface,
    title: str,
    subtitle: str | None,
    height: int,
) -> pygame.Rect:
    """Draw the green title bar; returns the back button rect."""
    bar = pygame.Rect(0, 0, screen.get_width(), height)
    pygame.draw.rect(screen, PRIMARY, bar)
    back_rect = pygame.Rect(8, (height - 36) // 2, 36, 36)
    cx, cy = back_rect.center
    pygame.draw.lines(
        screen,
        PRIMARY_FOREGROUND,
        False,
        [(cx + 5, cy - 8), (cx - 4, cy), (cx + 5, cy + 8)],
        3,
    )
    text_x = back_rect.right + 8
    if subtitle:
        draw_text(screen, title, 19, PRIMARY_FOREGROUND, (text_x, height // 2 - 2), anchor="bottomleft", bold=True)
        draw_text(screen, subtitle, 12, PRIMARY_FOREGROUND, (text_x, height // 2 + 2))
    else:
        draw_text(screen, title, 19, PRIMARY_FOREGROUND, (text_x, height // 2), anchor="midleft", bold=True)
    return back_rect


def draw_focus(screen: surface.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(screen, FOCUS_RING, rect.inflate(4, 4), width=2, border_radius=9)


def draw_stars(
    screen: surface.Surface,
    origin: tuple[int, int],
    rating: int,
    *,
    count: int = 5,
    size: int = 34,
    gap: int = 10,
) -> list[pygame.Rect]:
    rects: list[pygame.Rect] = []
    x, y = origin
    for idx in range(count):
        rect = pygame.Rect(x + idx * (size + gap), y, size, size)
        color = STAR_YELLOW if idx < rating else STAR_EMPTY
        pygame.draw.polygon(screen, color, _star_points(rect))
        rects.append(rect)
    return rects


def _star_points(rect: pygame.Rect) -> list[tuple[float, float]]:
    cx, cy = rect.center
    outer = rect.width / 2
    inner = outer * 0.45
    points: list[tuple[float, float]] = []
    for idx in range(10):
        radius = outer if idx % 2 == 0 else inner
        angle = -math.pi / 2 + idx * math.pi / 5
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


def draw_sky_icon(
    screen: surface.Surface,
    sky: Sky,
    center: tuple[int, int],
    radius: int = 10,
) -> None:
    cx, cy = center
    if sky is Sky.SUNNY:
        pygame.draw.circle(screen, WARN_YELLOW, center, radius)
        return
    cloud_color = (160, 170, 180)
    pygame.draw.circle(screen, cloud_color, (cx - radius // 2, cy), radius * 2 // 3)
    pygame.draw.circle(screen, cloud_color, (cx + radius // 2, cy - 2), radius * 3 // 4)
    pygame.draw.rect(
        screen, cloud_color, pygame.Rect(cx - radius, cy, radius * 2, radius // 2 + 2)
    )
    if sky is Sky.RAIN:
        for offset in (-radius // 2, 0, radius // 2):
            pygame.draw.line(
                screen,
                RAIN_BLUE,
                (cx + offset, cy + radius // 2 + 4),
                (cx + offset - 2, cy + radius // 2 + 9),
                2,
            )
