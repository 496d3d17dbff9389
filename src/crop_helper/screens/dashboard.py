from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import pygame

from ..colors import (
    BAD_RED,
    BORDER,
    CARD,
    FOREGROUND,
    GOOD_GREEN,
    MUTED,
    MUTED_FOREGROUND,
    PRIMARY,
    PRIMARY_FOREGROUND,
    WARN_YELLOW,
)
from ..input_utils import ClickTarget
from ..localization import get_language
from ..localization import translate as tr
from ..models import CropRecommendation, Priority, Sky
from ..navigation import InvalidScreenIdentifier
from ..render import (
    LayoutCursor,
    draw_badge,
    draw_button,
    draw_card,
    draw_progress,
    draw_sky_icon,
    draw_text,
    severity_badge_variant,
)
from ..sample_data import (
    CROP_RECOMMENDATIONS,
    DASHBOARD_ALERTS,
    DASHBOARD_CONDITION,
    DASHBOARD_HIGH_LOW,
    DASHBOARD_HUMIDITY,
    DASHBOARD_TEMPERATURE,
    LANGUAGES,
    PRICE_SUMMARY,
    QUICK_ACTIONS,
)
from . import ScreenContext, ScreenID
from .base import ScreenRunner

MENU_TARGET = "menu"
MENU_PANEL_TARGET = "menu-panel"

# Destination menu entries, in display order.
MENU_ENTRIES: tuple[tuple[ScreenID, str], ...] = (
    (ScreenID.PEST_DETECTION, "screens.pest_detection"),
    (ScreenID.SOIL_HEALTH, "screens.soil_health"),
    (ScreenID.WEATHER, "screens.weather"),
    (ScreenID.PRICING, "screens.pricing"),
    (ScreenID.FEEDBACK, "screens.feedback"),
)

QUICK_ACTION_COLORS = (BAD_RED, GOOD_GREEN, PRIMARY, WARN_YELLOW)


def language_label(code: str) -> str:
    """English name of a language code, or the code itself when unknown."""
    for option in LANGUAGES:
        if option.code == code:
            return option.name
    return code


def recommendation_badge_variant(recommendation: CropRecommendation) -> str:
    status = recommendation.status.strip().lower()
    if status == "optimal":
        return "default"
    if status == "good":
        return "secondary"
    return "outline"


@dataclass
class DashboardState:
    menu_open: bool = False

    def toggle_menu(self) -> bool:
        self.menu_open = not self.menu_open
        return self.menu_open


class DashboardScreenRunner(ScreenRunner):
    def __init__(
        self,
        context: ScreenContext,
        *,
        on_navigate: Callable[[ScreenID | str], Any],
    ) -> None:
        super().__init__(context)
        self.on_navigate = on_navigate
        self.state = DashboardState()
        profile = self.config.get("profile")
        name = profile.get("farmer_name") if isinstance(profile, dict) else None
        self.farmer_name = str(name) if name else "Farmer"
        self.language_name = language_label(get_language())

    def open_screen(self, target: ScreenID | str) -> None:
        self.state.menu_open = False
        try:
            self.finish(self.on_navigate, target)
        except InvalidScreenIdentifier as exc:
            print(f"Navigation rejected: {exc}")

    def activate(self, target_id: Any) -> None:
        if target_id == MENU_TARGET:
            self.state.toggle_menu()
            return
        if isinstance(target_id, tuple) and target_id[0] == "open":
            self.open_screen(target_id[1])

    def on_back_pressed(self) -> None:
        self.state.menu_open = False

    def on_blank_click(self) -> None:
        self.state.menu_open = False

    # --- drawing ---
    def draw_content(
        self, cursor: LayoutCursor, targets: list[ClickTarget], now: int
    ) -> None:
        self._draw_weather(cursor, targets)
        self._draw_alerts(cursor)
        self._draw_quick_actions(cursor, targets)
        self._draw_recommendations(cursor)
        self._draw_prices(cursor, targets)

        half = (cursor.width - 10) // 2
        row = cursor.take(46)
        help_rect = pygame.Rect(row.x, row.y, half, row.height)
        soil_rect = pygame.Rect(row.right - half, row.y, half, row.height)
        draw_button(self.screen, help_rect, tr("dashboard.help_feedback"), variant="outline", size=14)
        draw_button(self.screen, soil_rect, tr("dashboard.soil_guide"), variant="outline", size=14)
        targets.append(ClickTarget(("open", ScreenID.FEEDBACK), help_rect))
        targets.append(ClickTarget(("open", ScreenID.SOIL_HEALTH), soil_rect))

    def _section_title(self, cursor: LayoutCursor, key: str) -> None:
        draw_text(self.screen, tr(key), 17, FOREGROUND, (cursor.x, cursor.y), bold=True)
        cursor.space(28)

    def _draw_weather(self, cursor: LayoutCursor, targets: list[ClickTarget]) -> None:
        rect = cursor.take(104, gap=14)
        inner = draw_card(self.screen, rect)
        draw_text(self.screen, tr("dashboard.weather_title"), 14, MUTED_FOREGROUND, (inner.x, inner.y))
        draw_text(
            self.screen,
            tr("dashboard.temperature", value=DASHBOARD_TEMPERATURE),
            30,
            FOREGROUND,
            (inner.x, inner.y + 20),
            bold=True,
        )
        draw_text(self.screen, DASHBOARD_CONDITION, 14, FOREGROUND, (inner.x, inner.y + 56))
        high, low = DASHBOARD_HIGH_LOW
        draw_text(
            self.screen,
            tr("dashboard.humidity", value=f"{DASHBOARD_HUMIDITY}%"),
            13,
            MUTED_FOREGROUND,
            (inner.right, inner.y + 36),
            anchor="topright",
        )
        draw_text(
            self.screen,
            tr("dashboard.high_low", high=high, low=low),
            13,
            MUTED_FOREGROUND,
            (inner.right, inner.y + 56),
            anchor="topright",
        )
        draw_sky_icon(self.screen, Sky.CLOUDY, (inner.right - 16, inner.y + 12), 12)
        targets.append(ClickTarget(("open", ScreenID.WEATHER), rect))

    def _draw_alerts(self, cursor: LayoutCursor) -> None:
        self._section_title(cursor, "dashboard.alerts_title")
        for alert in DASHBOARD_ALERTS:
            accent = BAD_RED if alert.priority is Priority.HIGH else WARN_YELLOW
            inner = draw_card(self.screen, cursor.take(56, gap=8), accent=accent)
            draw_text(self.screen, alert.message, 13, FOREGROUND, (inner.x + 4, inner.y + 18))
            draw_badge(
                self.screen,
                tr(f"common.priority.{alert.priority.value}"),
                (inner.x + 4, inner.y - 4),
                variant=severity_badge_variant(alert.priority.value),
                size=10,
            )
        cursor.space(6)

    def _draw_quick_actions(self, cursor: LayoutCursor, targets: list[ClickTarget]) -> None:
        self._section_title(cursor, "dashboard.quick_actions")
        gap = 10
        tile_width = (cursor.width - gap) // 2
        tile_height = 84
        block = cursor.take(tile_height * 2 + gap, gap=16)
        for idx, action in enumerate(QUICK_ACTIONS):
            col, row = idx % 2, idx // 2
            tile = pygame.Rect(
                block.x + col * (tile_width + gap),
                block.y + row * (tile_height + gap),
                tile_width,
                tile_height,
            )
            inner = draw_card(self.screen, tile)
            color = QUICK_ACTION_COLORS[idx % len(QUICK_ACTION_COLORS)]
            pygame.draw.circle(self.screen, color, (inner.x + 12, inner.y + 12), 12)
            draw_text(self.screen, action.title, 14, FOREGROUND, (inner.x, inner.y + 30), bold=True)
            draw_text(self.screen, action.subtitle, 11, MUTED_FOREGROUND, (inner.x, inner.y + 50))
            targets.append(ClickTarget(("open", action.target), tile))

    def _draw_recommendations(self, cursor: LayoutCursor) -> None:
        self._section_title(cursor, "dashboard.recommendations_title")
        for recommendation in CROP_RECOMMENDATIONS:
            inner = draw_card(self.screen, cursor.take(86, gap=8))
            draw_text(self.screen, recommendation.crop, 15, FOREGROUND, (inner.x, inner.y), bold=True)
            draw_badge(
                self.screen,
                recommendation.status,
                (inner.right, inner.y),
                variant=recommendation_badge_variant(recommendation),
                anchor="topright",
            )
            draw_text(self.screen, recommendation.reason, 12, MUTED_FOREGROUND, (inner.x, inner.y + 22))
            draw_text(
                self.screen,
                tr("dashboard.confidence", value=f"{recommendation.confidence}%"),
                11,
                MUTED_FOREGROUND,
                (inner.x, inner.y + 40),
            )
            bar = pygame.Rect(inner.x + 120, inner.y + 43, inner.width - 120, 8)
            draw_progress(self.screen, bar, recommendation.confidence / 100, PRIMARY)
        cursor.space(6)

    def _draw_prices(self, cursor: LayoutCursor, targets: list[ClickTarget]) -> None:
        self._section_title(cursor, "dashboard.prices_title")
        rows = len(PRICE_SUMMARY)
        rect = cursor.take(20 + rows * 40 + 50, gap=14)
        inner = draw_card(self.screen, rect)
        y = inner.y
        for summary in PRICE_SUMMARY:
            draw_text(self.screen, summary.crop, 15, FOREGROUND, (inner.x, y), bold=True)
            draw_text(
                self.screen,
                tr("common.price_per_unit", price=f"{summary.price:,}", unit="quintal"),
                12,
                MUTED_FOREGROUND,
                (inner.x, y + 19),
            )
            color = GOOD_GREEN if summary.change >= 0 else BAD_RED
            draw_text(self.screen, f"{summary.change:+.1f}%", 14, color, (inner.right, y + 8), anchor="topright", bold=True)
            y += 40
        button_rect = pygame.Rect(inner.x, y + 4, inner.width, 40)
        draw_button(self.screen, button_rect, tr("dashboard.view_all"), size=14)
        targets.append(ClickTarget(("open", ScreenID.PRICING), button_rect))

    def draw_chrome(self, targets: list[ClickTarget], now: int) -> None:
        bar = pygame.Rect(0, 0, self.width, self.header_height)
        pygame.draw.rect(self.screen, PRIMARY, bar)
        draw_text(self.screen, tr("dashboard.greeting"), 13, PRIMARY_FOREGROUND, (16, 14))
        draw_text(self.screen, self.farmer_name, 20, PRIMARY_FOREGROUND, (16, 32), bold=True)

        menu_rect = pygame.Rect(self.width - 52, (self.header_height - 40) // 2, 40, 40)
        draw_text(
            self.screen,
            self.language_name,
            12,
            PRIMARY_FOREGROUND,
            (menu_rect.x - 8, menu_rect.centery),
            anchor="midright",
        )
        for offset in (-8, 0, 8):
            y = menu_rect.centery + offset
            pygame.draw.line(self.screen, PRIMARY_FOREGROUND, (menu_rect.x + 10, y), (menu_rect.right - 10, y), 3)
        targets.append(ClickTarget(MENU_TARGET, menu_rect))

        if self.state.menu_open:
            self._draw_menu(targets)

    def _draw_menu(self, targets: list[ClickTarget]) -> None:
        item_height = 42
        panel = pygame.Rect(
            self.width - 214,
            self.header_height + 4,
            200,
            32 + item_height * len(MENU_ENTRIES),
        )
        pygame.draw.rect(self.screen, CARD, panel, border_radius=10)
        pygame.draw.rect(self.screen, BORDER, panel, width=1, border_radius=10)
        targets.append(ClickTarget(MENU_PANEL_TARGET, panel))
        draw_text(self.screen, tr("dashboard.menu_title"), 12, MUTED_FOREGROUND, (panel.x + 14, panel.y + 10))
        for idx, (screen_id, label_key) in enumerate(MENU_ENTRIES):
            row = pygame.Rect(panel.x + 6, panel.y + 30 + idx * item_height, panel.width - 12, item_height - 4)
            pygame.draw.rect(self.screen, MUTED, row, border_radius=6)
            draw_text(self.screen, tr(label_key), 14, FOREGROUND, (row.x + 10, row.centery), anchor="midleft")
            targets.append(ClickTarget(("open", screen_id), row))


__all__ = ["DashboardScreenRunner", "DashboardState", "MENU_ENTRIES"]
