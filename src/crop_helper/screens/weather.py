from __future__ import annotations

import pygame

from ..colors import (
    BAD_RED,
    DESTRUCTIVE,
    FOREGROUND,
    GOOD_GREEN,
    MUTED,
    MUTED_FOREGROUND,
    PRIMARY,
    PRIMARY_FOREGROUND,
    RAIN_BLUE,
    WARN_YELLOW,
)
from ..input_utils import ClickTarget
from ..localization import translate as tr
from ..models import Priority, Sky
from ..render import (
    LayoutCursor,
    blit_text_wrapped,
    draw_badge,
    draw_button,
    draw_card,
    draw_sky_icon,
    draw_text,
    severity_badge_variant,
    text_block_height,
)
from ..sample_data import (
    CURRENT_WEATHER,
    FARMING_ADVICE,
    HOURLY_FORECAST,
    WEATHER_ALERTS,
    WEEKLY_FORECAST,
)
from .base import DetailScreenRunner

TODAY_TAB = 0
WEEK_TAB = 1

RAIN_CHANCE_COLORS = {
    "low": GOOD_GREEN,
    "medium": WARN_YELLOW,
    "high": RAIN_BLUE,
}


def rain_chance_label(chance: int) -> str:
    """Classify a rain probability in percent as low, medium or high."""
    if chance < 30:
        return "low"
    if chance < 70:
        return "medium"
    return "high"


class WeatherScreenRunner(DetailScreenRunner):
    title_key = "weather.title"
    subtitle_key = "weather.subtitle"
    tabs_key = "weather.tabs"

    def draw_content(
        self, cursor: LayoutCursor, targets: list[ClickTarget], now: int
    ) -> None:
        self._draw_hero(cursor)
        self._draw_alerts(cursor)
        self._draw_conditions(cursor)
        self.draw_tabs(cursor, targets)
        if self.active_tab == TODAY_TAB:
            self._draw_hourly(cursor)
        else:
            self._draw_weekly(cursor)
        self._draw_advice(cursor)

        half = (cursor.width - 10) // 2
        row = cursor.take(44)
        # Alert subscriptions and the calendar live outside this demo.
        draw_button(self.screen, pygame.Rect(row.x, row.y, half, row.height), tr("weather.set_alerts"), variant="outline", size=14)
        draw_button(self.screen, pygame.Rect(row.right - half, row.y, half, row.height), tr("weather.farm_calendar"), variant="outline", size=14)

    def _draw_hero(self, cursor: LayoutCursor) -> None:
        rect = cursor.take(86, gap=14)
        pygame.draw.rect(self.screen, PRIMARY, rect, border_radius=10)
        draw_text(
            self.screen,
            f"{CURRENT_WEATHER.temperature} C",
            34,
            PRIMARY_FOREGROUND,
            (rect.x + 16, rect.y + 12),
            bold=True,
        )
        draw_text(self.screen, CURRENT_WEATHER.condition, 14, PRIMARY_FOREGROUND, (rect.x + 16, rect.y + 54))
        draw_sky_icon(self.screen, Sky.SUNNY, (rect.right - 40, rect.centery), 20)

    def _draw_alerts(self, cursor: LayoutCursor) -> None:
        for alert in WEATHER_ALERTS:
            body_height = text_block_height(alert.description, 12, cursor.width - 30)
            accent = DESTRUCTIVE if alert.severity is Priority.HIGH else WARN_YELLOW
            inner = draw_card(self.screen, cursor.take(64 + body_height, gap=12), accent=accent)
            draw_text(self.screen, alert.title, 14, FOREGROUND, (inner.x + 4, inner.y), bold=True)
            draw_text(self.screen, alert.time, 12, MUTED_FOREGROUND, (inner.x + 4, inner.y + 20))
            blit_text_wrapped(self.screen, alert.description, 12, FOREGROUND, (inner.x + 4, inner.y + 38), inner.width - 4)

    def _draw_conditions(self, cursor: LayoutCursor) -> None:
        inner = draw_card(self.screen, cursor.take(190, gap=14))
        draw_text(self.screen, tr("weather.current"), 17, FOREGROUND, (inner.x, inner.y), bold=True)
        weather = CURRENT_WEATHER
        cells = (
            ("weather.humidity", f"{weather.humidity}%"),
            ("weather.visibility", f"{weather.visibility} km"),
            ("weather.wind", f"{weather.wind_speed} km/h"),
            ("weather.uv", tr("weather.uv_value", value=weather.uv_index)),
            ("weather.pressure", f"{weather.pressure} mb"),
            ("weather.dew_point", f"{weather.dew_point} C"),
        )
        col_width = inner.width // 2
        for idx, (label_key, value) in enumerate(cells):
            col, row = idx % 2, idx // 2
            x = inner.x + col * col_width
            y = inner.y + 32 + row * 46
            draw_text(self.screen, tr(label_key), 11, MUTED_FOREGROUND, (x, y))
            draw_text(self.screen, value, 15, FOREGROUND, (x, y + 16), bold=True)

    def _draw_rain(self, right: int, centery: int, chance: int) -> None:
        color = RAIN_CHANCE_COLORS[rain_chance_label(chance)]
        label = draw_text(self.screen, f"{chance}%", 13, color, (right, centery), anchor="midright", bold=True)
        pygame.draw.circle(self.screen, RAIN_BLUE, (label.x - 9, centery), 4)

    def _draw_hourly(self, cursor: LayoutCursor) -> None:
        row_height = 46
        inner = draw_card(self.screen, cursor.take(44 + row_height * len(HOURLY_FORECAST)))
        draw_text(self.screen, tr("weather.hourly"), 17, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 30
        for hour in HOURLY_FORECAST:
            row = pygame.Rect(inner.x, y, inner.width, row_height - 6)
            pygame.draw.rect(self.screen, MUTED, row, border_radius=8)
            draw_sky_icon(self.screen, hour.sky, (row.x + 20, row.centery), 9)
            draw_text(self.screen, hour.time, 14, FOREGROUND, (row.x + 40, row.centery), anchor="midleft", bold=True)
            draw_text(self.screen, f"{hour.temp} C", 14, FOREGROUND, (row.right - 90, row.centery), anchor="midright", bold=True)
            self._draw_rain(row.right - 10, row.centery, hour.rain)
            y += row_height

    def _draw_weekly(self, cursor: LayoutCursor) -> None:
        row_height = 52
        inner = draw_card(self.screen, cursor.take(44 + row_height * len(WEEKLY_FORECAST)))
        draw_text(self.screen, tr("weather.weekly"), 17, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 30
        for day in WEEKLY_FORECAST:
            row = pygame.Rect(inner.x, y, inner.width, row_height - 6)
            pygame.draw.rect(self.screen, MUTED, row, border_radius=8)
            draw_sky_icon(self.screen, day.sky, (row.x + 20, row.centery), 9)
            draw_text(self.screen, day.day, 14, FOREGROUND, (row.x + 40, row.y + 6), bold=True)
            draw_text(self.screen, day.condition, 11, MUTED_FOREGROUND, (row.x + 40, row.y + 25))
            draw_text(
                self.screen,
                f"{day.high}/{day.low} C",
                13,
                FOREGROUND,
                (row.right - 80, row.centery),
                anchor="midright",
                bold=True,
            )
            self._draw_rain(row.right - 10, row.centery, day.rain)
            y += row_height

    def _draw_advice(self, cursor: LayoutCursor) -> None:
        draw_text(self.screen, tr("weather.advice"), 17, FOREGROUND, (cursor.x, cursor.y), bold=True)
        cursor.space(28)
        for advice in FARMING_ADVICE:
            body_height = text_block_height(advice.message, 12, cursor.width - 24)
            accent = BAD_RED if advice.priority is Priority.HIGH else WARN_YELLOW
            inner = draw_card(self.screen, cursor.take(46 + body_height, gap=8), accent=accent)
            title = draw_text(self.screen, advice.title, 14, FOREGROUND, (inner.x + 4, inner.y), bold=True)
            draw_badge(
                self.screen,
                tr(f"common.priority.{advice.priority.value}"),
                (inner.right, title.centery),
                variant=severity_badge_variant(advice.priority.value),
                anchor="midright",
                size=10,
            )
            blit_text_wrapped(self.screen, advice.message, 12, MUTED_FOREGROUND, (inner.x + 4, inner.y + 22), inner.width - 4)
        cursor.space(6)


__all__ = ["WeatherScreenRunner", "rain_chance_label"]
