from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable

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
    WARN_YELLOW,
)
from ..input_utils import ClickTarget
from ..localization import translate as tr
from ..localization import translate_list
from ..models import CropPrice, Impact, Location, Trend
from ..render import (
    LayoutCursor,
    blit_text_wrapped,
    draw_badge,
    draw_button,
    draw_card,
    draw_progress,
    draw_text,
    text_block_height,
)
from ..sample_data import (
    LOCATIONS,
    MARKET_INSIGHTS,
    PRICE_HISTORY,
    TODAY_PRICES,
    WATCHLIST,
)
from . import ScreenContext
from .base import DetailScreenRunner

LOCATION_TARGET = "location"
SEARCH_TARGET = "search"

RATES_TAB = 0
TRENDS_TAB = 1
WATCHLIST_TAB = 2

IMPACT_VARIANTS = {
    Impact.POSITIVE: "default",
    Impact.NEUTRAL: "secondary",
    Impact.NEGATIVE: "destructive",
}

DEMAND_COLORS = {
    "high": GOOD_GREEN,
    "medium": WARN_YELLOW,
    "low": BAD_RED,
}


def filter_prices(prices: Iterable[CropPrice], query: str) -> list[CropPrice]:
    """Case-insensitive substring match on the crop name; order is kept."""
    needle = query.lower()
    return [price for price in prices if needle in price.crop.lower()]


@dataclass
class PricingState:
    query: str = ""
    location_index: int = 0
    search_active: bool = False

    @property
    def location(self) -> Location:
        return LOCATIONS[self.location_index]

    def cycle_location(self, step: int = 1) -> Location:
        self.location_index = (self.location_index + step) % len(LOCATIONS)
        return self.location

    def type_text(self, text: str) -> None:
        self.query += text

    def erase(self) -> None:
        self.query = self.query[:-1]

    def filtered_prices(self) -> list[CropPrice]:
        return filter_prices(TODAY_PRICES, self.query)


class PricingScreenRunner(DetailScreenRunner):
    title_key = "pricing.title"
    subtitle_key = "pricing.subtitle"
    tabs_key = "pricing.tabs"

    def __init__(self, context: ScreenContext, *, on_back: Callable[[], Any]) -> None:
        super().__init__(context, on_back=on_back)
        self.state = PricingState()

    @property
    def text_active(self) -> bool:
        return self.state.search_active

    def on_text(self, text: str, *, erase: bool) -> None:
        if erase:
            self.state.erase()
        if text:
            self.state.type_text(text)
        self.scroll = 0

    def on_back_pressed(self) -> None:
        if self.state.search_active:
            self.state.search_active = False
            return
        super().on_back_pressed()

    def on_blank_click(self) -> None:
        self.state.search_active = False

    def activate_content(self, target_id: Any) -> None:
        if target_id == LOCATION_TARGET:
            self.state.search_active = False
            location = self.state.cycle_location()
            print(f"Market location: {location.name}")
            return
        if target_id == SEARCH_TARGET:
            self.state.search_active = not self.state.search_active
            return
        self.state.search_active = False

    def draw_content(
        self, cursor: LayoutCursor, targets: list[ClickTarget], now: int
    ) -> None:
        self._draw_filters(cursor, targets, now)
        self.draw_tabs(cursor, targets)
        if self.active_tab == RATES_TAB:
            self._draw_rates(cursor)
        elif self.active_tab == TRENDS_TAB:
            self._draw_trends(cursor)
        else:
            self._draw_watchlist(cursor)

    def _draw_filters(self, cursor: LayoutCursor, targets: list[ClickTarget], now: int) -> None:
        location_rect = cursor.take(38, gap=8)
        pygame.draw.rect(self.screen, CARD, location_rect, border_radius=8)
        pygame.draw.rect(self.screen, BORDER, location_rect, width=1, border_radius=8)
        pygame.draw.circle(self.screen, PRIMARY, (location_rect.x + 16, location_rect.centery - 2), 6)
        draw_text(
            self.screen,
            tr("pricing.location", name=self.state.location.name),
            14,
            FOREGROUND,
            (location_rect.x + 30, location_rect.centery),
            anchor="midleft",
        )
        draw_text(self.screen, ">", 14, MUTED_FOREGROUND, (location_rect.right - 12, location_rect.centery), anchor="midright", bold=True)
        targets.append(ClickTarget(LOCATION_TARGET, location_rect))

        search_rect = cursor.take(40, gap=14)
        active = self.state.search_active
        pygame.draw.rect(self.screen, CARD, search_rect, border_radius=8)
        pygame.draw.rect(self.screen, PRIMARY if active else BORDER, search_rect, width=2 if active else 1, border_radius=8)
        pygame.draw.circle(self.screen, MUTED_FOREGROUND, (search_rect.x + 16, search_rect.centery - 2), 6, width=2)
        pygame.draw.line(
            self.screen,
            MUTED_FOREGROUND,
            (search_rect.x + 20, search_rect.centery + 2),
            (search_rect.x + 24, search_rect.centery + 6),
            2,
        )
        text_x = search_rect.x + 34
        if self.state.query:
            shown = draw_text(self.screen, self.state.query, 14, FOREGROUND, (text_x, search_rect.centery), anchor="midleft")
        else:
            draw_text(self.screen, tr("pricing.search_placeholder"), 14, MUTED_FOREGROUND, (text_x, search_rect.centery), anchor="midleft")
            shown = pygame.Rect(text_x, search_rect.centery, 0, 0)
        if active and (now // 500) % 2 == 0:
            caret_x = shown.right + 2
            pygame.draw.line(self.screen, FOREGROUND, (caret_x, search_rect.y + 10), (caret_x, search_rect.bottom - 10), 2)
        targets.append(ClickTarget(SEARCH_TARGET, search_rect))

    def _draw_rates(self, cursor: LayoutCursor) -> None:
        prices = self.state.filtered_prices()
        if not prices:
            inner = draw_card(self.screen, cursor.take(60))
            draw_text(
                self.screen,
                tr("pricing.no_results", query=self.state.query),
                14,
                MUTED_FOREGROUND,
                inner.center,
                anchor="center",
            )
            return
        for item in prices:
            inner = draw_card(self.screen, cursor.take(118))
            name = draw_text(self.screen, item.crop, 15, FOREGROUND, (inner.x, inner.y), bold=True)
            demand = item.demand.lower()
            demand_rect = draw_badge(
                self.screen,
                tr("pricing.demand", value=item.demand),
                (name.right + 8, name.centery),
                variant="outline",
                anchor="midleft",
                size=10,
            )
            pygame.draw.circle(
                self.screen,
                DEMAND_COLORS.get(demand, MUTED_FOREGROUND),
                (demand_rect.right + 8, demand_rect.centery),
                4,
            )
            draw_text(self.screen, f"{item.market} - {item.quality}", 11, MUTED_FOREGROUND, (inner.x, inner.y + 22))
            draw_text(self.screen, f"Rs {item.price:,}", 18, PRIMARY, (inner.right, inner.y), anchor="topright", bold=True)
            draw_text(
                self.screen,
                tr("pricing.per_unit", unit=item.unit),
                11,
                MUTED_FOREGROUND,
                (inner.right, inner.y + 24),
                anchor="topright",
            )
            self._draw_trend(item, (inner.x, inner.bottom - 16))
            # Charts and per-crop alerts are not part of the demo; drawn only.
            button_width = 70
            alert_rect = pygame.Rect(inner.right - button_width, inner.bottom - 32, button_width, 32)
            chart_rect = alert_rect.move(-(button_width + 8), 0)
            draw_button(self.screen, chart_rect, tr("pricing.chart"), variant="outline", size=12)
            draw_button(self.screen, alert_rect, tr("pricing.alert"), variant="outline", size=12)

    def _draw_trend(self, item: CropPrice, midleft: tuple[int, int]) -> None:
        x, y = midleft
        rising = item.trend is Trend.UP
        color = GOOD_GREEN if rising else BAD_RED
        if rising:
            points = [(x, y + 5), (x + 6, y - 5), (x + 12, y + 5)]
        else:
            points = [(x, y - 5), (x + 6, y + 5), (x + 12, y - 5)]
        pygame.draw.polygon(self.screen, color, points)
        draw_text(self.screen, f"{abs(item.change):g}%", 13, color, (x + 18, y), anchor="midleft", bold=True)

    def _draw_trends(self, cursor: LayoutCursor) -> None:
        columns = [str(label) for label in translate_list("pricing.history_columns")]
        row_height = 54
        inner = draw_card(self.screen, cursor.take(44 + row_height * len(PRICE_HISTORY), gap=14))
        draw_text(self.screen, tr("pricing.history"), 17, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 30
        for period in PRICE_HISTORY:
            row = pygame.Rect(inner.x, y, inner.width, row_height - 6)
            pygame.draw.rect(self.screen, MUTED, row, border_radius=8)
            draw_text(self.screen, period.period, 13, FOREGROUND, (row.x + 10, row.y + 6), bold=True)
            values = (period.wheat, period.rice, period.cotton)
            col_width = (row.width - 20) // max(1, len(columns))
            for idx, (label, value) in enumerate(zip(columns, values)):
                draw_text(
                    self.screen,
                    tr("pricing.history_entry", crop=label, price=value),
                    11,
                    MUTED_FOREGROUND,
                    (row.x + 10 + idx * col_width, row.y + 26),
                )
            y += row_height

        draw_text(self.screen, tr("pricing.insights"), 17, FOREGROUND, (cursor.x, cursor.y), bold=True)
        cursor.space(28)
        for insight in MARKET_INSIGHTS:
            body_height = text_block_height(insight.description, 12, cursor.width - 24)
            inner = draw_card(self.screen, cursor.take(66 + body_height, gap=8))
            title = draw_text(self.screen, insight.title, 14, FOREGROUND, (inner.x, inner.y), bold=True)
            draw_badge(
                self.screen,
                insight.impact.value,
                (inner.right, title.centery),
                variant=IMPACT_VARIANTS[insight.impact],
                anchor="midright",
                size=10,
            )
            used = blit_text_wrapped(self.screen, insight.description, 12, MUTED_FOREGROUND, (inner.x, inner.y + 22), inner.width)
            draw_text(
                self.screen,
                tr("pricing.timeframe", value=insight.timeframe),
                11,
                MUTED_FOREGROUND,
                (inner.x, inner.y + 26 + used),
            )

    def _draw_watchlist(self, cursor: LayoutCursor) -> None:
        row_height = 76
        inner = draw_card(self.screen, cursor.take(44 + row_height * len(WATCHLIST), gap=14))
        draw_text(self.screen, tr("pricing.price_alerts"), 17, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 30
        for item in WATCHLIST:
            row = pygame.Rect(inner.x, y, inner.width, row_height - 6)
            pygame.draw.rect(self.screen, MUTED, row, border_radius=8)
            draw_text(self.screen, item.crop, 14, FOREGROUND, (row.x + 10, row.y + 6), bold=True)
            status_key = "pricing.target_met" if item.target_met else "pricing.watching"
            draw_badge(
                self.screen,
                tr(status_key),
                (row.right - 10, row.y + 6),
                variant="default" if item.target_met else "secondary",
                anchor="topright",
                size=10,
            )
            draw_text(
                self.screen,
                tr("pricing.target", price=f"{item.target_price:,}"),
                11,
                MUTED_FOREGROUND,
                (row.x + 10, row.y + 28),
            )
            draw_text(
                self.screen,
                tr("pricing.current", price=f"{item.current_price:,}"),
                11,
                MUTED_FOREGROUND,
                (row.right - 10, row.y + 28),
                anchor="topright",
            )
            bar = pygame.Rect(row.x + 10, row.bottom - 16, row.width - 20, 6)
            draw_progress(self.screen, bar, item.current_price / item.target_price, PRIMARY)
            y += row_height

        # Creating alerts is outside the demo; the button is drawn only.
        draw_button(self.screen, cursor.take(46, gap=14), tr("pricing.add_alert"), size=15)

        tips = [str(tip) for tip in translate_list("pricing.tips")]
        width = cursor.width - 24
        heights = [text_block_height(f"- {tip}", 12, width) + 3 for tip in tips]
        inner = draw_card(self.screen, cursor.take(50 + sum(heights)), fill=MUTED)
        draw_text(self.screen, tr("pricing.tips_title"), 15, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 26
        for tip in tips:
            y += blit_text_wrapped(self.screen, f"- {tip}", 12, MUTED_FOREGROUND, (inner.x, y), inner.width) + 3


__all__ = ["PricingScreenRunner", "PricingState", "filter_prices"]
