from __future__ import annotations

import pygame

from ..colors import (
    BAD_RED,
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
from ..models import SoilMetric
from ..render import (
    LayoutCursor,
    blit_text_wrapped,
    draw_badge,
    draw_button,
    draw_card,
    draw_progress,
    draw_text,
    severity_badge_variant,
    text_block_height,
)
from ..sample_data import FERTILIZERS, NUTRIENTS, SOIL_METRICS, SOIL_RECOMMENDATIONS
from .base import DetailScreenRunner

SOIL_SCORE = 78

ANALYSIS_TAB = 0
NUTRIENTS_TAB = 1
FERTILIZER_TAB = 2


def status_color(status: str) -> tuple[int, int, int]:
    normalized = status.strip().lower()
    if normalized == "medium":
        return WARN_YELLOW
    if normalized == "low":
        return BAD_RED
    return GOOD_GREEN


class SoilHealthScreenRunner(DetailScreenRunner):
    title_key = "soil.title"
    subtitle_key = "soil.subtitle"
    tabs_key = "soil.tabs"

    def draw_content(
        self, cursor: LayoutCursor, targets: list[ClickTarget], now: int
    ) -> None:
        self._draw_summary(cursor)
        self.draw_tabs(cursor, targets)
        if self.active_tab == ANALYSIS_TAB:
            self._draw_analysis(cursor)
        elif self.active_tab == NUTRIENTS_TAB:
            self._draw_nutrients(cursor)
        else:
            self._draw_fertilizers(cursor)

    def _draw_summary(self, cursor: LayoutCursor) -> None:
        rect = cursor.take(56, gap=14)
        pygame.draw.rect(self.screen, PRIMARY, rect, border_radius=10)
        healthy = draw_badge(
            self.screen,
            tr("soil.healthy"),
            (rect.x + 14, rect.centery),
            variant="secondary",
            anchor="midleft",
            size=13,
        )
        draw_badge(
            self.screen,
            tr("soil.score", score=SOIL_SCORE),
            (healthy.right + 8, rect.centery),
            variant="outline",
            anchor="midleft",
            size=13,
        )

    # --- analysis ---
    def _metric_height(self, metric: SoilMetric, width: int) -> int:
        return 66 + text_block_height(metric.description, 11, width)

    def _draw_analysis(self, cursor: LayoutCursor) -> None:
        gap = 10
        tile_width = (cursor.width - gap) // 2
        inner_width = tile_width - 24
        for start in range(0, len(SOIL_METRICS), 2):
            pair = SOIL_METRICS[start : start + 2]
            height = max(self._metric_height(metric, inner_width) for metric in pair) + 20
            row = cursor.take(height)
            for col, metric in enumerate(pair):
                tile = pygame.Rect(row.x + col * (tile_width + gap), row.y, tile_width, height)
                inner = draw_card(self.screen, tile)
                draw_text(self.screen, metric.name, 13, FOREGROUND, (inner.x, inner.y), bold=True)
                draw_text(self.screen, f"{metric.value:g}", 20, FOREGROUND, (inner.x, inner.y + 18), bold=True)
                pygame.draw.circle(self.screen, status_color(metric.status), (inner.right - 8, inner.y + 30), 7)
                draw_text(
                    self.screen,
                    tr("soil.ideal", range=metric.ideal),
                    11,
                    MUTED_FOREGROUND,
                    (inner.x, inner.y + 46),
                )
                blit_text_wrapped(
                    self.screen,
                    metric.description,
                    11,
                    MUTED_FOREGROUND,
                    (inner.x, inner.y + 64),
                    inner.width,
                )

        cursor.space(4)
        draw_text(self.screen, tr("soil.recommendations"), 17, FOREGROUND, (cursor.x, cursor.y), bold=True)
        cursor.space(28)
        for recommendation in SOIL_RECOMMENDATIONS:
            body_height = text_block_height(recommendation.description, 12, cursor.width - 24)
            inner = draw_card(self.screen, cursor.take(46 + body_height, gap=8))
            title = draw_text(self.screen, recommendation.title, 14, FOREGROUND, (inner.x, inner.y), bold=True)
            draw_badge(
                self.screen,
                tr(f"common.priority.{recommendation.priority.value}"),
                (inner.right, title.centery),
                variant=severity_badge_variant(recommendation.priority.value),
                anchor="midright",
                size=10,
            )
            blit_text_wrapped(
                self.screen,
                recommendation.description,
                12,
                MUTED_FOREGROUND,
                (inner.x, inner.y + 24),
                inner.width,
            )

    # --- nutrients ---
    def _draw_nutrients(self, cursor: LayoutCursor) -> None:
        row_height = 58
        inner = draw_card(self.screen, cursor.take(54 + row_height * len(NUTRIENTS)))
        draw_text(self.screen, tr("soil.nutrient_levels"), 17, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 34
        for nutrient in NUTRIENTS:
            color = status_color(nutrient.status)
            draw_text(self.screen, nutrient.name, 14, FOREGROUND, (inner.x, y))
            draw_text(self.screen, f"{nutrient.level}%", 14, color, (inner.right, y), anchor="topright", bold=True)
            draw_progress(self.screen, pygame.Rect(inner.x, y + 22, inner.width, 8), nutrient.level / 100, color)
            draw_text(
                self.screen,
                tr("soil.status", value=nutrient.status.capitalize()),
                11,
                MUTED_FOREGROUND,
                (inner.x, y + 34),
            )
            y += row_height

        tips = [str(tip) for tip in translate_list("soil.tips")]
        heights = [text_block_height(f"- {tip}", 13, cursor.width - 24) for tip in tips]
        inner = draw_card(self.screen, cursor.take(50 + sum(heights) + 4 * len(tips)), fill=MUTED)
        draw_text(self.screen, tr("soil.quick_tips"), 15, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 26
        for tip in tips:
            y += blit_text_wrapped(self.screen, f"- {tip}", 13, MUTED_FOREGROUND, (inner.x, y), inner.width) + 4

    # --- fertilizer ---
    def _draw_fertilizers(self, cursor: LayoutCursor) -> None:
        draw_text(self.screen, tr("soil.fertilizers_title"), 17, FOREGROUND, (cursor.x, cursor.y), bold=True)
        cursor.space(28)
        for fertilizer in FERTILIZERS:
            inner = draw_card(self.screen, cursor.take(132))
            draw_text(self.screen, fertilizer.name, 15, FOREGROUND, (inner.x, inner.y), bold=True)
            draw_text(self.screen, fertilizer.cost, 13, PRIMARY, (inner.right, inner.y + 2), anchor="topright", bold=True)
            draw_text(
                self.screen,
                tr("soil.dosage", value=fertilizer.dosage),
                12,
                MUTED_FOREGROUND,
                (inner.x, inner.y + 26),
            )
            draw_text(
                self.screen,
                tr("soil.timing", value=fertilizer.timing),
                12,
                MUTED_FOREGROUND,
                (inner.x, inner.y + 44),
            )
            # Ordering is outside the demo; the button is drawn only.
            draw_button(
                self.screen,
                pygame.Rect(inner.x, inner.bottom - 34, inner.width, 34),
                tr("soil.order"),
                variant="outline",
                size=13,
            )
        draw_button(self.screen, cursor.take(48), tr("soil.schedule_test"), size=15)


__all__ = ["SoilHealthScreenRunner", "status_color"]
