from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from ..colors import (
    FOREGROUND,
    GOOD_GREEN,
    MUTED,
    MUTED_FOREGROUND,
    PRIMARY,
    PRIMARY_FOREGROUND,
    WARN_YELLOW,
)
from ..config import DEFAULT_CONFIG, demo_delay_ms
from ..input_utils import ClickTarget
from ..localization import translate as tr
from ..localization import translate_list
from ..models import AnalysisResult
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
from ..sample_data import RECENT_DETECTIONS, SIMULATED_ANALYSIS
from ..timers import SimulatedTask
from . import ScreenContext
from .base import DetailScreenRunner

TAKE_PHOTO_TARGET = "take-photo"
UPLOAD_TARGET = "upload"
ANALYZE_ANOTHER_TARGET = "analyze-another"


@dataclass
class PestDetectionState:
    """Photo analysis flow: pick an image, wait, show the fixed result."""

    task: SimulatedTask = field(
        default_factory=lambda: SimulatedTask(DEFAULT_CONFIG["demo"]["analysis_delay_ms"])
    )
    image_selected: bool = False
    source: str | None = None
    result: AnalysisResult | None = None

    @property
    def analyzing(self) -> bool:
        return self.task.running

    def start_analysis(self, now: int, source: str) -> bool:
        if self.task.running:
            return False
        self.image_selected = True
        self.source = source
        self.result = None
        return self.task.start(now)

    def update(self, now: int) -> bool:
        if self.task.poll(now):
            self.result = SIMULATED_ANALYSIS
            return True
        return False

    def reset(self) -> bool:
        """Clear the image and result; ignored while an analysis is running."""
        if self.task.running:
            return False
        self.task.reset()
        self.image_selected = False
        self.source = None
        self.result = None
        return True


class PestDetectionScreenRunner(DetailScreenRunner):
    title_key = "pest.title"
    subtitle_key = "pest.subtitle"

    def __init__(self, context: ScreenContext, *, on_back: Callable[[], Any]) -> None:
        super().__init__(context, on_back=on_back)
        self.state = PestDetectionState(
            task=SimulatedTask(demo_delay_ms(self.config, "analysis_delay_ms"))
        )

    def activate_content(self, target_id: Any) -> None:
        now = pygame.time.get_ticks()
        if target_id == TAKE_PHOTO_TARGET:
            self.state.start_analysis(now, "camera")
        elif target_id == UPLOAD_TARGET:
            self.state.start_analysis(now, "gallery")
        elif target_id == ANALYZE_ANOTHER_TARGET:
            self.state.reset()

    def update(self, now: int) -> None:
        if self.state.update(now):
            print(f"Analysis finished: {self.state.result.pest}")

    def draw_content(
        self, cursor: LayoutCursor, targets: list[ClickTarget], now: int
    ) -> None:
        if self.state.image_selected:
            self._draw_analysis(cursor, targets, now)
        else:
            self._draw_capture(cursor, targets)
        self._draw_recent(cursor)
        self._draw_tips(cursor)

    def _draw_capture(self, cursor: LayoutCursor, targets: list[ClickTarget]) -> None:
        inner_width = cursor.width - 24
        body = tr("pest.identify_body")
        hint = tr("pest.hint")
        body_height = text_block_height(body, 13, inner_width)
        hint_height = text_block_height(hint, 11, inner_width)
        inner = draw_card(self.screen, cursor.take(162 + body_height + hint_height, gap=14))

        pygame.draw.circle(self.screen, MUTED, (inner.centerx, inner.y + 22), 22)
        pygame.draw.rect(self.screen, PRIMARY, pygame.Rect(inner.centerx - 12, inner.y + 14, 24, 16), border_radius=4)
        draw_text(self.screen, tr("pest.identify_title"), 16, FOREGROUND, (inner.centerx, inner.y + 52), anchor="midtop", bold=True)
        y = inner.y + 76
        y += blit_text_wrapped(self.screen, body, 13, MUTED_FOREGROUND, (inner.x, y), inner.width, center=True) + 10

        half = (inner.width - 10) // 2
        photo_rect = pygame.Rect(inner.x, y, half, 42)
        upload_rect = pygame.Rect(inner.right - half, y, half, 42)
        draw_button(self.screen, photo_rect, tr("pest.take_photo"), size=13)
        draw_button(self.screen, upload_rect, tr("pest.upload"), variant="outline", size=13)
        targets.append(ClickTarget(TAKE_PHOTO_TARGET, photo_rect))
        targets.append(ClickTarget(UPLOAD_TARGET, upload_rect))
        blit_text_wrapped(self.screen, hint, 11, MUTED_FOREGROUND, (inner.x, y + 52), inner.width, center=True)

    def _draw_analysis(self, cursor: LayoutCursor, targets: list[ClickTarget], now: int) -> None:
        result = self.state.result
        inner_width = cursor.width - 24
        detail_lines = self._result_lines(result) if result is not None else []
        details_height = sum(text_block_height(line, 12, inner_width - 20) + 4 for line in detail_lines)
        height = 160 + 62
        if result is not None:
            height += 36 + 40 + details_height + 20 + 50
        inner = draw_card(self.screen, cursor.take(height, gap=14))

        image = pygame.Rect(inner.x, inner.y, inner.width, 150)
        self._draw_placeholder_image(image)
        if self.state.analyzing:
            overlay = pygame.Surface(image.size, pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 128))
            self.screen.blit(overlay, image.topleft)
            draw_text(self.screen, tr("pest.analyzing"), 14, PRIMARY_FOREGROUND, (image.centerx, image.centery - 8), anchor="center", bold=True)
            bar = pygame.Rect(image.x + 40, image.centery + 12, image.width - 80, 6)
            draw_progress(self.screen, bar, self.state.task.progress(now), PRIMARY_FOREGROUND)

        y = image.bottom + 10
        if result is not None:
            draw_text(self.screen, result.pest, 18, FOREGROUND, (inner.x, y), bold=True)
            draw_badge(
                self.screen,
                f"{result.severity} Risk",
                (inner.right, y + 2),
                variant=severity_badge_variant(result.severity),
                anchor="topright",
            )
            y += 36
            box = pygame.Rect(inner.x, y, inner.width, 40 + details_height)
            pygame.draw.rect(self.screen, MUTED, box, border_radius=8)
            draw_text(self.screen, tr("pest.confidence_level"), 13, FOREGROUND, (box.x + 10, box.y + 10))
            draw_text(self.screen, f"{result.confidence}%", 17, PRIMARY, (box.right - 10, box.y + 8), anchor="topright", bold=True)
            line_y = box.y + 36
            for line in detail_lines:
                line_y += blit_text_wrapped(self.screen, line, 12, FOREGROUND, (box.x + 10, line_y), box.width - 20) + 4
            y = box.bottom + 10

            half = (inner.width - 10) // 2
            # Treatment shopping is not part of the demo; drawn only.
            draw_button(self.screen, pygame.Rect(inner.x, y, half, 40), tr("pest.treatment_guide"), variant="outline", size=13)
            draw_button(self.screen, pygame.Rect(inner.right - half, y, half, 40), tr("pest.buy_treatment"), size=13)
            y += 50

        another = pygame.Rect(inner.x, y, inner.width, 42)
        can_reset = not self.state.analyzing
        draw_button(self.screen, another, tr("pest.analyze_another"), variant="outline", enabled=can_reset, size=14)
        targets.append(ClickTarget(ANALYZE_ANOTHER_TARGET, another, can_reset))

    def _result_lines(self, result: AnalysisResult) -> list[str]:
        return [
            f"{tr('pest.description')} {result.description}",
            f"{tr('pest.treatment')} {result.treatment}",
            f"{tr('pest.urgency')} {result.urgency}",
        ]

    def _draw_placeholder_image(self, rect: pygame.Rect) -> None:
        pygame.draw.rect(self.screen, (134, 179, 96), rect, border_radius=8)
        for idx in range(5):
            leaf = pygame.Rect(0, 0, 70, 34)
            leaf.center = (rect.x + 40 + idx * 62, rect.centery + (-18 if idx % 2 else 18))
            pygame.draw.ellipse(self.screen, (76, 140, 60), leaf)
        draw_text(self.screen, tr("pest.image_placeholder"), 11, PRIMARY_FOREGROUND, (rect.x + 8, rect.bottom - 6), anchor="bottomleft")

    def _draw_recent(self, cursor: LayoutCursor) -> None:
        row_height = 58
        inner = draw_card(self.screen, cursor.take(46 + row_height * len(RECENT_DETECTIONS), gap=14))
        draw_text(self.screen, tr("pest.recent"), 17, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 32
        for detection in RECENT_DETECTIONS:
            row = pygame.Rect(inner.x, y, inner.width, row_height - 6)
            pygame.draw.rect(self.screen, MUTED, row, border_radius=8)
            name = draw_text(self.screen, detection.pest, 14, FOREGROUND, (row.x + 10, row.y + 8), bold=True)
            draw_badge(
                self.screen,
                detection.severity,
                (name.right + 8, name.centery),
                variant=severity_badge_variant(detection.severity),
                anchor="midleft",
                size=10,
            )
            meta = f"{tr('pest.detection_meta', crop=detection.crop, date=detection.date)} - {detection.confidence}%"
            draw_text(self.screen, meta, 11, MUTED_FOREGROUND, (row.x + 10, row.y + 30))
            status_key = "pest.treated" if detection.treated else "pest.pending"
            status_color = GOOD_GREEN if detection.treated else WARN_YELLOW
            pygame.draw.circle(self.screen, status_color, (row.right - 64, row.centery), 5)
            draw_text(self.screen, tr(status_key), 11, status_color, (row.right - 54, row.centery), anchor="midleft", bold=True)
            y += row_height

    def _draw_tips(self, cursor: LayoutCursor) -> None:
        tips = [str(tip) for tip in translate_list("pest.tips")]
        width = cursor.width - 24
        heights = [text_block_height(f"- {tip}", 12, width) + 3 for tip in tips]
        inner = draw_card(self.screen, cursor.take(50 + sum(heights)), fill=MUTED)
        draw_text(self.screen, tr("pest.tips_title"), 15, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 26
        for tip in tips:
            y += blit_text_wrapped(self.screen, f"- {tip}", 12, MUTED_FOREGROUND, (inner.x, y), inner.width) + 3


__all__ = ["PestDetectionScreenRunner", "PestDetectionState"]
