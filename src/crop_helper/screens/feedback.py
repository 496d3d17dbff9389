from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

import pygame

from ..colors import (
    BORDER,
    CARD,
    DESTRUCTIVE,
    FOREGROUND,
    GOOD_GREEN,
    MUTED,
    MUTED_FOREGROUND,
    PRIMARY,
    SUCCESS_BG,
)
from ..config import DEFAULT_CONFIG, demo_delay_ms
from ..input_utils import ClickTarget
from ..localization import translate as tr
from ..localization import translate_list
from ..render import (
    LayoutCursor,
    blit_text_wrapped,
    draw_badge,
    draw_button,
    draw_card,
    draw_stars,
    draw_text,
    text_block_height,
)
from ..sample_data import FAQS, HELP_RESOURCES, SUPPORT_CHANNELS
from ..timers import SimulatedTask
from . import ScreenContext
from .base import DetailScreenRunner

RATING_MAX = 5
VOICE_RECORDED_SUFFIX = " Voice feedback recorded successfully."

TEXT_TARGET = "feedback-text"
VOICE_TARGET = "voice"
SUBMIT_TARGET = "submit"

FEEDBACK_TAB = 0
HELP_TAB = 1
CONTACT_TAB = 2


def _default_task(name: str) -> SimulatedTask:
    return SimulatedTask(DEFAULT_CONFIG["demo"][name])


@dataclass
class FeedbackState:
    """Rating, free text, simulated voice note and the thank-you banner.

    Nothing is sent anywhere: submitting shows the banner and, once it
    expires, clears the text and rating.
    """

    recording: SimulatedTask = field(default_factory=lambda: _default_task("recording_delay_ms"))
    banner: SimulatedTask = field(default_factory=lambda: _default_task("submit_banner_ms"))
    rating: int = 0
    text: str = ""
    text_active: bool = False
    open_faqs: set[int] = field(default_factory=set)

    @property
    def can_submit(self) -> bool:
        return bool(self.text.strip()) or self.rating > 0

    @property
    def is_recording(self) -> bool:
        return self.recording.running

    @property
    def showing_thanks(self) -> bool:
        return self.banner.running

    def set_rating(self, value: int) -> int:
        self.rating = max(0, min(RATING_MAX, int(value)))
        return self.rating

    def type_text(self, text: str) -> None:
        self.text += text

    def erase(self) -> None:
        self.text = self.text[:-1]

    def start_recording(self, now: int) -> bool:
        return self.recording.start(now)

    def submit(self, now: int) -> bool:
        if not self.can_submit or self.banner.running:
            return False
        self.text_active = False
        return self.banner.start(now)

    def update(self, now: int) -> None:
        if self.recording.poll(now):
            self.text += VOICE_RECORDED_SUFFIX
        if self.banner.poll(now):
            self.text = ""
            self.rating = 0

    def toggle_faq(self, index: int) -> bool:
        if index in self.open_faqs:
            self.open_faqs.discard(index)
            return False
        self.open_faqs.add(index)
        return True


def rating_label(rating: int) -> str:
    labels = [str(label) for label in translate_list("feedback.rating_labels")]
    if not labels:
        return ""
    return labels[max(0, min(len(labels) - 1, rating))]


class FeedbackScreenRunner(DetailScreenRunner):
    title_key = "feedback.title"
    subtitle_key = "feedback.subtitle"
    tabs_key = "feedback.tabs"

    def __init__(self, context: ScreenContext, *, on_back: Callable[[], Any]) -> None:
        super().__init__(context, on_back=on_back)
        self.state = FeedbackState(
            recording=SimulatedTask(demo_delay_ms(self.config, "recording_delay_ms")),
            banner=SimulatedTask(demo_delay_ms(self.config, "submit_banner_ms")),
        )

    @property
    def text_active(self) -> bool:
        return self.state.text_active and self.active_tab == FEEDBACK_TAB

    def on_text(self, text: str, *, erase: bool) -> None:
        if erase:
            self.state.erase()
        if text:
            self.state.type_text(text)

    def on_back_pressed(self) -> None:
        if self.text_active:
            self.state.text_active = False
            return
        super().on_back_pressed()

    def on_blank_click(self) -> None:
        self.state.text_active = False

    def select_tab(self, index: int) -> None:
        self.state.text_active = False
        super().select_tab(index)

    def activate_content(self, target_id: Any) -> None:
        now = pygame.time.get_ticks()
        if target_id != TEXT_TARGET:
            self.state.text_active = False
        if isinstance(target_id, tuple):
            kind, value = target_id
            if kind == "star":
                self.state.set_rating(value)
            elif kind == "faq":
                self.state.toggle_faq(value)
            return
        if target_id == TEXT_TARGET:
            self.state.text_active = not self.state.text_active
        elif target_id == VOICE_TARGET:
            self.state.start_recording(now)
        elif target_id == SUBMIT_TARGET:
            if self.state.submit(now):
                print(f"Feedback submitted (rating={self.state.rating})")

    def update(self, now: int) -> None:
        self.state.update(now)

    def draw_content(
        self, cursor: LayoutCursor, targets: list[ClickTarget], now: int
    ) -> None:
        self.draw_tabs(cursor, targets)
        if self.active_tab == FEEDBACK_TAB:
            if self.state.showing_thanks:
                self._draw_thanks(cursor)
            else:
                self._draw_feedback_form(cursor, targets, now)
        elif self.active_tab == HELP_TAB:
            self._draw_help(cursor, targets)
        else:
            self._draw_contact(cursor)

    # --- feedback ---
    def _draw_thanks(self, cursor: LayoutCursor) -> None:
        inner = draw_card(self.screen, cursor.take(150), fill=SUCCESS_BG, border=GOOD_GREEN)
        pygame.draw.circle(self.screen, GOOD_GREEN, (inner.centerx, inner.y + 26), 22)
        pygame.draw.lines(
            self.screen,
            CARD,
            False,
            [(inner.centerx - 10, inner.y + 26), (inner.centerx - 3, inner.y + 33), (inner.centerx + 10, inner.y + 18)],
            4,
        )
        draw_text(self.screen, tr("feedback.thanks_title"), 18, FOREGROUND, (inner.centerx, inner.y + 60), anchor="midtop", bold=True)
        blit_text_wrapped(
            self.screen,
            tr("feedback.thanks_body"),
            13,
            MUTED_FOREGROUND,
            (inner.x, inner.y + 88),
            inner.width,
            center=True,
        )

    def _draw_feedback_form(self, cursor: LayoutCursor, targets: list[ClickTarget], now: int) -> None:
        state = self.state

        inner = draw_card(self.screen, cursor.take(120, gap=14))
        draw_text(self.screen, tr("feedback.rate_title"), 16, FOREGROUND, (inner.centerx, inner.y), anchor="midtop", bold=True)
        star_size, star_gap = 34, 10
        row_width = RATING_MAX * star_size + (RATING_MAX - 1) * star_gap
        star_rects = draw_stars(
            self.screen,
            (inner.centerx - row_width // 2, inner.y + 28),
            state.rating,
            count=RATING_MAX,
            size=star_size,
            gap=star_gap,
        )
        for idx, rect in enumerate(star_rects):
            targets.append(ClickTarget(("star", idx + 1), rect))
        draw_text(self.screen, rating_label(state.rating), 13, MUTED_FOREGROUND, (inner.centerx, inner.y + 74), anchor="midtop")

        text_width = cursor.width - 24 - 16
        shown_text = state.text or tr("feedback.placeholder")
        box_height = max(96, text_block_height(shown_text, 13, text_width) + 20)
        inner = draw_card(self.screen, cursor.take(40 + box_height + 56, gap=14))
        draw_text(self.screen, tr("feedback.share_title"), 16, FOREGROUND, (inner.x, inner.y), bold=True)
        box = pygame.Rect(inner.x, inner.y + 28, inner.width, box_height)
        pygame.draw.rect(self.screen, CARD, box, border_radius=8)
        pygame.draw.rect(self.screen, PRIMARY if self.text_active else BORDER, box, width=2 if self.text_active else 1, border_radius=8)
        color = FOREGROUND if state.text else MUTED_FOREGROUND
        blit_text_wrapped(self.screen, shown_text, 13, color, (box.x + 8, box.y + 8), box.width - 16)
        if self.text_active and (now // 500) % 2 == 0:
            pygame.draw.line(self.screen, FOREGROUND, (box.right - 12, box.bottom - 22), (box.right - 12, box.bottom - 8), 2)
        targets.append(ClickTarget(TEXT_TARGET, box))

        half = (inner.width - 10) // 2
        voice_rect = pygame.Rect(inner.x, box.bottom + 10, half, 42)
        submit_rect = pygame.Rect(inner.right - half, box.bottom + 10, half, 42)
        recording = state.is_recording
        draw_button(
            self.screen,
            voice_rect,
            tr("feedback.recording") if recording else tr("feedback.voice"),
            variant="destructive" if recording else "outline",
            size=13,
        )
        draw_button(self.screen, submit_rect, tr("feedback.submit"), enabled=state.can_submit, size=14)
        targets.append(ClickTarget(VOICE_TARGET, voice_rect, not recording))
        targets.append(ClickTarget(SUBMIT_TARGET, submit_rect, state.can_submit))

        hint = tr("feedback.voice_hint")
        inner = draw_card(
            self.screen,
            cursor.take(44 + text_block_height(hint, 12, cursor.width - 24), gap=14),
            fill=SUCCESS_BG,
            border=PRIMARY,
        )
        draw_text(self.screen, tr("feedback.voice_hint_title"), 14, PRIMARY, (inner.x, inner.y), bold=True)
        blit_text_wrapped(self.screen, hint, 12, MUTED_FOREGROUND, (inner.x, inner.y + 22), inner.width)

        inner = draw_card(self.screen, cursor.take(92))
        draw_text(self.screen, tr("feedback.quick_title"), 15, FOREGROUND, (inner.x, inner.y), bold=True)
        up_rect = pygame.Rect(inner.x, inner.y + 28, half, 40)
        down_rect = pygame.Rect(inner.right - half, inner.y + 28, half, 40)
        draw_button(self.screen, up_rect, tr("feedback.thumbs_up"), variant="outline", size=13)
        draw_button(self.screen, down_rect, tr("feedback.thumbs_down"), variant="outline", size=13)

    # --- help ---
    def _draw_help(self, cursor: LayoutCursor, targets: list[ClickTarget]) -> None:
        row_height = 62
        inner = draw_card(self.screen, cursor.take(44 + row_height * len(HELP_RESOURCES), gap=14))
        draw_text(self.screen, tr("feedback.resources_title"), 17, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 30
        for resource in HELP_RESOURCES:
            row = pygame.Rect(inner.x, y, inner.width, row_height - 6)
            pygame.draw.rect(self.screen, MUTED, row, border_radius=8)
            draw_text(self.screen, resource.title, 14, FOREGROUND, (row.x + 10, row.y + 8), bold=True)
            draw_text(self.screen, resource.description, 11, MUTED_FOREGROUND, (row.x + 10, row.y + 30))
            draw_badge(self.screen, resource.duration, (row.right - 8, row.y + 8), variant="outline", anchor="topright", size=10)
            y += row_height

        draw_text(self.screen, tr("feedback.faq_title"), 17, FOREGROUND, (cursor.x, cursor.y), bold=True)
        cursor.space(28)
        width = cursor.width - 24
        for idx, faq in enumerate(FAQS):
            expanded = idx in self.state.open_faqs
            question_height = text_block_height(faq.question, 13, width - 20, bold=True)
            height = question_height + 44
            if expanded:
                height += text_block_height(faq.answer, 12, width) + 8
            rect = cursor.take(height, gap=8)
            inner = draw_card(self.screen, rect)
            draw_badge(self.screen, faq.category, (inner.x, inner.y), variant="secondary", size=10)
            draw_text(self.screen, "-" if expanded else "+", 18, PRIMARY, (inner.right, inner.y), anchor="topright", bold=True)
            blit_text_wrapped(self.screen, faq.question, 13, FOREGROUND, (inner.x, inner.y + 22), inner.width - 20, bold=True)
            if expanded:
                blit_text_wrapped(
                    self.screen,
                    faq.answer,
                    12,
                    MUTED_FOREGROUND,
                    (inner.x, inner.y + 30 + question_height),
                    inner.width,
                )
            targets.append(ClickTarget(("faq", idx), rect))

    # --- contact ---
    def _draw_contact(self, cursor: LayoutCursor) -> None:
        row_height = 66
        inner = draw_card(self.screen, cursor.take(44 + row_height * len(SUPPORT_CHANNELS), gap=14))
        draw_text(self.screen, tr("feedback.support_title"), 17, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 30
        for channel in SUPPORT_CHANNELS:
            row = pygame.Rect(inner.x, y, inner.width, row_height - 6)
            pygame.draw.rect(self.screen, MUTED, row, border_radius=8)
            draw_text(self.screen, channel.kind, 14, FOREGROUND, (row.x + 10, row.y + 6), bold=True)
            draw_text(self.screen, channel.contact, 12, FOREGROUND, (row.x + 10, row.y + 24))
            draw_text(self.screen, channel.hours, 11, MUTED_FOREGROUND, (row.x + 10, row.y + 41))
            # Channels open outside the app; the button is drawn only.
            draw_button(
                self.screen,
                pygame.Rect(row.right - 78, row.centery - 16, 70, 32),
                tr("feedback.contact"),
                variant="outline",
                size=12,
            )
            y += row_height

        body = tr("feedback.emergency_body")
        inner = draw_card(
            self.screen,
            cursor.take(90 + text_block_height(body, 12, cursor.width - 24), gap=14),
            border=DESTRUCTIVE,
        )
        draw_text(self.screen, tr("feedback.emergency_title"), 15, DESTRUCTIVE, (inner.x, inner.y), bold=True)
        used = blit_text_wrapped(self.screen, body, 12, MUTED_FOREGROUND, (inner.x, inner.y + 22), inner.width)
        draw_button(
            self.screen,
            pygame.Rect(inner.x, inner.y + 30 + used, inner.width, 38),
            tr("feedback.emergency_call"),
            variant="destructive",
            size=14,
        )

        fields = [str(item) for item in translate_list("feedback.form_fields")]
        field_height = 38
        inner = draw_card(self.screen, cursor.take(94 + (field_height + 8) * len(fields)))
        draw_text(self.screen, tr("feedback.message_title"), 16, FOREGROUND, (inner.x, inner.y), bold=True)
        y = inner.y + 28
        for placeholder in fields:
            box = pygame.Rect(inner.x, y, inner.width, field_height)
            pygame.draw.rect(self.screen, CARD, box, border_radius=8)
            pygame.draw.rect(self.screen, BORDER, box, width=1, border_radius=8)
            draw_text(self.screen, placeholder, 12, MUTED_FOREGROUND, (box.x + 10, box.centery), anchor="midleft")
            y += field_height + 8
        draw_button(self.screen, pygame.Rect(inner.x, y + 2, inner.width, 40), tr("feedback.send"), size=14)


__all__ = [
    "FeedbackScreenRunner",
    "FeedbackState",
    "VOICE_RECORDED_SUFFIX",
    "rating_label",
]
