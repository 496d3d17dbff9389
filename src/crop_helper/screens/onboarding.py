from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

import pygame

from ..colors import (
    BORDER,
    CARD,
    FOREGROUND,
    MUTED,
    MUTED_FOREGROUND,
    PRIMARY,
    PRIMARY_FOREGROUND,
    SUCCESS_BG,
)
from ..config import save_config
from ..input_utils import ClickTarget
from ..localization import set_language
from ..localization import translate as tr
from ..localization import translate_list
from ..models import LanguageOption
from ..render import (
    LayoutCursor,
    blit_text_wrapped,
    draw_badge,
    draw_button,
    draw_card,
    draw_text,
    text_block_height,
)
from ..sample_data import LANGUAGES
from . import ScreenContext
from .base import ScreenRunner

CONTINUE_TARGET = "continue"


@dataclass
class OnboardingState:
    selected: str | None = None

    @property
    def can_continue(self) -> bool:
        return self.selected is not None

    def select(self, code: str) -> None:
        if any(option.code == code for option in LANGUAGES):
            self.selected = code


class OnboardingScreenRunner(ScreenRunner):
    header_height = 0

    def __init__(self, context: ScreenContext, *, on_complete: Callable[[], Any]) -> None:
        super().__init__(context)
        self.on_complete = on_complete
        self.state = OnboardingState()
        self.languages: tuple[LanguageOption, ...] = LANGUAGES

    def activate(self, target_id: Any) -> None:
        if isinstance(target_id, tuple) and target_id[0] == "language":
            self.state.select(target_id[1])
            return
        if target_id == CONTINUE_TARGET:
            self.complete()

    def complete(self) -> None:
        """Store the chosen language label, then leave onboarding."""
        if not self.state.can_continue:
            return
        self.config["language"] = self.state.selected
        save_config(self.config, self.context.config_path)
        set_language(self.state.selected)
        self.finish(self.on_complete)

    def draw_content(
        self, cursor: LayoutCursor, targets: list[ClickTarget], now: int
    ) -> None:
        self._draw_hero(cursor)
        self._draw_welcome(cursor)

        draw_text(self.screen, tr("onboarding.select_language"), 17, FOREGROUND, (cursor.x, cursor.y), bold=True)
        cursor.space(28)
        for option in self.languages:
            rect = cursor.take(46, gap=8)
            self._draw_language_row(rect, option)
            targets.append(ClickTarget(("language", option.code), rect))

        cursor.space(6)
        button_rect = cursor.take(48, gap=18)
        draw_button(
            self.screen,
            button_rect,
            tr("onboarding.continue"),
            enabled=self.state.can_continue,
            size=16,
        )
        targets.append(ClickTarget(CONTINUE_TARGET, button_rect, self.state.can_continue))

        self._draw_features(cursor)
        self._draw_voice_card(cursor)

    def _draw_hero(self, cursor: LayoutCursor) -> None:
        hero = pygame.Rect(0, cursor.y - 14, self.width, 150)
        pygame.draw.rect(self.screen, PRIMARY, hero)
        pygame.draw.circle(self.screen, PRIMARY_FOREGROUND, (hero.centerx, hero.y + 44), 24, width=3)
        pygame.draw.line(
            self.screen,
            PRIMARY_FOREGROUND,
            (hero.centerx, hero.y + 58),
            (hero.centerx, hero.y + 32),
            3,
        )
        draw_text(self.screen, tr("onboarding.title"), 26, PRIMARY_FOREGROUND, (hero.centerx, hero.y + 96), anchor="center", bold=True)
        draw_text(self.screen, tr("onboarding.tagline"), 14, PRIMARY_FOREGROUND, (hero.centerx, hero.y + 124), anchor="center")
        cursor.space(hero.height)

    def _draw_welcome(self, cursor: LayoutCursor) -> None:
        inner_width = cursor.width - 24
        body = tr("onboarding.welcome_body")
        height = 20 + 26 + text_block_height(body, 14, inner_width)
        inner = draw_card(self.screen, cursor.take(height, gap=16))
        draw_text(self.screen, tr("onboarding.welcome_title"), 19, FOREGROUND, (inner.centerx, inner.y), anchor="midtop", bold=True)
        blit_text_wrapped(self.screen, body, 14, MUTED_FOREGROUND, (inner.x, inner.y + 26), inner.width, center=True)

    def _draw_language_row(self, rect: pygame.Rect, option: LanguageOption) -> None:
        selected = option.code == self.state.selected
        fill = SUCCESS_BG if selected else CARD
        border = PRIMARY if selected else BORDER
        pygame.draw.rect(self.screen, fill, rect, border_radius=8)
        pygame.draw.rect(self.screen, border, rect, width=2 if selected else 1, border_radius=8)
        draw_text(self.screen, option.name, 15, FOREGROUND, (rect.x + 14, rect.centery), anchor="midleft", bold=selected)
        badge_anchor = (rect.right - (40 if selected else 14), rect.centery)
        draw_badge(self.screen, option.code.upper(), badge_anchor, variant="outline", anchor="midright")
        if selected:
            cx, cy = rect.right - 22, rect.centery
            pygame.draw.circle(self.screen, PRIMARY, (cx, cy), 9)
            pygame.draw.lines(
                self.screen,
                PRIMARY_FOREGROUND,
                False,
                [(cx - 4, cy), (cx - 1, cy + 3), (cx + 4, cy - 3)],
                2,
            )

    def _draw_features(self, cursor: LayoutCursor) -> None:
        features = [str(item) for item in translate_list("onboarding.features")]
        tile_gap = 10
        tile_width = (cursor.width - tile_gap) // 2
        rows = (len(features) + 1) // 2
        block = cursor.take(rows * 56 + (rows - 1) * tile_gap, gap=16)
        for idx, label in enumerate(features):
            col, row = idx % 2, idx // 2
            tile = pygame.Rect(
                block.x + col * (tile_width + tile_gap),
                block.y + row * (56 + tile_gap),
                tile_width,
                56,
            )
            pygame.draw.rect(self.screen, MUTED, tile, border_radius=10)
            draw_text(self.screen, label, 14, FOREGROUND, tile.center, anchor="center", bold=True)

    def _draw_voice_card(self, cursor: LayoutCursor) -> None:
        inner = draw_card(self.screen, cursor.take(66), fill=SUCCESS_BG, border=PRIMARY)
        draw_text(self.screen, tr("onboarding.voice_title"), 15, PRIMARY, (inner.x, inner.y), bold=True)
        draw_text(self.screen, tr("onboarding.voice_body"), 13, MUTED_FOREGROUND, (inner.x, inner.y + 22))


__all__ = ["OnboardingScreenRunner", "OnboardingState"]
