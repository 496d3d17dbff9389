"""Screen framework types for crop_helper.

Every screen (onboarding, dashboard and the five detail screens) is named by
a ``ScreenID``. Screens never switch to each other directly: they are handed
navigation callbacks and the application swaps the visible screen when the
navigation controller changes state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing only
    from pygame import surface, time


class ScreenID(Enum):
    """Identifiers for every screen in the app."""

    ONBOARDING = "onboarding"
    DASHBOARD = "dashboard"
    SOIL_HEALTH = "soil-health"
    PEST_DETECTION = "pest-detection"
    WEATHER = "weather"
    PRICING = "pricing"
    FEEDBACK = "feedback"


# Screens reachable from the dashboard; always return to the dashboard.
DETAIL_SCREENS: frozenset[ScreenID] = frozenset(
    {
        ScreenID.SOIL_HEALTH,
        ScreenID.PEST_DETECTION,
        ScreenID.WEATHER,
        ScreenID.PRICING,
        ScreenID.FEEDBACK,
    }
)

# Valid targets for navigate(): every screen except onboarding.
DESTINATIONS: frozenset[ScreenID] = DETAIL_SCREENS | {ScreenID.DASHBOARD}


@dataclass
class ScreenContext:
    """Shared handles passed to whichever screen is active."""

    screen: "surface.Surface"
    clock: "time.Clock"
    config: dict[str, Any]
    fps: int
    config_path: Path | None = None


__all__ = ["DESTINATIONS", "DETAIL_SCREENS", "ScreenContext", "ScreenID"]
