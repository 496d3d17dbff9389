from __future__ import annotations

import sys
import traceback  # For error reporting
from typing import Any

import pygame

try:
    from .__about__ import __version__
except Exception:  # pragma: no cover - fallback version
    __version__ = "0.0.0-unknown"

from .config import load_config, save_config
from .localization import set_language
from .localization import translate as tr
from .navigation import NavigationController
from .screen_constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .screens import DETAIL_SCREENS, ScreenContext, ScreenID
from .screens.base import ScreenRunner
from .screens.dashboard import DashboardScreenRunner
from .screens.feedback import FeedbackScreenRunner
from .screens.onboarding import OnboardingScreenRunner
from .screens.pest_detection import PestDetectionScreenRunner
from .screens.pricing import PricingScreenRunner
from .screens.soil_health import SoilHealthScreenRunner
from .screens.weather import WeatherScreenRunner
from .windowing import apply_window_scale

SCREEN_RUNNERS: dict[ScreenID, type[ScreenRunner]] = {
    ScreenID.ONBOARDING: OnboardingScreenRunner,
    ScreenID.DASHBOARD: DashboardScreenRunner,
    ScreenID.SOIL_HEALTH: SoilHealthScreenRunner,
    ScreenID.PEST_DETECTION: PestDetectionScreenRunner,
    ScreenID.WEATHER: WeatherScreenRunner,
    ScreenID.PRICING: PricingScreenRunner,
    ScreenID.FEEDBACK: FeedbackScreenRunner,
}

_missing = set(ScreenID) - set(SCREEN_RUNNERS)
if _missing:
    raise RuntimeError(f"No screen runner for: {sorted(s.value for s in _missing)}")


def build_screen_runner(
    screen_id: ScreenID,
    controller: NavigationController,
    context: ScreenContext,
) -> ScreenRunner:
    """Create the runner for ``screen_id`` wired to the controller.

    Each screen only receives the callback it is allowed to use: onboarding
    can complete, the dashboard can navigate, detail screens can go back.
    """
    runner_cls: Any = SCREEN_RUNNERS[screen_id]
    if screen_id is ScreenID.ONBOARDING:
        return runner_cls(context, on_complete=controller.complete_onboarding)
    if screen_id is ScreenID.DASHBOARD:
        return runner_cls(context, on_navigate=controller.navigate)
    if screen_id in DETAIL_SCREENS:
        return runner_cls(context, on_back=controller.go_back)
    raise ValueError(f"Unknown screen: {screen_id!r}")


def _log_transition(previous: ScreenID, current: ScreenID) -> None:
    print(f"SCREEN {previous.value} -> {current.value}")


# --- Main Entry Point ---
def main() -> None:
    pygame.init()
    try:
        pygame.font.init()
    except pygame.error as e:
        print(tr("errors.font_init", error=str(e)))
        # Text drawing reports its own errors; keep going without fonts.

    config: dict[str, Any]
    config, config_path = load_config()
    if not config_path.exists():
        save_config(config, config_path)
    set_language(config.get("language"))

    window = config.get("window")
    scale = window.get("scale", 1.0) if isinstance(window, dict) else 1.0
    try:
        apply_window_scale(float(scale))
    except (TypeError, ValueError):
        apply_window_scale(1.0)
    screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT)).convert_alpha()
    clock = pygame.time.Clock()
    context = ScreenContext(
        screen=screen,
        clock=clock,
        config=config,
        fps=FPS,
        config_path=config_path,
    )

    controller = NavigationController()
    controller.subscribe(_log_transition)
    print(f"AI Crop Helper {__version__}")

    running = True
    while running:
        runner = build_screen_runner(controller.current, controller, context)
        try:
            running = runner.run()
        except SystemExit:
            running = False
        except Exception:
            print("An unhandled error occurred on the current screen:")
            traceback.print_exc()
            running = False

    pygame.quit()  # Quit pygame only once at the very end of main
    sys.exit()  # Exit the script


if __name__ == "__main__":
    main()
