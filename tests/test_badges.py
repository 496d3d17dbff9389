import pytest

from crop_helper.colors import BAD_RED, GOOD_GREEN, WARN_YELLOW
from crop_helper.models import CropRecommendation
from crop_helper.render import BADGE_COLORS, severity_badge_variant
from crop_helper.sample_data import CROP_RECOMMENDATIONS
from crop_helper.screens.dashboard import recommendation_badge_variant
from crop_helper.screens.soil_health import status_color


@pytest.mark.parametrize(
    ("level", "variant"),
    [
        ("high", "destructive"),
        ("High", "destructive"),
        (" HIGH ", "destructive"),
        ("medium", "secondary"),
        ("Medium\n", "secondary"),
        ("low", "outline"),
        ("Low", "outline"),
        ("critical", "outline"),
        ("", "outline"),
    ],
)
def test_severity_badge_variant(level: str, variant: str) -> None:
    assert severity_badge_variant(level) == variant


def _recommendation(status: str) -> CropRecommendation:
    return CropRecommendation("Tomato", status, 90, "Test reason")


@pytest.mark.parametrize(
    ("status", "variant"),
    [
        ("Optimal", "default"),
        (" optimal", "default"),
        ("Good", "secondary"),
        ("GOOD ", "secondary"),
        ("Moderate", "outline"),
        ("unknown", "outline"),
    ],
)
def test_recommendation_badge_variant(status: str, variant: str) -> None:
    assert recommendation_badge_variant(_recommendation(status)) == variant


def test_sample_recommendations_use_each_variant_once() -> None:
    variants = [recommendation_badge_variant(item) for item in CROP_RECOMMENDATIONS]

    assert variants == ["default", "secondary", "outline"]


def test_every_variant_has_colors() -> None:
    variants = {severity_badge_variant(level) for level in ("high", "medium", "low")}
    variants |= {recommendation_badge_variant(item) for item in CROP_RECOMMENDATIONS}

    assert variants <= set(BADGE_COLORS)


@pytest.mark.parametrize(
    ("status", "color"),
    [
        ("good", GOOD_GREEN),
        ("optimal", GOOD_GREEN),
        ("medium", WARN_YELLOW),
        (" Medium ", WARN_YELLOW),
        ("low", BAD_RED),
        ("LOW", BAD_RED),
        ("unexpected", GOOD_GREEN),
    ],
)
def test_status_color(status: str, color: tuple[int, int, int]) -> None:
    assert status_color(status) == color
