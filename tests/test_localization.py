import importlib
import json
from importlib import resources
from pathlib import Path
from types import ModuleType
from typing import Any

import pytest

import crop_helper.localization as localization_module
from crop_helper.config import load_config


@pytest.fixture()
def localization() -> ModuleType:
    """Reload localization module to reset cached state between tests."""
    return importlib.reload(localization_module)


def test_translate_qualifies_key_and_falls_back(localization: Any) -> None:
    localization.set_language("en")

    assert localization.translate("onboarding.title") == "AI Crop Helper"
    assert localization.translate("ui.onboarding.title") == "AI Crop Helper"
    assert localization.translate("does_not_exist") == "does_not_exist"


def test_translate_fills_placeholders(localization: Any) -> None:
    localization.set_language("en")

    assert localization.translate("soil.score", score=78) == "Score: 78/100"
    assert (
        localization.translate("common.price_per_unit", price="2,150", unit="quintal")
        == "Rs 2,150/quintal"
    )


def test_unshipped_language_is_kept_as_label(localization: Any) -> None:
    resolved = localization.set_language("hi")

    assert resolved == "en"
    assert localization.get_language() == "hi"
    assert localization.translate("onboarding.continue") == "Continue to Dashboard"


def test_set_language_none_uses_default(localization: Any) -> None:
    localization.set_language(None)

    assert localization.get_language() == "en"


def test_translate_list_returns_lists_only(localization: Any) -> None:
    localization.set_language("en")

    assert localization.translate_list("soil.tabs") == ["Analysis", "Nutrients", "Fertilizer"]
    assert len(localization.translate_list("feedback.rating_labels")) == 6
    assert localization.translate_list("onboarding.title") == []
    assert localization.translate_list("missing.section") == []


def test_get_font_settings_defaults(localization: Any) -> None:
    localization.set_language("en")

    settings = localization.get_font_settings(name="primary")

    assert settings.resource is None
    assert settings.scale == pytest.approx(1.0)
    assert settings.scaled_size(16) == 16
    assert settings.scaled_size(0) == 1


def _load_locale_payload(code: str) -> dict[str, Any]:
    locale_dir = resources.files("crop_helper").joinpath("locales")
    entry = locale_dir.joinpath(f"ui.{code}.json")
    with resources.as_file(entry) as path:
        payload = json.loads(path.read_text(encoding="utf-8"))
    data = payload.get(code)
    if not isinstance(data, dict):
        raise AssertionError(f"Locale '{code}' missing top-level '{code}' entry")
    return data


def test_english_locale_lists_are_complete() -> None:
    english = _load_locale_payload("en")

    assert len(english["onboarding"]["features"]) == 4
    assert len(english["pest"]["tips"]) == 5
    assert len(english["pricing"]["tips"]) == 4
    assert len(english["feedback"]["tabs"]) == 3
    assert len(english["weather"]["tabs"]) == 2


@pytest.mark.parametrize("bad_value", [["hi"], {"code": "hi"}, 7, ""])
def test_malformed_language_in_config_falls_back_to_english(
    localization: Any, tmp_path: Path, bad_value: Any
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"language": bad_value}), encoding="utf-8")
    config, _ = load_config(path=config_path)

    assert localization.set_language(config.get("language")) == "en"
    assert localization.get_language() == "en"
    assert localization.translate("onboarding.title") == "AI Crop Helper"
