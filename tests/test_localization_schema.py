from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any

PACKAGE_DIR = Path(__file__).resolve().parents[1] / "src" / "crop_helper"
LOCALES_DIR = PACKAGE_DIR / "locales"

# Literal keys passed to tr()/translate_list() or assigned to *_key attributes.
KEY_PATTERN = re.compile(
    r"""(?:\btr|\btranslate|\btranslate_list)\(\s*["']([a-z_.]+)["']"""
    r"""|_key\s*=\s*["']([a-z_.]+)["']"""
    r"""|\(\s*ScreenID\.[A-Z_]+,\s*["']([a-z_.]+)["']\s*\)"""
)


def get_all_key_paths(d: dict[str, Any], prefix: str = "") -> set[str]:
    keys = set()
    for k, v in d.items():
        new_prefix = f"{prefix}.{k}" if prefix else k
        keys.add(new_prefix)
        if isinstance(v, dict):
            keys.update(get_all_key_paths(v, new_prefix))
    return keys


def _english() -> dict[str, Any]:
    data = json.loads((LOCALES_DIR / "ui.en.json").read_text(encoding="utf-8"))
    return data["en"]


def test_ui_json_files_have_single_language_root() -> None:
    json_files = list(LOCALES_DIR.glob("ui.*.json"))
    assert json_files, "No ui.*.json files found"

    for path in json_files:
        lang_code = path.name.split(".")[1]
        data = json.loads(path.read_text(encoding="utf-8"))
        assert lang_code in data, f"Top-level key '{lang_code}' missing in {path.name}"
        assert len(data) == 1, (
            f"Expected exactly one top-level key in {path.name}, found {list(data.keys())}"
        )


def test_ui_json_mandatory_sections() -> None:
    """Check for mandatory sections in the English strings."""
    mandatory_sections = {
        "meta",
        "fonts",
        "common",
        "screens",
        "onboarding",
        "dashboard",
        "soil",
        "pest",
        "weather",
        "pricing",
        "feedback",
        "errors",
    }

    missing = mandatory_sections - set(_english().keys())
    assert not missing, f"Mandatory sections {missing} missing in ui.en.json"


def test_source_keys_exist_in_english_strings() -> None:
    known = get_all_key_paths(_english())
    referenced: set[str] = set()
    for path in PACKAGE_DIR.rglob("*.py"):
        for match in KEY_PATTERN.finditer(path.read_text(encoding="utf-8")):
            key = next(group for group in match.groups() if group)
            referenced.add(key.removeprefix("ui."))

    assert referenced, "No translation keys found in the sources"
    missing = sorted(referenced - known)
    assert not missing, f"Keys used in code but missing from ui.en.json: {missing}"


def test_priority_labels_cover_every_priority() -> None:
    from crop_helper.models import Priority

    labels = _english()["common"]["priority"]
    assert set(labels) == {priority.value for priority in Priority}
