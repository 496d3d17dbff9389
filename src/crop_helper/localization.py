"""python-i18n wrapper for UI strings and the chosen language label.

Only English UI strings ship with the app. The language picked during
onboarding is kept as a label: ``get_language()`` reports it, while string
lookups resolve to the closest shipped locale (English).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from typing import Any

import i18n

from .font_utils import clear_font_cache

DEFAULT_LANGUAGE = "en"

DEFAULT_FONT_RESOURCE: str | None = None
DEFAULT_FONT_SCALE = 1.0


@dataclass(frozen=True)
class FontSettings:
    resource: str | None
    scale: float = 1.0

    def scaled_size(self, base_size: int) -> int:
        return max(1, round(base_size * self.scale))


_LOCALE_DATA: dict[str, dict[str, Any]] | None = None

_CURRENT_LANGUAGE = DEFAULT_LANGUAGE
_CURRENT_LOCALE = DEFAULT_LANGUAGE
_CONFIGURED = False


def _configure_backend() -> None:
    global _CONFIGURED
    if _CONFIGURED:
        return

    base_path = resources.files("crop_helper").joinpath("locales")
    load_path = str(base_path)
    if load_path not in i18n.load_path:
        i18n.load_path.append(load_path)
    i18n.set("filename_format", "{namespace}.{locale}.{format}")
    i18n.set("file_format", "json")
    i18n.set("fallback", DEFAULT_LANGUAGE)
    i18n.set("error_on_missing_translation", False)
    i18n.set("enable_memoization", True)
    _CONFIGURED = True


def _normalize_language(code: Any) -> str | None:
    return code if isinstance(code, str) and code else None


def _resolve_locale(code: str | None) -> str:
    if code and code in _get_locale_data():
        return code
    return DEFAULT_LANGUAGE


def set_language(code: Any) -> str:
    """Record the language label and return the locale used for strings.

    Anything other than a non-empty string (a hand-edited config value, say)
    falls back to the default language.
    """
    global _CURRENT_LANGUAGE, _CURRENT_LOCALE
    _configure_backend()
    code = _normalize_language(code)
    resolved = _resolve_locale(code)
    i18n.set("locale", resolved)
    _CURRENT_LANGUAGE = code or DEFAULT_LANGUAGE
    _CURRENT_LOCALE = resolved
    clear_font_cache()
    return resolved


def get_language() -> str:
    return _CURRENT_LANGUAGE


def translate(key: str, **kwargs: Any) -> str:
    if not _CONFIGURED:
        set_language(_CURRENT_LANGUAGE)
    qualified_key = _qualify_key(key)
    return i18n.t(qualified_key, default=key, **kwargs)


def translate_list(key: str) -> list[Any]:
    if not _CONFIGURED:
        set_language(_CURRENT_LANGUAGE)
    result = _lookup_locale_value(key)
    return result if isinstance(result, list) else []


def get_font_settings(*, name: str = "primary") -> FontSettings:
    locale_data = _current_locale_data()
    fonts = locale_data.get("fonts", {})
    data = fonts.get(name, {}) if isinstance(fonts, dict) else {}
    if not isinstance(data, dict):
        data = {}
    resource = data.get("resource") or DEFAULT_FONT_RESOURCE
    scale_raw = data.get("scale", DEFAULT_FONT_SCALE)
    try:
        scale = float(scale_raw)
    except (TypeError, ValueError):
        scale = DEFAULT_FONT_SCALE
    return FontSettings(resource=resource, scale=scale)


def _qualify_key(key: str) -> str:
    return key if key.startswith("ui.") else f"ui.{key}"


def _current_locale_data() -> dict[str, Any]:
    data = _get_locale_data()
    return data.get(_CURRENT_LOCALE) or data.get(DEFAULT_LANGUAGE, {})


def _lookup_locale_value(key: str) -> Any:
    path = _qualify_key(key).split(".")[1:]
    current: Any = _current_locale_data()
    for segment in path:
        if not isinstance(current, dict):
            return None
        current = current.get(segment)
        if current is None:
            return None
    return current


def _get_locale_data() -> dict[str, dict[str, Any]]:
    global _LOCALE_DATA
    if _LOCALE_DATA is not None:
        return _LOCALE_DATA

    base = resources.files("crop_helper").joinpath("locales")
    english_entry = base.joinpath(f"ui.{DEFAULT_LANGUAGE}.json")
    if not english_entry.is_file():
        raise FileNotFoundError(
            f"Missing required locale file: ui.{DEFAULT_LANGUAGE}.json"
        )

    locale_data: dict[str, dict[str, Any]] = {}
    for entry in base.iterdir():
        name = entry.name
        if not name.startswith("ui.") or not name.endswith(".json"):
            continue
        code = name[3:-5]
        try:
            with resources.as_file(entry) as path:
                data = json.loads(path.read_text(encoding="utf-8"))
        except Exception as exc:  # noqa: BLE001
            print(f"Failed to load locale ({name}): {exc}")
            data = {}
        payload = data.get(code, {}) if isinstance(data, dict) else {}
        locale_data[code] = payload if isinstance(payload, dict) else {}

    _LOCALE_DATA = locale_data
    return _LOCALE_DATA


__all__ = [
    "DEFAULT_LANGUAGE",
    "FontSettings",
    "get_font_settings",
    "get_language",
    "set_language",
    "translate",
    "translate_list",
]
