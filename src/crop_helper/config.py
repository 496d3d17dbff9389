import json
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Tuple

from platformdirs import user_config_dir

APP_NAME = "CropHelper"

# Defaults for all configurable options
DEFAULT_CONFIG: Dict[str, Any] = {
    "language": "en",
    "window": {"scale": 1.0},
    "profile": {"farmer_name": "Farmer Kumar"},
    "demo": {
        "analysis_delay_ms": 3000,
        "recording_delay_ms": 3000,
        "submit_banner_ms": 2000,
    },
}


def user_config_path() -> Path:
    """Return the platform-specific config file path."""
    return Path(user_config_dir(APP_NAME, APP_NAME)) / "config.json"


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge dictionaries, with override winning on conflicts."""
    merged: Dict[str, Any] = deepcopy(base)
    for key, val in override.items():
        if isinstance(val, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], val)
        else:
            merged[key] = val
    return merged


def load_config(path: Path | None = None) -> Tuple[Dict[str, Any], Path]:
    """Load config from disk, falling back to defaults on errors."""
    config_path = path or user_config_path()
    config: Dict[str, Any] = deepcopy(DEFAULT_CONFIG)

    try:
        if config_path.exists():
            loaded = json.loads(config_path.read_text(encoding="utf-8"))
            if isinstance(loaded, dict):
                config = _deep_merge(config, loaded)
    except Exception as exc:  # noqa: BLE001
        print(f"Failed to load config ({config_path}): {exc}")

    return config, config_path


def save_config(config: Dict[str, Any], path: Path | None = None) -> None:
    """Persist config to disk, creating parent dirs as needed."""
    config_path = path or user_config_path()
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    except Exception as exc:  # noqa: BLE001
        print(f"Failed to save config ({config_path}): {exc}")


def demo_delay_ms(config: Dict[str, Any], name: str) -> int:
    """Return a simulated-delay setting in milliseconds, never negative."""
    demo = config.get("demo")
    default = DEFAULT_CONFIG["demo"][name]
    raw = demo.get(name, default) if isinstance(demo, dict) else default
    try:
        return max(0, int(raw))
    except (TypeError, ValueError):
        return default
