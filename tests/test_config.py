import json
from pathlib import Path

from crop_helper import config


def test_deep_merge_handles_nested_dicts_without_mutating_inputs() -> None:
    base = {"window": {"scale": 1.0}, "demo": {"analysis_delay_ms": 3000}}
    override = {
        "window": {"scale": 2.0},
        "demo": {"recording_delay_ms": 500},
        "profile": {"farmer_name": "Asha"},
    }

    merged = config._deep_merge(base, override)

    assert merged["window"]["scale"] == 2.0
    assert merged["demo"]["analysis_delay_ms"] == 3000
    assert merged["demo"]["recording_delay_ms"] == 500
    assert merged["profile"]["farmer_name"] == "Asha"

    assert base["window"]["scale"] == 1.0
    assert "recording_delay_ms" not in base["demo"]


def test_load_config_merges_defaults_with_file(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps(
            {
                "language": "hi",
                "demo": {"analysis_delay_ms": 10},
            }
        ),
        encoding="utf-8",
    )

    loaded, resolved_path = config.load_config(path=config_path)

    assert resolved_path == config_path
    assert loaded["language"] == "hi"
    assert loaded["demo"]["analysis_delay_ms"] == 10
    assert loaded["demo"]["recording_delay_ms"] == 3000
    assert loaded["profile"]["farmer_name"] == "Farmer Kumar"
    assert loaded is not config.DEFAULT_CONFIG


def test_load_config_falls_back_to_defaults_on_invalid_json(
    tmp_path: Path,
) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("not valid json", encoding="utf-8")

    loaded, resolved_path = config.load_config(path=config_path)

    assert resolved_path == config_path
    assert loaded == config.DEFAULT_CONFIG
    assert loaded["demo"] is not config.DEFAULT_CONFIG["demo"]


def test_load_config_ignores_non_object_json(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("[1, 2, 3]", encoding="utf-8")

    loaded, _ = config.load_config(path=config_path)

    assert loaded == config.DEFAULT_CONFIG


def test_save_config_persists_to_disk(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"
    payload = {"language": "ta"}

    config.save_config(payload, config_path)

    saved = json.loads(config_path.read_text(encoding="utf-8"))
    assert saved == payload


def test_config_never_stores_navigation_state() -> None:
    assert "screen" not in config.DEFAULT_CONFIG
    assert "current_screen" not in config.DEFAULT_CONFIG


def test_demo_delay_ms_reads_config_and_clamps() -> None:
    assert config.demo_delay_ms(config.DEFAULT_CONFIG, "analysis_delay_ms") == 3000
    assert config.demo_delay_ms({"demo": {"analysis_delay_ms": -5}}, "analysis_delay_ms") == 0
    assert config.demo_delay_ms({"demo": {"submit_banner_ms": "bad"}}, "submit_banner_ms") == 2000
    assert config.demo_delay_ms({"demo": "oops"}, "recording_delay_ms") == 3000
    assert config.demo_delay_ms({}, "recording_delay_ms") == 3000
