from __future__ import annotations

import json
from pathlib import Path

import pytest

from api import build_palette, main
from api.palette import resolve_dark_mode, resolve_export_dir, resolve_registry
from common import settings
from ramps.registry import DARK_DEFINITIONS, LIGHT_DEFINITIONS


@pytest.mark.smoke
def test_cli_stdout_csv(clean_env, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--light", "--format", "csv", "--stdout"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Color Name,0,10,20,30,40,50,60,70,80,90,95,100"
    assert [row.split(",")[0] for row in out[1:]] == [d.name for d in LIGHT_DEFINITIONS]


def test_cli_stdout_neutral_tokens(clean_env, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--neutral", "--format", "tokens", "--stdout"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert list(data["color"]) == ["neutral0", "neutral1"]
    assert len(data["color"]["neutral0"]) == 51
    assert data["color"]["neutral0"]["0"] == {"value": "#000000"}
    assert data["color"]["neutral0"]["100"] == {"value": "#ffffff"}


def test_cli_writes_all_formats(clean_env, tmp_path: Path) -> None:
    assert main(["--dark", "--format", "all", "--out", str(tmp_path), "--no-clipboard"]) == 0
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == [
        "color_palette.csv",
        "color_palette.json",
        "design_tokens.json",
        "figma_color_styles.json",
    ]
    data = json.loads((tmp_path / "color_palette.json").read_text(encoding="utf-8"))
    assert [r["sat"] for r in data] == [d.saturation for d in DARK_DEFINITIONS]


def test_cli_rejects_conflicting_theme_flags(clean_env) -> None:
    with pytest.raises(SystemExit):
        main(["--dark", "--light", "--stdout"])


def test_theme_resolution_order(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_dark_mode(None, {}) is True  # 既定はダーク
    assert resolve_dark_mode(None, {"dark_mode": False}) is False
    monkeypatch.setenv("RAMPS_DARK_MODE", "1")
    settings.reload_from_env()
    assert resolve_dark_mode(None, {"dark_mode": False}) is True
    assert resolve_dark_mode(False, {"dark_mode": True}) is False


def test_export_dir_resolution(clean_env, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    assert resolve_export_dir(None, {}) is None
    assert resolve_export_dir(None, {"export_dir": "cfg"}) == "cfg"
    monkeypatch.setenv("RAMPS_EXPORT_DIR", str(tmp_path))
    settings.reload_from_env()
    assert resolve_export_dir(None, {"export_dir": "cfg"}) == str(tmp_path)
    assert resolve_export_dir("arg", {"export_dir": "cfg"}) == "arg"


def test_config_registry_override_is_used(clean_env, gray_engine) -> None:
    config = {
        "ramps": {
            "neutral": [
                {"name": "Slate", "hue": 250, "saturation": 10, "min_lightness": 5, "max_lightness": 95}
            ]
        }
    }
    assert [d.name for d in resolve_registry(config).neutral()] == ["Slate"]
    pal = build_palette(neutral=True, config=config, engine=gray_engine)
    assert pal.names == ["Slate"]
    assert pal.ramps[0].entries[0].lightness == 5


def test_cli_reports_configuration_errors(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    bad = {"ramps": {"neutral": [{"name": "Broken", "hue": 400, "saturation": 0, "min_lightness": 0, "max_lightness": 1}]}}
    monkeypatch.setattr("api.cli.load_config", lambda: bad)
    assert main(["--neutral", "--stdout"]) == 1
