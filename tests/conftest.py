"""共通フィクスチャ。

- 決定的な疑似 ColorEngine（L をそのまま灰色へ写像）
- 小さなパレット試料
- `RAMPS_*` 環境変数を除去した設定
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from ramps.palette import Palette
from tests._utils.samples import GrayEngine, make_entry, make_palette


@pytest.fixture()
def gray_engine() -> GrayEngine:
    return GrayEngine()


@pytest.fixture()
def red_palette() -> Palette:
    return make_palette("Red", [make_entry(0, "#ff0000")], [0])


@pytest.fixture()
def blue_palette() -> Palette:
    return make_palette("Blue", [make_entry(50, "#1234ab")], [50])


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("RAMPS_DARK_MODE", "RAMPS_EXPORT_DIR", "RAMPS_LOG_LEVEL", "RAMPS_CLIPBOARD"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
