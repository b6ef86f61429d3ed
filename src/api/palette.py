"""
どこで: `api.palette`。
何を: 構成（YAML/環境変数）を解決してパレット生成・エクスポートを 1 呼び出しで行う高レベル関数。
なぜ: CLI や外部スクリプトが、レジストリ選択/テーマ既定値/配信経路の組み立てを意識せずに済むようにするため。

テーマフラグは常に引数で受け取り、プロセス全体の状態としては保持しない。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

from common import settings
from common.env import env_is_set
from engine.export.delivery import ClipboardDelivery, FileDelivery
from engine.export.service import ExportResult, ExportService
from ramps import Palette, RampSpecRegistry, palette_for_theme
from ramps.engine import ColorEngine
from ramps.export import ExportFormat


def resolve_registry(config: Mapping[str, Any] | None) -> RampSpecRegistry:
    """構成の `ramps` セクションからレジストリを構築する（未指定なら組込み定義）。"""
    data = (config or {}).get("ramps")
    return RampSpecRegistry.from_mapping(data)


def resolve_dark_mode(dark_mode: Optional[bool], config: Mapping[str, Any] | None) -> bool:
    """テーマの優先順: 引数 > 環境変数 `RAMPS_DARK_MODE` > YAML `dark_mode` > 既定（ダーク）。"""
    if dark_mode is not None:
        return bool(dark_mode)
    if env_is_set("RAMPS_DARK_MODE"):
        return settings.get().DARK_MODE
    value = (config or {}).get("dark_mode")
    if isinstance(value, bool):
        return value
    return settings.get().DARK_MODE


def resolve_export_dir(
    export_dir: str | Path | None, config: Mapping[str, Any] | None
) -> str | Path | None:
    """出力先の優先順: 引数 > 環境変数 `RAMPS_EXPORT_DIR` > YAML `export_dir` > 既定。"""
    if export_dir is not None:
        return export_dir
    env_dir = settings.get().EXPORT_DIR
    if env_dir:
        return env_dir
    value = (config or {}).get("export_dir")
    return str(value) if value else None


def build_palette(
    dark_mode: Optional[bool] = None,
    *,
    neutral: bool = False,
    config: Mapping[str, Any] | None = None,
    engine: Optional[ColorEngine] = None,
) -> Palette:
    """構成を解決してパレットを生成する。"""
    return palette_for_theme(
        resolve_dark_mode(dark_mode, config),
        neutral=neutral,
        registry=resolve_registry(config),
        engine=engine,
    )


def make_service(
    export_dir: str | Path | None = None,
    *,
    clipboard: Optional[bool] = None,
    config: Mapping[str, Any] | None = None,
) -> ExportService:
    """ファイル/クリップボード配信を組み立てた ExportService を返す。"""
    use_clipboard = settings.get().CLIPBOARD_ENABLED if clipboard is None else clipboard
    return ExportService(
        file_delivery=FileDelivery(resolve_export_dir(export_dir, config)),
        clipboard=ClipboardDelivery() if use_clipboard else None,
    )


def export(
    palette: Palette,
    fmt: ExportFormat | str,
    *,
    service: Optional[ExportService] = None,
) -> ExportResult:
    """パレットを指定形式で書き出して配信する。"""
    svc = service if service is not None else make_service()
    return svc.export(palette, fmt)


__all__ = [
    "build_palette",
    "export",
    "make_service",
    "resolve_registry",
    "resolve_dark_mode",
    "resolve_export_dir",
]
