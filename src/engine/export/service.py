"""
どこで: `engine.export.service`。
何を: パレット → 文書化 → 配信を 1 リクエスト単位で実行するエクスポートサービス。
なぜ: CLI/UI からは「形式を選んで出す」だけにし、配信経路の選択とフォールバックをここに集約するため。

配信経路（元アプリの挙動を踏襲）:
- Figma: クリップボード優先、失敗時はファイル保存へフォールバック。
- それ以外: ファイル保存のみ。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ramps.export import ExportDocument, ExportFormat, export_palette
from ramps.palette import Palette

from .delivery import Delivery, FileDelivery, deliver_with_fallback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportResult:
    document: ExportDocument
    channel: str
    fell_back: bool


class ExportService:
    """エクスポート要求ごとに文書を生成し、配信チャネルへ 1 回だけ渡す。"""

    def __init__(
        self,
        *,
        file_delivery: Delivery | None = None,
        clipboard: Delivery | None = None,
    ) -> None:
        self._file = file_delivery if file_delivery is not None else FileDelivery()
        self._clipboard = clipboard

    def export(self, palette: Palette, fmt: ExportFormat | str) -> ExportResult:
        """`palette` を `fmt` で書き出して配信する。

        - 文書化の失敗（`SerializationError`）は配信前にそのまま送出する。
        - 全チャネル失敗時は `DeliveryError` を送出する。
        """
        document = export_palette(palette, fmt)
        primary, fallback = self._route(document.format)
        logger.debug(
            "exporting %d ramp(s) as %s (%d bytes)",
            len(palette),
            document.format.value,
            len(document.payload.encode("utf-8")),
        )
        used = deliver_with_fallback(document, primary, fallback)
        return ExportResult(
            document=document,
            channel=getattr(used, "name", type(used).__name__),
            fell_back=used is not primary,
        )

    def _route(self, fmt: ExportFormat) -> tuple[Delivery, Optional[Delivery]]:
        if fmt is ExportFormat.FIGMA and self._clipboard is not None:
            return self._clipboard, self._file
        return self._file, None


__all__ = ["ExportService", "ExportResult"]
