"""
どこで: `engine.export.delivery`。
何を: 完成したエクスポート文書の配信チャネル（ファイル保存/クリップボード）とフォールバック。
なぜ: コア（`ramps`）からプラットフォーム API を切り離し、テストで差し替え可能にするため。

契約:
- `Delivery.deliver(payload, filename, mime_type) -> bool`（成功/失敗のみ返す）。
- 一次チャネルは 1 回だけ呼ぶ。失敗時はフォールバックへ同一 payload を渡す（再試行しない）。
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Optional, Protocol, Sequence

from ramps.errors import DeliveryError
from ramps.export import ExportDocument
from util.paths import ensure_exports_dir

logger = logging.getLogger(__name__)


class Delivery(Protocol):
    """文書を外部へ渡す単一メソッドの配信チャネル。"""

    name: str

    def deliver(self, payload: str, filename: str, mime_type: str) -> bool: ...


class FileDelivery:
    """ディレクトリへファイルとして保存する（ダウンロード相当）。

    `.part` に書き出してから rename するため、失敗時に中途半端なファイルを残さない。
    """

    name = "file"

    def __init__(self, directory: str | Path | None = None) -> None:
        self._directory = directory
        self.last_path: Optional[Path] = None

    def deliver(self, payload: str, filename: str, mime_type: str) -> bool:
        part_path: Optional[Path] = None
        try:
            out_dir = ensure_exports_dir(self._directory)
            final_path = out_dir / filename
            part_path = final_path.with_suffix(final_path.suffix + ".part")
            # newline="" で payload のバイト列をそのまま保存
            with part_path.open("w", encoding="utf-8", newline="") as fp:
                fp.write(payload)
            part_path.replace(final_path)
        except OSError as e:
            logger.warning("file delivery of %s failed: %s", filename, e)
            if part_path is not None:
                try:
                    part_path.unlink(missing_ok=True)
                except OSError:
                    logger.debug("could not remove %s", part_path)
            return False
        self.last_path = final_path
        logger.info("saved %s (%s)", final_path, mime_type)
        return True


# (コマンド, 引数) の候補。先に見つかったものを使う。
_CLIPBOARD_COMMANDS: dict[str, Sequence[tuple[str, ...]]] = {
    "darwin": (("pbcopy",),),
    "win32": (("clip",),),
    "linux": (
        ("wl-copy",),
        ("xclip", "-selection", "clipboard"),
        ("xsel", "--clipboard", "--input"),
    ),
}


class ClipboardDelivery:
    """プラットフォームのクリップボードコマンドへ payload を流し込む。"""

    name = "clipboard"

    def __init__(
        self,
        commands: Sequence[tuple[str, ...]] | None = None,
        *,
        timeout: float = 5.0,
    ) -> None:
        if commands is None:
            key = "linux" if sys.platform.startswith("linux") else sys.platform
            commands = _CLIPBOARD_COMMANDS.get(key, ())
        self._commands = tuple(commands)
        self._timeout = timeout

    def deliver(self, payload: str, filename: str, mime_type: str) -> bool:
        for cmd in self._commands:
            if shutil.which(cmd[0]) is None:
                continue
            try:
                subprocess.run(
                    list(cmd),
                    input=payload.encode("utf-8"),
                    check=True,
                    timeout=self._timeout,
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                )
            except (OSError, subprocess.SubprocessError) as e:
                logger.debug("clipboard command %s failed: %s", cmd[0], e)
                continue
            logger.info("copied %s to clipboard via %s", filename, cmd[0])
            return True
        logger.warning("no clipboard command succeeded for %s", filename)
        return False


def deliver_with_fallback(
    document: ExportDocument,
    primary: Delivery,
    fallback: Delivery | None = None,
) -> Delivery:
    """一次チャネルで配信し、失敗時はフォールバックへ同一内容を渡す。

    Returns
    -------
    Delivery
        配信に成功したチャネル。

    Raises
    ------
    DeliveryError
        すべてのチャネルが失敗した場合。
    """
    tried: list[str] = []
    channels = [primary] if fallback is None else [primary, fallback]
    for channel in channels:
        tried.append(getattr(channel, "name", type(channel).__name__))
        if channel.deliver(document.payload, document.filename, document.mime_type):
            return channel
        if channel is primary and fallback is not None:
            logger.warning(
                "%s delivery of %s failed; falling back to %s",
                tried[-1],
                document.filename,
                getattr(fallback, "name", type(fallback).__name__),
            )
    raise DeliveryError(document.filename, tried)


__all__ = ["Delivery", "FileDelivery", "ClipboardDelivery", "deliver_with_fallback"]
