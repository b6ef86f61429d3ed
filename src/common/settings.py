"""
どこで: `common.settings`
何を: プロジェクトの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。

環境変数:
- `RAMPS_DARK_MODE`: 既定のテーマ（1 でダーク）。
- `RAMPS_EXPORT_DIR`: ファイル出力先ディレクトリ。未設定時はプロジェクト直下 `data/exports/`。
- `RAMPS_LOG_LEVEL`: CLI のログレベル。
- `RAMPS_CLIPBOARD`: 0 でクリップボード配信を無効化（Figma 出力は直接ファイルへ）。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_str


@dataclass
class _Settings:
    # テーマ（元アプリの既定はダーク）
    DARK_MODE: bool = True

    # 出力
    EXPORT_DIR: str | None = None
    CLIPBOARD_ENABLED: bool = True

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。"""
    _settings.DARK_MODE = env_bool("RAMPS_DARK_MODE", True)
    _settings.EXPORT_DIR = env_str("RAMPS_EXPORT_DIR")
    _settings.CLIPBOARD_ENABLED = env_bool("RAMPS_CLIPBOARD", True)
    _settings.LOG_LEVEL = (env_str("RAMPS_LOG_LEVEL", "INFO") or "INFO").upper()


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
