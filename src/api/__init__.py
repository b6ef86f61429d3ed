"""
どこで: `api` 入口（高レベル公開 API）。
何を: パレット生成 `build_palette`・エクスポート `export`・CLI `main` を再輸出。
なぜ: 利用者が単一名前空間から構成解決→生成→配信まで完結できるようにするため。

Usage:
    from api import build_palette, export

    pal = build_palette(dark_mode=False)
    export(pal, "tokens")
"""

from .cli import main
from .palette import build_palette, export, make_service

__all__ = [
    "build_palette",
    "export",
    "make_service",
    "main",
]
