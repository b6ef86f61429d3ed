"""
どこで: `common` パッケージ。
何を: ロギング初期化・環境変数パース・型付き設定など、層をまたいで使う軽量基盤。
なぜ: コア（`ramps`）や配信層から再利用する共通部分を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
