"""
どこで: `util.paths`。
何を: エクスポート出力先ディレクトリの生成と解決ユーティリティを提供する。
なぜ: 配信層から簡潔に保存先を扱え、並行呼び出しでも安全に作成できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from .utils import _find_marked_root


def default_exports_dir(start: Path | None = None) -> Path:
    """既定の出力先 `<root>/data/exports` を返す（作成はしない）。

    ルートはプロジェクトの目印（`.git`/`pyproject.toml`/`configs/`）から推定する。
    目印が無い場合（site-packages へ通常インストールされた場合など）はカレントディレクトリ。
    """
    root = _find_marked_root(start if start is not None else Path(__file__).parent)
    if root is None:
        root = Path.cwd()
    return root / "data" / "exports"


def ensure_exports_dir(path: str | Path | None = None) -> Path:
    """エクスポート出力先を作成して返す。

    - `path` 指定時はそのディレクトリ（`~` 展開あり）を作成する。
    - 未指定時は `default_exports_dir()` に作成する。
    - 既存の場合もそのまま Path を返す。
    - 並行呼び出しに対して `exist_ok=True` で安全。
    """
    out = Path(path).expanduser() if path is not None else default_exports_dir()
    out.mkdir(parents=True, exist_ok=True)
    return out
