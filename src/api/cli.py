"""
どこで: `api.cli`。
何を: `ramps-export` コマンド（テーマ/ニュートラル選択、形式選択、出力先指定）。
なぜ: 生成〜配信をスクリプトや CI から一発で実行できるようにするため。

Usage:
    ramps-export --light --format csv --out ./exports
    ramps-export --dark --format figma          # クリップボード優先、失敗時はファイル
    ramps-export --neutral --format tokens --stdout
    ramps-export --format all
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from common import settings
from common.logging import setup_default_logging
from ramps.errors import RampError
from ramps.export import ExportFormat, export_palette
from util.utils import load_config

from .palette import build_palette, make_service

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = [fmt.value for fmt in ExportFormat] + ["all"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ramps-export",
        description="Generate HSLuv color ramps and export them as JSON, CSV, DTCG tokens or Figma styles.",
    )
    theme = parser.add_mutually_exclusive_group()
    theme.add_argument("--dark", dest="dark_mode", action="store_true", default=None, help="dark theme ramps")
    theme.add_argument("--light", dest="dark_mode", action="store_false", default=None, help="light theme ramps")
    parser.add_argument("--neutral", action="store_true", help="export the neutral (gray) ramps")
    parser.add_argument(
        "-f",
        "--format",
        choices=_FORMAT_CHOICES,
        default="json",
        help="export format (default: json)",
    )
    parser.add_argument("-o", "--out", default=None, help="output directory for exported files")
    parser.add_argument("--stdout", action="store_true", help="print the document instead of delivering it")
    parser.add_argument(
        "--no-clipboard",
        dest="clipboard",
        action="store_false",
        default=None,
        help="write Figma styles straight to a file",
    )
    parser.add_argument("--log-level", default=None, help="logging level (default: RAMPS_LOG_LEVEL or INFO)")
    return parser


def _formats(value: str) -> list[ExportFormat]:
    if value == "all":
        return list(ExportFormat)
    return [ExportFormat.from_value(value)]


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    setup_default_logging(args.log_level or config.get("log_level") or settings.get().LOG_LEVEL)

    try:
        palette = build_palette(args.dark_mode, neutral=args.neutral, config=config)
        formats = _formats(args.format)
        if args.stdout:
            for fmt in formats:
                doc = export_palette(palette, fmt)
                sys.stdout.write(doc.payload)
                if not doc.payload.endswith("\n"):
                    sys.stdout.write("\n")
            return 0
        service = make_service(args.out, clipboard=args.clipboard, config=config)
        for fmt in formats:
            result = service.export(palette, fmt)
            if result.fell_back:
                logger.info("%s delivered via %s fallback", result.document.filename, result.channel)
    except RampError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
