"""御城印マップ — コマンドラインエントリーポイント.

処理フロー:
  1. 共有フラグメントから表示条件を復元
  2. CSV が指定されていれば取り込み（失敗時は初期データのまま）
  3. 絞り込み結果と共有リンクを出力
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime

from gojoin.app import CatalogApp
from gojoin.config import BASE_URL, CSV_COLUMNS, LOG_DIR, LOG_LEVEL
from gojoin.i18n import LANGUAGE_NAMES, t


def setup_logging() -> None:
    """ロギングの初期設定."""
    log_file = LOG_DIR / f"gojoin_{datetime.now().strftime('%Y%m%d')}.log"
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gojoin", description="御城印マップの絞り込み結果を出力する")
    parser.add_argument("--fragment", default="", help="共有リンクのフラグメント (例: lang=en&region=近畿)")
    parser.add_argument(
        "--csv", dest="csv_source",
        help=f"取り込む CSV のパスまたは URL（列: {','.join(CSV_COLUMNS)}）",
    )
    parser.add_argument("--base-url", default=BASE_URL, help="共有リンクのベース URL")
    return parser


def run(argv: list[str] | None = None) -> int:
    """メイン処理."""
    args = build_parser().parse_args(argv)
    setup_logging()
    logger = logging.getLogger(__name__)

    app = CatalogApp(fragment=args.fragment, base_url=args.base_url)
    exit_code = 0

    if args.csv_source:
        result = app.import_source(args.csv_source)
        if result.ok:
            logger.info("CSV を取り込みました: %d 件", len(result.records))
        else:
            logger.warning("CSV を取り込めませんでした (%s)。既存データのまま表示します",
                           result.status.value)
            exit_code = 1

    lang = app.state.language
    sites = app.visible()
    print(f"{t(lang, 'title')}: {len(sites)} / {len(app.store)}")
    print(f"{t(lang, 'lang')}: {LANGUAGE_NAMES[lang]}")
    for site in sites:
        print(f"  {site.display_name(lang)}  {site.prefecture} / {site.region}")
    print(f"{t(lang, 'openHere')}: {app.share_url()}")
    return exit_code


if __name__ == "__main__":
    sys.exit(run())
