"""設定モジュール — 環境変数・定数定義."""

import os
from pathlib import Path

from dotenv import load_dotenv

# .env はプロジェクトルートに配置
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(_PROJECT_ROOT / ".env")

# --- 言語 ---
LANGUAGES = ("ja", "en", "zh")  # 検索対象の連結順もこの順
DEFAULT_LANGUAGE: str = os.getenv("GOJOIN_DEFAULT_LANG", "ja")
if DEFAULT_LANGUAGE not in LANGUAGES:
    raise ValueError(f"GOJOIN_DEFAULT_LANG は {LANGUAGES} のいずれか: {DEFAULT_LANGUAGE!r}")

# --- CSV 取り込み ---
CSV_DELIMITER = ","
CSV_COLUMNS = (
    "id", "name_ja", "name_en", "name_zh",
    "prefecture", "region", "lat", "lng", "url", "gojoin_url",
)

# --- リクエスト設定（リモート CSV 取得） ---
REQUEST_TIMEOUT = float(os.getenv("GOJOIN_REQUEST_TIMEOUT", "15"))  # 秒
USER_AGENT = "gojoin-map/0.1"

# --- 共有リンク ---
BASE_URL: str = os.getenv("GOJOIN_BASE_URL", "http://localhost:3000/")

# --- ログ ---
LOG_LEVEL: str = os.getenv("GOJOIN_LOG_LEVEL", "INFO")
LOG_DIR = _PROJECT_ROOT / "logs"
LOG_DIR.mkdir(exist_ok=True)
