"""CSV 取り込みモジュール.

処理フロー:
  1. 取り込み元（ローカルファイル or URL）からバイト列を読む
  2. UTF-8 としてデコード
  3. 行分割 → ヘッダー行 → データ行をカンマ区切りでパース
  4. 緯度・経度が数値として読める行だけを採用
  5. 1 行以上採用できればストアを全件置換（マージはしない）

クォート・エスケープには対応しない。カンマを含む値は表現できない。
"""

from __future__ import annotations

import enum
import logging
import math
import re
from dataclasses import dataclass, field
from pathlib import Path

import requests

from gojoin.config import CSV_COLUMNS, CSV_DELIMITER, LANGUAGES, REQUEST_TIMEOUT, USER_AGENT
from gojoin.exceptions import EmptyInputError, PayloadDecodeError
from gojoin.models import SiteRecord
from gojoin.regions import belongs_to
from gojoin.store import RecordStore

logger = logging.getLogger(__name__)

# CR / LF / CRLF のみを行区切りとする
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class IngestStatus(enum.Enum):
    """取り込み結果の種別. REPLACED 以外はストアを変更しない."""

    REPLACED = "replaced"
    EMPTY_INPUT = "empty_input"
    NO_VALID_ROWS = "no_valid_rows"
    UNREADABLE = "unreadable"


@dataclass
class IngestResult:
    """取り込み 1 回の結果."""

    status: IngestStatus
    records: list[SiteRecord] = field(default_factory=list)  # 採用したレコード
    dropped: int = 0  # 座標が読めず捨てた行数
    duplicates: list[str] = field(default_factory=list)  # 後勝ちで上書きされた id

    @property
    def ok(self) -> bool:
        return self.status is IngestStatus.REPLACED


def read_source(source: str | Path) -> bytes | None:
    """取り込み元のバイト列を読む.

    Args:
        source: ローカルファイルのパス、または http(s) の URL

    Returns:
        バイト列。失敗時は None。
    """
    source_str = str(source)
    if source_str.startswith(("http://", "https://")):
        try:
            resp = requests.get(
                source_str,
                headers={"User-Agent": USER_AGENT, "Accept": "text/csv,text/plain,*/*"},
                timeout=REQUEST_TIMEOUT,
            )
            resp.raise_for_status()
            return resp.content
        except requests.RequestException as e:
            logger.error("CSV 取得失敗: url=%s, error=%s", source_str, e)
            return None

    try:
        return Path(source).read_bytes()
    except OSError as e:
        logger.error("CSV 読み込み失敗: path=%s, error=%s", source_str, e)
        return None


def decode_payload(data: bytes) -> str:
    """UTF-8 としてデコードする. 先頭の BOM（表計算ソフトの出力）は除去する.

    Raises:
        PayloadDecodeError: UTF-8 として不正なバイト列
    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise PayloadDecodeError(f"UTF-8 としてデコードできません: {e}") from e


def parse_csv(raw_text: str) -> tuple[list[SiteRecord], int, list[str]]:
    """CSV テキストをレコードのリストに変換する.

    Returns:
        (採用レコード, 捨てた行数, 上書きされた id) のタプル。
        id が重複した場合は後の行が勝ち、位置は最初の出現位置のまま。
        id が空の行は重複扱いせず、すべてファイル順に残す。

    Raises:
        EmptyInputError: 空行以外の行がない
    """
    lines = [line for line in _LINE_BREAK.split(raw_text) if line.strip()]
    if not lines:
        raise EmptyInputError("取り込みテキストが空です")

    headers = [h.strip() for h in lines[0].split(CSV_DELIMITER)]
    missing = [c for c in CSV_COLUMNS if c not in headers]
    if missing:
        logger.info("ヘッダーにない列（空として扱う）: %s", ", ".join(missing))

    accepted: list[SiteRecord] = []
    positions: dict[str, int] = {}  # id → accepted 内の位置
    duplicates: list[str] = []
    dropped = 0
    for line_no, line in enumerate(lines[1:], start=2):
        row = _zip_row(headers, line)
        record = _build_record(row)
        if record is None:
            dropped += 1
            logger.debug("座標が不正な行を除外: line=%d, lat=%r, lng=%r",
                         line_no, row.get("lat"), row.get("lng"))
            continue

        if not belongs_to(record.prefecture, record.region):
            # 区分外の組み合わせも受け入れる（表示上の不整合になるだけ）
            logger.warning("地方と都道府県の組み合わせが区分外: id=%s, %s/%s",
                           record.id, record.region, record.prefecture)
        if record.id in positions:
            duplicates.append(record.id)
            logger.warning("id が重複。後の行で上書き: id=%s, line=%d", record.id, line_no)
            accepted[positions[record.id]] = record
            continue

        if record.id:
            positions[record.id] = len(accepted)
        accepted.append(record)

    return accepted, dropped, duplicates


def ingest(raw_text: str, store: RecordStore) -> IngestResult:
    """CSV テキストを取り込み、1 行以上採用できればストアを置き換える."""
    try:
        records, dropped, duplicates = parse_csv(raw_text)
    except EmptyInputError as e:
        logger.warning("取り込み中止: %s", e)
        return IngestResult(status=IngestStatus.EMPTY_INPUT)

    if not records:
        logger.warning("有効な行がありません（除外 %d 行）。データは変更しません", dropped)
        return IngestResult(status=IngestStatus.NO_VALID_ROWS, dropped=dropped)

    store.replace(records)
    logger.info("CSV 取り込み完了: 採用 %d 件, 除外 %d 行, 重複 %d 件",
                len(records), dropped, len(duplicates))
    return IngestResult(
        status=IngestStatus.REPLACED,
        records=records,
        dropped=dropped,
        duplicates=duplicates,
    )


def _zip_row(headers: list[str], line: str) -> dict[str, str]:
    """データ行をヘッダー名と位置で対応づける. 余分な列は無視、不足列は欠損."""
    cols = line.split(CSV_DELIMITER)
    return {h: c.strip() for h, c in zip(headers, cols)}


def _build_record(row: dict[str, str]) -> SiteRecord | None:
    """1 行分の dict からレコードを作る. 座標が読めなければ None."""
    lat = _parse_coordinate(row.get("lat"))
    lng = _parse_coordinate(row.get("lng"))
    if lat is None or lng is None:
        return None

    return SiteRecord(
        id=row.get("id", ""),
        names={lang: row.get(f"name_{lang}", "") for lang in LANGUAGES},
        prefecture=row.get("prefecture", ""),
        region=row.get("region", ""),
        lat=lat,
        lng=lng,
        url=row.get("url", ""),
        gojoin_url=row.get("gojoin_url", ""),
    )


def _parse_coordinate(value: str | None) -> float | None:
    """有限の数値として読めれば float、そうでなければ None."""
    if not value:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number
