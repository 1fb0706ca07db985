"""御城印マップのアプリケーション本体.

レコードストア・共有状態・取り込み・絞り込みをまとめ、画面側に渡す値を用意する。
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from gojoin.config import BASE_URL
from gojoin.exceptions import PayloadDecodeError
from gojoin.fragment import ShareableState
from gojoin.ingest import IngestResult, IngestStatus, decode_payload, ingest, read_source
from gojoin.models import SiteRecord, ViewParams
from gojoin.query import visible
from gojoin.seed import SEED
from gojoin.store import RecordStore

logger = logging.getLogger(__name__)


class CatalogApp:
    """城カタログ 1 画面分の状態."""

    def __init__(
        self,
        seed: Iterable[SiteRecord] = SEED,
        fragment: str | None = None,
        base_url: str = BASE_URL,
    ) -> None:
        self.store = RecordStore(seed)
        self.state = ShareableState.from_fragment(fragment)
        self.base_url = base_url
        # (store.version, params) → 派生ビュー
        self._cache_key: tuple[int, ViewParams] | None = None
        self._cache: tuple[SiteRecord, ...] = ()

    def visible(self) -> tuple[SiteRecord, ...]:
        """現在の条件で表示するレコード. ストアか条件が変わったときだけ再計算する."""
        key = (self.store.version, self.state.params)
        if key != self._cache_key:
            self._cache = tuple(visible(self.store.current(), self.state.params))
            self._cache_key = key
        return self._cache

    def import_text(self, text: str) -> IngestResult:
        return ingest(text, self.store)

    def import_source(self, source: str | Path) -> IngestResult:
        """ファイルまたは URL から CSV を取り込む."""
        data = read_source(source)
        if data is None:
            return IngestResult(status=IngestStatus.UNREADABLE)
        try:
            text = decode_payload(data)
        except PayloadDecodeError as e:
            logger.error("CSV デコード失敗: source=%s, error=%s", source, e)
            return IngestResult(status=IngestStatus.UNREADABLE)
        return self.import_text(text)

    def markers(self) -> list[tuple[str, str, float, float]]:
        """地図マーカー用の (id, 表示名, 緯度, 経度)."""
        lang = self.state.language
        return [(r.id, r.display_name(lang), r.lat, r.lng) for r in self.visible()]

    def share_url(self) -> str:
        return self.state.share_url(self.base_url)
