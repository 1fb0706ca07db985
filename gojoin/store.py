"""城レコードの保持."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gojoin.models import SiteRecord

logger = logging.getLogger(__name__)


class RecordStore:
    """現在有効な城レコード一覧を保持する.

    更新は replace() による全件置換のみ。検証は行わない（取り込み側の責務）。
    """

    def __init__(self, initial: Iterable[SiteRecord] = ()) -> None:
        self._records: tuple[SiteRecord, ...] = tuple(initial)
        self.version = 0  # replace() ごとに加算。派生ビューの無効化判定に使う

    def replace(self, records: Iterable[SiteRecord]) -> None:
        """レコード一覧を丸ごと置き換える."""
        self._records = tuple(records)
        self.version += 1
        logger.info("レコードを置換: %d 件 (version=%d)", len(self._records), self.version)

    def current(self) -> tuple[SiteRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)
