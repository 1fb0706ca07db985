"""表示対象の絞り込み."""

from __future__ import annotations

from collections.abc import Iterable

from gojoin.models import SiteRecord, ViewParams


def matches(record: SiteRecord, params: ViewParams) -> bool:
    """レコードが表示パラメータの条件をすべて満たすか.

    検索語は表示言語に関係なく全言語の名称に対して大文字小文字を無視した部分一致。
    """
    if params.region and record.region != params.region:
        return False
    if params.prefecture and record.prefecture != params.prefecture:
        return False
    if params.query:
        if params.query.lower() not in record.search_text().lower():
            return False
    return True


def visible(records: Iterable[SiteRecord], params: ViewParams) -> list[SiteRecord]:
    """条件を満たすレコードをストアの並び順のまま返す."""
    return [r for r in records if matches(r, params)]
