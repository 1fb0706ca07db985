"""テスト共通フィクスチャ."""

import pytest

from gojoin.models import SiteRecord


def make_site(id: str, region: str = "", prefecture: str = "", **names: str) -> SiteRecord:
    return SiteRecord(
        id=id,
        names=names,
        prefecture=prefecture,
        region=region,
        lat=35.0,
        lng=135.0,
    )


@pytest.fixture
def castles() -> list[SiteRecord]:
    """地方の違う 2 城."""
    return [
        make_site("A", region="関東", prefecture="東京", ja="東京城", en="Tokyo Castle"),
        make_site("B", region="近畿", prefecture="大阪", ja="大阪城", en="Osaka Castle"),
    ]
