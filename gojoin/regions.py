"""地方・都道府県の区分定義."""

from __future__ import annotations

# 地方 → 都道府県（表示順を保持）
REGIONS: dict[str, tuple[str, ...]] = {
    "北海道・東北": ("北海道", "青森", "岩手", "宮城", "秋田", "山形", "福島"),
    "関東": ("東京", "神奈川", "千葉", "埼玉", "茨城", "栃木", "群馬"),
    "甲信越": ("山梨", "長野", "新潟"),
    "北陸": ("富山", "石川", "福井"),
    "東海": ("静岡", "愛知", "岐阜", "三重"),
    "近畿": ("京都", "滋賀", "大阪", "兵庫", "奈良", "和歌山"),
    "中国": ("鳥取", "島根", "岡山", "広島", "山口"),
    "四国": ("香川", "徳島", "愛媛", "高知"),
    "九州・沖縄": ("福岡", "佐賀", "長崎", "熊本", "大分", "宮崎", "鹿児島", "沖縄"),
}

PREFECTURE_TO_REGION: dict[str, str] = {
    pref: region for region, prefs in REGIONS.items() for pref in prefs
}


def is_known_region(region: str) -> bool:
    return region in REGIONS


def is_known_prefecture(prefecture: str) -> bool:
    return prefecture in PREFECTURE_TO_REGION


def region_of(prefecture: str) -> str | None:
    """都道府県が属する地方を返す。不明なら None."""
    return PREFECTURE_TO_REGION.get(prefecture)


def belongs_to(prefecture: str, region: str) -> bool:
    """都道府県が指定地方に属するか."""
    return region_of(prefecture) == region


def prefecture_choices(region: str = "") -> list[str]:
    """都道府県セレクトの選択肢.

    地方が選択されていればその地方の都道府県、未選択なら全都道府県。
    """
    if region:
        return list(REGIONS.get(region, ()))
    return list(PREFECTURE_TO_REGION)
