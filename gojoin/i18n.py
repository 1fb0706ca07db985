"""画面ラベルの言語別テーブル."""

from gojoin.config import DEFAULT_LANGUAGE

LABELS: dict[str, dict[str, str]] = {
    "ja": {
        "title": "御城印マップ",
        "subtitle": "御城印がもらえるお城を地図で検索",
        "search": "検索",
        "region": "地方",
        "prefecture": "都道府県",
        "all": "すべて",
        "data": "データ",
        "addFromCSV": "CSV読み込み",
        "qr": "QRコード",
        "openHere": "このページを開く",
        "lang": "言語",
        "stampAvailable": "御城印あり",
        "moreInfo": "詳細",
        "filter": "絞り込み",
    },
    "en": {
        "title": "Gojoin Castle Map",
        "subtitle": "Find castles offering Gojoin (castle stamps)",
        "search": "Search",
        "region": "Region",
        "prefecture": "Prefecture",
        "all": "All",
        "data": "Data",
        "addFromCSV": "Import CSV",
        "qr": "QR Code",
        "openHere": "Open this page",
        "lang": "Language",
        "stampAvailable": "Gojoin available",
        "moreInfo": "Details",
        "filter": "Filter",
    },
    "zh": {
        "title": "御城印地图",
        "subtitle": "在地图上查找可领取御城印的城堡",
        "search": "搜索",
        "region": "地区",
        "prefecture": "都道府县",
        "all": "全部",
        "data": "数据",
        "addFromCSV": "导入CSV",
        "qr": "二维码",
        "openHere": "打开此页面",
        "lang": "语言",
        "stampAvailable": "可领取御城印",
        "moreInfo": "详情",
        "filter": "筛选",
    },
}

LANGUAGE_NAMES = {"ja": "日本語", "en": "English", "zh": "中文"}


def t(lang: str, key: str) -> str:
    """ラベルを引く. 未対応の言語は既定言語、未定義のキーはキー自体を返す."""
    table = LABELS.get(lang) or LABELS[DEFAULT_LANGUAGE]
    return table.get(key, key)
