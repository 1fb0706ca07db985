"""共有リンク用 URL フラグメントと表示パラメータの同期.

フラグメントは "lang=ja&q=...&region=...&pref=..." 形式。
未選択・空の値はキーごと省略して共有リンクを短く保つ。
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from urllib.parse import parse_qsl, urlencode

from gojoin.config import DEFAULT_LANGUAGE, LANGUAGES
from gojoin.exceptions import MalformedFragmentError
from gojoin.models import ViewParams
from gojoin.regions import belongs_to, is_known_prefecture, is_known_region

logger = logging.getLogger(__name__)

# ViewParams の属性名 → フラグメントのキー
FRAGMENT_KEYS = {
    "language": "lang",
    "query": "q",
    "region": "region",
    "prefecture": "pref",
}


def encode_fragment(params: ViewParams) -> str:
    """表示パラメータをフラグメント文字列（先頭の # なし）にする."""
    pairs = [(FRAGMENT_KEYS["language"], params.language)]
    for attr in ("query", "region", "prefecture"):
        value = getattr(params, attr)
        if value:
            pairs.append((FRAGMENT_KEYS[attr], value))
    return urlencode(pairs)


def decode_fragment(fragment: str | None) -> ViewParams:
    """フラグメント文字列を表示パラメータに戻す.

    キーがない値・解釈できない値はそのパラメータの既定値になる。
    起動を止めることはない。
    """
    if not fragment:
        return ViewParams()

    raw = dict(parse_qsl(fragment.lstrip("#?"), keep_blank_values=True))

    language = _decode_value(raw, FRAGMENT_KEYS["language"], _check_language, DEFAULT_LANGUAGE)
    query = raw.get(FRAGMENT_KEYS["query"], "")
    region = _decode_value(raw, FRAGMENT_KEYS["region"], _check_region, "")
    prefecture = _decode_value(
        raw, FRAGMENT_KEYS["prefecture"], lambda v: _check_prefecture(v, region), ""
    )
    return ViewParams(language=language, query=query, region=region, prefecture=prefecture)


def _decode_value(
    raw: dict[str, str], key: str, check: Callable[[str], str], default: str
) -> str:
    value = raw.get(key)
    if not value:
        return default
    try:
        return check(value)
    except MalformedFragmentError as e:
        logger.warning("%s。既定値 %r を使います", e, default)
        return default


def _check_language(value: str) -> str:
    if value not in LANGUAGES:
        raise MalformedFragmentError("lang", value)
    return value


def _check_region(value: str) -> str:
    if not is_known_region(value):
        raise MalformedFragmentError("region", value)
    return value


def _check_prefecture(value: str, region: str) -> str:
    if not is_known_prefecture(value):
        raise MalformedFragmentError("pref", value)
    if region and not belongs_to(value, region):
        raise MalformedFragmentError("pref", value)
    return value


class ShareableState:
    """表示パラメータの持ち主. 変更のたびにフラグメントへ即時書き戻す.

    画面側は subscribe() で新しいフラグメントを受け取り、location.hash に反映する。
    """

    def __init__(self, params: ViewParams | None = None) -> None:
        self._params = params or ViewParams()
        self._fragment = encode_fragment(self._params)
        self._listeners: list[Callable[[str], None]] = []

    @classmethod
    def from_fragment(cls, fragment: str | None) -> ShareableState:
        """起動時のフラグメントから状態を復元する."""
        return cls(decode_fragment(fragment))

    @property
    def params(self) -> ViewParams:
        return self._params

    @property
    def fragment(self) -> str:
        return self._fragment

    @property
    def language(self) -> str:
        return self._params.language

    @property
    def query(self) -> str:
        return self._params.query

    @property
    def region(self) -> str:
        return self._params.region

    @property
    def prefecture(self) -> str:
        return self._params.prefecture

    def subscribe(self, callback: Callable[[str], None]) -> None:
        """フラグメント更新の通知先を登録する."""
        self._listeners.append(callback)

    def set_language(self, language: str) -> None:
        if language not in LANGUAGES:
            raise ValueError(f"未対応の言語: {language!r}")
        self._update(language=language)

    def set_query(self, query: str) -> None:
        self._update(query=query)

    def set_region(self, region: str) -> None:
        """地方を選ぶ. 選択中の都道府県がその地方に属さなければ解除する."""
        if region and not is_known_region(region):
            raise ValueError(f"不明な地方: {region!r}")
        prefecture = self._params.prefecture
        if region and prefecture and not belongs_to(prefecture, region):
            prefecture = ""
        self._update(region=region, prefecture=prefecture)

    def set_prefecture(self, prefecture: str) -> None:
        if prefecture:
            if not is_known_prefecture(prefecture):
                raise ValueError(f"不明な都道府県: {prefecture!r}")
            if self._params.region and not belongs_to(prefecture, self._params.region):
                raise ValueError(
                    f"{prefecture!r} は選択中の地方 {self._params.region!r} に属しません"
                )
        self._update(prefecture=prefecture)

    def share_url(self, base_url: str) -> str:
        """現在の状態を再現する共有リンク."""
        base = base_url.split("#", 1)[0]
        return f"{base}#{self._fragment}"

    def _update(self, **changes: str) -> None:
        self._params = replace(self._params, **changes)
        self._fragment = encode_fragment(self._params)
        logger.debug("フラグメント更新: %s", self._fragment)
        for callback in self._listeners:
            callback(self._fragment)
