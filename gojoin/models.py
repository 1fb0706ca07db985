"""データモデル定義."""

from __future__ import annotations

from dataclasses import dataclass, field

from gojoin.config import DEFAULT_LANGUAGE, LANGUAGES


@dataclass
class SiteRecord:
    """御城印がもらえる城 1 件を表す."""

    id: str  # ストア内で一意
    names: dict[str, str] = field(default_factory=dict)  # 言語コード → 名称
    prefecture: str = ""
    region: str = ""
    lat: float = 0.0
    lng: float = 0.0
    url: str = ""  # 公式サイト
    gojoin_url: str = ""  # 御城印の案内ページ

    def display_name(self, lang: str) -> str:
        """表示用の名称を返す.

        指定言語 → 既定言語 → 任意の言語 → id の順にフォールバックする。
        """
        name = self.names.get(lang) or self.names.get(DEFAULT_LANGUAGE)
        if name:
            return name
        for lang_code in LANGUAGES:
            if self.names.get(lang_code):
                return self.names[lang_code]
        return self.id

    def search_text(self) -> str:
        """全言語の名称を固定順でスペース連結した検索用文字列."""
        return " ".join(self.names.get(lang, "") for lang in LANGUAGES)

    def has_name(self) -> bool:
        return any(self.names.get(lang) for lang in LANGUAGES)


@dataclass(frozen=True)
class ViewParams:
    """絞り込み・表示パラメータ.

    region / prefecture の "" は未選択を表す。
    """

    language: str = DEFAULT_LANGUAGE
    query: str = ""
    region: str = ""
    prefecture: str = ""
