"""初期データ（検証済みの城）.

CSV 取り込みで置き換えられるまで使われる。取り込みパイプラインを通さないため、
ここに書くレコードは検証済みとして扱う。
"""

from gojoin.models import SiteRecord

SEED: tuple[SiteRecord, ...] = (
    SiteRecord(
        id="matsumoto",
        names={"ja": "松本城", "en": "Matsumoto Castle", "zh": "松本城"},
        prefecture="長野",
        region="甲信越",
        lat=36.2381,
        lng=137.9680,
        url="https://www.matsumoto-castle.jp/",
        gojoin_url="https://www.matsumoto-castle.jp/topics/8063.html",
    ),
    SiteRecord(
        id="kumamoto",
        names={"ja": "熊本城", "en": "Kumamoto Castle", "zh": "熊本城"},
        prefecture="熊本",
        region="九州・沖縄",
        lat=32.8067,
        lng=130.7056,
        url="https://castle.kumamoto-guide.jp/",
        gojoin_url=(
            "https://kumamoto-icb.or.jp/%E7%86%8A%E6%9C%AC%E5%9F%8E%E3%80%8C"
            "%E5%BE%A1%E5%9F%8E%E5%8D%B0%E3%80%8D%E3%81%AE%E3%81%94%E7%B4%B9%E4%BB%8B/"
        ),
    ),
    SiteRecord(
        id="hirosaki",
        names={"ja": "弘前城", "en": "Hirosaki Castle", "zh": "弘前城"},
        prefecture="青森",
        region="北海道・東北",
        lat=40.6081,
        lng=140.4612,
        url="https://www.hirosakipark.jp/",
        gojoin_url="https://www.hirosakipark.jp/sakura/cherryblossomfestival/souvenir/goshuin/",
    ),
    SiteRecord(
        id="himeji",
        names={"ja": "姫路城", "en": "Himeji Castle", "zh": "姬路城"},
        prefecture="兵庫",
        region="近畿",
        lat=34.8394,
        lng=134.6939,
        url="https://www.city.himeji.lg.jp/castle/",
        gojoin_url="https://www.himeji-kanko.jp/event/1612/",
    ),
    SiteRecord(
        id="hamamatsu",
        names={"ja": "浜松城", "en": "Hamamatsu Castle", "zh": "滨松城"},
        prefecture="静岡",
        region="東海",
        lat=34.7179,
        lng=137.7238,
        url="https://hamamatsu-jyo.jp/",
        gojoin_url="https://shizuoka.hellonavi.jp/gojyoin",
    ),
)
