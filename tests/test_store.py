"""store / models / regions のユニットテスト."""

from gojoin.models import SiteRecord
from gojoin.regions import belongs_to, prefecture_choices, region_of
from gojoin.seed import SEED
from gojoin.store import RecordStore


class TestRecordStore:
    """RecordStore のテスト."""

    def test_initial(self):
        store = RecordStore(SEED)

        assert store.current() == SEED
        assert len(store) == 5
        assert store.version == 0

    def test_replace(self):
        store = RecordStore(SEED)
        new = [SiteRecord(id="x", lat=1.0, lng=2.0)]

        store.replace(new)

        assert list(store.current()) == new
        assert store.version == 1

    def test_replace_copies_input(self):
        store = RecordStore()
        new = [SiteRecord(id="x")]
        store.replace(new)
        new.append(SiteRecord(id="y"))

        assert len(store) == 1


class TestSiteRecord:
    """SiteRecord のテスト."""

    def test_display_name(self):
        site = SEED[3]

        assert site.display_name("ja") == "姫路城"
        assert site.display_name("en") == "Himeji Castle"
        assert site.display_name("zh") == "姬路城"

    def test_display_name_fallback(self):
        assert SiteRecord(id="x", names={"ja": "某城"}).display_name("en") == "某城"
        assert SiteRecord(id="x", names={"zh": "某城"}).display_name("en") == "某城"
        assert SiteRecord(id="x").display_name("en") == "x"

    def test_search_text_order(self):
        site = SiteRecord(id="x", names={"zh": "丙", "ja": "甲", "en": "B"})
        assert site.search_text() == "甲 B 丙"

    def test_has_name(self):
        assert SiteRecord(id="x", names={"en": "X"}).has_name()
        assert not SiteRecord(id="x", names={"ja": ""}).has_name()


class TestRegions:
    """地方区分のテスト."""

    def test_region_of(self):
        assert region_of("熊本") == "九州・沖縄"
        assert region_of("Narnia") is None

    def test_belongs_to(self):
        assert belongs_to("長野", "甲信越")
        assert not belongs_to("長野", "近畿")

    def test_prefecture_choices(self):
        assert prefecture_choices("北陸") == ["富山", "石川", "福井"]
        assert len(prefecture_choices()) == 47

    def test_seed_consistent(self):
        """初期データは地方区分と整合していること."""
        for site in SEED:
            assert belongs_to(site.prefecture, site.region), site.id
            assert site.has_name()
