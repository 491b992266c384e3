"""Tests for the prefecture region directory."""

from types import MappingProxyType

import pytest

from jmaforecast.config.regions import PREFECTURES, UNKNOWN_REGION
from jmaforecast.ingest.region_directory import RegionDirectory


@pytest.fixture
def directory() -> RegionDirectory:
    return RegionDirectory()


class TestLookup:
    def test_all_prefectures_present(self, directory: RegionDirectory):
        assert len(directory) == 47

    @pytest.mark.parametrize(
        "code,name",
        [
            ("016000", "北海道"),
            ("130000", "東京都"),
            ("260000", "京都府"),
            ("270000", "大阪府"),
            ("400000", "福岡県"),
            ("471000", "沖縄県"),
        ],
    )
    def test_known_codes(self, directory: RegionDirectory, code: str, name: str):
        assert directory.lookup(code) == name

    def test_every_table_entry_round_trips(self, directory: RegionDirectory):
        for code, name in PREFECTURES.items():
            assert directory.lookup(code) == name

    @pytest.mark.parametrize("code", ["999999", "000000", "270001", "", "abc"])
    def test_unknown_returns_sentinel(self, directory: RegionDirectory, code: str):
        assert directory.lookup(code) == UNKNOWN_REGION

    def test_strips_whitespace(self, directory: RegionDirectory):
        assert directory.lookup(" 130000\n") == "東京都"

    def test_names_are_unique(self):
        assert len(set(PREFECTURES.values())) == 47

    def test_codes_are_six_digits(self):
        for code in PREFECTURES:
            assert len(code) == 6
            assert code.isdigit()


class TestMembership:
    def test_is_known(self, directory: RegionDirectory):
        assert directory.is_known("270000")
        assert not directory.is_known("999999")

    def test_contains(self, directory: RegionDirectory):
        assert "130000" in directory
        assert "999999" not in directory
        assert 130000 not in directory

    def test_items_sorted_by_code(self, directory: RegionDirectory):
        codes = [code for code, _ in directory.items()]
        assert codes == sorted(codes)
        assert codes[0] == "016000"

    def test_injected_table(self):
        directory = RegionDirectory({"123456": "テスト県"})
        assert directory.lookup("123456") == "テスト県"
        assert directory.lookup("130000") == UNKNOWN_REGION


class TestImmutability:
    def test_table_is_read_only(self):
        assert isinstance(PREFECTURES, MappingProxyType)
        with pytest.raises(TypeError):
            PREFECTURES["999999"] = "架空県"  # type: ignore[index]
