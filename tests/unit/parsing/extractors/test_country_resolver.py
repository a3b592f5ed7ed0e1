"""
Unit-тесты для определения страны точки.
"""

import pytest

from transport_orders.parsing.extractors.country_resolver import (
    CountryResolution,
    extract_country_from_text,
)
from transport_orders.parsing.keywords.country_lookup import YamlCountryLookup


class TestCountryResolution:

    @pytest.mark.parametrize("postal, expected", [
        ("FR-69002", "FR"),
        ("SW1A 1AA", "SW"),
        ("gb-123", "GB"),
        ("69002", None),
        ("1A234", None),
        (None, None),
        ("", None),
    ])
    def test_prefix(self, postal, expected):
        assert CountryResolution.prefix().resolve(postal) == expected

    def test_fixed_ignores_postal(self):
        resolution = CountryResolution.fixed("fr")
        assert resolution.resolve("SW1A 1AA") == "FR"
        assert resolution.resolve(None) == "FR"


class TestCountryFromText:

    @pytest.fixture
    def lookup(self):
        return YamlCountryLookup()

    def test_alpha3_token(self, lookup):
        assert extract_country_from_text(["BERLIN DEU"], lookup) == "DE"

    def test_alpha2_token(self, lookup):
        assert extract_country_from_text(["Warehouse PL 12"], lookup) == "PL"

    def test_only_first_line_is_used(self, lookup):
        assert extract_country_from_text(["Nothing here", "ITA"], lookup) is None

    def test_unknown_token(self, lookup):
        assert extract_country_from_text(["XYZ"], lookup) is None

    def test_without_lookup(self):
        assert extract_country_from_text(["DEU"], None) is None

    def test_empty_lines(self, lookup):
        assert extract_country_from_text([], lookup) is None


class TestYamlCountryLookup:

    def test_default_file(self):
        lookup = YamlCountryLookup()
        assert lookup.get_iso("fra") == "FR"
        assert lookup.get_iso("NO") == "NO"
        assert lookup.get_iso("NOR") == "NO"
        assert lookup.get_iso("QQ") is None
        assert lookup.get_iso("FRANCE") is None

    def test_missing_file(self, tmp_path):
        lookup = YamlCountryLookup(tmp_path / "missing.yaml")
        assert lookup.get_iso("DEU") is None

    def test_custom_file(self, tmp_path):
        path = tmp_path / "countries.yaml"
        path.write_text("MAR: MA\n", encoding="utf-8")
        lookup = YamlCountryLookup(path)
        assert lookup.get_iso("MAR") == "MA"
        assert lookup.get_iso("MA") == "MA"
        assert lookup.get_iso("DEU") is None
