"""
Unit-тесты для finder'ов полей секции.

ЦКП: Компания / улица / индекс находятся в окне под якорем, шум пропускается.
"""

import pytest

from transport_orders.parsing.extractors.section_fields import (
    POSTAL_LINE_LOOSE,
    find_company,
    find_company_first_line,
    find_postal_city,
    find_postal_city_loose,
    find_street,
    is_noise,
    split_postal,
)
from transport_orders.parsing.strategies.transalliance import TransallianceStrategy
from transport_orders.parsing.strategies.ziegler import ZieglerStrategy


@pytest.mark.parametrize("line", ["", "-", "REFERENCE : 123", "REF", "Contact: Jean", "Payment terms 30 days",
                                  "12/03/2024", "PAIEMENT PAR VIREMENT", "ON 12/03/2024"])
def test_noise_lines(line):
    assert is_noise(line)


@pytest.mark.parametrize("line", ["ONE STOP LOGISTICS", "Papeteries du Rhone", "FR-38000 GRENOBLE"])
def test_not_noise(line):
    assert not is_noise(line)


class TestCompany:

    def test_first_line_skips_ref_and_time(self):
        lines = ["Collection", "REF 123", "10:00", "Acme Ltd"]
        assert find_company_first_line(lines, 0) == "Acme Ltd"

    def test_first_line_window_exhausted(self):
        lines = ["Collection", "REF 1", "REF 2", "REF 3", "REF 4", "REF 5", "Acme Ltd"]
        assert find_company_first_line(lines, 0) is None

    def test_noise_aware_company(self):
        lines = ["Loading", "ON 12/03/2024", "-", "REFERENCE : X", "Papeteries du Rhone", "ZI Nord"]
        assert find_company(lines, 0) == "Papeteries du Rhone"

    def test_anchor_at_end_of_document(self):
        assert find_company(["Loading"], 0) is None


class TestStreet:

    def test_collects_lines_between_company_and_postal(self):
        lines = ["Loading", "Contact: Jean", "Papeteries du Rhone", "ZI Nord", "Batiment B", "FR-38000 GRENOBLE"]
        assert find_street(lines, 0) == "ZI Nord, Batiment B"

    def test_stops_at_postal_line(self):
        lines = ["Loading", "Company", "69000 LYON", "Rue after postal"]
        assert find_street(lines, 0) is None

    def test_loose_postal_stop_for_uk_postcodes(self):
        lines = ["Collection", "Acme Ltd", "12 High St", "SW1A 1AA LONDON", "09:00-11:00"]
        assert find_street(lines, 0, postal_line=POSTAL_LINE_LOOSE) == "12 High St"


class TestPostal:

    def test_country_prefixed_postal(self):
        lines = ["Loading", "Company", "Street", "-FR-38000 GRENOBLE"]
        assert find_postal_city(lines, 0) == "FR-38000 GRENOBLE"

    def test_numeric_postal(self):
        lines = ["Delivery", "Contact: X", "Imprimerie", "75016 PARIS"]
        assert find_postal_city(lines, 0) == "75016 PARIS"

    def test_loose_finds_uk_postcode(self):
        lines = ["Collection", "Acme Ltd", "12 High St", "SW1A 1AA LONDON"]
        assert find_postal_city_loose(lines, 0) == "SW1A 1AA LONDON"

    def test_not_found(self):
        assert find_postal_city(["Delivery", "Company", "Street"], 0) is None

    def test_split_uk(self):
        assert split_postal("SW1A 1AA LONDON", ZieglerStrategy.COLLECTION_POSTAL) == ("SW1A 1AA", "LONDON")

    def test_split_country_prefixed(self):
        assert split_postal("FR-38000 GRENOBLE", TransallianceStrategy.LOADING_POSTAL) == ("FR-38000", "GRENOBLE")

    def test_split_numeric_delivery(self):
        assert split_postal("75016 PARIS 16", ZieglerStrategy.DELIVERY_POSTAL) == ("75016", "PARIS 16")

    def test_split_without_match(self):
        assert split_postal("PARIS", ZieglerStrategy.DELIVERY_POSTAL) == (None, None)
        assert split_postal(None, ZieglerStrategy.DELIVERY_POSTAL) == (None, None)
