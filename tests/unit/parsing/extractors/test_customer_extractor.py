"""
Unit-тесты для извлечения заказчика.
"""

from transport_orders.parsing.extractors.customer_extractor import (
    BlockCustomerExtractor,
    HeaderCustomerExtractor,
)
from transport_orders.parsing.keywords.country_lookup import YamlCountryLookup


class TestBlockCustomer:

    def test_block_between_markers(self):
        lines = [
            "CHARTERING CONFIRMATION",
            "Test Client Logistics SAS",
            "12 Rue de la Paix",
            "FR-69002 LYON",
            "VAT NUM: FR123456789",
            "TRANSALLIANCE TS LTD",
        ]
        party = BlockCustomerExtractor().extract(lines)
        assert party.side == "sender"
        assert party.details.model_dump(exclude_none=True) == {
            "company": "Test Client Logistics SAS",
            "street_address": "12 Rue de la Paix",
            "postal_code": "FR-69002",
            "city": "LYON",
            "country": "FR",
        }

    def test_markers_in_wrong_order(self):
        lines = ["TRANSALLIANCE", "Test Client", "Street"]
        party = BlockCustomerExtractor().extract(lines)
        assert party.side == "sender"
        assert party.details.model_dump(exclude_none=True) == {}

    def test_country_from_city_text(self):
        lines = ["ACME CLIENT", "Hauptstrasse 1", "10115 BERLIN DEU", "CARRIER"]
        extractor = BlockCustomerExtractor(
            client_marker="ACME CLIENT",
            carrier_marker="CARRIER",
            country_lookup=YamlCountryLookup(),
        )
        party = extractor.extract(lines)
        assert party.details.street_address == "Hauptstrasse 1"
        assert party.details.postal_code == "10115"
        assert party.details.city == "BERLIN DEU"
        assert party.details.country == "DE"

    def test_numeric_postal_without_lookup(self):
        lines = ["Test Client", "69002 LYON", "TRANSALLIANCE"]
        party = BlockCustomerExtractor().extract(lines)
        assert party.details.postal_code == "69002"
        assert party.details.country is None

    def test_block_end_stops_street(self):
        lines = ["Test Client", "Rue A", "Contact: Marie", "Rue B", "TRANSALLIANCE"]
        party = BlockCustomerExtractor().extract(lines)
        assert party.details.street_address == "Rue A"


class TestHeaderCustomer:

    def test_first_line_company_and_caps_city(self):
        lines = [
            "ZIEGLER UK LTD",
            "Unit 3 Logistics Park",
            "Dover Road",
            "KENT",
            "CT16 1AA",
            "BOOKING INSTRUCTION",
        ]
        party = HeaderCustomerExtractor().extract(lines)
        assert party.details.model_dump(exclude_none=True) == {
            "company": "ZIEGLER UK LTD",
            "street_address": "Unit 3 Logistics Park, Dover Road",
            "postal_code": "CT16 1AA",
            "city": "KENT",
            "country": "GB",
        }

    def test_blacklisted_header_is_not_a_city(self):
        lines = ["Ziegler", "BOOKING INSTRUCTION", "Dover Road", "DOVER"]
        party = HeaderCustomerExtractor().extract(lines)
        assert party.details.city == "DOVER"
        assert party.details.postal_code is None
        assert party.details.country is None

    def test_no_city_uses_first_lines_as_street(self):
        lines = ["Ziegler", "Line 1", "Line 2", "Line 3", "Line 4"]
        party = HeaderCustomerExtractor().extract(lines)
        assert party.details.city is None
        assert party.details.street_address == "Line 1, Line 2, Line 3"

    def test_empty_document(self):
        party = HeaderCustomerExtractor().extract([])
        assert party.side == "sender"
        assert party.details.company is None
