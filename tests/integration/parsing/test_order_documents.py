"""
Интеграционные тесты: документ целиком через диспетчер.

Цель: Проверить что ParsingComponentFactory собирает диспетчер, который
узнаёт формат и отдаёт полную заявку для реальных раскладок документов.

Тест НЕ ИСПОЛЬЗУЕТ МОКИ - ключевые слова и страны из YAML пакета.
"""

import pytest
from pathlib import Path

from scripts.parse_order import load_lines
from transport_orders.parsing import NoMatchingFormatError, ParsingComponentFactory
from transport_orders.parsing.keywords.keyword_loader import KeywordConfig

FIXTURES_DIR = Path(__file__).parent.parent.parent / "fixtures" / "orders"


@pytest.fixture(scope="module")
def dispatcher():
    KeywordConfig._cache.clear()
    return ParsingComponentFactory.create_dispatcher()


class TestZieglerBooking:

    @pytest.fixture(scope="class")
    def order(self, dispatcher):
        lines, filename = load_lines(FIXTURES_DIR / "ziegler_booking.txt")
        return dispatcher.dispatch(lines, filename)

    def test_strategy_selected(self, dispatcher):
        lines, _ = load_lines(FIXTURES_DIR / "ziegler_booking.txt")
        assert dispatcher.select(lines).name == "Ziegler"

    def test_header_fields(self, order):
        assert order["attachment_filenames"] == ["ziegler_booking.pdf"]
        assert order["order_reference"] == "ZG-1001"
        assert order["freight_price"] == 1250.0
        assert order["freight_currency"] == "EUR"
        assert order["comment"] == "Tail lift required Call before delivery"

    def test_customer(self, order):
        assert order["customer"] == {
            "side": "sender",
            "details": {
                "company": "ZIEGLER UK LTD",
                "street_address": "Unit 3 Logistics Park, Dover Road",
                "postal_code": "CT16 1AA",
                "city": "KENT",
                "country": "GB",
            },
        }

    def test_collection(self, order):
        assert order["loading_locations"] == [{
            "company_address": {
                "company": "Acme Ltd",
                "street_address": "12 High St",
                "postal_code": "SW1A 1AA",
                "city": "LONDON",
                "country": "SW",
            },
            "time": {
                "datetime_from": "2024-06-01T09:00:00+00:00",
                "datetime_to": "2024-06-01T11:00:00+00:00",
            },
        }]

    def test_delivery(self, order):
        assert order["destination_locations"] == [{
            "company_address": {
                "company": "Carrefour Logistique",
                "street_address": "Zone Industrielle",
                "postal_code": "75001",
                "city": "PARIS",
                "country": "FR",
            },
            "time": {
                "datetime_from": "2024-06-03T08:00:00+00:00",
                "datetime_to": "2024-06-03T12:00:00+00:00",
            },
        }]

    def test_cargos(self, order):
        assert order["cargos"] == [{
            "title": "3 PALLETS",
            "package_count": 3,
            "package_type": "pallet",
            "number": "PO-99",
        }]


class TestTransallianceChartering:

    @pytest.fixture(scope="class")
    def order(self, dispatcher):
        lines, filename = load_lines(FIXTURES_DIR / "transalliance_chartering.json")
        return dispatcher.dispatch(lines, filename)

    def test_header_fields(self, order):
        assert order["attachment_filenames"] == ["transalliance_order.pdf"]
        assert order["order_reference"] == "TA-55821"
        assert order["freight_price"] == 1450.0
        assert order["freight_currency"] == "EUR"
        assert order["comment"] == "Fragile goods keep dry"

    def test_customer(self, order):
        assert order["customer"]["details"] == {
            "company": "Test Client Logistics SAS",
            "street_address": "12 Rue de la Paix",
            "postal_code": "FR-69002",
            "city": "LYON",
            "country": "FR",
        }

    def test_loading(self, order):
        assert order["loading_locations"] == [{
            "company_address": {
                "company": "Papeteries du Rhone",
                "street_address": "ZI Nord, Batiment B",
                "postal_code": "FR-38000",
                "city": "GRENOBLE",
                "country": "FR",
            },
            "time": {"datetime_from": "2024-03-12T08:00:00+00:00"},
        }]

    def test_delivery(self, order):
        location = order["destination_locations"][0]
        assert location["company_address"]["company"] == "Imprimerie Centrale"
        assert location["company_address"]["postal_code"] == "75016"
        assert location["company_address"]["country"] == "FR"
        assert location["time"] == {
            "datetime_from": "2024-03-13T14:00:00+00:00",
            "datetime_to": "2024-03-13T16:00:00+00:00",
        }

    def test_cargo(self, order):
        assert len(order["cargos"]) == 1
        cargo = order["cargos"][0]
        assert cargo["title"] == "24 PAPER ROLLS"
        assert cargo["package_type"] == "other"
        assert cargo["weight"] == 12500.0
        assert cargo["volume"] == 1234.5
        assert "package_count" not in cargo


def test_unknown_document(dispatcher):
    with pytest.raises(NoMatchingFormatError) as exc_info:
        dispatcher.dispatch(["INVOICE", "Some text"], "invoice.pdf")
    assert exc_info.value.filename == "invoice.pdf"


def test_custom_keyword_mapping():
    """Словарь ключевых слов вместо YAML: Ziegler молчит, Transalliance узнаёт."""
    dispatcher = ParsingComponentFactory.create_dispatcher(keywords={"Transalliance": ["ZIEGLER"]})
    assert dispatcher.select(["ZIEGLER UK LTD"]).name == "Transalliance"
