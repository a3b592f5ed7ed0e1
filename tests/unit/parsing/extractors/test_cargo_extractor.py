"""
Unit-тесты для извлечения груза (паллеты и упаковка).
"""

from transport_orders.parsing.extractors.cargo_extractor import (
    find_bare_number,
    find_packaging_cargo,
    find_pallet_cargo,
    find_reference_nearby,
    find_volume,
    find_weight,
    parse_volume,
    parse_weight,
)


class TestPalletCargo:

    def test_pallets_with_reference(self):
        lines = ["Collection", "Acme Ltd", "3 PALLETS", "Some note", "REF: PO-99"]
        cargo = find_pallet_cargo(lines, 0)
        assert cargo.model_dump(exclude_none=True) == {
            "title": "3 PALLETS",
            "package_count": 3,
            "package_type": "pallet",
            "number": "PO-99",
        }

    def test_single_pallet_without_reference(self):
        cargo = find_pallet_cargo(["Collection", "1 pallet"], 0)
        assert cargo.package_count == 1
        assert cargo.number is None

    def test_no_pallet_line(self):
        assert find_pallet_cargo(["Collection", "Acme Ltd", "LONDON"], 0) is None

    def test_reference_beyond_window(self):
        lines = ["3 PALLETS"] + ["x"] * 8 + ["REF: PO-99"]
        assert find_reference_nearby(lines, 0) is None

    def test_reference_label_without_value_is_skipped(self):
        lines = ["3 PALLETS", "REFERENCE :", "REF 4471"]
        assert find_reference_nearby(lines, 0) == "4471"


class TestPackagingCargo:

    def test_paper_rolls_weight_and_volume(self):
        lines = ["Loading", "Company", "24 PAPER ROLLS", "12,500", "1234,5"]
        cargo = find_packaging_cargo(lines, 0)
        assert cargo.title == "24 PAPER ROLLS"
        assert cargo.package_type == "other"
        assert cargo.package_count is None
        assert cargo.weight == 12500.0
        assert cargo.volume == 1234.5

    def test_number_from_bare_numeric_line(self):
        lines = ["Loading", "450.12", "Packaging: boxes", "Company"]
        cargo = find_packaging_cargo(lines, 0)
        assert cargo.number == "450.12"
        assert cargo.weight is None
        assert cargo.volume is None

    def test_no_packaging(self):
        assert find_packaging_cargo(["Loading", "Company"], 0) is None


def test_weight_uses_thousands_grouping():
    assert parse_weight("12,500") == 12500.0
    assert find_weight(["PACKAGING", "800"], 0) == 800.0


def test_volume_uses_decimal_comma():
    assert parse_volume("1234,5") == 1234.5
    assert find_volume(["PACKAGING", "12,500", "2500"], 0) == 2500.0


def test_bare_number_window():
    lines = ["9,99", "a", "b", "c", "PACKAGING"]
    assert find_bare_number(lines, 4) is None
    assert find_bare_number(lines, 3) == "9,99"
