"""
Section Config - неизменяемая конфигурация одного типа секции.

Таблица функций (finder'ов) собирается один раз в конструкторе стратегии,
движок сканирования вызывает их одинаково для любой секции.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Pattern, Sequence

from contracts.transport_order_dto import CargoDTO
from ..extractors.country_resolver import CountryResolution
from ..extractors.time_extractor import TimeConvention

LineFinder = Callable[[Sequence[str], int], Optional[str]]
CargoFinder = Callable[[Sequence[str], int], Optional[CargoDTO]]


class SectionKind(str, Enum):
    """Куда попадает точка секции в заявке."""
    LOADING = "loading"
    DESTINATION = "destination"


@dataclass(frozen=True)
class SectionConfig:
    """
    Args:
        anchor: Точное содержимое строки-якоря ("Delivery")
        kind: loading / destination
        company_finder, street_finder, postal_finder: (lines, idx) -> строка
        cargo_finder: (lines, idx) -> CargoDTO
        postal_regex: Делит строку индекса на (индекс, город)
        country: prefix / fixed
        time_convention: Convention A (collection) или B (delivery)
        street_falls_back_to_postal: Нет улицы - берём строку индекса
    """
    anchor: str
    kind: SectionKind
    company_finder: LineFinder
    street_finder: LineFinder
    postal_finder: LineFinder
    cargo_finder: CargoFinder
    postal_regex: Pattern
    country: CountryResolution
    time_convention: TimeConvention
    street_falls_back_to_postal: bool = False
