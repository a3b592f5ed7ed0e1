"""
Ziegler Strategy - booking instructions Ziegler UK.

Характеристики:
- Секции "Collection" (Великобритания) и "Delivery" (всегда Франция)
- Индекс погрузки британский ("SW1A 1AA LONDON"), страна по префиксу
- Время погрузки отдельной строкой ("09:00-11:00", "0900", "2pm")
- Груз - строка "<N> PALLETS", номер из ближайшего REF
- Заказчик в шапке документа
"""

import re
from functools import partial
from typing import Optional, Sequence

from contracts.transport_order_dto import PartyDTO
from ..extractors.cargo_extractor import find_pallet_cargo
from ..extractors.country_resolver import CountryResolution
from ..extractors.customer_extractor import HeaderCustomerExtractor
from ..extractors.price_extractor import RATE_LABEL
from ..extractors.section_fields import (
    POSTAL_LINE_LOOSE,
    find_company_first_line,
    find_postal_city_loose,
    find_street,
)
from ..extractors.time_extractor import TimeConvention
from .base import BaseTransportStrategy, KeywordSource
from .section_config import SectionConfig, SectionKind


class ZieglerStrategy(BaseTransportStrategy):

    COLLECTION_POSTAL = re.compile(r"([A-Z0-9]{2,}\s?\d+[A-Z]*)\s+(.+)")
    DELIVERY_POSTAL = re.compile(r"(\d{4,5})\s+(.+)")
    PRICE_LABELS = (RATE_LABEL,)

    def __init__(
        self,
        keywords: KeywordSource = None,
        customer_extractor: Optional[HeaderCustomerExtractor] = None,
    ):
        self.customer_extractor = customer_extractor or HeaderCustomerExtractor()
        super().__init__(keywords)

    def _build_sections(self) -> Sequence[SectionConfig]:
        street_finder = partial(find_street, postal_line=POSTAL_LINE_LOOSE)

        return [
            SectionConfig(
                anchor="Collection",
                kind=SectionKind.LOADING,
                company_finder=find_company_first_line,
                street_finder=street_finder,
                postal_finder=find_postal_city_loose,
                cargo_finder=find_pallet_cargo,
                postal_regex=self.COLLECTION_POSTAL,
                country=CountryResolution.prefix(),
                time_convention=TimeConvention.COLLECTION,
                street_falls_back_to_postal=True,
            ),
            SectionConfig(
                anchor="Delivery",
                kind=SectionKind.DESTINATION,
                company_finder=find_company_first_line,
                street_finder=street_finder,
                postal_finder=find_postal_city_loose,
                cargo_finder=find_pallet_cargo,
                postal_regex=self.DELIVERY_POSTAL,
                country=CountryResolution.fixed("FR"),
                time_convention=TimeConvention.DELIVERY,
                street_falls_back_to_postal=True,
            ),
        ]

    def extract_customer(self, lines: Sequence[str]) -> PartyDTO:
        return self.customer_extractor.extract(lines)
