"""
Transalliance Strategy - подтверждения фрахта Transalliance.

Характеристики:
- Секции "Loading" и "Delivery" (всегда Франция)
- Между якорем и компанией бывает шум: REFERENCE, Contact, даты, VIREMENT
- Индекс с кодом страны ("FR-69000 LYON") или цифровой ("69000 LYON")
- Груз - блок PACKAGING / PAPER ROLLS далеко под якорем, вес и объём рядом
- Заказчик между маркером клиента и строкой TRANSALLIANCE
"""

import re
from typing import Optional, Sequence

from contracts.transport_order_dto import PartyDTO
from ..domain.interfaces import ICountryLookup
from ..extractors.cargo_extractor import find_packaging_cargo
from ..extractors.country_resolver import CountryResolution
from ..extractors.customer_extractor import BlockCustomerExtractor
from ..extractors.price_extractor import SHIPPING_PRICE_LABEL
from ..extractors.section_fields import find_company, find_postal_city, find_street
from ..extractors.time_extractor import TimeConvention
from .base import BaseTransportStrategy, KeywordSource
from .section_config import SectionConfig, SectionKind


class TransallianceStrategy(BaseTransportStrategy):

    LOADING_POSTAL = re.compile(r"([A-Z]{2}-\S+|\d{4,5})\s+(.+)")
    DELIVERY_POSTAL = re.compile(r"(\d{4,5})\s+(.+)")
    PRICE_LABELS = (SHIPPING_PRICE_LABEL,)

    def __init__(
        self,
        keywords: KeywordSource = None,
        customer_extractor: Optional[BlockCustomerExtractor] = None,
        country_lookup: Optional[ICountryLookup] = None,
    ):
        self.customer_extractor = customer_extractor or BlockCustomerExtractor(country_lookup=country_lookup)
        super().__init__(keywords)

    def _build_sections(self) -> Sequence[SectionConfig]:
        return [
            SectionConfig(
                anchor="Loading",
                kind=SectionKind.LOADING,
                company_finder=find_company,
                street_finder=find_street,
                postal_finder=find_postal_city,
                cargo_finder=find_packaging_cargo,
                postal_regex=self.LOADING_POSTAL,
                country=CountryResolution.prefix(),
                time_convention=TimeConvention.COLLECTION,
            ),
            SectionConfig(
                anchor="Delivery",
                kind=SectionKind.DESTINATION,
                company_finder=find_company,
                street_finder=find_street,
                postal_finder=find_postal_city,
                cargo_finder=find_packaging_cargo,
                postal_regex=self.DELIVERY_POSTAL,
                country=CountryResolution.fixed("FR"),
                time_convention=TimeConvention.DELIVERY,
            ),
        ]

    def extract_customer(self, lines: Sequence[str]) -> PartyDTO:
        return self.customer_extractor.extract(lines)
