"""
Customer Extractor - заказчик (отправитель) заявки.

Две эвристики, по одной на семейство перевозчиков:

BlockCustomerExtractor (Transalliance):
    блок между строкой маркера клиента и строкой с именем перевозчика;
    строка маркера - компания, строка "FR-69000 LYON" - индекс/город/страна
    (для "69000 LYON FRA" страна ищется в тексте города через справочник),
    остальное до VAT NUM / Contact / Tel / E-mail - улица.

HeaderCustomerExtractor (Ziegler):
    первая строка - компания, первая строка из одних заглавных букв
    (кроме заголовков BOOKING / INSTRUCTION) - город, всё между ними - улица.
    Британский индекс где угодно в документе -> страна GB.
"""

import re
from typing import List, Optional, Sequence

from loguru import logger

from config.settings import (
    CUSTOMER_SIDE,
    TRANSALLIANCE_CARRIER_MARKER,
    TRANSALLIANCE_CLIENT_MARKER,
    ZIEGLER_CITY_BLACKLIST,
    ZIEGLER_CUSTOMER_COUNTRY,
)
from contracts.transport_order_dto import CompanyAddress, PartyDTO
from ..domain.interfaces import ICountryLookup
from .country_resolver import CountryResolution, extract_country_from_text


class BlockCustomerExtractor:

    BLOCK_END = re.compile(r"^(VAT NUM|Contact|Tel|E-mail)", re.IGNORECASE)
    POSTAL_CITY = re.compile(r"^([A-Z]{2}-\S+|\d{4,5})\s+(.+)")

    def __init__(
        self,
        client_marker: str = TRANSALLIANCE_CLIENT_MARKER,
        carrier_marker: str = TRANSALLIANCE_CARRIER_MARKER,
        country_lookup: Optional[ICountryLookup] = None,
    ):
        self.client_marker = client_marker
        self.carrier_marker = carrier_marker
        self.country_lookup = country_lookup

    def extract(self, lines: Sequence[str]) -> PartyDTO:
        client_idx = self._find(lines, self.client_marker)
        carrier_idx = self._find(lines, self.carrier_marker)

        if client_idx is None or carrier_idx is None or client_idx >= carrier_idx:
            logger.debug(
                f"[BlockCustomerExtractor] Блок заказчика не найден "
                f"(client={client_idx}, carrier={carrier_idx})"
            )
            return PartyDTO(side=CUSTOMER_SIDE)

        company = lines[client_idx]
        street_parts: List[str] = []
        postal_code = city = country = None

        for line in lines[client_idx + 1:carrier_idx]:
            line = line.strip()
            if not line or self.BLOCK_END.match(line):
                break

            m = self.POSTAL_CITY.match(line)
            if m:
                postal_code, city = m.group(1), m.group(2).strip()
                country = CountryResolution.prefix().resolve(postal_code)
                continue

            street_parts.append(line)

        if country is None and city:
            country = extract_country_from_text([city], self.country_lookup)

        details = CompanyAddress(
            company=company,
            street_address=", ".join(street_parts),
            postal_code=postal_code,
            city=city,
            country=country,
        )
        logger.debug(f"[BlockCustomerExtractor] Заказчик: {details.model_dump(exclude_none=True)}")
        return PartyDTO(side=CUSTOMER_SIDE, details=details)

    @staticmethod
    def _find(lines: Sequence[str], marker: str) -> Optional[int]:
        for i, line in enumerate(lines):
            if marker in line:
                return i
        return None


class HeaderCustomerExtractor:

    CITY_LINE = re.compile(r"^[A-Z ]+$")
    UK_POSTCODE = re.compile(r"[A-Z]{1,2}\d{1,2}[A-Z]?\s?\d[A-Z]{2}", re.IGNORECASE)
    # Если города нет, улицей считаются строки 2-4
    FALLBACK_STREET_LINES = 3

    def __init__(
        self,
        city_blacklist: Sequence[str] = tuple(ZIEGLER_CITY_BLACKLIST),
        postcode_country: str = ZIEGLER_CUSTOMER_COUNTRY,
    ):
        self.city_blacklist = [w.upper() for w in city_blacklist]
        self.postcode_country = postcode_country

    def extract(self, lines: Sequence[str]) -> PartyDTO:
        if not lines:
            return PartyDTO(side=CUSTOMER_SIDE)

        company = lines[0]
        city = None
        street_parts: List[str] = []

        for line in lines[1:]:
            if self.CITY_LINE.match(line) and not any(w in line for w in self.city_blacklist):
                city = line
                break
            street_parts.append(line)

        if city is None:
            street_parts = list(lines[1:1 + self.FALLBACK_STREET_LINES])

        postal_code = None
        for line in lines:
            m = self.UK_POSTCODE.search(line)
            if m:
                postal_code = m.group(0).upper()
                break

        details = CompanyAddress(
            company=company,
            street_address=", ".join(street_parts),
            postal_code=postal_code,
            city=city,
            country=self.postcode_country if postal_code else None,
        )
        logger.debug(f"[HeaderCustomerExtractor] Заказчик: {details.model_dump(exclude_none=True)}")
        return PartyDTO(side=CUSTOMER_SIDE, details=details)
