"""
Country Resolver - определение страны точки.

Два режима (задаются конфигом секции):
- prefix: первые две буквы индекса как догадка ISO-3166 alpha-2
- fixed: страна жёстко задана для этого плеча перевозки

Плюс отдельный хелпер "страна из свободного текста" через ICountryLookup.
"""

import re
from dataclasses import dataclass
from typing import Optional, Sequence

from loguru import logger

from ..domain.interfaces import ICountryLookup

COUNTRY_TOKEN = re.compile(r"\b([A-Z]{2,3})\b")


@dataclass(frozen=True)
class CountryResolution:
    """Способ определения страны для секции."""
    mode: str
    country: Optional[str] = None

    @classmethod
    def prefix(cls) -> "CountryResolution":
        return cls(mode="prefix")

    @classmethod
    def fixed(cls, country: str) -> "CountryResolution":
        return cls(mode="fixed", country=country.upper())

    def resolve(self, postal_code: Optional[str]) -> Optional[str]:
        if self.mode == "fixed":
            return self.country
        if not postal_code:
            return None
        head = postal_code[:2]
        # "69000" -> "69" не страна
        if len(head) == 2 and head.isalpha():
            return head.upper()
        return None


def extract_country_from_text(lines: Sequence[str], lookup: Optional[ICountryLookup]) -> Optional[str]:
    """
    Ищет первый токен из 2-3 заглавных букв в первой строке и
    переводит его в ISO-код через lookup.
    """
    if not lines or lookup is None:
        return None

    m = COUNTRY_TOKEN.search(lines[0])
    if not m:
        return None

    iso = lookup.get_iso(m.group(1))
    logger.trace(f"[CountryResolver] '{m.group(1)}' -> {iso}")
    return iso
