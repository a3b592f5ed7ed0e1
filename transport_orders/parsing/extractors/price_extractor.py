"""
Freight Price Extractor - ставка фрахта.

ЦКП: Цена из строки на фиксированном смещении под меткой.

У каждой метки своя таблица замен (валютные символы перевозчика).
Разделители разбираются одинаково: последний ',' или '.', за которым
идут 1-2 цифры, - десятичный, остальные ',', '.' и пробелы - тысячи.

    "1 250,00"   -> 1250.0
    "1,250.00 €" -> 1250.0
    "1.250,00"   -> 1250.0
    "1,450"      -> 1450.0
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from config.settings import DEFAULT_CURRENCY

PLAIN_NUMBER = re.compile(r"^-?\d+(\.\d+)?$")
DECIMAL_TAIL = re.compile(r"[.,](\d{1,2})$")
SEPARATORS = re.compile(r"[\s.,]")


@dataclass(frozen=True)
class PriceLabel:
    label: str
    offset: int
    # Замены применяются по порядку, до разбора разделителей
    substitutions: Tuple[Tuple[str, str], ...]
    currency: str = DEFAULT_CURRENCY

    def matches(self, line: str) -> bool:
        return line.strip().rstrip(":").strip().upper() == self.label.upper()


# Ziegler: "1 250,00 €" двумя строками ниже метки
RATE_LABEL = PriceLabel("Rate", offset=2, substitutions=(("€", ""),))

# Transalliance: "1,450.00 EUR" сразу под меткой
SHIPPING_PRICE_LABEL = PriceLabel("SHIPPING PRICE", offset=1, substitutions=(("EUR", ""), ("€", "")))


def normalize_amount(text: str) -> str:
    """'1.250,00' -> '1250.00', '1,450' -> '1450'."""
    text = text.strip()
    m = DECIMAL_TAIL.search(text)
    if m:
        integer_part = SEPARATORS.sub("", text[:m.start()])
        return f"{integer_part}.{m.group(1)}"
    return SEPARATORS.sub("", text)


class FreightPriceExtractor:
    """
    Ищет метку ставки и читает цену на offset строк ниже.

    Если после замен строка не является числом - цены нет (warning в лог).
    """

    LABELS: List[PriceLabel] = [RATE_LABEL, SHIPPING_PRICE_LABEL]

    def __init__(self, labels: Optional[Sequence[PriceLabel]] = None):
        self.labels = list(labels) if labels is not None else list(self.LABELS)

    def extract(self, lines: Sequence[str]) -> Tuple[Optional[float], Optional[str]]:
        """
        Returns:
            (цена, валюта) или (None, None)
        """
        for i, line in enumerate(lines):
            for price_label in self.labels:
                if not price_label.matches(line):
                    continue

                target = i + price_label.offset
                if target >= len(lines):
                    logger.trace(f"[FreightPriceExtractor] '{price_label.label}' в конце документа")
                    return None, None

                price = self._to_float(lines[target], price_label)
                if price is None:
                    return None, None

                logger.debug(f"[FreightPriceExtractor] {price_label.label}: {price} {price_label.currency}")
                return price, price_label.currency

        return None, None

    @staticmethod
    def _to_float(text: str, price_label: PriceLabel) -> Optional[float]:
        cleaned = text
        for old, new in price_label.substitutions:
            cleaned = cleaned.replace(old, new)
        cleaned = normalize_amount(cleaned)

        if not PLAIN_NUMBER.match(cleaned):
            logger.warning(
                f"[FreightPriceExtractor] Строка цены под '{price_label.label}' не разобрана: '{text}'"
            )
            return None

        return float(cleaned)
