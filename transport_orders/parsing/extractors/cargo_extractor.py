"""
Cargo Extractor - груз рядом с якорем секции.

ЦКП: CargoDTO из строки груза и её окрестности.

Две формы груза:
- паллеты: "<N> PALLET(S)" + номер из ближайшей строки с REF
- упаковка: строка с PACKAGING / PAPER ROLLS + вес/объём в окне +-6 строк

Разбор чисел зависит от поля: вес с разделителем тысяч ("12,500" -> 12500),
объём с десятичной запятой ("1234,5" -> 1234.5).
"""

import re
from typing import Optional, Sequence, Tuple

from loguru import logger

from config.settings import (
    CARGO_BLOCK_LOOKAHEAD,
    CARGO_MEASURE_WINDOW,
    CARGO_NUMBER_WINDOW,
    PALLET_LOOKAHEAD,
    REFERENCE_LOOKAHEAD,
)
from contracts.transport_order_dto import CargoDTO
from .section_fields import window

PALLET_LINE = re.compile(r"(\d+)\s*PALLETS?", re.IGNORECASE)
PACKAGING_LINE = re.compile(r"(PACKAGING|PAPER ROLLS)", re.IGNORECASE)
REF_TOKEN = re.compile(r"\bREF(?:ERENCE)?\b\.?[\s:]*([A-Z0-9\-]+)", re.IGNORECASE)

WEIGHT_VALUE = re.compile(r"^\d{1,3}(?:,\d{3})*$")
VOLUME_VALUE = re.compile(r"^\d{4,}(?:[.,]\d+)?$")
BARE_NUMBER = re.compile(r"^[\d.,]+$")


def find_pallet_line(lines: Sequence[str], idx: int, lookahead: int = PALLET_LOOKAHEAD) -> Optional[Tuple[int, str]]:
    for pos, line in window(lines, idx, lookahead):
        if PALLET_LINE.search(line):
            return pos, line
    return None


def find_packaging_line(
    lines: Sequence[str], idx: int, lookahead: int = CARGO_BLOCK_LOOKAHEAD
) -> Optional[Tuple[int, str]]:
    for pos, line in window(lines, idx, lookahead):
        if line and PACKAGING_LINE.search(line):
            return pos, line
    return None


def find_reference_nearby(lines: Sequence[str], pos: int, lookahead: int = REFERENCE_LOOKAHEAD) -> Optional[str]:
    """Токен после REF в строках pos .. pos+lookahead-1."""
    for j in range(pos, min(len(lines), pos + lookahead)):
        line = lines[j]
        if "REF" not in line.upper():
            continue
        m = REF_TOKEN.search(line)
        if m:
            return m.group(1)
    return None


def _around(lines: Sequence[str], pos: int, radius: int):
    for i in range(max(0, pos - radius), min(len(lines), pos + radius + 1)):
        line = lines[i].strip()
        if line:
            yield line


def parse_weight(text: str) -> float:
    """'12,500' -> 12500.0 (запятая - разделитель тысяч)."""
    return float(text.replace(",", ""))


def parse_volume(text: str) -> float:
    """'1234,5' -> 1234.5 (запятая - десятичный разделитель)."""
    return float(text.replace(",", "."))


def find_weight(lines: Sequence[str], pos: int, radius: int = CARGO_MEASURE_WINDOW) -> Optional[float]:
    for line in _around(lines, pos, radius):
        if WEIGHT_VALUE.match(line):
            return parse_weight(line)
    return None


def find_volume(lines: Sequence[str], pos: int, radius: int = CARGO_MEASURE_WINDOW) -> Optional[float]:
    for line in _around(lines, pos, radius):
        if VOLUME_VALUE.match(line):
            return parse_volume(line)
    return None


def find_bare_number(lines: Sequence[str], pos: int, radius: int = CARGO_NUMBER_WINDOW) -> Optional[str]:
    for line in _around(lines, pos, radius):
        if BARE_NUMBER.match(line):
            return line
    return None


def find_pallet_cargo(lines: Sequence[str], idx: int) -> Optional[CargoDTO]:
    """Груз-паллеты под якорем idx."""
    found = find_pallet_line(lines, idx)
    if not found:
        return None

    pos, line = found
    count = int(PALLET_LINE.search(line).group(1))
    cargo = CargoDTO(
        title=line,
        package_count=count,
        package_type="pallet",
        number=find_reference_nearby(lines, pos),
    )
    logger.debug(f"[CargoExtractor] Паллеты @{pos}: {cargo.package_count} шт., number={cargo.number}")
    return cargo


def find_packaging_cargo(lines: Sequence[str], idx: int) -> Optional[CargoDTO]:
    """Груз-упаковка (PACKAGING / PAPER ROLLS) под якорем idx."""
    found = find_packaging_line(lines, idx)
    if not found:
        return None

    pos, line = found
    cargo = CargoDTO(
        title=line,
        package_type="other",
        weight=find_weight(lines, pos),
        volume=find_volume(lines, pos),
        number=find_bare_number(lines, pos),
    )
    logger.debug(
        f"[CargoExtractor] Упаковка @{pos}: weight={cargo.weight}, "
        f"volume={cargo.volume}, number={cargo.number}"
    )
    return cargo
