"""
Section Field Finders - поиск полей адреса под якорем секции.

ЦКП: Строка компании, улицы и индекса/города для одной секции.

Каждый finder - чистая функция (lines, anchor_idx, ...) -> Optional[str].
Окно просмотра начинается со строки anchor_idx + 1. Если окно исчерпано,
поле просто отсутствует.

Skip-паттерны (строка пропускается, поиск продолжается):
- NOISE_LABEL: метки REFERENCE / REF / ON / Contact / Payment terms
- BARE_DATE: строка из одной даты
- LONE_DASH: одиночный "-"
- PAYMENT_MARKER: способ оплаты (VIREMENT)

Stop-паттерны (поиск прекращается без результата):
- для улицы - строка, похожая на индекс/город
"""

import re
from typing import Iterator, Optional, Pattern, Tuple

from loguru import logger

from config.settings import (
    COMPANY_LOOKAHEAD,
    COMPANY_LOOKAHEAD_SHORT,
    POSTAL_LOOKAHEAD,
    STREET_LOOKAHEAD,
)

NOISE_LABEL = re.compile(r"^(REFERENCE|REF|ON|Contact|Payment terms)\b", re.IGNORECASE)
BARE_DATE = re.compile(r"^\d{1,2}/\d{1,2}/\d{2,4}$")
LONE_DASH = "-"
PAYMENT_MARKER = "VIREMENT"

# Ziegler: под якорем компания идёт сразу, отбрасываем только REF и время ("9:", "10-")
REF_OR_TIME_PREFIX = re.compile(r"^(REF|[0-9]{1,2}[:\-])")

# Индекс с кодом страны ("FR-69000 LYON", "-FR-69000") или цифровой ("69000 LYON")
POSTAL_LINE = re.compile(r"^-?[A-Z]{2}-\S+|^-?\d{4,5}\s+.+")

# Ziegler: британские и цифровые индексы, где угодно в строке
POSTAL_LINE_LOOSE = re.compile(r"(\d{4,5}|[A-Z0-9]{2,}\s?\d+[A-Z]*)\s+.+")


def window(lines, idx: int, lookahead: int) -> Iterator[Tuple[int, str]]:
    """Строки idx+1 .. idx+lookahead (включительно), в пределах документа."""
    end = min(len(lines), idx + lookahead + 1)
    for pos in range(idx + 1, end):
        yield pos, lines[pos].strip()


def is_noise(line: str) -> bool:
    """Служебная строка, которую пропускают finder'ы компании/улицы/индекса."""
    return (
        line == ""
        or line == LONE_DASH
        or bool(NOISE_LABEL.match(line))
        or bool(BARE_DATE.match(line))
        or PAYMENT_MARKER in line.upper()
    )


def find_company_first_line(lines, idx: int, lookahead: int = COMPANY_LOOKAHEAD_SHORT) -> Optional[str]:
    """Первая строка под якорем, которая не REF и не начало времени."""
    for _, line in window(lines, idx, lookahead):
        if line and not REF_OR_TIME_PREFIX.match(line):
            return line
    return None


def find_company(lines, idx: int, lookahead: int = COMPANY_LOOKAHEAD) -> Optional[str]:
    """Первая не-шумовая строка под якорем."""
    for _, line in window(lines, idx, lookahead):
        if is_noise(line):
            logger.trace(f"[SectionFields] company: пропуск шума '{line}'")
            continue
        return line
    return None


def find_street(
    lines,
    idx: int,
    postal_line: Pattern = POSTAL_LINE,
    lookahead: int = STREET_LOOKAHEAD,
) -> Optional[str]:
    """
    Строки между компанией и индексом, через ', '.

    Первая не-шумовая строка считается компанией и пропускается.
    Поиск останавливается на строке, похожей на индекс/город.
    """
    street_parts = []
    company_seen = False

    for _, line in window(lines, idx, lookahead):
        if is_noise(line):
            continue
        if postal_line.search(line):
            break
        if not company_seen:
            company_seen = True
            continue
        street_parts.append(line)

    return ", ".join(street_parts) if street_parts else None


def find_postal_city(lines, idx: int, lookahead: int = POSTAL_LOOKAHEAD) -> Optional[str]:
    """Строка индекса/города (ведущий '-' отрезается)."""
    for _, line in window(lines, idx, lookahead):
        if line == "" or line == LONE_DASH or NOISE_LABEL.match(line):
            continue
        if POSTAL_LINE.match(line):
            return line.lstrip("-")
    return None


def find_postal_city_loose(lines, idx: int, lookahead: int = POSTAL_LOOKAHEAD) -> Optional[str]:
    """Первая строка, где встречается индекс и что-то после него."""
    for _, line in window(lines, idx, lookahead):
        if line and POSTAL_LINE_LOOSE.search(line):
            return line
    return None


def split_postal(line: Optional[str], postal_regex: Pattern) -> Tuple[Optional[str], Optional[str]]:
    """
    Делит строку индекса на (индекс, город) по регулярке секции.

    Returns:
        (None, None) если строки нет или регулярка не совпала
    """
    if not line:
        return None, None

    m = postal_regex.search(line)
    if not m:
        logger.trace(f"[SectionFields] Индекс не разобран: '{line}'")
        return None, None

    return m.group(1).strip(), m.group(2).strip()
