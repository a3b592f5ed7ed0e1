"""
Time Extractor - окно времени для секции погрузки/доставки.

Два соглашения (выбираются конфигом секции):

Convention A (погрузка / collection):
    идём вниз от якоря, берём первую строку-время и первую строку-дату,
    останавливаемся на якоре следующей секции. Диапазон "09:00-11:00"
    делится по '-' на (from, to).

Convention B (доставка):
    ближайшая строка с H:MM и ближайшая строка с датой в небольших окнах,
    из строки времени берутся все токены H:MM (первые два -> from/to).
"""

import re
from enum import Enum
from typing import Collection, List, Optional, Sequence, Tuple

from loguru import logger

from config.settings import DELIVERY_DATE_LOOKAHEAD, DELIVERY_TIME_LOOKAHEAD
from contracts.transport_order_dto import TimeWindow
from .datetime_normalizer import normalize_single_time
from .section_fields import BARE_DATE, window


class TimeConvention(str, Enum):
    """Соглашение о записи времени в секции."""
    COLLECTION = "collection"
    DELIVERY = "delivery"


# 0900 | 9 | 9am | 9:30 | 9:30 pm, опционально "- <то же>"
BARE_TIME = re.compile(
    r"^(\d{4}|\d{1,2}(:\d{2})?\s?(am|pm)?)(\s*-\s*\d{1,2}(:\d{2})?\s?(am|pm)?)?$",
    re.IGNORECASE,
)

HH_MM = re.compile(r"\b(\d{1,2}:\d{2})\b")
DATE_IN_LINE = re.compile(r"\d{2}/\d{2}/\d{4}")


def find_next_time_and_date(
    lines: Sequence[str],
    start: int,
    stop_tokens: Collection[str] = (),
) -> Tuple[Optional[str], Optional[str]]:
    """Convention A: первая строка-время и первая строка-дата начиная со start."""
    time_raw = None
    date_raw = None

    for pos in range(start, len(lines)):
        line = lines[pos].strip()

        if line in stop_tokens:
            break

        if time_raw is None and BARE_TIME.match(line):
            time_raw = line
        elif date_raw is None and BARE_DATE.match(line):
            date_raw = line

        if time_raw and date_raw:
            break

    return time_raw, date_raw


def find_time_line(lines: Sequence[str], idx: int, lookahead: int = DELIVERY_TIME_LOOKAHEAD) -> Optional[str]:
    for _, line in window(lines, idx, lookahead):
        if HH_MM.search(line):
            return line
    return None


def find_date_line(lines: Sequence[str], idx: int, lookahead: int = DELIVERY_DATE_LOOKAHEAD) -> Optional[str]:
    for _, line in window(lines, idx, lookahead):
        if DATE_IN_LINE.search(line):
            return line
    return None


def extract_times(line: Optional[str]) -> List[str]:
    """Все токены H:MM строки."""
    if not line:
        return []
    return HH_MM.findall(line)


def split_range(time_raw: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
    """'09:00-11:00' -> ('09:00', '11:00'), '0900' -> ('0900', None)."""
    if not time_raw:
        return None, None
    parts = [p.strip() for p in time_raw.split("-", 1)]
    time_from = parts[0] or None
    time_to = parts[1] if len(parts) > 1 and parts[1] else None
    return time_from, time_to


def resolve_time_window(
    lines: Sequence[str],
    idx: int,
    convention: TimeConvention,
    stop_tokens: Collection[str] = (),
) -> Optional[TimeWindow]:
    """
    Окно времени для якоря idx.

    Returns:
        TimeWindow хотя бы с одной границей или None
    """
    if convention == TimeConvention.COLLECTION:
        time_raw, date_raw = find_next_time_and_date(lines, idx + 1, stop_tokens)
        from_raw, to_raw = split_range(time_raw)
    else:
        time_line = find_time_line(lines, idx)
        date_raw = find_date_line(lines, idx)
        times = extract_times(time_line)
        from_raw = times[0] if times else None
        to_raw = times[1] if len(times) > 1 else None

    time_window = TimeWindow(
        datetime_from=normalize_single_time(date_raw, from_raw),
        datetime_to=normalize_single_time(date_raw, to_raw),
    )

    logger.debug(
        f"[TimeExtractor] {convention.value}@{idx}: date={date_raw!r}, "
        f"from={from_raw!r}, to={to_raw!r} -> {time_window.datetime_from} / {time_window.datetime_to}"
    )
    return None if time_window.is_empty() else time_window
