"""
Date-Time Normalizer - склейка сырой даты и времени в ISO-8601.

Понимает ровно три формы времени:
- 0900       (военное время, 4 цифры)
- 2 pm, 2:30pm  (12-часовой формат)
- 9:00, 14:30   (24-часовой формат)

Дата всегда DD/MM/YY или DD/MM/YYYY. Всё остальное -> None, не ошибка.
"""

import re
from datetime import datetime, timezone
from typing import Optional

from loguru import logger

DATE_TOKEN = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4}|\d{2})(?!\d)")

# (regex формы времени, формат strptime для времени)
TIME_FORMATS = [
    (re.compile(r"^\d{4}$"), "%H%M"),
    (re.compile(r"^\d{1,2}\s?(am|pm)$"), "%I %p"),
    (re.compile(r"^\d{1,2}:\d{2}\s?(am|pm)$"), "%I:%M %p"),
    (re.compile(r"^\d{1,2}:\d{2}$"), "%H:%M"),
]


def _prepare_time(time_text: str) -> str:
    time_text = time_text.strip().lower()
    # "2pm" -> "2 pm"
    return re.sub(r"(\d)(am|pm)", r"\1 \2", time_text)


def normalize_date(date_text: Optional[str]) -> Optional[str]:
    """Вытаскивает из строки токен даты и приводит к DD/MM/YYYY."""
    if not date_text:
        return None

    m = DATE_TOKEN.search(date_text)
    if not m:
        return None

    day, month, year = m.groups()
    if len(year) == 2:
        try:
            year = str(datetime.strptime(year, "%y").year)
        except ValueError:
            return None
    return f"{int(day):02d}/{int(month):02d}/{year}"


def normalize_single_time(date_text: Optional[str], time_text: Optional[str]) -> Optional[str]:
    """
    Склеивает дату и время в ISO-8601 (UTC).

    Args:
        date_text: Строка с датой DD/MM/YY[YY]
        time_text: Время в одной из трёх форм

    Returns:
        '2024-06-01T09:00:00+00:00' или None
    """
    if not time_text:
        return None

    date_part = normalize_date(date_text)
    if date_part is None:
        logger.trace(f"[DateTimeNormalizer] Нет даты для времени '{time_text}'")
        return None

    time_part = _prepare_time(time_text)

    for regex, time_format in TIME_FORMATS:
        if regex.match(time_part):
            try:
                dt = datetime.strptime(f"{date_part} {time_part}", f"%d/%m/%Y {time_format}")
            except ValueError as e:
                logger.trace(f"[DateTimeNormalizer] '{date_part} {time_part}' не разобрано: {e}")
                return None
            return dt.replace(tzinfo=timezone.utc).isoformat()

    logger.trace(f"[DateTimeNormalizer] Неизвестная форма времени: '{time_text}'")
    return None
