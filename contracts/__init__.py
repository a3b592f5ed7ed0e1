"""
Контракты DTO проекта Transport Orders.

Все контракты используют Pydantic v2 для валидации.

Контракты:
- Parsing -> Order creation: TransportOrderDTO (transport_order_dto.py)
"""

from .transport_order_dto import (
    TransportOrderDTO,
    PartyDTO,
    CompanyAddress,
    LocationDTO,
    TimeWindow,
    CargoDTO,
)

__all__ = [
    "TransportOrderDTO",
    "PartyDTO",
    "CompanyAddress",
    "LocationDTO",
    "TimeWindow",
    "CargoDTO",
]
