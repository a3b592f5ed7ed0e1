"""
Домен Parsing: строки PDF транспортной заявки -> нормализованная заявка.

Архитектура:
- StrategyDispatcher: первая стратегия, узнавшая документ
- Strategy (Ziegler, Transalliance): секции + заказчик
- Section Scanning: якорь -> окно просмотра -> поля точки и груз
- Extractors: компания / улица / индекс / груз / время / ставка / комментарий
- TransportOrderBuilder: сборка TransportOrderDTO

Вход: список строк + имя файла
Выход: dict (contracts.TransportOrderDTO.to_dict)
"""

from .application import ParsingComponentFactory, StrategyDispatcher
from .domain import NoMatchingFormat, NoMatchingFormatError, TransportParsingError
from .order_builder import TransportOrderBuilder
from .strategies import TransallianceStrategy, ZieglerStrategy

__all__ = [
    "ParsingComponentFactory",
    "StrategyDispatcher",
    "NoMatchingFormat",
    "NoMatchingFormatError",
    "TransportParsingError",
    "TransportOrderBuilder",
    "TransallianceStrategy",
    "ZieglerStrategy",
]
