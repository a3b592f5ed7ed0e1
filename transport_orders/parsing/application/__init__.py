"""
Application слой домена Parsing: диспетчер стратегий и фабрика.
"""

from .dispatcher import StrategyDispatcher
from .factory import ParsingComponentFactory

__all__ = [
    "StrategyDispatcher",
    "ParsingComponentFactory",
]
