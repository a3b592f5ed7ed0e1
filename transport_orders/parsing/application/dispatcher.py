"""
Strategy Dispatcher - выбор стратегии под документ.

Стратегии проверяются в порядке регистрации, выигрывает первая,
чей can_handle вернул True (не "лучшая", а первая).
"""

from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from ..domain.exceptions import NoMatchingFormatError
from ..domain.interfaces import IPdfParserStrategy


class StrategyDispatcher:
    """
    Пример:
        dispatcher = StrategyDispatcher([ZieglerStrategy(), TransallianceStrategy()])
        order = dispatcher.dispatch(lines, "order.pdf")
    """

    def __init__(self, strategies: Optional[Sequence[IPdfParserStrategy]] = None):
        self._strategies: List[IPdfParserStrategy] = list(strategies or [])

    @property
    def strategies(self) -> List[IPdfParserStrategy]:
        return list(self._strategies)

    def register(self, strategy: IPdfParserStrategy) -> None:
        """Добавляет стратегию в конец очереди (самый низкий приоритет)."""
        self._strategies.append(strategy)
        logger.info(f"[StrategyDispatcher] Зарегистрирована стратегия: {strategy.name}")

    def select(self, lines: Sequence[str]) -> Optional[IPdfParserStrategy]:
        for strategy in self._strategies:
            if strategy.can_handle(lines):
                return strategy
        return None

    def dispatch(self, lines: Sequence[str], filename: Optional[str] = None) -> Dict[str, Any]:
        """
        Разбирает документ первой подходящей стратегией.

        Raises:
            NoMatchingFormatError: ни одна стратегия не подошла
        """
        strategy = self.select(lines)

        if strategy is None:
            logger.warning(
                f"[StrategyDispatcher] Формат не распознан: {filename or 'unknown'} "
                f"(проверено стратегий: {len(self._strategies)})"
            )
            raise NoMatchingFormatError(filename)

        logger.info(f"[StrategyDispatcher] Выбрана стратегия: {strategy.name}")
        return strategy.parse(lines, filename)
