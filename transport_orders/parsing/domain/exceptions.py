"""
Исключения для домена Parsing.

Специфичные для разбора транспортных заявок ошибки.
Ненайденное поле - не ошибка: экстракторы возвращают None.
"""

from typing import Optional

from config.settings import UNKNOWN_FILENAME


class TransportParsingError(Exception):
    """Базовое исключение для ошибок домена Parsing."""

    def __init__(self, message: str, component: str = None, original_error: Exception = None):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Parsing Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class NoMatchingFormatError(TransportParsingError):
    """Ни одна зарегистрированная стратегия не узнала документ."""

    def __init__(self, filename: Optional[str] = None):
        self.filename = filename or UNKNOWN_FILENAME
        super().__init__(
            f"No matching parser found for file: {self.filename}",
            component="StrategyDispatcher",
        )


class KeywordConfigError(TransportParsingError):
    """Ошибка конфигурации ключевых слов стратегий."""
    pass


class ParsingDataFormatError(TransportParsingError):
    """Ошибка формата входных данных (ожидается список строк)."""
    pass


NoMatchingFormat = NoMatchingFormatError
