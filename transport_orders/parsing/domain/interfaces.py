"""
Интерфейсы (абстрактные классы) для домена Parsing.

Домен Parsing отвечает за:
1. Выбор стратегии под формат перевозчика
2. Разбор секций погрузки/доставки
3. Извлечение заказчика, номера заказа, ставки и комментария
4. Сборку нормализованной заявки
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence


class IPdfParserStrategy(ABC):
    """Интерфейс стратегии разбора одного формата перевозчика."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Имя стратегии (ключ в конфиге ключевых слов)."""
        pass

    @abstractmethod
    def can_handle(self, lines: Sequence[str]) -> bool:
        """
        Дешёвая проверка: упоминается ли хоть одно ключевое слово стратегии.

        Args:
            lines: Сырые строки документа

        Returns:
            True если стратегия берётся за документ
        """
        pass

    @abstractmethod
    def parse(self, lines: Sequence[str], filename: Optional[str] = None) -> Dict[str, Any]:
        """
        Разбирает строки в нормализованную заявку.

        Args:
            lines: Сырые строки документа (до trim)
            filename: Имя исходного файла

        Returns:
            Заявка в виде словаря (см. TransportOrderDTO.to_dict)
        """
        pass


class IKeywordProvider(ABC):
    """Источник ключевых слов для валидации стратегий."""

    @abstractmethod
    def keywords_for(self, strategy_name: str) -> List[str]:
        """
        Args:
            strategy_name: Имя стратегии ("Ziegler", "Transalliance", ...)

        Returns:
            Ключевые слова (регистр не важен), пустой список если их нет
        """
        pass


class ICountryLookup(ABC):
    """Поиск ISO-кода страны по короткому токену (2-3 буквы)."""

    @abstractmethod
    def get_iso(self, token: str) -> Optional[str]:
        """
        Args:
            token: Токен из текста, например "FR" или "FRA"

        Returns:
            ISO-3166 alpha-2 или None
        """
        pass
