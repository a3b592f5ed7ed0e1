"""
Фабрика для создания компонентов домена Parsing.

Собирает стратегии в фиксированном порядке приоритета и диспетчер.
"""

from pathlib import Path
from typing import Mapping, Optional, Sequence, Union

from loguru import logger

from ..domain.interfaces import ICountryLookup, IKeywordProvider
from ..keywords.country_lookup import YamlCountryLookup
from ..keywords.keyword_loader import KeywordConfig
from ..strategies.transalliance import TransallianceStrategy
from ..strategies.ziegler import ZieglerStrategy
from .dispatcher import StrategyDispatcher

KeywordsArg = Union[IKeywordProvider, Mapping[str, Sequence[str]], Path, str, None]


class ParsingComponentFactory:

    @staticmethod
    def create_keyword_provider(keywords: KeywordsArg = None) -> IKeywordProvider:
        """
        Args:
            keywords: Провайдер, словарь, путь к YAML или None (YAML по умолчанию)
        """
        if isinstance(keywords, IKeywordProvider):
            return keywords
        if isinstance(keywords, Mapping):
            return KeywordConfig.from_mapping(keywords)
        return KeywordConfig.load(Path(keywords) if keywords else None)

    @staticmethod
    def create_country_lookup() -> ICountryLookup:
        return YamlCountryLookup()

    @classmethod
    def create_dispatcher(
        cls,
        keywords: KeywordsArg = None,
        country_lookup: Optional[ICountryLookup] = None,
    ) -> StrategyDispatcher:
        """
        Диспетчер со всеми стратегиями. Порядок = приоритет:
        Ziegler, затем Transalliance.
        """
        provider = cls.create_keyword_provider(keywords)
        lookup = country_lookup or cls.create_country_lookup()

        strategies = [
            ZieglerStrategy(keywords=provider),
            TransallianceStrategy(keywords=provider, country_lookup=lookup),
        ]
        logger.debug(f"[Parsing] Создание диспетчера: {[s.name for s in strategies]}")
        return StrategyDispatcher(strategies)
