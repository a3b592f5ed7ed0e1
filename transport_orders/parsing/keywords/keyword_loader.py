"""
Config Loader для ключевых слов стратегий.

ЦКП: Отображение "имя стратегии -> ключевые слова" для can_handle.

Архитектурный принцип:
- Стратегии не читают конфиг сами, провайдер передаётся им в конструктор
- KeywordConfig загружает YAML один раз и кеширует по пути файла
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Dict, List, Mapping, Optional, Sequence

import yaml
from loguru import logger

from config.settings import KEYWORDS_FILE
from ..domain.exceptions import KeywordConfigError
from ..domain.interfaces import IKeywordProvider


@dataclass
class KeywordConfig(IKeywordProvider):
    """
    Ключевые слова всех стратегий.

    Загружается из pdf_parsers.yaml:

        Ziegler:
          - ZIEGLER
        Transalliance:
          - TRANSALLIANCE
    """
    keywords: Dict[str, List[str]] = field(default_factory=dict)

    _cache: ClassVar[Dict[str, "KeywordConfig"]] = {}

    def keywords_for(self, strategy_name: str) -> List[str]:
        return list(self.keywords.get(strategy_name, []))

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "KeywordConfig":
        """
        Загружает ключевые слова из YAML файла.

        Args:
            path: Путь к YAML (по умолчанию KEYWORDS_FILE из settings)

        Raises:
            KeywordConfigError: файл не найден или формат неверный
        """
        config_file = Path(path or KEYWORDS_FILE)
        cache_key = str(config_file.resolve())

        if cache_key in cls._cache:
            return cls._cache[cache_key]

        if not config_file.exists():
            raise KeywordConfigError(
                f"Файл ключевых слов не найден: {config_file}",
                component="KeywordConfig",
            )

        try:
            with open(config_file, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise KeywordConfigError(
                f"Некорректный YAML: {config_file}",
                component="KeywordConfig",
                original_error=e,
            )

        config = cls(keywords=cls._validate(raw, config_file))
        cls._cache[cache_key] = config

        logger.debug(
            f"[KeywordConfig] Загружено {len(config.keywords)} стратегий из {config_file.name}: "
            f"{list(config.keywords)}"
        )
        return config

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Sequence[str]]) -> "KeywordConfig":
        """Создаёт конфиг из обычного словаря (для тестов и DI)."""
        return cls(keywords=cls._validate(dict(mapping), None))

    @staticmethod
    def _validate(raw: object, source: Optional[Path]) -> Dict[str, List[str]]:
        if not isinstance(raw, dict):
            raise KeywordConfigError(
                f"Ожидается словарь стратегия -> список, получено {type(raw).__name__} ({source})",
                component="KeywordConfig",
            )

        result: Dict[str, List[str]] = {}
        for name, keywords in raw.items():
            if keywords is None:
                keywords = []
            if isinstance(keywords, str) or not isinstance(keywords, (list, tuple)):
                raise KeywordConfigError(
                    f"Ключевые слова для '{name}' должны быть списком ({source})",
                    component="KeywordConfig",
                )
            cleaned = [str(k).strip() for k in keywords if str(k).strip()]
            if not cleaned:
                logger.warning(f"[KeywordConfig] Стратегия '{name}' без ключевых слов: никогда не сработает")
            result[str(name)] = cleaned
        return result
