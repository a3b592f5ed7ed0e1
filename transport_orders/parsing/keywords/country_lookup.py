"""
Справочник стран: короткий токен -> ISO-3166 alpha-2.

Используется только хелпером "страна из свободного текста".
Основное определение страны в секциях идёт по почтовому индексу.
"""

from pathlib import Path
from typing import Dict, Optional

import yaml
from loguru import logger

from config.settings import COUNTRIES_FILE
from ..domain.interfaces import ICountryLookup


class YamlCountryLookup(ICountryLookup):
    """Поиск по countries.yaml (alpha-3 -> alpha-2)."""

    def __init__(self, path: Optional[Path] = None):
        self._path = Path(path or COUNTRIES_FILE)
        self._alpha3: Dict[str, str] = {}
        self._alpha2: set = set()
        self._load()

    def _load(self) -> None:
        if not self._path.exists():
            logger.warning(f"[CountryLookup] Справочник стран не найден: {self._path}")
            return

        with open(self._path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        self._alpha3 = {str(k).upper(): str(v).upper() for k, v in data.items()}
        self._alpha2 = set(self._alpha3.values())
        logger.debug(f"[CountryLookup] Загружено {len(self._alpha3)} стран из {self._path.name}")

    def get_iso(self, token: str) -> Optional[str]:
        token = (token or "").strip().upper()
        if len(token) == 2:
            return token if token in self._alpha2 else None
        if len(token) == 3:
            return self._alpha3.get(token)
        return None
