"""
Справочники домена Parsing: ключевые слова стратегий и страны.
"""

from .keyword_loader import KeywordConfig
from .country_lookup import YamlCountryLookup

__all__ = [
    "KeywordConfig",
    "YamlCountryLookup",
]
