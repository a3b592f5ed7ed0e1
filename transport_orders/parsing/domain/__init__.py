"""
Domain слой домена Parsing.

Содержит интерфейсы (абстрактные классы) и исключения для Parsing домена.
"""

from .interfaces import (
    IPdfParserStrategy,
    IKeywordProvider,
    ICountryLookup,
)

from .exceptions import (
    TransportParsingError,
    NoMatchingFormatError,
    NoMatchingFormat,
    KeywordConfigError,
    ParsingDataFormatError,
)

__all__ = [
    # Интерфейсы
    "IPdfParserStrategy",
    "IKeywordProvider",
    "ICountryLookup",

    # Исключения
    "TransportParsingError",
    "NoMatchingFormatError",
    "NoMatchingFormat",
    "KeywordConfigError",
    "ParsingDataFormatError",
]
