"""
Экстракторы полей транспортной заявки.

Все экстракторы best-effort: не нашли - вернули None.
"""

from .comment_extractor import CommentExtractor
from .customer_extractor import BlockCustomerExtractor, HeaderCustomerExtractor
from .price_extractor import FreightPriceExtractor, PriceLabel
from .reference_extractor import OrderReferenceExtractor, ReferenceLabel
from .country_resolver import CountryResolution, extract_country_from_text
from .datetime_normalizer import normalize_single_time
from .time_extractor import TimeConvention, resolve_time_window

__all__ = [
    "CommentExtractor",
    "BlockCustomerExtractor",
    "HeaderCustomerExtractor",
    "FreightPriceExtractor",
    "PriceLabel",
    "OrderReferenceExtractor",
    "ReferenceLabel",
    "CountryResolution",
    "extract_country_from_text",
    "normalize_single_time",
    "TimeConvention",
    "resolve_time_window",
]
