"""
Strategies sub-package домена Parsing.

Реализует Strategy Pattern: одна стратегия на формат перевозчика.
"""

from .base import BaseTransportStrategy, clean_lines
from .section_config import SectionConfig, SectionKind
from .ziegler import ZieglerStrategy
from .transalliance import TransallianceStrategy

__all__ = [
    "BaseTransportStrategy",
    "clean_lines",
    "SectionConfig",
    "SectionKind",
    "ZieglerStrategy",
    "TransallianceStrategy",
]
