"""
Order Reference Extractor - номер заказа по метке.

В зависимости от метки номер стоит либо в той же строке после метки,
либо целиком в следующей строке.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from loguru import logger


@dataclass(frozen=True)
class ReferenceLabel:
    label: str
    same_line: bool


class OrderReferenceExtractor:
    """
    Первая строка документа, содержащая одну из меток.

    Метки проверяются в каждой строке в порядке LABELS.
    """

    LABELS: List[ReferenceLabel] = [
        ReferenceLabel("REF.:", same_line=True),
        ReferenceLabel("Ziegler Ref", same_line=False),
        ReferenceLabel("REFERENCE :", same_line=False),
    ]

    def __init__(self, labels: Optional[Sequence[ReferenceLabel]] = None):
        self.labels = list(labels) if labels is not None else list(self.LABELS)

    def extract(self, lines: Sequence[str]) -> Optional[str]:
        for i, line in enumerate(lines):
            for ref_label in self.labels:
                if ref_label.label not in line:
                    continue

                if ref_label.same_line:
                    value = line.split(ref_label.label, 1)[1].strip()
                else:
                    value = lines[i + 1].strip() if i + 1 < len(lines) else ""

                logger.debug(f"[OrderReferenceExtractor] Метка '{ref_label.label}' в строке {i}: '{value}'")
                return value or None

        logger.trace("[OrderReferenceExtractor] Метка номера заказа не найдена")
        return None
