"""
Comment Extractor - свободный комментарий к заявке.

1. Есть блок OBSERVATIONS: всё от него до CUSTOMS INSTRUCTIONS (или конца),
   без метки "Observations :", пробелы схлопнуты.
2. Иначе (booking-документы): все строки, начинающиеся с '-', без тире.
"""

import re
from typing import Optional, Sequence

from loguru import logger

OBSERVATIONS_MARKER = "OBSERVATIONS"
CUSTOMS_MARKER = "CUSTOMS INSTRUCTIONS"
OBSERVATIONS_LABEL = re.compile(r"observations\s*:", re.IGNORECASE)


def squish(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


class CommentExtractor:

    def extract(self, lines: Sequence[str]) -> Optional[str]:
        obs_index = self._find(lines, OBSERVATIONS_MARKER)

        if obs_index is not None:
            customs_index = self._find(lines, CUSTOMS_MARKER)
            end = customs_index if customs_index is not None and customs_index > obs_index else len(lines)

            parts = [squish(OBSERVATIONS_LABEL.sub("", line)) for line in lines[obs_index:end]]
            comment = " ".join(p for p in parts if p)
            logger.debug(f"[CommentExtractor] Блок OBSERVATIONS: строки {obs_index}..{end - 1}")
            return comment or None

        parts = [squish(line.strip().lstrip("-")) for line in lines if line.strip().startswith("-")]
        comment = " ".join(p for p in parts if p)
        if comment:
            logger.debug(f"[CommentExtractor] Комментарий из {len(parts)} строк с тире")
        return comment or None

    @staticmethod
    def _find(lines: Sequence[str], marker: str) -> Optional[int]:
        for i, line in enumerate(lines):
            if marker in line.upper():
                return i
        return None
