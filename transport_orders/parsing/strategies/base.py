"""
Base Transport Strategy - общий движок разбора заявок перевозчиков.

Каждая стратегия знает:
- свои ключевые слова (для can_handle, передаются в конструктор)
- свои секции (SectionConfig: якорь, finder'ы, индекс, страна, время)
- как найти заказчика

Движок секций одинаков для всех:
1. Ищем строки, равные якорю секции (каждая - отдельная секция)
2. От каждого якоря независимо ищем компанию, улицу, индекс, груз, время
3. Пустые поля выбрасываем, точку добавляем всегда
4. Грузы складываем в общий список заявки, не внутрь точки

Пересекающиеся окна соседних якорей не разводятся: поля близко стоящих
секций могут "перетекать" друг в друга.
"""

from abc import abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from loguru import logger

from config.settings import DEFAULT_ATTACHMENT_NAME
from contracts.transport_order_dto import CargoDTO, CompanyAddress, LocationDTO, PartyDTO
from ..domain.interfaces import IKeywordProvider, IPdfParserStrategy
from ..extractors.comment_extractor import CommentExtractor
from ..extractors.price_extractor import FreightPriceExtractor, PriceLabel
from ..extractors.reference_extractor import OrderReferenceExtractor
from ..extractors.section_fields import split_postal
from ..extractors.time_extractor import resolve_time_window
from ..keywords.keyword_loader import KeywordConfig
from ..order_builder import TransportOrderBuilder
from .section_config import SectionConfig, SectionKind

KeywordSource = Union[IKeywordProvider, Mapping[str, Sequence[str]], None]


def clean_lines(lines: Sequence[str]) -> List[str]:
    """Trim + выброс пустых строк. Индексы дальше считаются по этому списку."""
    return [str(line).strip() for line in lines if line is not None and str(line).strip()]


def attachment_names(filename: Optional[str]) -> List[str]:
    return [(filename or DEFAULT_ATTACHMENT_NAME).lower()]


class BaseTransportStrategy(IPdfParserStrategy):
    """
    Базовая стратегия. Экземпляр не меняется после конструктора и
    может разбирать любое число документов параллельно.
    """

    # Метки ставки фрахта перевозчика (None - все известные метки)
    PRICE_LABELS: Optional[Sequence[PriceLabel]] = None

    def __init__(self, keywords: KeywordSource = None):
        if keywords is None:
            keywords = KeywordConfig.load()
        elif not isinstance(keywords, IKeywordProvider):
            keywords = KeywordConfig.from_mapping(keywords)

        self._keywords = tuple(k.upper() for k in keywords.keywords_for(self.name))
        self._sections: Tuple[SectionConfig, ...] = tuple(self._build_sections())
        self._anchors = frozenset(section.anchor for section in self._sections)

        self.reference_extractor = OrderReferenceExtractor()
        self.price_extractor = FreightPriceExtractor(self.PRICE_LABELS)
        self.comment_extractor = CommentExtractor()

        logger.debug(
            f"[{self.name}] Стратегия создана: keywords={list(self._keywords)}, "
            f"sections={[s.anchor for s in self._sections]}"
        )

    @property
    def name(self) -> str:
        return type(self).__name__.removesuffix("Strategy")

    @property
    def keywords(self) -> Tuple[str, ...]:
        return self._keywords

    @property
    def sections(self) -> Tuple[SectionConfig, ...]:
        return self._sections

    @abstractmethod
    def _build_sections(self) -> Sequence[SectionConfig]:
        """Конфигурация секций в порядке сканирования."""
        pass

    @abstractmethod
    def extract_customer(self, lines: Sequence[str]) -> PartyDTO:
        pass

    def can_handle(self, lines: Sequence[str]) -> bool:
        haystack = [str(line).upper() for line in lines if line]

        for keyword in self._keywords:
            if any(keyword in line for line in haystack):
                logger.debug(f"[{self.name}] Ключевое слово '{keyword}' найдено")
                return True

        return False

    def parse(self, lines: Sequence[str], filename: Optional[str] = None) -> Dict[str, Any]:
        lines = clean_lines(lines)
        logger.info(f"[{self.name}] Разбор '{filename}': {len(lines)} строк")

        loading: List[LocationDTO] = []
        destinations: List[LocationDTO] = []
        cargos: List[CargoDTO] = []

        for section in self._sections:
            for idx in self.find_anchors(lines, section.anchor):
                location, cargo = self.scan_section(lines, idx, section)

                if section.kind == SectionKind.LOADING:
                    loading.append(location)
                else:
                    destinations.append(location)

                if cargo is not None:
                    cargos.append(cargo)

        price, currency = self.price_extractor.extract(lines)

        return (
            TransportOrderBuilder()
            .with_attachments(attachment_names(filename))
            .with_customer(self.extract_customer(lines))
            .with_order_reference(self.reference_extractor.extract(lines))
            .with_freight(price, currency)
            .with_comment(self.comment_extractor.extract(lines))
            .when(loading, lambda b: b.with_loading_locations(loading))
            .when(destinations, lambda b: b.with_destination_locations(destinations))
            .when(cargos, lambda b: b.with_cargos(cargos))
            .build()
        )

    @staticmethod
    def find_anchors(lines: Sequence[str], anchor: str) -> List[int]:
        return [i for i, line in enumerate(lines) if line == anchor]

    def scan_section(
        self,
        lines: Sequence[str],
        idx: int,
        section: SectionConfig,
    ) -> Tuple[LocationDTO, Optional[CargoDTO]]:
        """Одна секция от якоря idx: точка + (опционально) груз."""
        company = section.company_finder(lines, idx)
        street = section.street_finder(lines, idx)
        postal_line = section.postal_finder(lines, idx)
        postal_code, city = split_postal(postal_line, section.postal_regex)
        country = section.country.resolve(postal_code)

        if street is None and section.street_falls_back_to_postal:
            street = postal_line

        time_window = resolve_time_window(lines, idx, section.time_convention, self._anchors)

        location = LocationDTO(
            company_address=CompanyAddress(
                company=company,
                street_address=street,
                city=city,
                postal_code=postal_code,
                country=country,
            ),
            time=time_window,
        )

        cargo = section.cargo_finder(lines, idx)

        logger.debug(
            f"[{self.name}] Секция '{section.anchor}'@{idx}: "
            f"{location.company_address.model_dump(exclude_none=True)}, "
            f"time={'да' if location.time else 'нет'}, cargo={'да' if cargo else 'нет'}"
        )
        return location, cargo
