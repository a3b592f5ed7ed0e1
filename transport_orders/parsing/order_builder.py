"""
Transport Order Builder - сборка нормализованной заявки.

Fluent-обёртка над TransportOrderDTO: стратегия складывает найденные части,
build() отдаёт обычный словарь без пустых полей.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence

from loguru import logger

from contracts.transport_order_dto import CargoDTO, LocationDTO, PartyDTO, TransportOrderDTO


class TransportOrderBuilder:

    def __init__(self):
        self._fields: Dict[str, Any] = {}

    def with_attachments(self, attachments: Sequence[str]) -> "TransportOrderBuilder":
        self._fields["attachment_filenames"] = list(attachments)
        return self

    def with_customer(self, customer: Optional[PartyDTO]) -> "TransportOrderBuilder":
        self._fields["customer"] = customer
        return self

    def with_loading_locations(self, locations: List[LocationDTO]) -> "TransportOrderBuilder":
        self._fields["loading_locations"] = list(locations)
        return self

    def with_destination_locations(self, locations: List[LocationDTO]) -> "TransportOrderBuilder":
        self._fields["destination_locations"] = list(locations)
        return self

    def with_cargos(self, cargos: List[CargoDTO]) -> "TransportOrderBuilder":
        self._fields["cargos"] = list(cargos)
        return self

    def with_order_reference(self, reference: Optional[str]) -> "TransportOrderBuilder":
        self._fields["order_reference"] = reference
        return self

    def with_freight(self, price: Optional[float], currency: Optional[str]) -> "TransportOrderBuilder":
        self._fields["freight_price"] = price
        # Валюта без цены не имеет смысла
        self._fields["freight_currency"] = currency if price is not None else None
        return self

    def with_comment(self, comment: Optional[str]) -> "TransportOrderBuilder":
        self._fields["comment"] = comment
        return self

    def when(self, value: Any, callback: Callable[["TransportOrderBuilder"], Any]) -> "TransportOrderBuilder":
        """Вызывает callback(self), только если value непустое."""
        if value:
            callback(self)
        return self

    def build_dto(self) -> TransportOrderDTO:
        return TransportOrderDTO(**self._fields)

    def build(self) -> Dict[str, Any]:
        dto = self.build_dto()
        logger.info(
            f"[TransportOrderBuilder] Заявка собрана: "
            f"{len(dto.loading_locations)} погрузок, {len(dto.destination_locations)} доставок, "
            f"{len(dto.cargos)} грузов, ref={dto.order_reference}, price={dto.freight_price}"
        )
        return dto.to_dict()
