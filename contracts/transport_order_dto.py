"""
DTO контракт: Parsing -> создание заказа (внешний сервис)

Нормализованная транспортная заявка, извлечённая из строк PDF.

ВАЖНО: Любое необязательное поле либо отсутствует, либо содержит
непустое корректное значение. Пустые строки приводятся к None
и не попадают в to_dict().
"""

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(v: Any) -> Any:
    if isinstance(v, str):
        v = v.strip()
        return v or None
    return v


class CompanyAddress(BaseModel):
    """Реквизиты стороны или точки погрузки/выгрузки."""

    company: str | None = Field(None, description="Название компании")
    street_address: str | None = Field(None, description="Улица (несколько строк через ', ')")
    postal_code: str | None = Field(None, description="Почтовый индекс как в документе")
    city: str | None = Field(None, description="Город")
    country: str | None = Field(None, description="ISO-3166 alpha-2 (или догадка по префиксу)")

    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def strip_blank(cls, v: Any) -> Any:
        return _blank_to_none(v)


class TimeWindow(BaseModel):
    """Окно времени погрузки/доставки (ISO-8601)."""

    datetime_from: str | None = Field(None, description="Начало окна")
    datetime_to: str | None = Field(None, description="Конец окна")

    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def strip_blank(cls, v: Any) -> Any:
        return _blank_to_none(v)

    def is_empty(self) -> bool:
        return self.datetime_from is None and self.datetime_to is None


class PartyDTO(BaseModel):
    """Сторона заявки (заказчик)."""

    side: str = Field(..., description="Роль стороны, например 'sender'")
    details: CompanyAddress = Field(default_factory=CompanyAddress)

    model_config = ConfigDict(frozen=True)


class LocationDTO(BaseModel):
    """
    Точка погрузки или выгрузки.

    Создаётся для каждого найденного якоря секции, даже если ни одно поле
    не удалось прочитать.
    """

    company_address: CompanyAddress = Field(default_factory=CompanyAddress)
    time: TimeWindow | None = Field(None, description="Окно времени, если найдено")

    model_config = ConfigDict(frozen=True)

    @field_validator("time")
    @classmethod
    def drop_empty_time(cls, v: TimeWindow | None) -> TimeWindow | None:
        if v is not None and v.is_empty():
            return None
        return v


class CargoDTO(BaseModel):
    """Груз. Связан с точкой только порядком в документе и номером."""

    title: str = Field(..., description="Строка-описание груза как в документе")
    package_count: int | None = Field(None, description="Количество мест")
    package_type: Literal["pallet", "other"] = Field(..., description="Тип упаковки")
    weight: float | None = Field(None, description="Вес, кг")
    volume: float | None = Field(None, description="Объём")
    number: str | None = Field(None, description="Ссылка на строку заказа")

    model_config = ConfigDict(frozen=True)

    @field_validator("title", "number", mode="before")
    @classmethod
    def strip_blank(cls, v: Any) -> Any:
        return _blank_to_none(v)

    @field_validator("package_count")
    @classmethod
    def validate_package_count(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            return None
        return v


class TransportOrderDTO(BaseModel):
    """
    DTO нормализованной транспортной заявки.

    Это output домена Parsing. Передается во внешний сервис создания заказа
    как обычный словарь (см. to_dict).
    """

    attachment_filenames: List[str] = Field(default_factory=list, description="Имена исходных файлов")
    customer: PartyDTO | None = Field(None, description="Заказчик")
    loading_locations: List[LocationDTO] = Field(default_factory=list)
    destination_locations: List[LocationDTO] = Field(default_factory=list)
    cargos: List[CargoDTO] = Field(default_factory=list)
    order_reference: str | None = Field(None, description="Номер заказа")
    freight_price: float | None = Field(None, description="Ставка фрахта")
    freight_currency: str | None = Field(None, description="Валюта фрахта")
    comment: str | None = Field(None, description="Комментарий")

    model_config = ConfigDict(frozen=True)

    @field_validator("order_reference", "freight_currency", "comment", mode="before")
    @classmethod
    def strip_blank(cls, v: Any) -> Any:
        return _blank_to_none(v)

    def to_dict(self) -> Dict[str, Any]:
        """
        Словарь для внешнего сервиса.

        None и пустые коллекции верхнего уровня не выводятся.
        """
        data = self.model_dump(exclude_none=True)
        return {key: value for key, value in data.items() if value not in ([], {}, "")}
