"""Pydantic models for price feed rows."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

_DOTTED_DATE_FORMAT = "%d.%m.%Y"


class PriceFeedBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class PricePayload(PriceFeedBaseModel):
    id: int
    product_code: str = Field(validation_alias=AliasChoices("product_code", "productCode"))
    price_slot: int = Field(validation_alias=AliasChoices("price_slot", "number"))
    department: int = Field(validation_alias=AliasChoices("department", "depart"))
    begin: datetime
    end: datetime
    value: int

    @field_validator("product_code")
    @classmethod
    def _strip_product_code(cls, value: str) -> str:
        return value.strip()

    @field_validator("begin", "end", mode="before")
    @classmethod
    def _parse_dotted_date(cls, value: Any) -> Any:
        if isinstance(value, str):
            text = value.strip()
            try:
                return datetime.strptime(text, _DOTTED_DATE_FORMAT).replace(tzinfo=UTC)
            except ValueError:
                return text
        return value

    @field_validator("begin", "end")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)


class PriceFeed(PriceFeedBaseModel):
    prices: list[PricePayload] = Field(default_factory=list["PricePayload"])
