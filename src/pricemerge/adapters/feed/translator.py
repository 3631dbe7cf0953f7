"""Translate price feed payloads into domain records and back."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pricemerge.domain.model import PriceRecord

from .schema import PricePayload

if TYPE_CHECKING:
    from collections.abc import Mapping


type PricePayloadInput = PricePayload | Mapping[str, object]


def _ensure_price_payload(row: PricePayloadInput) -> PricePayload:
    if isinstance(row, PricePayload):
        return row
    return PricePayload.model_validate(row)


def parse_price(row: PricePayloadInput) -> PriceRecord:
    payload = _ensure_price_payload(row)
    return PriceRecord(
        id=payload.id,
        product_code=payload.product_code,
        price_slot=payload.price_slot,
        department=payload.department,
        begin=payload.begin,
        end=payload.end,
        value=payload.value,
    )


def price_payload(record: PriceRecord) -> PricePayload:
    return PricePayload(
        id=record.id,
        product_code=record.product_code,
        price_slot=record.price_slot,
        department=record.department,
        begin=record.begin,
        end=record.end,
        value=record.value,
    )
