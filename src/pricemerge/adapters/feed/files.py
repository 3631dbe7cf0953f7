"""Read and write price feed files (JSON or CSV)."""

from __future__ import annotations

import csv
import json
from logging import getLogger
from typing import TYPE_CHECKING, Any, Final

from pydantic import ValidationError

from pricemerge.domain.reconciliation import sort_prices

from .schema import PriceFeed, PricePayload
from .translator import parse_price, price_payload

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from pricemerge.domain.model import PriceRecord


log = getLogger(__name__)

CSV_COLUMNS: Final[tuple[str, ...]] = (
    "id",
    "product_code",
    "price_slot",
    "department",
    "begin",
    "end",
    "value",
)


class PriceFeedError(ValueError):
    """Raised when a price feed file cannot be read or fails validation."""


def load_price_feed(path: Path) -> list[PriceRecord]:
    """Load price records from a ``.json`` or ``.csv`` feed file."""

    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            payloads = _read_json(path)
        elif suffix == ".csv":
            payloads = _read_csv(path)
        else:
            raise PriceFeedError(f"Unsupported price feed format: {path.name}")
    except OSError as exc:
        raise PriceFeedError(f"Cannot read price feed {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise PriceFeedError(f"Invalid JSON in price feed {path}: {exc}") from exc
    except ValidationError as exc:
        raise PriceFeedError(f"Invalid price feed {path}: {exc}") from exc

    log.info("Loaded %s price(s) from %s", len(payloads), path)
    return [parse_price(payload) for payload in payloads]


def dump_price_feed(records: Iterable[PriceRecord], path: Path) -> int:
    """Write ``records`` sorted by key and interval to a ``.json`` or ``.csv`` file.

    Returns the number of records written.
    """

    payloads = [price_payload(record) for record in sort_prices(records)]
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() == ".csv":
        with path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.DictWriter(handle, fieldnames=list(CSV_COLUMNS))
            writer.writeheader()
            for payload in payloads:
                writer.writerow(payload.model_dump(mode="json"))
    else:
        with path.open("w", encoding="utf-8") as handle:
            handle.write(PriceFeed(prices=payloads).model_dump_json(indent=2))
            handle.write("\n")
    log.info("Wrote %s price(s) to %s", len(payloads), path)
    return len(payloads)


def _read_json(path: Path) -> list[PricePayload]:
    with path.open("r", encoding="utf-8") as handle:
        document: Any = json.load(handle)
    if isinstance(document, list):
        document = {"prices": document}
    return PriceFeed.model_validate(document).prices


def _read_csv(path: Path) -> list[PricePayload]:
    payloads: list[PricePayload] = []
    with path.open("r", newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            if not any(value and value.strip() for value in row.values() if value is not None):
                continue
            payloads.append(PricePayload.model_validate(row))
    return payloads
