"""Well-formedness checks callers run before reconciling prices.

The reconciliation core does not validate its input: malformed records flow through
the same rules and produce unspecified output. Application services call
``validate_prices`` on incoming feeds before merging.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from pricemerge.domain.model import PriceRecord


@dataclass(frozen=True, slots=True)
class PriceProblem:
    """A single reason why a record is not well-formed."""

    record: PriceRecord
    reason: str

    def describe(self) -> str:
        record = self.record
        return (
            f"price id={record.id} product={record.product_code!r} "
            f"department={record.department} slot={record.price_slot}: {self.reason}"
        )


class InvalidPriceRecordError(ValueError):
    """Raised when incoming price records are not well-formed."""

    def __init__(self, problems: Iterable[PriceProblem]) -> None:
        self.problems = tuple(problems)
        details = "; ".join(problem.describe() for problem in self.problems)
        super().__init__(f"{len(self.problems)} invalid price record(s): {details}")


def find_invalid_prices(records: Iterable[PriceRecord]) -> list[PriceProblem]:
    """Return every problem found in ``records`` without raising."""

    problems: list[PriceProblem] = []
    for record in records:
        if not record.product_code.strip():
            problems.append(PriceProblem(record, "product code is blank"))
        if record.begin.tzinfo is None or record.end.tzinfo is None:
            problems.append(PriceProblem(record, "timestamps must include timezone information"))
        elif record.is_degenerate:
            problems.append(
                PriceProblem(
                    record,
                    f"begin {record.begin.isoformat()} is not before end {record.end.isoformat()}",
                )
            )
        if record.value < 0:
            problems.append(PriceProblem(record, f"negative value {record.value}"))
    return problems


def validate_prices(records: Iterable[PriceRecord]) -> None:
    """Raise ``InvalidPriceRecordError`` if any record is malformed."""

    problems = find_invalid_prices(records)
    if problems:
        raise InvalidPriceRecordError(problems)
