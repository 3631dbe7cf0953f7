from __future__ import annotations

from pricemerge.domain.model import PriceRecord
from tests.helpers.prices import day, make_price


def test_key_is_product_department_slot() -> None:
    price = make_price("01.01.2020", "31.01.2020", 50, department=3, slot=2)

    assert price.key == ("product A", 3, 2)


def test_overlap_is_half_open() -> None:
    january = make_price("01.01.2020", "31.01.2020", 50)
    february = make_price("31.01.2020", "28.02.2020", 50)
    straddling = make_price("30.01.2020", "02.02.2020", 50)

    assert not january.overlaps(february)
    assert not february.overlaps(january)
    assert january.overlaps(straddling)
    assert straddling.overlaps(february)


def test_is_interior_to_requires_strict_containment() -> None:
    outer = make_price("01.01.2020", "31.01.2020", 50)

    assert make_price("10.01.2020", "20.01.2020", 60).is_interior_to(outer)
    assert not make_price("01.01.2020", "20.01.2020", 60).is_interior_to(outer)
    assert not make_price("10.01.2020", "31.01.2020", 60).is_interior_to(outer)


def test_degenerate_when_begin_not_before_end() -> None:
    assert make_price("10.01.2020", "10.01.2020", 50).is_degenerate
    assert make_price("11.01.2020", "10.01.2020", 50).is_degenerate
    assert not make_price("09.01.2020", "10.01.2020", 50).is_degenerate


def test_copy_is_detached_and_keeps_id() -> None:
    original = PriceRecord(
        id=9,
        product_code="product A",
        price_slot=1,
        department=1,
        begin=day("01.01.2020"),
        end=day("31.01.2020"),
        value=50,
        _row_id=42,
    )

    duplicate = original.copy(begin=day("10.01.2020"))

    assert duplicate is not original
    assert duplicate.id == 9
    assert duplicate.begin == day("10.01.2020")
    assert duplicate.end == original.end
    assert duplicate._row_id is None


def test_records_compare_by_identity() -> None:
    first = make_price("01.01.2020", "31.01.2020", 50)
    second = make_price("01.01.2020", "31.01.2020", 50)

    assert first != second
    assert first.as_tuple() == second.as_tuple()
