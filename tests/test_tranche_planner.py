from __future__ import annotations

import pytest

from cse_portfolio.application.use_cases.tranche_planner import (
    add_tranche,
    allocation_percent_total,
    create_stock_entry,
    flatten_stock_entries,
    remove_tranche,
)


def test_new_stock_entry_has_single_full_tranche() -> None:
    stock = create_stock_entry("COMB", price=102.5, allocation_percent=20.0, is_priority=True)

    assert len(stock.tranches) == 1
    assert stock.tranches[0].percent == 100
    assert stock.tranches[0].price == 102.5
    assert stock.is_priority is True


def test_add_tranche_gives_remainder_to_new_tranche() -> None:
    stock = create_stock_entry("COMB", price=100.0)

    two = add_tranche(stock)
    three = add_tranche(two, price=90.0, label="Price Drop")

    assert [tranche.percent for tranche in two.tranches] == [50, 50]
    assert [tranche.percent for tranche in three.tranches] == [33, 33, 34]
    assert two.tranches[1].price == 100.0
    assert two.tranches[1].label == "Tranche 2"
    assert three.tranches[2].label == "Price Drop"
    assert three.tranches[2].price == 90.0


@pytest.mark.parametrize("count", [2, 3, 6, 7, 9])
def test_percentages_always_close_to_100(count: int) -> None:
    stock = create_stock_entry("HNB", price=238.0)
    for _ in range(count - 1):
        stock = add_tranche(stock)
    assert stock.tranche_percent_total() == 100

    stock = remove_tranche(stock, stock.tranches[0].id)
    assert stock is not None
    assert stock.tranche_percent_total() == 100


def test_remove_tranche_gives_remainder_to_last() -> None:
    stock = create_stock_entry("SAMP", price=71.3)
    for _ in range(3):
        stock = add_tranche(stock)
    assert [tranche.percent for tranche in stock.tranches] == [25, 25, 25, 25]

    removed_id = stock.tranches[1].id
    reduced = remove_tranche(stock, removed_id)

    assert reduced is not None
    assert [tranche.percent for tranche in reduced.tranches] == [33, 33, 34]
    assert removed_id not in {tranche.id for tranche in reduced.tranches}


def test_removing_last_tranche_drops_the_stock() -> None:
    stock = create_stock_entry("DIAL", price=12.4)
    assert remove_tranche(stock, stock.tranches[0].id) is None


def test_redistribution_does_not_mutate_input() -> None:
    stock = create_stock_entry("JKH", price=194.75)
    add_tranche(stock)
    assert [tranche.percent for tranche in stock.tranches] == [100]


def test_flatten_carries_provenance() -> None:
    first = add_tranche(create_stock_entry("JKH", price=200.0, allocation_percent=30.0), price=180.0)
    second = create_stock_entry("DIAL", price=12.4, allocation_percent=20.0, is_priority=True)

    requests = flatten_stock_entries([first, second])

    assert [request.symbol for request in requests] == ["JKH", "JKH", "DIAL"]
    assert [request.tranche_percent for request in requests] == [50.0, 50.0, 100.0]
    assert requests[1].price == 180.0
    assert requests[2].is_priority is True
    assert requests[0].entry_id == first.id
    assert allocation_percent_total([first, second]) == 50.0
