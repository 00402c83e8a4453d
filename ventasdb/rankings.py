"""Comparisons of products and shipping methods across countries."""

from __future__ import annotations

import time
from collections.abc import Iterable

from ventasdb.hashmap import HashMapList
from ventasdb.sale import Sale
from ventasdb.statistics import TABLE_SIZE, Measured


def _add(table: HashMapList, key: str, amount: int) -> None:
    try:
        current = table.get(key)
    except KeyError:
        table.put(key, amount)
    else:
        table.put(key, current + amount)


def _top(table: HashMapList) -> tuple[tuple[str, int] | None, int]:
    checks = 0
    best_key = ""
    best_count = -1
    for key, count in table.items():
        checks += 1
        if count > best_count:
            best_count = count
            best_key = key
    return ((best_key, best_count) if best_count >= 0 else None), checks


def compare_products_all_countries(
    sales: Iterable[Sale], first: str, second: str
) -> Measured[tuple[tuple[int, float], tuple[int, float]]]:
    """Units and amount sold of ``first`` and ``second`` over every country."""
    begin = time.process_time()
    checks = 0
    data = HashMapList(TABLE_SIZE)
    for sale in sales:
        checks += 1
        try:
            quantity, amount = data.get(sale.product)
        except KeyError:
            quantity, amount = sale.quantity, sale.total()
        else:
            quantity, amount = quantity + sale.quantity, amount + sale.total()
        data.put(sale.product, (quantity, amount))

    def totals_of(product: str) -> tuple[int, float]:
        try:
            return data.get(product)
        except KeyError:
            return (0, 0.0)

    result = (totals_of(first), totals_of(second))
    return Measured(result, checks, time.process_time() - begin)


def top_products_for_countries(
    sales: Iterable[Sale], first: str, second: str
) -> Measured[tuple[tuple[str, int] | None, tuple[str, int] | None]]:
    """Product with most units sold in ``first`` and in ``second``.

    A sale is counted for ``first`` before ``second``, so naming the same
    country twice leaves the second result empty. None marks a country
    without sales.
    """
    begin = time.process_time()
    checks = 0
    first_counts = HashMapList(TABLE_SIZE)
    second_counts = HashMapList(TABLE_SIZE)
    for sale in sales:
        checks += 1
        if sale.country == first:
            _add(first_counts, sale.product, sale.quantity)
        elif sale.country == second:
            _add(second_counts, sale.product, sale.quantity)

    first_top, first_checks = _top(first_counts)
    second_top, second_checks = _top(second_counts)
    checks += first_checks + second_checks
    return Measured((first_top, second_top), checks, time.process_time() - begin)


def top_shipping_for_countries(
    sales: Iterable[Sale], first: str, second: str
) -> Measured[tuple[tuple[str, int] | None, tuple[str, int] | None]]:
    """Most used shipping method in ``first`` and in ``second``.

    None marks a country without sales.
    """
    begin = time.process_time()
    sales = list(sales)
    checks = 0

    def most_used(country: str) -> tuple[str, int] | None:
        nonlocal checks
        counts = HashMapList(TABLE_SIZE)
        for sale in sales:
            checks += 1
            if sale.country == country:
                _add(counts, sale.shipping_method, 1)
        top, top_checks = _top(counts)
        checks += top_checks
        return top

    result = (most_used(first), most_used(second))
    return Measured(result, checks, time.process_time() - begin)