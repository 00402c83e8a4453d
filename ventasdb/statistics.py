"""Sales statistics: top cities, best and worst products, best day."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from ventasdb.hashmap import HashMapList
from ventasdb.quicksort import quick_sort
from ventasdb.sale import Sale

T = TypeVar("T")

TABLE_SIZE = 50
INT_MAX = 2**31 - 1


@dataclass(frozen=True)
class Measured(Generic[T]):
    """A computed result with the number of checks made and CPU seconds spent."""

    result: T
    checks: int
    elapsed: float


def _add(table: HashMapList, key: str, amount: float) -> None:
    try:
        current = table.get(key)
    except KeyError:
        table.put(key, amount)
    else:
        table.put(key, current + amount)


def top_cities_by_country(
    sales: Iterable[Sale], limit: int = 5
) -> Measured[dict[str, list[tuple[str, float]]]]:
    """Rank each country's cities by total amount sold, keeping the first ``limit``.

    Sales with an empty country or city are skipped.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    begin = time.process_time()
    checks = 0
    by_country = HashMapList(TABLE_SIZE)

    for sale in sales:
        checks += 1
        if not sale.country:
            continue
        checks += 1
        if not sale.city:
            continue
        try:
            cities = by_country.get(sale.country)
        except KeyError:
            cities = HashMapList(TABLE_SIZE)
        _add(cities, sale.city, sale.total())
        by_country.put(sale.country, cities)

    result: dict[str, list[tuple[str, float]]] = {}
    for country, cities in by_country.items():
        ranking = list(cities.items())
        quick_sort(ranking, lambda a, b: a[1] > b[1])
        checks += 1
        result[country] = ranking[:limit]

    return Measured(result, checks, time.process_time() - begin)


def _quantities_by_product(sales: Iterable[Sale]) -> tuple[HashMapList, int]:
    checks = 0
    table = HashMapList(TABLE_SIZE)
    for sale in sales:
        checks += 1
        if not sale.product:
            continue
        _add(table, sale.product, sale.quantity)
    return table, checks


def best_selling_product(sales: Iterable[Sale]) -> Measured[tuple[str, int] | None]:
    """Return the product with the most units sold, or None when there is none."""
    begin = time.process_time()
    table, checks = _quantities_by_product(sales)

    best_product = ""
    best_quantity = -1
    for product, quantity in table.items():
        checks += 1
        if quantity > best_quantity:
            best_quantity = quantity
            best_product = product

    checks += 1
    result = (best_product, best_quantity) if best_quantity >= 0 else None
    return Measured(result, checks, time.process_time() - begin)


def least_selling_product(sales: Iterable[Sale]) -> Measured[tuple[str, int] | None]:
    """Return the product with the fewest units sold, or None when there is none."""
    begin = time.process_time()
    table, checks = _quantities_by_product(sales)

    worst_product = ""
    worst_quantity = INT_MAX
    for product, quantity in table.items():
        checks += 1
        if quantity < worst_quantity:
            worst_quantity = quantity
            worst_product = product

    checks += 1
    result = (worst_product, worst_quantity) if worst_quantity < INT_MAX else None
    return Measured(result, checks, time.process_time() - begin)


def best_sales_day(sales: Iterable[Sale]) -> Measured[tuple[str, float] | None]:
    """Return the date with the largest total amount, or None when there is none."""
    begin = time.process_time()
    checks = 0
    by_day = HashMapList(TABLE_SIZE)
    for sale in sales:
        checks += 1
        if not sale.date:
            continue
        _add(by_day, sale.date, sale.total())

    best_day = ""
    best_amount = -1.0
    for day, amount in by_day.items():
        checks += 1
        if amount > best_amount:
            best_amount = amount
            best_day = day

    checks += 1
    result = (best_day, best_amount) if best_amount >= 0.0 else None
    return Measured(result, checks, time.process_time() - begin)