"""Product comparisons and average thresholds within one country."""

from __future__ import annotations

import operator
import time
from collections.abc import Callable, Iterable

from ventasdb.hashmap import HashMapList
from ventasdb.sale import Sale
from ventasdb.statistics import TABLE_SIZE, Measured


def compare_products_in_country(
    sales: Iterable[Sale], country: str, first: str, second: str
) -> Measured[tuple[float, float]]:
    """Total amount sold of ``first`` and of ``second`` in ``country``.

    A product with no sales in that country counts as 0.
    """
    begin = time.process_time()
    checks = 0
    totals = HashMapList(TABLE_SIZE)
    for sale in sales:
        checks += 1
        if sale.country != country:
            continue
        try:
            current = totals.get(sale.product)
        except KeyError:
            totals.put(sale.product, sale.total())
        else:
            totals.put(sale.product, current + sale.total())

    def total_of(product: str) -> float:
        try:
            return totals.get(product)
        except KeyError:
            return 0.0

    result = (total_of(first), total_of(second))
    checks += 1
    return Measured(result, checks, time.process_time() - begin)


def _products_by_average(
    sales: Iterable[Sale],
    country: str,
    threshold: float,
    keep: Callable[[float, float], bool],
) -> Measured[list[tuple[str, float]]]:
    begin = time.process_time()
    checks = 0
    data = HashMapList(TABLE_SIZE)
    for sale in sales:
        checks += 1
        if sale.country != country:
            continue
        try:
            amount, quantity = data.get(sale.product)
        except KeyError:
            amount, quantity = sale.total(), sale.quantity
        else:
            amount, quantity = amount + sale.total(), quantity + sale.quantity
        data.put(sale.product, (amount, quantity))

    found: list[tuple[str, float]] = []
    for product, (amount, quantity) in data.items():
        average = amount / quantity if quantity > 0 else 0.0
        checks += 1
        if keep(average, threshold):
            found.append((product, average))

    return Measured(found, checks, time.process_time() - begin)


def products_above_average(
    sales: Iterable[Sale], country: str, threshold: float
) -> Measured[list[tuple[str, float]]]:
    """Products in ``country`` whose amount per unit sold exceeds ``threshold``."""
    return _products_by_average(sales, country, threshold, operator.gt)


def products_below_average(
    sales: Iterable[Sale], country: str, threshold: float
) -> Measured[list[tuple[str, float]]]:
    """Products in ``country`` whose amount per unit sold is under ``threshold``."""
    return _products_by_average(sales, country, threshold, operator.lt)