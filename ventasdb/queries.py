"""Queries filtering sales by city, country and date, and comparing countries."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable

from ventasdb.avl import AVLTree, DuplicateValueError
from ventasdb.hashmap import HashMapList
from ventasdb.sale import Sale
from ventasdb.statistics import TABLE_SIZE, Measured


def _sorted_matches(
    sales: Iterable[Sale], matches: Callable[[Sale], bool]
) -> Measured[list[Sale]]:
    begin = time.process_time()
    checks = 0
    tree = AVLTree()
    for sale in sales:
        checks += 1
        if matches(sale):
            try:
                tree.put(sale)
            except DuplicateValueError:
                pass
    elapsed = time.process_time() - begin
    return Measured(list(tree.inorder()), checks, elapsed)


def sales_in_city(sales: Iterable[Sale], city: str) -> Measured[list[Sale]]:
    """Sales made in ``city``, ordered by date.

    A sale with the same date and id as one already found is left out.
    """
    return _sorted_matches(sales, lambda sale: sale.city == city)


def sales_in_country_between(
    sales: Iterable[Sale], country: str, start: str, end: str
) -> Measured[list[Sale]]:
    """Sales made in ``country`` dated from ``start`` to ``end`` inclusive, by date.

    Dates are compared as text, so they should be written YYYY-MM-DD.
    """
    return _sorted_matches(
        sales,
        lambda sale: sale.country == country and start <= sale.date <= end,
    )


def compare_countries(
    sales: Iterable[Sale], first: str, second: str
) -> Measured[tuple[float, float]]:
    """Total amount sold in ``first`` and in ``second``; an unknown country gives 0."""
    begin = time.process_time()
    checks = 0
    totals = HashMapList(TABLE_SIZE)
    for sale in sales:
        checks += 1
        try:
            current = totals.get(sale.country)
        except KeyError:
            totals.put(sale.country, sale.total())
        else:
            totals.put(sale.country, current + sale.total())

    def total_of(country: str) -> float:
        try:
            return totals.get(country)
        except KeyError:
            return 0.0

    result = (total_of(first), total_of(second))
    checks += 1
    return Measured(result, checks, time.process_time() - begin)