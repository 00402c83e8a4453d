"""Most frequent shipping method and shipping status per group."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable

from ventasdb.hashmap import HashMapList
from ventasdb.sale import Sale
from ventasdb.statistics import TABLE_SIZE, Measured

_Field = Callable[[Sale], str]


def _most_frequent(
    sales: Iterable[Sale], group_of: _Field, value_of: _Field
) -> Measured[dict[str, tuple[str, int]]]:
    begin = time.process_time()
    checks = 0
    by_group = HashMapList(TABLE_SIZE)

    for sale in sales:
        group = group_of(sale)
        value = value_of(sale)
        checks += 1
        if not group or not value:
            continue
        try:
            counts = by_group.get(group)
        except KeyError:
            counts = HashMapList(TABLE_SIZE)
        try:
            current = counts.get(value)
        except KeyError:
            counts.put(value, 1)
        else:
            counts.put(value, current + 1)
        by_group.put(group, counts)

    result: dict[str, tuple[str, int]] = {}
    for group, counts in by_group.items():
        best_value = ""
        best_count = -1
        for value, count in counts.items():
            checks += 1
            if count > best_count:
                best_count = count
                best_value = value
        result[group] = (best_value, best_count)

    return Measured(result, checks, time.process_time() - begin)


def top_shipping_by_country(
    sales: Iterable[Sale],
) -> Measured[dict[str, tuple[str, int]]]:
    """Most used shipping method in each country, with its number of shipments.

    Sales with an empty country or shipping method are skipped.
    """
    return _most_frequent(
        sales, lambda sale: sale.country, lambda sale: sale.shipping_method
    )


def top_shipping_by_category(
    sales: Iterable[Sale],
) -> Measured[dict[str, tuple[str, int]]]:
    """Most used shipping method in each category, with its number of shipments.

    Sales with an empty category or shipping method are skipped.
    """
    return _most_frequent(
        sales, lambda sale: sale.category, lambda sale: sale.shipping_method
    )


def top_status_by_country(
    sales: Iterable[Sale],
) -> Measured[dict[str, tuple[str, int]]]:
    """Most frequent shipping status in each country, with its count.

    Sales with an empty country or shipping status are skipped.
    """
    return _most_frequent(
        sales, lambda sale: sale.country, lambda sale: sale.shipping_status
    )