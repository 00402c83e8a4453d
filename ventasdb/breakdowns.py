"""Amount and average breakdowns grouped by country."""

from __future__ import annotations

import time
from collections.abc import Iterable

from ventasdb.hashmap import HashMapList
from ventasdb.sale import Sale
from ventasdb.statistics import TABLE_SIZE, Measured


def _inner_table(outer: HashMapList, key: str) -> HashMapList:
    try:
        return outer.get(key)
    except KeyError:
        return HashMapList(TABLE_SIZE)


def amount_by_country_and_product(
    sales: Iterable[Sale],
) -> Measured[dict[str, dict[str, float]]]:
    """Total amount sold for each product in each country.

    Sales with an empty country or product are skipped.
    """
    begin = time.process_time()
    checks = 0
    by_country = HashMapList(TABLE_SIZE)

    for sale in sales:
        checks += 1
        if not sale.country or not sale.product:
            continue
        products = _inner_table(by_country, sale.country)
        try:
            current = products.get(sale.product)
        except KeyError:
            products.put(sale.product, sale.total())
        else:
            products.put(sale.product, current + sale.total())
        by_country.put(sale.country, products)

    result = {
        country: dict(products.items()) for country, products in by_country.items()
    }
    return Measured(result, checks, time.process_time() - begin)


def average_by_country_and_category(
    sales: Iterable[Sale],
) -> Measured[dict[str, dict[str, float]]]:
    """Average amount per sale for each category in each country.

    Sales with an empty country or category are skipped.
    """
    begin = time.process_time()
    checks = 0
    by_country = HashMapList(TABLE_SIZE)

    for sale in sales:
        checks += 1
        if not sale.country or not sale.category:
            continue
        categories = _inner_table(by_country, sale.country)
        try:
            amount, count = categories.get(sale.category)
        except KeyError:
            categories.put(sale.category, (sale.total(), 1))
        else:
            categories.put(sale.category, (amount + sale.total(), count + 1))
        by_country.put(sale.country, categories)

    result: dict[str, dict[str, float]] = {}
    for country, categories in by_country.items():
        averages: dict[str, float] = {}
        for category, (amount, count) in categories.items():
            checks += 1
            averages[category] = amount / count if count > 0 else 0.0
        result[country] = averages

    return Measured(result, checks, time.process_time() - begin)