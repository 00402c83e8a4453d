"""Adding, deleting and modifying sales stored in the CSV file."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

from ventasdb.loader import append_sale, read_sales_file, write_sales_file
from ventasdb.sale import Sale

_TEXT_FIELDS = frozenset(
    {
        "date",
        "country",
        "city",
        "client",
        "product",
        "category",
        "shipping_method",
        "shipping_status",
    }
)


def _check_quantity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError("quantity must be a non-negative integer")
    return value


def _check_price(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ValueError("unit price must be a non-negative number")
    return float(value)


def add_sale(path: str | Path, sale: Sale) -> list[Sale]:
    """Append ``sale`` to the file and return the sales read back from it."""
    _check_quantity(sale.quantity)
    _check_price(sale.unit_price)
    append_sale(path, sale)
    return read_sales_file(path)


def _delete(
    path: str | Path, sales: Iterable[Sale], matches: Callable[[Sale], bool]
) -> tuple[list[Sale], list[Sale]]:
    kept: list[Sale] = []
    removed: list[Sale] = []
    for sale in sales:
        (removed if matches(sale) else kept).append(sale)
    write_sales_file(path, kept)
    return read_sales_file(path), removed


def _delete_matching(
    path: str | Path, sales: Iterable[Sale], matches: Callable[[Sale], bool]
) -> tuple[list[Sale], list[Sale]]:
    sales = list(sales)
    if not any(matches(sale) for sale in sales):
        return sales, []
    return _delete(path, sales, matches)


def delete_by_country(
    path: str | Path, sales: Iterable[Sale], country: str
) -> tuple[list[Sale], list[Sale]]:
    """Delete every sale in ``country``; return (remaining, removed).

    When nothing matches, the file is left untouched.
    """
    return _delete_matching(path, sales, lambda sale: sale.country == country)


def delete_by_city(
    path: str | Path, sales: Iterable[Sale], city: str
) -> tuple[list[Sale], list[Sale]]:
    """Delete every sale in ``city``; return (remaining, removed).

    When nothing matches, the file is left untouched.
    """
    return _delete_matching(path, sales, lambda sale: sale.city == city)


def delete_by_id(
    path: str | Path, sales: Iterable[Sale], sale_id: str
) -> tuple[list[Sale], list[Sale]]:
    """Delete every sale whose id is ``sale_id`` and rewrite the file."""
    return _delete(path, sales, lambda sale: sale.id == sale_id)


def modify_sale(
    path: str | Path,
    sales: Iterable[Sale],
    sale_id: str,
    changes: Mapping[str, Any],
) -> list[Sale]:
    """Apply ``changes`` to the first sale with ``sale_id`` and rewrite the file.

    Raises KeyError when no sale has that id and ValueError for an unknown
    field or an invalid quantity or price.
    """
    updates: dict[str, Any] = {}
    for name, value in changes.items():
        if name == "quantity":
            updates[name] = _check_quantity(value)
        elif name == "unit_price":
            updates[name] = _check_price(value)
        elif name in _TEXT_FIELDS:
            updates[name] = str(value)
        else:
            raise ValueError(f"field cannot be modified: {name!r}")

    sales = list(sales)
    for position, sale in enumerate(sales):
        if sale.id == sale_id:
            sales[position] = dataclasses.replace(sale, **updates)
            break
    else:
        raise KeyError(sale_id)

    write_sales_file(path, sales)
    return read_sales_file(path)