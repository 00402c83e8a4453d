import pytest

from ventasdb.breakdowns import (
    amount_by_country_and_product,
    average_by_country_and_category,
)
from ventasdb.sale import Sale


def make_sale(
    sale_id="1",
    country="Brasil",
    product="Monitor",
    category="Pantallas",
    quantity=2,
    unit_price=100.0,
):
    return Sale(
        id=sale_id,
        date="2024-05-05",
        country=country,
        city="Sao Paulo",
        client="Cliente",
        product=product,
        category=category,
        quantity=quantity,
        unit_price=unit_price,
        shipping_method="Aereo",
        shipping_status="Pendiente",
    )


SALES = [
    make_sale("1", country="Brasil", product="Monitor", category="Pantallas", quantity=2),
    make_sale("2", country="Brasil", product="Monitor", category="Pantallas", quantity=5),
    make_sale("3", country="Brasil", product="Mouse", category="Perifericos", unit_price=7.5),
    make_sale("4", country="Chile", product="Mouse", category="Perifericos", quantity=3),
    make_sale("5", country="Chile", product="Cable", category="Accesorios", unit_price=2.0),
]


def test_empty_sales():
    assert amount_by_country_and_product([]).result == {}
    assert average_by_country_and_category([]).result == {}


def test_amount_groups_by_country_and_product():
    result = amount_by_country_and_product(SALES).result
    assert set(result) == {"Brasil", "Chile"}
    assert set(result["Brasil"]) == {"Monitor", "Mouse"}
    assert set(result["Chile"]) == {"Mouse", "Cable"}


def test_amount_totals_match_sales():
    result = amount_by_country_and_product(SALES).result
    grand_total = sum(amount for products in result.values() for amount in products.values())
    assert grand_total == pytest.approx(sum(sale.total() for sale in SALES))
    assert result["Brasil"]["Monitor"] == pytest.approx(SALES[0].total() + SALES[1].total())


def test_amount_skips_empty_fields():
    sales = [
        make_sale("1", country="", product="X"),
        make_sale("2", country="Peru", product=""),
        make_sale("3", country="Peru", product="Y"),
    ]
    measured = amount_by_country_and_product(sales)
    assert measured.result == {"Peru": {"Y": pytest.approx(sales[2].total())}}
    assert measured.checks == len(sales)


def test_average_per_category():
    result = average_by_country_and_category(SALES).result
    assert result["Brasil"]["Pantallas"] == pytest.approx(
        (SALES[0].total() + SALES[1].total()) / 2
    )
    assert result["Brasil"]["Perifericos"] == pytest.approx(SALES[2].total())
    assert set(result["Chile"]) == {"Perifericos", "Accesorios"}


def test_average_single_sale_equals_its_total():
    sale = make_sale(quantity=3, unit_price=12.5)
    result = average_by_country_and_category([sale]).result
    assert result == {"Brasil": {"Pantallas": pytest.approx(sale.total())}}


def test_average_skips_empty_category_and_counts_checks():
    sales = [make_sale("1", category=""), make_sale("2", category="Audio")]
    measured = average_by_country_and_category(sales)
    assert list(measured.result["Brasil"]) == ["Audio"]
    categories = sum(len(cats) for cats in measured.result.values())
    assert measured.checks == len(sales) + categories


def test_average_lies_between_extremes():
    sales = [
        make_sale("1", category="Audio", quantity=1, unit_price=10.0),
        make_sale("2", category="Audio", quantity=4, unit_price=30.0),
        make_sale("3", category="Audio", quantity=2, unit_price=5.0),
    ]
    average = average_by_country_and_category(sales).result["Brasil"]["Audio"]
    totals = [sale.total() for sale in sales]
    assert min(totals) <= average <= max(totals)