from ventasdb.queries import compare_countries, sales_in_city, sales_in_country_between
from ventasdb.sale import Sale


def make(sale_id, date, country, city, quantity=1, price=1.0):
    return Sale(
        id=sale_id,
        date=date,
        country=country,
        city=city,
        product="Producto",
        category="Categoria",
        quantity=quantity,
        unit_price=price,
        shipping_method="Aereo",
        shipping_status="Entregado",
    )


SALES = [
    make("1", "2024-03-10", "Chile", "Santiago", 3, 10.0),
    make("2", "2024-01-05", "Chile", "Valparaiso", 2, 5.5),
    make("3", "2024-02-20", "Chile", "Santiago", 1, 100.0),
    make("4", "2024-01-15", "Peru", "Lima", 4, 2.25),
    make("5", "2024-02-01", "Peru", "Lima", 7, 3.0),
    make("6", "2024-01-01", "Chile", "Santiago", 5, 1.0),
]


def test_sales_in_city_ordered_by_date():
    measured = sales_in_city(SALES, "Santiago")
    ids = [sale.id for sale in measured.result]
    assert ids == ["6", "3", "1"]
    assert measured.checks == len(SALES)


def test_sales_in_city_unknown_city_is_empty():
    measured = sales_in_city(SALES, "Bogota")
    assert measured.result == []
    assert measured.checks == len(SALES)


def test_sales_in_city_skips_duplicates():
    duplicate = make("1", "2024-03-10", "Chile", "Santiago")
    measured = sales_in_city(SALES + [duplicate], "Santiago")
    assert [sale.id for sale in measured.result].count("1") == 1
    assert len(measured.result) == len([s for s in SALES if s.city == "Santiago"])


def test_sales_in_city_keeps_same_date_different_id():
    sales = [make("a", "2024-01-01", "Chile", "Arica"), make("b", "2024-01-01", "Chile", "Arica")]
    measured = sales_in_city(sales, "Arica")
    assert sorted(sale.id for sale in measured.result) == ["a", "b"]


def test_country_between_is_inclusive_and_sorted():
    measured = sales_in_country_between(SALES, "Chile", "2024-01-05", "2024-03-10")
    dates = [sale.date for sale in measured.result]
    assert dates == sorted(dates)
    assert {sale.id for sale in measured.result} == {"1", "2", "3"}
    assert measured.checks == len(SALES)


def test_country_between_filters_country():
    measured = sales_in_country_between(SALES, "Peru", "2024-01-01", "2024-12-31")
    assert all(sale.country == "Peru" for sale in measured.result)
    assert len(measured.result) == len([s for s in SALES if s.country == "Peru"])


def test_country_between_empty_range():
    measured = sales_in_country_between(SALES, "Chile", "2025-01-01", "2025-12-31")
    assert measured.result == []


def test_compare_countries_totals():
    measured = compare_countries(SALES, "Chile", "Peru")
    chile = sum(s.total() for s in SALES if s.country == "Chile")
    peru = sum(s.total() for s in SALES if s.country == "Peru")
    assert measured.result[0] == chile
    assert measured.result[1] == peru
    assert measured.checks == len(SALES) + 1


def test_compare_countries_unknown_gives_zero():
    measured = compare_countries(SALES, "Uruguay", "Peru")
    assert measured.result[0] == 0.0
    assert measured.result[1] == sum(s.total() for s in SALES if s.country == "Peru")


def test_compare_countries_no_sales():
    measured = compare_countries([], "Chile", "Peru")
    assert measured.result == (0.0, 0.0)
    assert measured.checks == 1