import pytest

from ventasdb.loader import (
    HEADER,
    LoadReport,
    append_sale,
    load_sales,
    parse_csv_line,
    read_sales_file,
    write_sales_file,
)
from ventasdb.sale import Sale


def make_sale(sale_id="1", date="2024-01-01", country="Chile", city="Santiago",
              product="Mouse", quantity=2, price=2.5):
    return Sale(
        id=sale_id,
        date=date,
        country=country,
        city=city,
        client="Ana",
        product=product,
        category="Perifericos",
        quantity=quantity,
        unit_price=price,
        shipping_method="Aereo",
        shipping_status="Entregado",
    )


def test_parse_csv_line_splits_on_commas():
    assert parse_csv_line("a,b,c") == ["a", "b", "c"]


def test_parse_csv_line_keeps_inner_empty_fields():
    assert parse_csv_line("a,,b") == ["a", "", "b"]


def test_parse_csv_line_drops_one_trailing_empty_field():
    assert parse_csv_line("a,b,") == ["a", "b"]
    assert parse_csv_line("a,,") == ["a", ""]


def test_parse_csv_line_empty():
    assert parse_csv_line("") == []


def test_write_then_read_round_trip(tmp_path):
    path = tmp_path / "ventas.csv"
    sales = [make_sale("1"), make_sale("2", date="2024-02-03", quantity=5, price=10.0)]
    write_sales_file(path, sales)
    loaded = read_sales_file(path)
    assert [s.to_fields() for s in loaded] == [s.to_fields() for s in sales]


def test_written_file_starts_with_header(tmp_path):
    path = tmp_path / "ventas.csv"
    write_sales_file(path, [make_sale()])
    first = path.read_text(encoding="utf-8").splitlines()[0]
    assert first == HEADER
    assert first.startswith("ID_Venta,Fecha")


def test_append_sale_adds_row(tmp_path):
    path = tmp_path / "ventas.csv"
    write_sales_file(path, [make_sale("1")])
    append_sale(path, make_sale("2"))
    loaded = read_sales_file(path)
    assert [s.id for s in loaded] == ["1", "2"]


def test_read_missing_file_gives_empty_list(tmp_path):
    assert read_sales_file(tmp_path / "absent.csv") == []


def test_read_sales_file_rejects_bad_quantity(tmp_path):
    path = tmp_path / "ventas.csv"
    path.write_text(HEADER + "\n1,2024-01-01,Chile,Santiago,Ana,Mouse,P,x,1,1,A,E\n",
                    encoding="utf-8")
    with pytest.raises(ValueError):
        read_sales_file(path)


def test_load_sales_valid_file(tmp_path):
    path = tmp_path / "ventas.csv"
    sales = [make_sale("1"), make_sale("2", city="Valparaiso")]
    write_sales_file(path, sales)
    report = load_sales(path)
    assert isinstance(report, LoadReport)
    assert report.lines == len(sales)
    assert report.invalid == 0
    assert [s.id for s in report.sales] == ["1", "2"]
    assert report.index.get(sales[1].key()).id == "2"


def test_load_sales_skips_malformed_and_bad_numbers(tmp_path):
    path = tmp_path / "ventas.csv"
    good = make_sale("1")
    lines = [
        HEADER,
        ",".join(good.to_fields()),
        "solo,tres,campos",
        "2,2024-01-01,Chile,Santiago,Ana,Mouse,P,abc,1,1,A,E",
    ]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    report = load_sales(path)
    assert report.lines == 3
    assert report.invalid == 2
    assert [s.id for s in report.sales] == ["1"]
    assert len(report.messages) == report.invalid


def test_load_sales_skips_empty_key_parts(tmp_path):
    path = tmp_path / "ventas.csv"
    write_sales_file(path, [make_sale("1", city=""), make_sale("2")])
    report = load_sales(path)
    assert [s.id for s in report.sales] == ["2"]
    assert report.invalid == 1


def test_load_sales_same_key_replaces_in_index(tmp_path):
    path = tmp_path / "ventas.csv"
    write_sales_file(path, [make_sale("1"), make_sale("2")])
    report = load_sales(path)
    assert len(report.sales) == 2
    assert len(report.index) == 1
    assert report.index.get(make_sale().key()).id == "2"


def test_load_sales_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_sales(tmp_path / "absent.csv")