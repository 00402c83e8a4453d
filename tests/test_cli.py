import io
import sys

from ventasdb.cli import Console, main
from ventasdb.loader import read_sales_file, write_sales_file
from ventasdb.sale import Sale

SALES = [
    Sale(
        id="1",
        date="2024-01-02",
        country="Chile",
        city="Santiago",
        client="Ana",
        product="Mouse",
        category="Perifericos",
        quantity=3,
        unit_price=10.0,
        shipping_method="Aereo",
        shipping_status="Entregado",
    ),
    Sale(
        id="2",
        date="2024-01-05",
        country="Peru",
        city="Lima",
        client="Luis",
        product="Teclado",
        category="Perifericos",
        quantity=1,
        unit_price=5.0,
        shipping_method="Terrestre",
        shipping_status="Pendiente",
    ),
]


def session(tmp_path, text, preload=True):
    path = tmp_path / "ventas.csv"
    if preload:
        write_sales_file(path, SALES)
    out = io.StringIO()
    console = Console(path, io.StringIO(text), out)
    console.run()
    return out.getvalue(), path, console


def test_load_reports_lines(tmp_path):
    output, _, console = session(tmp_path, "1\n0\n")
    assert f"Se procesaron {len(SALES)} lineas de datos." in output
    assert "Base de datos cargada correctamente." in output
    assert [sale.id for sale in console.sales] == ["1", "2"]


def test_load_missing_file(tmp_path):
    output, _, console = session(tmp_path, "1\n0\n", preload=False)
    assert "No se pudo abrir el archivo!" in output
    assert console.sales == []


def test_invalid_main_option(tmp_path):
    output, _, _ = session(tmp_path, "7\nabc\n0\n")
    assert output.count("Opcion invalida. Intente nuevamente.") == 2
    assert output.rstrip().endswith("Saliendo del programa...")


def test_end_of_input_stops_session(tmp_path):
    output, _, _ = session(tmp_path, "")
    assert "=== MENU PRINCIPAL ===" in output
    assert "Saliendo del programa..." not in output


def test_best_product_statistic(tmp_path):
    output, _, _ = session(tmp_path, "1\n2\n2\n0\n0\n")
    assert (
        "El producto mas vendido es Mouse, con un total de 3 unidades vendidas."
        in output
    )


def test_statistics_menu_direct(tmp_path):
    out = io.StringIO()
    console = Console(tmp_path / "x.csv", io.StringIO("9\n0\n"), out)
    console.sales = list(SALES)
    console.statistics_menu()
    text = out.getvalue()
    assert "El estado de envio mas frecuente en Chile es 'Entregado'" in text
    assert "Volviendo al menu principal..." in text


def test_query_by_city(tmp_path):
    output, _, _ = session(tmp_path, "1\n4\n1\nSantiago\n0\n0\n")
    assert str(SALES[0]) in output
    assert str(SALES[1]) not in output


def test_query_unknown_city(tmp_path):
    output, _, _ = session(tmp_path, "1\n4\n1\nQuito\n0\n0\n")
    assert "No se encontraron ventas en la ciudad 'Quito'." in output


def test_query_compare_countries(tmp_path):
    out = io.StringIO()
    console = Console(tmp_path / "x.csv", io.StringIO("3\nChile\nPeru\n0\n"), out)
    console.sales = list(SALES)
    console.queries_menu()
    text = out.getvalue()
    assert "=== Comparacion de Monto Total ===" in text
    assert "El pais con mayor monto total de ventas es Chile" in text


def test_add_sale_writes_file(tmp_path):
    answers = "\n".join(
        [
            "3", "1", "9", "2024-02-01", "Chile", "Temuco", "Eva", "Monitor",
            "Pantallas", "-1", "abc", "2", "99.5", "Aereo", "Pendiente", "0", "0",
        ]
    )
    output, path, console = session(tmp_path, answers + "\n")
    assert "Venta agregada exitosamente." in output
    assert "Numero invalido" in output
    stored = read_sales_file(path)
    added = [sale for sale in stored if sale.id == "9"]
    assert len(added) == 1
    assert added[0].quantity == 2
    assert added[0].unit_price == 99.5
    assert [sale.id for sale in console.sales] == [sale.id for sale in stored]


def test_delete_all_by_country(tmp_path):
    output, path, _ = session(tmp_path, "1\n3\n2\n1\nChile\n1\n0\n0\n")
    assert "Eliminada venta ID: 1" in output
    assert "Eliminacion realizada exitosamente." in output
    assert all(sale.country != "Chile" for sale in read_sales_file(path))


def test_delete_with_no_match(tmp_path):
    output, path, _ = session(tmp_path, "1\n3\n2\n2\nQuito\n0\n0\n")
    assert "No se encontraron ventas con ese filtro." in output
    assert len(read_sales_file(path)) == len(SALES)


def test_modify_sale_city(tmp_path):
    output, path, console = session(tmp_path, "1\n3\n3\n1\n3\nValparaiso\n0\n0\n0\n")
    assert "Venta modificada exitosamente." in output
    stored = {sale.id: sale for sale in read_sales_file(path)}
    assert stored["1"].city == "Valparaiso"
    assert stored["2"].city == SALES[1].city
    assert console.sales[0].city == "Valparaiso"


def test_modify_unknown_id(tmp_path):
    output, path, _ = session(tmp_path, "1\n3\n3\nZZ\n0\n0\n")
    assert "No se encontró la venta con el ID especificado." in output
    assert [sale.id for sale in read_sales_file(path)] == ["1", "2"]


def test_main_runs_console(tmp_path, monkeypatch, capsys):
    path = tmp_path / "ventas.csv"
    write_sales_file(path, SALES)
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n"))
    assert main([str(path)]) == 0
    assert "Saliendo del programa..." in capsys.readouterr().out