"""Interactive console for loading, querying and editing the sales file."""

from __future__ import annotations

import argparse
import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any, TextIO

from ventasdb import breakdowns, comparisons, queries, rankings, shipping, statistics
from ventasdb.hashmap import HashMapList
from ventasdb.loader import INDEX_SIZE, LoadReport, load_sales, read_sales_file, write_sales_file
from ventasdb.modifications import (
    add_sale,
    delete_by_city,
    delete_by_country,
    delete_by_id,
    modify_sale,
)
from ventasdb.sale import Sale

DEFAULT_CSV = "ventas_sudamerica.csv"

_TEXT_CHANGES = {
    1: ("Nueva Fecha (YYYY-MM-DD): ", "date"),
    2: ("Nuevo Pais: ", "country"),
    3: ("Nueva Ciudad: ", "city"),
    4: ("Nuevo Cliente: ", "client"),
    5: ("Nuevo Producto: ", "product"),
    6: ("Nueva Categoria: ", "category"),
    9: ("Nuevo Medio de Envio: ", "shipping_method"),
    10: ("Nuevo Estado de Envio: ", "shipping_status"),
}


class _EndOfInput(Exception):
    pass


def _n(value: float) -> str:
    return f"{value:g}"


def _to_int(text: str) -> int:
    return int(text.strip())


def _to_float(text: str) -> float:
    return float(text.strip())


class Console:
    """Menu-driven session over one sales CSV file."""

    def __init__(
        self,
        csv_path: str | Path = DEFAULT_CSV,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.csv_path = Path(csv_path)
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.sales: list[Sale] = []
        self.index = HashMapList(INDEX_SIZE)

    # -- input and output -------------------------------------------------

    def _print(self, text: str = "") -> None:
        self._out.write(text + "\n")

    def _ask(self, prompt: str) -> str:
        self._out.write(prompt)
        self._out.flush()
        line = self._in.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\r\n")

    def _ask_option(self, prompt: str) -> int | None:
        try:
            return _to_int(self._ask(prompt))
        except ValueError:
            return None

    def _ask_value(
        self,
        prompt: str,
        retry: str,
        convert: Callable[[str], Any],
        accept: Callable[[Any], bool],
    ) -> tuple[Any, int]:
        failures = 0
        text = self._ask(prompt)
        while True:
            try:
                value = convert(text)
            except ValueError:
                pass
            else:
                if accept(value):
                    return value, failures
            failures += 1
            text = self._ask(retry)

    def _ask_quantity(self, prompt: str) -> tuple[int, int]:
        return self._ask_value(
            prompt,
            "Numero invalido. Ingrese una cantidad entera no negativa: ",
            _to_int,
            lambda value: value >= 0,
        )

    def _ask_price(self, prompt: str) -> tuple[float, int]:
        return self._ask_value(
            prompt,
            "Numero invalido. Ingrese un precio unitario valido: ",
            _to_float,
            lambda value: value >= 0,
        )

    def _report_time(self, measured: statistics.Measured) -> None:
        self._print(f"Tardo en segundos {_n(measured.elapsed)}")
        self._print(f"Cantidad de IF utilizados: {measured.checks}\n")

    def _report_query_time(self, elapsed: float, checks: int) -> None:
        self._print(f"Tiempo de ejecucion: {_n(elapsed)} segundos.")
        self._print(f"Cantidad de IF utilizados: {checks}")

    def _menu(
        self,
        lines: list[str],
        actions: dict[int, Callable[[], Any]],
        farewell: str,
        invalid: str,
    ) -> None:
        try:
            while True:
                for line in lines:
                    self._print(line)
                option = self._ask_option("Seleccione una opcion: ")
                if option == 0:
                    self._print(farewell)
                    return
                action = actions.get(option) if option is not None else None
                if action is None:
                    self._print(invalid)
                else:
                    action()
        except _EndOfInput:
            self._print()

    # -- main menu -----------------------------------------------------------

    def run(self) -> None:
        """Show the main menu until the user leaves or input ends."""
        self._menu(
            [
                "\n=== MENU PRINCIPAL ===",
                "1 - Cargar los datos para la base de datos de ventas",
                "2 - Mostrar estadisticas de ventas",
                "3 - Modificar ventas (Agregar/Eliminar/Modificar)",
                "4 - Consultas dinamicas",
                "0 - Salir",
            ],
            {
                1: self.load,
                2: self.statistics_menu,
                3: self.modifications_menu,
                4: self.queries_menu,
            },
            "Saliendo del programa...",
            "Opcion invalida. Intente nuevamente.",
        )

    def load(self) -> LoadReport | None:
        """Load the CSV file, adding its valid sales to the session."""
        self._print("Comenzando a medir Tiempo...")
        try:
            report = load_sales(self.csv_path)
        except OSError:
            self._print("No se pudo abrir el archivo!")
            self.index = HashMapList(INDEX_SIZE)
            self._print("Base de datos cargada correctamente.")
            return None
        for message in report.messages:
            self._print(message)
        self.sales.extend(report.sales)
        self.index = report.index
        self._print(f"Se procesaron {report.lines} lineas de datos.")
        self._print(f"Lineas invalidas u omitidas: {report.invalid}")
        self._print(f"Tardo en segundos {_n(report.elapsed)}\n")
        self._print("Base de datos cargada correctamente.")
        return report

    # -- statistics ----------------------------------------------------------

    def statistics_menu(self) -> None:
        """Show the statistics menu."""
        self._menu(
            [
                "\n=== MENU ESTADISTICAS DE VENTAS ===",
                "1 - Ciudad con mayor monto total de ventas por pais",
                "2 - Producto mas vendido en cantidad",
                "3 - Producto menos vendido en cantidad",
                "4 - Dia con mayor monto total de ventas",
                "5 - Monto total vendido por producto y pais",
                "6 - Promedio de ventas por categoria y pais",
                "7 - Medio de envio mas utilizado por pais",
                "8 - Medio de envio mas utilizado por categoria",
                "9 - Estado de envio mas frecuente por pais",
                "0 - Volver al menu principal",
            ],
            {
                1: self._top_cities,
                2: self._best_product,
                3: self._least_product,
                4: self._best_day,
                5: self._amount_by_product,
                6: self._average_by_category,
                7: self._shipping_by_country,
                8: self._shipping_by_category,
                9: self._status_by_country,
            },
            "Volviendo al menu principal...",
            "Opcion invalida.",
        )

    def _start(self, process: str, algorithm: str) -> None:
        self._print("Comenzando a medir Tiempo")
        self._print(f"[Proceso: {process}]")
        self._print(f"Algoritmo: {algorithm}")

    def _top_cities(self) -> None:
        self._start(
            "Top 5 ciudades con mayor monto total de ventas por pais",
            "HashMapList + QuickSort",
        )
        measured = statistics.top_cities_by_country(self.sales, 5)
        for country, ranking in measured.result.items():
            self._print(f"\nPais: {country}")
            for position, (city, amount) in enumerate(ranking, start=1):
                self._print(f"{position}. Ciudad: {city} | Monto total: ${_n(amount)}")
        self._report_time(measured)

    def _best_product(self) -> None:
        self._start("Producto mas vendido en cantidad", "HashMapList")
        measured = statistics.best_selling_product(self.sales)
        if measured.result is None:
            self._print("No se encontraron productos en el registro.")
        else:
            product, quantity = measured.result
            self._print(
                f"El producto mas vendido es {product}, con un total de "
                f"{quantity} unidades vendidas."
            )
        self._report_time(measured)

    def _least_product(self) -> None:
        self._start("Producto menos vendido en cantidad", "HashMapList")
        measured = statistics.least_selling_product(self.sales)
        if measured.result is None:
            self._print("No se encontraron productos en el registro.")
        else:
            product, quantity = measured.result
            self._print(
                f"El producto menos vendido es {product}, con un total de "
                f"{quantity} unidades vendidas."
            )
        self._report_time(measured)

    def _best_day(self) -> None:
        self._start("Dia con mayor monto total de ventas", "HashMapList")
        measured = statistics.best_sales_day(self.sales)
        if measured.result is None:
            self._print("No se encontraron registros de ventas por dia.")
        else:
            day, amount = measured.result
            self._print(
                f"El dia con mayor monto total de ventas es {day}, "
                f"con un total de ${_n(amount)}."
            )
        self._report_time(measured)

    def _amount_by_product(self) -> None:
        self._start("Monto total vendido por producto y pais", "HashMapList")
        measured = breakdowns.amount_by_country_and_product(self.sales)
        for country, products in measured.result.items():
            self._print(f"\nPais: {country}")
            for product, amount in products.items():
                self._print(f"Producto: {product} | Monto total: ${_n(amount)}")
        self._report_time(measured)

    def _average_by_category(self) -> None:
        self._print("[Proceso: Promedio de ventas por categoria y pais]")
        self._print(
            "Algoritmo: Recorrido secuencial + agrupacion con HashMapList "
            "anidado + calculo de promedio"
        )
        measured = breakdowns.average_by_country_and_category(self.sales)
        for country, categories in measured.result.items():
            self._print(f"\nPais: {country}")
            for category, average in categories.items():
                self._print(
                    f"Categoria: {category} | Promedio de ventas: ${_n(average)}"
                )
        self._report_time(measured)

    def _shipping_by_country(self) -> None:
        self._start("Medio de envio mas utilizado por pais", "HashMapList")
        measured = shipping.top_shipping_by_country(self.sales)
        for country, (method, count) in measured.result.items():
            self._print(
                f"El medio de envio mas utilizado en {country} es "
                f"'{method}' con {count} envios."
            )
        self._report_time(measured)

    def _shipping_by_category(self) -> None:
        self._start("Medio de envio mas utilizado por categoria", "HashMapList")
        measured = shipping.top_shipping_by_category(self.sales)
        for category, (method, count) in measured.result.items():
            self._print(
                f"El medio de envio mas utilizado en la categoria '{category}' "
                f"es '{method}' con {count} envios."
            )
        self._report_time(measured)

    def _status_by_country(self) -> None:
        self._start("Estado de envio mas frecuente por pais", "HashMapList")
        measured = shipping.top_status_by_country(self.sales)
        for country, (status, count) in measured.result.items():
            self._print(
                f"El estado de envio mas frecuente en {country} es "
                f"'{status}' con {count} envios."
            )
        self._report_time(measured)

    # -- queries -------------------------------------------------------------

    def queries_menu(self) -> None:
        """Show the dynamic queries menu."""
        self._menu(
            [
                "\n    MENU CONSULTAS DINAMICAS    ",
                "1 - Listado de ventas en una ciudad especifica",
                "2 - Listado de ventas en rango de fechas por pais",
                "3 - Comparacion entre dos paises (monto total)",
                "4 - Comparacion entre dos productos por pais",
                "5 - Productos vendidos por encima de umbral por pais",
                "6 - Productos vendidos por debajo de umbral por pais",
                "7 - Comparar productos discriminado por todos los paises",
                "8 - Comparar productos mas vendidos por pais",
                "9 - Comparar medio de envio mas usado por pais",
                "0 - Volver al menu principal",
            ],
            {
                1: self._query_city,
                2: self._query_country_dates,
                3: self._query_countries,
                4: self._query_products_in_country,
                5: lambda: self._query_threshold(above=True),
                6: lambda: self._query_threshold(above=False),
                7: self._query_products_all,
                8: self._query_top_products,
                9: self._query_top_shipping,
            },
            "Volviendo al menu principal...",
            "Opcion invalida.",
        )

    def _query_city(self) -> None:
        self._print("[Proceso: Consultar ventas por ciudad]")
        self._print("Estructura utilizada: Arbol AVL")
        city = self._ask("Ingrese el nombre de la ciudad: ")
        measured = queries.sales_in_city(self.sales, city)
        self._print(f"\nVentas en '{city}' ordenadas por fecha:")
        for sale in measured.result:
            self._print(str(sale))
        if not measured.result:
            self._print(f"No se encontraron ventas en la ciudad '{city}'.")
        self._report_query_time(measured.elapsed, measured.checks)

    def _query_country_dates(self) -> None:
        self._print("[Proceso: Consultar ventas por pais y rango de fechas]")
        self._print("Estructura utilizada: Arbol AVL")
        country = self._ask("Ingrese el nombre del pais: ")
        start = self._ask("Ingrese la fecha de inicio (YYYY-MM-DD): ")
        end = self._ask("Ingrese la fecha de fin (YYYY-MM-DD): ")
        measured = queries.sales_in_country_between(self.sales, country, start, end)
        if not measured.result:
            self._print(
                f"No se encontraron ventas en el pais '{country}' entre "
                f"{start} y {end}."
            )
        else:
            self._print(
                f"\nVentas en '{country}' entre {start} y {end} ordenadas por fecha:"
            )
            for sale in measured.result:
                self._print(str(sale))
        self._report_query_time(measured.elapsed, measured.checks)

    def _query_countries(self) -> None:
        self._print("[Proceso: Comparacion de monto total entre dos paises]")
        self._print("Algoritmo: HashMapList")
        first = self._ask("Ingrese el primer pais: ")
        second = self._ask("Ingrese el segundo pais: ")
        measured = queries.compare_countries(self.sales, first, second)
        total1, total2 = measured.result
        self._print("\n=== Comparacion de Monto Total ===")
        self._print(f"{first}: ${_n(total1)}")
        self._print(f"{second}: ${_n(total2)}")
        if total1 > total2:
            self._print(
                f"El pais con mayor monto total de ventas es {first}, "
                f"con un total de ${_n(total1)}."
            )
        elif total2 > total1:
            self._print(
                f"El pais con mayor monto total de ventas es {second}, "
                f"con un total de ${_n(total2)}."
            )
        else:
            self._print(
                f"Ambos paises tienen el mismo monto total de ventas: ${_n(total1)}."
            )
        self._report_query_time(measured.elapsed, measured.checks)

    def _query_products_in_country(self) -> None:
        self._print("[Proceso: Comparacion entre dos productos por pais]")
        self._print("Algoritmo: HashMapList")
        country = self._ask("Ingrese el nombre del pais: ")
        first = self._ask("Ingrese el primer producto: ")
        second = self._ask("Ingrese el segundo producto: ")
        measured = comparisons.compare_products_in_country(
            self.sales, country, first, second
        )
        amount1, amount2 = measured.result
        self._print(f"\n=== Comparacion de Productos en '{country}' ===")
        self._print(f"{first}: ${_n(amount1)}")
        self._print(f"{second}: ${_n(amount2)}")
        if amount1 > amount2:
            self._print(
                f"El producto con mayor monto total de ventas en '{country}' es "
                f"{first}, con un total de ${_n(amount1)}."
            )
        elif amount2 > amount1:
            self._print(
                f"El producto con mayor monto total de ventas en '{country}' es "
                f"{second}, con un total de ${_n(amount2)}."
            )
        else:
            self._print(
                f"Ambos productos tienen el mismo monto total de ventas en "
                f"'{country}': ${_n(amount1)}."
            )
        self._report_query_time(measured.elapsed, measured.checks)

    def _query_threshold(self, above: bool) -> None:
        word = "mayor" if above else "menor"
        where = "por encima de" if above else "por debajo de"
        self._print(f"[Proceso: Productos vendidos {where} umbral por pais]")
        self._print("Algoritmo: HashMapList")
        country = self._ask("Ingrese el nombre del pais: ")
        threshold, _ = self._ask_value(
            "Ingrese el umbral (monto promedio): ",
            "Numero invalido. Ingrese el umbral (monto promedio): ",
            _to_float,
            lambda value: value == value,
        )
        select = (
            comparisons.products_above_average
            if above
            else comparisons.products_below_average
        )
        measured = select(self.sales, country, threshold)
        self._print(
            f"\n=== Productos con promedio de ventas {word} a ${_n(threshold)} "
            f"en '{country}' ==="
        )
        for product, average in measured.result:
            self._print(f"Producto: {product} | Promedio de ventas: ${_n(average)}")
        if not measured.result:
            self._print(
                f"No se encontraron productos con promedio {word} a "
                f"${_n(threshold)} en '{country}'."
            )
        self._report_query_time(measured.elapsed, measured.checks)

    def _query_products_all(self) -> None:
        self._print("[Proceso: Comparar productos discriminado por todos los paises]")
        self._print("Algoritmo: HashMapList")
        first = self._ask("Ingrese el primer producto: ")
        second = self._ask("Ingrese el segundo producto: ")
        measured = rankings.compare_products_all_countries(self.sales, first, second)
        self._print("\n=== Comparacion de Productos en Todos los Paises ===")
        for product, (quantity, amount) in zip((first, second), measured.result):
            self._print(f"{product}: {quantity} unidades, ${_n(amount)} total")
        self._report_query_time(measured.elapsed, measured.checks)

    def _query_top_products(self) -> None:
        self._print("[Proceso: Comparar productos mas vendidos por pais]")
        self._print("Algoritmo: HashMapList")
        first = self._ask("Ingrese el primer pais: ")
        second = self._ask("Ingrese el segundo pais: ")
        measured = rankings.top_products_for_countries(self.sales, first, second)
        self._print("\n=== Productos mas vendidos ===")
        for country, top in zip((first, second), measured.result):
            if top is None:
                self._print(f"No se encontraron ventas en '{country}'.")
            else:
                self._print(f"{country}: {top[0]} con {top[1]} unidades.")
        self._report_query_time(measured.elapsed, measured.checks)

    def _query_top_shipping(self) -> None:
        self._print("[Proceso: Comparar medio de envio mas usado por pais]")
        self._print("Algoritmo:  HashMapList")
        first = self._ask("Ingrese el primer pais: ")
        second = self._ask("Ingrese el segundo pais: ")
        measured = rankings.top_shipping_for_countries(self.sales, first, second)
        self._print("\n=== Medios de Envio mas usados ===")
        for country, top in zip((first, second), measured.result):
            if top is None:
                self._print(f"No se encontraron datos para el pais '{country}'.")
            else:
                self._print(f"{country}: {top[0]} con {top[1]} envios.")
        self._report_query_time(measured.elapsed, measured.checks)

    # -- modifications -------------------------------------------------------

    def modifications_menu(self) -> None:
        """Show the menu for adding, deleting and modifying sales."""
        self._menu(
            [
                "\n=== MENU MODIFICACIONES ===",
                "1 - Agregar una venta",
                "2 - Eliminar una venta (por pais o ciudad)",
                "3 - Modificar una venta (por ID)",
                "0 - Volver al menu principal",
            ],
            {1: self._add, 2: self._delete, 3: self._modify},
            "Volviendo al menu principal...",
            "Opcion invalida.",
        )

    def _add(self) -> None:
        begin = time.process_time()
        self._print("[Proceso: Agregar una venta]")
        self._print("Estructura utilizada: vectorVentas + archivo CSV")
        self._print("Comenzando a medir Tiempo")
        sale_id = self._ask("Ingrese ID: ")
        date = self._ask("Ingrese Fecha (YYYY-MM-DD): ")
        country = self._ask("Ingrese Pais: ")
        city = self._ask("Ingrese Ciudad: ")
        client = self._ask("Ingrese Cliente: ")
        product = self._ask("Ingrese Producto: ")
        category = self._ask("Ingrese Categoria: ")
        quantity, bad_quantity = self._ask_quantity("Ingrese Cantidad: ")
        price, bad_price = self._ask_price("Ingrese Precio Unitario: ")
        method = self._ask("Ingrese Medio de Envio: ")
        status = self._ask("Ingrese Estado de Envio: ")
        sale = Sale(
            id=sale_id,
            date=date,
            country=country,
            city=city,
            client=client,
            product=product,
            category=category,
            quantity=quantity,
            unit_price=price,
            shipping_method=method,
            shipping_status=status,
        )
        try:
            self.sales = add_sale(self.csv_path, sale)
        except OSError:
            self._print("Error al abrir el archivo.")
        else:
            self._print("Venta agregada exitosamente.")
        elapsed = time.process_time() - begin
        self._print(f"Tardo en segundos {_n(elapsed)}")
        self._print(f"Cantidad de IF utilizados: {bad_quantity + bad_price}\n")

    def _delete(self) -> None:
        begin = time.process_time()
        self._print("Comenzando a medir Tiempo")
        self._print("[Proceso: Eliminar una venta por pais o ciudad]")
        self._print("Estructura utilizada: vectorVentas + archivo CSV")
        by = self._ask("Desea eliminar por (1) Pais o (2) Ciudad? Ingrese 1 o 2: ").strip()
        if by == "1":
            value = self._ask("Ingrese el nombre del pais: ")
            matches = lambda sale: sale.country == value  # noqa: E731
        elif by == "2":
            value = self._ask("Ingrese el nombre de la ciudad: ")
            matches = lambda sale: sale.city == value  # noqa: E731
        else:
            self._print("Opcion invalida.")
            return

        checks = len(self.sales)
        found = [sale for sale in self.sales if matches(sale)]
        if not found:
            self._print("No se encontraron ventas con ese filtro.")
            self._report_query_time(time.process_time() - begin, checks)
            return

        self._print("Ventas encontradas:")
        for sale in found:
            self._print(str(sale))
        self._print("Desea:")
        self._print("1. Eliminar TODAS las ventas que coinciden con el filtro")
        self._print("2. Eliminar SOLO una venta por ID")
        choice = self._ask("Seleccione una opcion (1 o 2): ").strip()
        try:
            if choice == "1":
                delete = delete_by_country if by == "1" else delete_by_city
                remaining, removed = delete(self.csv_path, self.sales, value)
            elif choice == "2":
                sale_id = self._ask("Ingrese el ID de la venta que desea eliminar: ")
                remaining, removed = delete_by_id(self.csv_path, self.sales, sale_id)
            else:
                self._print("Opcion invalida. No se realizo ninguna eliminacion.")
                return
        except OSError:
            self._print("Error al abrir el archivo para sobrescribir.")
        else:
            checks += len(self.sales)
            for sale in removed:
                self._print(f"Eliminada venta ID: {sale.id}")
            self.sales = remaining
            if removed:
                self._print("Eliminacion realizada exitosamente.")
            else:
                self._print("No se elimino ninguna venta.")
        self._report_query_time(time.process_time() - begin, checks)

    def _modify(self) -> None:
        sale_id = self._ask("Ingrese el ID de la venta a modificar: ")
        begin = time.process_time()
        self._print("Comenzando a medir Tiempo")
        self._print("[Proceso: Modificar una venta por ID]")
        self._print("Estructura utilizada: vectorVentas + archivo CSV")
        target = next((sale for sale in self.sales if sale.id == sale_id), None)
        try:
            if target is None:
                write_sales_file(self.csv_path, self.sales)
                self.sales = read_sales_file(self.csv_path)
                self._print("No se encontró la venta con el ID especificado.")
            else:
                self._print("Venta encontrada:")
                self._print(str(target))
                changes = self._ask_changes()
                self.sales = modify_sale(self.csv_path, self.sales, sale_id, changes)
                self._print("Venta modificada exitosamente.")
        except OSError:
            self._print("Error al abrir el archivo para sobrescribir.")
        self._print(f"Tardo en segundos {_n(time.process_time() - begin)}\n")

    def _ask_changes(self) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        while True:
            self._print("\nSeleccione el campo a modificar:")
            for line in (
                "1. Fecha",
                "2. Pais",
                "3. Ciudad",
                "4. Cliente",
                "5. Producto",
                "6. Categoria",
                "7. Cantidad",
                "8. Precio Unitario",
                "9. Medio de Envio",
                "10. Estado de Envio",
                "0. Terminar modificacion",
            ):
                self._print(line)
            option = self._ask_option("Opcion: ")
            if option == 0:
                self._print("Finalizando modificacion.")
                return changes
            if option in _TEXT_CHANGES:
                prompt, name = _TEXT_CHANGES[option]
                changes[name] = self._ask(prompt)
            elif option == 7:
                changes["quantity"], _ = self._ask_quantity("Nueva Cantidad: ")
            elif option == 8:
                changes["unit_price"], _ = self._ask_price("Nuevo Precio Unitario: ")
            else:
                self._print("Opcion invalida.")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session over the sales CSV file."""
    parser = argparse.ArgumentParser(
        prog="ventasdb", description="Consultas y estadisticas de ventas."
    )
    parser.add_argument(
        "csv", nargs="?", default=DEFAULT_CSV, help="archivo CSV de ventas"
    )
    args = parser.parse_args(argv)
    Console(args.csv).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())