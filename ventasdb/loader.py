"""Reading and writing the sales CSV file."""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from ventasdb.hashmap import HashMapList
from ventasdb.sale import FIELD_COUNT, Sale

HEADER = (
    "ID_Venta,Fecha,Pais,Ciudad,Cliente,Producto,Categoria,Cantidad,"
    "Precio_Unitario,Monto_Total,Medio_Envio,Estado_Envio"
)

INDEX_SIZE = 5000


@dataclass
class LoadReport:
    """Outcome of loading a sales file with validation."""

    sales: list[Sale] = field(default_factory=list)
    index: HashMapList = field(default_factory=lambda: HashMapList(INDEX_SIZE))
    lines: int = 0
    invalid: int = 0
    messages: list[str] = field(default_factory=list)
    elapsed: float = 0.0


def parse_csv_line(line: str) -> list[str]:
    """Split a line on commas; a single trailing empty field is dropped."""
    parts = line.split(",")
    if parts[-1] == "":
        parts.pop()
    return parts


def _key_is_invalid(key: str) -> bool:
    return key == "" or key == "___" or "__" in key or ",," in key


def load_sales(path: str | Path) -> LoadReport:
    """Load and validate every sale in ``path``, skipping malformed lines."""
    begin = time.process_time()
    report = LoadReport()
    with open(path, encoding="utf-8") as handle:
        handle.readline()
        for raw in handle:
            report.lines += 1
            line = raw.rstrip("\n")
            fields = parse_csv_line(line)
            if len(fields) != FIELD_COUNT:
                report.messages.append(
                    f"Linea {report.lines} malformada, se omite."
                )
                report.invalid += 1
                continue
            try:
                sale = Sale.from_fields(fields)
            except ValueError:
                report.messages.append(
                    f"Error al convertir cantidad/precio en linea {report.lines}. Se omite."
                )
                report.invalid += 1
                continue
            key = sale.key()
            if _key_is_invalid(key):
                report.messages.append(
                    f"Linea {report.lines} tiene clave vacia o inconsistente, se omite."
                )
                report.invalid += 1
                continue
            report.index.put(key, sale)
            report.sales.append(sale)
    report.elapsed = time.process_time() - begin
    return report


def read_sales_file(path: str | Path) -> list[Sale]:
    """Read every sale in ``path`` without validation; a missing file gives []."""
    try:
        handle = open(path, encoding="utf-8")
    except FileNotFoundError:
        return []
    sales = []
    with handle:
        handle.readline()
        for raw in handle:
            fields = raw.rstrip("\n").split(",", FIELD_COUNT - 1)
            sales.append(Sale.from_fields(fields))
    return sales


def _row(sale: Sale) -> str:
    return ",".join(sale.to_fields()) + "\n"


def write_sales_file(path: str | Path, sales: Iterable[Sale]) -> None:
    """Overwrite ``path`` with the header followed by one row per sale."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(HEADER + "\n")
        handle.writelines(_row(sale) for sale in sales)


def append_sale(path: str | Path, sale: Sale) -> None:
    """Append one sale row to ``path``."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(_row(sale))