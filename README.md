# ventasdb

A small sales database for the console. It reads sales records from a CSV
file, computes statistics, answers queries, and adds, deletes or changes
records. Every change is written back to the CSV file.

## Installation

```
pip install .
```

## The CSV file

The first line is a header. Each line after it holds twelve comma-separated
fields:

```
ID_Venta,Fecha,Pais,Ciudad,Cliente,Producto,Categoria,Cantidad,Precio_Unitario,Monto_Total,Medio_Envio,Estado_Envio
```

Dates are written as `YYYY-MM-DD`; they are compared as text. The total
amount is always computed as quantity × unit price, so the `Monto_Total`
column is not read. Fields are split on plain commas, with no quoting.

When the file is loaded, a line is skipped when it does not have twelve
fields, when the quantity or price cannot be read as a number, or when its
key `country_city_date_product` is inconsistent (for example an empty city
or date, which leaves two underscores side by side).

## Interactive use

```
ventasdb [archivo.csv]
```

This starts the interactive menu. Without an argument it uses
`ventas_sudamerica.csv` in the current directory. From the main menu you can:

1. load the data from the CSV file (the valid sales are added to the
   session),
2. open the statistics menu: top 5 cities by amount per country, the best
   and worst selling products by units, the day with the largest amount,
   amount per product and country, average per category and country, the
   most used shipping method per country or per category, and the most
   frequent shipping status per country,
3. open the modifications menu to add a sale, delete sales by country or
   city (all matches, or one ID among them), or modify the fields of a sale
   by ID; the file is rewritten and read back after each change,
4. open the dynamic queries menu: sales in a city, or in a country between
   two dates, sorted by date; total amount of two countries; two products
   within a country; products whose amount per unit is above or below a
   threshold; two products over all countries; the best selling product and
   the most used shipping method of two countries.

Most operations also print the CPU time they took and how many checks they
made.

## Use from Python

Every statistic and query returns a `ventasdb.statistics.Measured` value
with the fields `result`, `checks` and `elapsed`.

```python
from ventasdb.loader import load_sales
from ventasdb.statistics import best_selling_product
from ventasdb.queries import sales_in_city

report = load_sales("ventas_sudamerica.csv")
sales = report.sales
print(report.lines, report.invalid)

print(best_selling_product(sales).result)
for sale in sales_in_city(sales, "Lima").result:
    print(sale)
```

The modules:

- `ventasdb.sale` — the `Sale` record.
- `ventasdb.loader` — `load_sales`, `read_sales_file`, `write_sales_file`,
  `append_sale`, `parse_csv_line`.
- `ventasdb.modifications` — `add_sale`, `delete_by_country`,
  `delete_by_city`, `delete_by_id`, `modify_sale`.
- `ventasdb.statistics`, `ventasdb.breakdowns`, `ventasdb.shipping` —
  statistics over a list of sales.
- `ventasdb.queries`, `ventasdb.comparisons`, `ventasdb.rankings` — queries
  and comparisons.
- `ventasdb.cli` — the `Console` class and the `main` entry point.

The package also includes the data structures it is built on:
`ventasdb.linkedlist.LinkedList`, the chained hash tables
`ventasdb.hashmap.HashMap` and `ventasdb.hashmap.HashMapList`, the AVL tree
`ventasdb.avl.AVLTree` and `ventasdb.quicksort.quick_sort`.

## Tests

```
pip install .[test]
pytest
```