"""A single sale record."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

FIELD_COUNT = 12

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group(1))


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass(eq=False)
class Sale:
    """One sale; two sales are equal when date and id match, ordered by date."""

    id: str = ""
    date: str = ""
    country: str = ""
    city: str = ""
    client: str = ""
    product: str = ""
    category: str = ""
    quantity: int = 0
    unit_price: float = 0.0
    shipping_method: str = ""
    shipping_status: str = ""

    def total(self) -> float:
        """Return quantity times unit price."""
        return self.quantity * self.unit_price

    def key(self) -> str:
        """Return the composite key country_city_date_product."""
        return f"{self.country}_{self.city}_{self.date}_{self.product}"

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> Sale:
        """Build a sale from the twelve CSV fields; the stored total is ignored."""
        if len(fields) < FIELD_COUNT:
            raise ValueError(f"expected {FIELD_COUNT} fields, got {len(fields)}")
        return cls(
            id=fields[0],
            date=fields[1],
            country=fields[2],
            city=fields[3],
            client=fields[4],
            product=fields[5],
            category=fields[6],
            quantity=_parse_int(fields[7]),
            unit_price=_parse_float(fields[8]),
            shipping_method=fields[10],
            shipping_status=fields[11],
        )

    def to_fields(self) -> list[str]:
        """Return the twelve CSV fields, total included."""
        return [
            self.id,
            self.date,
            self.country,
            self.city,
            self.client,
            self.product,
            self.category,
            str(self.quantity),
            _format_number(self.unit_price),
            _format_number(self.total()),
            self.shipping_method,
            self.shipping_status,
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sale):
            return NotImplemented
        return self.date == other.date and self.id == other.id

    def __lt__(self, other: Sale) -> bool:
        if not isinstance(other, Sale):
            return NotImplemented
        return self.date < other.date

    def __gt__(self, other: Sale) -> bool:
        if not isinstance(other, Sale):
            return NotImplemented
        return self.date > other.date

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return (
            f"ID: {self.id}"
            f" | Fecha: {self.date}"
            f" | Pais: {self.country}"
            f" | Ciudad: {self.city}"
            f" | Cliente: {self.client}"
            f" | Producto: {self.product}"
            f" | Categoria: {self.category}"
            f" | Cantidad: {self.quantity}"
            f" | Precio Unitario: {_format_number(self.unit_price)}"
            f" | Monto Total: {_format_number(self.total())}"
            f" | Medio Envio: {self.shipping_method}"
            f" | Estado Envio: {self.shipping_status}"
        )