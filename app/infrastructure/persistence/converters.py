"""Conversion between Coordinate and its exact-decimal storage columns.

Floats are written through their shortest ``repr`` so that reading the
column back and calling ``float`` returns the very same double.
"""
from decimal import Decimal
from typing import Tuple, Union

from app.domain.value_objects.coordinate import Coordinate

Number = Union[Decimal, float, int, str]


def to_decimal(value: float) -> Decimal:
    """Exact decimal form of a float, without binary expansion noise."""
    return Decimal(repr(float(value)))


def from_decimal(value: Number) -> float:
    return float(value)


def coordinate_to_columns(coordinate: Coordinate) -> Tuple[Decimal, Decimal]:
    """Return ``(longitude, latitude)`` column values."""
    return to_decimal(coordinate.longitude), to_decimal(coordinate.latitude)


def coordinate_from_columns(longitude: Number, latitude: Number) -> Coordinate:
    return Coordinate(longitude=from_decimal(longitude), latitude=from_decimal(latitude))
