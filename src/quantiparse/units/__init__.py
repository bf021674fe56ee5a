"""Unit registry and evaluation of parse trees."""

from .registry import (
    BASE_SYMBOLS,
    DEFAULT_REGISTRY,
    DIMENSIONLESS,
    Quantity,
    UnitRegistry,
    UnknownUnitError,
    format_quantity,
)
from .transform import Measurement, TransformError, evaluate, evaluate_unit, literal_value

__all__ = [
    "BASE_SYMBOLS",
    "DEFAULT_REGISTRY",
    "DIMENSIONLESS",
    "Measurement",
    "Quantity",
    "TransformError",
    "UnitRegistry",
    "UnknownUnitError",
    "evaluate",
    "evaluate_unit",
    "format_quantity",
    "literal_value",
]
