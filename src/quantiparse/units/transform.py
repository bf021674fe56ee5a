"""Turn parse trees into exact numbers and SI quantities."""

from __future__ import annotations

import decimal
import logging
import math
from dataclasses import dataclass, replace
from fractions import Fraction
from typing import Union

from ..parser import tree as T
from ..parser.canonical import to_canonical
from .registry import DEFAULT_REGISTRY, DIMENSIONLESS, Quantity, UnitRegistry, UnknownUnitError, format_quantity

logger = logging.getLogger(__name__)

Number = Union[int, Fraction, complex]

# exponents beyond this are refused rather than computed
MAX_EXPONENT = 1000


class TransformError(ValueError):
    """Raised when a parse tree cannot be evaluated against a registry."""


def _digits(text: str) -> str:
    return text.replace(",", "").replace("_", "")


def _signed(sign: str | None, value: Number) -> Number:
    return -value if sign == "-" else value


def _divide(left: Number, right: Number) -> Number:
    if right == 0:
        raise TransformError("Division by zero")
    if isinstance(left, complex) or isinstance(right, complex):
        return left / right
    return Fraction(left) / Fraction(right)


def literal_value(literal: T.NumberLiteral) -> Number:
    """Exact value of a numeric literal; digit separators are dropped."""

    if isinstance(literal, T.Integer):
        return _signed(literal.sign, int(_digits(literal.digits)))
    if isinstance(literal, T.Decimal):
        text = f"{_digits(literal.integer)}.{literal.fraction}"
        return _signed(literal.sign, Fraction(decimal.Decimal(text)))
    if isinstance(literal, T.Rational):
        return _divide(literal_value(literal.numerator), literal_value(literal.denominator))
    if isinstance(literal, T.Scientific):
        digits = literal.exponent_digits.lstrip("0") or "0"
        if len(digits) > len(str(MAX_EXPONENT)) or int(digits) > MAX_EXPONENT:
            raise TransformError(f"Exponent out of range: {literal.text}")
        exponent = -int(digits) if literal.exponent_sign == "-" else int(digits)
        return Fraction(literal_value(literal.mantissa)) * Fraction(10) ** exponent
    if isinstance(literal, T.Complex):
        return complex(float(literal_value(literal.real)), float(literal_value(literal.imaginary)))
    if isinstance(literal, T.MixedFraction):
        whole = literal_value(literal.whole)
        fraction = literal_value(literal.fraction)
        if literal.whole.sign == "-":
            return whole - fraction
        return whole + fraction
    raise TransformError(f"Not a numeric literal: {type(literal).__name__}")


@dataclass(frozen=True)
class Measurement:
    """A magnitude in the unit spelled by ``unit_text``.

    ``unit`` is the SI-canonical equivalent of that unit, so
    :meth:`to_si` gives the magnitude in coherent SI units.
    """

    magnitude: Number
    unit: Quantity
    unit_text: str

    def to_si(self) -> Number:
        if isinstance(self.magnitude, complex):
            return self.magnitude * self.unit.scale
        return Fraction(self.magnitude) * Fraction(self.unit.scale)

    @property
    def si_unit_text(self) -> str:
        return format_quantity(self.unit)


def _factor_quantity(factor: T.UnitFactor, registry: UnitRegistry) -> tuple[Number, Quantity]:
    coefficient: Number = 1 if factor.scalar is None else literal_value(factor.scalar)
    try:
        quantity = DIMENSIONLESS if factor.name == T.DIMENSIONLESS_NAME else registry.get(factor.name)
        if factor.prefix is not None:
            quantity = Quantity(quantity.scale * registry.prefix_factor(factor.prefix), quantity.dims)
    except UnknownUnitError as exc:
        raise TransformError(f"Unknown unit or prefix {exc.args[0]!r}") from exc
    if factor.power is not None:
        quantity = quantity ** _real_exponent(literal_value(factor.power))
    return coefficient, quantity


def _real_exponent(value: Number) -> Fraction:
    if isinstance(value, complex):
        raise TransformError("Exponent of a unit must be a real number")
    exponent = Fraction(value)
    if abs(exponent) > MAX_EXPONENT:
        raise TransformError(f"Exponent out of range: {exponent}")
    return exponent


def _exponent_of(expression: T.UnitExpression) -> Fraction:
    # ``m^x`` needs a bare number on the right
    if (
        isinstance(expression, T.UnitFactor)
        and expression.name == T.DIMENSIONLESS_NAME
        and expression.prefix is None
        and expression.power is None
        and expression.scalar is not None
    ):
        return _real_exponent(literal_value(expression.scalar))
    raise TransformError("Exponent of a unit must be a real number")


def evaluate_unit(expression: T.UnitExpression, registry: UnitRegistry | None = None) -> tuple[Number, Quantity]:
    """Fold a unit expression into ``(coefficient, quantity)``."""

    registry = registry or DEFAULT_REGISTRY
    if isinstance(expression, T.UnitFactor):
        return _factor_quantity(expression, registry)

    left_coefficient, left = evaluate_unit(expression.left, registry)
    if expression.operator == T.POWER:
        exponent = _exponent_of(expression.right)
        return left_coefficient, left ** exponent
    right_coefficient, right = evaluate_unit(expression.right, registry)
    if expression.operator == T.MULTIPLY:
        return left_coefficient * right_coefficient, left * right
    return _divide(left_coefficient, right_coefficient), left / right


def _irregular(quantity: T.IrregularQuantity, registry: UnitRegistry) -> Measurement:
    if isinstance(quantity, T.Time):
        seconds: Number = literal_value(quantity.hours) * 3600 + literal_value(quantity.minutes) * 60
        if quantity.seconds is not None:
            seconds += literal_value(quantity.seconds)
        if quantity.microseconds is not None:
            seconds += Fraction(literal_value(quantity.microseconds), 1_000_000)
        unit, magnitude = "s", seconds
    elif isinstance(quantity, T.FeetInches):
        unit, magnitude = "in", literal_value(quantity.feet) * 12 + literal_value(quantity.inches)
    elif isinstance(quantity, T.PoundsOunces):
        unit, magnitude = "oz", literal_value(quantity.pounds) * 16 + literal_value(quantity.ounces)
    else:
        unit, magnitude = "lb", literal_value(quantity.stone) * 14 + literal_value(quantity.pounds)
    try:
        return Measurement(magnitude, registry.get(unit), unit)
    except UnknownUnitError as exc:
        raise TransformError(f"Registry has no unit {unit!r}") from exc


def evaluate(result: T.ParseResult, registry: UnitRegistry | None = None) -> Measurement:
    """Evaluate a parse result into a :class:`Measurement`.

    Irregular idioms collapse into their smaller unit: ``6 foot 4`` becomes
    76 inches and ``19 lbs, 4 oz`` becomes 308 ounces. Clock times become
    seconds.
    """

    try:
        return _evaluate(result, registry or DEFAULT_REGISTRY)
    except (ZeroDivisionError, OverflowError) as exc:
        raise TransformError(f"Cannot evaluate {to_canonical(result)!r}: {exc}") from exc


def _evaluate(result: T.ParseResult, registry: UnitRegistry) -> Measurement:
    if isinstance(result, T.IrregularResult):
        return _irregular(result.quantity, registry)
    if isinstance(result, T.ScalarOnly):
        return Measurement(literal_value(result.scalar), DIMENSIONLESS, T.DIMENSIONLESS_NAME)

    coefficient, quantity = evaluate_unit(result.unit, registry)
    if quantity.scale == 0 or not math.isfinite(quantity.scale):
        raise TransformError(f"Scale of {to_canonical(result.unit)!r} is out of range")
    if isinstance(result, T.ScalarWithUnit):
        coefficient = literal_value(result.scalar) * coefficient
    logger.debug("Evaluated %s with SI scale %s", result.kind, quantity.scale)
    return Measurement(coefficient, quantity, to_canonical(_without_coefficients(result.unit)))


def _without_coefficients(expression: T.UnitExpression) -> T.UnitExpression:
    if isinstance(expression, T.BinaryOp):
        return replace(
            expression,
            left=_without_coefficients(expression.left),
            right=_without_coefficients(expression.right),
        )
    return replace(expression, scalar=None)


__all__ = [
    "Measurement",
    "TransformError",
    "evaluate",
    "evaluate_unit",
    "literal_value",
]
