"""Immutable parse tree produced by :mod:`quantiparse.parser.standard`.

Every node carries a class-level ``kind`` tag so downstream consumers can
dispatch on it without knowing the grammar. Literal nodes keep the text as it
was written (signs and digit separators included); numeric values are derived
by :func:`quantiparse.units.transform.literal_value`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, ClassVar, Dict, Optional, Union


@dataclass(frozen=True, slots=True)
class Integer:
    digits: str
    sign: Optional[str] = None

    kind: ClassVar[str] = "integer"

    @property
    def text(self) -> str:
        return f"{self.sign or ''}{self.digits}"


@dataclass(frozen=True, slots=True)
class Decimal:
    integer: str
    fraction: str
    sign: Optional[str] = None

    kind: ClassVar[str] = "decimal"

    @property
    def text(self) -> str:
        return f"{self.sign or ''}{self.integer}.{self.fraction}"


@dataclass(frozen=True, slots=True)
class Rational:
    numerator: Union[Integer, Decimal]
    denominator: Union[Integer, Decimal]

    kind: ClassVar[str] = "rational"

    @property
    def text(self) -> str:
        return f"{self.numerator.text}/{self.denominator.text}"


@dataclass(frozen=True, slots=True)
class Scientific:
    mantissa: Union[Integer, Decimal]
    exponent_digits: str
    exponent_sign: Optional[str] = None

    kind: ClassVar[str] = "scientific"

    @property
    def text(self) -> str:
        return f"{self.mantissa.text}e{self.exponent_sign or ''}{self.exponent_digits}"


@dataclass(frozen=True, slots=True)
class Complex:
    real: Union[Rational, Decimal, Integer]
    imaginary: Union[Rational, Decimal, Integer]

    kind: ClassVar[str] = "complex"

    @property
    def text(self) -> str:
        return f"{self.real.text}{self.imaginary.text}i"


@dataclass(frozen=True, slots=True)
class MixedFraction:
    whole: Integer
    fraction: Rational

    kind: ClassVar[str] = "mixed_fraction"

    @property
    def text(self) -> str:
        return f"{self.whole.text} {self.fraction.text}"


NumberLiteral = Union[Integer, Decimal, Rational, Scientific, Complex, MixedFraction]
SimpleNumber = Union[Rational, Decimal, Integer]


# ----------------------------------------------------------------------
# Unit expressions


DIMENSIONLESS_NAME = "1"


@dataclass(frozen=True, slots=True)
class UnitFactor:
    """Unit atom: ``[scalar] [prefix]name[^power]``.

    ``name`` is a registry name or ``"1"``. ``scalar`` is only set for
    factors inside an expression written with a coefficient (``m/2``); the
    leading coefficient of a whole expression lives on the result instead.
    """

    name: str = DIMENSIONLESS_NAME
    prefix: Optional[str] = None
    power: Optional[SimpleNumber] = None
    scalar: Optional[NumberLiteral] = None

    kind: ClassVar[str] = "unit_factor"


POWER = "power"
MULTIPLY = "multiply"
DIVIDE = "divide"


@dataclass(frozen=True, slots=True)
class BinaryOp:
    operator: str
    left: "UnitExpression"
    right: "UnitExpression"

    kind: ClassVar[str] = "binary_op"


UnitExpression = Union[UnitFactor, BinaryOp]


# ----------------------------------------------------------------------
# Irregular quantities


@dataclass(frozen=True, slots=True)
class Time:
    hours: Integer
    minutes: Integer
    seconds: Optional[Integer] = None
    microseconds: Optional[Integer] = None

    kind: ClassVar[str] = "time"


@dataclass(frozen=True, slots=True)
class FeetInches:
    feet: SimpleNumber
    inches: SimpleNumber

    kind: ClassVar[str] = "feet_inches"


@dataclass(frozen=True, slots=True)
class PoundsOunces:
    pounds: SimpleNumber
    ounces: SimpleNumber

    kind: ClassVar[str] = "pounds_ounces"


@dataclass(frozen=True, slots=True)
class StonePounds:
    stone: SimpleNumber
    pounds: SimpleNumber

    kind: ClassVar[str] = "stone_pounds"


IrregularQuantity = Union[Time, FeetInches, PoundsOunces, StonePounds]


# ----------------------------------------------------------------------
# Top-level results


@dataclass(frozen=True, slots=True)
class ScalarOnly:
    scalar: NumberLiteral

    kind: ClassVar[str] = "scalar"


@dataclass(frozen=True, slots=True)
class UnitOnly:
    unit: UnitExpression

    kind: ClassVar[str] = "unit"


@dataclass(frozen=True, slots=True)
class ScalarWithUnit:
    scalar: NumberLiteral
    unit: UnitExpression

    kind: ClassVar[str] = "scalar_with_unit"


@dataclass(frozen=True, slots=True)
class IrregularResult:
    quantity: IrregularQuantity

    kind: ClassVar[str] = "irregular"


ParseResult = Union[ScalarOnly, UnitOnly, ScalarWithUnit, IrregularResult]


def as_dict(node: Any) -> Dict[str, Any]:
    """Return a JSON-ready mapping for any tree node."""

    payload: Dict[str, Any] = {"kind": node.kind}
    for field in fields(node):
        value = getattr(node, field.name)
        if hasattr(value, "kind"):
            value = as_dict(value)
        payload[field.name] = value
    return payload


__all__ = [
    "BinaryOp",
    "Complex",
    "DIMENSIONLESS_NAME",
    "DIVIDE",
    "Decimal",
    "FeetInches",
    "Integer",
    "IrregularQuantity",
    "IrregularResult",
    "MULTIPLY",
    "MixedFraction",
    "NumberLiteral",
    "POWER",
    "ParseResult",
    "PoundsOunces",
    "Rational",
    "ScalarOnly",
    "ScalarWithUnit",
    "Scientific",
    "SimpleNumber",
    "StonePounds",
    "Time",
    "UnitExpression",
    "UnitFactor",
    "UnitOnly",
    "as_dict",
]
