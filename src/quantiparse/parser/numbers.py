"""Numeric literal grammar.

Each ``parse_*`` function either returns a literal node with the cursor
advanced past it, or returns ``None`` with the cursor where it started.
Alternatives are ordered choices: the first alternative that matches wins and
shorter alternatives are never revisited.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, TypeVar

from .source import DIGITS, NON_ZERO_DIGITS, SEPARATORS, SIGNS, SPACE, Source
from .tree import (
    Complex,
    Decimal,
    Integer,
    MixedFraction,
    NumberLiteral,
    Rational,
    Scientific,
    SimpleNumber,
)


T = TypeVar("T")
Rule = Callable[[Source], Optional[T]]


def first_of(source: Source, rules: Sequence[Rule]) -> Optional[T]:
    """Ordered choice over ``rules``."""

    for rule in rules:
        node = rule(source)
        if node is not None:
            return node
    return None


def _sign(source: Source) -> Optional[str]:
    return source.one_of(SIGNS, "sign")


def _grouped_integer(source: Source) -> Optional[str]:
    start = source.mark()
    lead = source.one_of(NON_ZERO_DIGITS, "digit")
    if lead is None:
        return None
    lead += source.repeat(DIGITS, 0, 2) or ""
    groups = []
    while True:
        group_start = source.mark()
        separator = source.one_of(SEPARATORS, "digit separator")
        if separator is None:
            break
        digits = source.repeat(DIGITS, 3, 3)
        if digits is None:
            source.reset(group_start)
            break
        groups.append(separator + digits)
    if not groups:
        source.reset(start)
        return None
    return lead + "".join(groups)


def unsigned_integer(source: Source) -> Optional[str]:
    """``0`` | grouped digits | non-zero digit followed by digits."""

    if source.literal("0") is not None:
        return "0"
    grouped = _grouped_integer(source)
    if grouped is not None:
        return grouped
    lead = source.one_of(NON_ZERO_DIGITS, "digit")
    if lead is None:
        return None
    return lead + (source.repeat(DIGITS) or "")


def parse_integer(source: Source) -> Optional[Integer]:
    start = source.mark()
    sign = _sign(source)
    digits = unsigned_integer(source)
    if digits is None:
        source.reset(start)
        return None
    return Integer(digits=digits, sign=sign)


def parse_decimal(source: Source) -> Optional[Decimal]:
    start = source.mark()
    sign = _sign(source)
    integer = unsigned_integer(source)
    if integer is None or source.literal(".") is None:
        source.reset(start)
        return None
    fraction = source.repeat(DIGITS, 1)
    if fraction is None:
        source.reset(start)
        return None
    return Decimal(integer=integer, fraction=fraction, sign=sign)


def _decimal_or_integer(source: Source) -> Optional[Decimal | Integer]:
    return first_of(source, (parse_decimal, parse_integer))


def parse_rational(source: Source) -> Optional[Rational]:
    start = source.mark()
    numerator = _decimal_or_integer(source)
    if numerator is None or source.literal("/") is None:
        source.reset(start)
        return None
    denominator = _decimal_or_integer(source)
    if denominator is None:
        source.reset(start)
        return None
    return Rational(numerator=numerator, denominator=denominator)


def parse_scientific(source: Source) -> Optional[Scientific]:
    start = source.mark()
    mantissa = _decimal_or_integer(source)
    if mantissa is None or source.one_of("eE", "exponent marker") is None:
        source.reset(start)
        return None
    exponent_sign = _sign(source)
    exponent = source.repeat(DIGITS, 1)
    if exponent is None:
        source.reset(start)
        return None
    return Scientific(mantissa=mantissa, exponent_digits=exponent, exponent_sign=exponent_sign)


def parse_simple_number(source: Source) -> Optional[SimpleNumber]:
    """Rational | Decimal | Integer, the operand form used by powers and idioms."""

    return first_of(source, (parse_rational, parse_decimal, parse_integer))


def parse_complex(source: Source) -> Optional[Complex]:
    start = source.mark()
    real = parse_simple_number(source)
    if real is None:
        return None
    imaginary = parse_simple_number(source)
    if imaginary is None or source.literal("i") is None:
        source.reset(start)
        return None
    return Complex(real=real, imaginary=imaginary)


def parse_mixed_fraction(source: Source) -> Optional[MixedFraction]:
    start = source.mark()
    whole = parse_integer(source)
    if whole is None:
        return None
    if source.one_of(SPACE + "-", "mixed fraction separator") is None:
        source.reset(start)
        return None
    fraction = parse_rational(source)
    if fraction is None:
        source.reset(start)
        return None
    return MixedFraction(whole=whole, fraction=fraction)


SCALAR_RULES: Sequence[Rule] = (
    parse_mixed_fraction,
    parse_complex,
    parse_rational,
    parse_scientific,
    parse_decimal,
    parse_integer,
)


def parse_scalar(source: Source) -> Optional[NumberLiteral]:
    """Any numeric literal, tried in precedence order."""

    return first_of(source, SCALAR_RULES)


__all__ = [
    "first_of",
    "parse_complex",
    "parse_decimal",
    "parse_integer",
    "parse_mixed_fraction",
    "parse_rational",
    "parse_scalar",
    "parse_scientific",
    "parse_simple_number",
    "unsigned_integer",
]
