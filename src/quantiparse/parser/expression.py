"""Unit atoms combined by precedence climbing.

Operators, tried in table order at every position between atoms::

    ^  **            precedence 3, left associative
    *  x  (space)     precedence 2, left associative
    /                 precedence 1, left associative

so ``a/b/c`` is ``(a/b)/c`` and ``a*b^c`` is ``a*(b^c)``. An operator only
counts when an atom follows it; otherwise the cursor goes back and the next
operator in the table is tried.
"""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from .matcher import RegistrySnapshot, match_name, match_prefix
from .numbers import parse_scalar, parse_simple_number
from .source import Source
from .tree import (
    DIMENSIONLESS_NAME,
    DIVIDE,
    MULTIPLY,
    POWER,
    BinaryOp,
    Integer,
    UnitExpression,
    UnitFactor,
)


def _power_operator(source: Source) -> bool:
    return source.literal("^") is not None or source.literal("**") is not None


def _spaced(source: Source, symbol: str) -> bool:
    start = source.mark()
    source.space()
    if source.literal(symbol) is None:
        source.reset(start)
        return False
    source.space()
    return True


def _multiply_operator(source: Source) -> bool:
    return _spaced(source, "*") or _spaced(source, "x") or source.space()


def _divide_operator(source: Source) -> bool:
    return _spaced(source, "/")


OPERATORS: Tuple[Tuple[str, int, Callable[[Source], bool]], ...] = (
    (POWER, 3, _power_operator),
    (MULTIPLY, 2, _multiply_operator),
    (DIVIDE, 1, _divide_operator),
)


def _unit_part(source: Source, snapshot: RegistrySnapshot) -> Optional[str]:
    """``<``? name ``>``? with no word character directly after it."""

    start = source.mark()
    source.literal("<")
    name = match_name(source, snapshot)
    if name is None:
        source.reset(start)
        return None
    source.literal(">")
    if source.word_char_follows():
        source.expect("end of unit name")
        source.reset(start)
        return None
    return name


def _unit(source: Source, snapshot: RegistrySnapshot) -> Optional[Tuple[Optional[str], str]]:
    if source.literal(DIMENSIONLESS_NAME) is not None:
        return None, DIMENSIONLESS_NAME
    name = _unit_part(source, snapshot)
    if name is not None:
        return None, name
    start = source.mark()
    prefix = match_prefix(source, snapshot)
    if prefix is not None:
        name = _unit_part(source, snapshot)
        if name is not None:
            return prefix, name
    source.reset(start)
    return None


def parse_atom(source: Source, snapshot: RegistrySnapshot) -> Optional[UnitFactor]:
    """``[scalar][ ][1 | name | prefix name][^power]``; needs a scalar or a unit."""

    start = source.mark()
    scalar = parse_scalar(source)
    source.space()
    unit = _unit(source, snapshot)

    power = None
    power_start = source.mark()
    if _power_operator(source):
        power = parse_simple_number(source)
        if power is None:
            source.reset(power_start)

    if scalar is None and unit is None:
        source.expect("number or unit", start)
        source.reset(start)
        return None
    prefix, name = unit if unit is not None else (None, DIMENSIONLESS_NAME)
    if scalar is None and name == DIMENSIONLESS_NAME:
        # a lone "1" reads back as the number one
        scalar = Integer(DIMENSIONLESS_NAME)
    return UnitFactor(name=name, prefix=prefix, power=power, scalar=scalar)


def _climb(source: Source, snapshot: RegistrySnapshot, min_precedence: int) -> Optional[UnitExpression]:
    left: Optional[UnitExpression] = parse_atom(source, snapshot)
    if left is None:
        return None

    while True:
        op_start = source.mark()
        for operator, precedence, match in OPERATORS:
            if not match(source):
                continue
            if precedence < min_precedence:
                source.reset(op_start)
                return left
            right = _climb(source, snapshot, precedence + 1)
            if right is None:
                source.reset(op_start)
                continue
            left = BinaryOp(operator=operator, left=left, right=right)
            break
        else:
            return left


def parse_unit_expression(source: Source, snapshot: RegistrySnapshot) -> Optional[UnitExpression]:
    """Parse as much of a unit expression as the input allows."""

    return _climb(source, snapshot, 1)


__all__ = ["OPERATORS", "parse_atom", "parse_unit_expression"]
