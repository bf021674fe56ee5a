"""Parser for SI and Imperial quantity expressions.

Besides regular unit expressions (``3.5 km/h^2``, ``kg*m/s^2``) the parser
recognises a handful of irregular idioms (``6 foot 4``, ``19 lbs, 4 oz``,
``10:30:15``). The root rule tries, in order, time of day, feet and inches,
pounds and ounces, stone and pounds, and finally the general unit
expression. Every alternative has to consume the whole input to be accepted.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .expression import parse_unit_expression
from .irregular import parse_irregular
from .matcher import RegistrySnapshot, UnitNameSource
from .source import ParseFailure, Source
from .tree import (
    DIMENSIONLESS_NAME,
    BinaryOp,
    IrregularResult,
    NumberLiteral,
    ParseResult,
    ScalarOnly,
    ScalarWithUnit,
    UnitExpression,
    UnitFactor,
    UnitOnly,
)

logger = logging.getLogger(__name__)


def _lift_scalar(expression: UnitExpression) -> tuple[Optional[NumberLiteral], UnitExpression]:
    """Detach the coefficient of the leftmost factor."""

    if isinstance(expression, BinaryOp):
        scalar, left = _lift_scalar(expression.left)
        return scalar, replace(expression, left=left)
    return expression.scalar, replace(expression, scalar=None)


def build_result(expression: UnitExpression) -> ParseResult:
    """Shape a parsed unit expression into the top-level result."""

    scalar, unit = _lift_scalar(expression)
    if scalar is None:
        return UnitOnly(unit=unit)
    if unit == UnitFactor(name=DIMENSIONLESS_NAME):
        return ScalarOnly(scalar=scalar)
    return ScalarWithUnit(scalar=scalar, unit=unit)


class StandardParser:
    """Quantity-expression parser bound to a unit registry.

    The registry is consulted once per :meth:`parse` call; the names and
    prefixes it reports are frozen into a :class:`RegistrySnapshot` for the
    duration of that call.
    """

    def __init__(self, registry: Optional[UnitNameSource] = None) -> None:
        if registry is None:
            from ..units.registry import DEFAULT_REGISTRY

            registry = DEFAULT_REGISTRY
        self.registry = registry

    def parse(self, text: str) -> ParseResult:
        snapshot = RegistrySnapshot.from_registry(self.registry)
        return parse_with_snapshot(text, snapshot)


def parse_with_snapshot(text: str, snapshot: RegistrySnapshot) -> ParseResult:
    source = Source(text)
    if not text:
        source.expect("number or unit")
        raise source.failure()

    irregular = parse_irregular(source)
    if irregular is not None:
        logger.debug("Parsed %r as irregular %s", text, irregular.kind)
        return IrregularResult(quantity=irregular)

    expression = parse_unit_expression(source, snapshot)
    if expression is not None and source.at_end():
        logger.debug("Parsed %r as unit expression", text)
        return build_result(expression)

    if expression is not None:
        source.expect("end of input")
    failure = source.failure()
    logger.debug("Failed to parse %r at column %d", text, failure.position)
    raise failure


def parse(text: str, *, registry: Optional[UnitNameSource] = None) -> ParseResult:
    """Parse ``text`` into a :data:`ParseResult` or raise :class:`ParseFailure`."""

    return StandardParser(registry).parse(text)


__all__ = [
    "ParseFailure",
    "StandardParser",
    "build_result",
    "parse",
    "parse_with_snapshot",
]
