"""Render parse trees back to text.

The canonical text of a result parses back to an equal result. Literals keep
their written form; binary operators are spelled ``" * "``, ``" / "`` and
``"^"``. The spaced forms keep a following number from being read as part of
a rational or mixed fraction.
"""

from __future__ import annotations

from typing import Any

from .tree import (
    DIMENSIONLESS_NAME,
    DIVIDE,
    MULTIPLY,
    POWER,
    BinaryOp,
    FeetInches,
    IrregularResult,
    PoundsOunces,
    ScalarOnly,
    ScalarWithUnit,
    StonePounds,
    Time,
    UnitFactor,
    UnitOnly,
)


OPERATOR_TEXT = {POWER: "^", MULTIPLY: " * ", DIVIDE: " / "}


def _factor(factor: UnitFactor) -> str:
    unit = f"{factor.prefix or ''}{factor.name}"
    if factor.scalar is not None:
        # a bare coefficient parses back to the dimensionless name
        if unit == DIMENSIONLESS_NAME:
            text = factor.scalar.text
        else:
            text = f"{factor.scalar.text} {unit}"
    else:
        text = unit
    if factor.power is not None:
        text += f"^{factor.power.text}"
    return text


def _time(time: Time) -> str:
    text = f"{time.hours.text}:{time.minutes.text}"
    if time.seconds is not None:
        text += f":{time.seconds.text}"
    if time.microseconds is not None:
        text += f",{time.microseconds.text}"
    return text


def to_canonical(node: Any) -> str:
    """Return canonical text for a result, unit expression or literal."""

    if isinstance(node, ScalarOnly):
        return node.scalar.text
    if isinstance(node, UnitOnly):
        return to_canonical(node.unit)
    if isinstance(node, ScalarWithUnit):
        return f"{node.scalar.text} {to_canonical(node.unit)}"
    if isinstance(node, IrregularResult):
        return to_canonical(node.quantity)
    if isinstance(node, BinaryOp):
        return f"{to_canonical(node.left)}{OPERATOR_TEXT[node.operator]}{to_canonical(node.right)}"
    if isinstance(node, UnitFactor):
        return _factor(node)
    if isinstance(node, Time):
        return _time(node)
    if isinstance(node, FeetInches):
        return f"{node.feet.text} ft {node.inches.text} in"
    if isinstance(node, PoundsOunces):
        return f"{node.pounds.text} lb {node.ounces.text} oz"
    if isinstance(node, StonePounds):
        return f"{node.stone.text} st {node.pounds.text} lb"
    if hasattr(node, "text"):
        return node.text
    raise TypeError(f"Cannot render {type(node).__name__} as a quantity expression")


__all__ = ["OPERATOR_TEXT", "to_canonical"]
