"""Recognizers for compound idioms such as ``6'4"`` or ``19 lbs, 4 oz``."""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .numbers import parse_simple_number, unsigned_integer
from .source import DIGITS, Source
from .tree import (
    FeetInches,
    Integer,
    IrregularQuantity,
    PoundsOunces,
    SimpleNumber,
    StonePounds,
    Time,
)


FEET_WORDS = ("feet", "foot", "ft", "'")
INCH_WORDS = ("inches", "inch", "in", '"')
POUND_WORDS = ("pounds", "pound", "lbs", "lb")
OUNCE_WORDS = ("ounces", "ounce", "oz")
STONE_WORDS = ("stones", "stone", "st")


def _word(source: Source, words: Sequence[str]) -> Optional[str]:
    for word in words:
        if source.literal(word) is not None:
            return word
    return None


def _sixty(source: Source) -> Optional[Integer]:
    """Two digits with the tens digit restricted to 0-5."""

    start = source.mark()
    tens = source.one_of("012345", "minutes or seconds digit")
    units = source.one_of(DIGITS, "digit") if tens is not None else None
    if units is None:
        source.reset(start)
        return None
    return Integer(digits=tens + units)


def parse_time(source: Source) -> Optional[Time]:
    """``H:MM[:SS][,microseconds]``."""

    start = source.mark()
    hours = "0" if source.literal("0") is not None else source.repeat(DIGITS, 1)
    if hours is None or source.literal(":") is None:
        source.reset(start)
        return None
    minutes = _sixty(source)
    if minutes is None:
        source.reset(start)
        return None

    seconds = None
    seconds_start = source.mark()
    if source.literal(":") is not None:
        seconds = _sixty(source)
        if seconds is None:
            source.reset(seconds_start)

    microseconds = None
    micro_start = source.mark()
    if source.literal(",") is not None:
        digits = unsigned_integer(source)
        if digits is None:
            source.reset(micro_start)
        else:
            microseconds = Integer(digits=digits)

    return Time(
        hours=Integer(digits=hours),
        minutes=minutes,
        seconds=seconds,
        microseconds=microseconds,
    )


def _pair(
    source: Source,
    major_words: Sequence[str],
    minor_words: Sequence[str],
    minor_required: bool,
) -> Optional[Tuple[SimpleNumber, SimpleNumber]]:
    """``num space? MAJOR ,? space? num space? MINOR``; MINOR may be optional."""

    start = source.mark()
    major = parse_simple_number(source)
    if major is None:
        return None
    source.space()
    if _word(source, major_words) is None:
        source.reset(start)
        return None
    source.literal(",")
    source.space()
    minor = parse_simple_number(source)
    if minor is None:
        source.reset(start)
        return None

    source.space()
    if _word(source, minor_words) is None and minor_required:
        source.reset(start)
        return None
    return major, minor


def parse_feet_inches(source: Source) -> Optional[FeetInches]:
    pair = _pair(source, FEET_WORDS, INCH_WORDS, minor_required=False)
    if pair is None:
        return None
    return FeetInches(feet=pair[0], inches=pair[1])


def parse_pounds_ounces(source: Source) -> Optional[PoundsOunces]:
    pair = _pair(source, POUND_WORDS, OUNCE_WORDS, minor_required=True)
    if pair is None:
        return None
    return PoundsOunces(pounds=pair[0], ounces=pair[1])


def parse_stone_pounds(source: Source) -> Optional[StonePounds]:
    pair = _pair(source, STONE_WORDS, POUND_WORDS, minor_required=False)
    if pair is None:
        return None
    return StonePounds(stone=pair[0], pounds=pair[1])


IRREGULAR_RULES = (
    parse_time,
    parse_feet_inches,
    parse_pounds_ounces,
    parse_stone_pounds,
)


def parse_irregular(source: Source) -> Optional[IrregularQuantity]:
    """First recognizer that consumes the whole input, or ``None``."""

    start = source.mark()
    for rule in IRREGULAR_RULES:
        node = rule(source)
        if node is not None and source.at_end():
            return node
        if node is not None:
            source.expect("end of input")
        source.reset(start)
    return None


__all__ = [
    "IRREGULAR_RULES",
    "parse_feet_inches",
    "parse_irregular",
    "parse_pounds_ounces",
    "parse_stone_pounds",
    "parse_time",
]
