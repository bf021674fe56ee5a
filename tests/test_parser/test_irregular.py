import pytest

from quantiparse.parser import ParseFailure, parse
from quantiparse.parser.irregular import parse_feet_inches, parse_time
from quantiparse.parser.source import Source
from quantiparse.parser.tree import (
    MULTIPLY,
    BinaryOp,
    Decimal,
    FeetInches,
    Integer,
    IrregularResult,
    MixedFraction,
    PoundsOunces,
    Rational,
    ScalarWithUnit,
    StonePounds,
    Time,
    UnitFactor,
)


@pytest.mark.parametrize("text", ["6 foot 4", "6'4\"", "6 ft 4 in", "6 feet, 4 inches", "6ft4"])
def test_feet_inches(text: str):
    assert parse(text) == IrregularResult(FeetInches(Integer("6"), Integer("4")))


def test_feet_inches_with_fractional_parts():
    result = parse("5.5 ft 3/4 in")
    assert result == IrregularResult(FeetInches(Decimal("5", "5"), Rational(Integer("3"), Integer("4"))))


@pytest.mark.parametrize("text", ["19 lbs, 4 oz", "19 pounds 4 ounces", "19lb4oz"])
def test_pounds_ounces(text: str):
    assert parse(text) == IrregularResult(PoundsOunces(Integer("19"), Integer("4")))


def test_pounds_ounces_requires_ounce_word():
    result = parse("19 lbs 4")
    assert result.kind == "scalar_with_unit"


@pytest.mark.parametrize("text", ["11 stone 2", "11 st, 2 lbs", "11 stones 2 pounds"])
def test_stone_pounds(text: str):
    assert parse(text) == IrregularResult(StonePounds(Integer("11"), Integer("2")))


def test_time_hours_minutes():
    assert parse("10:30") == IrregularResult(Time(Integer("10"), Integer("30")))


def test_time_with_seconds_and_microseconds():
    result = parse("10:30:15,250")
    assert result == IrregularResult(
        Time(Integer("10"), Integer("30"), Integer("15"), Integer("250"))
    )


def test_time_zero_hour():
    assert parse("0:05") == IrregularResult(Time(Integer("0"), Integer("05")))


@pytest.mark.parametrize("text", ["12:60", "12:5", "10:30:75"])
def test_time_rejects_out_of_range_fields(text: str):
    with pytest.raises(ParseFailure):
        parse(text)


def test_time_rejects_sixty_minutes_at_rule_level():
    source = Source("12:60")
    assert parse_time(source) is None
    assert source.pos == 0


def test_feet_inches_rule_stops_without_consuming_on_failure():
    source = Source("6 ft")
    assert parse_feet_inches(source) is None
    assert source.pos == 0


def test_mixed_fraction_feet_fall_back_to_unit_expression():
    result = parse("6 1/2 ft 4")
    assert result == ScalarWithUnit(
        MixedFraction(Integer("6"), Rational(Integer("1"), Integer("2"))),
        BinaryOp(MULTIPLY, UnitFactor("ft"), UnitFactor("1", scalar=Integer("4"))),
    )
