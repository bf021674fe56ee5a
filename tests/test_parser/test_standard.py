import pytest

from quantiparse.parser import ParseFailure, StandardParser, parse
from quantiparse.parser.tree import (
    DIVIDE,
    MULTIPLY,
    POWER,
    BinaryOp,
    Complex,
    Decimal,
    Integer,
    Rational,
    ScalarOnly,
    ScalarWithUnit,
    UnitFactor,
    UnitOnly,
)


@pytest.fixture
def parser() -> StandardParser:
    return StandardParser()


def test_scalar_with_compound_unit(parser: StandardParser):
    result = parser.parse("3.5 km/h^2")
    assert result == ScalarWithUnit(
        Decimal("3", "5"),
        BinaryOp(DIVIDE, UnitFactor("m", prefix="k"), UnitFactor("h", power=Integer("2"))),
    )


def test_rational_without_unit(parser: StandardParser):
    assert parser.parse("1/2") == ScalarOnly(Rational(Integer("1"), Integer("2")))


def test_complex_scalar(parser: StandardParser):
    assert parser.parse("1+2i") == ScalarOnly(Complex(Integer("1"), Integer("2", "+")))


def test_bare_unit(parser: StandardParser):
    assert parser.parse("kg") == UnitOnly(UnitFactor("kg"))


def test_prefixed_unit_when_name_alone_fails(parser: StandardParser):
    assert parser.parse("mm") == UnitOnly(UnitFactor("m", prefix="m"))
    assert parser.parse("kPa") == UnitOnly(UnitFactor("Pa", prefix="k"))


def test_angle_bracket_names(parser: StandardParser):
    assert parser.parse("<m>") == UnitOnly(UnitFactor("m"))


def test_division_is_left_associative(parser: StandardParser):
    result = parser.parse("m/s/s")
    assert result == UnitOnly(
        BinaryOp(DIVIDE, BinaryOp(DIVIDE, UnitFactor("m"), UnitFactor("s")), UnitFactor("s"))
    )


def test_multiply_binds_tighter_than_divide(parser: StandardParser):
    result = parser.parse("kg*m/s^2")
    assert result == UnitOnly(
        BinaryOp(
            DIVIDE,
            BinaryOp(MULTIPLY, UnitFactor("kg"), UnitFactor("m")),
            UnitFactor("s", power=Integer("2")),
        )
    )


def test_power_binds_tighter_than_multiply(parser: StandardParser):
    result = parser.parse("m*s^kg")
    assert result == UnitOnly(
        BinaryOp(MULTIPLY, UnitFactor("m"), BinaryOp(POWER, UnitFactor("s"), UnitFactor("kg")))
    )


@pytest.mark.parametrize("text", ["kg m", "kg*m", "kg * m", "kg x m"])
def test_multiplication_spellings(parser: StandardParser, text: str):
    assert parser.parse(text) == UnitOnly(BinaryOp(MULTIPLY, UnitFactor("kg"), UnitFactor("m")))


def test_space_before_divide_is_not_multiplication(parser: StandardParser):
    assert parser.parse("m /s") == UnitOnly(BinaryOp(DIVIDE, UnitFactor("m"), UnitFactor("s")))


@pytest.mark.parametrize(
    "text, power",
    [
        ("m^2", Integer("2")),
        ("m**2", Integer("2")),
        ("m^-2", Integer("2", "-")),
        ("m^1/2", Rational(Integer("1"), Integer("2"))),
        ("m^0.5", Decimal("0", "5")),
    ],
)
def test_power_suffix(parser: StandardParser, text: str, power):
    assert parser.parse(text) == UnitOnly(UnitFactor("m", power=power))


def test_coefficient_inside_expression(parser: StandardParser):
    result = parser.parse("5 m/2")
    assert result == ScalarWithUnit(
        Integer("5"),
        BinaryOp(DIVIDE, UnitFactor("m"), UnitFactor("1", scalar=Integer("2"))),
    )


def test_scalar_over_unit_uses_dimensionless_name(parser: StandardParser):
    result = parser.parse("5/s")
    assert result == ScalarWithUnit(Integer("5"), BinaryOp(DIVIDE, UnitFactor("1"), UnitFactor("s")))


def test_space_between_scalar_and_unit_belongs_to_atom(parser: StandardParser):
    assert parser.parse("2 kg m") == ScalarWithUnit(
        Integer("2"), BinaryOp(MULTIPLY, UnitFactor("kg"), UnitFactor("m"))
    )


def test_scalar_with_power_and_no_unit(parser: StandardParser):
    assert parser.parse("5^2") == ScalarWithUnit(Integer("5"), UnitFactor("1", power=Integer("2")))


@pytest.mark.parametrize("text", ["5 mxyz", "5 m ", "", "m/", "kg**", "3.", "1/2/"])
def test_rejects_incomplete_input(parser: StandardParser, text: str):
    with pytest.raises(ParseFailure):
        parser.parse(text)


def test_failure_reports_furthest_position():
    with pytest.raises(ParseFailure) as excinfo:
        parse("5 mxyz")
    assert excinfo.value.position == 3
    assert "unit name" in excinfo.value.expected
    assert excinfo.value.text == "5 mxyz"
    assert "^" in str(excinfo.value)


def test_lone_one_after_space_is_a_number(parser):
    assert parser.parse(" 1") == ScalarOnly(Integer("1"))
    assert parser.parse("kg*  1") == UnitOnly(
        BinaryOp(MULTIPLY, UnitFactor("kg"), UnitFactor("1", scalar=Integer("1")))
    )
