import pytest

from quantiparse.parser import parse, to_canonical
from quantiparse.parser.tree import Integer, Rational


@pytest.mark.parametrize(
    "text, canonical",
    [
        ("3.5 km/h^2", "3.5 km / h^2"),
        ("6'4\"", "6 ft 4 in"),
        ("19 lbs, 4 oz", "19 lb 4 oz"),
        ("11 stone 2", "11 st 2 lb"),
        ("10:30:15,250", "10:30:15,250"),
        ("kg*m/s^2", "kg * m / s^2"),
        ("5/s", "5 1 / s"),
        ("<m>", "m"),
        ("1E3 m", "1e3 m"),
    ],
)
def test_canonical_text(text: str, canonical: str):
    assert to_canonical(parse(text)) == canonical


@pytest.mark.parametrize(
    "text",
    [
        "3.5 km/h^2",
        "6 foot 4",
        "6'4\"",
        "19 lbs, 4 oz",
        "11 stone 2",
        "10:30:15,250",
        "0:05",
        "1/2",
        "1 1/2",
        "1+2i",
        "-3 degC",
        "1.5e-3 kg",
        "1,000 m",
        "kg*m/s^2",
        "m*s^kg",
        "m^1/2",
        "5 m/2",
        "5/s",
        "5 / 2",
        "5^2",
        "19 lbs 4",
        "kPa",
        " 1",
        "kg*  1",
    ],
)
def test_canonical_round_trip(text: str):
    result = parse(text)
    assert parse(to_canonical(result)) == result


def test_literals_render_as_written():
    assert to_canonical(Rational(Integer("1,000"), Integer("3", "-"))) == "1,000/-3"
