"""Unit registry: known unit names, prefixes and their SI equivalents."""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from typing import Dict, List, Sequence, Tuple

from ..parser.matcher import RegistrySnapshot


BASE_SYMBOLS = ("m", "kg", "s", "A", "K", "mol", "cd")
DIMS = Tuple[Fraction, Fraction, Fraction, Fraction, Fraction, Fraction, Fraction]


class UnknownUnitError(KeyError):
    """Raised when a unit or prefix is not registered."""


def _to_fraction(value: float | int | str | Fraction) -> Fraction:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value, 1)
    if isinstance(value, float):
        return Fraction(value).limit_denominator(10_000)
    return Fraction(value)


def _zero_dims() -> DIMS:
    return (Fraction(0),) * 7


@dataclass(frozen=True)
class Quantity:
    """SI-canonical unit: a scale factor and seven base-dimension exponents."""

    scale: float
    dims: DIMS

    def __post_init__(self) -> None:
        normalized = tuple(_to_fraction(d) for d in self.dims)
        object.__setattr__(self, "dims", normalized)

    def __mul__(self, other: "Quantity") -> "Quantity":
        return Quantity(self.scale * other.scale, tuple(x + y for x, y in zip(self.dims, other.dims)))

    def __truediv__(self, other: "Quantity") -> "Quantity":
        return Quantity(self.scale / other.scale, tuple(x - y for x, y in zip(self.dims, other.dims)))

    def __pow__(self, exponent: float | int | Fraction) -> "Quantity":
        frac = _to_fraction(exponent)
        return Quantity(self.scale ** float(frac), tuple(x * frac for x in self.dims))

    def is_dimensionless(self) -> bool:
        return all(d == 0 for d in self.dims)


DIMENSIONLESS = Quantity(1.0, _zero_dims())


class UnitRegistry:
    """Registry of unit names (aliases included) and SI prefixes.

    The parser only asks it for :meth:`names_sorted_longest_first` and
    :meth:`prefixes_sorted_longest_first`; :meth:`get` and
    :meth:`prefix_factor` serve :mod:`quantiparse.units.transform`.
    """

    def __init__(self, *, defaults: bool = True) -> None:
        self._units: Dict[str, Quantity] = {}
        self._prefixes: Dict[str, float] = {}
        self._preferred_symbols: Dict[Tuple[Fraction, ...], str] = {}
        if defaults:
            self._install_defaults()

    # ------------------------------------------------------------------
    def register(
        self,
        symbol: str,
        scale: float,
        dims: Sequence[int | Fraction],
        *,
        aliases: Sequence[str] | None = None,
        prefer: bool = False,
    ) -> None:
        quantity = Quantity(scale, tuple(_to_fraction(d) for d in dims))
        for key in (symbol, *(aliases or [])):
            self._units[key] = quantity
        if quantity.scale == 1.0 or prefer:
            current = self._preferred_symbols.get(quantity.dims)
            if current is None or prefer:
                self._preferred_symbols[quantity.dims] = symbol

    def register_prefix(self, symbol: str, factor: float, *, aliases: Sequence[str] | None = None) -> None:
        for key in (symbol, *(aliases or [])):
            self._prefixes[key] = factor

    def get(self, symbol: str) -> Quantity:
        try:
            return self._units[symbol]
        except KeyError:
            raise UnknownUnitError(symbol) from None

    def prefix_factor(self, prefix: str) -> float:
        try:
            return self._prefixes[prefix]
        except KeyError:
            raise UnknownUnitError(prefix) from None

    def prefer_symbol(self, quantity: Quantity) -> str | None:
        if abs(quantity.scale - 1.0) > 1e-12:
            return None
        return self._preferred_symbols.get(tuple(quantity.dims))

    # ------------------------------------------------------------------
    def names_sorted_longest_first(self) -> List[str]:
        return sorted(self._units, key=len, reverse=True)

    def prefixes_sorted_longest_first(self) -> List[str]:
        return sorted(self._prefixes, key=len, reverse=True)

    def snapshot(self) -> RegistrySnapshot:
        return RegistrySnapshot.from_registry(self)

    # ------------------------------------------------------------------
    def _install_defaults(self) -> None:
        for symbol, factor, aliases in (
            ("Y", 1e24, ["yotta"]),
            ("Z", 1e21, ["zetta"]),
            ("E", 1e18, ["exa"]),
            ("P", 1e15, ["peta"]),
            ("T", 1e12, ["tera"]),
            ("G", 1e9, ["giga"]),
            ("M", 1e6, ["mega"]),
            ("k", 1e3, ["kilo"]),
            ("h", 1e2, ["hecto"]),
            ("da", 1e1, ["deca", "deka"]),
            ("d", 1e-1, ["deci"]),
            ("c", 1e-2, ["centi"]),
            ("m", 1e-3, ["milli"]),
            ("µ", 1e-6, ["u", "micro"]),
            ("n", 1e-9, ["nano"]),
            ("p", 1e-12, ["pico"]),
            ("f", 1e-15, ["femto"]),
            ("a", 1e-18, ["atto"]),
            ("z", 1e-21, ["zepto"]),
            ("y", 1e-24, ["yocto"]),
        ):
            self.register_prefix(symbol, factor, aliases=aliases)

        L = (1, 0, 0, 0, 0, 0, 0)
        M = (0, 1, 0, 0, 0, 0, 0)
        T = (0, 0, 1, 0, 0, 0, 0)
        I = (0, 0, 0, 1, 0, 0, 0)
        Th = (0, 0, 0, 0, 1, 0, 0)
        N = (0, 0, 0, 0, 0, 1, 0)
        J = (0, 0, 0, 0, 0, 0, 1)

        self.register("m", 1.0, L, aliases=["meter", "meters", "metre", "metres"])
        self.register("kg", 1.0, M, aliases=["kilogram", "kilograms"])
        self.register("g", 1e-3, M, aliases=["gram", "grams"])
        self.register("s", 1.0, T, aliases=["sec", "second", "seconds"])
        self.register("min", 60.0, T, aliases=["minute", "minutes"])
        self.register("h", 3600.0, T, aliases=["hr", "hour", "hours"])
        self.register("day", 86400.0, T, aliases=["days"])
        self.register("A", 1.0, I, aliases=["amp", "ampere"])
        self.register("K", 1.0, Th, aliases=["kelvin"])
        self.register("degC", 1.0, Th, aliases=["°C"])
        self.register("mol", 1.0, N, aliases=["mole"])
        self.register("cd", 1.0, J, aliases=["candela"])

        # Dimensionless helpers
        self.register("rad", 1.0, _zero_dims(), aliases=["radian"])
        self.register("sr", 1.0, _zero_dims())
        self.register("rev", 2 * math.pi, _zero_dims())
        self.register("deg", math.pi / 180.0, _zero_dims(), aliases=["degree", "degrees"])
        self.register("%", 0.01, _zero_dims(), aliases=["percent"])

        # Derived SI
        self.register("Hz", 1.0, (0, 0, -1, 0, 0, 0, 0), aliases=["hertz"])
        self.register("N", 1.0, (1, 1, -2, 0, 0, 0, 0), aliases=["newton"], prefer=True)
        self.register("Pa", 1.0, (-1, 1, -2, 0, 0, 0, 0), aliases=["pascal"], prefer=True)
        self.register("J", 1.0, (2, 1, -2, 0, 0, 0, 0), aliases=["joule"], prefer=True)
        self.register("W", 1.0, (2, 1, -3, 0, 0, 0, 0), aliases=["watt"], prefer=True)
        self.register("C", 1.0, (0, 0, 1, 1, 0, 0, 0), aliases=["coulomb"], prefer=True)
        self.register("V", 1.0, (2, 1, -3, -1, 0, 0, 0), aliases=["volt"], prefer=True)
        self.register("Ω", 1.0, (2, 1, -3, -2, 0, 0, 0), aliases=["ohm"], prefer=True)
        self.register("S", 1.0, (-2, -1, 3, 2, 0, 0, 0), aliases=["siemens"], prefer=True)
        self.register("F", 1.0, (-2, -1, 4, 2, 0, 0, 0), aliases=["farad"], prefer=True)
        self.register("Wb", 1.0, (2, 1, -2, -1, 0, 0, 0), aliases=["weber"], prefer=True)
        self.register("T", 1.0, (0, 1, -2, -1, 0, 0, 0), aliases=["tesla"])
        self.register("H", 1.0, (2, 1, -2, -2, 0, 0, 0), aliases=["henry"], prefer=True)
        self.register("lx", 1.0, (-2, 0, 0, 0, 0, 0, 1), aliases=["lux"], prefer=True)
        self.register("lm", 1.0, (0, 0, 0, 0, 0, 0, 1), aliases=["lumen"])
        self.register("kat", 1.0, (0, 0, -1, 0, 0, 1, 0))

        # Other useful units
        self.register("eV", 1.602176634e-19, (2, 1, -2, 0, 0, 0, 0))
        self.register("cal", 4.184, (2, 1, -2, 0, 0, 0, 0), aliases=["calorie", "calories"])
        self.register("L", 1e-3, (3, 0, 0, 0, 0, 0, 0), aliases=["l", "liter", "liters", "litre", "litres"])
        self.register("bar", 1e5, (-1, 1, -2, 0, 0, 0, 0))
        self.register("atm", 101325.0, (-1, 1, -2, 0, 0, 0, 0))
        self.register("psi", 6894.757293168, (-1, 1, -2, 0, 0, 0, 0))
        self.register("Gauss", 1e-4, (0, 1, -2, -1, 0, 0, 0))

        # Imperial / CGS helpers
        self.register("in", 0.0254, L, aliases=["inch", "inches"])
        self.register("ft", 0.3048, L, aliases=["foot", "feet"])
        self.register("yd", 0.9144, L, aliases=["yard", "yards"])
        self.register("mi", 1609.344, L, aliases=["mile", "miles"])
        self.register("lb", 0.45359237, M, aliases=["lbs", "pound", "pounds"])
        self.register("oz", 0.028349523125, M, aliases=["ounce", "ounces"])
        self.register("st", 6.35029318, M, aliases=["stone", "stones"])
        self.register("slug", 14.59390294, M)
        self.register("ton", 907.18474, M, aliases=["tons"])
        self.register("lbf", 4.4482216152605, (1, 1, -2, 0, 0, 0, 0))
        self.register("dyn", 1e-5, (1, 1, -2, 0, 0, 0, 0))
        self.register("erg", 1e-7, (2, 1, -2, 0, 0, 0, 0))
        self.register("gal", 3.785411784e-3, (3, 0, 0, 0, 0, 0, 0), aliases=["gallon", "gallons"])
        self.register("mph", 0.44704, (1, 0, -1, 0, 0, 0, 0))
        self.register("kn", 1852.0 / 3600.0, (1, 0, -1, 0, 0, 0, 0), aliases=["knot", "knots"])


def format_quantity(quantity: Quantity, *, registry: UnitRegistry | None = None) -> str:
    """Return a human readable SI string for ``quantity`` (ignoring scale)."""

    registry = registry or DEFAULT_REGISTRY
    if quantity.is_dimensionless():
        return "1"

    preferred = registry.prefer_symbol(Quantity(1.0, quantity.dims))
    if preferred:
        return preferred

    numerator: List[str] = []
    denominator: List[str] = []
    for symbol, exponent in zip(BASE_SYMBOLS, quantity.dims):
        if exponent == 0:
            continue
        target = numerator if exponent > 0 else denominator
        formatted_exp = _format_exponent(abs(exponent))
        target.append(symbol if formatted_exp == "1" else f"{symbol}^{formatted_exp}")

    unit_str = "*".join(numerator) if numerator else "1"
    if denominator:
        unit_str = f"{unit_str}/" + "*".join(denominator)
    return unit_str


def _format_exponent(exponent: Fraction) -> str:
    exponent = exponent.limit_denominator()
    if exponent.denominator == 1:
        return str(exponent.numerator)
    return f"{exponent.numerator}/{exponent.denominator}"


DEFAULT_REGISTRY = UnitRegistry()


__all__ = [
    "BASE_SYMBOLS",
    "DEFAULT_REGISTRY",
    "DIMENSIONLESS",
    "Quantity",
    "UnitRegistry",
    "UnknownUnitError",
    "format_quantity",
]
