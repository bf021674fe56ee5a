import pytest

from quantiparse.parser import ParseFailure, RegistrySnapshot, candidates_for, parse
from quantiparse.parser.matcher import match_name, match_prefix
from quantiparse.parser.source import Source
from quantiparse.parser.standard import parse_with_snapshot
from quantiparse.parser.tree import ScalarWithUnit, Integer, UnitFactor, UnitOnly
from quantiparse.units.registry import DEFAULT_REGISTRY


class FakeRegistry:
    def __init__(self, names, prefixes=()):
        self.names = list(names)
        self.prefixes = list(prefixes)

    def names_sorted_longest_first(self):
        return sorted(self.names, key=len, reverse=True)

    def prefixes_sorted_longest_first(self):
        return sorted(self.prefixes, key=len, reverse=True)


def test_candidates_filtered_by_remaining_length():
    assert candidates_for(("meter", "min", "m"), 3) == ("min", "m")
    assert candidates_for(("meter", "min", "m"), 10) == ("meter", "min", "m")


def test_candidates_fall_back_to_dimensionless():
    assert candidates_for(("meter",), 2) == ("1",)
    assert candidates_for((), 5) == ("1",)


def test_snapshot_orders_longest_first():
    snapshot = RegistrySnapshot.of(["m", "meter", "mi"], ["k", "kilo"])
    assert snapshot.names == ("meter", "mi", "m")
    assert snapshot.prefixes == ("kilo", "k")


def test_match_name_commits_to_longest_candidate():
    source = Source("meters")
    assert match_name(source, RegistrySnapshot.of(["m", "meter"])) == "meter"
    assert source.pos == 5


def test_match_prefix_reports_failure():
    source = Source("xyz")
    assert match_prefix(source, RegistrySnapshot.of([], ["k"])) is None
    assert source.pos == 0
    assert "unit prefix" in source.failure().expected


def test_shorter_name_first_shadows_longer_name():
    misordered = RegistrySnapshot(names=("m", "meter"), prefixes=())
    with pytest.raises(ParseFailure):
        parse_with_snapshot("meter", misordered)

    ordered = RegistrySnapshot.of(["m", "meter"])
    assert parse_with_snapshot("meter", ordered) == UnitOnly(UnitFactor("meter"))


def test_registered_prefix_of_name_never_wins():
    names = DEFAULT_REGISTRY.names_sorted_longest_first()
    pairs = [(short, long) for short in names for long in names if short != long and long.startswith(short)]
    assert pairs
    for _, long in pairs:
        assert parse(long) == UnitOnly(UnitFactor(long))


def test_synthetic_registry():
    registry = FakeRegistry(["foo", "foobar"], ["x"])
    assert parse("foobar", registry=registry) == UnitOnly(UnitFactor("foobar"))
    assert parse("xfoo", registry=registry) == UnitOnly(UnitFactor("foo", prefix="x"))
    assert parse("2 foo", registry=registry) == ScalarWithUnit(Integer("2"), UnitFactor("foo"))
    with pytest.raises(ParseFailure):
        parse("foob", registry=registry)


def test_registry_is_read_on_every_call():
    registry = FakeRegistry(["widget"])
    with pytest.raises(ParseFailure):
        parse("gadget", registry=registry)
    registry.names.append("gadget")
    assert parse("gadget", registry=registry) == UnitOnly(UnitFactor("gadget"))
