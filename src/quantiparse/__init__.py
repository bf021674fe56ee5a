"""quantiparse - parse free-form quantity expressions into structured trees."""

from .parser import ParseFailure, StandardParser, parse, to_canonical
from .units import DEFAULT_REGISTRY, UnitRegistry, evaluate
from .version import __version__

__all__ = [
    "DEFAULT_REGISTRY",
    "ParseFailure",
    "StandardParser",
    "UnitRegistry",
    "evaluate",
    "parse",
    "to_canonical",
    "__version__",
]
