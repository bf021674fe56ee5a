"""Grammar engine for quantity expressions."""

from .canonical import to_canonical
from .matcher import RegistrySnapshot, candidates_for
from .source import ParseFailure
from .standard import StandardParser, parse

__all__ = [
    "ParseFailure",
    "RegistrySnapshot",
    "StandardParser",
    "candidates_for",
    "parse",
    "to_canonical",
]
