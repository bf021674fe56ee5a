"""Cursor over the input text plus failure bookkeeping."""

from __future__ import annotations

from typing import List, Set


SPACE = " "
SIGNS = "+-"
DIGITS = "0123456789"
NON_ZERO_DIGITS = "123456789"
SEPARATORS = ",_"


class ParseFailure(ValueError):
    """Raised when the input is not a valid quantity expression."""

    def __init__(self, text: str, position: int, expected: tuple[str, ...] = ()) -> None:
        message = f"Cannot parse quantity expression at column {position}"
        if expected:
            message += f" (expected one of: {', '.join(expected)})"
        if 0 <= position <= len(text):
            message += f"\n{text}\n{' ' * position}^"
        super().__init__(message)
        self.text = text
        self.position = position
        self.expected = expected


class Source:
    """Mutable read position over ``text``.

    Matchers either advance the position on success or leave it untouched on
    failure; sequences that fail part-way must :meth:`reset` to their mark.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self.furthest = 0
        self._expected: Set[str] = set()

    # ------------------------------------------------------------------
    @property
    def chars_left(self) -> int:
        return len(self.text) - self.pos

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        if self.pos >= len(self.text):
            return ""
        return self.text[self.pos]

    def mark(self) -> int:
        return self.pos

    def reset(self, pos: int) -> None:
        self.pos = pos

    # ------------------------------------------------------------------
    def expect(self, description: str, pos: int | None = None) -> None:
        """Record that ``description`` was expected at ``pos``."""

        if pos is None:
            pos = self.pos
        if pos > self.furthest:
            self.furthest = pos
            self._expected = {description}
        elif pos == self.furthest:
            self._expected.add(description)

    def literal(self, text: str) -> str | None:
        if self.text.startswith(text, self.pos):
            self.pos += len(text)
            return text
        self.expect(repr(text))
        return None

    def one_of(self, chars: str, description: str | None = None) -> str | None:
        ch = self.peek()
        if ch and ch in chars:
            self.pos += 1
            return ch
        self.expect(description or f"[{chars}]")
        return None

    def repeat(self, chars: str, minimum: int = 0, maximum: int | None = None) -> str | None:
        """Greedily consume characters from ``chars``; ``None`` below ``minimum``."""

        start = self.pos
        taken: List[str] = []
        while maximum is None or len(taken) < maximum:
            ch = self.one_of(chars)
            if ch is None:
                break
            taken.append(ch)
        if len(taken) < minimum:
            self.pos = start
            return None
        return "".join(taken)

    def space(self) -> bool:
        """Optional single space; returns whether one was consumed."""

        return self.literal(SPACE) is not None

    def word_char_follows(self) -> bool:
        ch = self.peek()
        return bool(ch) and (ch.isalnum() or ch == "_")

    def failure(self) -> ParseFailure:
        return ParseFailure(self.text, self.furthest, tuple(sorted(self._expected)))


__all__ = [
    "DIGITS",
    "NON_ZERO_DIGITS",
    "ParseFailure",
    "SEPARATORS",
    "SIGNS",
    "SPACE",
    "Source",
]
