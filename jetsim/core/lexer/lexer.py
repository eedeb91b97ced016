"""
NC Lexer: classifies program lines and extracts letter-prefixed fields.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from .tokens import COMMENT_PREFIXES, ClassifiedLine, LineType


class LexerPatterns:
    """Regular expression patterns for token recognition."""

    # Token separators: whitespace or commas
    SEPARATOR = re.compile(r"[\s,]+")

    # Field value: signed integer or decimal, optional exponent
    NUMBER = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:E[-+]?\d+)?", re.IGNORECASE)


@dataclass
class FieldError(Exception):
    """A field whose value is not a number."""
    message: str
    letter: str
    token: str
    line: int = 0

    def __str__(self) -> str:
        return f"Field Error at L{self.line}, {self.letter}: {self.message} ({self.token!r})"


def classify_line(raw: str, number: int = 1) -> ClassifiedLine:
    """Classify a single physical line."""
    text = raw.strip()
    if not text:
        return ClassifiedLine(number, raw, LineType.BLANK)
    if text.startswith(COMMENT_PREFIXES):
        return ClassifiedLine(number, raw, LineType.COMMENT)
    tokens = tuple(t for t in LexerPatterns.SEPARATOR.split(text.upper()) if t)
    return ClassifiedLine(number, raw, LineType.COMMAND, tokens)


def classify_lines(text: str) -> Iterator[ClassifiedLine]:
    """Classify every physical line of a program, in order."""
    # Only LF (with optional CR) ends a line; form feeds and the like stay inline
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    for number, raw in enumerate(lines, start=1):
        yield classify_line(raw.rstrip("\r"), number)


def extract_field(tokens: Sequence[str], letter: str, line: int = 0) -> Optional[float]:
    """
    Return the value of the first token starting with ``letter``.

    Returns None when no token carries the letter. Later duplicates are
    ignored. Raises FieldError when the value after the letter is not a number.
    """
    letter = letter.upper()
    for token in tokens:
        if not token.startswith(letter):
            continue
        value = token[len(letter):]
        if not LexerPatterns.NUMBER.fullmatch(value):
            raise FieldError("Expected number", letter, token, line)
        return float(value)
    return None


def extract_fields(
    tokens: Sequence[str],
    letters: Sequence[str],
    line: int = 0,
) -> dict[str, Optional[float]]:
    """Extract several fields at once; any malformed field fails the whole line."""
    return {letter: extract_field(tokens, letter, line) for letter in letters}
