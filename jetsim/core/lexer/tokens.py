"""
Token definitions for waterjet NC programs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LineType(Enum):
    """Classification of a physical program line."""

    BLANK = auto()
    COMMENT = auto()    # starts with ';' or '('
    COMMAND = auto()    # candidate command line


# Comment prefixes (checked after trimming)
COMMENT_PREFIXES = (";", "(")

# Field letters understood by the interpreter
FIELD_LETTERS = ("G", "X", "Y", "Z", "F", "I", "J")


@dataclass(frozen=True)
class ClassifiedLine:
    """One physical line of a program after classification."""
    number: int          # 1-based physical line number
    raw: str             # original text, untrimmed
    type: LineType
    tokens: tuple[str, ...] = ()

    @property
    def is_command(self) -> bool:
        return self.type is LineType.COMMAND

    def __repr__(self) -> str:
        return f"ClassifiedLine(L{self.number}, {self.type.name}, {list(self.tokens)!r})"
