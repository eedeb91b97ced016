"""
NC line classifier and field extractor for waterjet programs.
"""

from .tokens import (
    ClassifiedLine,
    LineType,
    COMMENT_PREFIXES,
    FIELD_LETTERS,
)
from .lexer import (
    FieldError,
    classify_line,
    classify_lines,
    extract_field,
    extract_fields,
)

__all__ = [
    # Line types
    "ClassifiedLine",
    "LineType",
    "COMMENT_PREFIXES",
    "FIELD_LETTERS",
    # Lexer
    "FieldError",
    "classify_line",
    "classify_lines",
    "extract_field",
    "extract_fields",
]
