"""
Waterjet NC parser.
Classifies program lines and folds them into an ordered toolpath with metrics.

Features:
- G00/G01/G02/G03 with modal X/Y/Z and F
- Arc geometry from I/J center offsets
- Pierce-point detection (rapid -> cutting transitions)
- Best-effort parsing: malformed lines are logged and skipped
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from jetsim.core.kinematics import resolve_arc
from jetsim.core.lexer import FIELD_LETTERS, ClassifiedLine, FieldError, classify_lines, extract_fields
from jetsim.core.metrics import MetricsAccumulator
from jetsim.core.toolpath import (
    ArcCut,
    LinearCut,
    LineDiagnostic,
    ModalState,
    MotionPrimitive,
    MoveCommand,
    MoveKind,
    ParsedProgram,
    RapidMove,
)

logger = logging.getLogger(__name__)


def build_primitive(
    fields: dict[str, Optional[float]],
    state: ModalState,
    sequence: int,
) -> tuple[ModalState, Optional[MotionPrimitive]]:
    """
    Interpret one line's fields against the current modal state.
    Returns the next state and the primitive, or the unchanged state and None
    for lines that are not motion commands.
    """
    command = MoveCommand.from_g(fields.get("G"))
    if command is None:
        return state, None

    start = state.position
    end = state.resolve_target(fields.get("X"), fields.get("Y"), fields.get("Z"))
    kind = command.kind
    is_pierce = state.last_move_kind is MoveKind.RAPID and kind is MoveKind.CUTTING

    feed = fields.get("F")
    feed_rate = feed if feed is not None else state.feed_rate

    move: MotionPrimitive
    if command is MoveCommand.RAPID:
        move = RapidMove(start, end, sequence, is_pierce)
    elif command is MoveCommand.LINEAR:
        move = LinearCut(start, end, sequence, is_pierce, feed_rate=feed_rate)
    else:
        clockwise = command is MoveCommand.ARC_CW
        arc = resolve_arc(start, end, fields.get("I"), fields.get("J"), clockwise)
        move = ArcCut(
            start, end, sequence, is_pierce,
            feed_rate=feed_rate, clockwise=clockwise, arc=arc,
        )

    return state.advance(end, kind, feed_rate), move


def interpret_line(
    line: ClassifiedLine,
    state: ModalState,
    sequence: int,
) -> tuple[ModalState, Optional[MotionPrimitive]]:
    """Extract motion fields from a command line and build its primitive."""
    fields = extract_fields(line.tokens, FIELD_LETTERS, line=line.number)
    return build_primitive(fields, state, sequence)


def parse_string(content: str) -> ParsedProgram:
    """
    Parse NC program text and return the toolpath with its metrics.
    Every call starts from a fresh modal state at the origin.
    """
    state = ModalState()
    acc = MetricsAccumulator()
    diagnostics: list[LineDiagnostic] = []

    for line in classify_lines(content):
        if not line.is_command:
            continue
        try:
            state, move = interpret_line(line, state, len(acc.toolpath))
        except FieldError as e:
            logger.warning("Skipping line %d: %s", line.number, e)
            diagnostics.append(LineDiagnostic(line.number, line.raw.strip(), str(e)))
            continue
        if move is not None:
            acc.add(move)

    program = acc.result(diagnostics)
    logger.debug(
        "Parsed %d moves (%d pierces, %.3f mm cutting, %.3f mm rapid, %d skipped lines)",
        len(program.toolpath),
        program.piercing_count,
        program.cutting_perimeter,
        program.rapid_length,
        len(program.diagnostics),
    )
    return program


def parse_file(path: Union[str, Path]) -> ParsedProgram:
    """Parse an NC file; undecodable bytes are replaced rather than rejected."""
    path = Path(path)
    content = path.read_text(encoding="utf-8", errors="replace")
    return parse_string(content)
