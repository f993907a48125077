"""Parser that splits cleaned VM lines into typed commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from libhackkit.assembler.encoder import MAX_ADDRESS_VALUE
from libhackkit.assembler.parser import is_integer_literal, is_valid_symbol

from ._context import LABEL_SCOPE_SEPARATOR
from .commands import (
    COMMAND_KEYWORDS,
    ArithmeticOperation,
    Command,
    CommandType,
    Segment,
)
from .errors import (
    MalformedCommandError,
    PopIntoConstantSegmentError,
    SegmentIndexOutOfRangeError,
    UnknownCommandError,
    UnknownSegmentError,
)

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable, Mapping

    from libhackkit.source.location import SourceLine

# Tokens count including command keyword itself
COMMAND_ARITY: Mapping[CommandType, int] = {
    CommandType.ARITHMETIC: 1,
    CommandType.RETURN: 1,
    CommandType.LABEL: 2,
    CommandType.GOTO: 2,
    CommandType.IF_GOTO: 2,
    CommandType.PUSH: 3,
    CommandType.POP: 3,
    CommandType.FUNCTION: 3,
    CommandType.CALL: 3,
}

POINTER_SEGMENT_SIZE = 2
TEMP_SEGMENT_SIZE = 8

# Segments with fixed size, others are only limited by loadable address
SEGMENT_INDEX_LIMITS: Mapping[Segment, int] = {
    Segment.POINTER: POINTER_SEGMENT_SIZE - 1,
    Segment.TEMP: TEMP_SEGMENT_SIZE - 1,
    Segment.CONSTANT: MAX_ADDRESS_VALUE,
    Segment.LOCAL: MAX_ADDRESS_VALUE,
    Segment.ARGUMENT: MAX_ADDRESS_VALUE,
    Segment.THIS: MAX_ADDRESS_VALUE,
    Segment.THAT: MAX_ADDRESS_VALUE,
}


def parse_commands(lines: Iterable[SourceLine]) -> Generator[Command]:
    """Stream parsed commands from cleaned source lines."""
    for line in lines:
        yield parse_command(line)


def parse_command(line: SourceLine) -> Command:
    """Parse single cleaned line into command, validating its arguments."""
    tokens = line.text.split()
    keyword = tokens[0]

    if (command_type := COMMAND_KEYWORDS.get(keyword)) is None:
        raise UnknownCommandError(
            keyword,
            at=line.location,
            commands_available=COMMAND_KEYWORDS.keys(),
        )

    expected_tokens = COMMAND_ARITY[command_type]
    if len(tokens) != expected_tokens:
        raise MalformedCommandError(
            line.text,
            at=line.location,
            reason=f"Command '{keyword}' expects {expected_tokens - 1} argument(s) but got {len(tokens) - 1}",
        )

    match command_type:
        case CommandType.ARITHMETIC:
            return Command(
                type=command_type,
                location=line.location,
                operation=ArithmeticOperation(keyword),
            )
        case CommandType.RETURN:
            return Command(type=command_type, location=line.location)
        case CommandType.LABEL | CommandType.GOTO | CommandType.IF_GOTO:
            return Command(
                type=command_type,
                location=line.location,
                name=_parse_symbol_argument(line, tokens[1]),
            )
        case CommandType.FUNCTION | CommandType.CALL:
            return Command(
                type=command_type,
                location=line.location,
                name=_parse_symbol_argument(line, tokens[1]),
                index=_parse_index_argument(line, tokens[2]),
            )
        case CommandType.PUSH | CommandType.POP:
            segment = _parse_segment_argument(line, tokens[1])
            index = _parse_index_argument(line, tokens[2])
            _validate_segment_access(line, command_type, segment, index)
            return Command(
                type=command_type,
                location=line.location,
                segment=segment,
                index=index,
            )


def _parse_symbol_argument(line: SourceLine, token: str) -> str:
    if not is_valid_symbol(token):
        raise MalformedCommandError(
            line.text,
            at=line.location,
            reason=f"Expected label or function name but got '{token}'",
        )
    if LABEL_SCOPE_SEPARATOR in token:
        raise MalformedCommandError(
            line.text,
            at=line.location,
            reason=f"Names must not contain '{LABEL_SCOPE_SEPARATOR}' as it is reserved for translator labels",
        )
    return token


def _parse_index_argument(line: SourceLine, token: str) -> int:
    if not is_integer_literal(token):
        raise MalformedCommandError(
            line.text,
            at=line.location,
            reason=f"Expected non-negative integer but got '{token}'",
        )
    return int(token)


def _parse_segment_argument(line: SourceLine, token: str) -> Segment:
    try:
        return Segment(token)
    except ValueError:
        raise UnknownSegmentError(token, at=line.location) from None


def _validate_segment_access(
    line: SourceLine,
    command_type: CommandType,
    segment: Segment,
    index: int,
) -> None:
    if command_type == CommandType.POP and segment == Segment.CONSTANT:
        raise PopIntoConstantSegmentError(at=line.location)

    limit = SEGMENT_INDEX_LIMITS.get(segment)
    if limit is not None and index > limit:
        raise SegmentIndexOutOfRangeError(
            segment.value,
            index=index,
            limit=limit,
            at=line.location,
        )
