from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple


def _line_col(source: str, position: int) -> Tuple[int, int]:
    before = source[:position]
    line = before.count('\n') + 1
    column = position - (before.rfind('\n') + 1) + 1
    return line, column


def _build_context(lines: List[str], line_no_1: int, column: int, *, context: int = 2) -> str:
    idx = max(1, line_no_1)
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(message: str) -> Optional[str]:
    msg = message.lower()
    if 'unmatched loop end' in msg:
        return 'Every "]" needs an earlier "[" at the same nesting level.'
    if 'unmatched loop start' in msg:
        return 'Add the missing "]" or remove the extra "[".'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SourceReadError(BFError):
    path: str


@dataclass
class StructuralParseError(BFError):
    position: int
    line: Optional[int] = None
    column: Optional[int] = None
    context: Optional[str] = None


@dataclass
class BFRuntimeError(BFError):
    pass


@dataclass
class TapeBoundsError(BFRuntimeError):
    pointer: int
    size: int


@dataclass
class InvalidOutputValue(BFRuntimeError):
    value: int


@dataclass
class StepLimitExceeded(BFRuntimeError):
    limit: int


def make_parse_error(*, message: str, source: str, position: int) -> StructuralParseError:
    line, column = _line_col(source, position)
    ctx = _build_context(source.split('\n'), line, column)
    hint = _hint_for(message)
    hint_block = f"\nHint: {hint}" if hint else ""
    return StructuralParseError(
        message=f"{message} (line {line}, column {column})\n{ctx}{hint_block}",
        position=position,
        line=line,
        column=column,
        context=ctx,
    )
