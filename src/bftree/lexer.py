from __future__ import annotations

from enum import Enum
from typing import Dict, List


class Token(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    LOOP_START = '['
    LOOP_END = ']'
    ZERO = ','
    OUTPUT = '.'
    IGNORE = ''


_SYMBOLS: Dict[str, Token] = {t.value: t for t in Token if t is not Token.IGNORE}


def tokenize(source: str) -> List[Token]:
    """Map every source character to a token, unknown characters to IGNORE."""
    return [_SYMBOLS.get(ch, Token.IGNORE) for ch in source]
