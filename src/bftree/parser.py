from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple, Type, Union

from .errors import StructuralParseError, make_parse_error
from .lexer import Token, tokenize

# ---------------- Instruction tree ----------------
@dataclass(frozen=True)
class MoveRight:
    pass

@dataclass(frozen=True)
class MoveLeft:
    pass

@dataclass(frozen=True)
class Increment:
    pass

@dataclass(frozen=True)
class Decrement:
    pass

@dataclass(frozen=True)
class Zero:
    pass  # the "," slot, no input is read

@dataclass(frozen=True)
class Output:
    pass

@dataclass(frozen=True)
class Loop:
    body: Tuple["Instruction", ...]

Instruction = Union[MoveRight, MoveLeft, Increment, Decrement, Zero, Output, Loop]
Program = Tuple[Instruction, ...]

_SIMPLE: Dict[Token, Type] = {
    Token.MOVE_RIGHT: MoveRight,
    Token.MOVE_LEFT: MoveLeft,
    Token.INCREMENT: Increment,
    Token.DECREMENT: Decrement,
    Token.ZERO: Zero,
    Token.OUTPUT: Output,
}

_SYMBOL: Dict[Type, str] = {
    MoveRight: '>',
    MoveLeft: '<',
    Increment: '+',
    Decrement: '-',
    Zero: ',',
    Output: '.',
}


# ---------------- Parser: tokens -> tree ----------------
def parse(tokens: Sequence[Token]) -> Program:
    """
    Resolve loop brackets into a nested instruction tree.

    Each loop body is the span strictly between a '[' and its matching ']'.
    Open loops are kept on an explicit stack, so any nesting depth parses.

    Raises:
        StructuralParseError: on an unmatched ']' or an unclosed '['.
    """
    # stack[0] is the top level; each further entry is (open '[' position, body so far)
    stack: List[Tuple[int, List[Instruction]]] = [(-1, [])]

    for i, token in enumerate(tokens):
        if token is Token.LOOP_START:
            stack.append((i, []))
        elif token is Token.LOOP_END:
            if len(stack) == 1:
                raise StructuralParseError(message="Unmatched loop end", position=i)
            _, body = stack.pop()
            stack[-1][1].append(Loop(tuple(body)))
        elif token is not Token.IGNORE:
            stack[-1][1].append(_SIMPLE[token]())

    if len(stack) != 1:
        raise StructuralParseError(message="Unmatched loop start", position=stack[1][0])

    return tuple(stack[0][1])


def parse_source(source: str) -> Program:
    try:
        return parse(tokenize(source))
    except StructuralParseError as e:
        raise make_parse_error(message=e.message, source=source, position=e.position) from None


# ---------------- Tree utilities ----------------
def nesting_depth(program: Sequence[Instruction]) -> int:
    depth = 0
    pending = [(program, 0)]
    while pending:
        nodes, level = pending.pop()
        depth = max(depth, level)
        for node in nodes:
            if isinstance(node, Loop):
                pending.append((node.body, level + 1))
    return depth


def count_instructions(program: Sequence[Instruction]) -> int:
    """Static node count; a loop counts once plus its body."""
    c = 0
    pending = [program]
    while pending:
        nodes = pending.pop()
        c += len(nodes)
        pending.extend(node.body for node in nodes if isinstance(node, Loop))
    return c


def emit(program: Sequence[Instruction]) -> str:
    out: List[str] = []
    stack = [iter(program)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            if stack:
                out.append("]")
        elif isinstance(node, Loop):
            out.append("[")
            stack.append(iter(node.body))
        else:
            out.append(_SYMBOL[type(node)])
    return "".join(out)
