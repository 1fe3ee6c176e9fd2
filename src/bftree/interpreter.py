from __future__ import annotations

import sys
from typing import List, Optional, Sequence, TextIO

from .errors import InvalidOutputValue, StepLimitExceeded
from .parser import (
    Decrement,
    Increment,
    Instruction,
    Loop,
    MoveLeft,
    MoveRight,
    Output,
    Zero,
)
from .tape import Tape

_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def to_char(value: int, encoding: Optional[str] = None) -> str:
    """
    Convert a cell value to the character '.' writes.

    With an `encoding`, the character must also be representable in it.
    """
    if value > _MAX_CODE_POINT or value in _SURROGATES:
        raise InvalidOutputValue(
            message=f"Cell value {value} is not a valid character code",
            value=value,
        )
    ch = chr(value)
    if encoding:
        try:
            ch.encode(encoding)
        except UnicodeEncodeError:
            raise InvalidOutputValue(
                message=f"Cell value {value} cannot be written in the {encoding} output encoding",
                value=value,
            ) from None
    return ch


class Interpreter:
    """
    Tree-walking evaluator.

    Runs an instruction tree against a Tape, writing '.' output to `out`
    as it happens. Loop bodies are walked with an explicit frame stack, so
    nesting depth is not limited by the Python recursion limit.

    `max_steps` is an optional watchdog: every dispatched instruction and
    every loop-condition check counts as a step. None means unbounded.
    """

    def __init__(self, tape: Tape, out: Optional[TextIO] = None, *, max_steps: Optional[int] = None, tracing: bool = False):
        self.tape = tape
        self.out = out
        self.max_steps = max_steps
        self.steps = 0
        self.trace: List[str] = []
        self.is_tracing = tracing

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)

    def _tick(self) -> None:
        self.steps += 1
        if self.max_steps is not None and self.steps > self.max_steps:
            raise StepLimitExceeded(
                message=f"Step limit of {self.max_steps} exceeded",
                limit=self.max_steps,
            )

    def run(self, program: Sequence[Instruction]) -> None:
        # Resolved per call so redirect_stdout applies.
        out = self.out if self.out is not None else sys.stdout
        self._run(program, out, getattr(out, "encoding", None))

    def _run(self, program: Sequence[Instruction], out: TextIO, encoding: Optional[str]) -> None:
        tape = self.tape
        # Each frame is [instructions, next index]; frames above the first are loop bodies.
        stack: List[list] = [[program, 0]]
        while stack:
            frame = stack[-1]
            body, i = frame
            if i >= len(body):
                stack.pop()
                if stack:
                    # end of a loop body: re-check the loop condition
                    self._tick()
                    if tape.get() != 0:
                        stack.append([body, 0])
                continue
            frame[1] = i + 1
            node = body[i]
            self._tick()
            if isinstance(node, Increment):
                tape.inc_val()
            elif isinstance(node, Decrement):
                tape.dec_val()
            elif isinstance(node, MoveRight):
                tape.inc_ptr()
            elif isinstance(node, MoveLeft):
                tape.dec_ptr()
            elif isinstance(node, Zero):
                tape.set(0)
            elif isinstance(node, Output):
                out.write(to_char(tape.get(), encoding))
                out.flush()
            elif isinstance(node, Loop):
                if tape.get() != 0:
                    stack.append([node.body, 0])
            else:
                raise TypeError(f"Unknown instruction: {node!r}")


def run(program: Sequence[Instruction], tape: Tape, out: Optional[TextIO] = None, *, max_steps: Optional[int] = None) -> int:
    """Execute `program` against `tape`; returns the number of steps taken."""
    interp = Interpreter(tape, out, max_steps=max_steps)
    interp.run(program)
    return interp.steps
