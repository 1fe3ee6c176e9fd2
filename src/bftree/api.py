from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, TextIO

from .errors import BFError, SourceReadError, StructuralParseError, make_parse_error
from .interpreter import Interpreter
from .lexer import tokenize
from .parser import count_instructions, nesting_depth, parse
from .tape import DEFAULT_TAPE_SIZE, Tape


@dataclass(frozen=True)
class RunOptions:
    tape_size: int = DEFAULT_TAPE_SIZE
    max_steps: Optional[int] = None
    trace: bool = False


@dataclass(frozen=True)
class RunResult:
    tape: Tape
    steps: int
    trace: List[str]


def run_string(source: str, *, options: Optional[RunOptions] = None, out: Optional[TextIO] = None) -> RunResult:
    opts = options or RunOptions()
    interp = Interpreter(Tape(opts.tape_size), out, max_steps=opts.max_steps, tracing=opts.trace)

    tokens = tokenize(source)
    interp.add_trace(f"scan: {len(tokens)} tokens")
    try:
        program = parse(tokens)
    except StructuralParseError as e:
        interp.add_trace(f"parse failed at offset {e.position}")
        raise make_parse_error(message=e.message, source=source, position=e.position) from None
    interp.add_trace(f"parse: {count_instructions(program)} instructions, nesting depth {nesting_depth(program)}")

    try:
        interp.run(program)
    except BFError as e:
        interp.add_trace(f"run aborted after {interp.steps} steps: {type(e).__name__}")
        raise
    interp.add_trace(f"run: {interp.steps} steps, pointer at {interp.tape.pointer}")
    return RunResult(tape=interp.tape, steps=interp.steps, trace=list(interp.trace))


def read_source(path: str | Path, *, encoding: str = "utf-8") -> str:
    p = Path(path)
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(message=f"Could not read {p}: {e}", path=str(p)) from e


def run_file(path: str | Path, *, options: Optional[RunOptions] = None, out: Optional[TextIO] = None, encoding: str = "utf-8") -> RunResult:
    return run_string(read_source(path, encoding=encoding), options=options, out=out)
