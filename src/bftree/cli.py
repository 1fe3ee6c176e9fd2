from __future__ import annotations

import argparse
import sys
import time
from typing import List, Optional

from .api import RunOptions, read_source, run_string
from .errors import BFRuntimeError, SourceReadError, StructuralParseError
from .parser import emit, parse_source

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_READ_ERROR = 2
EXIT_PARSE_ERROR = 3
EXIT_RUNTIME_ERROR = 4


def format_tape(cells: List[int], width: int = 8) -> str:
    return "\n".join(" ".join(map(str, cells[i:i + width])) for i in range(0, len(cells), width))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bftree", description="Tree-walking Brainfuck interpreter.")
    parser.add_argument("path", nargs="?", help="source file to run")
    parser.add_argument("--dump", action="store_true", help="print the parsed program and exit")
    parser.add_argument("--dump-tape", type=int, default=0, metavar="N", help="print the first N cells after the run")
    parser.add_argument("--time", action="store_true", help="report parse and execution time on stderr")
    parser.add_argument("--trace", action="store_true", help="print the run trace on stderr")
    parser.add_argument("--max-steps", type=int, default=None, metavar="N", help="abort after N steps")
    parser.add_argument("--encoding", default="utf-8", help="source file encoding (default utf-8)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    if args.path is None:
        print("Usage: bftree <file_path>")
        return EXIT_USAGE

    try:
        code = read_source(args.path, encoding=args.encoding)
    except SourceReadError as e:
        print(f"SourceReadError: {e}", file=sys.stderr)
        return EXIT_READ_ERROR

    if args.dump:
        try:
            program = parse_source(code)
        except StructuralParseError as e:
            print(f"{type(e).__name__}: {e}", file=sys.stderr)
            return EXIT_PARSE_ERROR
        print(emit(program))
        return EXIT_OK

    options = RunOptions(max_steps=args.max_steps, trace=args.trace)
    start = time.time()
    try:
        result = run_string(code, options=options)
    except StructuralParseError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_PARSE_ERROR
    except BFRuntimeError as e:
        sys.stdout.flush()
        print(f"\n{type(e).__name__}: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    end = time.time()

    if args.time:
        print(f"Run took {(end - start) * 1000:.2f} ms ({result.steps} steps)", file=sys.stderr)
    if args.trace:
        for line in result.trace:
            print(line, file=sys.stderr)
    if args.dump_tape > 0:
        print("\n================")
        print(format_tape(result.tape.snapshot(args.dump_tape)))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
