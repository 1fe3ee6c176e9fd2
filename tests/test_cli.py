#!/usr/bin/env python3
"""
Test the command line front-end and its exit codes.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io
import contextlib
import subprocess
import tempfile

from bftree.cli import (
    EXIT_OK,
    EXIT_PARSE_ERROR,
    EXIT_READ_ERROR,
    EXIT_RUNTIME_ERROR,
    EXIT_USAGE,
    format_tape,
)
from bftree.cli import main as cli_main


def run_cli(args):
    stdout = io.StringIO()
    stderr = io.StringIO()
    with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
        code = cli_main(args)
    return code, stdout.getvalue(), stderr.getvalue()


def run_source(source, *args):
    with tempfile.NamedTemporaryFile(mode='w', suffix='.bf', delete=False) as f:
        f.write(source)
        bf_file = f.name
    try:
        return run_cli([*args, bf_file])
    finally:
        os.unlink(bf_file)


def test_usage_without_path():
    code, out, _ = run_cli([])
    assert code == EXIT_USAGE
    assert "Usage: bftree <file_path>" in out


def test_runs_program():
    code, out, err = run_source("+" * 72 + ".+.")
    assert code == EXIT_OK
    assert out == "HI"
    assert err == ""


def test_missing_file():
    code, _, err = run_cli(["/nonexistent/prog.bf"])
    assert code == EXIT_READ_ERROR
    assert err.startswith("SourceReadError:")


def test_parse_error():
    code, out, err = run_source("+.]")
    assert code == EXIT_PARSE_ERROR
    assert out == ""
    assert err.startswith("StructuralParseError: Unmatched loop end")


def test_runtime_errors():
    code, _, err = run_source("<")
    assert code == EXIT_RUNTIME_ERROR
    assert "TapeBoundsError" in err

    code, _, err = run_source("-.")
    assert code == EXIT_RUNTIME_ERROR
    assert "InvalidOutputValue" in err

    code, _, err = run_source("+[]", "--max-steps", "50")
    assert code == EXIT_RUNTIME_ERROR
    assert "StepLimitExceeded" in err


def test_output_stdout_cannot_encode():
    with tempfile.NamedTemporaryFile(mode='w', suffix='.bf', delete=False) as f:
        f.write("+" * 200 + ".")
        bf_file = f.name

    env = dict(os.environ)
    env['PYTHONIOENCODING'] = 'ascii'
    env['PYTHONPATH'] = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'src'))
    try:
        result = subprocess.run(
            [sys.executable, '-m', 'bftree', bf_file],
            text=True,
            capture_output=True,
            env=env,
        )
    finally:
        os.unlink(bf_file)

    assert result.returncode == EXIT_RUNTIME_ERROR
    assert "InvalidOutputValue" in result.stderr
    assert "Traceback" not in result.stderr


def test_dump():
    code, out, _ = run_source("comment + [ - ] .", "--dump")
    assert code == EXIT_OK
    assert out.strip() == "+[-]."


def test_dump_tape():
    code, out, _ = run_source("+[>+<-]>>+++", "--dump-tape", "3")
    assert code == EXIT_OK
    assert out.splitlines()[-1] == "0 1 3"


def test_trace_and_time():
    code, _, err = run_source("+", "--trace", "--time")
    assert code == EXIT_OK
    assert "Run took" in err
    assert "scan: 1 tokens" in err


def test_format_tape():
    assert format_tape(list(range(10))) == "0 1 2 3 4 5 6 7\n8 9"


def main():
    print("=== CLI Tests ===\n")
    tests = [v for k, v in sorted(globals().items()) if k.startswith("test_")]
    for test in tests:
        test()
        print(f"✓ {test.__name__}")


if __name__ == "__main__":
    main()
