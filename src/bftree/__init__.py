from .api import RunOptions, RunResult, read_source, run_file, run_string
from .errors import (
    BFError,
    BFRuntimeError,
    InvalidOutputValue,
    SourceReadError,
    StepLimitExceeded,
    StructuralParseError,
    TapeBoundsError,
)
from .interpreter import Interpreter, run
from .lexer import Token, tokenize
from .parser import Loop, emit, nesting_depth, parse, parse_source
from .tape import CELL_MAX, DEFAULT_TAPE_SIZE, Tape

__all__ = [
    'Token',
    'tokenize',
    'Loop',
    'parse',
    'parse_source',
    'emit',
    'nesting_depth',
    'Tape',
    'DEFAULT_TAPE_SIZE',
    'CELL_MAX',
    'Interpreter',
    'run',
    'RunOptions',
    'RunResult',
    'read_source',
    'run_string',
    'run_file',
    'BFError',
    'BFRuntimeError',
    'SourceReadError',
    'StructuralParseError',
    'TapeBoundsError',
    'InvalidOutputValue',
    'StepLimitExceeded',
]
