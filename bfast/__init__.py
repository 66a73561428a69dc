# bfast package
# Lexer, tree builder and tree-walking interpreter for the eight-instruction tape language.
from .errors import (
    BfastError, LexError, ParseError, UnbalancedClose, UnbalancedOpen,
    ExecutionError, CursorOutOfBounds,
)
from .lexer import tokenize
from .parser import build, parse_program
from .interpreter import Interpreter, run_program, run_file

__all__ = [
    'tokenize',
    'build',
    'parse_program',
    'Interpreter',
    'run_program',
    'run_file',
    'BfastError',
    'LexError',
    'ParseError',
    'UnbalancedClose',
    'UnbalancedOpen',
    'ExecutionError',
    'CursorOutOfBounds',
]
