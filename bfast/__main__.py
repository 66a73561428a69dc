"""CLI entry point for the bfast interpreter.

Usage:
    python -m bfast [-v|-vv|-vvv] [--tape-size N] [--eof MODE] <program_file>
    python -m bfast --emit-ast <program_file>
    python -m bfast [options] --ast <ast_json_file>
    python -m bfast --tokens <program_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --emit-ast    Lex and build the given program and emit an AST JSON file
  --ast         Execute a previously emitted AST JSON file
  --tokens      Print the token stream of the given program and exit
  --tape-size   Number of tape cells (default 30000)
  --eof         Cell value stored when reading past end of input:
                0 (default), 255, or "unchanged"

Debug information is written to `debug.txt` in the current directory when
verbosity is greater than zero. Failures are reported on stderr labelled
with the stage that failed (Lex, Parse or Runtime) and exit with status 1.
"""

import argparse
import json
import sys
from pathlib import Path

from .ast import Program
from .ast_json import ast_to_obj, ast_from_obj
from .errors import BfastError
from .interpreter import DEFAULT_EOF, Interpreter
from .lexer import format_tokens, tokenize
from .parser import parse_program
from .tape import DEFAULT_TAPE_SIZE


EOF_MODES = {'0': 0, '255': 255, 'unchanged': None}


def tape_size_arg(value: str) -> int:
    size = int(value)
    if size < 1:
        raise argparse.ArgumentTypeError(f"tape size must be at least 1, got {size}")
    return size


def read_program(path_arg: str) -> bytes:
    program_file = Path(path_arg)
    if not program_file.exists():
        print(f"Error: file {program_file} not found", file=sys.stderr)
        sys.exit(1)
    return program_file.read_bytes()


def fail(err: BfastError):
    print(f"{err.stage} error: {err}", file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='bfast', description="Tape language interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--tape-size', type=tape_size_arg, default=DEFAULT_TAPE_SIZE, metavar='N',
                        help='number of tape cells (default %(default)s)')
    parser.add_argument('--eof', choices=list(EOF_MODES), default=str(DEFAULT_EOF),
                        help='value read at end of input (default %(default)s)')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-ast', metavar='PROGRAM_FILE', help='emit AST JSON for the given program')
    group.add_argument('--ast', metavar='AST_JSON_FILE', help='execute AST from a JSON file')
    group.add_argument('--tokens', metavar='PROGRAM_FILE', help='print the token stream of the given program')
    parser.add_argument('program', nargs='?', help='program file to execute')
    args = parser.parse_args(argv)

    # Token dump mode
    if args.tokens:
        source = read_program(args.tokens)
        try:
            tokens = tokenize(source)
        except BfastError as e:
            fail(e)
        if tokens:
            print(format_tokens(tokens))
        return

    # Emit AST mode
    if args.emit_ast:
        source = read_program(args.emit_ast)
        try:
            program = parse_program(source)
        except BfastError as e:
            fail(e)
        program_file = Path(args.emit_ast)
        out_path = program_file.with_name(program_file.name + '.ast.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(ast_to_obj(program), out, indent=2)
        print(str(out_path))
        return

    interpreter = Interpreter(tape_size=args.tape_size, eof=EOF_MODES[args.eof], debug_level=args.v)

    # Execute from AST JSON
    if args.ast:
        ast_path = Path(args.ast)
        if not ast_path.exists():
            print(f"Error: file {ast_path} not found", file=sys.stderr)
            sys.exit(1)
        try:
            with open(ast_path, 'r', encoding='utf-8') as f:
                program = ast_from_obj(json.load(f))
            if not isinstance(program, Program):
                raise ValueError("top-level object is not a Program")
        except (ValueError, KeyError) as e:
            print(f"Error: invalid AST file {ast_path}: {e}", file=sys.stderr)
            sys.exit(1)
        try:
            interpreter.run(program)
        except BfastError as e:
            fail(e)
        return

    # Default: execute source file
    if not args.program:
        parser.error('missing program file; or use --emit-ast/--ast/--tokens')
    source = read_program(args.program)
    try:
        program = parse_program(source)
        interpreter.run(program)
    except BfastError as e:
        fail(e)


if __name__ == '__main__':
    main()
