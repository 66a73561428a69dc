"""Tree-walking interpreter for bfast programs.

The interpreter executes a `Program` against a fresh `Tape`. Simple nodes
are executed by `execute`; `execute_block` walks node lists with an
explicit stack of loop frames, re-running a loop body for as long as the
cell under the cursor is nonzero, so nesting depth is not bounded by
Python's recursion limit.

Input and output go through a `ConsoleIO`. Reading past the end of input
stores the configured `eof` byte in the current cell (0 by default), or
leaves the cell untouched when `eof` is None.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import BinaryIO, List, Optional, TextIO, Union

from .ast import Add, Loop, Node, Program, Read, ShiftLeft, ShiftRight, Sub, Write, count_nodes, max_depth
from .basic_io import ConsoleIO
from .parser import parse_program
from .tape import DEFAULT_TAPE_SIZE, Tape


DEFAULT_EOF = 0


class Interpreter:
    """Executes instruction trees.

    One `Tape` is created per call to `run` and kept on `self.tape`
    afterwards so callers can inspect the final state.
    """
    def __init__(
        self,
        tape_size: int = DEFAULT_TAPE_SIZE,
        eof: Optional[int] = DEFAULT_EOF,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
        debug_level: int = 0,
        debug_file: Optional[str] = 'debug.txt',
    ):
        if eof is not None and not 0 <= eof <= 255:
            raise ValueError(f"eof value must be a byte or None, got {eof}")
        self.tape_size = tape_size
        self.eof = eof
        self.io = ConsoleIO(stdin, stdout)
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[TextIO] = None
        self.tape: Optional[Tape] = None
        self.steps = 0

    def debug(self, msg: str):
        if self.debug_level > 0:
            if self.debug_fp:
                self.debug_fp.write(msg + '\n')
                self.debug_fp.flush()
            else:
                print(msg, file=sys.stderr)

    # Public API
    def run(self, program: Program) -> Tape:
        self.tape = Tape(self.tape_size)
        self.steps = 0
        if self.debug_level > 0 and self.debug_file:
            self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
        try:
            self.debug(
                f"run: {count_nodes(program)} nodes, loop depth {max_depth(program)}, "
                f"tape of {self.tape_size} cells"
            )
            self.execute_block(program.body)
            self.debug(
                f"done: {self.steps} steps, cursor {self.tape.cursor}, "
                f"{self.tape.high_water + 1} cells touched, "
                f"{self.io.bytes_read} bytes read, {self.io.bytes_written} bytes written"
            )
            return self.tape
        finally:
            self.io.flush()
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def execute_block(self, nodes: List[Node]):
        """Run a node list, entering loop bodies through an explicit frame stack.

        Each frame is ``[body, next_index, loop]``; `loop` is None for the
        outermost list. When a loop frame reaches the end of its body the
        cell is checked again and the frame either restarts or is popped.
        """
        tape = self.tape
        frames: List[list] = [[nodes, 0, None]]
        while frames:
            frame = frames[-1]
            body, index, loop = frame
            if index == len(body):
                if loop is not None and tape.value != 0:
                    frame[1] = 0
                    continue
                frames.pop()
                if loop is not None and self.debug_level >= 2:
                    self.debug(f"exit loop @ {tape.cursor}")
                continue
            node = body[index]
            frame[1] = index + 1
            if not isinstance(node, Loop):
                self.execute(node)
                continue
            self.steps += 1
            if self.debug_level >= 3:
                self.debug(f"Loop @ {tape.cursor} = {tape.value}")
            if self.debug_level >= 2:
                self.debug(f"enter loop ({len(node.body)} nodes) @ {tape.cursor} = {tape.value}")
            if tape.value != 0:
                frames.append([node.body, 0, node])
            elif self.debug_level >= 2:
                self.debug(f"exit loop @ {tape.cursor}")

    def execute(self, node: Node):
        tape = self.tape
        if isinstance(node, Loop):
            self.execute_block([node])
            return
        self.steps += 1
        if self.debug_level >= 3:
            self.debug(f"{type(node).__name__} @ {tape.cursor} = {tape.value}")
        if isinstance(node, Add):
            tape.increment()
        elif isinstance(node, Sub):
            tape.decrement()
        elif isinstance(node, ShiftLeft):
            tape.move(-1)
        elif isinstance(node, ShiftRight):
            tape.move(1)
        elif isinstance(node, Write):
            self.io.write_byte(tape.value)
        elif isinstance(node, Read):
            byte = self.io.read_byte()
            if byte is None:
                if self.eof is not None:
                    tape.value = self.eof
            else:
                tape.value = byte
        else:
            raise NotImplementedError(f"execute: unexpected node type {type(node)}")


def run_program(source: Union[bytes, str], **options) -> Tape:
    """Convenience function to lex, build and run a program from source."""
    program = parse_program(source)
    return Interpreter(**options).run(program)


def run_file(file_path: Union[str, Path], **options) -> Tape:
    """Read a program file as bytes and run it."""
    return run_program(Path(file_path).read_bytes(), **options)
