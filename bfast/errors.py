from typing import Optional


class BfastError(Exception):
    """Base class for every error reported by the bfast pipeline."""
    stage = 'bfast'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class LexError(BfastError):
    """Raised when the source contains a byte outside the instruction alphabet."""
    stage = 'Lex'

    def __init__(self, byte: int, line: int, offset: int):
        shown = chr(byte) if 0x20 <= byte < 0x7f else '?'
        super().__init__(f"unknown character {byte} ({shown!r}) at line {line}")
        self.byte = byte
        self.line = line
        self.offset = offset


class ParseError(BfastError):
    stage = 'Parse'

    def __init__(self, message: str, line: Optional[int] = None, offset: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.offset = offset


class UnbalancedClose(ParseError):
    """A ']' appeared with no open loop to close."""
    def __init__(self, line: Optional[int] = None, offset: Optional[int] = None):
        where = f" at line {line}" if line is not None else ""
        super().__init__(f"unbalanced ']'{where}: no open loop", line, offset)


class UnbalancedOpen(ParseError):
    """Input ended while one or more loops were still open."""
    def __init__(self, open_loops: int, line: Optional[int] = None, offset: Optional[int] = None):
        where = f" (innermost opened at line {line})" if line is not None else ""
        super().__init__(f"unbalanced '[': {open_loops} loop(s) never closed{where}", line, offset)
        self.open_loops = open_loops


class ExecutionError(BfastError):
    stage = 'Runtime'


class CursorOutOfBounds(ExecutionError):
    """The cursor was moved outside `[0, tape_size)`."""
    def __init__(self, cursor: int, tape_size: int):
        super().__init__(f"cursor moved to {cursor}, outside tape of {tape_size} cells")
        self.cursor = cursor
        self.tape_size = tape_size
