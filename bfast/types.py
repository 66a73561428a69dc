"""Token definitions for bfast.

The language has exactly eight significant characters. Each one maps to a
single `TokenType`; everything else is either skippable whitespace or a
lexical error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class TokenType(Enum):
    ADD = 'Add'
    SUB = 'Sub'
    SHIFT_LEFT = 'ShiftLeft'
    SHIFT_RIGHT = 'ShiftRight'
    READ = 'Read'
    WRITE = 'Write'
    BEGIN_LOOP = 'BeginLoop'
    END_LOOP = 'EndLoop'

    def __repr__(self) -> str:
        return self.value


# byte value -> token tag
INSTRUCTION_CHARS: Dict[int, TokenType] = {
    ord('+'): TokenType.ADD,
    ord('-'): TokenType.SUB,
    ord('<'): TokenType.SHIFT_LEFT,
    ord('>'): TokenType.SHIFT_RIGHT,
    ord(','): TokenType.READ,
    ord('.'): TokenType.WRITE,
    ord('['): TokenType.BEGIN_LOOP,
    ord(']'): TokenType.END_LOOP,
}

WHITESPACE_CHARS = frozenset(b' \t\r')
NEWLINE = ord('\n')


@dataclass(frozen=True)
class Token:
    """A single instruction character with its source position.

    `offset` is the 0-based byte offset into the source buffer and `line`
    is the 1-based line number.
    """
    type: TokenType
    offset: int
    line: int
