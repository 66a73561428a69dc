"""Lexer for bfast source.

`tokenize` scans the raw source once, left to right, and turns each of the
eight instruction characters into a `Token`. Spaces, tabs and carriage
returns are skipped; a newline is skipped too but advances the line
counter. Any other byte aborts the scan with a `LexError`.

The token list is sized up front: the number of instruction characters is
counted first and the list is allocated at exactly that length, then the
scanning pass fills it in order.
"""

from __future__ import annotations

from typing import List, Optional, Union

from .errors import LexError
from .types import INSTRUCTION_CHARS, NEWLINE, WHITESPACE_CHARS, Token


def count_instructions(source: bytes) -> int:
    return sum(source.count(c) for c in INSTRUCTION_CHARS)


def tokenize(source: Union[bytes, bytearray, str]) -> List[Token]:
    """Convert a source buffer into a list of tokens.

    `str` input is encoded as UTF-8 first, so offsets always refer to
    bytes. On error no tokens are returned.
    """
    if isinstance(source, str):
        source = source.encode('utf-8')
    source = bytes(source)

    tokens: List[Optional[Token]] = [None] * count_instructions(source)
    filled = 0
    line = 1
    for offset, byte in enumerate(source):
        token_type = INSTRUCTION_CHARS.get(byte)
        if token_type is not None:
            tokens[filled] = Token(token_type, offset, line)
            filled += 1
        elif byte == NEWLINE:
            line += 1
        elif byte not in WHITESPACE_CHARS:
            raise LexError(byte, line, offset)
    assert filled == len(tokens)
    return tokens


def format_tokens(tokens: List[Token]) -> str:
    """Render a token list one per line as `TAG offset line`."""
    return '\n'.join(f"{t.type.value} {t.offset} {t.line}" for t in tokens)
