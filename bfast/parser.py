"""Tree builder for bfast.

The builder consumes the token list in a single pass and produces a
`Program`. Loop nesting is resolved with an explicit stack of open scopes:

* the bottom scope is the program body;
* on ``[`` a `Loop` node is appended to the current scope and a new empty
  scope is pushed to collect the loop body;
* on ``]`` the current scope is popped and becomes the body of the `Loop`
  node most recently appended to the scope below it.

A ``]`` that would pop the program scope raises `UnbalancedClose`; any
scope other than the program scope still open at the end of input raises
`UnbalancedOpen`. Nothing built before the error is returned.
"""

from __future__ import annotations

from typing import Dict, List, Type, Union

from .ast import Add, Loop, Node, Program, Read, ShiftLeft, ShiftRight, Sub, Write
from .errors import UnbalancedClose, UnbalancedOpen
from .lexer import tokenize
from .types import Token, TokenType


SIMPLE_NODES: Dict[TokenType, Type[Node]] = {
    TokenType.ADD: Add,
    TokenType.SUB: Sub,
    TokenType.SHIFT_LEFT: ShiftLeft,
    TokenType.SHIFT_RIGHT: ShiftRight,
    TokenType.READ: Read,
    TokenType.WRITE: Write,
}


class TreeBuilder:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        # Each scope is the node list being accumulated for one nesting level.
        self.scopes: List[List[Node]] = [[]]
        # BeginLoop token for every scope above the program scope.
        self.openers: List[Token] = []

    @property
    def current(self) -> List[Node]:
        return self.scopes[-1]

    def build(self) -> Program:
        for token in self.tokens:
            node_class = SIMPLE_NODES.get(token.type)
            if node_class is not None:
                self.current.append(node_class())
            elif token.type is TokenType.BEGIN_LOOP:
                self.open_loop(token)
            else:
                self.close_loop(token)
        if len(self.scopes) != 1:
            innermost = self.openers[-1]
            raise UnbalancedOpen(len(self.scopes) - 1, innermost.line, innermost.offset)
        return Program(self.scopes.pop())

    def open_loop(self, token: Token) -> None:
        self.current.append(Loop())
        self.scopes.append([])
        self.openers.append(token)

    def close_loop(self, token: Token) -> None:
        if len(self.scopes) == 1:
            raise UnbalancedClose(token.line, token.offset)
        body = self.scopes.pop()
        self.openers.pop()
        loop = self.current[-1]
        assert isinstance(loop, Loop), f"expected Loop at top of enclosing scope, got {type(loop).__name__}"
        loop.body = body


def build(tokens: List[Token]) -> Program:
    """Build the instruction tree for a token list."""
    return TreeBuilder(tokens).build()


def parse_program(source: Union[bytes, bytearray, str]) -> Program:
    """Lex and build a program from raw source.

    Lexical errors are raised before any tree building starts; the token
    list is dropped once the tree exists.
    """
    return build(tokenize(source))
