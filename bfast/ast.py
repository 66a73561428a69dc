"""Instruction tree definitions for bfast.

A parsed program is a `Program` holding an ordered list of instruction
nodes. The six simple instructions carry no data; `Loop` owns the list of
nodes forming its body. Loops are the only nesting construct, so the
result is always a tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class Node:
    """Base class for all instruction nodes."""
    pass


@dataclass
class Add(Node):
    pass


@dataclass
class Sub(Node):
    pass


@dataclass
class ShiftLeft(Node):
    pass


@dataclass
class ShiftRight(Node):
    pass


@dataclass
class Read(Node):
    pass


@dataclass
class Write(Node):
    pass


@dataclass
class Loop(Node):
    body: List[Node] = field(default_factory=list)


@dataclass
class Program:
    body: List[Node]


def iter_nodes(nodes: List[Node]) -> Iterator[Node]:
    """Yield every node of a node list in program order, descending into loops."""
    stack = [iter(nodes)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue
        yield node
        if isinstance(node, Loop):
            stack.append(iter(node.body))


def count_nodes(program: Program) -> int:
    return sum(1 for _ in iter_nodes(program.body))


def max_depth(program: Program) -> int:
    """Deepest loop nesting level in the program (0 when there are no loops)."""
    deepest = 0
    stack = [(program.body, 0)]
    while stack:
        body, depth = stack.pop()
        deepest = max(deepest, depth)
        for node in body:
            if isinstance(node, Loop):
                stack.append((node.body, depth + 1))
    return deepest
