"""JSON serialization/deserialization for bfast instruction trees.

Converts between the `ast` dataclasses and plain dict/list structures
suitable for `json.dump`. Loading an emitted object gives back an equal
tree. Both directions walk loop bodies with an explicit stack, so deeply
nested programs convert without recursion.
"""

from __future__ import annotations

from typing import Any, Dict, Type

from .ast import Add, Loop, Node, Program, Read, ShiftLeft, ShiftRight, Sub, Write


SIMPLE_TYPES: Dict[str, Type[Node]] = {
    cls.__name__: cls for cls in (Add, Sub, ShiftLeft, ShiftRight, Read, Write)
}


def node_to_obj(node: Any) -> Dict[str, Any]:
    if isinstance(node, (Program, Loop)):
        return {"type": type(node).__name__, "body": []}
    if type(node).__name__ in SIMPLE_TYPES:
        return {"type": type(node).__name__}
    raise TypeError(f"Cannot serialize object of type {type(node).__name__}")


def ast_to_obj(node: Any) -> Any:
    root = node_to_obj(node)
    stack = [(node.body, root["body"])] if "body" in root else []
    while stack:
        nodes, out = stack.pop()
        for child in nodes:
            obj = node_to_obj(child)
            if isinstance(child, Program):
                raise TypeError("Program cannot appear inside a node body")
            if isinstance(child, Loop):
                stack.append((child.body, obj["body"]))
            out.append(obj)
    return root


def node_from_obj(obj: Any) -> Any:
    """Create one node from its object form; containers get an empty body."""
    if not isinstance(obj, dict) or not isinstance(obj.get("type"), str):
        raise ValueError(f"Invalid AST object: {obj!r}")
    t = obj["type"]
    if t in ("Program", "Loop"):
        if not isinstance(obj.get("body"), list):
            raise ValueError(f"{t} body must be a list, got {type(obj.get('body')).__name__}")
        return Program(body=[]) if t == "Program" else Loop()
    if t in SIMPLE_TYPES:
        return SIMPLE_TYPES[t]()

    raise ValueError(f"Unknown AST node type: {t}")


def ast_from_obj(obj: Any) -> Any:
    root = node_from_obj(obj)
    stack = [(obj["body"], root.body)] if isinstance(root, (Program, Loop)) else []
    while stack:
        objs, body = stack.pop()
        for child_obj in objs:
            child = node_from_obj(child_obj)
            if isinstance(child, Program):
                raise ValueError("Program cannot appear inside a node body")
            if isinstance(child, Loop):
                stack.append((child_obj["body"], child.body))
            body.append(child)
    return root
