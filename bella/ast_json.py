"""JSON serialization/deserialization for Bella AST.

This module converts between Bella AST dataclasses and plain Python
dict/list structures suitable for JSON encoding, so that trees built by
another front end can be handed to the interpreter. Every node becomes an
object whose ``type`` member names its class and whose other members are
the node's fields; lists of nodes become JSON arrays.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, Dict, Type

from .ast import (
    Node,
    Program,
    Block,
    VariableDeclaration,
    Assignment,
    PrintStatement,
    WhileStatement,
    FunctionDeclaration,
    BinaryExp,
    UnaryExp,
    ConditionalExpression,
    Call,
    ArrayLiteral,
    Subscript,
    Identifier,
    Numeral,
    Bool,
)

NODE_TYPES: Dict[str, Type[Node]] = {
    cls.__name__: cls
    for cls in (
        Program, Block, VariableDeclaration, Assignment, PrintStatement,
        WhileStatement, FunctionDeclaration, BinaryExp, UnaryExp,
        ConditionalExpression, Call, ArrayLiteral, Subscript, Identifier,
        Numeral, Bool,
    )
}


def ast_to_obj(node: Any) -> Any:
    # Primitives
    if node is None or isinstance(node, (int, float, str, bool)):
        return node
    if isinstance(node, (list, tuple)):
        return [ast_to_obj(item) for item in node]
    if type(node).__name__ in NODE_TYPES:
        obj: Dict[str, Any] = {"type": type(node).__name__}
        for f in fields(node):
            obj[f.name] = ast_to_obj(getattr(node, f.name))
        return obj
    raise TypeError(f"Unsupported node for serialization: {type(node).__name__}")


def ast_from_obj(obj: Any) -> Any:
    if obj is None or isinstance(obj, (int, float, str, bool)):
        return obj
    if isinstance(obj, list):
        return [ast_from_obj(item) for item in obj]
    if not isinstance(obj, dict):
        raise TypeError("Invalid AST object")
    t = obj.get("type")
    cls = NODE_TYPES.get(t)
    if cls is None:
        raise ValueError(f"Unknown AST node type: {t}")
    try:
        kwargs = {f.name: ast_from_obj(obj[f.name]) for f in fields(cls)}
    except KeyError as e:
        raise TypeError(f"{t} node is missing field {e.args[0]!r}") from None
    return cls(**kwargs)
