"""Abstract Syntax Tree (AST) definitions for the Bella language.

The AST classes defined in this module represent the syntactic structure
of Bella programs. Trees are built by a front end (see ``bella.parser``
and ``bella.ast_json``) and consumed by the interpreter, which never
modifies them: every node is a frozen dataclass and all mutable state
lives in the interpreter's environment.

There are two families of nodes. Statements are executed for their
effect; expressions are evaluated to a value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Statement(Node):
    pass


@dataclass(frozen=True)
class Expression(Node):
    pass


# Expressions

@dataclass(frozen=True)
class Identifier(Expression):
    name: str


@dataclass(frozen=True)
class Numeral(Expression):
    value: float


@dataclass(frozen=True)
class Bool(Expression):
    value: bool


@dataclass(frozen=True)
class BinaryExp(Expression):
    op: str
    left: Expression
    right: Expression


@dataclass(frozen=True)
class UnaryExp(Expression):
    op: str
    operand: Expression


@dataclass(frozen=True)
class ConditionalExpression(Expression):
    test: Expression
    consequent: Expression
    alternate: Expression


@dataclass(frozen=True)
class Call(Expression):
    callee: Identifier
    args: List[Expression]


@dataclass(frozen=True)
class ArrayLiteral(Expression):
    elements: List[Expression]


@dataclass(frozen=True)
class Subscript(Expression):
    array: Expression
    subscript: Expression


# Statements

@dataclass(frozen=True)
class Block(Statement):
    statements: List[Statement]


@dataclass(frozen=True)
class VariableDeclaration(Statement):
    id: Identifier
    initializer: Expression


@dataclass(frozen=True)
class Assignment(Statement):
    target: Identifier
    source: Expression


@dataclass(frozen=True)
class PrintStatement(Statement):
    expression: Expression


@dataclass(frozen=True)
class WhileStatement(Statement):
    test: Expression
    body: Block


@dataclass(frozen=True)
class FunctionDeclaration(Statement):
    fun: Identifier
    params: List[Identifier]
    body: Expression


@dataclass(frozen=True)
class Program(Node):
    body: Block
