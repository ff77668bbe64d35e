"""Parser for the Bella language.

Source text is fed into a Lark LALR parser configured with the Bella
grammar below, and the resulting parse tree is transformed into the AST
defined in ``bella.ast`` by :class:`ASTTransformer`.

Bella statements are terminated by semicolons, so no preprocessing of
newlines is needed. ``//`` starts a comment that runs to the end of the
line. Identifiers may use any Unicode letter, which is how the built-in
constant ``π`` is spelled.

The `parse_program` function is the public entry point and returns a
`Program` AST node representing the entire source file.
"""

from __future__ import annotations

from typing import List

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput

from .ast import (
    Program, Block, VariableDeclaration, Assignment, PrintStatement,
    WhileStatement, FunctionDeclaration, BinaryExp, UnaryExp,
    ConditionalExpression, Call, ArrayLiteral, Subscript, Identifier,
    Numeral, Bool,
)
from .errors import ParseError


BELLA_GRAMMAR = r"""
    start: statement*

    // Statements
    ?statement: "let" ID "=" exp ";"                       -> vardec
              | "function" ID "(" params ")" "=" exp ";"   -> fundec
              | ID "=" exp ";"                             -> assign
              | "print" exp ";"                            -> print_stmt
              | "while" exp block                          -> while_stmt

    params: (ID ("," ID)*)?
    block: "{" statement* "}"

    // Expressions with precedence, loosest first
    ?exp: disj "?" disj ":" exp                           -> conditional
        | disj
    ?disj: disj OR conj                                   -> binary
         | conj
    ?conj: conj AND rel                                   -> binary
         | rel
    ?rel: sum REL_OP sum                                  -> binary
        | sum
    ?sum: sum ADD_OP term                                 -> binary
        | term
    ?term: term MUL_OP unary                              -> binary
         | unary
    ?unary: UNARY_OP unary                                -> unary
          | power
    ?power: postfix POW unary                             -> binary
          | postfix
    ?postfix: postfix "[" exp "]"                         -> subscript
            | primary
    ?primary: NUMBER                                      -> numeral
            | "true"                                      -> true
            | "false"                                     -> false
            | ID "(" args ")"                             -> call
            | ID                                          -> identifier
            | "[" args "]"                                -> array
            | "(" exp ")"

    args: (exp ("," exp)*)?

    // Tokens
    OR: "||"
    AND: "&&"
    REL_OP: "<=" | "<" | "==" | "!=" | ">=" | ">"
    ADD_OP: "+" | "-"
    MUL_OP: "*" | "/" | "%"
    POW: "**"
    UNARY_OP: "-" | "!"
    NUMBER: /\d+(?:\.\d+)?(?:[eE][+-]?\d+)?/
    ID: /[^\W\d]\w*/

    %import common.WS
    %ignore WS

    // Comments
    LINE_COMMENT: /\/\/[^\n]*/
    %ignore LINE_COMMENT
"""


BELLA_PARSER = Lark(
    BELLA_GRAMMAR,
    parser='lalr',
    propagate_positions=True,
    maybe_placeholders=False,
    lexer='contextual',
)


@v_args(inline=True)
class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def start(self, *statements):
        return Program(Block(list(statements)))

    def block(self, *statements):
        return Block(list(statements))

    def vardec(self, name, initializer):
        return VariableDeclaration(Identifier(str(name)), initializer)

    def fundec(self, name, params, body):
        return FunctionDeclaration(Identifier(str(name)), params, body)

    def params(self, *names):
        return [Identifier(str(name)) for name in names]

    def assign(self, name, source):
        return Assignment(Identifier(str(name)), source)

    def print_stmt(self, expression):
        return PrintStatement(expression)

    def while_stmt(self, test, body):
        return WhileStatement(test, body)

    # Expressions
    def conditional(self, test, consequent, alternate):
        return ConditionalExpression(test, consequent, alternate)

    def binary(self, left, op, right):
        return BinaryExp(str(op), left, right)

    def unary(self, op, operand):
        return UnaryExp(str(op), operand)

    def subscript(self, array, index):
        return Subscript(array, index)

    def numeral(self, token):
        return Numeral(float(token))

    def true(self):
        return Bool(True)

    def false(self):
        return Bool(False)

    def call(self, name, args):
        return Call(Identifier(str(name)), args)

    def identifier(self, name):
        return Identifier(str(name))

    def array(self, elements):
        return ArrayLiteral(elements)

    def args(self, *expressions) -> List:
        return list(expressions)


def parse_program(source: str) -> Program:
    """Parse Bella source code into an AST Program.

    Syntax errors are reported as :class:`~bella.errors.ParseError` with the
    line and column of the offending input.
    """
    try:
        tree = BELLA_PARSER.parse(source)
    except UnexpectedEOF as e:
        raise ParseError(f"unexpected end of input, expected one of {sorted(e.expected)}") from None
    except UnexpectedCharacters as e:
        raise ParseError(f"unexpected character {e.char!r}", e.line, e.column) from None
    except UnexpectedInput as e:
        token = getattr(e, 'token', None)
        raise ParseError(f"unexpected token {str(token)!r}", e.line, e.column) from None
    return ASTTransformer().transform(tree)
