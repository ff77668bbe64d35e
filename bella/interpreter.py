"""Interpreter for the Bella language.

The interpreter walks an AST (see ``bella.ast``) directly. Statements are
run by :meth:`Interpreter.execute` and expressions reduced to values by
:meth:`Interpreter.evaluate`; the two recurse into each other for loop
bodies and function calls. All state of a run lives in an
:class:`~bella.environment.Environment` created by :meth:`Interpreter.run`
and passed down explicitly, and in the list of printed values returned
at the end of the run.
"""

from __future__ import annotations

import math
from typing import Any, Callable, IO, List, Optional

from .ast import (
    Program, Block, VariableDeclaration, Assignment, PrintStatement,
    WhileStatement, FunctionDeclaration, BinaryExp, UnaryExp,
    ConditionalExpression, Call, ArrayLiteral, Subscript, Identifier,
    Numeral, Bool, Node,
)
from .builtin_function import BuiltinFunction
from .environment import Environment
from .errors import (
    ArityMismatch, BellaTypeError, DuplicateDeclaration, IndexOutOfRange,
    NotCallable, UnboundVariable,
)
from .parser import parse_program
from .std.numeric import populate_numeric_environment
from .values import (
    ArrayVal, FunctionValue, Value, divide, format_value, is_array, is_number,
    is_truthy, power, remainder, type_name, values_equal,
)

ARITHMETIC_OPS = ('+', '-', '*', '/', '%', '**')
ORDERING_OPS = ('<', '<=', '>=', '>')


class Interpreter:
    """Core interpreter that executes Bella ASTs.

    One interpreter runs one program at a time. Every call to :meth:`run`
    starts from a fresh environment and an empty output list, so an
    interpreter can be reused for several programs in sequence.
    """
    def __init__(self, debug_level: int = 0, debug_file: str = 'debug.txt'):
        self.debug_level = debug_level
        self.debug_file = debug_file
        self.debug_fp: Optional[IO[str]] = None
        self.output: List[Value] = []
        self.env: Optional[Environment] = None
        self._emit: Callable[[Value], None] = self._collect

    def debug(self, msg: str):
        if self.debug_level > 0 and self.debug_fp:
            self.debug_fp.write(msg + '\n')
            self.debug_fp.flush()

    def _collect(self, value: Value):
        self.output.append(value)

    def create_environment(self) -> Environment:
        env = Environment()
        populate_numeric_environment(env)
        return env

    # Public API
    def run(self, program: Program, echo: Optional[Callable[[Value], None]] = None) -> List[Value]:
        """Execute ``program`` and return every value it printed, in order.

        ``echo``, when given, is called with each value as it is printed.
        Errors propagate to the caller; ``self.output`` keeps what was
        printed before the failure.
        """
        if self.env is not None:
            raise RuntimeError('interpreter is already running a program')
        output: List[Value] = []
        self.output = output

        def emit(value: Value):
            output.append(value)
            if echo is not None:
                echo(value)

        previous_emit = self._emit
        self._emit = emit
        self.env = self.create_environment()
        try:
            if self.debug_level > 0:
                self.debug_fp = open(self.debug_file, 'w', encoding='utf-8')
            self.debug(f"run: {len(program.body.statements)} top-level statements")
            self.execute(program.body, self.env)
            return output
        finally:
            self._emit = previous_emit
            self.env = None
            if self.debug_fp:
                self.debug_fp.close()
                self.debug_fp = None

    def execute(self, node: Node, env: Environment):
        if isinstance(node, Block):
            for stmt in node.statements:
                self.execute(stmt, env)
            return
        if isinstance(node, VariableDeclaration):
            name = node.id.name
            if name in env:
                raise DuplicateDeclaration(f'Variable already declared: {name}')
            value = self.evaluate(node.initializer, env)
            env.declare(name, value)
            if self.debug_level >= 2:
                self.debug(f"declare {name} = {format_value(value)}")
            return
        if isinstance(node, Assignment):
            name = node.target.name
            if name not in env:
                raise UnboundVariable(f'Unknown variable: {name}')
            value = self.evaluate(node.source, env)
            env.assign(name, value)
            if self.debug_level >= 2:
                self.debug(f"assign {name} = {format_value(value)}")
            return
        if isinstance(node, PrintStatement):
            value = self.evaluate(node.expression, env)
            if self.debug_level > 0:
                self.debug(f"print {format_value(value)}")
            self._emit(value)
            return
        if isinstance(node, WhileStatement):
            while True:
                test = self.evaluate(node.test, env)
                if self.debug_level >= 3:
                    self.debug(f"while test {format_value(test)}")
                if not is_truthy(test):
                    break
                self.execute(node.body, env)
            return
        if isinstance(node, FunctionDeclaration):
            name = node.fun.name
            func_value = FunctionValue(name, [param.name for param in node.params], node.body)
            env.declare(name, func_value)
            if self.debug_level >= 2:
                self.debug(f"define function {name}({', '.join(func_value.params)})")
            return
        raise NotImplementedError(f"execute: unexpected node type {type(node).__name__}")

    def evaluate(self, node: Node, env: Environment) -> Value:
        if isinstance(node, (Numeral, Bool)):
            return node.value
        if isinstance(node, Identifier):
            return env.lookup(node.name)
        if isinstance(node, BinaryExp):
            left = self.evaluate(node.left, env)
            right = self.evaluate(node.right, env)
            return self.apply_binary_op(node.op, left, right)
        if isinstance(node, UnaryExp):
            operand = self.evaluate(node.operand, env)
            if node.op == '-':
                if not is_number(operand):
                    raise BellaTypeError(f'unary - expects number, got {type_name(operand)}')
                return -float(operand)
            if node.op == '!':
                return not is_truthy(operand)
            raise BellaTypeError(f'unsupported unary operator {node.op}')
        if isinstance(node, ConditionalExpression):
            if is_truthy(self.evaluate(node.test, env)):
                return self.evaluate(node.consequent, env)
            return self.evaluate(node.alternate, env)
        if isinstance(node, Call):
            return self.call_function(node, env)
        if isinstance(node, ArrayLiteral):
            return ArrayVal([self.evaluate(element, env) for element in node.elements])
        if isinstance(node, Subscript):
            array = self.evaluate(node.array, env)
            index = self.evaluate(node.subscript, env)
            if not is_array(array):
                raise BellaTypeError(f'cannot subscript {type_name(array)}')
            if not is_number(index):
                raise BellaTypeError(f'array index must be number, got {type_name(index)}')
            if not math.isfinite(index):
                raise IndexOutOfRange(f'array index {format_value(index)} out of range')
            position = math.trunc(index)
            if position < 0 or position >= len(array.items):
                raise IndexOutOfRange(f'array index {position} out of range')
            return array.items[position]
        raise NotImplementedError(f"evaluate: unexpected node type {type(node).__name__}")

    def call_function(self, node: Call, env: Environment) -> Value:
        name = node.callee.name
        func = env.lookup(name)
        if isinstance(func, BuiltinFunction):
            args = [self.evaluate(arg, env) for arg in node.args]
            if func.arity is not None and len(args) != func.arity:
                raise ArityMismatch(f"{name} expects {func.arity} argument(s), got {len(args)}")
            return func.fn(args)
        if isinstance(func, FunctionValue):
            if len(node.args) != len(func.params):
                raise ArityMismatch(f"{name} expects {len(func.params)} argument(s), got {len(node.args)}")
            args = [self.evaluate(arg, env) for arg in node.args]
            if self.debug_level >= 2:
                self.debug(f"call {name}({', '.join(format_value(a) for a in args)})")
            snapshot = env.snapshot()
            try:
                for param, arg in zip(func.params, args):
                    env.bind(param, arg)
                return self.evaluate(func.body, env)
            finally:
                env.restore(snapshot)
        raise NotCallable(f'{name} is not a function')

    def apply_binary_op(self, op: str, a: Any, b: Any) -> Value:
        if op in ARITHMETIC_OPS:
            if not (is_number(a) and is_number(b)):
                raise BellaTypeError(
                    f'arithmetic on non-number: {type_name(a)} {op} {type_name(b)}')
            a, b = float(a), float(b)
            if op == '+': return a + b
            if op == '-': return a - b
            if op == '*': return a * b
            if op == '/': return divide(a, b)
            if op == '%': return remainder(a, b)
            return power(a, b)
        if op == '==':
            return values_equal(a, b)
        if op == '!=':
            return not values_equal(a, b)
        if op in ORDERING_OPS:
            if not (is_number(a) and is_number(b)):
                raise BellaTypeError(
                    f'comparison not supported for {type_name(a)} and {type_name(b)}')
            if op == '<': return a < b
            if op == '<=': return a <= b
            if op == '>=': return a >= b
            return a > b
        # Both operands are already evaluated; the result is one of them
        if op == '&&':
            return b if is_truthy(a) else a
        if op == '||':
            return a if is_truthy(a) else b
        raise BellaTypeError(f'unknown operator {op}')


def interpret(program: Program, debug_level: int = 0) -> List[Value]:
    """Run ``program`` on a fresh interpreter and return its printed values."""
    return Interpreter(debug_level=debug_level).run(program)


def run_program(source: str, debug_level: int = 0) -> List[Value]:
    """Convenience function to parse and run a Bella program from source string."""
    return interpret(parse_program(source), debug_level=debug_level)


def run_file(file_path: str, debug_level: int = 0) -> List[Value]:
    """Parse and run a Bella file, returning its printed values."""
    with open(file_path, 'r', encoding='utf-8') as f:
        source = f.read()
    return run_program(source, debug_level=debug_level)
