"""Runtime values for Bella.

This module defines the closed set of values a Bella program computes
with, together with the rules over them: kind discrimination, deep
equality, truthiness, IEEE-754 arithmetic that never raises, and the
display format used when printed values are shown to a user.

A value is one of:

* Number   -- a Python ``float`` (an ``int`` is accepted, a ``bool`` never is)
* Boolean  -- a Python ``bool``
* Array    -- an :class:`ArrayVal`
* built-in -- a :class:`~bella.builtin_function.BuiltinFunction`
* function -- a :class:`FunctionValue` created by a function declaration
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Union
import math

from .ast import Expression
from .builtin_function import BuiltinFunction


@dataclass(eq=False)
class ArrayVal:
    """Bella array: ordered, mutable and heterogeneous."""
    items: List[Any] = field(default_factory=list)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ArrayVal):
            return NotImplemented
        return values_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"ArrayVal({self.items!r})"


@dataclass(eq=False)
class FunctionValue:
    """A user-defined function: parameter names and a body expression.

    The body is held by reference. No environment is captured; a call
    sees the bindings of its caller.
    """
    name: str
    params: List[str]
    body: Expression

    def __repr__(self) -> str:
        return f"<function {self.name}>"


Value = Union[float, bool, ArrayVal, BuiltinFunction, FunctionValue]


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, ArrayVal)


def is_builtin(value: Any) -> bool:
    return isinstance(value, BuiltinFunction)


def is_user_function(value: Any) -> bool:
    return isinstance(value, FunctionValue)


def type_name(value: Any) -> str:
    if is_boolean(value):
        return 'boolean'
    if is_number(value):
        return 'number'
    if is_array(value):
        return 'array'
    if is_builtin(value):
        return 'builtin function'
    if is_user_function(value):
        return 'function'
    return type(value).__name__


def values_equal(a: Any, b: Any) -> bool:
    """Deep equality. Values of different kinds are never equal."""
    if is_number(a) and is_number(b):
        return a == b
    if is_boolean(a) and is_boolean(b):
        return a is b
    if is_array(a) and is_array(b):
        if len(a.items) != len(b.items):
            return False
        return all(values_equal(x, y) for x, y in zip(a.items, b.items))
    # Callables are only equal to themselves
    return a is b


def is_truthy(value: Any) -> bool:
    """false, zero and NaN are falsy; every other value is truthy."""
    if is_boolean(value):
        return value
    if is_number(value):
        return not (value == 0 or math.isnan(value))
    return True


###############################################################################
# IEEE-754 arithmetic
###############################################################################


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x == math.floor(x) and math.fmod(x, 2.0) != 0.0


def divide(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def remainder(a: float, b: float) -> float:
    """Truncated remainder; the result takes the sign of the dividend."""
    try:
        return math.fmod(a, b)
    except ValueError:
        # fmod(x, 0) and fmod(inf, y)
        return math.nan


def power(a: float, b: float) -> float:
    if math.isnan(b):
        return math.nan
    if b == 0.0:
        return 1.0
    if abs(a) == 1.0 and math.isinf(b):
        return math.nan
    try:
        return math.pow(a, b)
    except OverflowError:
        if a < 0 and _is_odd_integer(b):
            return -math.inf
        return math.inf
    except ValueError:
        if a == 0.0:
            # zero raised to a negative power
            if _is_odd_integer(b):
                return math.copysign(math.inf, a)
            return math.inf
        # negative base, fractional exponent
        return math.nan


###############################################################################
# Display
###############################################################################


def format_number(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    if value == math.floor(value) and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))


def format_value(value: Any) -> str:
    """Render a value the way a Bella user expects to see it printed."""
    if is_boolean(value):
        return 'true' if value else 'false'
    if is_number(value):
        return format_number(value)
    if is_array(value):
        return '[' + ', '.join(format_value(item) for item in value.items) + ']'
    return repr(value)
