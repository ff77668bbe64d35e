from .basic_math import BasicMath
from bella.builtin_function import BuiltinFunction
from bella.errors import BellaTypeError
from bella.environment import Environment
from bella.values import is_number, type_name
from typing import List, Any
import math


def populate_numeric_environment(env: Environment) -> Environment:
    """Install the math built-ins and the constant π into ``env``."""
    basic_math = BasicMath()

    def numbers(name: str, args: List[Any]) -> List[float]:
        for arg in args:
            if not is_number(arg):
                raise BellaTypeError(f'{name} expects numbers, got {type_name(arg)}')
        return [float(arg) for arg in args]

    def std_sin(args: List[Any]) -> Any:
        (x,) = numbers('sin', args)
        return basic_math.sin(x)

    def std_cos(args: List[Any]) -> Any:
        (x,) = numbers('cos', args)
        return basic_math.cos(x)

    def std_sqrt(args: List[Any]) -> Any:
        (x,) = numbers('sqrt', args)
        return basic_math.sqrt(x)

    def std_exp(args: List[Any]) -> Any:
        (x,) = numbers('exp', args)
        return basic_math.exp(x)

    def std_ln(args: List[Any]) -> Any:
        (x,) = numbers('ln', args)
        return basic_math.ln(x)

    def std_hypot(args: List[Any]) -> Any:
        return basic_math.hypot(*numbers('hypot', args))

    env.declare('sin', BuiltinFunction('sin', 1, std_sin))
    env.declare('cos', BuiltinFunction('cos', 1, std_cos))
    env.declare('hypot', BuiltinFunction('hypot', None, std_hypot))
    env.declare('sqrt', BuiltinFunction('sqrt', 1, std_sqrt))
    env.declare('exp', BuiltinFunction('exp', 1, std_exp))
    env.declare('ln', BuiltinFunction('ln', 1, std_ln))
    env.declare('π', math.pi)
    return env
