# Bella language package
# This package provides a parser and a tree-walking interpreter for Bella.
from .interpreter import interpret, run_program, run_file, Interpreter
from .errors import BellaError

__all__ = [
    'interpret',
    'run_program',
    'run_file',
    'Interpreter',
    'BellaError',
]
