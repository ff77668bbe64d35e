# Standard library modules installed into every Bella run.
