"""Sort integers with two stacks and a fixed set of operations, printing each operation."""

__version__ = "1.0.0"