"""Sort integers with two stacks and report the stack instructions used."""

__version__ = "1.0.0"