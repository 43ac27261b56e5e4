"""Syntax tree nodes and an evaluator for primitive recursive and mu-recursive functions."""

__version__ = "0.1.0"
__all__ = ["evaluator", "nodes"]