"""Evaluation of recursive-function syntax trees."""

from __future__ import annotations

from typing import Callable, Dict, Iterable, Optional, Sequence, Tuple

from .nodes import (
    BoundedMinimization,
    Call,
    FunctionDef,
    Minimization,
    Node,
    Number,
    Primitive,
    Projection,
    RecProjection,
    Recursion,
)

MU_SEARCH_LIMIT = 1_000_000_000


class EvaluationError(Exception):
    """Raised when a program cannot be evaluated."""


def prim_zero(args: Sequence[int]) -> int:
    """The constant zero function."""
    return 0


def prim_succ(args: Sequence[int]) -> int:
    """Successor of the first argument."""
    if len(args) < 1:
        raise EvaluationError("succ requires 1 argument")
    return args[0] + 1


def prim_iszero(args: Sequence[int]) -> int:
    """1 if the first argument is zero, otherwise 0."""
    if len(args) < 1:
        raise EvaluationError("iszero requires 1 argument")
    return 1 if args[0] == 0 else 0


def prim_proj(args: Sequence[int], index: int) -> int:
    """Projection counted from the end of the argument list (1-based)."""
    if not 1 <= index <= len(args):
        raise EvaluationError(f"invalid projection index {index}")
    return args[len(args) - index]


def prim_recproj(args: Sequence[int], index: int) -> int:
    """Projection inside a recursion step, counted from the front (1-based).

    The step arguments are ``[y - 1, h(y - 1, ...), x1, ..., xn]``.
    """
    if not 1 <= index <= len(args):
        raise EvaluationError(f"invalid recproj({index})")
    return args[index - 1]


BUILTINS: Dict[str, Callable[[Sequence[int]], int]] = {
    "zero": prim_zero,
    "succ": prim_succ,
    "iszero": prim_iszero,
}


class Evaluator:
    """Holds user functions and evaluates nodes against argument values."""

    def __init__(self) -> None:
        self._functions: Dict[str, FunctionDef] = {}

    def register(self, node: Node) -> None:
        """Register a function definition; other nodes are ignored.

        When a name is registered twice, the first definition is kept.
        """
        if isinstance(node, FunctionDef):
            self._functions.setdefault(node.name, node)

    def evaluate(self, node: Node, args: Iterable[int]) -> int:
        """Evaluate ``node`` with the given argument values."""
        values = tuple(args)
        match node:
            case Number(value=value):
                return value
            case Projection(index=index):
                return prim_proj(values, index)
            case RecProjection(index=index):
                return prim_recproj(values, index)
            case Recursion():
                return self._recurse(node, values)
            case Primitive():
                return self._primitive(node, values)
            case Minimization(function=function, args=arg_exprs):
                xs = self._evaluate_all(arg_exprs, values)
                found = self._search(function, xs, MU_SEARCH_LIMIT)
                if found is None:
                    raise EvaluationError("unbounded minimization found no value")
                return found
            case BoundedMinimization(function=function, args=arg_exprs, limit=limit_expr):
                limit = self.evaluate(limit_expr, values)
                xs = self._evaluate_all(arg_exprs, values)
                found = self._search(function, xs, limit + 1)
                if found is None:
                    raise EvaluationError(
                        f"bounded minimization found no value <= {limit}"
                    )
                return found
            case Call(name=name, args=arg_nodes):
                return self.call(name, arg_nodes, values)
            case _:
                raise EvaluationError(f"unknown syntax tree node: {node!r}")

    def call(
        self, name: str, arg_nodes: Optional[Sequence[Node]], args: Iterable[int]
    ) -> int:
        """Call a built-in or user function.

        ``arg_nodes`` are evaluated against ``args`` to form the call's
        arguments; when it is ``None``, ``args`` are passed on as they are.
        """
        values = tuple(args)
        if arg_nodes is not None:
            values = self._evaluate_all(arg_nodes, values)

        builtin = BUILTINS.get(name)
        if builtin is not None:
            return builtin(values)

        function = self._functions.get(name)
        if function is None:
            raise EvaluationError(f"function '{name}' is not defined")
        return self.evaluate(function.body, values)

    def _evaluate_all(
        self, exprs: Iterable[Node], values: Tuple[int, ...]
    ) -> Tuple[int, ...]:
        return tuple(self.evaluate(expr, values) for expr in exprs)

    def _primitive(self, node: Primitive, values: Tuple[int, ...]) -> int:
        if node.name == "zero":
            return 0
        if node.name not in ("succ", "iszero"):
            raise EvaluationError(f"unknown primitive: {node.name}")
        if node.argument is None:
            raise EvaluationError(f"{node.name} requires an argument")
        value = self.evaluate(node.argument, values)
        if node.name == "succ":
            return value + 1
        return 1 if value == 0 else 0

    def _recurse(self, node: Recursion, values: Tuple[int, ...]) -> int:
        if not values:
            raise EvaluationError("recursion requires at least one argument")
        y, *xs = values
        if y < 0:
            raise EvaluationError("recursion argument must be non-negative")
        acc = self.evaluate(node.base, xs)
        for k in range(y):
            acc = self.evaluate(node.step, (k, acc, *xs))
        return acc

    def _search(
        self, function: str, xs: Tuple[int, ...], stop: int
    ) -> Optional[int]:
        for z in range(stop):
            if self.call(function, None, (*xs, z)) == 0:
                return z
        return None