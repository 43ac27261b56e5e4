"""Syntax tree nodes for recursive-function programs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


class Node:
    """Base class of every syntax tree node."""

    __slots__ = ()


@dataclass(frozen=True)
class Number(Node):
    """An integer literal."""

    value: int


@dataclass(frozen=True)
class Primitive(Node):
    """A primitive operation: ``zero``, ``succ`` or ``iszero``."""

    name: str
    argument: Optional[Node] = None


@dataclass(frozen=True)
class FunctionDef(Node):
    """A user function definition: ``def name(params) = body``."""

    name: str
    params: Tuple[str, ...]
    body: Node


@dataclass(frozen=True)
class Call(Node):
    """A call of a built-in or user function with argument expressions."""

    name: str
    args: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class Projection(Node):
    """``proj(i)``: selects one of the current arguments."""

    index: int


@dataclass(frozen=True)
class RecProjection(Node):
    """``recproj(i)``: selects a value inside a recursion step."""

    index: int


@dataclass(frozen=True)
class Recursion(Node):
    """Primitive recursion ``rec(base, step)``."""

    base: Node
    step: Node


@dataclass(frozen=True)
class Minimization(Node):
    """Unbounded minimization over a named function."""

    function: str
    args: Tuple[Node, ...] = ()


@dataclass(frozen=True)
class BoundedMinimization(Node):
    """Minimization over a named function, searching up to ``limit``."""

    function: str
    args: Tuple[Node, ...]
    limit: Node


def add_param(params: Tuple[str, ...], name: str) -> Tuple[str, ...]:
    """Return a parameter list with ``name`` placed in front of ``params``."""
    return (name, *params)


def add_arg(args: Tuple[Node, ...], expr: Node) -> Tuple[Node, ...]:
    """Return an argument list with ``expr`` placed in front of ``args``."""
    return (expr, *args)