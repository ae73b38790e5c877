## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable

from .types import Program, Done, Suspended, nil
from .errors import CatTypeError


class Chain:
    """Continuation that runs `first` and then binds its program through `then`.

    Composing is constant time regardless of how long the chain grows, and calling one walks the
    left-nested spine with a list instead of recursing, so left-folded `bind` chains of any length
    stay within a bounded Python call stack.  The interpreter unwinds chains itself the same way.
    """
    __slots__ = ('first', 'then')

    def __init__(self, first: Callable[[Any], Program], then: Callable[[Any], Program]):
        self.first = first
        self.then = then

    def __call__(self, value: Any) -> Program:
        pending = []
        arrow = unwind(self, pending)
        program = arrow(value)
        while pending:
            program = bind(program, pending.pop())
        return program

    def __repr__(self):
        return f"Chain({self.first!r}, {self.then!r})"


def unwind(arrow, pending: list):
    """Descend the left spine of nested chains, deferring each `then` onto `pending` (next-to-run last)."""
    while isinstance(arrow, Chain):
        pending.append(arrow.then)
        arrow = arrow.first
    return arrow


def map(program: Program, f: Callable[[Any], Any]) -> Program:
    """Transform the eventual result by `f`, keeping the suspension point untouched."""
    match program:
        case Done(result):
            return Done(f(result))
        case Suspended(op, resume):
            return Suspended(op, Chain(resume, lambda x: Done(f(x))))
    raise CatTypeError(f"Cannot map over {type(program).__name__}, expected a Done or Suspended program.")


def bind(program: Program, f: Callable[[Any], Program]) -> Program:
    """Sequence `program` before the program produced by `f` from its result."""
    match program:
        case Done(result):
            return f(result)
        case Suspended(op, resume):
            return Suspended(op, Chain(resume, f))
    raise CatTypeError(f"Cannot bind {type(program).__name__}, expected a Done or Suspended program.")


def sequence(*programs: Program) -> Program:
    """Run programs one after another.  Each one reads and writes the live stack held by the
    interpreter, so the value produced by its predecessor is ignored.
    """
    out = Done(nil)
    for p in programs:
        out = bind(out, lambda _, p=p: p)
    return out
