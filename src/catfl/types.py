## catfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable, ClassVar
from fractions import Fraction
from collections import namedtuple
from dataclasses import dataclass

class stack_list(list): pass


# Stack type is a namedtuple to save memory, yet provide tail/head accessors.
class Stack(namedtuple('Stack', ['tail', 'head'])):
    __slots__ = ()
    _nil_singleton = None

    def __new__(cls, tail, head):
        if tail is None and head is None:
            # Only one singleton creation is allowed, and it's the one just below.
            if cls._nil_singleton is None:
                self = super(Stack, cls).__new__(cls, tail, head)
                cls._nil_singleton = self
                return self
            # By convention, all other code should use `nil` explicitly.
            raise ValueError("Use the canonical `nil` instance for empty stacks")
        return super(Stack, cls).__new__(cls, tail, head)

    def __repr__(self):
        if self is nil:
            return "< nil >"

        items = []
        current = self
        while current is not nil:
            items.append(repr(current.head))
            current = current.tail
        return "< " + " ".join(reversed(items)) + " >"

    def __bool__(self):
        raise TypeError("Stack truth value is ambiguous; compare with `is nil` or `is not nil`.")

    def pushed(self, *items):
        """Push items in order of tail (left) to head (right) onto new Stack and return."""
        stack = self
        for it in items:
            stack = Stack(stack, it)
        return stack


# All checks for empty stack must be done by comparing to this.
nil = Stack(None, None)


def stack_depth(stack: Stack) -> int:
    depth = 0
    while stack is not nil:
        stack, depth = stack.tail, depth + 1
    return depth


num = int | float | Fraction
Value = Any


## OPERATIONS
class Operation:
    """Description of a single stack transition, never executed by itself.  The variants below
    form a closed set that the interpreter dispatches on exhaustively.
    """
    name: ClassVar[str] = '?'
    arity: ClassVar[int] = 0      # minimum stack depth required

    def __repr__(self):
        return self.name


@dataclass(frozen=True, repr=False)
class Push(Operation):
    value: Value
    name: ClassVar[str] = 'push'

    def __repr__(self):
        return f"{self.value!r} push"

@dataclass(frozen=True, repr=False)
class Pop(Operation):
    name: ClassVar[str] = 'pop'
    arity: ClassVar[int] = 1

@dataclass(frozen=True, repr=False)
class Dup(Operation):
    name: ClassVar[str] = 'dup'
    arity: ClassVar[int] = 1

@dataclass(frozen=True, repr=False)
class Swap(Operation):
    name: ClassVar[str] = 'swap'
    arity: ClassVar[int] = 2

@dataclass(frozen=True, repr=False)
class Add(Operation):
    name: ClassVar[str] = 'add'
    arity: ClassVar[int] = 2

@dataclass(frozen=True, repr=False)
class Mul(Operation):
    name: ClassVar[str] = 'mul'
    arity: ClassVar[int] = 2

@dataclass(frozen=True, repr=False)
class Apply(Operation):
    transform: Callable[[Stack], Stack]
    name: ClassVar[str] = 'apply'

    def __repr__(self):
        return f"[{getattr(self.transform, '__name__', 'λ')}] apply"


## PROGRAMS
@dataclass(frozen=True)
class Done:
    """Finished computation carrying its result, normally the final Stack."""
    result: Any


@dataclass(frozen=True)
class Suspended:
    """Computation paused on `operation`; `resume` maps the resulting Stack to the rest of the program."""
    operation: Operation
    resume: Callable[[Stack], 'Program']


Program = Done | Suspended
