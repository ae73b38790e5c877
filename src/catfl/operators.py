## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable
from numbers import Number
import math

from .types import Stack, num


def coerce_number(x: Any) -> num | None:
    """Numeric view of a stack value, or None when it has none."""
    if isinstance(x, Number): return x
    if isinstance(x, str):
        for cast in (int, float):
            try:
                value = cast(x.strip())
            except ValueError:
                continue
            return value if math.isfinite(value) else None
    return None


## ARITHMETIC (top of stack is `a`, the item below is `b`)
def op_add(b: num, a: num) -> num: return a + b
def op_mul(b: num, a: num) -> num: return a * b

# STACK OPERATIONS
# Each takes the current Stack and returns a new one; preconditions are checked by the interpreter.
def op_push(stk: Stack, value: Any) -> Stack: return Stack(stk, value)
def op_pop(stk: Stack) -> Stack: return stk.tail
def op_dup(stk: Stack) -> Stack: return Stack(stk, stk.head)

def op_swap(stk: Stack) -> Stack:
    (base, b), a = stk
    return Stack(Stack(base, a), b)

def op_binary(stk: Stack, fn: Callable[[num, num], num]) -> Stack:
    (base, b), a = stk
    return Stack(base, fn(coerce_number(b), coerce_number(a)))

def op_apply(stk: Stack, transform: Callable[[Stack], Stack]) -> Stack:
    return transform(stk)
