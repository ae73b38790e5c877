## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Constructors only build data: each wraps one Operation in a Suspended node whose
# continuation hands the resulting Stack straight back as a finished program.
#

from typing import Any, Callable

from .types import Stack, Program, Done, Suspended, Operation, Push, Pop, Dup, Swap, Add, Mul, Apply


def suspend(op: Operation) -> Program:
    return Suspended(op, Done)


def done(value: Any) -> Program:
    return Done(value)

def push(value: Any) -> Program: return suspend(Push(value))
def pop() -> Program: return suspend(Pop())
def dup() -> Program: return suspend(Dup())
def swap() -> Program: return suspend(Swap())
def add() -> Program: return suspend(Add())
def mul() -> Program: return suspend(Mul())
def apply(transform: Callable[[Stack], Stack]) -> Program: return suspend(Apply(transform))
