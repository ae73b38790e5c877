## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Program
from .operations import push, dup, add, mul
from .combinators import sequence
from .library import Library, define


squared = sequence(dup(), mul())
sum3 = sequence(add(), add())
double = sequence(dup(), add())


def factorial(n: int) -> Program:
    """Program computing n!, built from the innermost `1 push` outwards as `n push (n-1)! mul`."""
    program = push(1)
    for k in range(2, n + 1):
        program = sequence(push(k), program, mul())
    return program


# Sample programs, as (title, program) pairs all evaluated on an empty stack.
SAMPLES: list[tuple[str, Program]] = [
    ("(2 + 3) * 4", sequence(push(2), push(3), add(), push(4), mul())),
    ("5 squared + 3 + 2", sequence(push(5), squared, push(3), push(2), sum3)),
    ("factorial of 5", factorial(5)),
]


def load_builtins_library():
    words = {
        **define('squared', squared),
        **define('sum3', sum3),
        **define('double', double),
    }
    aliases = {'sq': 'squared', '2x': 'double'}

    lib = Library(aliases=aliases)
    for name, program in words.items():
        lib.add_word(name, program)
    return lib
