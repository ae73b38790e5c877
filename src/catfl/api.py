## catfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import Operation, Stack, nil, Program, Done, Suspended, stack_depth
from .errors import *
from .operations import push, pop, dup, swap, add, mul, apply, done
from .combinators import map, bind, sequence
from .interpreter import interpret, make_interpreter
from .library import Library, define
from .runtime import Runtime

_RUNTIME = Runtime()

def __getattr__(name):
    return getattr(_RUNTIME, name)
