## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable

from .types import Operation, Stack, nil, Program, Done, Suspended, Push, Pop, Dup, Swap, Add, Mul, Apply
from .errors import CatError, CatUnderflowError, CatTypeError, CatApplyError, CatValueError
from .combinators import unwind
from .formatting import show_operation_and_stack, list_to_stack
from . import operators


def _available(stack: Stack, limit: int) -> int:
    """Stack depth, counting no further than `limit` items."""
    depth = 0
    while depth < limit and stack is not nil:
        stack, depth = stack.tail, depth + 1
    return depth


def can_execute(op: Operation, stack: Stack) -> tuple[bool, str]:
    """Check if operation can execute on stack, without running it."""
    if (depth := _available(stack, op.arity)) < op.arity:
        return False, f"`{op.name}` needs at least {op.arity} item(s) on the stack, but {depth} available."

    if isinstance(op, (Add, Mul)):
        (_, b), a = stack
        for i, actual in enumerate((a, b)):
            if operators.coerce_number(actual) is None:
                return False, f"`{op.name}` expects number at position {i+1} from top, got {type(actual).__name__}."

    if isinstance(op, Apply) and not callable(op.transform):
        return False, f"`{op.name}` requires a callable transform, got {type(op.transform).__name__}."

    return True, ""


def _check(op: Operation, stack: Stack) -> None:
    ok, message = can_execute(op, stack)
    if ok: return

    if (depth := _available(stack, op.arity)) < op.arity:
        raise CatUnderflowError(message, cat_op=op, cat_token=op.name, cat_stack=stack,
                                required=op.arity, available=depth)
    if isinstance(op, Apply):
        raise CatApplyError(message, cat_op=op, cat_token=op.name, cat_stack=stack)
    raise CatTypeError(message, cat_op=op, cat_token=op.name, cat_stack=stack)


def _arithmetic(op: Operation, stack: Stack, fn) -> Stack:
    try:
        return operators.op_binary(stack, fn)
    except TypeError as exc:
        # Numbers of types that do not mix, e.g. Decimal with Fraction or float.
        (_, b), a = stack
        raise CatTypeError(f"`{op.name}` cannot combine {type(a).__name__} with {type(b).__name__}.",
                           cat_op=op, cat_token=op.name, cat_stack=stack) from exc


def interpret_step(op: Operation, stack: Stack) -> Stack:
    if not isinstance(op, Operation):
        raise CatTypeError(f"Cannot execute {type(op).__name__}, expected an Operation.", cat_op=op, cat_stack=stack)
    _check(op, stack)

    match op:
        case Push(value):
            return operators.op_push(stack, value)
        case Pop():
            return operators.op_pop(stack)
        case Dup():
            return operators.op_dup(stack)
        case Swap():
            return operators.op_swap(stack)
        case Add():
            return _arithmetic(op, stack, operators.op_add)
        case Mul():
            return _arithmetic(op, stack, operators.op_mul)
        case Apply(transform):
            result = operators.op_apply(stack, transform)
            if not isinstance(result, Stack):
                raise CatApplyError(f"`{op.name}` transform must return a Stack, got {type(result).__name__}.",
                                    cat_op=op, cat_token=op.name, cat_stack=stack)
            return result
        case _:
            raise CatTypeError(f"Unknown operation `{op!r}` of type {type(op).__name__}.",
                               cat_op=op, cat_stack=stack)


def interpret(program: Program, stack=None, verbosity=0, stats=None):
    stack = nil if stack is None else stack
    pending = []    # continuations waiting for a value, next one to run is last

    def is_notable(op):
        return isinstance(op, Apply)

    step = 0
    try:
        while True:
            match program:
                case Suspended(op, resume):
                    if verbosity == 2 or (verbosity == 1 and (is_notable(op) or step == 0)):
                        show_operation_and_stack(step, op, stack, len(pending))

                    step += 1
                    try:
                        stack = interpret_step(op, stack)
                    except Exception as exc:
                        if not isinstance(exc, CatError):
                            exc.cat_op = op
                            exc.cat_token = op.name
                            exc.cat_stack = stack
                        raise
                    value, arrow = stack, resume

                case Done(result):
                    if not pending: break
                    value, arrow = result, pending.pop()

                case _:
                    raise CatTypeError(f"Cannot interpret {type(program).__name__}, expected a Done or Suspended program.",
                                       cat_stack=stack)

            program = unwind(arrow, pending)(value)
    finally:
        # Steps attempted so far are counted even when the program fails.
        if stats is not None:
            stats['steps'] = stats.get('steps', 0) + step

    if verbosity > 0:
        show_operation_and_stack(step, None, stack)

    return result


def make_interpreter(initial_stack=None, verbosity=0, stats=None) -> Callable[[Program], Any]:
    """Return an evaluation entry point that runs each program from `initial_stack`.

    The initial stack is either a Stack or a Python list ordered top-first.  Stacks are immutable,
    so separate calls never observe each other's intermediate state.
    """
    if initial_stack is None:
        initial = nil
    elif isinstance(initial_stack, Stack):
        initial = initial_stack
    elif isinstance(initial_stack, (list, tuple)):
        initial = list_to_stack(list(initial_stack))
    else:
        raise CatValueError(f"Initial stack must be a Stack or a list, got {type(initial_stack).__name__}.")

    def evaluate(program: Program) -> Any:
        return interpret(program, stack=initial, verbosity=verbosity, stats=stats)

    return evaluate
