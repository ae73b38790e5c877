## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re

from .types import stack_list, Stack, nil, Operation


ANSI_ESCAPE = re.compile(r'\033\[[0-9;]*m')


def stack_to_list(stk: Stack) -> stack_list:
    """Items of the stack ordered top-first, so index 0 is the head."""
    items = stack_list()
    while stk is not nil:
        items.append(stk.head)
        stk = stk.tail
    return items

def list_to_stack(values: list, base=None) -> Stack:
    return (nil if base is None else base).pushed(*reversed(values))


def write_without_ansi(write_fn):
    """Wrap a writer so colour codes are stripped before text reaches it."""
    return lambda text: write_fn(ANSI_ESCAPE.sub('', text))


def format_item(it) -> str:
    """Single-line rendering of a stack value; nested stacks print bottom to top between `<` and `>`."""
    match it:
        case Stack():
            return '<' + ' '.join(format_item(i) for i in reversed(stack_to_list(it))) + '>'
        case stack_list():
            return '<' + ' '.join(format_item(i) for i in reversed(it)) + '>'
        case list():
            return '[' + ' '.join(format_item(i) for i in it) + ']'
        case bool():
            return 'true' if it else 'false'
        case str():
            return '"' + it.replace('"', '\\"') + '"'
        case Operation():
            return repr(it)
    return str(it)

def format_stack(stack: Stack) -> str:
    if stack is nil:
        return '∅'
    return ' '.join(format_item(i) for i in reversed(stack_to_list(stack)))


def show_stack(stack, width=72, end='\n', file=None):
    """Print the stack right-aligned to `width`, cutting from the bottom so the head stays visible."""
    text = format_stack(stack)
    if width is not None:
        if len(text) > width:
            text = '… ' + text[-width+2:]
        text = f"{text:>{width}}"
    print(text, end=end, file=file)

def show_operation_and_stack(step: int, op: Operation | None, stack, pending: int = 0, width=72):
    """Trace line: the stack (top on the right) before `op` runs, then the operation itself."""
    op_str = repr(op) if op is not None else '∅'
    if pending:
        op_str += f" \033[90m(+{pending} pending)\033[0m"
    print(f"\033[90m{step:>3} :\033[0m  ", end='')
    show_stack(stack, width=width, end='')
    print(f" \033[36m <=> \033[0m {op_str:<{width}}")
