## catfl — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any, Callable

from .types import Operation, Stack, Program, Done, Suspended
from .errors import CatError
from .library import Library
from .builtins import load_builtins_library
from .formatting import list_to_stack as _list_to_stack, stack_to_list as _stack_to_list
from .interpreter import can_execute, interpret_step, make_interpreter
from .combinators import sequence


class Runtime:
    """Minimal runtime facade focused on embedding: a word table plus evaluation helpers."""

    def __init__(self, library: Library | None = None):
        self.library = library or load_builtins_library()

    def _resolve(self, program_or_name: Program | str) -> Program:
        if isinstance(program_or_name, str):
            return self.library.get_word(program_or_name)
        return program_or_name

    # Assembly ────────────────────────────────────────────────────────────────────────────────
    def word(self, name: str) -> Program:
        return self.library.get_word(name)

    def compose(self, *items: Program | str) -> Program:
        """Sequence programs and named words into one program."""
        return sequence(*(self._resolve(it) for it in items))

    def is_program(self, x: Any) -> bool:
        return isinstance(x, (Done, Suspended))

    def is_operation(self, x: Any) -> bool:
        return isinstance(x, Operation)

    # Execution ───────────────────────────────────────────────────────────────────────────────
    def run(self, program: Program | str, stack: Stack | list | None = None,
            verbosity: int = 0, stats: dict | None = None) -> Any:
        return self.interpreter(stack, verbosity=verbosity, stats=stats)(self._resolve(program))

    def attempt(self, program: Program | str, stack: Stack | list | None = None) -> tuple[bool, Any]:
        """Evaluate and capture the outcome: `(True, result)` on success, else `(False, error)`."""
        try:
            return True, self.run(program, stack)
        except CatError as exc:
            return False, exc

    def interpreter(self, stack: Stack | list | None = None, verbosity: int = 0,
                    stats: dict | None = None) -> Callable[[Program], Any]:
        return make_interpreter(stack, verbosity=verbosity, stats=stats)

    def can_step(self, op: Operation, stack: Stack) -> tuple[bool, str]:
        return can_execute(op, stack)

    def do_step(self, op: Operation, stack: Stack) -> Stack:
        return interpret_step(op, stack)

    # Registration ────────────────────────────────────────────────────────────────────────────
    def register_word(self, name: str, program: Program) -> None:
        self.library.add_word(name, program)

    # Introspection ───────────────────────────────────────────────────────────────────────────
    def list_words(self) -> list[str]:
        return self.library.list_words()

    def to_stack(self, values: list) -> Stack:
        return _list_to_stack(values)

    def from_stack(self, stack: Stack) -> list:
        return _stack_to_list(stack)
