## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from dataclasses import dataclass, field

from .types import Program, Done, Suspended
from .errors import CatNameError, CatTypeError


def define(name: str, program: Program) -> dict[str, Program]:
    """Single-entry word table, meant to be merged with `{**define(...), **define(...)}`."""
    return {name: program}


@dataclass
class Library:
    words: dict[str, Program] = field(default_factory=dict)
    aliases: dict[str, str] = field(default_factory=dict)

    # Registration helpers
    def add_word(self, name: str, program: Program) -> None:
        if not isinstance(program, (Done, Suspended)):
            raise CatTypeError(f"Word `{name}` must be a Done or Suspended program, got {type(program).__name__}.",
                               cat_token=name)
        self.words[name] = program

    def has_word(self, name: str) -> bool:
        return self.aliases.get(name, name) in self.words

    def get_word(self, name: str) -> Program:
        resolved_name = self.aliases.get(name, name)
        if (program := self.words.get(resolved_name)) is not None:
            return program
        raise CatNameError(f"Word `{name}` not found in library.", cat_token=name)

    def list_words(self) -> list[str]:
        return sorted(self.words.keys())
