## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# catfl — A minimal free-monad embedding of a concatenative stack language.
#

import sys
import time
import traceback
from fractions import Fraction
from dataclasses import dataclass

import click

from .types import nil, Stack
from .errors import CatError, CatUnderflowError, CatTypeError, CatApplyError, CatNameError
from .formatting import write_without_ansi, format_item, show_stack
from .builtins import SAMPLES, factorial
from .runtime import Runtime


@dataclass(frozen=True)
class RuntimeConfig:
    verbose: int
    stats: bool
    plain: bool
    ignore: bool


class CatRunner:
    def __init__(self, config: RuntimeConfig):
        self.verbose = config.verbose
        self.ignore = config.ignore
        self.stats_enabled = config.stats
        self.plain = config.plain

        if self.plain:
            writer = write_without_ansi(sys.stdout.write)
            sys.stdout.write, sys.stderr.write = writer, writer

        self.runtime = Runtime()
        self.total_stats = {'steps': 0, 'start': time.time()} if self.stats_enabled else None
        self.failure = False
        self.executed_items = 0

    def _report(self, message: str, detail: str, exc: Exception) -> None:
        print(f'\033[30;43m {message} \033[0m {detail} (Exception: \033[33m{type(exc).__name__}\033[0m)', file=sys.stderr)
        if (stack := getattr(exc, 'cat_stack', None)) is not None:
            print(f'\033[1;33m  Stack content is\033[0;33m\n    ', end='', file=sys.stderr)
            show_stack(stack, width=None, file=sys.stderr)
            print('\033[0m', file=sys.stderr)

    def _handle_exception(self, exc: Exception, title: str) -> None:
        if isinstance(exc, CatUnderflowError):
            detail = f"Operation \033[1;97m`{exc.cat_token}`\033[0m in `\033[97m{title}\033[0m` needs {exc.required} item(s), found {exc.available}."
            self._report("STACK UNDERFLOW.", detail, exc)
        elif isinstance(exc, CatApplyError):
            self._report("APPLY FAILURE.", f"{exc} While running `\033[97m{title}\033[0m`.", exc)
        elif isinstance(exc, CatTypeError):
            self._report("TYPE MISMATCH.", f"{exc} While running `\033[97m{title}\033[0m`.", exc)
        elif isinstance(exc, CatNameError):
            self._report("UNKNOWN WORD.", f"Word `\033[1;97m{exc.cat_token}\033[0m` was not found in library!", exc)
        else:
            op = getattr(exc, 'cat_op', None)
            self._report("RUNTIME ERROR.", f"Operation \033[1;97m`{op}`\033[0m caused an error in `{title}`!", exc)
            traceback.print_exc()

        self.failure = True
        if not self.ignore: sys.exit(1)

    def execute(self, title: str, program, stack: Stack | None = None) -> None:
        try:
            result = self.runtime.run(program, stack, verbosity=self.verbose, stats=self.total_stats)
        except (CatError, Exception) as exc:
            self._handle_exception(exc, title)
        else:
            self.executed_items += 1
            print(f"\033[97m{title}\033[0m")
            print("\033[90m>>>\033[0m", format_item(result) if result is not nil else '∅')

    def finalize(self) -> int:
        if self.total_stats and self.executed_items > 0:
            elapsed_time = time.time() - self.total_stats['start']
            print(f"\n\033[97m\033[48;5;30m STATISTICS. \033[0m")
            print(f"step\t\033[97m{self.total_stats['steps']:,}\033[0m")
            print(f"time\t\033[97m{elapsed_time:.3f}s\033[0m")
        return 1 if self.failure else 0


def parse_value(token: str):
    """Convert a command-line argument into a stack value: int, fraction, float, or else string."""
    for cast in ((int, Fraction) if '/' in token else (int, float)):
        try:
            return cast(token)
        except (ValueError, ZeroDivisionError):
            continue
    return token


@click.group(context_settings={'help_option_names': ['-h', '--help']})
@click.option('--verbose', '-v', default=0, count=True, help='Trace interpreter steps (-vv for every step).')
@click.option('--stats', is_flag=True, help='Display execution statistics (e.g., number of steps).')
@click.option('--plain', '-p', is_flag=True, help='Strip ANSI color codes and redirect stderr to stdout.')
@click.option('--ignore', '-i', is_flag=True, help='Ignore errors and continue executing.')
@click.pass_context
def cli(ctx: click.Context, verbose: int, stats: bool, plain: bool, ignore: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj['config'] = RuntimeConfig(verbose=verbose, stats=stats, plain=plain, ignore=ignore)


@cli.command('demo')
@click.pass_context
def run_demo(ctx: click.Context) -> None:
    """Run the sample programs on an empty stack."""
    runner = CatRunner(ctx.obj['config'])
    for title, program in SAMPLES:
        runner.execute(title, program)
    ctx.exit(runner.finalize())


@cli.command('word')
@click.argument('names')
@click.argument('values', nargs=-1)
@click.pass_context
def run_word(ctx: click.Context, names: str, values: tuple[str, ...]) -> None:
    """Run comma-separated NAMES on a stack built from VALUES, listed bottom to top."""
    runner = CatRunner(ctx.obj['config'])
    stack = nil.pushed(*(parse_value(v) for v in values))
    words = [n for n in names.split(',') if n]
    try:
        program = runner.runtime.compose(*words)
    except CatError as exc:
        runner._handle_exception(exc, names)
    else:
        runner.execute(' '.join(words), program, stack)
    ctx.exit(runner.finalize())


@cli.command('factorial')
@click.argument('n', type=click.IntRange(min=0))
@click.pass_context
def run_factorial(ctx: click.Context, n: int) -> None:
    """Compute N! as a product of pushed integers."""
    runner = CatRunner(ctx.obj['config'])
    runner.execute(f"factorial of {n}", factorial(n))
    ctx.exit(runner.finalize())


@cli.command('words')
@click.pass_context
def list_words(ctx: click.Context) -> None:
    """List the words available by name."""
    runtime = CatRunner(ctx.obj['config']).runtime
    for name in runtime.list_words():
        aliases = sorted(a for a, target in runtime.library.aliases.items() if target == name)
        suffix = f"  \033[90m({', '.join(aliases)})\033[0m" if aliases else ''
        print(f"{name}{suffix}")


def main(argv: list[str] | None = None) -> None:
    cli.main(args=list(sys.argv[1:] if argv is None else argv), prog_name='catfl')


if __name__ == "__main__":
    main()
