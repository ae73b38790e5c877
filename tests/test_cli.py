## catfl — CLI integration tests

import os, sys
import subprocess


def run_cli(*cli_args: str, env: dict | None = None) -> subprocess.CompletedProcess:
    args = [sys.executable, "-m", "catfl", "--plain"]
    args.extend(str(arg) for arg in cli_args)
    merged_env = os.environ.copy()
    merged_env.setdefault("PYTHONIOENCODING", "utf-8")
    if env:
        merged_env.update(env)
    return subprocess.run(args, capture_output=True, text=True, encoding="utf-8", env=merged_env)


def test_cli_demo_runs_samples():
    result = run_cli("demo")
    assert result.returncode == 0, result.stdout + result.stderr
    out = result.stdout
    assert "(2 + 3) * 4" in out
    assert "<20>" in out
    assert "<30>" in out
    assert "<120>" in out
    assert "\033[" not in out


def test_cli_word_on_initial_stack():
    result = run_cli("word", "squared", "5")
    assert result.returncode == 0
    assert ">>> <25>" in result.stdout


def test_cli_word_sequence_and_values_bottom_to_top():
    result = run_cli("word", "squared,sum3", "1", "2", "3")
    assert result.returncode == 0
    # 3 squared = 9, then 9 + 2 + 1.
    assert ">>> <12>" in result.stdout


def test_cli_word_parses_fractions_and_floats():
    result = run_cli("word", "sum3", "1/2", "1/4", "2")
    assert result.returncode == 0
    assert ">>> <11/4>" in result.stdout

    result = run_cli("word", "double", "1.5")
    assert result.returncode == 0
    assert ">>> <3.0>" in result.stdout


def test_cli_factorial():
    result = run_cli("factorial", "6")
    assert result.returncode == 0
    assert "<720>" in result.stdout


def test_cli_factorial_of_large_n():
    result = run_cli("factorial", "1200")
    assert result.returncode == 0, result.stdout + result.stderr
    assert "RecursionError" not in result.stdout + result.stderr
    assert ">>> <" in result.stdout


def test_cli_underflow_reports_error():
    result = run_cli("word", "sum3", "1")
    assert result.returncode != 0
    out = result.stdout
    assert "STACK UNDERFLOW." in out
    assert "needs 2 item(s), found 1" in out
    assert "Stack content is" in out


def test_cli_type_mismatch_reports_error():
    result = run_cli("word", "sum3", "a", "1", "2")
    assert result.returncode != 0
    assert "TYPE MISMATCH." in result.stdout


def test_cli_unknown_word_reports_error():
    result = run_cli("word", "cube", "3")
    assert result.returncode != 0
    assert "UNKNOWN WORD." in result.stdout
    assert "cube" in result.stdout


def test_cli_ignore_keeps_going_but_fails():
    result = run_cli("--ignore", "word", "sum3")
    assert result.returncode == 1
    assert "STACK UNDERFLOW." in result.stdout


def test_cli_verbose_traces_steps():
    result = run_cli("-vv", "word", "squared", "5")
    assert result.returncode == 0
    assert result.stdout.count("<=>") == 3
    assert "dup" in result.stdout


def test_cli_stats():
    result = run_cli("--stats", "factorial", "5")
    assert result.returncode == 0
    assert "STATISTICS." in result.stdout
    assert "step\t9" in result.stdout


def test_cli_lists_words():
    result = run_cli("words")
    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert lines == ["double  (2x)", "squared  (sq)", "sum3"]
