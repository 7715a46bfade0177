import os
import subprocess
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
CLI = os.path.join(ROOT, "cli.py")
EXAMPLES = os.path.join(ROOT, "examples")


def run_cli(*args) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, CLI, *args],
        text=True,
        capture_output=True,
        cwd=ROOT,
        timeout=10,
    )


def example(name):
    return os.path.join(EXAMPLES, name)


def test_run_prints_program_result():
    proc = run_cli("run", example("countdown.vitus"))
    if proc.returncode != 0:
        raise AssertionError(f"run failed with code {proc.returncode}\nSTDERR:\n{proc.stderr}")
    if proc.stdout.strip() != "15":
        raise AssertionError(f"Expected 15.\nOUT:\n{proc.stdout}")


def test_run_scopes_example():
    proc = run_cli("run", example("scopes.vitus"))
    if proc.returncode != 0 or proc.stdout.strip() != "1.5":
        raise AssertionError(f"Expected 1.5.\nOUT:\n{proc.stdout}\nERR:\n{proc.stderr}")


def test_run_reports_every_syntax_error():
    proc = run_cli("run", example("errors.vitus"))
    if proc.returncode != 1:
        raise AssertionError(f"Expected exit code 1, got {proc.returncode}")
    for expected in ("Parse error at 1:10. Expected expression.", "Parse error at 3:5. Invalid assignment target."):
        if expected not in proc.stderr:
            raise AssertionError(f"Missing {expected!r}\nERR:\n{proc.stderr}")
    if proc.stdout:
        raise AssertionError(f"Nothing should run after a syntax error.\nOUT:\n{proc.stdout}")


def test_tokens_command():
    proc = run_cli("tokens", example("countdown.vitus"))
    if proc.returncode != 0:
        raise AssertionError(proc.stderr)
    if "COLON_EQUAL" not in proc.stdout or "EOF" not in proc.stdout:
        raise AssertionError(f"Unexpected token listing.\nOUT:\n{proc.stdout}")


def test_parse_command_prints_tree():
    proc = run_cli("parse", example("scopes.vitus"))
    if proc.returncode != 0:
        raise AssertionError(proc.stderr)
    for expected in ("type: VarDecl", "type: Block", "type: If", "else_block:"):
        if expected not in proc.stdout:
            raise AssertionError(f"Missing {expected!r}\nOUT:\n{proc.stdout}")


def test_trace_flag():
    proc = run_cli("run", example("countdown.vitus"), "--trace")
    if "TRACE line=4 While depth=0" not in proc.stdout:
        raise AssertionError(f"Expected trace lines.\nOUT:\n{proc.stdout}")


def test_debug_flag_turns_on_logging():
    proc = run_cli("run", example("countdown.vitus"), "--debug")
    if proc.returncode != 0:
        raise AssertionError(proc.stderr)
    if "Scanning" not in proc.stderr or "Parsing finished" not in proc.stderr:
        raise AssertionError(f"Expected debug log lines.\nERR:\n{proc.stderr}")


def test_missing_file():
    proc = run_cli("run", example("does-not-exist.vitus"))
    if proc.returncode != 1:
        raise AssertionError(f"Expected exit code 1, got {proc.returncode}")


def test_usage_on_bad_arguments():
    for args in ((), ("frobnicate", "x.vitus"), ("run",)):
        proc = run_cli(*args)
        if proc.returncode != 1:
            raise AssertionError(f"Expected exit code 1 for {args}, got {proc.returncode}")
