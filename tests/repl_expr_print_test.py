import os
import subprocess
import sys


def run_repl_with_input(inp: str) -> subprocess.CompletedProcess:
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    cli = os.path.join(root, "cli.py")

    proc = subprocess.run(
        [sys.executable, cli, "repl"],
        input=inp,
        text=True,
        capture_output=True,
        cwd=root,
        timeout=10,
    )

    # REPL should exit cleanly after :q
    if proc.returncode != 0:
        raise AssertionError(f"REPL exited with code {proc.returncode}\nSTDOUT:\n{proc.stdout}\nSTDERR:\n{proc.stderr}")

    return proc


def test_auto_print_expression():
    out = run_repl_with_input("1 + 2\n:q\n").stdout
    if "3" not in out:
        raise AssertionError(f"Expected 3 in output.\nOUT:\n{out}")


def test_persistent_state_expression():
    out = run_repl_with_input("x := 2;\nx + 5\n:q\n").stdout
    if "7" not in out:
        raise AssertionError(f"Expected 7 in output.\nOUT:\n{out}")


def test_declaration_prints_nothing():
    out = run_repl_with_input("y := 41;\n:q\n").stdout
    if "<empty>" in out:
        raise AssertionError(f"Empty result should not be printed.\nOUT:\n{out}")


def test_multiline_block_waits_for_closing_brace():
    out = run_repl_with_input("n := 0;\nwhile n < 3 {\n  n = n + 1;\n}\nn * 100\n:q\n").stdout
    if "...> " not in out:
        raise AssertionError(f"Expected a continuation prompt.\nOUT:\n{out}")
    if "300" not in out:
        raise AssertionError(f"Expected 300 in output.\nOUT:\n{out}")


def test_error_does_not_end_session():
    proc = run_repl_with_input("missing;\n2 * 21\n:q\n")
    if "Variable 'missing' not found." not in proc.stderr:
        raise AssertionError(f"Expected a runtime error on stderr.\nERR:\n{proc.stderr}")
    if "42" not in proc.stdout:
        raise AssertionError(f"Expected 42 after the error.\nOUT:\n{proc.stdout}")


def test_syntax_error_reports_position():
    proc = run_repl_with_input("1 + ;\n:q\n")
    if "Parse error at 1:5. Expected expression." not in proc.stderr:
        raise AssertionError(f"Expected a parse error on stderr.\nERR:\n{proc.stderr}")


def test_brace_balance_ignores_strings_and_comments():
    from cli import brace_balance

    cases = {
        "while x {": 1,
        "}": -1,
        's := "{{"; {': 1,
        "{ } // {{{": 0,
        'if a { b := "}"; // }': 1,
    }
    for line, expected in cases.items():
        got = brace_balance(line)
        if got != expected:
            raise AssertionError(f"brace_balance({line!r}) = {got}, expected {expected}")


def test_end_of_input_quits():
    out = run_repl_with_input("1 + 1\n").stdout
    if "2" not in out:
        raise AssertionError(f"Expected 2 in output.\nOUT:\n{out}")


if __name__ == "__main__":
    test_auto_print_expression()
    test_persistent_state_expression()
    test_declaration_prints_nothing()
    test_multiline_block_waits_for_closing_brace()
    test_error_does_not_end_session()
    test_syntax_error_reports_position()
    test_brace_balance_ignores_strings_and_comments()
    test_end_of_input_quits()
    print("ok")
