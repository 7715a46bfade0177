import logging
import sys
import traceback

import colorama
from colorama import Fore, Style

from ast_dump import ast_to_dict, pretty
from ast_nodes import ExpressionStmt
from environment import Environment
from errors import ParseError, VitusError
from interpreter import Interpreter
from lexer import scan
from parser import Parser, parse
from values import EmptyValue

USAGE = """Usage:
  python cli.py tokens <file.vitus>
  python cli.py parse <file.vitus>
  python cli.py run <file.vitus> [--trace]
  python cli.py repl [--trace]
  (optional) --debug to show Python traceback"""


def red(text):
    return f"{Fore.RED}{text}{Style.RESET_ALL}"


def report(e, debug=False):
    if debug:
        traceback.print_exc()
    print(red(str(e)), file=sys.stderr)


def read_source(path):
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def cmd_tokens(path, debug=False):
    try:
        tokens = scan(read_source(path))
    except (OSError, VitusError) as e:
        report(e, debug)
        sys.exit(1)

    for tok in tokens:
        literal = "" if tok.literal is None else f"  {tok.literal!r}"
        print(f"  {tok.line:>4}:{tok.column:<4} {tok.kind.name:<16} {tok.lexeme!r}{literal}")


def cmd_parse(path, debug=False):
    try:
        statements = parse(scan(read_source(path)))
    except (OSError, VitusError) as e:
        report(e, debug)
        sys.exit(1)

    print(pretty(ast_to_dict(statements)))


def cmd_run(path, debug=False, trace=False):
    try:
        statements = parse(scan(read_source(path)))
        result = Interpreter(trace=trace).interpret(Environment(), statements)
    except (OSError, VitusError) as e:
        report(e, debug)
        sys.exit(1)

    if not isinstance(result, EmptyValue):
        print(result)


QUIT_COMMANDS = (":q", ":quit", "quit", "exit")


def brace_balance(line: str) -> int:
    """Net count of `{` minus `}` in line, skipping strings and `//` comments."""
    balance = 0
    in_string = False
    for ch, nxt in zip(line, line[1:] + " "):
        if in_string:
            in_string = ch != '"'
        elif ch == '"':
            in_string = True
        elif ch == "/" and nxt == "/":
            break
        elif ch == "{":
            balance += 1
        elif ch == "}":
            balance -= 1
    return balance


def read_entry():
    """Read one REPL entry, taking continuation lines until its braces close.

    Returns None once the user quits or input runs out.
    """
    lines = []
    balance = 0
    while True:
        try:
            line = input("...> " if lines else "vitus> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return None

        if not lines:
            if line.strip() in QUIT_COMMANDS:
                return None
            if not line.strip():
                continue

        lines.append(line)
        balance += brace_balance(line)
        if balance <= 0:
            return "\n".join(lines) + "\n"


def parse_repl_entry(source):
    """Parse a REPL entry as statements, falling back to one bare expression.

    The fallback lets `1 + 2` be typed without the trailing `;`.
    """
    tokens = scan(source)
    try:
        return parse(tokens)
    except VitusError as parse_err:
        try:
            parser = Parser(tokens)
            expr = parser.expression()
            if not parser.at_end() or parser.errors:
                raise ParseError("extra tokens", parser.current_token)
            return [ExpressionStmt(expr)]
        except VitusError:
            raise parse_err


def cmd_repl(debug: bool = False, trace: bool = False):
    # one root environment for the whole session
    env = Environment()
    interpreter = Interpreter(trace=trace)

    print("Vitus REPL. Type :q to quit.")

    while True:
        source = read_entry()
        if source is None:
            break

        try:
            result = interpreter.interpret(env, parse_repl_entry(source))
        except VitusError as e:
            report(e, debug)
            continue

        if not isinstance(result, EmptyValue):
            print(result)


def main():
    colorama.just_fix_windows_console()

    args = sys.argv[1:]
    debug = "--debug" in args
    trace = "--trace" in args
    args = [a for a in args if a not in ("--debug", "--trace")]

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(module)s: %(message)s",
    )

    if not args:
        print(USAGE)
        sys.exit(1)

    cmd = args[0]

    if cmd == "repl":
        if len(args) != 1:
            print(USAGE)
            sys.exit(1)
        cmd_repl(debug=debug, trace=trace)
        return

    if len(args) != 2:
        print(USAGE)
        sys.exit(1)

    path = args[1]

    if cmd == "tokens":
        cmd_tokens(path, debug=debug)
    elif cmd == "parse":
        cmd_parse(path, debug=debug)
    elif cmd == "run":
        cmd_run(path, debug=debug, trace=trace)
    else:
        print(f"Unknown command: {cmd}")
        sys.exit(1)


if __name__ == "__main__":
    main()
