"""
prattlang Interpreter

This is the main entry point for the prattlang interpreter.

Workflow:
1. The source script is read from the file specified on the command line.
2. The Lexer tokenizes the source code into meaningful tokens.
3. The Parser processes tokens into an AST, collecting diagnostics as it goes.
4. Parser diagnostics, if any, are printed and evaluation is skipped.
5. Otherwise the Evaluator walks the AST and the final value is printed.

Set ``PRATTDEBUG`` to any non-empty value to print the tokens and AST and to
enable debug logging.
"""
import logging
import sys

from prattlang.config import load_settings
from prattlang.environment import Environment
from prattlang.lexer import tokenize
from prattlang.runner import RunResult, run


def print_usage():
    """
    Print usage.
    """
    print()
    print("prattlang Interpreter")
    print()
    print("Usage:")
    print("    pratt <script>")
    print()
    print("Arguments:")
    print("    <script>")
    print("        Path to a prattlang source file to execute. The value of the")
    print("        last top-level statement is printed.")
    print()
    print("Example:")
    print("    pratt fib.pratt")
    print()
    print("Or run with no arguments to enter interactive mode (REPL).")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized source and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ")


def print_parser_errors(errors: list[str]):
    """
    Print parser diagnostics, one per line.
    """
    print("parser errors:")
    for message in errors:
        print(f"\t{message}")


def report(result: RunResult) -> bool:
    """
    Print the outcome of a run. Returns ``False`` if the run had parser errors.
    """
    if result.errors:
        print_parser_errors(result.errors)
        return False
    if result.value is not None:
        print(result.value.inspect())
    return True


def run_script(script_name: str) -> int:
    """
    Run a prattlang script
    """
    try:
        with open(script_name, "r", encoding="utf-8") as f:
            code = f.read()

        settings = load_settings()
        result = run(code, script_name, settings=settings)

        if settings.debug:
            debug_print_tokens_ast(tokenize(code), result.program)

        return 0 if report(result) else 1
    except Exception as e:  # pylint: disable=broad-except
        print(f"{type(e).__name__}: {e}")
        return 1


def run_repl():
    """
    Run the interactive REPL
    """
    print("prattlang Interpreter - REPL")
    print("Type `exit` or `quit` to leave.")
    env = Environment()
    settings = load_settings()
    while True:
        try:
            line = input(">>> ")
            if line.strip() in {"exit", "quit"}:
                break
            if not line.strip():
                continue
            try:
                result = run(line, "<stdin>", env=env, settings=settings)
                if settings.debug:
                    debug_print_tokens_ast(tokenize(line), result.program)
                report(result)
            except Exception as e:  # pylint: disable=broad-except
                print(f"{type(e).__name__}: {e}")
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter the REPL.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    args = argv[1:]
    if not args:
        run_repl()
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        return run_script(args[0])
    print_usage()
    return 1


def cli() -> int:
    """
    Console-script entry point.
    """
    return main(sys.argv)


if __name__ == "__main__":
    sys.exit(main(sys.argv))
