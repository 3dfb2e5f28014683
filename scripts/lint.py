"""
Lint script runner.

Runs flake8 and pylint over the interpreter package, the CLI and the
language server. Tests are excluded. Any extra command line arguments are
passed to both tools.
"""
import subprocess
import sys

TARGETS = ["./prattlang", "./pratt.py", "./vscode/server/main.py"]

LINTERS = {
    "flake8": ["--exclude=prattlang/tests", "--max-line-length=100"],
    "pylint": ["--ignore=tests", "--max-line-length=100"],
}


def main(argv=None) -> int:
    """
    Lint the prattlang project. Returns the number of linters that failed.
    """
    extra = list(sys.argv[1:] if argv is None else argv)
    failed = 0
    for tool, options in LINTERS.items():
        print(f"Running {tool}...")
        result = subprocess.run([tool, *TARGETS, *options, *extra], check=False)
        if result.returncode != 0:
            print(f"{tool} exited with status {result.returncode}")
            failed += 1
    return failed


if __name__ == "__main__":
    sys.exit(main())
