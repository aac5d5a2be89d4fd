"""
NEWB Syntax Checker

This is the command line entry point for the NEWB syntax checker.

Workflow:
1. Each source file named on the command line is read line by line.
2. The Lexer tokenizes every line into reserved words, operators, numbers,
   identifiers and punctuation.
3. The Parser walks the tokens against the language grammar.
4. The outcome of every file is printed: either a success confirmation or
   the first error found, with its line number.

Set ``NEWBDEBUG`` in the environment to trace tokens and grammar rules.
"""
import logging
import os
import sys

from newblang.checker import check_file
from newblang.lexer import scan_file
from newblang.exceptions import CheckException


def print_usage():
    """
    Print usage.
    """
    print()
    print("NEWB Syntax Checker")
    print()
    print("Usage:")
    print("    newb <source> [<source> ...]")
    print()
    print("Arguments:")
    print("    <source>")
    print("        Path to a NEWB source file to check. Each file is checked")
    print("        independently and the first error in it is reported.")
    print()
    print("Example:")
    print("    newb program.txt")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Exit status is 0 when every file passes, 1 when any file has an")
    print("error and 2 when a file cannot be read.")


def debug_print_tokens(path: str):
    """
    Print the tokenized source.
    """
    try:
        tokens = scan_file(path)
    except (CheckException, OSError, UnicodeDecodeError):
        # check_script reports the failure itself
        return
    print("\nTokens:\n")
    for token in tokens:
        print(token)
    print(" ")


def check_script(path: str) -> int:
    """
    Check a NEWB source file and print the outcome.
    """
    if os.environ.get('NEWBDEBUG'):
        debug_print_tokens(path)

    try:
        result = check_file(path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"{path}: File Error: {e}")
        return 2

    print(f"{path}: {result.render()}")
    return 0 if result.ok else 1


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One or more arguments that are not options: check each as a source file.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if not args or any(arg.startswith('-') for arg in args):
        print_usage()
        return 1

    if os.environ.get('NEWBDEBUG'):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    status = 0
    for path in args:
        status = max(status, check_script(path))
    return status


def run() -> None:
    """
    Console script entry point.
    """
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()
