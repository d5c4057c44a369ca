"""Lê um programa Pascal (ficheiro ou stdin), executa-o e mostra o valor final das variáveis."""

import argparse
import sys

from termcolor import colored

from analex import format_tokens
from erros import PascalError
from interpretador import run


def report(error):
    msg = colored(f"{error.kind}: ", "red", attrs=["bold"]) + error.message
    pos = error.position()
    if pos:
        msg += " " + colored(f"[{pos}]", attrs=["bold"])
    print(msg, file=sys.stderr)


def main(argv=None):
    parser = argparse.ArgumentParser(prog="minipascal")
    parser.add_argument("file", nargs="?", help="Pascal source file (reads stdin if omitted)")
    parser.add_argument("--tokens", action="store_true", help="print the token stream")
    parser.add_argument("--symbols", action="store_true", help="print the global symbol table")
    parser.add_argument("-v", "--verbose", action="store_true", help="trace scope entry and exit")
    args = parser.parse_args(argv)

    if args.file is not None:
        with open(args.file) as f:
            data = f.read()
    else:
        data = sys.stdin.read()

    try:
        result = run(data, verbose=args.verbose)
    except PascalError as e:
        report(e)
        return 1

    if args.tokens:
        print(format_tokens(result.tokens))
    if args.symbols:
        print(result.global_scope)
    if result.store:
        print(result.format_bindings())
    return 0


if __name__ == "__main__":
    sys.exit(main())
