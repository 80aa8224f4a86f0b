"""CLI: python -m lisp_desu [-o OUTPUT] [-v] [--tokens] <source.lisp>"""

import argparse
import logging
import sys

from .lexer import Cursor
from .parser import ParseError
from .transpile import TranspileError, default_output_path, read_source, transpile_file


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lisp-desu",
        description="Transpile S-expression source into call-expression text",
    )
    parser.add_argument("input", nargs="?", help="source file")
    parser.add_argument(
        "-o", "--output",
        help="output path (default: input stem + .py in the current directory)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log tokens and parsed forms",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="print the token stream instead of transpiling",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.input is None:
        # Reserved for an interactive mode.
        print("lisp-desu: interactive mode is not implemented; pass a source file", file=sys.stderr)
        return 1

    try:
        if args.tokens:
            src = read_source(args.input)
            for tok in Cursor(src):
                print(tok.describe(src))
            return 0

        output = args.output or default_output_path(args.input)
        print(transpile_file(args.input, output))
    except (ParseError, TranspileError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
