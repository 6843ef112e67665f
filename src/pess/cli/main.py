"""
PESS CLI.
"""

import argparse
import logging

from rich.logging import RichHandler

from pess.cli.commands import parse, gloss, vocab


def setup_logging(verbose: bool = False):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=verbose)],
    )


def main(argv=None):
    parser = argparse.ArgumentParser(prog="pess", description="PESS English ⇄ rule translator")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    parse.add_subparser(subparsers)
    gloss.add_subparser(subparsers)
    vocab.add_subparser(subparsers)

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if hasattr(args, "func"):
        return args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
