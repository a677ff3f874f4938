"""
morphsearch CLI.
"""

import argparse
import logging

from morphsearch.cli.commands import compile_lists, grep, lexicon, query, stem


def main():
    parser = argparse.ArgumentParser(prog="morphsearch", description="morphsearch CLI")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    compile_lists.add_subparser(subparsers)
    stem.add_subparser(subparsers)
    query.add_subparser(subparsers)
    grep.add_subparser(subparsers)
    lexicon.add_subparser(subparsers)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
