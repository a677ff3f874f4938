"""
Compose a multi-word pattern.
"""

import sys

from morphsearch.cli import client
from morphsearch.cli.commands.lexicon import add_lexicon_args, resolve_lexicon
from morphsearch.core.patterns import build_fragment, compose_query


def add_subparser(subparsers):
    parser = subparsers.add_parser(
        "query",
        help="Pattern matching the words, in order, and their inflections."
    )
    parser.add_argument("words", nargs="+")
    parser.add_argument("--show-fragments", action="store_true",
                        help="Print each word's fragment too")
    add_lexicon_args(parser)
    parser.set_defaults(func=run)


def run(args):
    if args.remote:
        try:
            result = client.query(args.words, args.db)
        except Exception as e:
            print(f"✗ Error: {e}")
            sys.exit(1)
        fragments = result["fragments"]
        pattern = result["pattern"]
    else:
        lexicon = resolve_lexicon(args)
        fragments = [build_fragment(w, lexicon) for w in args.words]
        pattern = compose_query(args.words, lexicon)

    if args.show_fragments:
        for word, fragment in zip(args.words, fragments):
            print(f"{word:20} {fragment}")
        print()
    print(pattern)
