"""
Stem words and show their pattern fragments.
"""

import sys

from rich import print_json

from morphsearch.cli import client
from morphsearch.cli.commands.lexicon import add_lexicon_args, resolve_lexicon
from morphsearch.core.patterns import build_fragment
from morphsearch.core.stemmer import stem_word


def add_subparser(subparsers):
    stem_p = subparsers.add_parser("stem", help="Stem words.")
    stem_p.add_argument("words", nargs="+")
    add_lexicon_args(stem_p)
    stem_p.set_defaults(func=run_stem)

    frag_p = subparsers.add_parser("fragment", help="Pattern fragment for one word.")
    frag_p.add_argument("word")
    add_lexicon_args(frag_p)
    frag_p.set_defaults(func=run_fragment)


def run_stem(args):
    if args.remote:
        try:
            for word in args.words:
                print_json(data=client.stem(word, args.db))
        except Exception as e:
            print(f"✗ Error: {e}")
            sys.exit(1)
        return

    lexicon = resolve_lexicon(args)
    for word in args.words:
        result = stem_word(word, lexicon)
        line = f"{word:20} → {result.stem}"
        if result.irregular is not None:
            hit = result.irregular
            forms = " ".join(lexicon.alternatives(hit))
            line += f"  [{hit.word_class.value} {list(hit.synset_ids)}: {forms}]"
        print(line)


def run_fragment(args):
    if args.remote:
        try:
            print(client.fragment(args.word, args.db)["fragment"])
        except Exception as e:
            print(f"✗ Error: {e}")
            sys.exit(1)
        return

    print(build_fragment(args.word, resolve_lexicon(args)))
