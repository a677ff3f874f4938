"""
Compile a word list into keys/dict tables.

    morphsearch compile v irregular_verbs.txt -o dicts/
    → dicts/keys.v, dicts/dict.v
"""

import sys

from morphsearch.core.compiler import compile_file, write_tables
from morphsearch.core.errors import LexiconIntegrityError, MalformedInputError
from morphsearch.core.lexicon import WordClass


def add_subparser(subparsers):
    parser = subparsers.add_parser(
        "compile",
        help="Compile a word list (one synset per line) into keys.<c> and dict.<c>."
    )
    parser.add_argument("word_class", choices=[c.value for c in WordClass],
                        help="v for verbs, n for nouns")
    parser.add_argument("word_list", help="Word-list file")
    parser.add_argument("-o", "--out-dir", default=".", help="Where to write the tables")
    parser.set_defaults(func=run)


def run(args):
    try:
        tables = compile_file(WordClass(args.word_class), args.word_list)
    except (MalformedInputError, LexiconIntegrityError) as e:
        print(f"✗ Error: {args.word_list}: {e}")
        sys.exit(1)
    except OSError as e:
        print(f"✗ Error: cannot read {args.word_list}: {e}")
        sys.exit(1)

    try:
        keys_path, dict_path = write_tables(tables, args.out_dir)
    except OSError as e:
        print(f"✗ Error: cannot write tables: {e}")
        sys.exit(1)

    print(f"✓ Compiled {tables.synset_count} synsets, {len(tables.form_to_ids)} forms")
    print(f"  {keys_path}")
    print(f"  {dict_path}")
