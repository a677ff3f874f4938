"""
Lexicon commands: lookup, synset, publish.

Also holds the shared --dict-dir / --db options, and --remote for commands with a server route.
"""

import sys

import redis
from rich import print_json

from morphsearch.cli import client
from morphsearch.core.compiler import compile_file
from morphsearch.core.dictionaries import bundled_lexicon, load_lexicon
from morphsearch.core.errors import LexiconIntegrityError, MalformedInputError
from morphsearch.core.lexicon import IrregularLexicon, WordClass
from morphsearch.core.store import LexiconStore
from morphsearch.server.deps import get_redis


def add_lexicon_args(parser, include_remote: bool = True):
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--dict-dir", help="Load compiled keys.*/dict.* tables from here")
    source.add_argument("--db", type=int, default=None,
                        help="Load the lexicon published to this Redis db")
    if include_remote:
        parser.add_argument("--remote", action="store_true", help="Ask the API server instead")


def resolve_lexicon(args) -> IrregularLexicon:
    """Bundled lexicon unless --dict-dir or --db says otherwise. Exits on failure."""
    try:
        if args.dict_dir:
            return load_lexicon(args.dict_dir)
        if args.db is not None:
            lexicon = LexiconStore(get_redis(args.db)).load()
            if lexicon is None:
                print(f"✗ Error: no lexicon published to db {args.db}")
                sys.exit(1)
            return lexicon
    except (LexiconIntegrityError, OSError, redis.RedisError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    return bundled_lexicon()


def add_subparser(subparsers):
    parser = subparsers.add_parser("lexicon", help="Irregular lexicon")
    lex_sub = parser.add_subparsers(dest="lexicon_command", required=True)

    # lookup
    lookup_p = lex_sub.add_parser("lookup", help="Synsets a surface form belongs to")
    lookup_p.add_argument("word")
    add_lexicon_args(lookup_p)
    lookup_p.set_defaults(func=lexicon_lookup)

    # synset
    synset_p = lex_sub.add_parser("synset", help="All forms of a synset")
    synset_p.add_argument("word_class", choices=[c.value for c in WordClass])
    synset_p.add_argument("synset_id", type=int)
    add_lexicon_args(synset_p)
    synset_p.set_defaults(func=lexicon_synset)

    # publish
    publish_p = lex_sub.add_parser("publish", help="Compile a word list and store it in Redis")
    publish_p.add_argument("word_class", choices=[c.value for c in WordClass])
    publish_p.add_argument("word_list")
    publish_p.add_argument("--db", type=int, default=0)
    publish_p.set_defaults(func=lexicon_publish)


def lexicon_lookup(args):
    if args.remote:
        try:
            print_json(data=client.lookup(args.word, args.db))
        except Exception as e:
            print(f"✗ Error: {e}")
            sys.exit(1)
        return

    lexicon = resolve_lexicon(args)
    found = False
    for word_class in lexicon.word_classes:
        hit = lexicon.lookup(word_class, args.word)
        if hit is None:
            continue
        found = True
        for sid in hit.synset_ids:
            forms = " ".join(lexicon.forms_of(word_class, sid))
            print(f"{word_class.value} {sid:4d}: {forms}")
    if not found:
        print(f"'{args.word}' is not an irregular form.")


def lexicon_synset(args):
    if args.remote:
        try:
            print_json(data=client.synset(args.word_class, args.synset_id, args.db))
        except Exception as e:
            print(f"✗ Error: {e}")
            sys.exit(1)
        return

    lexicon = resolve_lexicon(args)
    forms = lexicon.forms_of(WordClass(args.word_class), args.synset_id)
    if not forms:
        print(f"✗ Error: no {args.word_class} synset {args.synset_id}")
        sys.exit(1)
    print(" ".join(forms))


def lexicon_publish(args):
    try:
        tables = compile_file(WordClass(args.word_class), args.word_list)
        LexiconStore(get_redis(args.db)).publish(tables)
    except (MalformedInputError, LexiconIntegrityError, OSError, redis.RedisError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)
    print(f"✓ Published {tables.synset_count} {args.word_class} synsets to db {args.db}")
