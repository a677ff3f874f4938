"""
Search files for words and their inflections.

A small host around the engine: it picks case sensitivity, runs the
pattern, and highlights what matched.

    morphsearch grep thieves are running -f story.txt -S
"""

import re
import sys

from rich.console import Console
from rich.text import Text

from morphsearch.cli.commands.lexicon import add_lexicon_args, resolve_lexicon
from morphsearch.core.patterns import compose_query


def add_subparser(subparsers):
    parser = subparsers.add_parser("grep", help="Find inflected matches in files.")
    parser.add_argument("words", nargs="+")
    parser.add_argument("-f", "--file", dest="files", action="append", required=True,
                        help="File to search (repeatable)")
    case = parser.add_mutually_exclusive_group()
    case.add_argument("-i", "--ignore-case", action="store_true")
    case.add_argument("-S", "--smart-case", action="store_true",
                      help="Ignore case unless a word has an uppercase letter")
    parser.add_argument("--no-color", action="store_true")
    add_lexicon_args(parser, include_remote=False)
    parser.set_defaults(func=run)


def case_flags(words: list[str], ignore_case: bool, smart_case: bool) -> int:
    if ignore_case:
        return re.IGNORECASE
    if smart_case and not any(ch.isupper() for w in words for ch in w):
        return re.IGNORECASE
    return 0


def find_matches(pattern: re.Pattern, lines):
    """(line number, line, spans) for every line with at least one match."""
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\n")
        spans = [m.span() for m in pattern.finditer(line)]
        if spans:
            yield lineno, line, spans


def run(args):
    lexicon = resolve_lexicon(args)
    pattern = re.compile(
        compose_query(args.words, lexicon),
        case_flags(args.words, args.ignore_case, args.smart_case),
    )
    console = Console(no_color=args.no_color, highlight=False)

    total = 0
    for path in args.files:
        try:
            with open(path, encoding="utf-8") as f:
                for lineno, line, spans in find_matches(pattern, f):
                    total += len(spans)
                    text = Text(f"{path}:{lineno}: ")
                    body = Text(line)
                    for start, end in spans:
                        body.stylize("bold red", start, end)
                    text.append(body)
                    console.print(text, soft_wrap=True)
        except OSError as e:
            print(f"✗ Error: {e}")
            sys.exit(1)

    if total == 0:
        sys.exit(1)
