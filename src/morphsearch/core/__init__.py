"""
Stemming and inflection-pattern engine.

Usage:
    from morphsearch.core import build_fragment, compose_query

    compose_query(["thieves", "are", "running"])
"""

from .errors import LexiconIntegrityError, MalformedInputError
from .lexicon import IrregularLexicon, LexiconHit, SynsetTables, WordClass
from .compiler import compile_file, compile_lines, read_tables, write_tables
from .dictionaries import bundled_lexicon, load_lexicon
from .stemmer import StemResult, stem, stem_word
from .patterns import build_fragment, compose_query

__all__ = [
    # Errors
    "LexiconIntegrityError",
    "MalformedInputError",
    # Lexicon
    "IrregularLexicon",
    "LexiconHit",
    "SynsetTables",
    "WordClass",
    "bundled_lexicon",
    "load_lexicon",
    # Compiler
    "compile_file",
    "compile_lines",
    "read_tables",
    "write_tables",
    # Stemmer
    "StemResult",
    "stem",
    "stem_word",
    # Patterns
    "build_fragment",
    "compose_query",
]
