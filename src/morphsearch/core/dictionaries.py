# src/morphsearch/core/dictionaries.py
"""
Where lexicons come from.

- bundled word lists shipped in `morphsearch/core/data`
- compiled `keys.*` / `dict.*` artifacts in a directory
"""

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

from morphsearch.core.compiler import compile_lines, keys_filename, read_tables
from morphsearch.core.lexicon import IrregularLexicon, SynsetTables, WordClass

logger = logging.getLogger(__name__)


BUNDLED_FILES = {
    WordClass.VERB: "verbs.txt",
    WordClass.NOUN: "nouns.txt",
}


def bundled_tables(word_class: WordClass) -> SynsetTables:
    name = BUNDLED_FILES[WordClass(word_class)]
    source = resources.files("morphsearch.core") / "data" / name
    with source.open("r", encoding="utf-8") as f:
        return compile_lines(word_class, f)


@lru_cache(maxsize=1)
def bundled_lexicon() -> IrregularLexicon:
    """The default lexicon. Compiled on first use, then shared."""
    lexicon = IrregularLexicon(bundled_tables(c) for c in BUNDLED_FILES)
    logger.debug("loaded bundled lexicon: %r", lexicon)
    return lexicon


def load_lexicon(directory: str | Path) -> IrregularLexicon:
    """Load every class that has compiled artifacts in `directory`."""
    d = Path(directory)
    tables = []
    for word_class in BUNDLED_FILES:
        if (d / keys_filename(word_class)).exists():
            tables.append(read_tables(word_class, d))
        else:
            logger.debug("no %s tables in %s", word_class.value, d)
    lexicon = IrregularLexicon(tables)
    logger.debug("loaded lexicon from %s: %r", d, lexicon)
    return lexicon
