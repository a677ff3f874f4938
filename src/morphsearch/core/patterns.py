# src/morphsearch/core/patterns.py
r"""
Pattern builder.

Turns words into Python regular expressions that match the word and
its inflections.

    build_fragment("search")   → \bsearch\w*\b
    build_fragment("thieves")  → \b(?:thief\w*|thieves)\b
    build_fragment("running")  → \b(?:run\w*|(?:run\w*|ran))\b

    compose_query(["thieves", "are"]) → <fragment>\s+<fragment>

Case sensitivity is up to whoever compiles the pattern.
"""

import re
from typing import Sequence

from morphsearch.core.dictionaries import bundled_lexicon
from morphsearch.core.lexicon import IrregularLexicon
from morphsearch.core.stemmer import stem_word


BOUNDARY = r"\b"
WILDCARD = r"\w*"
SEPARATOR = r"\s+"
OR = "|"


def anchored(body: str) -> str:
    return f"{BOUNDARY}{body}{BOUNDARY}"


def group(alternatives: Sequence[str]) -> str:
    return "(?:" + OR.join(alternatives) + ")"


def synset_alternatives(forms: Sequence[str]) -> list[str]:
    """The first form gets a trailing wildcard; every other form is exact."""
    alts = []
    for i, form in enumerate(forms):
        alt = re.escape(form)
        if i == 0:
            alt += WILDCARD
        alts.append(alt)
    return alts


def synset_group(forms: Sequence[str]) -> str:
    return group(synset_alternatives(forms))


def build_fragment(word: str, lexicon: IrregularLexicon | None = None) -> str:
    """Pattern text for one word. Always starts and ends with a boundary."""
    if lexicon is None:
        lexicon = bundled_lexicon()

    hit = lexicon.find(word)
    if hit is not None:
        return anchored(synset_group(lexicon.alternatives(hit)))

    if len(word) <= 2:
        return anchored(re.escape(word))

    result = stem_word(word, lexicon)
    stem_alt = re.escape(result.stem) + WILDCARD
    if result.irregular is not None:
        irregular = synset_group(lexicon.alternatives(result.irregular))
        return anchored(group([stem_alt, irregular]))
    return anchored(stem_alt)


def compose_query(words: Sequence[str], lexicon: IrregularLexicon | None = None) -> str:
    """One fragment per word, in order, joined by a whitespace matcher.

    The caller supplies at least one word.
    """
    if lexicon is None:
        lexicon = bundled_lexicon()
    return SEPARATOR.join(build_fragment(w, lexicon) for w in words)
