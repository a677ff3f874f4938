# tests/test_patterns.py
"""Tests for fragment and query patterns."""

import re

import pytest

from morphsearch.core.dictionaries import bundled_lexicon
from morphsearch.core.lexicon import IrregularLexicon, SynsetTables, WordClass
from morphsearch.core.patterns import (
    BOUNDARY,
    SEPARATOR,
    build_fragment,
    compose_query,
    synset_alternatives,
)


@pytest.fixture
def lexicon():
    return bundled_lexicon()


def matches(pattern: str, text: str) -> bool:
    return re.search(pattern, text) is not None


# === Single fragments ===

def test_regular_word_fragment(lexicon):
    assert build_fragment("search", lexicon) == r"\bsearch\w*\b"


@pytest.mark.parametrize("text", ["search", "searching", "searches", "searched", "searchers"])
def test_search_matches_inflections(lexicon, text):
    assert matches(build_fragment("search", lexicon), text)


@pytest.mark.parametrize("text", ["research", "such"])
def test_search_does_not_match_inside_words(lexicon, text):
    assert not matches(build_fragment("search", lexicon), text)


def test_short_word_is_exact(lexicon):
    fragment = build_fragment("an", lexicon)
    assert fragment == r"\ban\b"
    assert matches(fragment, "an apple")
    assert not matches(fragment, "and")


def test_short_irregular_word_uses_lexicon(lexicon):
    # "is" is a form of "be", so the short-word rule never applies
    fragment = build_fragment("is", lexicon)
    assert matches(fragment, "they were")


def test_direct_noun_hit(lexicon):
    fragment = build_fragment("thieves", lexicon)

    assert fragment == r"\b(?:thief\w*|thieves)\b"
    assert matches(fragment, "thief")
    assert matches(fragment, "thieves")


def test_stem_reaching_irregular_root(lexicon):
    fragment = build_fragment("running", lexicon)

    assert fragment == r"\b(?:run\w*|(?:run\w*|ran))\b"
    assert matches(fragment, "ran")
    assert matches(fragment, "runs")


def test_ambiguous_form_uses_every_synset(lexicon):
    hit = lexicon.lookup(WordClass.VERB, "lay")
    assert len(hit.synset_ids) == 2

    fragment = build_fragment("lay", lexicon)
    assert fragment == r"\b(?:lie\w*|lay|lain|lay|laid)\b"


def test_only_first_form_gets_wildcard():
    assert synset_alternatives(["go", "goes", "went", "gone"]) == [
        r"go\w*", "goes", "went", "gone",
    ]


def test_later_forms_match_exactly(lexicon):
    fragment = build_fragment("went", lexicon)
    assert matches(fragment, "going")
    assert not matches(fragment, "wentworth")


def test_without_lexicon_entries_everything_is_stemmed():
    fragment = build_fragment("running", IrregularLexicon.empty())
    assert fragment == r"\brun\w*\b"
    assert not matches(fragment, "ran")


def test_lookup_is_case_sensitive(lexicon):
    assert build_fragment("Thieves", lexicon) == r"\bThiev\w*\b"


def test_custom_lexicon():
    verbs = SynsetTables.build(
        WordClass.VERB,
        {"grok": [1], "grokked": [1]},
        {1: ["grok", "grokked"]},
    )
    lexicon = IrregularLexicon([verbs])
    assert build_fragment("grokked", lexicon) == r"\b(?:grok\w*|grokked)\b"


@pytest.mark.parametrize("word", [
    "", "a", "an", "is", "search", "running", "thieves", "lay", "bunnies",
    "hopefulness", "x-ray", "yelled",
])
def test_fragment_is_anchored(lexicon, word):
    fragment = build_fragment(word, lexicon)
    assert fragment.startswith(BOUNDARY)
    assert fragment.endswith(BOUNDARY)
    re.compile(fragment)


# === Queries ===

WORDS = ["thieves", "are", "running", "from", "bunnies"]


def test_query_keeps_word_order(lexicon):
    pattern = compose_query(WORDS, lexicon)
    fragments = pattern.split(SEPARATOR)

    assert len(fragments) == 5
    assert fragments == [build_fragment(w, lexicon) for w in WORDS]


@pytest.mark.parametrize("text", [
    "thief was ran from bunny",
    "thieves be run from bunnies",
    "the thieves  are\nrunning from bunnies.",
])
def test_query_matches_inflected_sentences(lexicon, text):
    assert matches(compose_query(WORDS, lexicon), text)


def test_query_does_not_match_reordered_text(lexicon):
    assert not matches(compose_query(WORDS, lexicon), "bunnies from running are thieves")


def test_single_word_query_is_the_fragment(lexicon):
    assert compose_query(["search"], lexicon) == build_fragment("search", lexicon)


def test_default_lexicon_is_bundled():
    assert compose_query(["thieves"]) == r"\b(?:thief\w*|thieves)\b"


def test_ies_plural_keeps_vowel_in_fragment(lexicon):
    fragment = build_fragment("cries", lexicon)

    assert fragment == r"\bcri\w*\b"
    assert matches(fragment, "cried")
    assert not matches(fragment, "crown")
    assert not matches(fragment, "crab")
