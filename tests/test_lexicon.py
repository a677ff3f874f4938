# tests/test_lexicon.py
"""Tests for the irregular lexicon."""

import pytest

from morphsearch.core.dictionaries import bundled_lexicon
from morphsearch.core.errors import LexiconIntegrityError
from morphsearch.core.lexicon import IrregularLexicon, LexiconHit, SynsetTables, WordClass


@pytest.fixture
def lexicon():
    verbs = SynsetTables.build(
        WordClass.VERB,
        {"see": [1], "saw": [1], "seen": [1], "go": [2], "went": [2]},
        {1: ["see", "saw", "seen"], 2: ["go", "went"]},
    )
    nouns = SynsetTables.build(
        WordClass.NOUN,
        {"saw": [1], "saws": [1], "mouse": [2], "mice": [2]},
        {1: ["saw", "saws"], 2: ["mouse", "mice"]},
    )
    return IrregularLexicon([verbs, nouns])


def test_lookup(lexicon):
    hit = lexicon.lookup(WordClass.VERB, "went")
    assert hit == LexiconHit(WordClass.VERB, (2,))


def test_lookup_wrong_class(lexicon):
    assert lexicon.lookup(WordClass.NOUN, "went") is None


def test_lookup_is_exact(lexicon):
    assert lexicon.lookup(WordClass.NOUN, "Mice") is None
    assert lexicon.lookup(WordClass.NOUN, "mic") is None


def test_find_prefers_verbs(lexicon):
    hit = lexicon.find("saw")
    assert hit.word_class == WordClass.VERB
    assert lexicon.find("saws").word_class == WordClass.NOUN


def test_find_not_found(lexicon):
    assert lexicon.find("nonexistent") is None
    assert "nonexistent" not in lexicon
    assert "mice" in lexicon


def test_forms_of_keeps_order(lexicon):
    assert lexicon.forms_of(WordClass.VERB, 1) == ("see", "saw", "seen")


def test_forms_of_missing(lexicon):
    assert lexicon.forms_of(WordClass.VERB, 99) == ()
    assert IrregularLexicon.empty().forms_of(WordClass.VERB, 1) == ()


def test_alternatives_flattens_in_order():
    verbs = SynsetTables.build(
        WordClass.VERB,
        {"lie": [1], "lay": [1, 2], "lain": [1], "laid": [2]},
        {1: ["lie", "lay", "lain"], 2: ["lay", "laid"]},
    )
    lexicon = IrregularLexicon([verbs])
    hit = lexicon.find("lay")
    assert lexicon.alternatives(hit) == ["lie", "lay", "lain", "lay", "laid"]


def test_tables_are_read_only(lexicon):
    tables = lexicon.tables(WordClass.VERB)
    with pytest.raises(TypeError):
        tables.form_to_ids["run"] = (3,)


# === Integrity ===

def test_missing_synset_is_rejected():
    with pytest.raises(LexiconIntegrityError, match="missing synset 2"):
        SynsetTables.build(WordClass.VERB, {"go": [2]}, {1: ["go"]})


def test_missing_back_reference_is_rejected():
    with pytest.raises(LexiconIntegrityError, match="missing from keys"):
        SynsetTables.build(WordClass.NOUN, {"ox": [1]}, {1: ["ox", "oxen"]})


def test_form_not_in_synset_is_rejected():
    with pytest.raises(LexiconIntegrityError, match="does not list"):
        SynsetTables.build(WordClass.NOUN, {"ox": [1], "geese": [1]}, {1: ["ox"]})


# === Bundled data ===

def test_bundled_lexicon():
    lexicon = bundled_lexicon()

    assert lexicon.word_classes == [WordClass.VERB, WordClass.NOUN]
    assert lexicon.find("went").word_class == WordClass.VERB
    assert lexicon.find("thieves").word_class == WordClass.NOUN

    hit = lexicon.find("thieves")
    assert lexicon.alternatives(hit) == ["thief", "thieves"]


def test_bundled_lexicon_is_shared():
    assert bundled_lexicon() is bundled_lexicon()


def test_bundled_ambiguous_form():
    hit = bundled_lexicon().lookup(WordClass.VERB, "lay")
    assert len(hit.synset_ids) == 2
