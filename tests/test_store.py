# tests/test_store.py
"""Tests for publishing compiled tables to Redis."""

import pytest
import redis

from morphsearch.core.compiler import compile_lines
from morphsearch.core.lexicon import WordClass
from morphsearch.core.store import LexiconStore


@pytest.fixture
def client():
    r = redis.Redis(host="localhost", port=6379, db=15)  # db=15 for tests
    try:
        r.ping()
    except redis.ConnectionError:
        pytest.skip("Redis not available")
    yield r
    for key in r.scan_iter("testmorph:*"):
        r.delete(key)


@pytest.fixture
def store(client):
    return LexiconStore(client, prefix="testmorph")


def test_nothing_published(store):
    assert store.load() is None
    assert store.get(WordClass.VERB) is None
    assert not store.has(WordClass.VERB)


def test_publish_and_load(store):
    store.publish(compile_lines(WordClass.VERB, ["lie lay lain", "lay laid"]))
    store.publish(compile_lines(WordClass.NOUN, ["mouse mice"]))

    assert store.has(WordClass.VERB)
    lexicon = store.load()
    assert lexicon.find("lay").synset_ids == (1, 2)
    assert lexicon.forms_of(WordClass.NOUN, 1) == ("mouse", "mice")


def test_publish_replaces(store):
    store.publish(compile_lines(WordClass.NOUN, ["mouse mice"]))
    store.publish(compile_lines(WordClass.NOUN, ["goose geese"]))

    lexicon = store.load()
    assert lexicon.find("mice") is None
    assert lexicon.find("geese") is not None


def test_clear(store):
    store.publish(compile_lines(WordClass.NOUN, ["mouse mice"]))
    store.clear()
    assert store.load() is None


def test_version_bumps_on_publish(store):
    assert store.version() == 0
    store.publish(compile_lines(WordClass.NOUN, ["mouse mice"]))
    first = store.version()
    store.publish(compile_lines(WordClass.NOUN, ["goose geese"]))

    assert first > 0
    assert store.version() > first
    store.clear()
    assert store.version() == 0
