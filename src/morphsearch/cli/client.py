"""
HTTP client for the morphsearch API.
"""

import httpx

BASE_URL = "http://localhost:8000/api"


def _params(db: int | None) -> dict:
    return {} if db is None else {"db": db}


# === Patterns ===

def stem(word: str, db: int | None = None) -> dict:
    r = httpx.get(f"{BASE_URL}/stem/{word}", params=_params(db))
    r.raise_for_status()
    return r.json()


def fragment(word: str, db: int | None = None) -> dict:
    r = httpx.get(f"{BASE_URL}/fragment/{word}", params=_params(db))
    r.raise_for_status()
    return r.json()


def query(words: list[str], db: int | None = None) -> dict:
    r = httpx.post(f"{BASE_URL}/query", json={"words": words}, params=_params(db))
    r.raise_for_status()
    return r.json()


# === Lexicon ===

def lookup(word: str, db: int | None = None) -> dict:
    r = httpx.get(f"{BASE_URL}/lexicon/{word}", params=_params(db))
    r.raise_for_status()
    return r.json()


def synset(word_class: str, synset_id: int, db: int | None = None) -> dict:
    r = httpx.get(f"{BASE_URL}/lexicon/{word_class}/synsets/{synset_id}", params=_params(db))
    r.raise_for_status()
    return r.json()
