"""
Shared dependencies for routes.
"""

import redis

from morphsearch.core.dictionaries import bundled_lexicon
from morphsearch.core.lexicon import IrregularLexicon
from morphsearch.core.store import LexiconStore

REDIS_HOST = "localhost"
REDIS_PORT = 6379

# db → (store version, lexicon)
_published: dict[int, tuple[int, IrregularLexicon]] = {}


def get_redis(db: int = 0):
    return redis.Redis(host=REDIS_HOST, port=REDIS_PORT, db=db)


def get_lexicon_store(db: int = 0) -> LexiconStore:
    return LexiconStore(get_redis(db))


def get_lexicon(db: int | None = None) -> IrregularLexicon | None:
    """Bundled lexicon, or the one published to Redis db `db`.

    A published lexicon is reloaded only when its store version changes.
    """
    if db is None:
        return bundled_lexicon()

    store = get_lexicon_store(db)
    version = store.version()
    cached = _published.get(db)
    if cached is not None and cached[0] == version:
        return cached[1]

    lexicon = store.load()
    if lexicon is None:
        _published.pop(db, None)
    else:
        _published[db] = (version, lexicon)
    return lexicon


def clear_lexicon_cache() -> None:
    _published.clear()
