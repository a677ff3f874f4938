# src/morphsearch/core/store.py
"""
Compiled lexicon tables in Redis.

    morphsearch:lexicon:v:keys  → JSON {"went": [4], ...}
    morphsearch:lexicon:v:dict  → JSON {"4": ["go", "goes", "went", "gone"], ...}

Loading goes through the same integrity checks as the compiler.
"""

import json
import logging

import redis

from morphsearch.core.compiler import tables_from_json
from morphsearch.core.lexicon import IrregularLexicon, SynsetTables, WordClass

logger = logging.getLogger(__name__)


class LexiconStore:
    def __init__(self, client: redis.Redis, prefix: str = "morphsearch:lexicon"):
        self.client = client
        self.prefix = prefix

    def _keys_key(self, word_class: WordClass) -> str:
        return f"{self.prefix}:{WordClass(word_class).value}:keys"

    def _dict_key(self, word_class: WordClass) -> str:
        return f"{self.prefix}:{WordClass(word_class).value}:dict"

    def _version_key(self) -> str:
        return f"{self.prefix}:version"

    def publish(self, tables: SynsetTables) -> None:
        """Store both tables of one class, replacing what was there."""
        data = tables.to_dict()
        pipe = self.client.pipeline()
        pipe.set(self._keys_key(tables.word_class), json.dumps(data["keys"]))
        pipe.set(self._dict_key(tables.word_class), json.dumps(data["dict"]))
        pipe.incr(self._version_key())
        pipe.execute()
        logger.debug(
            "published %d %s synsets under %s",
            tables.synset_count, tables.word_class.value, self.prefix,
        )

    def version(self) -> int:
        """Bumped on every publish. 0 when nothing was ever published."""
        value = self.client.get(self._version_key())
        return int(value) if value is not None else 0

    def has(self, word_class: WordClass) -> bool:
        return bool(self.client.exists(self._keys_key(word_class)))

    def get(self, word_class: WordClass) -> SynsetTables | None:
        keys_text = self.client.get(self._keys_key(word_class))
        dict_text = self.client.get(self._dict_key(word_class))
        if keys_text is None or dict_text is None:
            return None
        return tables_from_json(word_class, keys_text.decode(), dict_text.decode())

    def load(self) -> IrregularLexicon | None:
        """Every published class as one lexicon, or None if nothing is published."""
        tables = []
        for word_class in WordClass:
            t = self.get(word_class)
            if t is not None:
                tables.append(t)
        if not tables:
            return None
        return IrregularLexicon(tables)

    def clear(self) -> None:
        """Remove all published tables. Useful for tests."""
        for key in self.client.scan_iter(f"{self.prefix}:*"):
            self.client.delete(key)
