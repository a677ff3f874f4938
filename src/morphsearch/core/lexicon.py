# src/morphsearch/core/lexicon.py
"""
Irregular lexicon for verbs and nouns.

Maps surface forms to synset ids, and synset ids back to every form.
"went" → verb synset 12 → ["go", "goes", "went", "gone"]

Built once, never mutated. Safe to share between threads.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from morphsearch.core.errors import LexiconIntegrityError


class WordClass(str, Enum):
    VERB = "v"
    NOUN = "n"


# Priority order for lookups that don't name a class.
LOOKUP_ORDER = (WordClass.VERB, WordClass.NOUN)


@dataclass(frozen=True)
class LexiconHit:
    word_class: WordClass
    synset_ids: tuple[int, ...]


@dataclass(frozen=True)
class SynsetTables:
    """The keys table and dict table for one word class."""
    word_class: WordClass
    form_to_ids: Mapping[str, tuple[int, ...]]
    id_to_forms: Mapping[int, tuple[str, ...]]

    @classmethod
    def build(
        cls,
        word_class: WordClass,
        form_to_ids: Mapping[str, Iterable[int]],
        id_to_forms: Mapping[int, Iterable[str]],
    ) -> "SynsetTables":
        """Freeze both tables and check they reference each other."""
        keys = {form: tuple(ids) for form, ids in form_to_ids.items()}
        synsets = {int(sid): tuple(forms) for sid, forms in id_to_forms.items()}
        _check_integrity(word_class, keys, synsets)
        return cls(
            word_class=WordClass(word_class),
            form_to_ids=MappingProxyType(keys),
            id_to_forms=MappingProxyType(synsets),
        )

    @property
    def synset_count(self) -> int:
        return len(self.id_to_forms)

    def to_dict(self) -> dict:
        return {
            "word_class": self.word_class.value,
            "keys": {form: list(ids) for form, ids in self.form_to_ids.items()},
            "dict": {str(sid): list(forms) for sid, forms in self.id_to_forms.items()},
        }


def _check_integrity(
    word_class: WordClass,
    keys: dict[str, tuple[int, ...]],
    synsets: dict[int, tuple[str, ...]],
) -> None:
    label = WordClass(word_class).value
    for form, ids in keys.items():
        if not ids:
            raise LexiconIntegrityError(f"[{label}] form {form!r} has no synset ids")
        for sid in ids:
            if sid not in synsets:
                raise LexiconIntegrityError(
                    f"[{label}] form {form!r} points at missing synset {sid}"
                )
            if form not in synsets[sid]:
                raise LexiconIntegrityError(
                    f"[{label}] synset {sid} does not list form {form!r}"
                )
    for sid, forms in synsets.items():
        for form in forms:
            if sid not in keys.get(form, ()):
                raise LexiconIntegrityError(
                    f"[{label}] form {form!r} of synset {sid} is missing from keys"
                )


class IrregularLexicon:
    """Read-only verb and noun tables with exact, case-sensitive lookup."""

    def __init__(self, tables: Iterable[SynsetTables] = ()):
        by_class = {}
        for t in tables:
            by_class[t.word_class] = t
        self._tables = MappingProxyType(by_class)

    @classmethod
    def empty(cls) -> "IrregularLexicon":
        return cls()

    def tables(self, word_class: WordClass) -> SynsetTables | None:
        return self._tables.get(WordClass(word_class))

    @property
    def word_classes(self) -> list[WordClass]:
        return [c for c in LOOKUP_ORDER if c in self._tables]

    def lookup(self, word_class: WordClass, word: str) -> LexiconHit | None:
        """Synset ids for `word` in one class, or None."""
        t = self.tables(word_class)
        if t is None:
            return None
        ids = t.form_to_ids.get(word)
        if not ids:
            return None
        return LexiconHit(t.word_class, ids)

    def find(self, word: str) -> LexiconHit | None:
        """Look up `word` as a verb first, then as a noun."""
        for word_class in LOOKUP_ORDER:
            hit = self.lookup(word_class, word)
            if hit is not None:
                return hit
        return None

    def forms_of(self, word_class: WordClass, synset_id: int) -> tuple[str, ...]:
        t = self.tables(word_class)
        if t is None:
            return ()
        return t.id_to_forms.get(synset_id, ())

    def alternatives(self, hit: LexiconHit) -> list[str]:
        """Every form of every synset in the hit, in order, duplicates kept."""
        forms = []
        for sid in hit.synset_ids:
            forms.extend(self.forms_of(hit.word_class, sid))
        return forms

    def __contains__(self, word: str) -> bool:
        return self.find(word) is not None

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{c.value}={self._tables[c].synset_count}" for c in self.word_classes
        )
        return f"IrregularLexicon({counts})"
