# src/morphsearch/core/stemmer.py
"""
Conservative Porter stemmer.

Follows the classic Porter steps, but never puts letters back:
"hoping" → "hop", "agreed" → "agr", "happy" → "happ". The stem is
always a prefix of some transformation of the input, so a trailing
wildcard on it still matches the original word.

    stem("running")  → "run"
    stem("searches") → "search"

`stem_word` adds the irregular check: when a regular-looking word
reduces to a form the lexicon knows ("running" → "run"), the result
carries that hit.
"""

import logging
from dataclasses import dataclass
from itertools import groupby

from morphsearch.core.lexicon import IrregularLexicon, LexiconHit

logger = logging.getLogger(__name__)


VOWELS = frozenset("aeiou")

# Stand-in for a protected initial "y". Not a vowel, not "y".
PROTECTED_Y = "Y"


# === Predicates ===

def is_consonant(word: str, i: int) -> bool:
    ch = word[i]
    if ch in VOWELS:
        return False
    if ch == "y":
        # y after a consonant is a vowel
        return i == 0 or not is_consonant(word, i - 1)
    return True


def cv_shape(word: str) -> str:
    """'c'/'v' per letter, runs collapsed. "trouble" → "cvcv"."""
    marks = ("c" if is_consonant(word, i) else "v" for i in range(len(word)))
    return "".join(k for k, _ in groupby(marks))


def measure(stem: str) -> int:
    """Porter's m: the number of vowel-run → consonant-run transitions.

       tr, ee, tree, y, by         m=0
       trouble, oats, trees, ivy   m=1
       troubles, private, oaten    m=2
    """
    return cv_shape(stem).count("vc")


def has_vowel(stem: str) -> bool:
    return any(not is_consonant(stem, i) for i in range(len(stem)))


def ends_double_consonant(stem: str) -> bool:
    return (
        len(stem) >= 2
        and stem[-1] == stem[-2]
        and is_consonant(stem, len(stem) - 1)
    )


def ends_cvc(stem: str) -> bool:
    """*o: consonant-vowel-consonant at the end, last one not w, x or y."""
    n = len(stem)
    if n < 3:
        return False
    return (
        is_consonant(stem, n - 3)
        and not is_consonant(stem, n - 2)
        and is_consonant(stem, n - 1)
        and stem[-1] not in "wxy"
    )


def _longest_suffix(word: str, suffixes) -> str | None:
    best = None
    for suffix in suffixes:
        if word.endswith(suffix) and (best is None or len(suffix) > len(best)):
            best = suffix
    return best


# === Steps ===
# Each step takes a candidate and returns the next one.

def step_1a(word: str) -> str:
    if word.endswith("sses"):
        return word[:-2]
    if word.endswith("ies"):
        # "ties" → "tie", "cries" → "cri", but "bunnies" → "bunn" so "bunny" still matches
        if len(word) <= 4:
            return word[:-1]
        if has_vowel(word[:-3]):
            return word[:-3]
        return word[:-2]
    if word.endswith("s") and not word.endswith("ss"):
        return word[:-1]
    return word


def step_1b(word: str) -> str:
    if word.endswith("eed"):
        stem = word[:-3]
        return stem if measure(stem) > 0 else word

    for suffix in ("ed", "ing"):
        if word.endswith(suffix):
            stem = word[: -len(suffix)]
            if has_vowel(stem):
                return _tidy_1b(stem)
            return word
    return word


def _tidy_1b(stem: str) -> str:
    # at/bl/iz and *o stems are left as they are: no "e" is added
    if stem.endswith(("at", "bl", "iz")):
        return stem
    if ends_double_consonant(stem) and stem[-1] not in "lsz":
        return stem[:-1]
    return stem


def step_1c(word: str) -> str:
    if word.endswith("y") and has_vowel(word[:-1]):
        return word[:-1]
    return word


STEP_2_SUFFIXES = {
    "ational": "ate",
    "tional": "tion",
    "enci": "ence",
    "anci": "ance",
    "izer": "ize",
    "bli": "ble",
    "alli": "al",
    "entli": "ent",
    "eli": "e",
    "ousli": "ous",
    "ization": "ize",
    "ation": "ate",
    "ator": "ate",
    "alism": "al",
    "iveness": "ive",
    "fulness": "ful",
    "ousness": "ous",
    "aliti": "al",
    "iviti": "ive",
    "biliti": "ble",
    "logi": "log",
}

STEP_3_SUFFIXES = {
    "icate": "ic",
    "ative": "",
    "alize": "al",
    "iciti": "ic",
    "ical": "ic",
    "ful": "",
    "ness": "",
}

STEP_4_SUFFIXES = (
    "al", "ance", "ence", "er", "ic", "able", "ible", "ant", "ement",
    "ment", "ent", "ou", "ism", "ate", "iti", "ous", "ive", "ize", "ion",
)


def _replace_suffix(word: str, table: dict[str, str]) -> str:
    suffix = _longest_suffix(word, table)
    if suffix is None:
        return word
    stem = word[: -len(suffix)]
    if measure(stem) > 0:
        return stem + table[suffix]
    return word


def step_2(word: str) -> str:
    return _replace_suffix(word, STEP_2_SUFFIXES)


def step_3(word: str) -> str:
    return _replace_suffix(word, STEP_3_SUFFIXES)


def step_4(word: str) -> str:
    suffix = _longest_suffix(word, STEP_4_SUFFIXES)
    if suffix is None:
        return word
    stem = word[: -len(suffix)]
    if suffix == "ion" and not stem.endswith(("s", "t")):
        return word
    if measure(stem) > 1:
        return stem
    return word


def step_5a(word: str) -> str:
    if not word.endswith("e"):
        return word
    stem = word[:-1]
    m = measure(stem)
    if m > 1 or (m == 1 and not ends_cvc(stem)):
        return stem
    return word


def step_5b(word: str) -> str:
    if word.endswith("ll") and measure(word[:-1]) > 1:
        return word[:-1]
    return word


STEPS = (step_1a, step_1b, step_1c, step_2, step_3, step_4, step_5a, step_5b)


# === Entry points ===

def _protect(word: str) -> str:
    if word.startswith("y"):
        return PROTECTED_Y + word[1:]
    return word


def _restore(original: str, candidate: str) -> str:
    if original.startswith("y") and candidate:
        return original[0] + candidate[1:]
    return candidate


def stem(word: str) -> str:
    """Stem a single word. Words of two letters or fewer come back unchanged."""
    if len(word) <= 2:
        return word
    candidate = _protect(word)
    for step in STEPS:
        candidate = step(candidate)
    return _restore(word, candidate)


@dataclass(frozen=True)
class StemResult:
    word: str
    stem: str
    irregular: LexiconHit | None = None

    @property
    def is_irregular(self) -> bool:
        return self.irregular is not None


def stem_word(word: str, lexicon: IrregularLexicon) -> StemResult:
    """Stem `word`, checking the lexicon after step 1a and again at the end.

    A hit after step 1a ends stemming with that candidate as the stem.
    """
    if len(word) <= 2:
        return StemResult(word, word)

    candidate = step_1a(_protect(word))
    hit = _check_irregular(word, _restore(word, candidate), lexicon)
    if hit is not None:
        return StemResult(word, _restore(word, candidate), hit)

    for step in STEPS[1:]:
        candidate = step(candidate)
    result = _restore(word, candidate)
    return StemResult(word, result, _check_irregular(word, result, lexicon))


def _check_irregular(original: str, candidate: str, lexicon: IrregularLexicon) -> LexiconHit | None:
    if candidate == original:
        return None
    hit = lexicon.find(candidate)
    if hit is not None:
        logger.debug("%r reduced to irregular %r (%s)", original, candidate, hit.word_class.value)
    return hit
