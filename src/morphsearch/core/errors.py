"""
Errors raised while building or loading irregular dictionaries.

The stemmer and pattern builder never raise for string input.
"""


class MalformedInputError(ValueError):
    """A word-list line that cannot be read as a synset."""

    def __init__(self, line_number: int, line: str, reason: str = "no word forms"):
        self.line_number = line_number
        self.line = line
        super().__init__(f"line {line_number}: {reason}: {line!r}")


class LexiconIntegrityError(ValueError):
    """The keys table and dict table of a lexicon disagree."""
