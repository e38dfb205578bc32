# errors.py
# Exception types raised by the trainer, the predictor and the table loaders.

from __future__ import annotations


class AutocompleteError(Exception):
    """Base class for every error raised by word_autocompleter."""


class TrainerFinalizedError(AutocompleteError):
    """A trainer was used after finalize() handed its counts to a Predictor."""

    def __init__(self, op: str) -> None:
        super().__init__(f"cannot {op}: trainer was already finalized")
        self.op = op


class DuplicateWordError(AutocompleteError):
    """A frequency table listed the same word twice under the 'error' policy."""

    def __init__(self, word: str) -> None:
        super().__init__(f"duplicate word in table: {word!r}")
        self.word = word


class InvalidEntryError(AutocompleteError, ValueError):
    """A (word, count) pair with an empty word or a negative/non-integer count."""


class TableFormatError(AutocompleteError):
    """A frequency table file has a row that is not `word,count`."""

    def __init__(self, path: str, lineno: int, reason: str) -> None:
        super().__init__(f"{path}:{lineno}: {reason}")
        self.path = path
        self.lineno = lineno
        self.reason = reason
