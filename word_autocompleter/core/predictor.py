# predictor.py
# Immutable prefix predictor: ranks the words of a frozen vocabulary that
# start with the token the user is typing.

from __future__ import annotations
from bisect import bisect_left, bisect_right
from collections import defaultdict
from operator import index
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Mapping, NamedTuple, Optional, Tuple, Union
import logging

import numpy as np

from .errors import DuplicateWordError, InvalidEntryError
from ..context.normalizer import normalize_word
from ..context.tokenizer import last_token

if TYPE_CHECKING:
    from .trainer import Trainer

logger = logging.getLogger(__name__)

Word = str
Score = Union[int, float]
TableRow = Tuple[Word, int]

DUPLICATE_POLICIES = ("merge", "error")

# counts live in an int64 array
MAX_COUNT = int(np.iinfo(np.int64).max)


class ScoredCandidate(NamedTuple):
    """One ranked completion. Compares equal to a plain (word, score) tuple."""
    word: Word
    score: Score


class Predictor:
    """
    Frozen single-word prediction engine.

    Words are kept in a sorted tuple with a parallel read-only numpy array of
    counts. A prefix query is two binary searches for the block of words
    sharing the prefix, then a stable sort of that block by count, so equal
    counts stay in lexical order.

    Nothing is mutated after construction, so one Predictor can serve any
    number of concurrent readers without locking.

    Build one with Trainer.finalize(), Predictor.from_trainer() or
    Predictor.from_table(); the constructor takes an already-validated
    word -> count mapping.
    """

    __slots__ = ("_words", "_counts", "_total")

    def __init__(self, counts: Mapping[Word, int]) -> None:
        words = tuple(sorted(counts))
        arr = np.fromiter((counts[w] for w in words), dtype=np.int64, count=len(words))
        arr.setflags(write=False)
        object.__setattr__(self, "_words", words)
        object.__setattr__(self, "_counts", arr)
        # python int: the total may exceed int64
        object.__setattr__(self, "_total", sum(int(n) for n in counts.values()))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Predictor is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Predictor is immutable")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_trainer(cls, trainer: "Trainer") -> "Predictor":
        """Freeze a trainer. Same as trainer.finalize(); the trainer is closed."""
        return trainer.finalize()

    @classmethod
    def from_table(cls, pairs: Iterable[TableRow], on_duplicate: str = "merge") -> "Predictor":
        """
        Build a predictor from (word, count) rows, e.g. a saved frequency table.

        on_duplicate:
          "merge" - a word listed more than once gets the sum of its counts
          "error" - a repeated word raises DuplicateWordError

        Raises InvalidEntryError for an empty word or a count that is not a
        non-negative integer, or a count (after merging duplicates) above
        MAX_COUNT.
        """
        if on_duplicate not in DUPLICATE_POLICIES:
            raise ValueError(f"unknown duplicate policy: {on_duplicate!r}")

        counts: Dict[Word, int] = defaultdict(int)
        merged = 0
        for word, raw in pairs:
            if not word:
                raise InvalidEntryError("empty word in table")
            try:
                n = index(raw)
            except TypeError:
                raise InvalidEntryError(f"count for {word!r} is not an integer: {raw!r}") from None
            if n < 0:
                raise InvalidEntryError(f"negative count for {word!r}: {n}")
            if word in counts:
                if on_duplicate == "error":
                    raise DuplicateWordError(word)
                merged += 1
            counts[word] += n
            if counts[word] > MAX_COUNT:
                raise InvalidEntryError(f"count for {word!r} exceeds {MAX_COUNT}: {counts[word]}")

        if merged:
            logger.debug("merged %d duplicate table rows", merged)
        return cls(counts)

    # ------------------------------------------------------------------
    # Prediction (public API)
    # ------------------------------------------------------------------
    def predict(self, text: str, limit: Optional[int] = None, normalized: bool = False) -> List[ScoredCandidate]:
        """
        Rank completions for the last word of `text`.

        The last whitespace-delimited token is normalized (lowercase, a-z)
        and every vocabulary word starting with it is returned, highest
        count first, ties in lexical order. Scores are raw counts, or the
        share of all counted words when `normalized` is set.

        Returns [] when there is nothing to complete or nothing matches.
        `limit` caps the result length; None returns every match.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")

        prefix = normalize_word(last_token(text))
        if not prefix or limit == 0:
            return []

        lo, hi = self._prefix_range(prefix)
        if lo == hi:
            return []

        window = self._counts[lo:hi]
        order = np.argsort(-window, kind="stable")
        if limit is not None:
            order = order[:limit]

        words = self._words
        if normalized:
            total = self._total or 1
            return [ScoredCandidate(words[lo + i], int(window[i]) / total) for i in order.tolist()]
        return [ScoredCandidate(words[lo + i], int(window[i])) for i in order.tolist()]

    def _prefix_range(self, prefix: Word) -> Tuple[int, int]:
        lo = bisect_left(self._words, prefix)
        hi = bisect_right(self._words, prefix + "\U0010ffff", lo)
        return lo, hi

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def _find(self, word: Word) -> int:
        i = bisect_left(self._words, word)
        if i < len(self._words) and self._words[i] == word:
            return i
        return -1

    def count(self, word: Word) -> int:
        i = self._find(word)
        return int(self._counts[i]) if i >= 0 else 0

    @property
    def total(self) -> int:
        """Sum of all counts: the number of word occurrences trained on."""
        return self._total

    def entries(self) -> Iterator[TableRow]:
        """(word, count) rows in lexical order, the shape from_table() reads."""
        return zip(self._words, self._counts.tolist())

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self._find(word) >= 0

    def __repr__(self) -> str:
        return f"Predictor({len(self._words)} words, total={self._total})"
