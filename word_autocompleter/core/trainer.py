# trainer.py
# Mutable word-frequency accumulator. Counts already-normalized words and is
# frozen into a Predictor once training is done.

from __future__ import annotations
from collections import Counter
from typing import Iterable
import logging

from .errors import TrainerFinalizedError
from .predictor import Predictor
from ..context.tokenizer import split_words

logger = logging.getLogger(__name__)

Word = str


class Trainer:
    """
    Single-word frequency trainer.

    A Counter keyed by word is cheap to increment but unordered, so it is a
    poor structure to search by prefix. When training is over, finalize()
    hands the counts to a Predictor, which keeps the words in lexical order.

    The trainer does no normalization: words must arrive lowercased and
    filtered (see context.normalizer.clean_line). Empty words are ignored.

    One writer at a time. For parallel ingestion train one Trainer per shard
    and merge() them before finalizing.
    """

    def __init__(self) -> None:
        self._counts: Counter = Counter()
        self._finalized = False

    @classmethod
    def from_str(cls, text: str) -> "Trainer":
        """Create a trainer already trained on `text`."""
        trainer = cls()
        trainer.train_str(text)
        return trainer

    @classmethod
    def from_words(cls, words: Iterable[Word]) -> "Trainer":
        """Create a trainer already trained on an iterable of words."""
        trainer = cls()
        trainer.train_words(words)
        return trainer

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def train_word(self, word: Word) -> None:
        self._check_open("train")
        if not word:
            return
        self._counts[word] += 1

    def train_str(self, text: str) -> None:
        """Split `text` on whitespace and count each word, left to right."""
        self.train_words(split_words(text))

    def train_words(self, words: Iterable[Word]) -> None:
        self._check_open("train")
        for w in words:
            if w:
                self._counts[w] += 1

    def merge(self, other: "Trainer") -> None:
        """Add the counts of another trainer (e.g. a shard) into this one."""
        self._check_open("merge into")
        other._check_open("merge from")
        self._counts.update(other._counts)

    # ------------------------------------------------------------------
    # Freezing
    # ------------------------------------------------------------------
    def finalize(self) -> Predictor:
        """
        Move the counts into a new Predictor and close this trainer.
        Any later training call raises TrainerFinalizedError.
        """
        self._check_open("finalize")
        counts, self._counts = self._counts, Counter()
        self._finalized = True
        predictor = Predictor(counts)
        logger.debug("finalized trainer: %d words, %d tokens", len(predictor), predictor.total)
        return predictor

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _check_open(self, op: str) -> None:
        if self._finalized:
            raise TrainerFinalizedError(op)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def count(self, word: Word) -> int:
        return self._counts.get(word, 0)

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else f"{len(self._counts)} words"
        return f"Trainer({state})"
