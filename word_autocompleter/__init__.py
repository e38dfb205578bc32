"""
word_autocompleter

Frequency-based word completion: train on a corpus, freeze, then rank the
words that complete whatever the user is typing.

    from word_autocompleter import Trainer

    trainer = Trainer()
    trainer.train_str("the quick fox the dog the fox")
    predictor = trainer.finalize()
    predictor.predict("th")   # [ScoredCandidate(word='the', score=3)]
"""

from .core import (
    Trainer,
    Predictor,
    ScoredCandidate,
    AutocompleteError,
    TrainerFinalizedError,
    DuplicateWordError,
    InvalidEntryError,
    TableFormatError,
)
from .context import normalize_word, clean_line

__all__ = [
    "Trainer",
    "Predictor",
    "ScoredCandidate",
    "AutocompleteError",
    "TrainerFinalizedError",
    "DuplicateWordError",
    "InvalidEntryError",
    "TableFormatError",
    "normalize_word",
    "clean_line",
]

__version__ = "0.1.0"
