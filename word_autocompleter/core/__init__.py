"""
word_autocompleter.core

The training-to-prediction pipeline.
Contains:
 - the mutable word-frequency accumulator (Trainer)
 - the frozen, prefix-ranking query structure (Predictor) and its results (ScoredCandidate)
 - the error types both raise
"""

from .errors import (
    AutocompleteError,
    TrainerFinalizedError,
    DuplicateWordError,
    InvalidEntryError,
    TableFormatError,
)
from .predictor import Predictor, ScoredCandidate
from .trainer import Trainer

__all__ = [
    "Trainer",
    "Predictor",
    "ScoredCandidate",
    "AutocompleteError",
    "TrainerFinalizedError",
    "DuplicateWordError",
    "InvalidEntryError",
    "TableFormatError",
]
