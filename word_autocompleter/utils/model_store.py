# model_store.py - frequency table persistence

# A frequency table is a plain CSV file, one `word,count` row per word,
# UTF-8, decimal counts, no header. Predictors are loaded from and saved to it.

import csv
import logging
import os
from typing import Iterator, Tuple

from ..core.errors import TableFormatError
from ..core.predictor import MAX_COUNT, Predictor

logger = logging.getLogger(__name__)


def read_table(path: str) -> Iterator[Tuple[str, int]]:
    """
    Yield (word, count) rows from a table file.
    Blank lines are skipped. Raises TableFormatError with the line number
    for a row that is not exactly `word,count` with a non-empty word and a
    count between 0 and MAX_COUNT.
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        for lineno, row in enumerate(csv.reader(f), 1):
            if not row or (len(row) == 1 and not row[0].strip()):
                continue
            if len(row) != 2:
                raise TableFormatError(path, lineno, f"expected 2 fields, got {len(row)}")
            word, raw = row[0].strip(), row[1].strip()
            try:
                count = int(raw)
            except ValueError:
                raise TableFormatError(path, lineno, f"count is not an integer: {raw!r}") from None
            if not word:
                raise TableFormatError(path, lineno, "empty word")
            if count < 0:
                raise TableFormatError(path, lineno, f"negative count: {count}")
            if count > MAX_COUNT:
                raise TableFormatError(path, lineno, f"count exceeds {MAX_COUNT}: {count}")
            yield word, count


def load_predictor(path: str, on_duplicate: str = "merge") -> Predictor:
    """Load a Predictor from a table file. See Predictor.from_table for on_duplicate."""
    predictor = Predictor.from_table(read_table(path), on_duplicate=on_duplicate)
    logger.debug("loaded %d words from %s", len(predictor), path)
    return predictor


def save_predictor(predictor: Predictor, path: str) -> int:
    """
    Save a predictor's counts to a table file, in lexical order.
    Returns the number of rows written.
    """
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    n = 0
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, lineterminator="\n")
        for word, count in predictor.entries():
            writer.writerow((word, count))
            n += 1
    logger.debug("saved %d words to %s", n, path)
    return n
