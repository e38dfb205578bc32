# corpus_loader.py - feeds raw text files to a Trainer

import logging
from typing import Iterable, Iterator

from ..context.normalizer import clean_line
from ..core.trainer import Trainer

logger = logging.getLogger(__name__)


def iter_corpus_lines(path: str) -> Iterator[str]:
    """Yield the cleaned, non-blank lines of a UTF-8 text file."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            cleaned = clean_line(line).strip()
            if cleaned:
                yield cleaned


def train_file(trainer: Trainer, path: str) -> int:
    """Train `trainer` on every cleaned line of `path`. Returns lines used."""
    n = 0
    for line in iter_corpus_lines(path):
        trainer.train_str(line)
        n += 1
    logger.debug("trained on %d lines from %s", n, path)
    return n


def train_files(paths: Iterable[str]) -> Trainer:
    """Return a new Trainer trained on each file in turn."""
    trainer = Trainer()
    for p in paths:
        train_file(trainer, p)
    return trainer
