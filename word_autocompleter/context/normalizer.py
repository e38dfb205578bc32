# word_autocompleter/context/normalizer.py
# One canonical normalization, shared by the corpus loader and the predictor.

import re

_word_re = re.compile(r"[^a-z]")          # a word keeps ascii letters only
_line_re = re.compile(r"[^a-z ]")         # a line also keeps its spaces
_space_re = re.compile(r"\s")


def normalize_word(token: str) -> str:
    """Lowercase `token` and drop everything outside a-z."""
    if not token:
        return ""
    return _word_re.sub("", token.lower())


def clean_line(line: str) -> str:
    """
    Clean one raw corpus line for training.
    Lowercases, turns any whitespace into a plain space, and drops
    every character that is neither a-z nor a space.
    """
    if not line:
        return ""
    line = _space_re.sub(" ", line.lower())
    return _line_re.sub("", line)
