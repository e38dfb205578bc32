# word_autocompleter/context/__init__.py
# text handling shared by training and querying

from .normalizer import normalize_word, clean_line  # canonical word/line normalization
from .tokenizer import split_words, last_token  # whitespace tokenization

__all__ = [
    "normalize_word",
    "clean_line",
    "split_words",
    "last_token",
]
