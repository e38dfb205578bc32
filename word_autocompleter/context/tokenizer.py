# word_autocompleter/context/tokenizer.py
# whitespace tokenizer used for training strings and query input

from typing import List


def split_words(text: str) -> List[str]:
    """Return the whitespace-delimited tokens of `text`, empties removed."""
    if not text:
        return []
    return text.split()


def last_token(text: str) -> str:
    """
    Return the token the user is still typing.
    Empty when `text` is empty or ends in whitespace: the last word is finished.
    """
    if not text or text[-1].isspace():
        return ""
    toks = text.split()
    return toks[-1] if toks else ""
