# tests/test_trainer.py
# unit tests for Trainer counting, merging and finalize

import itertools

import pytest

from word_autocompleter.core.errors import TrainerFinalizedError
from word_autocompleter.core.predictor import Predictor
from word_autocompleter.core.trainer import Trainer

QUOTE = (
    "anybody can become angry that is easy but to be "
    "angry with the right person and to the right degree "
    "and at the right time and for the right purpose "
    "and in the right way that is not within everybodys "
    "power and is not easy"
)


def test_from_str():
    t = Trainer.from_str("world domination is my profession hello hello")
    assert t.count("world") == 1
    assert t.count("hello") == 2


def test_from_words():
    t = Trainer.from_words(["rabbit", "rabbit", "hare"])
    assert t.count("hare") == 1
    assert t.count("rabbit") == 2


def test_train_str_counts():
    t = Trainer()
    t.train_str("hello hello hello there there")
    assert t.count("hello") == 3
    assert t.count("there") == 2
    assert t.count("nowhere") == 0
    assert len(t) == 2


def test_train_str_splits_on_any_whitespace():
    t = Trainer()
    t.train_str("  one\ttwo\n\ntwo   three  ")
    assert (t.count("one"), t.count("two"), t.count("three")) == (1, 2, 1)
    assert len(t) == 3


def test_train_str_matches_train_word():
    text = "the quick fox the dog the fox"
    a = Trainer()
    a.train_str(text)
    b = Trainer()
    for w in text.split():
        b.train_word(w)
    assert list(a.finalize().entries()) == list(b.finalize().entries())


def test_order_of_training_does_not_matter():
    words = ["the", "fox", "the", "dog"]
    expected = list(Trainer.from_words(words).finalize().entries())
    for perm in itertools.permutations(words):
        assert list(Trainer.from_words(perm).finalize().entries()) == expected


def test_empty_word_is_ignored():
    t = Trainer()
    t.train_word("")
    t.train_words(["", "a", ""])
    assert len(t) == 1
    assert "" not in t


def test_counts_only_grow():
    t = Trainer()
    seen = []
    for _ in range(5):
        t.train_word("again")
        seen.append(t.count("again"))
    assert seen == [1, 2, 3, 4, 5]


def test_merge_sums_shared_words():
    a = Trainer.from_str("cat cat dog")
    b = Trainer.from_str("cat bird")
    a.merge(b)
    assert a.count("cat") == 3
    assert a.count("dog") == 1
    assert a.count("bird") == 1
    # the shard is left untouched
    assert b.count("cat") == 1


def test_finalize_returns_predictor_and_closes_trainer():
    t = Trainer.from_str(QUOTE)
    p = t.finalize()
    assert isinstance(p, Predictor)
    assert t.finalized
    assert len(t) == 0
    with pytest.raises(TrainerFinalizedError):
        t.train_word("more")
    with pytest.raises(TrainerFinalizedError):
        t.train_str("more words")
    with pytest.raises(TrainerFinalizedError):
        t.finalize()


def test_finalize_keeps_counts():
    p = Trainer.from_str(QUOTE).finalize()
    assert p.count("and") == 5
    assert p.count("right") == 5
    assert p.count("angry") == 2
    # lexical order: "and" comes first, like the sorted entry list it is built from
    first = next(iter(p.entries()))
    assert first == ("and", 5)


def test_merge_with_finalized_trainer_fails():
    a = Trainer.from_str("x")
    b = Trainer.from_str("y")
    b.finalize()
    with pytest.raises(TrainerFinalizedError):
        a.merge(b)
    with pytest.raises(TrainerFinalizedError):
        b.merge(a)


def test_predictor_does_not_share_storage_with_trainer():
    t = Trainer.from_str("one two")
    p = Predictor.from_trainer(t)
    with pytest.raises(TrainerFinalizedError):
        t.train_word("one")
    assert p.count("one") == 1
