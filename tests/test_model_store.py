# tests/test_model_store.py
# frequency table files: read, load, save

import pytest

from word_autocompleter.core.errors import DuplicateWordError, TableFormatError
from word_autocompleter.core.trainer import Trainer
from word_autocompleter.utils.model_store import load_predictor, read_table, save_predictor


def test_read_table(tmp_path):
    p = tmp_path / "table.csv"
    p.write_text("the,3\nfox,2\n\nquick,1\n", encoding="utf-8")
    assert list(read_table(str(p))) == [("the", 3), ("fox", 2), ("quick", 1)]


def test_read_table_bad_field_count(tmp_path):
    p = tmp_path / "table.csv"
    p.write_text("the,3\nfox\n", encoding="utf-8")
    with pytest.raises(TableFormatError) as exc:
        list(read_table(str(p)))
    assert exc.value.lineno == 2
    assert str(p) in str(exc.value)


def test_read_table_bad_count(tmp_path):
    p = tmp_path / "table.csv"
    p.write_text("the,3\nfox,two\n", encoding="utf-8")
    with pytest.raises(TableFormatError) as exc:
        list(read_table(str(p)))
    assert exc.value.lineno == 2


def test_load_predictor(tmp_path):
    p = tmp_path / "table.csv"
    p.write_text("cat,5\ncar,5\ncap,2\n", encoding="utf-8")
    pred = load_predictor(str(p))
    assert pred.predict("ca") == [("car", 5), ("cat", 5), ("cap", 2)]


def test_load_predictor_duplicates(tmp_path):
    p = tmp_path / "table.csv"
    p.write_text("cat,1\ncat,2\n", encoding="utf-8")
    assert load_predictor(str(p)).count("cat") == 3
    with pytest.raises(DuplicateWordError):
        load_predictor(str(p), on_duplicate="error")


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_predictor(str(tmp_path / "nope.csv"))


def test_save_then_load(tmp_path):
    pred = Trainer.from_str("the quick fox the dog the fox").finalize()
    out = tmp_path / "models" / "table.csv"
    assert save_predictor(pred, str(out)) == 4
    assert out.read_text(encoding="utf-8") == "dog,1\nfox,2\nquick,1\nthe,3\n"
    again = load_predictor(str(out))
    assert list(again.entries()) == list(pred.entries())
    assert again.predict("th") == pred.predict("th")


@pytest.mark.parametrize("body, reason", [
    ("cat,1\n,4\n", "empty word"),
    ("cat,1\ndog,-2\n", "negative count"),
    ("cat,1\ndog,%d\n" % 2 ** 64, "exceeds"),
])
def test_read_table_bad_values(tmp_path, body, reason):
    p = tmp_path / "table.csv"
    p.write_text(body, encoding="utf-8")
    with pytest.raises(TableFormatError) as exc:
        load_predictor(str(p))
    assert exc.value.lineno == 2
    assert reason in exc.value.reason
