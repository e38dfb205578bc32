# tests/test_tui_app.py
# pure helpers behind the TUI panels

from word_autocompleter.core.predictor import Predictor, ScoredCandidate
from word_autocompleter.tui_app import AutocompleteApp, complete_text, format_predictions


def test_format_predictions_empty():
    assert "No suggestions" in format_predictions([])


def test_format_predictions_colours_by_relative_score():
    out = format_predictions([ScoredCandidate("the", 10), ScoredCandidate("then", 5), ScoredCandidate("thy", 1)])
    lines = out.splitlines()
    assert "[green]the[/green]" in lines[0]
    assert "[cyan]then[/cyan]" in lines[1]
    assert "[yellow]thy[/yellow]" in lines[2]
    assert lines[0].startswith("[b]1[/b]")


def test_format_predictions_caps_lines():
    preds = [ScoredCandidate(f"w{i}", 1) for i in range(20)]
    assert len(format_predictions(preds, shown=5).splitlines()) == 5


def test_complete_text():
    assert complete_text("the qu", "quick") == "the quick "
    assert complete_text("qu", "quick") == "quick "
    assert complete_text("the ", "fox") == "the fox "
    assert complete_text("", "fox") == "fox "


def test_app_holds_predictor():
    p = Predictor.from_table([("fox", 1)])
    app = AutocompleteApp(p, limit=3)
    assert app.predictor is p
    assert app.limit == 3
