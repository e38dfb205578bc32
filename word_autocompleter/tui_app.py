# tui_app.py - Word Autocompleter TUI
# -------------------------------------------------------
# Text based terminal UI over a frozen Predictor.
# Features:
#  - Live predictions for the word being typed
#  - Colour-coded suggestion list, strongest candidates in green
#  - Accept the top suggestion with TAB
#  - Per-keystroke latency readout
# -------------------------------------------------------

from __future__ import annotations
import time
from typing import List, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Footer, Header, Input, Static

from word_autocompleter.context.tokenizer import last_token
from word_autocompleter.core.predictor import Predictor, ScoredCandidate


def format_predictions(predictions: Sequence[ScoredCandidate], shown: int = 9) -> str:
    """
    Render predictions as Rich markup, one numbered line each.
    Colour is the candidate's score relative to the top score:
    > 0.7 green, > 0.4 cyan, else yellow.
    """
    if not predictions:
        return "[dim]No suggestions[/dim]"
    top = predictions[0].score or 1
    lines = []
    for i, (word, score) in enumerate(predictions[:shown], 1):
        ratio = score / top
        color = "green" if ratio > 0.7 else "cyan" if ratio > 0.4 else "yellow"
        shown_score = f"{score:.4f}" if isinstance(score, float) else str(score)
        lines.append(f"[b]{i}[/b] • [{color}]{word}[/{color}]  [dim]{shown_score}[/dim]")
    return "\n".join(lines)


def complete_text(text: str, word: str) -> str:
    """Replace the word being typed in `text` with `word`, followed by a space."""
    partial = last_token(text)
    head = text[: len(text) - len(partial)] if partial else text
    return f"{head}{word} "


class SuggestionPanel(Static):
    """Right-side panel listing the ranked completions."""
    def update_predictions(self, predictions: Sequence[ScoredCandidate]) -> None:
        self.update(format_predictions(predictions))


class TypingLatency(Static):
    """Bottom readout showing how long the last prediction took."""
    def set_latency(self, seconds: float) -> None:
        ms = seconds * 1000
        self.update(f"[dim]Latency:[/dim] {ms:.2f}ms")


# Main Application -----------------------------------------------------------------
class AutocompleteApp(App):
    """
    Input box on the left, suggestions on the right.
    Every edit re-runs Predictor.predict(); the predictor is read-only so
    nothing here changes the model.
    """
    CSS = """
    #left { width: 2fr; }
    #right { width: 1fr; border: round $accent; padding: 0 1; }
    #bottom { height: 1; }
    """

    BINDINGS = [
        Binding("tab", "accept_top", "Accept Top Suggestion", priority=True),
        Binding("ctrl+l", "clear", "Clear"),
    ]

    # reactive values that refresh widgets when changed
    suggestions = reactive(list)
    latency = reactive(0.0)

    def __init__(self, predictor: Predictor, limit: int = 9, normalized: bool = False):
        super().__init__()
        self.predictor = predictor
        self.limit = limit
        self.normalized = normalized

    # UI --------------------------------------------------------------------
    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Container(id="left"):
                yield Input(placeholder="Start typing…", id="text_input")
            with Container(id="right"):
                yield SuggestionPanel(id="predictions")
        with Horizontal(id="bottom"):
            yield TypingLatency(id="latency")
            yield Static(f"[dim]{len(self.predictor)} words[/dim]", id="status")
        yield Footer()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Re-rank completions every time the text changes."""
        start = time.perf_counter()
        preds = self.predictor.predict(event.value, limit=self.limit, normalized=self.normalized)
        self.latency = time.perf_counter() - start
        self.suggestions = preds

    # Reactive state (watcher functions) ---------------------------------------
    def watch_suggestions(self, suggestions: List[ScoredCandidate]) -> None:
        self.query_one(SuggestionPanel).update_predictions(suggestions)

    def watch_latency(self, latency: float) -> None:
        self.query_one(TypingLatency).set_latency(latency)

    # Actions ----------------------------------------------------------------------
    def action_accept_top(self) -> None:
        if self.suggestions:
            self.accept_word(self.suggestions[0].word)

    def action_clear(self) -> None:
        self.query_one(Input).value = ""

    def accept_word(self, word: str) -> None:
        box = self.query_one(Input)
        box.value = complete_text(box.value, word)
        box.cursor_position = len(box.value)

