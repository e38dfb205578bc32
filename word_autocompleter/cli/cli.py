"""
cli.py - command line interface for the word autocompleter
Features:
- Builds a predictor from raw corpus files or a saved frequency table
- One-shot queries (--query) printing `score<TAB>word` rows for scripts
- Interactive loop with rich tables of ranked completions
- Slash commands for limit, score mode, stats and saving the table
- Optional live-typing TUI (--tui)
"""

import argparse
import sys
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table
from rich import box

from word_autocompleter.core.errors import AutocompleteError
from word_autocompleter.core.predictor import Predictor, ScoredCandidate
from word_autocompleter.utils.config_manager import Config
from word_autocompleter.utils.corpus_loader import train_file
from word_autocompleter.core.trainer import Trainer
from word_autocompleter.utils.logger_utils import Log
from word_autocompleter.utils.model_store import load_predictor, save_predictor

# initialise console for rich output
console = Console()

HELP = (
    "Type text to see completions for its last word.\n"
    "Commands: /help /limit <n> /normalized /stats /save <path> /quit"
)


def format_score(score) -> str:
    if isinstance(score, float):
        return f"{score:.6f}"
    return str(score)


class CLI:
    """Interactive loop over a frozen Predictor."""
    def __init__(self, predictor: Predictor, limit: int = 10, normalized: bool = False,
                 log: Optional[Log] = None, out: Optional[Console] = None):
        self.predictor = predictor
        self.limit = limit
        self.normalized = normalized
        self.log = log
        self.console = out or console
        self.running = True

    def run(self):
        """
        Main interactive loop:
        - Prompts the user for input
        - Slash commands go to _handle_command, anything else is predicted
        """
        self.console.rule("[bold magenta]Word Autocompleter[/bold magenta]")
        self.console.print(f"[cyan]{HELP}[/cyan]\n")
        while self.running:
            try:
                fragment = Prompt.ask("[green]Input[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            self.handle_line(fragment)

    def handle_line(self, line: str):
        if line.startswith("/"):
            self._handle_command(line)
            return
        if not line.strip():
            return
        self._display(self.predictor.predict(line, limit=self.limit, normalized=self.normalized))

    # COMMAND HANDLING -----------------------------------------------------------
    def _handle_command(self, cmd: str):
        parts = cmd.split()
        name, args = parts[0].lower(), parts[1:]

        if name in ("/q", "/quit", "/exit"):
            self.running = False
            return

        if name == "/help":
            self.console.print(HELP)
            return

        if name == "/limit":
            if len(args) != 1 or not args[0].isdigit():
                self.console.print("[red]usage:[/red] /limit <n>")
                return
            self.limit = int(args[0])
            self.console.print(f"limit = {self.limit}")
            return

        if name == "/normalized":
            self.normalized = not self.normalized
            self.console.print(f"normalized scores: {'on' if self.normalized else 'off'}")
            return

        if name == "/stats":
            self._show_stats()
            return

        if name == "/save":
            if len(args) != 1:
                self.console.print("[red]usage:[/red] /save <path>")
                return
            self._save(args[0])
            return

        self.console.print(f"[red]Unknown command:[/red] {cmd}")

    # DISPLAY -------------------------------------------------------------------------------
    def _display(self, predictions: List[ScoredCandidate]):
        if not predictions:
            self.console.print("[dim](no suggestions)[/dim]")
            return
        table = Table(title="Predictions", box=box.SIMPLE, show_edge=False)
        table.add_column("Score", justify="right", style="magenta")
        table.add_column("Word", style="bold")
        for word, score in predictions:
            table.add_row(format_score(score), word)
        self.console.print(table)

    def _show_stats(self):
        table = Table(title="Model", box=box.MINIMAL)
        table.add_column("Metric", style="cyan")
        table.add_column("Value")
        table.add_row("Words", str(len(self.predictor)))
        table.add_row("Tokens", str(self.predictor.total))
        table.add_row("Limit", str(self.limit))
        table.add_row("Normalized", "yes" if self.normalized else "no")
        self.console.print(table)

    def _save(self, path: str):
        try:
            n = save_predictor(self.predictor, path)
        except OSError as e:
            if self.log:
                self.log.error(f"save {path}: {e}")
            self.console.print(f"[red]Save failed:[/red] {e}")
            return
        if self.log:
            self.log.info(f"saved {n} words to {path}")
        self.console.print(f"[green]Saved {n} words to {path}[/green]")


# ENTRY POINT ---------------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="word-autocompleter",
        description="Frequency-ranked word completion from a text corpus or a frequency table.",
    )
    src = p.add_mutually_exclusive_group()
    src.add_argument("--corpus", action="append", metavar="PATH",
                     help="raw text file to train on (repeatable)")
    src.add_argument("--table", metavar="PATH", help="word,count table to load")
    p.add_argument("--save-table", metavar="PATH", help="write the model's word,count table here")
    p.add_argument("--config", default="config.json", metavar="PATH", help="JSON config file")
    p.add_argument("--limit", type=int, help="max suggestions (config: max_suggestions)")
    p.add_argument("--normalized", action="store_true", default=None,
                   help="score as share of the corpus instead of raw counts")
    p.add_argument("--query", metavar="TEXT", help="print completions for TEXT and exit")
    p.add_argument("--tui", action="store_true", help="start the live-typing terminal UI")
    return p


def build_predictor(args, cfg: Config, log: Log) -> Predictor:
    if args.table:
        with log.time_block("load table"):
            predictor = load_predictor(args.table, on_duplicate=cfg.get("duplicate_policy"))
        log.info(f"loaded {len(predictor)} words from {args.table}")
        return predictor

    trainer = Trainer()
    with log.time_block("training"):
        for path in args.corpus:
            n = train_file(trainer, path)
            log.info(f"trained on {n} lines from {path}")
    with log.time_block("finalize"):
        predictor = trainer.finalize()
    log.info(f"model ready: {len(predictor)} words, {predictor.total} tokens")
    return predictor


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.corpus and not args.table:
        parser.print_usage(sys.stderr)
        print("error: one of --corpus or --table is required", file=sys.stderr)
        return 1
    if args.limit is not None and args.limit < 0:
        parser.error("--limit must be >= 0")

    cfg = Config(args.config)
    log = Log(path=cfg.get("log_path"), stream=sys.stderr)
    limit = args.limit if args.limit is not None else cfg.get("max_suggestions")
    normalized = args.normalized if args.normalized is not None else cfg.get("normalized_scores")

    try:
        predictor = build_predictor(args, cfg, log)
        if args.save_table:
            n = save_predictor(predictor, args.save_table)
            log.info(f"saved {n} words to {args.save_table}")
    except (OSError, AutocompleteError) as e:
        log.error(str(e))
        return 1

    if args.query is not None:
        for word, score in predictor.predict(args.query, limit=limit, normalized=normalized):
            print(f"{format_score(score)}\t{word}")
        return 0

    if args.tui:
        from word_autocompleter.tui_app import AutocompleteApp
        AutocompleteApp(predictor, limit=limit, normalized=normalized).run()
        return 0

    CLI(predictor, limit=limit, normalized=normalized, log=log).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
