# logger_utils.py - for logging messages and timing metrics for the tools around the core

import os
import sys
import time
from datetime import datetime
from typing import Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

# Directory where log files are stored by default
LOG_DIR = "logs"

# Path to the default log file, can be overriden per Log instance
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "autocompleter.log")


class Log:
    """Lightweight logger: appends to a log file and echoes to the console in colour."""
    COLORS = {
        "DEBUG": Fore.LIGHTBLACK_EX,
        "INFO": Fore.BLUE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "METRIC": Fore.MAGENTA,
    }

    def __init__(self, path: Optional[str] = None, use_color: bool = True,
                 stream: Optional[TextIO] = None, echo: bool = True):
        self.path = path or DEFAULT_LOG_PATH
        self.use_color = use_color
        self.stream = stream
        self.echo = echo

    def write(self, level: str, msg: str) -> str:
        """
        Append a log message to the log file with a timestamp.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        Returns the line written.
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as f:
            f.write(line + "\n")

        if self.echo:
            # resolve the stream per call so redirected stdout/stderr are honoured
            out = self.stream or sys.stdout
            if self.use_color and level in self.COLORS:
                print(f"{self.COLORS[level]}{line}{Style.RESET_ALL}", file=out)
            else:
                print(line, file=out)
        return line

    # Public logging methods
    def debug(self, msg: str) -> str:
        return self.write("DEBUG", msg)

    def info(self, msg: str) -> str:
        return self.write("INFO", msg)

    def warning(self, msg: str) -> str:
        return self.write("WARNING", msg)

    def error(self, msg: str) -> str:
        return self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> str:
        """
        Record a metric (timing, counts, sizes).
        Example: [2026-10-19 12:45:02] METRIC  | train done: 0.123s
        """
        return self.write("METRIC", f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("training"):
                do_some_work()
        It logs how long the block took when it exits.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label: str):
        self.log = log
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """On exit, record the duration (seconds, rounded) as a metric. Exceptions propagate."""
        self.elapsed = time.perf_counter() - self.start
        self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
        return False
