# word_autocompleter/utils/__init__.py
# collaborators around the core: corpus files, frequency tables, config, logging

from .config_manager import Config
from .corpus_loader import iter_corpus_lines, train_file, train_files
from .logger_utils import Log
from .model_store import read_table, load_predictor, save_predictor

__all__ = [
    "Config",
    "Log",
    "iter_corpus_lines",
    "train_file",
    "train_files",
    "read_table",
    "load_predictor",
    "save_predictor",
]
