# config_manager.py - JSON config manager

import json
import logging
import os

from ..core.predictor import DUPLICATE_POLICIES

logger = logging.getLogger(__name__)

DEFAULTS = {
    "max_suggestions": 10,
    "normalized_scores": False,
    "duplicate_policy": "merge",
    "log_path": os.path.join("logs", "autocompleter.log"),
}


class Config:
    """Settings stored as JSON and layered over DEFAULTS. A missing file is created."""

    def __init__(self, path="config.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, ValueError) as e:
                logger.warning("config %s unreadable, using defaults: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("config %s is not a JSON object, using defaults", self.path)
                return
            for k, v in loaded.items():
                if k not in self.data:
                    logger.warning("config %s: ignoring unknown option %r", self.path, k)
                    continue
                try:
                    self.data[k] = _coerce(k, v)
                except (TypeError, ValueError) as e:
                    logger.warning("config %s: bad value for %r, keeping %r: %s",
                                   self.path, k, DEFAULTS[k], e)
        else:
            self.save()

    def save(self):
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key):
        return self.data[key]

    def show(self):
        return "\n".join(f"{k:18} = {v}" for k, v in self.data.items())

    def set(self, key, val):
        """Set an option, coercing `val` to the default's type, and save.
        Raises KeyError for an unknown option, ValueError or TypeError for a bad value."""
        if key not in self.data:
            raise KeyError(f"no such option: {key}")
        self.data[key] = _coerce(key, val)
        self.save()


_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _coerce(key, val):
    """Convert `val` to the type of DEFAULTS[key] and check its range."""
    kind = type(DEFAULTS[key])
    if kind is bool:
        if isinstance(val, bool):
            return val
        if isinstance(val, str) and val.strip().lower() in _TRUE + _FALSE:
            return val.strip().lower() in _TRUE
        raise ValueError(f"expected a boolean, got {val!r}")
    if kind is int:
        if isinstance(val, bool) or isinstance(val, float) and not val.is_integer():
            raise ValueError(f"expected an integer, got {val!r}")
        if not isinstance(val, (int, float, str)):
            raise TypeError(f"expected an integer, got {type(val).__name__}")
        n = int(val)
        if n < 0:
            raise ValueError(f"must be >= 0, got {n}")
        return n
    if not isinstance(val, str):
        raise TypeError(f"expected a string, got {type(val).__name__}")
    if key == "duplicate_policy" and val not in DUPLICATE_POLICIES:
        raise ValueError(f"must be one of {', '.join(DUPLICATE_POLICIES)}, got {val!r}")
    return val
