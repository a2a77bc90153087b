"""Configuration management — JSON-based, stored in ~/.config/cycleautocomplete/."""
import enum
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class SortOrder(enum.Enum):
    ALPHABETICAL = "alphabetical"
    BY_DISTANCE = "distance"


DEFAULT_CONFIG = {
    "sort_order": "distance",  # "alphabetical" or "distance"
    "candidate_limit": 12,
    "distance_limit": 0,  # search radius in units of 1024 chars, 0 = whole document
    "skip_fuzzy_if_exact_found": False,
    "strip_trailing_word_on_accept": False,
    "word_chars": "",  # extra word characters besides letters, digits and '_'
    "hotkey_cycle_forward": "Ctrl+Space",
    "hotkey_cycle_backward": "Ctrl+Shift+Space",
    "debug_logging": False,
}

CANDIDATE_LIMIT_RANGE = (1, 100)
DISTANCE_LIMIT_RANGE = (0, 100)

CONFIG_DIR = Path.home() / ".config" / "cycleautocomplete"
CONFIG_FILE = CONFIG_DIR / "config.json"


@dataclass(frozen=True)
class CompletionSettings:
    """Snapshot of the completion options, taken when a session starts."""
    candidate_limit: int = 12
    distance_limit: int = 0
    sort_order: SortOrder = SortOrder.BY_DISTANCE
    skip_fuzzy_if_exact_found: bool = False
    strip_trailing_word_on_accept: bool = False
    word_chars: str = ""

    @classmethod
    def from_mapping(cls, data) -> "CompletionSettings":
        """Build validated settings from raw config values.

        Integers are clamped to their allowed range; values that cannot be
        interpreted fall back to the defaults.
        """
        return cls(
            candidate_limit=_as_int(data, "candidate_limit", CANDIDATE_LIMIT_RANGE),
            distance_limit=_as_int(data, "distance_limit", DISTANCE_LIMIT_RANGE),
            sort_order=_as_sort_order(data.get("sort_order", DEFAULT_CONFIG["sort_order"])),
            skip_fuzzy_if_exact_found=_as_bool(data, "skip_fuzzy_if_exact_found"),
            strip_trailing_word_on_accept=_as_bool(data, "strip_trailing_word_on_accept"),
            word_chars=str(data.get("word_chars") or ""),
        )


def _as_int(data, key, bounds) -> int:
    raw = data.get(key, DEFAULT_CONFIG[key])
    try:
        if isinstance(raw, bool):
            raise TypeError(key)
        value = int(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid %s %r, using %s", key, raw, DEFAULT_CONFIG[key])
        return DEFAULT_CONFIG[key]
    low, high = bounds
    return max(low, min(value, high))


def _as_bool(data, key) -> bool:
    raw = data.get(key, DEFAULT_CONFIG[key])
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int) and raw in (0, 1):
        return bool(raw)
    if isinstance(raw, str) and raw.strip().lower() in ("true", "false"):
        return raw.strip().lower() == "true"
    logger.warning("Invalid %s %r, using %s", key, raw, DEFAULT_CONFIG[key])
    return DEFAULT_CONFIG[key]


def _as_sort_order(raw) -> SortOrder:
    if isinstance(raw, SortOrder):
        return raw
    # 0/1 as written by the original plugin's key file
    if raw == 0 and not isinstance(raw, bool):
        return SortOrder.ALPHABETICAL
    if raw == 1 and not isinstance(raw, bool):
        return SortOrder.BY_DISTANCE
    try:
        return SortOrder(str(raw).lower())
    except ValueError:
        logger.warning("Invalid sort_order %r, sorting by distance", raw)
        return SortOrder.BY_DISTANCE


class Config:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else CONFIG_FILE
        self._data = dict(DEFAULT_CONFIG)
        self.load()

    def load(self):
        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    stored = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                logger.warning("Could not read config %s: %s", self.path, e)
                return
            if isinstance(stored, dict):
                self._data.update(stored)
            else:
                logger.warning("Ignoring config %s: top level is not an object", self.path)

    def save(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, indent=2, ensure_ascii=False)

    def set(self, key, value):
        self._data[key] = value
        self.save()

    def update(self, values):
        """Set several keys and save once."""
        self._data.update(values)
        self.save()

    def snapshot(self) -> CompletionSettings:
        return CompletionSettings.from_mapping(self._data)

    @property
    def sort_order(self) -> SortOrder:
        return _as_sort_order(self._data["sort_order"])

    @property
    def candidate_limit(self):
        return _as_int(self._data, "candidate_limit", CANDIDATE_LIMIT_RANGE)

    @property
    def distance_limit(self):
        return _as_int(self._data, "distance_limit", DISTANCE_LIMIT_RANGE)

    @property
    def skip_fuzzy_if_exact_found(self):
        return _as_bool(self._data, "skip_fuzzy_if_exact_found")

    @property
    def strip_trailing_word_on_accept(self):
        return _as_bool(self._data, "strip_trailing_word_on_accept")

    @property
    def word_chars(self):
        return str(self._data.get("word_chars") or "")

    @property
    def hotkey_cycle_forward(self):
        return self._data.get("hotkey_cycle_forward", DEFAULT_CONFIG["hotkey_cycle_forward"])

    @property
    def hotkey_cycle_backward(self):
        return self._data.get("hotkey_cycle_backward", DEFAULT_CONFIG["hotkey_cycle_backward"])

    @property
    def debug_logging(self):
        return _as_bool(self._data, "debug_logging")
