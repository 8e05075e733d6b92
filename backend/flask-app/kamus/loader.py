"""
Load the prepared dataset from disk and hand out one shared engine.

Files expected in the data directory (written by `kamus-prepare`):
  - entries.json              {headword: entry record}; extra shards entries*.json are merged
  - word-index.json           [headword, ...]
  - non-standard-index.json   {non-standard spelling: headword}
"""

import glob
import logging
import os
import threading

import ujson

from .engine import KamusEngine

logger = logging.getLogger(__name__)

ENTRIES_GLOB = "entries*.json"
WORD_INDEX_FILE = "word-index.json"
NON_STANDARD_INDEX_FILE = "non-standard-index.json"


def _read_json(path, expected_type):
    """
    Parse one JSON file. Returns None (after a warning) when the file is
    missing, unreadable, or not of the expected top-level type.
    """
    if not os.path.exists(path):
        logger.warning("%s not found. Please run: kamus-prepare", path)
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            obj = ujson.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Failed loading %s: %s", path, e)
        return None
    if not isinstance(obj, expected_type):
        logger.warning("Ignoring %s: expected %s, got %s", path, expected_type.__name__, type(obj).__name__)
        return None
    return obj


def load_entries(data_dir) -> dict:
    """
    Merge entries*.json shards in sorted path order.
    The first occurrence of a headword wins; later shards never overwrite it.
    """
    combined = {}
    paths = sorted(glob.glob(os.path.join(data_dir, ENTRIES_GLOB)))
    if not paths:
        logger.warning("No %s in %s. Please run: kamus-prepare", ENTRIES_GLOB, data_dir)
    for p in paths:
        obj = _read_json(p, dict)
        if not obj:
            continue
        for k, v in obj.items():
            if k not in combined:
                combined[k] = v
    return combined


def load_word_index(data_dir) -> list:
    return _read_json(os.path.join(data_dir, WORD_INDEX_FILE), list) or []


def load_non_standard_index(data_dir):
    """None when the file is absent so the engine derives it from the entries."""
    path = os.path.join(data_dir, NON_STANDARD_INDEX_FILE)
    if not os.path.exists(path):
        return None
    obj = _read_json(path, dict)
    if obj is None:
        return None
    return {k: v for k, v in obj.items() if isinstance(k, str) and isinstance(v, str)}


def load_engine(data_dir) -> KamusEngine:
    """Build an engine from a data directory. Never raises for bad files; may be empty."""
    entries = load_entries(data_dir)
    words = load_word_index(data_dir)
    non_standard = load_non_standard_index(data_dir)
    engine = KamusEngine(entries, words, non_standard)
    stats = engine.stats()
    logger.info(
        "Loaded KBBI dataset from %s: %d entries, %d words, %d non-standard forms",
        data_dir, stats["total_entries"], stats["total_words"], stats["non_standard_forms"],
    )
    return engine


class EngineHolder:
    """
    Lazily builds one engine for a data directory and returns it to every caller.

    The first get() builds under a lock; later calls return the same
    instance without locking. reload() builds a replacement and swaps the
    reference, so requests already holding the old engine finish on it.
    """

    def __init__(self, data_dir, factory=load_engine):
        self.data_dir = data_dir
        self._factory = factory
        self._engine = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._engine is not None

    def get(self) -> KamusEngine:
        engine = self._engine
        if engine is not None:
            return engine
        with self._lock:
            if self._engine is None:
                self._engine = self._factory(self.data_dir)
            return self._engine

    def reload(self) -> KamusEngine:
        fresh = self._factory(self.data_dir)
        with self._lock:
            self._engine = fresh
        return fresh
