"""
In-memory KBBI (Kamus Besar Bahasa Indonesia) lookup engine.
Exposes:
- KamusEngine
- EngineHolder, load_engine
- normalize_word
- distance, bounded_distance
"""

from .engine import KamusEngine  # noqa: F401
from .entries import normalize_word  # noqa: F401
from .errors import DatasetError, IndexUnavailable, KamusError  # noqa: F401
from .levenshtein import bounded_distance, distance  # noqa: F401
from .loader import EngineHolder, load_engine  # noqa: F401

__all__ = [
    "KamusEngine",
    "EngineHolder",
    "load_engine",
    "normalize_word",
    "distance",
    "bounded_distance",
    "KamusError",
    "DatasetError",
    "IndexUnavailable",
]
