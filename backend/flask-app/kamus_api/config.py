import logging
import os

# Paths
APP_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_DATA_DIR = os.path.join(APP_DIR, "data")

DEFAULTS = {
    "KAMUS_DATA_DIR": DEFAULT_DATA_DIR,
    "KAMUS_PRELOAD": True,
    "KAMUS_SEARCH_LIMIT": 10,
    "KAMUS_SUGGEST_LIMIT": 5,
    "KAMUS_MAX_LIMIT": 100,
    "KAMUS_CACHE_MAX_AGE": 3600,
    "KAMUS_SEARCH_CACHE_MAX_AGE": 600,
    "KAMUS_LOG_LEVEL": "INFO",
    "KAMUS_ENABLE_RELOAD": True,
}

_TRUE = {"1", "true", "yes", "on"}


def log_level(key, raw, default, warnings):
    level = str(raw).strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    warnings.append(f"{key}={raw!r} is not a logging level; using {default}")
    return default


def _coerce(key, raw, default, warnings):
    if key == "KAMUS_LOG_LEVEL":
        return log_level(key, raw, default, warnings)
    if isinstance(default, bool):
        return raw.strip().lower() in _TRUE
    if isinstance(default, int):
        try:
            return int(raw)
        except ValueError:
            warnings.append(f"{key}={raw!r} is not an integer; using {default}")
            return default
    return raw


def from_env(environ=None):
    """
    Config values overridden from environment variables of the same name.
    Returns (config, warnings); warnings are logged once the app logger exists.
    """
    environ = os.environ if environ is None else environ
    config = dict(DEFAULTS)
    warnings = []
    for key, default in DEFAULTS.items():
        raw = environ.get(key)
        if raw is None or raw == "":
            continue
        config[key] = _coerce(key, raw, default, warnings)
    return config, warnings
