"""
Offline preparation of the KBBI dataset.

Turns raw part files (kbbi_v_part1.json, kbbi_v_part2.json, ...) into the three
files the engine loads:
  - entries.json
  - word-index.json
  - non-standard-index.json

Usage:
  kamus-prepare --source path/to/kbbi-v/json --output backend/flask-app/data
"""

import argparse
import glob
import json
import logging
import os
import sys

import ujson

from .entries import normalize_word, senses
from .errors import DatasetError
from .indexes import build_non_standard_index, build_word_index
from .loader import NON_STANDARD_INDEX_FILE, WORD_INDEX_FILE

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "kbbi_v_part*.json"
ENTRIES_FILE = "entries.json"


def _multi_json_objects(text: str) -> list:
    """
    Decode a file that may hold several JSON documents back to back.
    Malformed stretches are skipped one character at a time.
    """
    objs = []
    dec = json.JSONDecoder()
    idx = 0
    n = len(text)
    while idx < n:
        while idx < n and text[idx].isspace():
            idx += 1
        if idx >= n:
            break
        try:
            obj, end = dec.raw_decode(text, idx)
            objs.append(obj)
            idx = end
        except ValueError:
            idx += 1
    return objs


def _is_record(obj) -> bool:
    if not isinstance(obj, dict):
        return False
    data = obj.get("data")
    return isinstance(obj.get("entri"), list) or (isinstance(data, dict) and "entri" in data)


def _record_key(record) -> str:
    for sense in senses(record):
        nama = sense.get("nama")
        if isinstance(nama, str) and nama.strip():
            return normalize_word(nama)
    return ""


def iter_keyed_records(obj):
    """
    Yield (raw_key, record) pairs from one decoded document. Supports:
      - {word: record, ...}
      - [record, ...]           key taken from the first sense's "nama"
      - a single record         same
    """
    if isinstance(obj, list):
        for it in obj:
            yield from iter_keyed_records(it)
    elif _is_record(obj):
        yield _record_key(obj), obj
    elif isinstance(obj, dict):
        for k, v in obj.items():
            if isinstance(k, str) and isinstance(v, dict):
                yield k, v


def read_part(path) -> list:
    """Decoded documents from one part file; ujson first, multi-document fallback."""
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    try:
        return [ujson.loads(raw)]
    except ValueError:
        return _multi_json_objects(raw)


def prepare_dataset(parts):
    """
    Pure transform: iterable of decoded documents -> (entries, words, non_standard).

    Headwords are normalized; when a later part repeats a headword its
    record replaces the earlier one.
    """
    entries = {}
    for doc in parts:
        for raw_key, record in iter_keyed_records(doc):
            key = normalize_word(raw_key)
            if key:
                entries[key] = record
    words = list(build_word_index(entries))
    non_standard = build_non_standard_index(entries)
    return entries, words, non_standard


def _write_json(path, obj):
    with open(path, "w", encoding="utf-8") as f:
        ujson.dump(obj, f, ensure_ascii=False)


def prepare_directory(source, output, pattern=DEFAULT_PATTERN) -> dict:
    paths = sorted(glob.glob(os.path.join(source, pattern)))
    if not paths:
        raise DatasetError(f"no files matching {pattern!r} in {source}")

    docs = []
    for p in paths:
        logger.info("Processing %s", os.path.basename(p))
        try:
            docs.extend(read_part(p))
        except OSError as e:
            raise DatasetError(f"cannot read {p}: {e}") from e

    entries, words, non_standard = prepare_dataset(docs)

    os.makedirs(output, exist_ok=True)
    _write_json(os.path.join(output, ENTRIES_FILE), entries)
    _write_json(os.path.join(output, WORD_INDEX_FILE), words)
    _write_json(os.path.join(output, NON_STANDARD_INDEX_FILE), non_standard)

    summary = {
        "parts": len(paths),
        "entries": len(entries),
        "words": len(words),
        "non_standard_forms": len(non_standard),
    }
    logger.info(
        "Prepared %(entries)d entries, %(words)d unique words, "
        "%(non_standard_forms)d non-standard forms from %(parts)d parts",
        summary,
    )
    return summary


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="kamus-prepare", description="Prepare the KBBI dataset for the lookup engine.")
    parser.add_argument("--source", required=True, help="directory with raw KBBI part files")
    parser.add_argument("--output", required=True, help="data directory the API loads from")
    parser.add_argument("--pattern", default=DEFAULT_PATTERN, help="glob for part files (default: %(default)s)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        prepare_directory(args.source, args.output, args.pattern)
    except DatasetError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
