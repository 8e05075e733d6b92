"""
Word index and non-standard index construction.

Both are built once, before the engine serves anything, and never touched again.
"""

import logging

from .entries import non_standard_forms, normalize_word, senses

logger = logging.getLogger(__name__)


def dedupe_words(words) -> tuple:
    """Drop non-strings and repeats, keeping first-occurrence order."""
    seen = set()
    out = []
    for w in words or []:
        if not isinstance(w, str) or not w or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return tuple(out)


def build_word_index(entries) -> tuple:
    """Sorted, deduplicated headwords of an entry mapping."""
    return tuple(sorted(set(k for k in entries if isinstance(k, str) and k)))


def build_non_standard_index(entries) -> dict:
    """
    Map every non-standard spelling to the headword that lists it.

    Iterates (headword, sense) pairs in the mapping's order. When two headwords
    claim the same spelling the later one wins; collisions are logged at debug
    level and counted in one summary line.
    """
    index = {}
    collisions = 0
    for headword, entry in entries.items():
        for sense in senses(entry):
            for form in non_standard_forms(sense):
                key = normalize_word(form)
                if not key:
                    continue
                previous = index.get(key)
                if previous is not None and previous != headword:
                    collisions += 1
                    logger.debug("non-standard %r: %r replaced by %r", key, previous, headword)
                index[key] = headword
    if collisions:
        logger.info("non-standard index: %d spellings claimed by more than one headword", collisions)
    return index
