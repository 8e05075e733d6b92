"""
Substring search and typo suggestions over the word index.

Both are linear scans: substring and fuzzy matches cannot use the
hash lookup that exact matches get.
"""

import heapq
import unicodedata

from .levenshtein import bounded_distance

DEFAULT_SEARCH_LIMIT = 10
DEFAULT_SUGGEST_LIMIT = 5
# anything further than this is not a plausible typo
MAX_SUGGEST_DISTANCE = 3


def collation_key(word: str) -> tuple:
    """
    Dictionary ordering: accents folded and case ignored first ('é' sorts with 'e'),
    then the raw string so the order stays total.
    """
    decomposed = unicodedata.normalize("NFKD", word)
    folded = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return (folded, word)


def search_words(words, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> list:
    """
    Headwords containing `query` as a literal substring.
    Words starting with `query` come first, each group in dictionary order,
    truncated to `limit`.
    """
    if limit <= 0:
        return []
    matches = [w for w in words if query in w]
    return heapq.nsmallest(
        limit, matches, key=lambda w: (not w.startswith(query), collation_key(w))
    )


def suggest_words(words, query: str, limit: int = DEFAULT_SUGGEST_LIMIT,
                  max_distance: int = MAX_SUGGEST_DISTANCE) -> list:
    """
    Words within edit distance 1..max_distance of `query`, closest first.
    Ties are broken by plain string order. An exact match (distance 0) is not
    a suggestion.

    Returns [{"word": ..., "distance": ...}, ...].
    """
    if limit <= 0:
        return []
    qlen = len(query)
    scored = []
    for w in words:
        if abs(len(w) - qlen) > max_distance:
            continue
        d = bounded_distance(query, w, max_distance)
        if 0 < d <= max_distance:
            scored.append((d, w))
    best = heapq.nsmallest(limit, scored)
    return [{"word": w, "distance": d} for d, w in best]
