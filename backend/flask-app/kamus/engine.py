"""
Read-only dictionary engine.

A KamusEngine is built once from the three prepared structures
(entry store, word index, non-standard index) and only read afterwards,
so one instance can be shared by any number of request threads without locks.
"""

from types import MappingProxyType

from .entries import all_non_standard_forms
from .errors import IndexUnavailable
from .indexes import build_non_standard_index, build_word_index, dedupe_words
from .search import (
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_SUGGEST_LIMIT,
    search_words,
    suggest_words,
)


class KamusEngine:
    """
    Answers existence, detail, standard-form, search and suggestion queries.

    Inputs to every method are expected to be normalized already
    (see kamus.entries.normalize_word); nothing is re-normalized here.
    """

    def __init__(self, entries, words=None, non_standard=None):
        entries = dict(entries or {})
        if not words:
            words = build_word_index(entries)
        if non_standard is None:
            non_standard = build_non_standard_index(entries)

        self._entries = MappingProxyType(entries)
        self._words = dedupe_words(words)
        self._non_standard = MappingProxyType(dict(non_standard))

    @property
    def entries(self):
        return self._entries

    @property
    def words(self) -> tuple:
        return self._words

    @property
    def non_standard(self):
        return self._non_standard

    @property
    def is_empty(self) -> bool:
        return not self._words

    # ---------- Entry store / non-standard index ----------
    def lookup(self, word: str):
        """Entry record for `word`, or None when it is not a headword."""
        return self._entries.get(word)

    def resolve_non_standard(self, word: str):
        """Standard headword for a known non-standard spelling, or None."""
        return self._non_standard.get(word)

    # ---------- Lookup / classification ----------
    def exists(self, word: str) -> dict:
        return {"exists": word in self._entries, "word": word}

    def detail(self, word: str):
        return self.lookup(word)

    def classify(self, word: str) -> dict:
        """
        Standard-form check. Three outcomes:
          {is_standard: true, word, non_standard_forms: [...]}
          {is_standard: false, word, standard_form}          known non-standard spelling
          {is_standard: false, word, exists_in_kbbi: false}  unknown to the dictionary
        non_standard_forms is collected from every sense of the headword.
        """
        entry = self.lookup(word)
        if entry is not None:
            return {
                "is_standard": True,
                "word": word,
                "non_standard_forms": all_non_standard_forms(entry),
            }

        standard = self.resolve_non_standard(word)
        if standard:
            return {"is_standard": False, "word": word, "standard_form": standard}

        return {"is_standard": False, "word": word, "exists_in_kbbi": False}

    # ---------- Search / suggestions ----------
    def _require_words(self):
        if not self._words:
            raise IndexUnavailable("word index is empty; dataset not prepared or not loaded")
        return self._words

    def search(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> dict:
        results = search_words(self._require_words(), query, limit)
        return {"query": query, "count": len(results), "results": results}

    def suggest(self, word: str, limit: int = DEFAULT_SUGGEST_LIMIT) -> dict:
        suggestions = suggest_words(self._require_words(), word, limit)
        return {"word": word, "suggestions": suggestions}

    def stats(self) -> dict:
        return {
            "total_words": len(self._words),
            "total_entries": len(self._entries),
            "non_standard_forms": len(self._non_standard),
        }

    def __repr__(self):
        return f"<KamusEngine words={len(self._words)} entries={len(self._entries)}>"
