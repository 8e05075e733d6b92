"""
Helpers for KBBI entry records.

An entry record is the JSON object prepared for one headword:

    {
      "status": "...",
      "data": {
        "pranala": "https://kbbi.kemdikbud.go.id/entri/...",
        "entri": [
          {
            nama, nomor, kata_dasar: [], pelafalan, bentuk_tidak_baku: [],
            varian: [], makna: [{kelas: [], submakna: [], info, contoh: []}],
            etimologi, kata_turunan: [], gabungan_kata: [], peribahasa: [], idiom: []
          },
          ...
        ]
      }
    }

Every element of "entri" is one sense of the headword (homographs get one each).
Some exports drop the "data" wrapper and put "entri" at the top level; both are accepted.
Records are never modified here.
"""

import re

_SYLLABLE_MARKS = re.compile(r"[.·]")
_SPACES = re.compile(r"\s+")


def normalize_word(s: str) -> str:
    """
    Normalize a headword or user query:
      - lowercase
      - drop syllable separators ('pi.jar' -> 'pijar')
      - collapse spaces
    Hyphens are kept ('rumah-rumah' stays as is).
    """
    s = (s or "").strip().lower()
    s = _SYLLABLE_MARKS.sub("", s)
    return _SPACES.sub(" ", s).strip()


def senses(entry) -> list:
    """Sense records ("entri") of an entry, [] when the shape is unexpected."""
    if not isinstance(entry, dict):
        return []
    data = entry.get("data")
    ent = data.get("entri") if isinstance(data, dict) else entry.get("entri")
    if not isinstance(ent, list):
        return []
    return [e for e in ent if isinstance(e, dict)]


def _str_list(value) -> list:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str) and v.strip()]


def non_standard_forms(sense) -> list:
    """Spellings listed as non-standard ("bentuk_tidak_baku") for one sense."""
    return _str_list((sense or {}).get("bentuk_tidak_baku"))


def all_non_standard_forms(entry) -> list:
    """
    Non-standard spellings across every sense, first sense first,
    duplicates removed while preserving order.
    """
    seen = set()
    out = []
    for sense in senses(entry):
        for form in non_standard_forms(sense):
            if form not in seen:
                seen.add(form)
                out.append(form)
    return out
