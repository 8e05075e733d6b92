import json
import os

import pytest

from kamus import KamusEngine, load_engine
from kamus_api import create_app


def make_entry(nama, bentuk_tidak_baku=(), submakna=("arti",), extra_senses=()):
    """Entry record in the prepared KBBI shape."""
    def sense(nama, tidak_baku, sub):
        return {
            "nama": nama,
            "nomor": "",
            "kata_dasar": [],
            "pelafalan": "",
            "bentuk_tidak_baku": list(tidak_baku),
            "varian": [],
            "makna": [{"kelas": ["n"], "submakna": list(sub), "info": "", "contoh": []}],
            "etimologi": None,
            "kata_turunan": [],
            "gabungan_kata": [],
            "peribahasa": [],
            "idiom": [],
        }

    entri = [sense(nama, bentuk_tidak_baku, submakna)]
    for tidak_baku in extra_senses:
        entri.append(sense(nama, tidak_baku, submakna))
    return {
        "status": "ok",
        "data": {
            "pranala": f"https://kbbi.kemdikbud.go.id/entri/{nama.replace('.', '')}",
            "entri": entri,
        },
    }


ENTRIES = {
    "rumah": make_entry("ru.mah", submakna=["bangunan untuk tempat tinggal"]),
    "rumput": make_entry("rum.put", submakna=["tumbuhan berbatang tunggal"]),
    "serumpun": make_entry("se.rum.pun"),
    "baku": make_entry("ba.ku", bentuk_tidak_baku=["tidakbaku"]),
    "kucing": make_entry("ku.cing"),
    "apotek": make_entry("apo.tek", bentuk_tidak_baku=["apotik"], extra_senses=[["apotik", "apothek"]]),
    "pijar": make_entry("pi.jar", submakna=["bara api"]),
}

NON_STANDARD = {"tidakbaku": "baku", "apotik": "apotek", "apothek": "apotek"}


def write_dataset(data_dir, entries=ENTRIES, words=None, non_standard=NON_STANDARD):
    os.makedirs(data_dir, exist_ok=True)
    with open(os.path.join(data_dir, "entries.json"), "w", encoding="utf-8") as f:
        json.dump(entries, f)
    if words is not False:
        with open(os.path.join(data_dir, "word-index.json"), "w", encoding="utf-8") as f:
            json.dump(sorted(entries) if words is None else words, f)
    if non_standard is not None:
        with open(os.path.join(data_dir, "non-standard-index.json"), "w", encoding="utf-8") as f:
            json.dump(non_standard, f)
    return str(data_dir)


@pytest.fixture
def data_dir(tmp_path):
    return write_dataset(tmp_path / "data")


@pytest.fixture
def engine():
    return KamusEngine(ENTRIES, sorted(ENTRIES), NON_STANDARD)


@pytest.fixture
def loaded_engine(data_dir):
    return load_engine(data_dir)


@pytest.fixture
def app(data_dir):
    return create_app({"TESTING": True, "KAMUS_DATA_DIR": data_dir})


@pytest.fixture
def client(app):
    return app.test_client()
