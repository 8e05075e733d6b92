import json
import os
import threading

from kamus import EngineHolder, load_engine
from kamus.loader import load_entries

from conftest import ENTRIES, make_entry, write_dataset


def test_load_engine(loaded_engine):
    assert loaded_engine.stats() == {"total_words": 7, "total_entries": 7, "non_standard_forms": 3}
    assert loaded_engine.classify("tidakbaku")["standard_form"] == "baku"


def test_missing_data_dir_gives_empty_engine(tmp_path):
    engine = load_engine(str(tmp_path / "nope"))
    assert engine.is_empty
    assert engine.lookup("rumah") is None


def test_corrupt_file_is_skipped(tmp_path):
    data_dir = write_dataset(tmp_path / "data")
    with open(os.path.join(data_dir, "word-index.json"), "w", encoding="utf-8") as f:
        f.write("[\"rumah\", ")
    engine = load_engine(data_dir)
    # word index falls back to the entry keys
    assert engine.words == tuple(sorted(ENTRIES))


def test_wrong_top_level_type_is_skipped(tmp_path):
    data_dir = write_dataset(tmp_path / "data", words={"not": "a list"})
    assert load_engine(data_dir).words == tuple(sorted(ENTRIES))


def test_indexes_derived_when_files_absent(tmp_path):
    data_dir = write_dataset(tmp_path / "data", words=False, non_standard=None)
    engine = load_engine(data_dir)
    assert engine.words == tuple(sorted(ENTRIES))
    assert engine.resolve_non_standard("apothek") == "apotek"


def test_entry_shards_keep_first_occurrence(tmp_path):
    data_dir = write_dataset(tmp_path / "data")
    shard = {"rumah": make_entry("ru.mah", submakna=["lain"]), "bata": make_entry("ba.ta")}
    with open(os.path.join(data_dir, "entries2.json"), "w", encoding="utf-8") as f:
        json.dump(shard, f)
    entries = load_entries(data_dir)
    assert entries["rumah"] == ENTRIES["rumah"]
    assert "bata" in entries


def test_holder_builds_once_across_threads(data_dir):
    calls = []

    def factory(path):
        calls.append(path)
        return load_engine(path)

    holder = EngineHolder(data_dir, factory=factory)
    assert not holder.loaded
    seen = []
    threads = [threading.Thread(target=lambda: seen.append(holder.get())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert all(e is seen[0] for e in seen)
    assert holder.loaded


def test_holder_reload_swaps_engine(tmp_path):
    data_dir = write_dataset(tmp_path / "data")
    holder = EngineHolder(data_dir)
    old = holder.get()

    entries = dict(ENTRIES, bata=make_entry("ba.ta"))
    write_dataset(data_dir, entries=entries)
    new = holder.reload()

    assert new is not old
    assert holder.get() is new
    assert new.exists("bata")["exists"] is True
    # the old snapshot is untouched
    assert old.exists("bata")["exists"] is False
