import pickle
from pathlib import Path

import pytest

from anagrams.config import DICTIONARY_ENV
from anagrams.index import DictionaryIndex, word_anagrams
from anagrams.loader import load_dictionary
from anagrams.occurrences import word_occurrences
from anagrams.storage import load_index, save_index

WORDS = ["eat", "tea", "ate", "tan", "ant", "nat", "Sean", "sane"]


def _seed(tmp: Path, text: str, name: str = "words.txt") -> str:
    p = tmp / name
    p.write_text(text, encoding="utf-8")
    return str(p)


def test_load_dictionary_keeps_file_order(tmp_path: Path):
    path = _seed(tmp_path, "eat\r\ntea\n\nate\n   \nSean\n")
    assert load_dictionary(path) == ["eat", "tea", "ate", "Sean"]


def test_load_dictionary_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(str(tmp_path / "nope.txt"))


def test_load_dictionary_empty_file_raises(tmp_path: Path):
    path = _seed(tmp_path, "\n\n")
    with pytest.raises(ValueError):
        load_dictionary(path)


def test_load_dictionary_from_env(tmp_path: Path, monkeypatch):
    path = _seed(tmp_path, "tan\nant\n")
    monkeypatch.setenv(DICTIONARY_ENV, path)
    assert load_dictionary() == ["tan", "ant"]


def test_load_bundled_dictionary(monkeypatch):
    monkeypatch.delenv(DICTIONARY_ENV, raising=False)
    words = load_dictionary()
    assert words
    assert "Linux" in words and "olive" in words


def test_word_anagrams_eat():
    idx = DictionaryIndex.build(WORDS)
    assert sorted(word_anagrams("eat", idx)) == ["ate", "eat", "tea"]
    assert sorted(word_anagrams("TAN", idx)) == ["ant", "nat", "tan"]


def test_word_anagrams_unknown_signature_is_empty():
    idx = DictionaryIndex.build(WORDS)
    assert word_anagrams("married", idx) == []


def test_index_groups_case_insensitively_and_keeps_case():
    idx = DictionaryIndex.build(WORDS)
    assert idx.words_for(word_occurrences("aens")) == ("Sean", "sane")
    assert idx.size == len(WORDS)
    assert len(idx) == 3
    assert word_occurrences("ate") in idx


def test_save_and_load_index(tmp_path: Path):
    idx = DictionaryIndex.build(WORDS)
    path = str(tmp_path / "cache" / "index.pkl")
    save_index(idx, path)
    assert load_index(path) == idx


def test_load_index_rejects_foreign_pickle(tmp_path: Path):
    path = tmp_path / "other.pkl"
    path.write_bytes(pickle.dumps({"not": "an index"}))
    with pytest.raises(TypeError):
        load_index(str(path))
