from __future__ import annotations

from pathlib import Path

import yaml

from speller.domain.spelling import graphemes
from speller.services.alphabet_store import load_language_table


def _data_path() -> Path:
    return Path(__file__).resolve().parents[1] / "data" / "alphabets.yaml"


def test_bundled_alphabets_load() -> None:
    table = load_language_table(_data_path())
    assert table.list_language_ids() == ["de", "en", "es", "fr", "it", "nl"]


def test_bundled_keys_are_single_lowercase_graphemes() -> None:
    data = yaml.safe_load(_data_path().read_text(encoding="utf-8")) or {}
    assert data
    for language, words in data.items():
        assert isinstance(words, dict) and words, "Empty alphabet for {}".format(language)
        for key, word in words.items():
            assert isinstance(key, str), "Unquoted key {!r} in {}".format(key, language)
            assert len(graphemes(key)) == 1, "Key {!r} in {} is not one grapheme".format(key, language)
            assert key == key.lower(), "Key {!r} in {} is not lowercase".format(key, language)
            assert isinstance(word, str) and word.strip()


def test_every_alphabet_covers_latin_letters() -> None:
    table = load_language_table(_data_path())
    for language in table.list_language_ids():
        phonetic_map = table.require_language(language)
        missing = [c for c in "abcdefghijklmnopqrstuvwxyz" if c not in phonetic_map]
        assert not missing, "Missing letters in {}: {}".format(language, missing)
