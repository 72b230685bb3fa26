from __future__ import annotations

from pathlib import Path

import pytest

from speller.domain.errors import ConfigurationError
from speller.services.alphabet_store import (
    CONFIG_ENV_VAR,
    AlphabetStore,
    default_alphabets_path,
    load_language_table,
)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "alphabets.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_table_from_yaml(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        'en:\n  "a": "alfa"\n  "b": "bravo"\nde:\n  "a": "anton"\n',
    )
    table = load_language_table(path)
    assert table.list_language_ids() == ["de", "en"]
    assert table.require_language("en")["b"] == "bravo"


def test_missing_file_is_configuration_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError) as info:
        AlphabetStore(tmp_path / "nope.yaml").load()
    assert "nope.yaml" in str(info.value)


def test_yaml_syntax_error_is_configuration_error(tmp_path: Path) -> None:
    path = _write(tmp_path, "en: {a: alfa\n")
    with pytest.raises(ConfigurationError) as info:
        AlphabetStore(path).load()
    assert "YAML" in str(info.value)


def test_empty_document_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "# nothing here\n")
    assert AlphabetStore(path).load() == {}
    with pytest.raises(ConfigurationError):
        AlphabetStore(path).load_table()


def test_unquoted_boolean_key_is_rejected(tmp_path: Path) -> None:
    path = _write(tmp_path, "en:\n  on: oscar\n  1: one\n")
    with pytest.raises(ConfigurationError) as info:
        load_language_table(path)
    assert str(path) in str(info.value)
    assert "quote" in str(info.value)


def test_env_var_overrides_default_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write(tmp_path, 'xx:\n  "a": "ah"\n')
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    store = AlphabetStore()
    assert store.path == path
    assert store.load_table().list_language_ids() == ["xx"]


def test_explicit_path_wins_over_env_var(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "other.yaml"))
    path = _write(tmp_path, 'en:\n  "a": "alfa"\n')
    assert AlphabetStore(path).path == path


def test_default_path_points_at_bundled_data(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    assert AlphabetStore().path == default_alphabets_path()
    assert default_alphabets_path().name == "alphabets.yaml"


@pytest.mark.parametrize(
    "text,duplicate",
    [
        ('en:\n  "a": "alfa"\nde:\n  "a": "anton"\nen:\n  "b": "bravo"\n', "'en'"),
        ('en:\n  "a": "alfa"\n  "b": "bravo"\n  "a": "other"\n', "'a'"),
    ],
)
def test_duplicate_keys_are_rejected(tmp_path: Path, text: str, duplicate: str) -> None:
    path = _write(tmp_path, text)
    with pytest.raises(ConfigurationError) as info:
        AlphabetStore(path).load()
    message = str(info.value)
    assert str(path) in message
    assert "duplicate key {}".format(duplicate) in message


def test_same_key_in_different_languages_is_allowed(tmp_path: Path) -> None:
    path = _write(tmp_path, 'en:\n  "a": "alfa"\nde:\n  "a": "anton"\n')
    table = load_language_table(path)
    assert table.require_language("en")["a"] == "alfa"
    assert table.require_language("de")["a"] == "anton"
