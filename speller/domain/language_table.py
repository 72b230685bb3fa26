from __future__ import annotations

"""Language table (domain layer).

This module is pure data: no file access and no terminal output.

It provides:
  - `PhoneticMap`: read-only grapheme -> phonetic word mapping for one language
  - `LanguageTable`: read-only language identifier -> `PhoneticMap` mapping

Expected raw shape (as produced by the YAML loader):

    {"en": {"a": "alfa", "b": "bravo", ...}, "de": {...}}

Notes:
  - Identifiers and keys are stored exactly as configured. Nothing is
    lowercased or trimmed here; the spelling engine lowercases lookups.
  - Both classes expose no mutating API once built.
"""

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from speller.domain.errors import ConfigurationError, LanguageNotFound


class PhoneticMap(Mapping[str, str]):
    """Read-only mapping from a lowercase grapheme to its phonetic word."""

    __slots__ = ("_words",)

    def __init__(self, words: Mapping[str, str] | None = None) -> None:
        self._words: Mapping[str, str] = MappingProxyType(dict(words or {}))

    def __getitem__(self, key: str) -> str:
        return self._words[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return "PhoneticMap({!r})".format(dict(self._words))


class LanguageTable:
    """All configured alphabets, keyed by language identifier."""

    __slots__ = ("_languages",)

    def __init__(self, languages: Mapping[str, PhoneticMap]) -> None:
        self._languages: Mapping[str, PhoneticMap] = MappingProxyType(dict(languages))

    @classmethod
    def build(cls, raw_config: Any) -> LanguageTable:
        """Validate a parsed configuration document and build the table.

        Raises:
            ConfigurationError: if `raw_config` is not a non-empty mapping of
                str -> mapping of str -> str.
        """
        if not isinstance(raw_config, Mapping):
            raise ConfigurationError(
                "expected a mapping of language -> alphabet, got {}".format(type(raw_config).__name__)
            )
        if not raw_config:
            raise ConfigurationError("no languages configured")

        languages: dict[str, PhoneticMap] = {}
        for language, words in raw_config.items():
            if not isinstance(language, str):
                raise ConfigurationError(_scalar_message("language identifier", language))
            languages[language] = _build_phonetic_map(language, words)
        return cls(languages)

    def lookup_language(self, language: str) -> PhoneticMap | None:
        return self._languages.get(language)

    def require_language(self, language: str) -> PhoneticMap:
        phonetic_map = self.lookup_language(language)
        if phonetic_map is None:
            raise LanguageNotFound(language)
        return phonetic_map

    def list_language_ids(self) -> list[str]:
        """Return every language identifier in ascending lexicographic order.

        The language menu numbers its entries from this list, so the order
        must not depend on the order of the configuration document.
        """
        return sorted(self._languages)

    def __contains__(self, language: object) -> bool:
        return language in self._languages

    def __len__(self) -> int:
        return len(self._languages)

    def __repr__(self) -> str:
        return "LanguageTable(languages={!r})".format(self.list_language_ids())


def _build_phonetic_map(language: str, words: Any) -> PhoneticMap:
    if words is None:
        # `en:` with nothing under it loads as None in YAML.
        return PhoneticMap()
    if not isinstance(words, Mapping):
        raise ConfigurationError(
            "alphabet for language {!r} must be a mapping, got {}".format(language, type(words).__name__)
        )

    checked: dict[str, str] = {}
    for key, word in words.items():
        if not isinstance(key, str):
            raise ConfigurationError(
                "language {!r}: {}".format(language, _scalar_message("key", key))
            )
        if not isinstance(word, str):
            raise ConfigurationError(
                "language {!r}, key {!r}: {}".format(language, key, _scalar_message("phonetic word", word))
            )
        checked[key] = word
    return PhoneticMap(checked)


def _scalar_message(what: str, value: Any) -> str:
    msg = "{} must be a string, got {} ({!r})".format(what, type(value).__name__, value)
    if isinstance(value, (bool, int, float)):
        # YAML 1.1 reads unquoted yes/no/on/off and digits as non-strings.
        msg += "; quote it in the configuration file"
    return msg
