from __future__ import annotations

import logging
import os
from collections.abc import Hashable
from pathlib import Path
from typing import Any

import yaml
from yaml.constructor import ConstructorError

from speller.domain.errors import ConfigurationError
from speller.domain.language_table import LanguageTable

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SPELLER_CONFIG"


class _UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a key repeated within one mapping.

    Plain safe_load keeps the last value, which would silently drop a whole
    alphabet written twice.
    """

    def construct_mapping(self, node: yaml.MappingNode, deep: bool = False) -> dict[Any, Any]:
        self.flatten_mapping(node)
        seen: set[Any] = set()
        for key_node, _ in node.value:
            key = self.construct_object(key_node, deep=deep)
            if not isinstance(key, Hashable):
                continue
            if key in seen:
                raise ConstructorError(
                    "while constructing a mapping",
                    node.start_mark,
                    "found duplicate key {!r}".format(key),
                    key_node.start_mark,
                )
            seen.add(key)
        return super().construct_mapping(node, deep=deep)


def default_alphabets_path() -> Path:
    """Return <project_root>/data/alphabets.yaml.

    Assumes this file lives at: <root>/speller/services/alphabet_store.py
    """
    return Path(__file__).resolve().parents[2] / "data" / "alphabets.yaml"


class AlphabetStore:
    """YAML-backed source of the phonetic alphabets.

    Responsibilities:
      - Resolve the alphabets file (explicit path, $SPELLER_CONFIG, bundled default)
      - Read and parse it, turning every failure into ConfigurationError

    Unlike the settings store this is read-only and not best-effort: the
    speller cannot run without a valid table.
    """

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR, "").strip()
            self._path = Path(env_path) if env_path else default_alphabets_path()
        else:
            self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Any:
        p = self._path
        if not p.is_file():
            raise ConfigurationError("Failed to read config file {}: no such file".format(p))

        try:
            raw = p.read_text(encoding="utf-8")
        except (OSError, UnicodeError) as e:
            raise ConfigurationError("Failed to read config file {}: {}".format(p, e)) from e

        try:
            data = yaml.load(raw, Loader=_UniqueKeyLoader)
        except yaml.YAMLError as e:
            raise ConfigurationError("YAML parsing error in {}: {}".format(p, e)) from e

        logger.debug("Loaded alphabets from %s", p)
        return {} if data is None else data

    def load_table(self) -> LanguageTable:
        data = self.load()
        try:
            table = LanguageTable.build(data)
        except ConfigurationError as e:
            raise ConfigurationError("Invalid alphabets in {}: {}".format(self._path, e)) from e
        logger.debug("Configured languages: %s", ", ".join(table.list_language_ids()))
        return table


def load_language_table(path: str | os.PathLike[str] | None = None) -> LanguageTable:
    return AlphabetStore(path).load_table()
