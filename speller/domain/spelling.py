from __future__ import annotations

"""Spelling engine (domain layer).

Turns a word into one phonetic word per user-perceived character.

Segmentation uses extended grapheme clusters (`regex`'s `\\X`), so a base
letter with combining marks, a flag or a CRLF pair is a single unit.
Iterating over code points would split those.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Final

import regex

_GRAPHEME: Final = regex.compile(r"\X")


@dataclass(frozen=True)
class Resolution:
    key: str
    phonetic: str
    known: bool  # False: no entry, `phonetic` is the lowercased key itself


@dataclass(frozen=True)
class SpelledGrapheme:
    """One output line: the typed grapheme and its rendered phonetic word.

    The rendered word is kept as `head` (first cluster, uppercased) and
    `rest`, because uppercasing can lengthen the head ("ß" -> "SS").
    """

    grapheme: str
    head: str
    rest: str = ""
    known: bool = True

    @property
    def phonetic(self) -> str:
        return self.head + self.rest


@dataclass(frozen=True)
class SpellingResult:
    word: str
    entries: tuple[SpelledGrapheme, ...] = ()

    def pairs(self) -> list[tuple[str, str]]:
        return [(e.grapheme, e.phonetic) for e in self.entries]

    def __iter__(self) -> Iterator[SpelledGrapheme]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def graphemes(text: str) -> list[str]:
    if not text:
        return []
    return _GRAPHEME.findall(text)


def resolve(grapheme: str, phonetic_map: Mapping[str, str]) -> Resolution:
    """Look up the phonetic word for one grapheme.

    The key is lowercased with full Unicode rules before the lookup. When
    the map has no entry, the lowercased key stands in as its own phonetic
    word, so unknown characters are echoed instead of rejected.
    """
    key = grapheme.lower()
    if key in phonetic_map:
        return Resolution(key=key, phonetic=phonetic_map[key], known=True)
    return Resolution(key=key, phonetic=key, known=False)


def split_first_grapheme(text: str) -> tuple[str, str]:
    if not text:
        return "", ""
    first = _GRAPHEME.match(text).group(0)
    return first, text[len(first):]


def capitalize_head(text: str) -> tuple[str, str]:
    """Return (uppercased first cluster, untouched remainder) of `text`."""
    first, rest = split_first_grapheme(text)
    return first.upper(), rest


def capitalize_first_grapheme(text: str) -> str:
    head, rest = capitalize_head(text)
    return head + rest


def spell(word: str, phonetic_map: Mapping[str, str]) -> SpellingResult:
    """Spell `word` with `phonetic_map`, one entry per grapheme cluster.

    The original grapheme is kept exactly as typed. Only the lookup key and
    the rendered phonetic word are case-transformed. Pure and deterministic.
    """
    entries: list[SpelledGrapheme] = []
    for grapheme in graphemes(word):
        resolution = resolve(grapheme, phonetic_map)
        head, rest = capitalize_head(resolution.phonetic)
        entries.append(SpelledGrapheme(grapheme=grapheme, head=head, rest=rest, known=resolution.known))
    return SpellingResult(word=word, entries=tuple(entries))
