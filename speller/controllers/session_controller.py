from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from speller.domain.errors import InvalidSelection, LanguageNotFound
from speller.domain.language_table import LanguageTable
from speller.domain.spelling import SpellingResult, spell
from speller.ui.console_renderer import LANGUAGE_COMMAND, QUIT_COMMAND, ConsoleRenderer

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


@dataclass(frozen=True)
class SessionState:
    current_language: str = DEFAULT_LANGUAGE


def parse_selection(text: str, count: int) -> int:
    """Parse a 1-based menu answer and return it as a 0-based index.

    Raises:
        InvalidSelection: if `text` is not an integer or is outside [1, count].
    """
    cleaned = (text or "").strip()
    try:
        choice = int(cleaned)
    except ValueError:
        raise InvalidSelection(cleaned, InvalidSelection.NOT_A_NUMBER) from None
    if not 1 <= choice <= count:
        raise InvalidSelection(cleaned, InvalidSelection.OUT_OF_RANGE)
    return choice - 1


class SessionController:
    """Owns the interactive read loop and command dispatch.

    Responsibilities:
      - read one line, run the matching command, render the outcome
      - carry the current language as an explicit SessionState value

    Reading input is injected (`read_line`), so tests can script a session
    without a terminal. End of input ends the session like `\\q`.
    """

    def __init__(
        self,
        table: LanguageTable,
        renderer: ConsoleRenderer,
        *,
        read_line: Callable[[object], str] | None = None,
    ) -> None:
        self._table = table
        self._renderer = renderer
        self._read_line = read_line or renderer.read_line

    @property
    def table(self) -> LanguageTable:
        return self._table

    def run(self, state: SessionState | None = None) -> SessionState:
        state = state or SessionState()
        self._renderer.welcome()
        while True:
            try:
                line = self._read_line(self._renderer.command_prompt())
                next_state = self.handle(state, line)
            except (EOFError, KeyboardInterrupt):
                # Leave the prompt line before saying goodbye.
                self._renderer.blank_line()
                next_state = None
            if next_state is None:
                self._renderer.goodbye()
                return state
            state = next_state
            self._renderer.blank_line()

    def handle(self, state: SessionState, line: str) -> SessionState | None:
        """Run one command. Returns the next state, or None to quit."""
        command = (line or "").strip()
        if command == QUIT_COMMAND:
            return None
        if command == LANGUAGE_COMMAND:
            return self.change_language(state)
        return self.spell_word(state, command)

    def change_language(self, state: SessionState) -> SessionState:
        language = self.choose_language()
        logger.debug("Language changed: %s -> %s", state.current_language, language)
        self._renderer.language_changed(language)
        return replace(state, current_language=language)

    def choose_language(self) -> str:
        """Show the language menu and keep asking until a valid entry is picked."""
        language_ids = self._table.list_language_ids()
        self._renderer.language_menu(language_ids)
        while True:
            answer = self._read_line(self._renderer.selection_prompt(len(language_ids)))
            try:
                return language_ids[parse_selection(answer, len(language_ids))]
            except InvalidSelection as e:
                logger.debug("Rejected language selection %r (%s)", e.text, e.reason)
                if e.reason == InvalidSelection.NOT_A_NUMBER:
                    self._renderer.invalid_number()
                else:
                    self._renderer.invalid_choice()

    def spell_current(self, state: SessionState, word: str) -> SpellingResult:
        """Spell `word` in the current language.

        Raises:
            LanguageNotFound: if the current language is not in the table.
        """
        return spell(word, self._table.require_language(state.current_language))

    def spell_word(self, state: SessionState, word: str) -> SessionState:
        try:
            result = self.spell_current(state, word)
        except LanguageNotFound as e:
            logger.info("Current language %r is not configured", e.language)
            self._renderer.error(str(e))
            return self.change_language(state)
        self._renderer.spelling(result)
        return state
