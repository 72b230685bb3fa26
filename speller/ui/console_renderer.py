from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.text import Text

from speller.domain.spelling import SpellingResult

QUIT_COMMAND = "\\q"
LANGUAGE_COMMAND = "\\l"


class ConsoleRenderer:
    """Terminal output for the speller session.

    All user-supplied text goes through `rich.text.Text`, never through
    console markup, so input such as "[red]" is printed literally.
    """

    def __init__(self, console: Console | None = None, *, color: bool = True) -> None:
        if console is None:
            console = Console(highlight=False, no_color=not color)
        self._console = console

    @property
    def console(self) -> Console:
        return self._console

    def read_line(self, prompt: Text | str) -> str:
        return self._console.input(prompt)

    def welcome(self) -> None:
        self._console.print(Text("Welcome to the Phonetic Alphabet Speller!", style="bold green"))

    def goodbye(self) -> None:
        self._console.print(Text("Goodbye!", style="bold green"))

    def blank_line(self) -> None:
        self._console.print()

    def command_prompt(self) -> Text:
        return Text(
            "Enter a word to spell (or '{}' to exit, '{}' to change language): ".format(
                QUIT_COMMAND, LANGUAGE_COMMAND
            ),
            style="cyan",
        )

    def selection_prompt(self, count: int) -> Text:
        return Text.assemble(
            ("Choose a language (1-", "yellow"),
            (str(count), "bold yellow"),
            ("): ", "yellow"),
        )

    def language_menu(self, language_ids: Sequence[str]) -> None:
        self._console.print(Text("Available languages:", style="bold blue"))
        for i, language in enumerate(language_ids, start=1):
            self._console.print(Text.assemble((str(i), "yellow"), ". ", (language, "cyan")))

    def language_changed(self, language: str) -> None:
        self._console.print(Text.assemble(("Language changed to:", "yellow"), " ", (language, "bold yellow")))

    def invalid_number(self) -> None:
        self._console.print(Text("Invalid input. Please enter a number.", style="red"))

    def invalid_choice(self) -> None:
        self._console.print(Text("Invalid choice. Please try again.", style="red"))

    def error(self, message: str) -> None:
        self._console.print(Text.assemble(("Error: ", "bold red"), (message, "red")))

    def spelling(self, result: SpellingResult) -> None:
        self._console.print(Text.assemble(("Spelling:", "bold blue"), " ", (result.word, "bold white")))
        for entry in result:
            self._console.print(
                Text.assemble(
                    (entry.grapheme, "yellow"),
                    ": ",
                    (entry.head, "bold red"),
                    (entry.rest, "red"),
                )
            )
