from __future__ import annotations


class SpellerError(Exception):
    """Base class for every error raised by the speller."""


class ConfigurationError(SpellerError):
    """The alphabet configuration is missing, unreadable or malformed."""


class LanguageNotFound(SpellerError):
    def __init__(self, language: str) -> None:
        super().__init__("Language not found: {!r}".format(language))
        self.language = language


class InvalidSelection(SpellerError):
    """A language menu answer that is not a number in range.

    `reason` is either NOT_A_NUMBER or OUT_OF_RANGE so callers can pick
    the message to show.
    """

    NOT_A_NUMBER = "not_a_number"
    OUT_OF_RANGE = "out_of_range"

    def __init__(self, text: str, reason: str) -> None:
        super().__init__("Invalid selection {!r} ({})".format(text, reason))
        self.text = text
        self.reason = reason
