"""
Controller package exports.
"""

from .session_controller import SessionController, SessionState, parse_selection  # noqa: F401

__all__ = [
    "SessionController",
    "SessionState",
    "parse_selection",
]
