"""Phonetic alphabet speller."""

__version__ = "0.1.0"
