"""Codec layer for the ssaangn Korean word-guessing game."""

__version__ = "0.1.0"
