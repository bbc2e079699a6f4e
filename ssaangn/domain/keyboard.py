from __future__ import annotations

"""Keyboard input mapping for the Korean 2-beolsik (dubeolsik) layout."""

from typing import Final

from ssaangn.domain.jamo_tables import CHO_INDEX, JUNG_INDEX


# Lowercase keys; uppercase falls back to these unless listed in _SHIFTED.
_DUBEOLSIK: Final[dict[str, str]] = {
    "q": "ㅂ", "w": "ㅈ", "e": "ㄷ", "r": "ㄱ", "t": "ㅅ",
    "y": "ㅛ", "u": "ㅕ", "i": "ㅑ", "o": "ㅐ", "p": "ㅔ",
    "a": "ㅁ", "s": "ㄴ", "d": "ㅇ", "f": "ㄹ", "g": "ㅎ",
    "h": "ㅗ", "j": "ㅓ", "k": "ㅏ", "l": "ㅣ",
    "z": "ㅋ", "x": "ㅌ", "c": "ㅊ", "v": "ㅍ",
    "b": "ㅠ", "n": "ㅜ", "m": "ㅡ",
}

# Tense consonants and the two y-diphthongs sit on the shift layer.
_SHIFTED: Final[dict[str, str]] = {
    "Q": "ㅃ", "W": "ㅉ", "E": "ㄸ", "R": "ㄲ", "T": "ㅆ",
    "O": "ㅒ", "P": "ㅖ",
}


def keyboard_key_to_jamo(key: str) -> str:
    """Translate one pressed key to its compatibility jamo.

    Keys with no mapping (and multi-character key names such as "Enter") are
    returned unchanged.
    """
    if len(key) != 1:
        return key
    if key == "\\":
        return "₩"
    if key in _SHIFTED:
        return _SHIFTED[key]
    return _DUBEOLSIK.get(key.lower(), key)


def is_consonant(symbol: str) -> bool:
    return symbol in CHO_INDEX


def is_vowel(symbol: str) -> bool:
    return symbol in JUNG_INDEX
