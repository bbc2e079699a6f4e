from __future__ import annotations

"""Keystroke assembly of Hangul syllables (domain layer).

The game's on-screen cell holds the text typed so far. Each jamo keystroke is
folded into the last character of that text:

- consonant + vowel          -> open syllable        (ㄱ + ㅏ -> 가)
- syllable + vowel           -> compound vowel       (고 + ㅏ -> 과)
- syllable + consonant       -> final / compound final (갈 + ㄱ -> 갉)
- syllable-with-final + vowel -> final moves on      (갉 + ㅏ -> 갈가)

Anything that does not combine is appended as-is. delete_one_jamo() undoes one
step at a time.
"""

import logging
from typing import Final

from ssaangn.domain.jamo_tables import CHOSEONG, JONG_INDEX
from ssaangn.domain.keyboard import is_consonant, is_vowel
from ssaangn.domain.syllable_codec import compose, compose_char, decompose, is_syllable

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Domain data: compound jamo
# -----------------------------------------------------------------------------

COMPOUND_VOWELS: Final[dict[tuple[str, str], str]] = {
    ("ㅗ", "ㅏ"): "ㅘ",
    ("ㅗ", "ㅐ"): "ㅙ",
    ("ㅗ", "ㅣ"): "ㅚ",
    ("ㅜ", "ㅓ"): "ㅝ",
    ("ㅜ", "ㅔ"): "ㅞ",
    ("ㅜ", "ㅣ"): "ㅟ",
    ("ㅡ", "ㅣ"): "ㅢ",
}

COMPOUND_FINALS: Final[dict[tuple[str, str], str]] = {
    ("ㄱ", "ㅅ"): "ㄳ",
    ("ㄴ", "ㅈ"): "ㄵ",
    ("ㄴ", "ㅎ"): "ㄶ",
    ("ㄹ", "ㄱ"): "ㄺ",
    ("ㄹ", "ㅁ"): "ㄻ",
    ("ㄹ", "ㅂ"): "ㄼ",
    ("ㄹ", "ㅅ"): "ㄽ",
    ("ㄹ", "ㅌ"): "ㄾ",
    ("ㄹ", "ㅍ"): "ㄿ",
    ("ㄹ", "ㅎ"): "ㅀ",
    ("ㅂ", "ㅅ"): "ㅄ",
}

_SPLIT_VOWELS: Final[dict[str, tuple[str, str]]] = {v: k for k, v in COMPOUND_VOWELS.items()}
_SPLIT_FINALS: Final[dict[str, tuple[str, str]]] = {v: k for k, v in COMPOUND_FINALS.items()}

# Vowels reachable with a single keystroke, in keyboard-hint order
BASIC_VOWELS: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅛ", "ㅜ", "ㅠ", "ㅡ", "ㅣ",
)

# Stands for "no neighbouring consonant" in the consonant pairing relation
NO_CONSONANT: Final[str] = " "


# -----------------------------------------------------------------------------
# Append
# -----------------------------------------------------------------------------

def _append_vowel(syllable: str, vowel: str) -> str | None:
    comps = decompose(syllable)

    if comps.has_final:
        # A compound final keeps its first half; a simple one moves entirely.
        kept, moved = _SPLIT_FINALS.get(comps.final_symbol, ("", comps.final_symbol))
        head = chr(compose(comps.initial, comps.medial, JONG_INDEX[kept]))
        return head + compose_char(moved, vowel)

    combined = COMPOUND_VOWELS.get((comps.medial_symbol, vowel))
    if combined is None:
        return None
    return compose_char(comps.initial_symbol, combined)


def _append_final(syllable: str, consonant: str) -> str | None:
    comps = decompose(syllable)

    if not comps.has_final:
        # ㄸ ㅃ ㅉ never close a syllable
        final = JONG_INDEX.get(consonant)
    else:
        combined = COMPOUND_FINALS.get((comps.final_symbol, consonant))
        final = JONG_INDEX[combined] if combined is not None else None

    if final is None:
        return None
    return chr(compose(comps.initial, comps.medial, final))


def append_jamo(previous: str, key: str) -> str:
    """Fold one typed jamo into `previous` and return the new text.

    Examples:
        append_jamo("ㄱ", "ㅏ") == "가"
        append_jamo("고", "ㅏ") == "과"
        append_jamo("갈", "ㄱ") == "갉"
        append_jamo("갉", "ㅏ") == "갈가"
    """
    head, last = previous[:-1], previous[-1:]

    if is_consonant(last):
        if not is_vowel(key):
            # a bare consonant only accepts a vowel
            return previous
        return head + compose_char(last, key)

    if is_syllable(last):
        combined: str | None = None
        if is_vowel(key):
            combined = _append_vowel(last, key)
        elif is_consonant(key):
            combined = _append_final(last, key)
        if combined is not None:
            return head + combined

    logger.debug("Appending %r without combining", key)
    return previous + key


# -----------------------------------------------------------------------------
# Delete
# -----------------------------------------------------------------------------

def delete_one_jamo(previous: str) -> str:
    """Remove the most recently typed jamo from `previous`.

    Examples:
        delete_one_jamo("갉") == "갈"
        delete_one_jamo("과") == "고"
        delete_one_jamo("가") == "ㄱ"
    """
    head, last = previous[:-1], previous[-1:]
    if not is_syllable(last):
        return head

    comps = decompose(last)
    if comps.has_final:
        kept, _ = _SPLIT_FINALS.get(comps.final_symbol, ("", ""))
        return head + chr(compose(comps.initial, comps.medial, JONG_INDEX[kept]))

    split = _SPLIT_VOWELS.get(comps.medial_symbol)
    if split is not None:
        return head + compose_char(comps.initial_symbol, split[0])

    return head + comps.initial_symbol


# -----------------------------------------------------------------------------
# Pairing (which jamo can combine into one compound)
# -----------------------------------------------------------------------------

def _vowels_pair(a: str, b: str) -> bool:
    return (a, b) in COMPOUND_VOWELS or (b, a) in COMPOUND_VOWELS


def _consonants_pair(a: str, b: str) -> bool:
    if a == NO_CONSONANT:
        return b == NO_CONSONANT or b in JONG_INDEX
    if b == NO_CONSONANT:
        return a in JONG_INDEX
    return (a, b) in COMPOUND_FINALS or (b, a) in COMPOUND_FINALS


def unpairable_vowels(vowel: str) -> list[str]:
    """Basic vowels (other than `vowel`) that never form a compound with it."""
    if vowel not in BASIC_VOWELS:
        return []
    return [v for v in BASIC_VOWELS if v != vowel and not _vowels_pair(vowel, v)]


def are_unpairable_vowels(a: str, b: str) -> bool:
    if a == b or a not in BASIC_VOWELS or b not in BASIC_VOWELS:
        return False
    return not _vowels_pair(a, b)


def unpairable_consonants(consonant: str) -> list[str]:
    """Consonants that never sit next to `consonant` in one final.

    NO_CONSONANT asks which consonants cannot be a final at all.
    """
    if consonant != NO_CONSONANT and consonant not in CHOSEONG:
        return []
    return [c for c in CHOSEONG if not _consonants_pair(consonant, c)]


def are_unpairable_consonants(a: str, b: str) -> bool:
    valid = (NO_CONSONANT,) + CHOSEONG
    if a == b or a not in valid or b not in valid:
        return False
    return not _consonants_pair(a, b)
