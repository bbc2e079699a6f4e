from __future__ import annotations

"""Hangul syllable decomposition / composition (domain layer).

This module contains *no* I/O.

Primary API:
- decompose(syllable) -> SoundComponents
- compose(initial, medial, final=0) -> int

Symbol-level helpers (compatibility jamo in, compatibility jamo out):
- decompose_char(ch) / compose_char(lead, vowel, tail="")
- to_jamo_text(), word_components(), shared_component_count()
"""

import logging
from dataclasses import dataclass
from typing import Union

from ssaangn.domain.errors import OutOfRangeError
from ssaangn.domain.jamo_tables import (
    CHO_INDEX,
    CHOSEONG,
    JONG_INDEX,
    JONGSEONG,
    JUNG_INDEX,
    JUNGSEONG,
    L_COUNT,
    N_COUNT,
    S_BASE,
    S_COUNT,
    T_COUNT,
    V_COUNT,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SoundComponents:
    """Indices of the three sound units of one syllable.

    `final == 0` is the empty trailing slot, not a missing value.
    """

    initial: int
    medial: int
    final: int = 0

    @property
    def initial_symbol(self) -> str:
        return CHOSEONG[self.initial]

    @property
    def medial_symbol(self) -> str:
        return JUNGSEONG[self.medial]

    @property
    def final_symbol(self) -> str:
        return JONGSEONG[self.final]

    @property
    def has_final(self) -> bool:
        return self.final != 0

    def symbols(self) -> tuple[str, str, str]:
        return self.initial_symbol, self.medial_symbol, self.final_symbol


# -----------------------------------------------------------------------------
# Index level
# -----------------------------------------------------------------------------

def _scalar_of(syllable: Union[int, str]) -> int:
    if isinstance(syllable, str):
        if len(syllable) != 1:
            raise OutOfRangeError(
                "Expected a single character, got %r" % (syllable,), value=syllable
            )
        return ord(syllable)
    _require_int("syllable", syllable)
    return syllable


def _require_int(name: str, value: object) -> None:
    # bool is an int subclass; reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError("%s must be an int, got %s" % (name, type(value).__name__))


def _check_index(name: str, value: int, count: int) -> None:
    _require_int(name, value)
    if not 0 <= value < count:
        raise OutOfRangeError(
            "%s index %d outside [0, %d)" % (name, value, count),
            value=value,
            bounds=(0, count),
        )


def decompose(syllable: Union[int, str]) -> SoundComponents:
    """Split a composed Hangul syllable into its (initial, medial, final) indices.

    Args:
        syllable: a code point (int) or a one-character string.

    Raises:
        OutOfRangeError: if the scalar is not inside the composed-syllable block.
        TypeError: if `syllable` is neither a str nor an int.
    """
    scalar = _scalar_of(syllable)
    offset = scalar - S_BASE
    if not 0 <= offset < S_COUNT:
        raise OutOfRangeError(
            "Scalar %d is not a composed Hangul syllable" % scalar,
            value=scalar,
            bounds=(S_BASE, S_BASE + S_COUNT),
        )

    return SoundComponents(
        initial=offset // N_COUNT,
        medial=(offset % N_COUNT) // T_COUNT,
        final=offset % T_COUNT,
    )


def compose(initial: int, medial: int, final: int = 0) -> int:
    """Compose a syllable scalar from component indices.

    Raises:
        OutOfRangeError: if any index is outside its table bound.
        TypeError: if any index is not an int.
    """
    _check_index("initial", initial, L_COUNT)
    _check_index("medial", medial, V_COUNT)
    _check_index("final", final, T_COUNT)
    return S_BASE + initial * N_COUNT + medial * T_COUNT + final


def compose_components(components: SoundComponents) -> int:
    return compose(components.initial, components.medial, components.final)


# -----------------------------------------------------------------------------
# Symbol level
# -----------------------------------------------------------------------------

def is_syllable(ch: object) -> bool:
    """True if `ch` is exactly one composed Hangul syllable."""
    if not isinstance(ch, str) or len(ch) != 1:
        return False
    return 0 <= ord(ch) - S_BASE < S_COUNT


def has_final(ch: object) -> bool:
    """True if `ch` is a syllable with a trailing consonant (batchim)."""
    if not is_syllable(ch):
        return False
    return decompose(ch).has_final  # type: ignore[arg-type]


def decompose_char(ch: str) -> tuple[str, str, str]:
    """Return (lead, vowel, tail) compatibility jamo for a syllable; tail is "" if absent."""
    return decompose(ch).symbols()


def compose_char(lead: str, vowel: str, tail: str = "") -> str:
    """Compose a syllable from compatibility jamo.

    Args:
        lead: choseong (e.g., "ㄱ")
        vowel: jungseong (e.g., "ㅏ")
        tail: jongseong (e.g., "ㄴ") or "" for no final

    Raises:
        OutOfRangeError: if any symbol is not in its table.
    """
    li = CHO_INDEX.get(lead)
    vi = JUNG_INDEX.get(vowel)
    ti = JONG_INDEX.get(tail or "")

    for name, symbol, index in (("lead", lead, li), ("vowel", vowel, vi), ("tail", tail, ti)):
        if index is None:
            raise OutOfRangeError("Invalid %s jamo %r" % (name, symbol), value=symbol)

    return chr(compose(li, vi, ti))  # type: ignore[arg-type]


def to_jamo_text(ch: str) -> str:
    """Spell a syllable out as its jamo ("안" -> "ㅇㅏㄴ"). Non-syllables pass through."""
    if not is_syllable(ch):
        return ch
    return "".join(decompose_char(ch))


# -----------------------------------------------------------------------------
# Word helpers
# -----------------------------------------------------------------------------

def is_hangul_word(word: str) -> bool:
    """True if `word` is non-empty and every character is a composed syllable."""
    if not word:
        return False
    return all(is_syllable(ch) for ch in word)


def word_components(word: str) -> list[str]:
    """Flatten a word into its jamo, skipping non-syllables and empty finals.

    Example:
        word_components("안녕") -> ["ㅇ", "ㅏ", "ㄴ", "ㄴ", "ㅕ", "ㅇ"]
    """
    out: list[str] = []
    for ch in word:
        if not is_syllable(ch):
            logger.debug("Skipping non-syllable %r in word components", ch)
            continue
        lead, vowel, tail = decompose_char(ch)
        out.append(lead)
        out.append(vowel)
        if tail:
            out.append(tail)
    return out


def shared_component_count(a: str, b: str) -> int:
    """Count the components of `a` that also occur somewhere in `b`."""
    other = set(word_components(b))
    return sum(1 for comp in word_components(a) if comp in other)
