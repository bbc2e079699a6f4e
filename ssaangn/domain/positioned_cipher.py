from __future__ import annotations

"""Position-keyed code-point cipher (domain layer).

Each character is shifted by a key that depends only on its index in the word:

    key(i) = i * mul1 + mul2

This is obfuscation for shipping the answer word to a client, not cryptography.
The cipher is blind to Hangul structure; it works on raw code points.
"""

import logging
from dataclasses import dataclass
from typing import Final, Iterable, Sequence

from ssaangn.domain.errors import OutOfRangeError

logger = logging.getLogger(__name__)


# Multipliers used for every word the game has ever shipped. Changing them
# invalidates previously encrypted data.
DEFAULT_MUL1: Final[int] = 22
DEFAULT_MUL2: Final[int] = 168

# Largest scalar accepted by chr()
MAX_SCALAR: Final[int] = 0x10FFFF

# UTF-16 surrogates: legal in a Python str, not encodable as UTF-8
SURROGATE_MIN: Final[int] = 0xD800
SURROGATE_MAX: Final[int] = 0xDFFF


@dataclass(frozen=True)
class CipherKeying:
    """The two multipliers that derive a per-position key."""

    mul1: int = DEFAULT_MUL1
    mul2: int = DEFAULT_MUL2

    def key_for(self, index: int) -> int:
        return index * self.mul1 + self.mul2


DEFAULT_KEYING: Final[CipherKeying] = CipherKeying()


def cipher_key(index: int, keying: CipherKeying = DEFAULT_KEYING) -> int:
    """Return the shift applied to the character at zero-based `index`."""
    return keying.key_for(index)


# -----------------------------------------------------------------------------
# Code-point level
# -----------------------------------------------------------------------------

def encrypt_code_points(points: Iterable[int], keying: CipherKeying = DEFAULT_KEYING) -> list[int]:
    """Shift every scalar up by its position key. Total over ints."""
    return [int(p) + keying.key_for(i) for i, p in enumerate(points)]


def decrypt_code_points(points: Iterable[int], keying: CipherKeying = DEFAULT_KEYING) -> list[int]:
    """Inverse of encrypt_code_points.

    Raises:
        OutOfRangeError: if a scalar is smaller than its position key, i.e. the
            input was not produced by a matching encrypt call.
    """
    out: list[int] = []
    for i, p in enumerate(points):
        key = keying.key_for(i)
        value = int(p) - key
        if value < 0:
            raise OutOfRangeError(
                "Scalar %d at position %d is below its key %d" % (p, i, key),
                value=p,
                bounds=(key, MAX_SCALAR + key + 1),
            )
        out.append(value)
    return out


# -----------------------------------------------------------------------------
# String level
# -----------------------------------------------------------------------------

def code_points_to_text(points: Sequence[int]) -> str:
    """Join scalars into a str.

    Raises:
        OutOfRangeError: if a scalar is negative or above U+10FFFF.
    """
    for i, p in enumerate(points):
        if not 0 <= p <= MAX_SCALAR:
            raise OutOfRangeError(
                "Scalar %d at position %d is outside U+0000..U+10FFFF" % (p, i),
                value=p,
                bounds=(0, MAX_SCALAR + 1),
            )
    return "".join(chr(p) for p in points)


def contains_surrogates(text: str) -> bool:
    """True if `text` holds a lone surrogate and so cannot be encoded as UTF-8."""
    return any(SURROGATE_MIN <= ord(ch) <= SURROGATE_MAX for ch in text)


def encrypt_word(word: str, keying: CipherKeying = DEFAULT_KEYING) -> str:
    """Encrypt a word; the result has the same length as `word`.

    Syllables near the top of the Hangul block shift into the surrogate range
    ("힣" becomes U+D84B), so the result is not always encodable text. Callers
    that serialise it should check contains_surrogates() or ship
    encrypt_code_points() instead.

    Example:
        encrypt_word("가") == chr(44200)
    """
    logger.debug("Encrypting word of length %d with %r", len(word), keying)
    return code_points_to_text(encrypt_code_points([ord(ch) for ch in word], keying))


def decrypt_word(word: str, keying: CipherKeying = DEFAULT_KEYING) -> str:
    """Decrypt a word produced by encrypt_word with the same keying."""
    logger.debug("Decrypting word of length %d with %r", len(word), keying)
    return code_points_to_text(decrypt_code_points([ord(ch) for ch in word], keying))
