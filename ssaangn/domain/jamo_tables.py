from __future__ import annotations

"""Fixed Hangul jamo tables (domain layer).

The ordering of each table is the contract: an index into CHOSEONG, JUNGSEONG or
JONGSEONG is exactly the index used by the Unicode Hangul Syllables algorithm:

    SBase + (LIndex * VCount + VIndex) * TCount + TIndex
"""

from typing import Final


# -----------------------------------------------------------------------------
# Unicode composed-syllable block
# -----------------------------------------------------------------------------

S_BASE: Final[int] = 0xAC00
L_COUNT: Final[int] = 19
V_COUNT: Final[int] = 21
T_COUNT: Final[int] = 28
N_COUNT: Final[int] = V_COUNT * T_COUNT  # 588
S_COUNT: Final[int] = L_COUNT * N_COUNT  # 11172


# -----------------------------------------------------------------------------
# Domain data: compatibility jamo ordering
# -----------------------------------------------------------------------------

# Leading consonants (Choseong) in standard Unicode Hangul order
CHOSEONG: Final[tuple[str, ...]] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ", "ㄹ", "ㅁ", "ㅂ", "ㅃ",
    "ㅅ", "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ", "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

# Vowels (Jungseong) in standard Unicode Hangul order
JUNGSEONG: Final[tuple[str, ...]] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ",
    "ㅗ", "ㅘ", "ㅙ", "ㅚ", "ㅛ",
    "ㅜ", "ㅝ", "ㅞ", "ㅟ", "ㅠ",
    "ㅡ", "ㅢ", "ㅣ",
)

# Trailing consonants (Jongseong) in standard Unicode Hangul order
# Index 0 is "no final"
JONGSEONG: Final[tuple[str, ...]] = (
    "",
    "ㄱ", "ㄲ", "ㄳ",
    "ㄴ", "ㄵ", "ㄶ",
    "ㄷ",
    "ㄹ", "ㄺ", "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ", "ㅀ",
    "ㅁ",
    "ㅂ", "ㅄ",
    "ㅅ", "ㅆ",
    "ㅇ",
    "ㅈ", "ㅊ",
    "ㅋ",
    "ㅌ",
    "ㅍ",
    "ㅎ",
)


# -----------------------------------------------------------------------------
# Lookup maps
# -----------------------------------------------------------------------------

CHO_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(CHOSEONG)}
JUNG_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(JUNGSEONG)}
JONG_INDEX: Final[dict[str, int]] = {j: i for i, j in enumerate(JONGSEONG)}
