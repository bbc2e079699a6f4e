import pytest

from ssaangn.domain.hangul_input import (
    NO_CONSONANT,
    append_jamo,
    are_unpairable_consonants,
    are_unpairable_vowels,
    delete_one_jamo,
    unpairable_consonants,
    unpairable_vowels,
)
from ssaangn.domain.keyboard import keyboard_key_to_jamo


def _type(keys: str) -> str:
    text = ""
    for key in keys:
        text = append_jamo(text, keyboard_key_to_jamo(key))
    return text


@pytest.mark.parametrize("previous,key,expected", [
    ("ㄱ", "ㅏ", "가"),
    ("ㄱ", "ㄴ", "ㄱ"),
    ("", "ㅎ", "ㅎ"),
    # compound vowels
    ("고", "ㅏ", "과"),
    ("고", "ㅐ", "괘"),
    ("고", "ㅣ", "괴"),
    ("구", "ㅓ", "궈"),
    ("구", "ㅔ", "궤"),
    ("구", "ㅣ", "귀"),
    ("그", "ㅣ", "긔"),
    ("고", "ㅓ", "고ㅓ"),
    # finals and compound finals
    ("가", "ㄹ", "갈"),
    ("갈", "ㄱ", "갉"),
    ("갈", "ㅎ", "갏"),
    ("가", "ㄴ", "간"),
    ("간", "ㅈ", "갅"),
    ("갑", "ㅅ", "값"),
    ("각", "ㅅ", "갃"),
    ("가", "ㄸ", "가ㄸ"),
    ("갉", "ㄱ", "갉ㄱ"),
    ("간", "ㄴ", "간ㄴ"),
    # a following vowel pulls the final into a new syllable
    ("각", "ㅏ", "가가"),
    ("갔", "ㅓ", "가써"),
    ("갉", "ㅏ", "갈가"),
    ("값", "ㅣ", "갑시"),
])
def test_append_jamo(previous, key, expected):
    assert append_jamo(previous, key) == expected


def test_append_keeps_earlier_cells():
    assert append_jamo("안ㄴ", "ㅕ") == "안녀"


def test_typing_a_word():
    assert _type("dkssudgktpdy") == "안녕하세요"
    assert _type("ekfr") == "닭"
    assert _type("ekfrdl") == "닭이"
    assert _type("ekfrk") == "달가"


@pytest.mark.parametrize("previous,expected", [
    ("갉", "갈"),
    ("갈", "가"),
    ("값", "갑"),
    ("과", "고"),
    ("궤", "구"),
    ("긔", "그"),
    ("가", "ㄱ"),
    ("ㄱ", ""),
    ("", ""),
    ("안녕", "안녀"),
    ("가a", "가"),
])
def test_delete_one_jamo(previous, expected):
    assert delete_one_jamo(previous) == expected


def test_delete_undoes_typing():
    text = _type("ekfr")
    steps = []
    while text:
        text = delete_one_jamo(text)
        steps.append(text)
    assert steps == ["달", "다", "ㄷ", ""]


def test_vowel_pairing():
    assert unpairable_vowels("ㅗ") == [
        "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅛ", "ㅜ", "ㅠ", "ㅡ",
    ]
    assert unpairable_vowels("ㅣ") == [
        "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ", "ㅔ", "ㅕ", "ㅖ", "ㅛ", "ㅠ",
    ]
    assert unpairable_vowels("ㅘ") == []
    assert not are_unpairable_vowels("ㅗ", "ㅏ")
    assert not are_unpairable_vowels("ㅣ", "ㅡ")
    assert are_unpairable_vowels("ㅏ", "ㅓ")
    assert not are_unpairable_vowels("ㅏ", "ㅏ")


def test_consonant_pairing():
    assert unpairable_consonants(NO_CONSONANT) == ["ㄸ", "ㅃ", "ㅉ"]
    rieul_partners = set("ㄱㅁㅂㅅㅌㅍㅎ")
    assert set(unpairable_consonants("ㄹ")) == set("ㄱㄲㄴㄷㄸㄹㅁㅂㅃㅅㅆㅇㅈㅉㅊㅋㅌㅍㅎ") - rieul_partners
    assert "ㄱ" in unpairable_consonants("ㄱ")
    assert unpairable_consonants("x") == []

    assert not are_unpairable_consonants("ㄹ", "ㄱ")
    assert not are_unpairable_consonants("ㅅ", "ㅂ")
    assert are_unpairable_consonants("ㄱ", "ㄴ")
    assert are_unpairable_consonants(NO_CONSONANT, "ㄸ")
    assert not are_unpairable_consonants("ㄱ", "ㄱ")
