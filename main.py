from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional, Union

from ssaangn.domain.errors import OutOfRangeError
from ssaangn.domain.positioned_cipher import (
    CipherKeying,
    code_points_to_text,
    contains_surrogates,
    decrypt_code_points,
    decrypt_word,
    encrypt_word,
)
from ssaangn.domain.syllable_codec import compose, decompose
from ssaangn.services.settings_store import SettingsStore

logger = logging.getLogger("ssaangn")

# -------------------------------------------------
#          SETTINGS (TOP-LEVEL)
# -------------------------------------------------
SETTINGS_PATH = os.environ.get(
    "SSAANGN_SETTINGS",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.yaml"),
)


def _settings_store(path: Optional[str] = None) -> SettingsStore:
    return SettingsStore(path or SETTINGS_PATH)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# -------------------------------------------------
#          COMMANDS
# -------------------------------------------------

def _format_codes(word: str) -> str:
    return " ".join(str(ord(ch)) for ch in word)


def _parse_codes(text: str) -> List[int]:
    try:
        return [int(tok) for tok in text.split()]
    except ValueError as e:
        raise OutOfRangeError("Expected space-separated decimal scalars, got %r" % (text,), value=text) from e


def _parse_syllable(text: str) -> Union[int, str]:
    """Accept a single character, a U+XXXX / 0xXXXX scalar, or a decimal scalar."""
    if len(text) == 1:
        return text
    try:
        if text[:2].upper() in ("U+", "0X"):
            return int(text[2:], 16)
        return int(text, 10)
    except ValueError as e:
        raise OutOfRangeError(
            "Expected one character, U+XXXX or a decimal scalar, got %r" % (text,), value=text
        ) from e


def _emit(word: str, codes: bool) -> None:
    if codes:
        print(_format_codes(word))
        return
    if contains_surrogates(word):
        # cannot be written to a UTF-8 stream
        raise OutOfRangeError("Result contains surrogate code points; rerun with --codes", value=word)
    print(word)


def _cmd_encrypt(args: argparse.Namespace, keying: CipherKeying) -> int:
    _emit(encrypt_word(args.word, keying), args.codes)
    return 0


def _cmd_decrypt(args: argparse.Namespace, keying: CipherKeying) -> int:
    if args.from_codes:
        out = code_points_to_text(decrypt_code_points(_parse_codes(args.word), keying))
    else:
        out = decrypt_word(args.word, keying)
    _emit(out, args.codes)
    return 0


def _cmd_decompose(args: argparse.Namespace, keying: CipherKeying) -> int:
    comps = decompose(_parse_syllable(args.syllable))
    lead, vowel, tail = comps.symbols()
    print("{} {} {}\t{} {} {}".format(comps.initial, comps.medial, comps.final, lead, vowel, tail or "∅"))
    return 0


def _cmd_compose(args: argparse.Namespace, keying: CipherKeying) -> int:
    print(chr(compose(args.initial, args.medial, args.final)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ssaangn",
        description="Encrypt/decrypt game words and decompose/compose Hangul syllables.",
    )
    parser.add_argument("--settings", default=None, help="Path to settings.yaml.")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Overrides log_level from settings.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("encrypt", help="Encrypt a word.")
    p.add_argument("word")
    p.add_argument("--codes", action="store_true", help="Print decimal scalars instead of text.")
    p.set_defaults(func=_cmd_encrypt)

    p = sub.add_parser("decrypt", help="Decrypt a word.")
    p.add_argument("word")
    p.add_argument("--codes", action="store_true", help="Print decimal scalars instead of text.")
    p.add_argument(
        "--from-codes",
        action="store_true",
        help="WORD is space-separated decimal scalars, as printed by 'encrypt --codes'.",
    )
    p.set_defaults(func=_cmd_decrypt)

    p = sub.add_parser("decompose", help="Split a syllable into component indices.")
    p.add_argument("syllable", help="One character, U+XXXX, 0xXXXX or a decimal scalar.")
    p.set_defaults(func=_cmd_decompose)

    p = sub.add_parser("compose", help="Build a syllable from component indices.")
    p.add_argument("initial", type=int)
    p.add_argument("medial", type=int)
    p.add_argument("final", type=int, nargs="?", default=0)
    p.set_defaults(func=_cmd_compose)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    store = _settings_store(args.settings)
    _configure_logging(args.log_level or store.get_log_level())
    keying = store.get_cipher_keying()
    logger.debug("Using settings %s (keying=%r)", store.path, keying)

    try:
        return args.func(args, keying)
    except OutOfRangeError as e:
        print("error: {}".format(e), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
