from ssaangn.domain.positioned_cipher import CipherKeying
from ssaangn.services.settings_store import SettingsStore


def test_encrypt_and_decrypt(main_module, capsys):
    assert main_module.main(["encrypt", "가", "--codes"]) == 0
    assert capsys.readouterr().out.strip() == "44200"

    assert main_module.main(["decrypt", chr(44200)]) == 0
    assert capsys.readouterr().out.strip() == "가"


def test_decompose_and_compose(main_module, capsys):
    assert main_module.main(["decompose", "안"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("11 0 4")
    assert "ㅇ ㅏ ㄴ" in out

    assert main_module.main(["compose", "0", "0"]) == 0
    assert capsys.readouterr().out.strip() == "가"


def test_out_of_range_exit_code(main_module, capsys):
    assert main_module.main(["compose", "19", "0", "0"]) == 2
    assert "error:" in capsys.readouterr().err

    assert main_module.main(["decompose", "a"]) == 2


def test_keying_from_settings(main_module, tmp_path, capsys):
    path = tmp_path / "custom.yaml"
    SettingsStore(str(path)).set_cipher_keying(CipherKeying(0, 1))

    assert main_module.main(["--settings", str(path), "encrypt", "가", "--codes"]) == 0
    assert capsys.readouterr().out.strip() == "44033"


def test_encrypt_into_surrogates_exits_cleanly(main_module, capsys):
    assert main_module.main(["encrypt", "힣"]) == 2
    assert "--codes" in capsys.readouterr().err

    assert main_module.main(["encrypt", "힣", "--codes"]) == 0
    codes = capsys.readouterr().out.strip()
    assert codes == str(0xD7A3 + 168)

    assert main_module.main(["decrypt", "--from-codes", codes]) == 0
    assert capsys.readouterr().out.strip() == "힣"


def test_decrypt_from_bad_codes(main_module, capsys):
    assert main_module.main(["decrypt", "--from-codes", "12 abc"]) == 2
    assert "error:" in capsys.readouterr().err


def test_decompose_accepts_scalar_forms(main_module, capsys):
    for form in ("U+AC00", "0xac00", "44032"):
        assert main_module.main(["decompose", form]) == 0
        assert capsys.readouterr().out.startswith("0 0 0")

    assert main_module.main(["decompose", "U+ZZZZ"]) == 2
    assert main_module.main(["decompose", "4"]) == 2
