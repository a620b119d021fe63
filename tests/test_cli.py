from fairdice.cli import EXIT_CONFIG_ERROR, EXIT_OK, EXIT_VERIFY_FAILED, main
from fairdice.crypto import CryptoProvider

VALID = ["2,2,4,4,9,9", "6,8,1,1,8,6", "7,5,3,7,5,3"]


def test_invalid_dice_exit_before_game(capsys, monkeypatch) -> None:
    def no_input(prompt):
        raise AssertionError("prompted before configuration was validated")

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["1,2,3", "6,8,1,1,8,6", "7,5,3,7,5,3"]) == EXIT_CONFIG_ERROR
    captured = capsys.readouterr()
    assert "Argument Error" in captured.err
    assert "Welcome" not in captured.out


def test_too_few_dice(capsys) -> None:
    assert main(VALID[:2]) == EXIT_CONFIG_ERROR
    assert "at least 3 dice" in capsys.readouterr().err


def test_exit_request_is_clean(capsys, monkeypatch) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: "x")
    assert main(VALID) == EXIT_OK
    assert "Goodbye" in capsys.readouterr().out


def test_end_of_input_is_clean(capsys, monkeypatch) -> None:
    def eof(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    assert main(VALID) == EXIT_OK


def test_verify_command(capsys) -> None:
    key = CryptoProvider.generate_key()
    digest = CryptoProvider.calculate_hmac(key, 4)
    assert main(["verify", key, "4", digest]) == EXIT_OK
    assert "OK" in capsys.readouterr().out
    assert main(["verify", key, "5", digest]) == EXIT_VERIFY_FAILED
    assert "MISMATCH" in capsys.readouterr().out
    assert main(["verify", key, "four", digest]) == EXIT_CONFIG_ERROR
    assert main(["verify", key]) == EXIT_CONFIG_ERROR
