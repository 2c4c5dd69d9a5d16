"""Tests for the command-line driver."""

import urllib.parse

import pytest

import main


def _serve(monkeypatch: pytest.MonkeyPatch, uri) -> None:
    split = urllib.parse.urlsplit(uri) if uri is not None else None
    monkeypatch.setattr(main, "extract_totp_uri", lambda path: split)


def test_prints_code(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    _serve(monkeypatch, "otpauth://totp/test:user?secret=JBSWY3DPEHPK3PXP")
    status = main.main(["qr.png", "--timestamp", str(53273637 * 30)])
    assert status == 0
    assert capsys.readouterr().out == "927328\n"


def test_no_uri_exit_status(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    _serve(monkeypatch, None)
    assert main.main(["empty.png"]) == 1
    assert capsys.readouterr().out == ""


def test_rejected_uri_exit_status(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    _serve(monkeypatch, "otpauth://hotp/acc?secret=JBSWY3DPEHPK3PXP&counter=1")
    assert main.main(["hotp.png"]) == 2
    assert capsys.readouterr().out == ""


def test_current_time_code_shape(monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    _serve(monkeypatch, "otpauth://totp/acc?secret=JBSWY3DPEHPK3PXP&digits=8")
    assert main.main(["qr.png"]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out) == 8 and out.isdigit()


def test_missing_decoder_libraries_exit_status(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    def unavailable(path):
        raise RuntimeError("QR decoding requires opencv-python and pyzbar: no cv2")

    monkeypatch.setattr(main, "extract_totp_uri", unavailable)
    assert main.main(["qr.png"]) == 3
    assert capsys.readouterr().out == ""
