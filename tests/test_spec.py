"""Tests for core.spec."""

import dataclasses

import pytest

from core.spec import DEFAULT_PERIOD, TotpSpec


def test_defaults() -> None:
    spec = TotpSpec()
    assert spec.secret == b""
    assert spec.digits == 6
    assert spec.period == DEFAULT_PERIOD == 30
    assert spec.algorithm == "SHA1"
    assert spec.issuer == ""


def test_named_construction() -> None:
    spec = TotpSpec(secret=b"key", period=60, digits=8, algorithm="SHA1", issuer="ACME")
    assert (spec.period, spec.digits, spec.issuer) == (60, 8, "ACME")


@pytest.mark.parametrize("period", [0, -1, -30])
def test_non_positive_period_falls_back(period: int) -> None:
    assert TotpSpec(period=period).period == 30


@pytest.mark.parametrize("digits,expected", [(5, 6), (6, 6), (7, 7), (8, 8), (9, 6), (0, 6)])
def test_digits_clamped(digits: int, expected: int) -> None:
    assert TotpSpec(digits=digits).digits == expected


def test_secret_coerced_to_bytes() -> None:
    assert TotpSpec(secret=bytearray(b"abc")).secret == b"abc"


def test_immutable() -> None:
    spec = TotpSpec()
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.digits = 8  # type: ignore[misc]


def test_secret_hidden_from_repr() -> None:
    assert "s3cr3t" not in repr(TotpSpec(secret=b"s3cr3t"))


@pytest.mark.parametrize(
    "kwargs",
    [
        {"digits": 7.0},
        {"digits": "8"},
        {"digits": True},
        {"period": 2.5},
        {"period": "30"},
        {"period": False},
        {"period": None},
    ],
)
def test_non_int_period_or_digits_rejected(kwargs: dict) -> None:
    with pytest.raises(TypeError, match="must be an int"):
        TotpSpec(secret=b"key", **kwargs)


@pytest.mark.parametrize("secret", ["JBSWY3DP", 5, None])
def test_non_bytes_secret_rejected(secret) -> None:
    with pytest.raises(TypeError, match="secret must be bytes"):
        TotpSpec(secret=secret)
