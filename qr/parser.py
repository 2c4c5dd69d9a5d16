"""
Parse otpauth://totp URIs as defined by the Google Authenticator Key URI Format.

Reference: https://github.com/google/google-authenticator/wiki/Key-Uri-Format

Only the ``secret``, ``period``, ``digits``, ``algorithm`` and ``issuer``
query parameters are read. Unknown parameters are ignored and a repeated
parameter takes its last value.
"""

import logging
import re
import urllib.parse
from enum import Enum
from typing import Union

from core.spec import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_PERIOD, TotpSpec
from core.utils import decode_secret

logger = logging.getLogger(__name__)

OTPAUTH_SCHEME = "otpauth"
TOTP_HOST = "totp"

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

URI = Union[str, urllib.parse.SplitResult, urllib.parse.ParseResult]


class ConfigErrorKind(str, Enum):
    """Why an authenticator URI was rejected."""

    UNSUPPORTED_SCHEME = "UnsupportedScheme"
    INVALID_SECRET = "InvalidSecret"
    INVALID_PERIOD = "InvalidPeriod"
    INVALID_DIGITS = "InvalidDigits"


class ConfigError(ValueError):
    """An authenticator URI that cannot be turned into a :class:`TotpSpec`."""

    def __init__(self, kind: ConfigErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


def _host(uri: urllib.parse.SplitResult) -> str:
    """Host of the authority with userinfo and port removed, case preserved."""
    host = uri.netloc.rpartition("@")[2]
    return host.partition(":")[0]


def _parse_unsigned(value: str, bits: int) -> int:
    """Parse a decimal that must fit in an unsigned ``bits``-wide integer."""
    if not _UNSIGNED_RE.fullmatch(value):
        raise ValueError(f"not an unsigned integer: {value!r}")
    number = int(value)
    if number >= 1 << bits:
        raise ValueError(f"{value} does not fit in {bits} bits")
    return number


def parse_totp_uri(uri: URI) -> TotpSpec:
    """
    Parse and validate an ``otpauth://totp/...`` URI.

    The host must be exactly ``totp`` (case-sensitive); userinfo and port in
    the authority are ignored.

    Args:
        uri: URI string, or the result of :func:`urllib.parse.urlsplit`.

    Returns:
        Populated :class:`~core.spec.TotpSpec`.

    Raises:
        ConfigError: If the URI is not a TOTP URI, or its secret, period or
            digits cannot be parsed.
    """
    if isinstance(uri, str):
        uri = urllib.parse.urlsplit(uri.strip())

    if uri.scheme != OTPAUTH_SCHEME or _host(uri) != TOTP_HOST:
        raise ConfigError(
            ConfigErrorKind.UNSUPPORTED_SCHEME,
            f"Unsupported URL format '{uri.scheme}://{uri.netloc}'. "
            f"Expected {OTPAUTH_SCHEME}://{TOTP_HOST}.",
        )

    fields: dict = {
        "secret": b"",
        "period": DEFAULT_PERIOD,
        "digits": DEFAULT_DIGITS,
        "algorithm": DEFAULT_ALGORITHM,
        "issuer": "",
    }

    for key, value in urllib.parse.parse_qsl(uri.query, keep_blank_values=True):
        if key == "secret":
            try:
                fields["secret"] = decode_secret(value)
            except ValueError as exc:
                raise ConfigError(ConfigErrorKind.INVALID_SECRET, str(exc)) from exc
        elif key == "period":
            try:
                fields["period"] = _parse_unsigned(value, 32)
            except ValueError as exc:
                raise ConfigError(
                    ConfigErrorKind.INVALID_PERIOD, f"Invalid 'period': {exc}"
                ) from exc
        elif key == "digits":
            try:
                fields["digits"] = _parse_unsigned(value, 8)
            except ValueError as exc:
                raise ConfigError(
                    ConfigErrorKind.INVALID_DIGITS, f"Invalid 'digits': {exc}"
                ) from exc
        elif key == "algorithm":
            fields["algorithm"] = value
        elif key == "issuer":
            fields["issuer"] = value
        else:
            logger.debug("Ignoring query parameter %r", key)

    # TotpSpec falls back to the defaults for out-of-range period / digits.
    return TotpSpec(**fields)
