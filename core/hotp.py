"""
HOTP (HMAC-based One-Time Password) implementation following RFC 4226.
"""

import hashlib
import hmac
from typing import Any, Callable

from core.spec import DEFAULT_DIGITS
from core.utils import counter_to_bytes

DigestMod = Callable[..., Any]

# Only SHA1 is wired up; any other name falls back to it.
_DIGEST_MAP: dict[str, DigestMod] = {
    "SHA1": hashlib.sha1,
}


def resolve_digest(name: str) -> DigestMod:
    """Return the hash constructor for ``name``, SHA1 when unknown."""
    return _DIGEST_MAP.get(name.upper(), hashlib.sha1)


def generate_hotp(
    secret_bytes: bytes,
    counter: int,
    digits: int = DEFAULT_DIGITS,
    digestmod: DigestMod = hashlib.sha1,
) -> str:
    """
    Generate an HOTP code.

    Args:
        secret_bytes: Raw decoded secret bytes.
        counter:      Counter value, truncated to 32 bits.
        digits:       Number of OTP digits.
        digestmod:    Hash constructor for the HMAC (default SHA1).

    Returns:
        Zero-padded OTP string of exactly ``digits`` characters.
    """
    digest = hmac.new(secret_bytes, counter_to_bytes(counter), digestmod).digest()

    # Dynamic truncation
    offset = digest[-1] & 0x0F
    code = (
        (digest[offset] & 0x7F) << 24
        | (digest[offset + 1] & 0xFF) << 16
        | (digest[offset + 2] & 0xFF) << 8
        | (digest[offset + 3] & 0xFF)
    )
    otp = code % (10**digits)
    return str(otp).zfill(digits)
