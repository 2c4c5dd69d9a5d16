"""
Encoding helpers for secrets and counters.
"""

import base64
import struct

BASE32_BLOCK = 8
BASE32_PAD = "="
COUNTER_MASK = 0xFFFFFFFF


# ── Base32 ────────────────────────────────────────────────────────────────────

def pad_base32(secret: str) -> str:
    """
    Right-pad ``secret`` with ``=`` until its length is a multiple of 8.

    Example::

        >>> pad_base32("totp")
        'totp===='
    """
    pad = (BASE32_BLOCK - len(secret) % BASE32_BLOCK) % BASE32_BLOCK
    return secret + BASE32_PAD * pad


def decode_secret(secret: str) -> bytes:
    """
    Decode an unpadded (or padded) base32 secret to raw bytes.

    Only the upper-case RFC 4648 alphabet is accepted, and the unused
    trailing bits of the last character must be zero.

    Args:
        secret: Base32 text as found in an ``otpauth://`` URI.

    Returns:
        Raw key bytes (empty for an empty secret).

    Raises:
        ValueError: On characters outside the alphabet, a bad length or
            non-zero trailing bits.
    """
    padded = pad_base32(secret)
    try:
        raw = base64.b32decode(padded)
    except ValueError as exc:
        raise ValueError(f"Invalid base32 secret: {exc}") from exc
    if base64.b32encode(raw).decode("ascii") != padded:
        raise ValueError("Invalid base32 secret: non-zero trailing bits")
    return raw


# ── Counter ───────────────────────────────────────────────────────────────────

def counter_to_bytes(counter: int) -> bytes:
    """Encode a 32-bit counter as the 8-byte big-endian HOTP message."""
    return struct.pack(">Q", counter & COUNTER_MASK)
