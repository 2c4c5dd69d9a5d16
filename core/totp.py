"""
TOTP (Time-based One-Time Password) implementation following RFC 6238.

Produces codes identical to Google Authenticator for SHA1 secrets.
"""

import time
from typing import Optional

from core.hotp import generate_hotp, resolve_digest
from core.spec import DEFAULT_ALGORITHM, TotpSpec
from core.utils import COUNTER_MASK


def counter_at(period: int, timestamp: Optional[float] = None) -> int:
    """
    Return the time-step counter for ``timestamp`` (now if None).

    The seconds are truncated to 32 bits before dividing, so the counter
    wraps when the Unix time passes ``2**32`` (year 2106).
    """
    t = timestamp if timestamp is not None else time.time()
    return (int(t) & COUNTER_MASK) // period


def get_otp(spec: TotpSpec, counter: int) -> str:
    """
    Compute the OTP for an explicit counter.

    ``spec.algorithm`` is ignored; the HMAC is always SHA1.
    """
    return generate_hotp(
        spec.secret, counter, spec.digits, resolve_digest(DEFAULT_ALGORITHM)
    )


def get_current_otp(spec: TotpSpec, timestamp: Optional[float] = None) -> str:
    """
    Generate the TOTP code for the current time step.

    Args:
        spec:      Validated TOTP parameters.
        timestamp: Override Unix timestamp (uses time.time() if None).

    Returns:
        OTP string, zero-padded to ``spec.digits`` characters.
    """
    return get_otp(spec, counter_at(spec.period, timestamp))


def remaining_seconds(period: int = 30, timestamp: Optional[float] = None) -> int:
    """Return seconds until the current TOTP window expires."""
    t = timestamp if timestamp is not None else time.time()
    return period - (int(t) % period)
