"""
Validated TOTP configuration shared by the URI parser and the OTP engine.
"""

from dataclasses import dataclass, field

# ── Constants ────────────────────────────────────────────────────────────────

DEFAULT_PERIOD = 30         # seconds per time step
DEFAULT_DIGITS = 6
MIN_DIGITS = 6
MAX_DIGITS = 8
DEFAULT_ALGORITHM = "SHA1"


# ── Data model ────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class TotpSpec:
    """
    Immutable TOTP parameters.

    Out-of-range values are not rejected: a ``period`` below 1 falls back to
    :data:`DEFAULT_PERIOD` and a ``digits`` outside 6..8 falls back to
    :data:`DEFAULT_DIGITS`.

    ``algorithm`` is carried for display only; codes are always HMAC-SHA1.
    """

    secret: bytes = field(default=b"", repr=False)
    period: int = DEFAULT_PERIOD
    digits: int = DEFAULT_DIGITS
    algorithm: str = DEFAULT_ALGORITHM
    issuer: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.secret, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"secret must be bytes, got {type(self.secret).__name__}"
            )
        for name in ("period", "digits"):
            value = getattr(self, name)
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")

        object.__setattr__(self, "secret", bytes(self.secret))
        if self.period < 1:
            object.__setattr__(self, "period", DEFAULT_PERIOD)
        if not MIN_DIGITS <= self.digits <= MAX_DIGITS:
            object.__setattr__(self, "digits", DEFAULT_DIGITS)
