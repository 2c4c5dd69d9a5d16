"""
totpqr – entry point.

Usage
-----
    python main.py path/to/qrcode.png

Or, if installed as a package:
    totpqr path/to/qrcode.png
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from core.totp import get_current_otp, remaining_seconds
from qr.parser import ConfigError, parse_totp_uri
from qr.scanner import extract_totp_uri

logger = logging.getLogger("totpqr")


# ── Logging setup ─────────────────────────────────────────────────────────────

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="totpqr",
        description="Print the current TOTP code for an authenticator QR image.",
    )
    parser.add_argument("image", help="image file containing an otpauth://totp QR code")
    parser.add_argument(
        "--timestamp",
        type=float,
        default=None,
        help="Unix time to generate the code for (default: now)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


# ── Main ──────────────────────────────────────────────────────────────────────

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        uri = extract_totp_uri(args.image)
    except RuntimeError as exc:
        logger.error("%s", exc)
        return 3
    if uri is None:
        logger.error("No usable otpauth URI in %s", args.image)
        return 1

    try:
        spec = parse_totp_uri(uri)
    except ConfigError as exc:
        logger.error("Rejected URI (%s): %s", exc.kind.value, exc)
        return 2

    print(get_current_otp(spec, args.timestamp))
    logger.info(
        "%s code valid for %ds",
        spec.issuer or "TOTP",
        remaining_seconds(spec.period, args.timestamp),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
