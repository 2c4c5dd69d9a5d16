"""
Image-file QR code decoder for totpqr.

Uses OpenCV for image loading and pyzbar for decoding.
The libraries are imported lazily so the parser and OTP engine work
without them.
"""

import logging
import urllib.parse
from typing import Optional

logger = logging.getLogger(__name__)


def _check_deps() -> tuple[bool, str]:
    """Return (available, message) for optional scanning deps."""
    try:
        import cv2  # noqa: F401
        from pyzbar import pyzbar  # noqa: F401
        return True, ""
    except ImportError as exc:
        return False, str(exc)


def extract_totp_uri(path: str) -> Optional[urllib.parse.SplitResult]:
    """
    Decode the first QR code in an image file into a split URI.

    An unreadable file, an image without a QR code and a payload that is
    not a valid URI all yield None.

    Args:
        path: Path to the image file.

    Returns:
        The split URI, or None if nothing usable was found.

    Raises:
        RuntimeError: If opencv-python or pyzbar are unavailable.
    """
    available, msg = _check_deps()
    if not available:
        raise RuntimeError(
            f"QR decoding requires opencv-python and pyzbar: {msg}"
        )

    import cv2
    from pyzbar import pyzbar

    img = cv2.imread(str(path))
    if img is None:
        logger.warning("Failed to open file: %s", path)
        return None

    data = None
    for code in pyzbar.decode(img):
        if code.type == "QRCODE":
            data = code.data.decode("utf-8", errors="ignore")
            break
    if data is None:
        logger.warning("No OTP url found in the image: %s", path)
        return None

    try:
        uri = urllib.parse.urlsplit(data.strip())
    except ValueError as exc:
        logger.warning("Invalid url in %s: %s", path, exc)
        return None
    if not uri.scheme:
        logger.warning("Invalid url in %s: missing scheme", path)
        return None
    return uri
