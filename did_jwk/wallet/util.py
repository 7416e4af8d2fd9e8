"""base64url helpers for did:jwk payloads."""

import base64
import re

B64URL_UNPADDED = re.compile(r"[A-Za-z0-9_-]+")


def bytes_to_b64url(val: bytes) -> str:
    """Encode bytes as base64url with the trailing padding removed."""
    return base64.urlsafe_b64encode(val).decode("ascii").rstrip("=")


def unpadded_b64url_to_bytes(val: str) -> bytes:
    """Convert unpadded base64url to bytes, rejecting anything else.

    The standard library decoder skips characters outside the alphabet; here
    padding, whitespace and the `+` and `/` characters are all errors.

    Raises:
        ValueError: If the value is empty, not base64url or has an impossible length

    """
    if not B64URL_UNPADDED.fullmatch(val):
        raise ValueError("Value is not unpadded base64url")
    return base64.urlsafe_b64decode(val + "=" * (-len(val) % 4))
