"""
PIN hashing for employee credentials.

Employees authenticate with an email and a short PIN. Only the digest is
ever stored (employees.pin_hash); login compares digests.

LEGACY COMPATIBILITY:
    The digest is a single unsalted SHA-256 pass, base64 encoded, so that
    pin_hash values written by earlier clients keep matching. This is weak
    against offline guessing of short PINs. Moving to a salted, iterated
    hash needs a migration of every stored pin_hash.
"""

import base64
import hashlib


def hash_pin(pin: str) -> str:
    """
    Derive the stored digest for a PIN.

    Args:
        pin: The raw PIN or password

    Returns:
        Base64-encoded SHA-256 digest (44 characters)

    Raises:
        ValueError: If pin is not a non-empty string
    """
    if not isinstance(pin, str) or pin == "":
        raise ValueError("PIN must be a non-empty string")

    digest = hashlib.sha256(pin.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")

