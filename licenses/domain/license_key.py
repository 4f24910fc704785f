"""
License key generation and format checks.

Keys are opaque random tokens shaped ``PREFIX-XXXX-XXXX-XXXX-XXXX``.
They are not signed; validity is decided by the store, and the format
check below is only a cheap first-line filter before any lookup.
"""

import re
import secrets

# Characters that won't be confused when typed from a screen or e-mail:
# no 0/O, no 1/I/L.
LICENSE_KEY_ALPHABET = "ABCDEFGHJKMNPQRSTUVWXYZ23456789"

KEY_GROUPS = 4
KEY_GROUP_LENGTH = 4

LICENSE_KEY_PATTERN = re.compile(
    r"^[A-Z]{4,5}"
    + f"(-[{LICENSE_KEY_ALPHABET}]{{{KEY_GROUP_LENGTH}}}){{{KEY_GROUPS}}}$"
)


def generate_license_key(prefix: str) -> str:
    """
    Generate a license key in format: PREFIX-XXXX-XXXX-XXXX-XXXX.

    Args:
        prefix: Plan prefix (e.g., 'DPRO' for the pro plan)

    Returns:
        Generated license key string
    """
    groups = [
        "".join(secrets.choice(LICENSE_KEY_ALPHABET) for _ in range(KEY_GROUP_LENGTH))
        for _ in range(KEY_GROUPS)
    ]
    return f"{prefix}-{'-'.join(groups)}"


def normalize_license_key(raw_key: str) -> str:
    """Trim and uppercase a key as typed by a user."""
    return (raw_key or "").strip().upper()


def is_valid_license_key_format(key: str) -> bool:
    """
    Check that a key matches the fixed key pattern.

    Args:
        key: License key string (already normalized)

    Returns:
        True if the key is well-formed
    """
    return bool(LICENSE_KEY_PATTERN.match(key or ""))
