"""
Random code and identifier generators — pure, side-effect-free functions.

All generators use cryptographically secure sources (``secrets`` module).
"""

from __future__ import annotations

import secrets
import string


def generate_otp_code(length: int = 6) -> str:
    """Generate a cryptographically secure numeric OTP.

    Every digit is drawn independently, so the result is uniform over
    ``000000``-``999999`` (for the default length) and may start with zeros.

    Args:
        length: Number of digits (default 6).

    Returns:
        String of random decimal digits.
    """
    return "".join(secrets.choice(string.digits) for _ in range(length))


def generate_request_id() -> str:
    """Generate a short unique request ID for log correlation."""
    return f"req_{secrets.token_hex(6)}"
