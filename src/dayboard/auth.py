"""Password hashing and bearer token helpers."""

from __future__ import annotations

import hashlib
import hmac
import re
import secrets

HASH_ALGORITHM = "pbkdf2_sha256"
HASH_ITERATIONS = 260_000

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def hash_password(password: str, *, iterations: int = HASH_ITERATIONS) -> str:
    """Hash a password for storage as ``algorithm$iterations$salt$digest``."""
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return f"{HASH_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its stored hash."""
    try:
        algorithm, iterations, salt, expected = password_hash.split("$")
        rounds = int(iterations)
    except ValueError:
        return False
    if algorithm != HASH_ALGORITHM or rounds < 1:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), rounds)
    return hmac.compare_digest(digest.hex(), expected)


def generate_token() -> str:
    """Generate a secure random bearer token."""
    return secrets.token_urlsafe(32)


def validate_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.match(email))
