"""
Password hashing.

Only bcrypt hashes are ever stored. bcrypt salts every hash itself and
checkpw compares in constant time.
"""

import bcrypt

# bcrypt ignores everything past this many bytes
MAX_PASSWORD_BYTES = 72

DEFAULT_ROUNDS = 12


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Hash a password with a fresh salt.

    Args:
        password: Plain text password
        rounds: bcrypt work factor (log2 of the iteration count)

    Raises:
        ValueError: If the password exceeds bcrypt's 72 byte limit
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) > MAX_PASSWORD_BYTES:
        raise ValueError(
            f"Password is {len(password_bytes)} bytes, exceeds bcrypt's {MAX_PASSWORD_BYTES} byte limit"
        )
    return bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or an over-long candidate
        return False
