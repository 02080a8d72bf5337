"""Password hashing utilities."""

import bcrypt


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a plaintext password with bcrypt.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        Encoded bcrypt hash
    """
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Malformed stored hash
        return False
