"""Password hashing utilities.

Learn: Uses bcrypt for secure password hashing. bcrypt automatically
handles salting and is resistant to rainbow table attacks, and checkpw
compares digests in constant time. Work factor defaults to 10 rounds.

Both functions are CPU-bound and synchronous on purpose; async callers
run them with asyncio.to_thread so a pending hash doesn't stall the
event loop.
"""

import bcrypt


def hash_password(password: str, rounds: int = 10) -> str:
    """Hash a password with bcrypt.

    Learn: bcrypt includes a random salt automatically and produces
    hashes starting with "$2b$", so hashing the same password twice
    gives two different digests. Passwords are truncated to 72 bytes
    (bcrypt's limit). The request schema owns the length policy.
    """
    pw_bytes = password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash. Never raises on a bad digest."""
    try:
        pw_bytes = password.encode("utf-8")[:72]
        hash_bytes = password_hash.encode("utf-8")
        return bcrypt.checkpw(pw_bytes, hash_bytes)
    except (ValueError, TypeError):
        return False
