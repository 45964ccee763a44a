"""Credential Store — opaque password hash/verify backed by passlib.

Invariants:
    - Plaintext passwords are never stored or logged
    - verify_password never raises for a malformed hash; it returns False
"""

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Unrecognised or corrupt hash string
        return False
