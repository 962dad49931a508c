"""Password hashing helpers."""

from functools import lru_cache

from passlib.context import CryptContext

from .config import get_settings


@lru_cache(maxsize=1)
def _pwd_context() -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().bcrypt_rounds,
    )


def hash_password(password: str) -> str:
    return _pwd_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check ``plain_password`` against a stored hash; malformed hashes never match."""

    try:
        return _pwd_context().verify(plain_password, hashed_password)
    except ValueError:
        return False
