"""Security utilities (password hashing)."""

from passlib.context import CryptContext

from fitquest.core.config import get_settings

password_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=get_settings().password_bcrypt_rounds,
)


def hash_password(plain: str) -> str:
    return password_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    return password_context.verify(plain, hashed)
