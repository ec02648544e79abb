"""
Password hashing for student and admin credentials.
"""

from passlib.context import CryptContext

from hostelcare.config.settings import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.PASSWORD_BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    """Hash password with a per-password salt"""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash"""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)
