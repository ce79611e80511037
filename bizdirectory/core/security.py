import secrets

from passlib.context import CryptContext

from bizdirectory.core.config import BUSINESS_DELETE_PASSWORD

pwd_context = CryptContext(
    schemes=["argon2"],
    default="argon2",
    deprecated="auto",
)


def hash_password(plain_password: str) -> str:
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def check_delete_password(candidate: str, expected: str = BUSINESS_DELETE_PASSWORD) -> bool:
    """Compare the shared business-delete password in constant time"""
    return secrets.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))
