"""Security utilities for JWT and password handling."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple, Union
import hashlib
import hmac
import os

from jose import ExpiredSignatureError, JWTError, jwt

from components.core.config import Settings

PASSWORD_HASH_ITERATIONS = 210_000


def get_password_hash(password: str, salt: str = None) -> str:
    """Generate password hash using PBKDF2-SHA256 with salt."""
    if salt is None:
        salt = os.urandom(32).hex()
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), PASSWORD_HASH_ITERATIONS
    )
    return f"{salt}:{digest.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash. Malformed hashes never match."""
    try:
        salt, _ = hashed_password.split(':')
    except (AttributeError, ValueError):
        return False
    if not salt:
        return False
    return hmac.compare_digest(get_password_hash(plain_password, salt), hashed_password)


@dataclass(frozen=True)
class ValidToken:
    claims: dict


@dataclass(frozen=True)
class InvalidToken:
    reason: str


TokenValidation = Union[ValidToken, InvalidToken]


def create_access_token(
    subject: str,
    role: str,
    user_id: int,
    settings: Settings,
    now: Optional[datetime] = None,
) -> Tuple[str, datetime]:
    """Create a signed session token.

    Returns the encoded token and its (UTC) expiry.
    """
    issued_at = now or datetime.now(timezone.utc)
    expire = issued_at + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode = {
        "sub": subject,
        "role": role,
        "uid": user_id,
        "iat": issued_at,
        "exp": expire,
    }
    encoded_jwt = jwt.encode(to_encode, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
    return encoded_jwt, expire


def verify_token(token: str, settings: Settings) -> TokenValidation:
    """Verify a session token's signature and expiry."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        return InvalidToken("expired")
    except JWTError:
        return InvalidToken("invalid")

    if not payload.get("sub") or not isinstance(payload.get("uid"), int):
        return InvalidToken("invalid")
    return ValidToken(payload)
