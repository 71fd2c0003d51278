"""Credential service: password hashing and JWT handling."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from mycap.config import get_settings
from mycap.errors import UnauthorizedError

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.bcrypt_rounds
)


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by an access token."""

    name: str
    email: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(name: str, email: str) -> str:
    """Create a JWT access token."""
    now = datetime.now(UTC)
    to_encode = {
        "name": name,
        "email": email,
        "iat": now,
        "exp": now + timedelta(minutes=settings.jwt_expiration_minutes),
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> TokenClaims:
    """Decode and validate a JWT token.

    Raises:
        UnauthorizedError: if the signature, expiry or claims are invalid.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        raise UnauthorizedError("Invalid or expired JWT.") from None

    name = payload.get("name")
    email = payload.get("email")
    if not isinstance(name, str) or not isinstance(email, str):
        raise UnauthorizedError("Invalid or expired JWT.")
    return TokenClaims(name=name, email=email)
