"""Password hashing and access token helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import bcrypt
from jose import JWTError, jwt

from threadboard.core.errors import AuthenticationError
from threadboard.core.settings import settings

# bcrypt rejects longer inputs.
PASSWORD_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Return a bcrypt hash of ``password`` as text."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Return True if ``password`` matches the stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # Malformed hash in storage.
        return False


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed JWT identifying ``user_id``.

    Args:
        user_id: Identifier placed in both the ``sub`` and ``id`` claims.
        expires_delta: Lifetime override; defaults to the configured expiry.

    Returns:
        The encoded token.
    """
    issued_at = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode: dict[str, object] = {
        "sub": user_id,
        "id": user_id,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> str:
    """Validate ``token`` and return the user id it carries.

    Raises:
        AuthenticationError: If the signature, algorithm or expiry is wrong,
            or the token carries no subject.
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise AuthenticationError("Invalid token") from err

    subject = payload.get("sub") or payload.get("id")
    if not subject or not isinstance(subject, str):
        raise AuthenticationError("Invalid token")
    return subject
