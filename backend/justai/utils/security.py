from datetime import datetime, timedelta, timezone

import jwt
from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerifyMismatchError

from justai.config import Settings
from justai.exceptions import ForbiddenError

ph = PasswordHasher()

# Verified against when the email is unknown so both login failures cost the same.
_DUMMY_HASH = ph.hash("justai-dummy-password")


def hash_password(password: str) -> str:
    return ph.hash(password)


def _verify(stored_hash: str, password: str) -> bool:
    try:
        return ph.verify(stored_hash, password)
    except (VerifyMismatchError, InvalidHashError):
        return False


def verify_password(stored_hash: str | None, password: str) -> bool:
    if stored_hash is None:
        _verify(_DUMMY_HASH, password)
        return False
    return _verify(stored_hash, password)


def create_access_token(user, settings: Settings, expires_delta: timedelta | None = None) -> str:
    """Sign a bearer token carrying the user's id, email and account type."""
    now = datetime.now(timezone.utc)
    expires = now + (expires_delta if expires_delta is not None else timedelta(hours=settings.token_expire_hours))
    payload = {
        "user_id": user.id,
        "email": user.email,
        "account_type": user.account_type,
        "iat": now,
        "exp": expires,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> dict:
    """Check signature and expiry only; the user row is not consulted."""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "user_id"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise ForbiddenError("Token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise ForbiddenError() from exc
    return payload
