import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from justai.config import Settings
from justai.exceptions import AuthError, ConflictError, ValidationError
from justai.models.user import ACCOUNT_TYPES, User
from justai.schemas.auth import LoginRequest, RegisterRequest
from justai.utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger("justai.auth")


def _blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def register_user(db: Session, req: RegisterRequest) -> User:
    required = [req.name, req.email, req.password, req.account_type]
    if req.account_type == "Employer":
        required += [req.role, req.company]
    if any(_blank(v) for v in required):
        raise ValidationError()
    if req.account_type not in ACCOUNT_TYPES:
        raise ValidationError("account_type must be 'Worker' or 'Employer'.")

    email = _normalize_email(req.email)
    if db.query(User.id).filter(User.email == email).first():
        raise ConflictError()

    user = User(
        name=req.name.strip(),
        email=email,
        password_hash=hash_password(req.password),
        account_type=req.account_type,
        role=req.role,
        company=req.company if req.account_type == "Employer" else None,
        status="Active",
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as exc:
        # A concurrent registration won the race on the unique email index.
        db.rollback()
        raise ConflictError() from exc
    db.refresh(user)
    logger.info("Registered %s account %s", user.account_type, user.id)
    return user


def authenticate(db: Session, req: LoginRequest, settings: Settings) -> tuple[User, str]:
    if _blank(req.email) or _blank(req.password):
        raise ValidationError("Email and password are required.")

    user = db.query(User).filter(User.email == _normalize_email(req.email)).first()
    if not verify_password(user.password_hash if user else None, req.password):
        raise AuthError()

    return user, create_access_token(user, settings)
