import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from justai.database import get_db
from justai.exceptions import InternalError
from justai.schemas.auth import LoginRequest, LoginResponse, LoginUser, MessageResponse, RegisterRequest
from justai.services.auth_service import authenticate, register_user

logger = logging.getLogger("justai.auth")

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=MessageResponse, status_code=201)
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    try:
        register_user(db, req)
    except SQLAlchemyError as exc:
        logger.exception("Register error")
        raise InternalError("Server error during registration.") from exc
    return MessageResponse(message="User registered successfully.")


@router.post("/login", response_model=LoginResponse)
def login(req: LoginRequest, request: Request, db: Session = Depends(get_db)):
    try:
        user, token = authenticate(db, req, request.app.state.settings)
    except SQLAlchemyError as exc:
        logger.exception("Login error")
        raise InternalError("Server error during login.") from exc

    return LoginResponse(
        message="Login successful.",
        token=token,
        user=LoginUser(
            user_id=user.id,
            name=user.name,
            email=user.email,
            account_type=user.account_type,
            role=user.role,
            company=user.company,
        ),
    )
