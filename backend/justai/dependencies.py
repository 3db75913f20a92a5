from fastapi import Header, Request
from pydantic import BaseModel

from justai.exceptions import ForbiddenError, UnauthorizedError
from justai.utils.security import decode_access_token


class TokenUser(BaseModel):
    user_id: int
    email: str | None = None
    account_type: str | None = None


def _token_user(request: Request, authorization: str) -> TokenUser:
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise UnauthorizedError("Missing bearer token.")
    payload = decode_access_token(token.strip(), request.app.state.settings)
    try:
        return TokenUser(
            user_id=payload["user_id"],
            email=payload.get("email"),
            account_type=payload.get("account_type"),
        )
    except ValueError as exc:
        raise ForbiddenError() from exc


async def require_user(request: Request, authorization: str | None = Header(None)) -> TokenUser:
    if not authorization:
        raise UnauthorizedError()
    return _token_user(request, authorization)


async def optional_user(request: Request, authorization: str | None = Header(None)) -> TokenUser | None:
    if not authorization:
        return None
    return _token_user(request, authorization)
