from pydantic import BaseModel


class RegisterRequest(BaseModel):
    # Presence is checked by the service so missing fields map to a 400, not a 422.
    name: str | None = None
    email: str | None = None
    password: str | None = None
    account_type: str | None = None
    role: str | None = None
    company: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class MessageResponse(BaseModel):
    message: str


class LoginUser(BaseModel):
    user_id: int
    name: str
    email: str
    account_type: str
    role: str | None
    company: str | None


class LoginResponse(BaseModel):
    message: str
    token: str
    user: LoginUser
