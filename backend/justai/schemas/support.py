from pydantic import BaseModel


class SupportRequest(BaseModel):
    category: str | None = None
    email: str | None = None
    content: str | None = None


class SupportResponse(BaseModel):
    message: str
    ticket_id: int
