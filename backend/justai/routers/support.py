import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from justai.database import get_db
from justai.dependencies import TokenUser, optional_user
from justai.exceptions import InternalError, ValidationError
from justai.models.contact_message import ContactMessage
from justai.schemas.support import SupportRequest, SupportResponse

logger = logging.getLogger("justai.support")

router = APIRouter(prefix="/support", tags=["support"])


@router.post("", response_model=SupportResponse, status_code=201)
def submit_ticket(
    req: SupportRequest,
    current: TokenUser | None = Depends(optional_user),
    db: Session = Depends(get_db),
):
    fields = (req.category, req.email, req.content)
    if any(v is None or not v.strip() for v in fields):
        raise ValidationError("Category, email and content are required.")

    message = ContactMessage(
        user_id=current.user_id if current else None,
        category=req.category.strip(),
        email=req.email.strip(),
        content=req.content,
        status="Open",
    )
    try:
        db.add(message)
        db.commit()
        db.refresh(message)
    except SQLAlchemyError as exc:
        logger.exception("Support ticket error")
        raise InternalError("Server error while submitting ticket.") from exc

    logger.info("Support ticket %s opened (%s)", message.id, message.category)
    return SupportResponse(message="Support ticket submitted.", ticket_id=message.id)
