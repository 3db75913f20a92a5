import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from justai.database import get_db
from justai.exceptions import InternalError
from justai.models.review import Review
from justai.models.testimonial import Testimonial
from justai.models.user import User
from justai.schemas.user import ReviewResponse, TestimonialResponse

logger = logging.getLogger("justai.community")

router = APIRouter(prefix="/community", tags=["community"])

COMMUNITY_LIMIT = 4


@router.get("/testimonials", response_model=list[TestimonialResponse])
def testimonials(db: Session = Depends(get_db)):
    try:
        rows = (
            db.query(Testimonial, User.name, User.account_type)
            .join(User, User.id == Testimonial.user_id)
            .filter(Testimonial.to_display.is_(True))
            .order_by(Testimonial.created_at.desc(), Testimonial.id.desc())
            .limit(COMMUNITY_LIMIT)
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("Testimonials fetch error")
        raise InternalError("Server error fetching testimonials.") from exc

    return [
        TestimonialResponse(
            id=t.id,
            user_id=t.user_id,
            name=name,
            account_type=account_type,
            content=t.content,
            created_at=t.created_at,
        )
        for t, name, account_type in rows
    ]


@router.get("/reviews", response_model=list[ReviewResponse])
def latest_reviews(db: Session = Depends(get_db)):
    reviewer = aliased(User)
    reviewee = aliased(User)
    try:
        rows = (
            db.query(Review, reviewer.name, reviewee.name)
            .join(reviewer, reviewer.id == Review.reviewer_id)
            .join(reviewee, reviewee.id == Review.reviewee_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
            .limit(COMMUNITY_LIMIT)
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("Community reviews fetch error")
        raise InternalError("Server error fetching reviews.") from exc

    return [
        ReviewResponse(
            id=review.id,
            reviewer_id=review.reviewer_id,
            reviewer_name=reviewer_name,
            reviewee_id=review.reviewee_id,
            reviewee_name=reviewee_name,
            comment=review.comment,
            rating=review.rating,
            created_at=review.created_at,
        )
        for review, reviewer_name, reviewee_name in rows
    ]
