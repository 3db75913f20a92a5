import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from justai.database import get_db
from justai.dependencies import TokenUser, require_user
from justai.exceptions import InternalError
from justai.models.application import Application
from justai.models.job import Job
from justai.models.review import Review
from justai.models.user import User
from justai.schemas.job import ApplicationResponse
from justai.schemas.user import DashboardResponse, ReviewResponse
from justai.services.dashboard_service import get_dashboard

logger = logging.getLogger("justai.users")

router = APIRouter(prefix="/users/me", tags=["users"])


@router.get("", response_model=DashboardResponse, response_model_exclude_unset=True)
def my_dashboard(current: TokenUser = Depends(require_user), db: Session = Depends(get_db)):
    try:
        profile = get_dashboard(db, current.user_id)
    except SQLAlchemyError as exc:
        logger.exception("Dashboard fetch error")
        raise InternalError("Server error fetching profile.") from exc
    return DashboardResponse(**profile)


@router.get("/reviews", response_model=list[ReviewResponse])
def my_reviews(current: TokenUser = Depends(require_user), db: Session = Depends(get_db)):
    reviewer = aliased(User)
    reviewee = aliased(User)
    try:
        rows = (
            db.query(Review, reviewer.name, reviewee.name)
            .join(reviewer, reviewer.id == Review.reviewer_id)
            .join(reviewee, reviewee.id == Review.reviewee_id)
            .filter(Review.reviewee_id == current.user_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("Reviews fetch error")
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


@router.get("/applications", response_model=list[ApplicationResponse])
def my_applications(current: TokenUser = Depends(require_user), db: Session = Depends(get_db)):
    """Applications the current user has sent."""
    try:
        rows = (
            db.query(Application, Job.title, Job.job_status)
            .join(Job, Job.id == Application.job_id)
            .filter(Application.worker_id == current.user_id)
            .order_by(Application.applied_at.desc(), Application.id.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("Applications fetch error")
        raise InternalError("Server error fetching applications.") from exc

    return [
        ApplicationResponse(
            id=application.id,
            job_id=application.job_id,
            status=application.status,
            applied_at=application.applied_at,
            job_title=title,
            job_status=job_status,
            worker_id=application.worker_id,
        )
        for application, title, job_status in rows
    ]


@router.get("/job-applications", response_model=list[ApplicationResponse])
def my_job_applications(current: TokenUser = Depends(require_user), db: Session = Depends(get_db)):
    """Applications received on jobs the current user posted."""
    try:
        rows = (
            db.query(Application, Job.title, Job.job_status, User.name)
            .join(Job, Job.id == Application.job_id)
            .join(User, User.id == Application.worker_id)
            .filter(Job.employer_id == current.user_id)
            .order_by(Application.applied_at.desc(), Application.id.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        logger.exception("Job applications fetch error")
        raise InternalError("Server error fetching applications.") from exc

    return [
        ApplicationResponse(
            id=application.id,
            job_id=application.job_id,
            status=application.status,
            applied_at=application.applied_at,
            job_title=title,
            job_status=job_status,
            worker_id=application.worker_id,
            worker_name=worker_name,
        )
        for application, title, job_status, worker_name in rows
    ]
