import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from justai.dependencies import TokenUser
from justai.exceptions import ConflictError, ForbiddenError, NotFoundError, ValidationError
from justai.models.application import Application
from justai.models.job import Job
from justai.schemas.job import JobCreate

logger = logging.getLogger("justai.jobs")

OPEN = "Open"
SEARCH_LIMIT = 50
SORT_COLUMNS = {
    "newest": Job.created_at,
    "salary": Job.salary,
}


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def search_jobs(
    db: Session,
    query: str | None,
    job_type: str | None = None,
    sort: str | None = None,
    limit: int = SEARCH_LIMIT,
) -> list[Job]:
    term = (query or "").strip()
    if not term:
        return []

    pattern = _like_pattern(term)
    stmt = db.query(Job).filter(Job.job_status == OPEN).filter(
        Job.title.ilike(pattern, escape="\\") | Job.description.ilike(pattern, escape="\\")
    )
    if job_type and job_type.strip():
        stmt = stmt.filter(func.lower(Job.job_type) == job_type.strip().lower())
    if sort:
        stmt = stmt.order_by(SORT_COLUMNS[sort].desc().nulls_last(), Job.id.desc())
    else:
        stmt = stmt.order_by(Job.id)

    jobs = stmt.limit(limit).all()
    logger.info("Search for %r returned %d rows", term, len(jobs))
    return jobs


def open_jobs(db: Session, order_by: str, limit: int) -> list[Job]:
    return (
        db.query(Job)
        .filter(Job.job_status == OPEN)
        .order_by(SORT_COLUMNS[order_by].desc().nulls_last(), Job.id.desc())
        .limit(limit)
        .all()
    )


def create_job(db: Session, employer: TokenUser, req: JobCreate) -> Job:
    if employer.account_type != "Employer":
        raise ForbiddenError("Only employers can post jobs.")
    if req.title is None or not req.title.strip():
        raise ValidationError("Job title is required.")

    job = Job(
        employer_id=employer.user_id,
        title=req.title.strip(),
        description=req.description,
        salary=req.salary,
        job_type=req.job_type,
        job_status=OPEN,
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


def apply_to_job(db: Session, worker: TokenUser, job_id: int) -> Application:
    if worker.account_type != "Worker":
        raise ForbiddenError("Only workers can apply to jobs.")

    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundError("Job not found.")
    if job.job_status != OPEN:
        raise ValidationError("This job is no longer accepting applications.")

    already = (
        db.query(Application.id)
        .filter(Application.job_id == job_id, Application.worker_id == worker.user_id)
        .first()
    )
    if already:
        raise ConflictError("You have already applied to this job.")

    application = Application(job_id=job_id, worker_id=worker.user_id, status="Pending")
    db.add(application)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise ConflictError("You have already applied to this job.") from exc
    db.refresh(application)
    return application
