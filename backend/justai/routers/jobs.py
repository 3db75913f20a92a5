import logging

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from justai.database import get_db
from justai.dependencies import TokenUser, require_user
from justai.exceptions import InternalError
from justai.schemas.job import ApplicationResponse, JobCreate, JobResponse
from justai.services import job_service

logger = logging.getLogger("justai.jobs")

router = APIRouter(prefix="/jobs", tags=["jobs"])

TOP_JOBS_LIMIT = 3
# Largest value a BIGINT primary key can hold.
MAX_ID = 2**63 - 1


@router.get("/search", response_model=list[JobResponse])
def search_jobs(
    query: str | None = None,
    job_type: str | None = None,
    sort: str | None = Query(None, pattern="^(newest|salary)$"),
    db: Session = Depends(get_db),
):
    try:
        return job_service.search_jobs(db, query, job_type=job_type, sort=sort)
    except SQLAlchemyError as exc:
        logger.exception("Error executing search query")
        raise InternalError("Server error during search.") from exc


@router.get("/top-salary", response_model=list[JobResponse])
def top_salary_jobs(db: Session = Depends(get_db)):
    try:
        return job_service.open_jobs(db, "salary", TOP_JOBS_LIMIT)
    except SQLAlchemyError as exc:
        logger.exception("Top salary jobs fetch error")
        raise InternalError("Server error fetching jobs.") from exc


@router.get("/newest", response_model=list[JobResponse])
def newest_jobs(db: Session = Depends(get_db)):
    try:
        return job_service.open_jobs(db, "newest", TOP_JOBS_LIMIT)
    except SQLAlchemyError as exc:
        logger.exception("Newest jobs fetch error")
        raise InternalError("Server error fetching jobs.") from exc


@router.get("", response_model=list[JobResponse])
def list_jobs(limit: int = Query(10, ge=1, le=100), db: Session = Depends(get_db)):
    try:
        return job_service.open_jobs(db, "salary", limit)
    except SQLAlchemyError as exc:
        logger.exception("Jobs fetch error")
        raise InternalError("Server error fetching jobs.") from exc


@router.post("", response_model=JobResponse, status_code=201)
def post_job(
    req: JobCreate,
    current: TokenUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    try:
        return job_service.create_job(db, current, req)
    except SQLAlchemyError as exc:
        logger.exception("Job create error")
        raise InternalError("Server error while posting job.") from exc


@router.post("/{job_id}/apply", response_model=ApplicationResponse, status_code=201)
def apply(
    job_id: int = Path(..., ge=1, le=MAX_ID),
    current: TokenUser = Depends(require_user),
    db: Session = Depends(get_db),
):
    try:
        application = job_service.apply_to_job(db, current, job_id)
    except SQLAlchemyError as exc:
        logger.exception("Application create error")
        raise InternalError("Server error while applying.") from exc
    return ApplicationResponse(
        id=application.id,
        job_id=application.job_id,
        worker_id=application.worker_id,
        status=application.status,
        applied_at=application.applied_at,
    )
