from datetime import datetime

from pydantic import BaseModel, ConfigDict


class JobCreate(BaseModel):
    title: str | None = None
    description: str | None = None
    salary: float | None = None
    job_type: str | None = None


class JobResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    employer_id: int
    title: str
    description: str | None
    salary: float | None
    job_type: str | None
    job_status: str
    created_at: datetime


class ApplicationResponse(BaseModel):
    id: int
    job_id: int
    status: str
    applied_at: datetime
    job_title: str | None = None
    job_status: str | None = None
    worker_id: int | None = None
    worker_name: str | None = None
