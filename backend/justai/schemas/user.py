from datetime import datetime

from pydantic import BaseModel


class DashboardResponse(BaseModel):
    user_id: int
    name: str
    email: str
    account_type: str
    role: str | None
    company: str | None
    status: str
    rating: float | None
    profile_picture: str | None
    created_at: datetime
    total_hours_worked: float | None = None
    # Worker only
    total_earnings: float | None = None
    pending_payment: float | None = None
    # Employer only
    total_paid: float | None = None


class ReviewResponse(BaseModel):
    id: int
    reviewer_id: int
    reviewer_name: str | None
    reviewee_id: int
    reviewee_name: str | None = None
    comment: str | None
    rating: float | None
    created_at: datetime


class TestimonialResponse(BaseModel):
    id: int
    user_id: int
    name: str | None
    account_type: str | None
    content: str
    created_at: datetime
