from sqlalchemy import text
from sqlalchemy.orm import Session

from justai.exceptions import NotFoundError
from justai.models.user import User

_WORKER_TOTALS = text("""
    SELECT
        COALESCE(SUM(hours_worked), 0) AS total_hours_worked,
        COALESCE(SUM(CASE WHEN status = 'Paid' THEN amount END), 0) AS total_earnings,
        COALESCE(SUM(CASE WHEN status = 'Pending' THEN amount END), 0) AS pending_payment
    FROM payments
    WHERE worker_id = :user_id
""")

_EMPLOYER_TOTALS = text("""
    SELECT
        COALESCE(SUM(p.hours_worked), 0) AS total_hours_worked,
        COALESCE(SUM(CASE WHEN p.status = 'Paid' THEN p.amount END), 0) AS total_paid
    FROM payments p
    JOIN jobs j ON j.id = p.job_id
    WHERE j.employer_id = :user_id
""")


def get_dashboard(db: Session, user_id: int) -> dict:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError()

    profile = {
        "user_id": user.id,
        "name": user.name,
        "email": user.email,
        "account_type": user.account_type,
        "role": user.role,
        "company": user.company,
        "status": user.status,
        "rating": user.rating,
        "profile_picture": user.profile_picture,
        "created_at": user.created_at,
    }

    if user.account_type == "Employer":
        row = db.execute(_EMPLOYER_TOTALS, {"user_id": user.id}).fetchone()
        profile["total_hours_worked"] = float(row.total_hours_worked)
        profile["total_paid"] = float(row.total_paid)
    else:
        row = db.execute(_WORKER_TOTALS, {"user_id": user.id}).fetchone()
        profile["total_hours_worked"] = float(row.total_hours_worked)
        profile["total_earnings"] = float(row.total_earnings)
        profile["pending_payment"] = float(row.pending_payment)

    return profile
