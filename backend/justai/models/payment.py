from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, String

from justai.database import Base, utcnow


class Payment(Base):
    __tablename__ = "payments"
    __table_args__ = (
        CheckConstraint("status IN ('Paid', 'Pending')", name="ck_payments_status"),
    )

    id = Column(Integer, primary_key=True)
    worker_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id"), nullable=False, index=True)
    hours_worked = Column(Float, nullable=False, default=0)
    amount = Column(Float, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="Pending")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
