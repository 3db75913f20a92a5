from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from justai.database import Base, utcnow


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True)
    employer_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text)
    salary = Column(Float)
    job_type = Column(String(50))
    job_status = Column(String(20), nullable=False, default="Open", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    employer = relationship("User", back_populates="jobs")
    applications = relationship("Application", back_populates="job")
