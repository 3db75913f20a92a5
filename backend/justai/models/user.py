from sqlalchemy import CheckConstraint, Column, DateTime, Float, Integer, String
from sqlalchemy.orm import relationship

from justai.database import Base, utcnow

ACCOUNT_TYPES = ("Worker", "Employer")


class User(Base):
    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("account_type IN ('Worker', 'Employer')", name="ck_users_account_type"),
    )

    id = Column(Integer, primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    account_type = Column(String(20), nullable=False)
    role = Column(String(100))
    company = Column(String(150))
    status = Column(String(20), nullable=False, default="Active")
    rating = Column(Float)
    profile_picture = Column(String(255))
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    modified_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    jobs = relationship("Job", back_populates="employer")
