from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, Text

from justai.database import Base, utcnow


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True)
    reviewer_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    reviewee_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    comment = Column(Text)
    rating = Column(Float)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
