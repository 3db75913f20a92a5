from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from justai.database import Base, utcnow


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    id = Column(Integer, primary_key=True)
    # Null for guest submissions.
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    category = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default="Open")
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    modified_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)
