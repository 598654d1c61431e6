"""Issued session token model for the database."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from components.core.database import Base


class UserToken(Base):
    """Ledger row recording a session token issued at login."""
    __tablename__ = "user_tokens"

    id = Column(Integer, primary_key=True, index=True)
    token = Column(Text, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    expiry = Column(DateTime, nullable=False)  # UTC

    user = relationship("User", back_populates="tokens")
