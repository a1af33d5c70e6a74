"""
RefreshToken model: every refresh token ever issued, so each one can be
honored exactly once.
Fields:
- token (unique) - the signed refresh token as handed to the client
- user_id (Integer) - FK to users.id, cascades on user deletion
- consumed (bool) - flips false -> true once, never back
- created_at, expires_at (naive UTC)
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from models.base_model import BaseModel, Base


class RefreshToken(BaseModel, Base):
    __tablename__ = "refresh_tokens"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    token = Column(String(512), nullable=False, unique=True)
    expires_at = Column(DateTime, nullable=False)
    consumed = Column(Boolean, default=False, nullable=False)

    user = relationship("User", back_populates="refresh_tokens")
