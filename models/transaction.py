from enum import Enum

from sqlalchemy import Column, String, Integer, ForeignKey, DateTime, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from models.base_model import BaseModel, Base


class TransactionKind(str, Enum):
    INCOME = "entrada"
    EXPENSE = "saida"


class Transaction(BaseModel, Base):
    __tablename__ = "transactions"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(255), nullable=False)
    amount = Column(Integer, nullable=False)  # cents
    category = Column(String(128), nullable=False)
    kind = Column(String(16), nullable=False)
    occurred_at = Column(DateTime, server_default=func.now(), nullable=False)

    user = relationship("User", back_populates="transactions")

    __table_args__ = (
        CheckConstraint("kind IN ('entrada', 'saida')", name="ck_transactions_kind"),
        CheckConstraint("amount >= 0", name="ck_transactions_amount_nonnegative"),
    )
