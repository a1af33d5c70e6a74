"""Per-user transaction queries. Every call is scoped to one owner."""
from __future__ import annotations

import logging
from typing import List, Tuple

from sqlalchemy import case, func
from sqlalchemy.exc import SQLAlchemyError

from models.db_storage import DBStorage
from models.transaction import Transaction, TransactionKind
from utils.exceptions import StorageError

logger = logging.getLogger(__name__)


class TransactionStore:
    def __init__(self, storage: DBStorage):
        self.storage = storage

    def summary(self, user_id: int) -> Tuple[int, int, int]:
        """(count, income total, expense total) for the user."""
        income = func.coalesce(
            func.sum(case((Transaction.kind == TransactionKind.INCOME.value, Transaction.amount), else_=0)), 0
        )
        expense = func.coalesce(
            func.sum(case((Transaction.kind == TransactionKind.EXPENSE.value, Transaction.amount), else_=0)), 0
        )
        try:
            total, incoming, outgoing = (
                self.storage.get_session()
                .query(func.count(Transaction.id), income, expense)
                .filter(Transaction.user_id == user_id)
                .one()
            )
        except SQLAlchemyError:
            logger.exception("Could not summarize transactions")
            raise StorageError("Erro ao buscar transações")
        return int(total), int(incoming), int(outgoing)

    def list_page(self, user_id: int, page: int, limit: int) -> List[Transaction]:
        """Newest first."""
        try:
            return (
                self.storage.get_session()
                .query(Transaction)
                .filter(Transaction.user_id == user_id)
                .order_by(Transaction.occurred_at.desc(), Transaction.id.desc())
                .offset((page - 1) * limit)
                .limit(limit)
                .all()
            )
        except SQLAlchemyError:
            logger.exception("Could not list transactions")
            raise StorageError("Erro ao buscar transações")

    def create(self, user_id: int, name: str, amount: int, category: str, kind: str) -> int:
        tx = Transaction(user_id=user_id, name=name, amount=amount, category=category, kind=kind)
        try:
            self.storage.new(tx)
            self.storage.save()
        except SQLAlchemyError:
            logger.exception("Could not create transaction")
            raise StorageError("Erro ao criar transação")
        return tx.id

    def delete(self, user_id: int, transaction_id: int) -> bool:
        """Delete one of the user's transactions. False when nothing matched."""
        session = self.storage.get_session()
        try:
            deleted = (
                session.query(Transaction)
                .filter(Transaction.id == transaction_id, Transaction.user_id == user_id)
                .delete(synchronize_session=False)
            )
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Could not delete transaction")
            raise StorageError("Erro ao deletar transação")
        return deleted > 0
