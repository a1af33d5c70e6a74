"""
Refresh token ledger.

Every issued refresh token gets a row. A row is honored at most once: the
consume step is a single conditional UPDATE, so two requests presenting the
same token cannot both see consumed=false and both rotate.
"""
from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy import or_, update
from sqlalchemy.exc import SQLAlchemyError

from models.db_storage import DBStorage
from models.refresh_token import RefreshToken
from utils.exceptions import StorageError

logger = logging.getLogger(__name__)


class RefreshTokenLedger:
    def __init__(self, storage: DBStorage):
        self.storage = storage

    def record(self, user_id: int, token: str, expires_at: datetime) -> RefreshToken:
        """Persist a new, unconsumed entry (flushed, not committed)."""
        row = RefreshToken(user_id=user_id, token=token, expires_at=expires_at, consumed=False)
        session = self.storage.get_session()
        try:
            session.add(row)
            session.flush()
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Could not record refresh token")
            raise StorageError("Erro ao gerar refresh token")
        return row

    def find_unconsumed(self, token: str) -> RefreshToken | None:
        """Exact match on the token string among unconsumed rows. Expiry is the caller's job."""
        try:
            return (
                self.storage.get_session()
                .query(RefreshToken)
                .filter(RefreshToken.token == token, RefreshToken.consumed.is_(False))
                .first()
            )
        except SQLAlchemyError:
            logger.exception("Could not look up refresh token")
            raise StorageError("Erro ao verificar refresh token")

    def mark_consumed(self, token_id: int) -> bool:
        """Flip consumed for one row. Returns False if it was already consumed."""
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.id == token_id, RefreshToken.consumed.is_(False))
            .values(consumed=True)
            .execution_options(synchronize_session=False)
        )
        session = self.storage.get_session()
        try:
            result = session.execute(stmt)
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Could not consume refresh token")
            raise StorageError("Erro ao processar refresh token")
        return result.rowcount == 1

    def prune(self, now: datetime) -> int:
        """Delete consumed rows and rows past expiry; commits. Returns the count."""
        session = self.storage.get_session()
        try:
            deleted = (
                session.query(RefreshToken)
                .filter(or_(RefreshToken.consumed.is_(True), RefreshToken.expires_at <= now))
                .delete(synchronize_session=False)
            )
            session.commit()
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Could not prune refresh tokens")
            raise StorageError()
        if deleted:
            logger.info("Pruned refresh tokens: cutoff=%s, deleted=%s", now.isoformat(), deleted)
        return deleted
