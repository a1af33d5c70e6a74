"""Credential store: user rows keyed by a unique login."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models.db_storage import DBStorage
from models.user import User
from utils.exceptions import DuplicateLogin, StorageError

logger = logging.getLogger(__name__)


class CredentialStore:
    def __init__(self, storage: DBStorage):
        self.storage = storage

    def create_user(self, login: str, password_hash: str) -> int:
        """Insert a user and flush so the id is known; the caller commits.

        The unique index on login is what rejects duplicates, also when two
        registrations race.
        """
        user = User(login=login, password_hash=password_hash)
        session = self.storage.get_session()
        try:
            session.add(user)
            session.flush()
        except IntegrityError:
            session.rollback()
            raise DuplicateLogin()
        except SQLAlchemyError:
            session.rollback()
            logger.exception("Could not insert user")
            raise StorageError("Erro ao criar conta")
        return user.id

    def find_user_by_login(self, login: str) -> User | None:
        try:
            return self.storage.get_session().query(User).filter(User.login == login).first()
        except SQLAlchemyError:
            logger.exception("Could not look up user")
            raise StorageError("Erro ao buscar usuário")
