"""
Registration, login and refresh-token rotation.

Policy: 10-minute access tokens, 7-day single-use refresh tokens. Each
successful refresh consumes the presented token and mints a replacement, so
a session is a chain of tokens where only the newest link is usable.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from models.db_storage import DBStorage
from models.refresh_token_ledger import RefreshTokenLedger
from models.user_store import CredentialStore
from utils.exceptions import InvalidCredentials, InvalidToken, LedgerError, StorageError, ValidationError
from utils.security import (
    create_access_token,
    create_refresh_token,
    decode_refresh_token,
    hash_password,
    utcnow,
    verify_password,
)

logger = logging.getLogger(__name__)

MISSING_CREDENTIALS = "Login e senha são obrigatórios"

# verified against when the login is unknown
DUMMY_PASSWORD_HASH = hash_password("not-a-real-password")


class AuthService:
    def __init__(self, storage: DBStorage):
        self.storage = storage
        self.credentials = CredentialStore(storage)
        self.ledger = RefreshTokenLedger(storage)

    def register(self, login: str, password: str) -> int:
        if not login or not password:
            raise ValidationError(MISSING_CREDENTIALS)

        pw_hash = hash_password(password)
        user_id = self.credentials.create_user(login, pw_hash)
        self._commit("Erro ao criar conta")
        logger.info("Account created: user_id=%s", user_id)
        return user_id

    def login(self, login: str, password: str) -> Dict[str, Any]:
        if not login or not password:
            raise ValidationError(MISSING_CREDENTIALS)

        user = self.credentials.find_user_by_login(login)
        if user is None:
            # same argon2 cost as a wrong password, so timing does not reveal unknown logins
            verify_password(password, DUMMY_PASSWORD_HASH)
            logger.warning("Failed login attempt")
            raise InvalidCredentials()
        if not verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise InvalidCredentials()

        try:
            tokens = self._issue_pair(user.id)
            self._commit("Erro ao gerar refresh token")
        except LedgerError:
            self.storage.rollback()
            raise
        logger.info("Login: user_id=%s", user.id)
        tokens["user"] = {"id": user.id, "login": user.login}
        return tokens

    def refresh(self, refresh_token: str) -> Dict[str, str]:
        if not refresh_token:
            raise ValidationError("Refresh token é obrigatório")

        try:
            claims = decode_refresh_token(refresh_token)
        except InvalidToken:
            raise InvalidToken() from None

        row = self.ledger.find_unconsumed(refresh_token)
        if row is None:
            logger.warning("Refresh token not honored (unknown or already used): user_id=%s", claims["id"])
            raise InvalidToken()
        if row.expires_at <= utcnow():
            raise InvalidToken()

        # consume and replace in one transaction: no burned token without a successor
        try:
            if not self.ledger.mark_consumed(row.id):
                logger.warning("Refresh token consumed concurrently: user_id=%s", claims["id"])
                raise InvalidToken()
            tokens = self._issue_pair(claims["id"])
            self._commit("Erro ao gerar novo refresh token")
        except LedgerError:
            self.storage.rollback()
            raise
        logger.info("Refresh token rotated: user_id=%s", claims["id"])
        return tokens

    def _issue_pair(self, user_id: int) -> Dict[str, str]:
        now = utcnow()
        access = create_access_token(user_id, now=now)
        refresh = create_refresh_token(user_id, now=now)
        self.ledger.record(user_id, refresh, now + current_app.config["REFRESH_TOKEN_EXPIRES"])
        return {"token": access, "refresh_token": refresh}

    def _commit(self, message: str) -> None:
        try:
            self.storage.save()
        except SQLAlchemyError:
            logger.exception("Commit failed")
            raise StorageError(message)
