"""
Domain errors for the finance ledger.

Every error carries the human-readable message that ends up in the JSON
body and the HTTP status the API layer should answer with.
"""
from __future__ import annotations


class LedgerError(Exception):
    status = 500
    message = "Erro interno do servidor"

    def __init__(self, message: str | None = None, details: dict | None = None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class ValidationError(LedgerError):
    status = 400
    message = "Dados inválidos"


class DuplicateLogin(LedgerError):
    status = 400
    message = "Login já existe"


class InvalidCredentials(LedgerError):
    # same message for unknown login and wrong password
    status = 401
    message = "Credenciais inválidas"


class InvalidToken(LedgerError):
    status = 401
    message = "Refresh token inválido, expirado ou já utilizado"


class InvalidSignature(InvalidToken):
    pass


class TokenExpired(InvalidToken):
    pass


class Unauthorized(LedgerError):
    status = 401
    message = "Token inválido"


class NotFound(LedgerError):
    status = 404
    message = "Recurso não encontrado"


class StorageError(LedgerError):
    status = 500
    message = "Erro ao acessar o banco de dados"
