from flask import jsonify
from werkzeug.exceptions import HTTPException
from marshmallow import ValidationError as SchemaValidationError
import logging

from utils.exceptions import LedgerError

logger = logging.getLogger(__name__)


def error_response(message: str, status: int):
    return jsonify({"erro": message}), status


def register_error_handlers(app):
    # Domain errors carry their own message and status
    @app.errorhandler(LedgerError)
    def handle_ledger_error(err: LedgerError):
        if err.status >= 500:
            logger.error("Request failed: %s", err.message)
        return error_response(err.message, err.status)

    # Schemas normally translate their own failures; this covers any that don't
    @app.errorhandler(SchemaValidationError)
    def handle_validation_error(err: SchemaValidationError):
        return error_response("Dados inválidos", 400)

    # 404 Not Found
    @app.errorhandler(404)
    def not_found(e):
        return error_response("Recurso não encontrado", 404)

    # 405 Method Not Allowed
    @app.errorhandler(405)
    def method_not_allowed(e):
        return error_response("Método não permitido", 405)

    # Werkzeug HTTPExceptions map to their status codes
    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return error_response(err.description or err.name, err.code or 400)

    # 500 Internal Error (catch-all); details stay in the log
    @app.errorhandler(Exception)
    def internal_error(err: Exception):
        logger.exception("Unhandled exception", exc_info=err)
        return error_response("Erro interno do servidor", 500)
