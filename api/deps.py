"""Request-scoped access to the objects create_app wires together."""
from flask import current_app

from models.db_storage import DBStorage
from services.auth_service import AuthService


def get_storage() -> DBStorage:
    return current_app.extensions["storage"]


def get_auth_service() -> AuthService:
    return AuthService(get_storage())
