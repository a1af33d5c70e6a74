from __future__ import annotations
from functools import wraps
from flask import request, g
from utils.exceptions import InvalidToken, Unauthorized
from utils.security import decode_access_token


def authenticate(authorization: str | None) -> int:
    """
    Resolve the user id carried by a "Bearer <token>" header.
    Trusts the signature alone: no database lookup happens here.
    """
    scheme, _, token = (authorization or "").strip().partition(" ")
    token = token.strip()
    if not token:
        raise Unauthorized("Token não fornecido")
    if scheme.lower() != "bearer":
        raise Unauthorized("Token inválido")
    try:
        decoded = decode_access_token(token)
    except InvalidToken:
        raise Unauthorized("Token inválido")
    return decoded["id"]


def jwt_required():
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            g.current_user_id = authenticate(request.headers.get("Authorization"))
            return fn(*args, **kwargs)

        return wrapper

    return decorator
