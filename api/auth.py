"""
Authentication blueprint:
- POST /api/criar-conta
- POST /api/login
- POST /api/refresh-token

The implementation:
- Uses argon2 for password hashing (via utils.security)
- Issues 10-minute access tokens and 7-day refresh tokens (JWTs signed with
  HS256, a distinct secret for each kind)
- Stores refresh tokens in the DB (RefreshToken model) so each is honored once
  and replaced on every refresh (rotation)
"""
from __future__ import annotations

from flask import Blueprint, request, jsonify

from api.deps import get_auth_service
from models.schemas.user import CredentialsSchema, RefreshTokenSchema, UserOutSchema

bp = Blueprint("auth", __name__)

credentials_schema = CredentialsSchema()
refresh_schema = RefreshTokenSchema()
user_out_schema = UserOutSchema()


@bp.post("/criar-conta")
def register():
    """
    Register a new account.
    Body: { "login": "<login>", "senha": "<password>" }
    201 -> { mensagem, id }; 400 on missing fields or a login already taken.
    """
    payload = request.get_json(silent=True) or {}
    data = credentials_schema.load(payload)

    user_id = get_auth_service().register(data["login"], data["password"])

    return jsonify(
        {
            "mensagem": "Conta criada com sucesso",
            "id": user_id,
        }
    ), 201


@bp.post("/login")
def login():
    """
    Login: return an access token, a refresh token and the public user view.
    Body: { "login": "<login>", "senha": "<password>" }
    """
    payload = request.get_json(silent=True) or {}
    data = credentials_schema.load(payload)

    result = get_auth_service().login(data["login"], data["password"])

    return jsonify(
        {
            "mensagem": "Login realizado com sucesso",
            "token": result["token"],
            "refreshToken": result["refresh_token"],
            "usuario": user_out_schema.dump(result["user"]),
        }
    ), 200


@bp.post("/refresh-token")
def refresh():
    """
    Use a refresh token to obtain new access and refresh tokens (rotation).
    The presented token is consumed; presenting it again is a 401.
    Body: { "refreshToken": "<token>" }
    """
    payload = request.get_json(silent=True) or {}
    data = refresh_schema.load(payload)

    result = get_auth_service().refresh(data["refresh_token"])

    return jsonify(
        {
            "mensagem": "Token atualizado com sucesso",
            "token": result["token"],
            "refreshToken": result["refresh_token"],
        }
    ), 200
