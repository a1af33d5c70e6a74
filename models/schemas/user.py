from marshmallow import fields, validate

from models.schemas.common import BaseSchema


class CredentialsSchema(BaseSchema):
    """Body of /criar-conta and /login."""
    invalid_message = "Login e senha são obrigatórios"

    login = fields.String(required=True, validate=validate.Length(min=1, max=255))
    password = fields.String(required=True, data_key="senha", load_only=True, validate=validate.Length(min=1))


class RefreshTokenSchema(BaseSchema):
    invalid_message = "Refresh token é obrigatório"

    refresh_token = fields.String(required=True, data_key="refreshToken", validate=validate.Length(min=1))


class UserOutSchema(BaseSchema):
    id = fields.Integer()
    login = fields.String()
