from marshmallow import fields, validate

from models.schemas.common import BaseSchema, is_blank
from models.transaction import TransactionKind

REQUIRED_MESSAGE = "Nome, valor, categoria e tipo são obrigatórios"
KIND_MESSAGE = 'Tipo deve ser "entrada" ou "saida"'
AMOUNT_MESSAGE = "Valor deve ser um número positivo em centavos"


class TransactionCreateSchema(BaseSchema):
    name = fields.String(required=True, data_key="nome", validate=validate.Length(min=1, max=255))
    amount = fields.Integer(required=True, data_key="valor", strict=True, validate=validate.Range(min=0))
    category = fields.String(required=True, data_key="categoria", validate=validate.Length(min=1, max=128))
    kind = fields.String(
        required=True,
        data_key="tipo",
        validate=validate.OneOf([k.value for k in TransactionKind]),
    )

    def message_for(self, messages, data) -> str:
        if not isinstance(data, dict) or "valor" not in data:
            return REQUIRED_MESSAGE
        if any(is_blank(data.get(key)) for key in ("nome", "categoria", "tipo")):
            return REQUIRED_MESSAGE
        if "tipo" in messages:
            return KIND_MESSAGE
        if "valor" in messages:
            return AMOUNT_MESSAGE
        return REQUIRED_MESSAGE


class TransactionOutSchema(BaseSchema):
    id = fields.Integer()
    user_id = fields.Integer(data_key="usuario_id")
    name = fields.String(data_key="nome")
    amount = fields.Integer(data_key="valor")
    category = fields.String(data_key="categoria")
    kind = fields.String(data_key="tipo")
    occurred_at = fields.DateTime(data_key="data")
