from marshmallow import EXCLUDE, Schema

from utils.exceptions import ValidationError


class BaseSchema(Schema):
    """Schema whose load failures surface as one client-facing message.

    Subclasses set `invalid_message`, or override `message_for` when the
    message depends on which field failed.
    """
    invalid_message = "Dados inválidos"

    class Meta:
        unknown = EXCLUDE

    def message_for(self, messages, data) -> str:
        return self.invalid_message

    def handle_error(self, error, data, *, many, **kwargs):
        raise ValidationError(self.message_for(error.messages, data), details=error.messages)


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
