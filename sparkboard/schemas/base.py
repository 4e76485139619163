from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """
    Base for every request/response schema.

    Fields are snake_case in Python and camelCase on the wire; input accepts
    either spelling.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Message(APIModel):
    message: str


def require_text(value, field_label: str):
    """Strip a required text value and reject it when blank or null."""
    if value is None:
        raise ValueError(f"{field_label} is required")
    if not isinstance(value, str):
        raise ValueError(f"{field_label} must be a string")
    value = value.strip()
    if not value:
        raise ValueError(f"{field_label} is required")
    return value
