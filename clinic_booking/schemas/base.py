from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def code_as_text(value):
    """Employee and doctor codes may arrive as JSON numbers; store them as text."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


class CamelModel(BaseModel):
    """Base schema exchanging camelCase JSON while accepting snake_case input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
