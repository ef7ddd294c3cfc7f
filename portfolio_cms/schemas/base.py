from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire (``isAdmin``, ``categoryId``)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

def _reject_null(cls, v):
    if v is None:
        raise ValueError("may not be null")
    return v

def not_null(*fields: str):
    """
    Validator for partial-update schemas: the listed fields may be left out,
    but an explicit null is refused since their columns are NOT NULL.
    """
    return field_validator(*fields)(_reject_null)
