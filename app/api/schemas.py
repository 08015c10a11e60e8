"""Shared pydantic base for API payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model speaking camelCase JSON on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        str_strip_whitespace=True,
    )


# Largest value an INTEGER identity column holds
MAX_ID = 2**31 - 1


def valid_id(identity: int) -> bool:
    """Whether ``identity`` can name a row at all."""
    return 1 <= identity <= MAX_ID
