"""Shared base model for API schemas.

The web client speaks camelCase (``hexCode``, ``fontFamily``, ``createdAt``);
Python code uses snake_case attribute names. Either form is accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serializing field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
