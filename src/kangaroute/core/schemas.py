"""Shared pydantic base classes for the JSON API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema whose JSON keys are camelCase.

    The browser client speaks camelCase (``licensePlate``, ``taxId``); Python
    code keeps snake_case attribute names. Input is accepted in either form.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class MessageResponse(CamelModel):
    """Plain acknowledgement body."""

    message: str
