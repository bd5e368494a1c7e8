"""Shared pydantic base for boundary models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable model that reads and writes camelCase keys.

    Callers send ``eventDate`` / ``hasContactedAcas``; Python code uses the
    snake_case attribute names. Dump with ``model_dump(by_alias=True)`` to
    get the camelCase shape back.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
