"""
Base model classes for the ranking engine data models.

Provides common configuration shared across all models.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EmbeddedModel(BaseModel):
    """
    Base model for in-memory records handed to and returned by the engine.

    Nothing here is persisted; records are built per call and discarded
    once the caller has consumed them.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
    )


class CamelModel(EmbeddedModel):
    """
    Base model for presentation-facing results.

    Serializes with camelCase keys via ``model_dump(by_alias=True)`` while
    keeping snake_case attribute access in Python.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        alias_generator=to_camel,
    )
