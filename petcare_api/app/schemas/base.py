"""
Shared base models.

The API speaks camelCase JSON (``ownerId``, ``createdAt``) while the
Python attributes stay snake_case.  Models accept either spelling on
input and serialise by alias.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class RecordBase(CamelModel):
    """Fields shared by every stored record."""

    id: str = Field(..., examples=["3f2b8c1e-2a44-4d1b-9a53-7f0e8f1c2d3a"])
    created_at: str = Field(..., examples=["2024-01-01T10:00:00.000Z"])

    model_config = {
        "frozen": True,
    }
