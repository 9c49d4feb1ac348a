from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SchemaObject(BaseModel):
    """Base for every schema record.

    Records are built once per run and never mutated afterwards, so the
    models are frozen.  ``populate_by_name`` lets Python code use the
    snake_case attribute names while catalogue JSON keeps its camelCase keys.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        frozen=True,
    )
