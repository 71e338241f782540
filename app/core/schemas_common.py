"""Shared Pydantic base for camelCase wire models."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that reads snake_case rows and speaks camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_row(self) -> dict[str, Any]:
        """Dump set fields as a snake_case dict ready for persistence."""
        return self.model_dump(exclude_unset=True, mode="json")
