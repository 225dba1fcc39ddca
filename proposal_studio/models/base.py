"""Shared pydantic base for wire models."""

import uuid

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate a short unique id for sections and list items."""
    return uuid.uuid4().hex[:12]


class CamelModel(BaseModel):
    """Model accepting camelCase (wire) or snake_case (Python) field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    def to_wire(self) -> dict:
        """Serialize with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
