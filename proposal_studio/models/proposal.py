"""Proposal model - the whole document value passed to render and export."""

from datetime import datetime, timezone
from typing import Any, Dict, List
from pydantic import Field, ValidationError, field_validator, model_validator

from proposal_studio.core.errors import ProposalValidationError
from proposal_studio.models.base import CamelModel, new_id
from proposal_studio.models.sections import Section
from proposal_studio.models.theme import DesignSettings


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Proposal(CamelModel):
    """An ordered list of sections plus the theme they are rendered with."""
    id: str = Field(default_factory=new_id)
    title: str = Field(..., description="Proposal title, also used for the filename")
    client_name: str = Field("", description="Client shown on the cover")
    sections: List[Section] = Field(
        default_factory=list,
        description="Ordered sections; order is document order"
    )
    design_settings: DesignSettings = Field(default_factory=DesignSettings)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value

    @field_validator("client_name", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return value or ""

    @model_validator(mode="after")
    def check_unique_section_ids(self) -> "Proposal":
        """Section ids must be unique within the proposal."""
        seen = set()
        for section in self.sections:
            if section.id in seen:
                raise ValueError(f"duplicate section id '{section.id}'")
            seen.add(section.id)
        return self

    @property
    def theme(self) -> DesignSettings:
        return self.design_settings


def parse_proposal(data: Dict[str, Any]) -> Proposal:
    """
    Validate raw proposal data.

    Args:
        data: Proposal dictionary (camelCase or snake_case keys)

    Returns:
        Validated Proposal

    Raises:
        ProposalValidationError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise ProposalValidationError("Proposal data required")
    try:
        return Proposal.model_validate(data)
    except ValidationError as e:
        raise ProposalValidationError.from_pydantic(e) from e
