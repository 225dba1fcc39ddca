"""Export result model."""

from pydantic import BaseModel, Field


class ExportedDocument(BaseModel):
    """A finished export ready to stream to the caller."""
    filename: str = Field(..., description="Sanitized download filename")
    content_type: str = Field("application/pdf", description="MIME type")
    content: bytes = Field(..., description="Document bytes")
    page_count: int = Field(0, description="Number of composed pages")

    @property
    def size(self) -> int:
        return len(self.content)
