"""Document model passed through splitters."""

from typing import Any

from pydantic import BaseModel, Field

from token_splitter.utils.ids import generate_document_id


class Document(BaseModel):
    """A piece of content plus free-form metadata."""

    id: str = Field(default_factory=generate_document_id, min_length=1)
    content: str = Field(default="")
    metadata: dict[str, Any] = Field(default_factory=dict)
