"""Request/response schemas for POST /split."""

from pydantic import BaseModel, Field


class SplitRequest(BaseModel):
    """POST /split request body. Profile from static.json unless named; fields below override it."""

    text: str = Field(..., description="Text to split; blank text yields no chunks")
    document_id: str | None = Field(default=None, min_length=1, description="Id used to derive chunk ids")
    profile: str | None = Field(default=None, min_length=1, description="Chunking profile name")
    chunk_size: int | None = Field(default=None, ge=1, description="Target chunk size in tokens")
    min_chunk_size_chars: int | None = Field(default=None, ge=0)
    min_chunk_length_to_embed: int | None = Field(default=None, ge=0)
    max_num_chunks: int | None = Field(default=None, ge=1)
    keep_separator: bool | None = Field(default=None)


class ChunkOut(BaseModel):
    chunk_id: str
    chunk_index: int = Field(..., ge=0)
    chunk_text: str
    chunk_token_count: int = Field(..., ge=0)
    chunk_hash: str


class SplitResponse(BaseModel):
    """POST /split response body."""

    document_id: str
    profile: str = Field(..., description="Profile the request resolved to")
    total_chunks: int = Field(..., ge=0)
    chunks: list[ChunkOut] = Field(default_factory=list)
