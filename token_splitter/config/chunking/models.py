"""Chunking configuration models. Read-only; no business logic."""

from pydantic import BaseModel, ConfigDict, Field


class ChunkingConfig(BaseModel):
    """Token splitter parameters. Frozen so one instance can be shared across requests."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    chunk_size: int = Field(default=800, ge=1, description="Target size of each chunk in tokens")
    min_chunk_size_chars: int = Field(
        default=350, ge=0, description="Minimum chars before a punctuation cut is honored"
    )
    min_chunk_length_to_embed: int = Field(
        default=5, ge=0, description="Chunks not longer than this are discarded"
    )
    max_num_chunks: int = Field(default=10000, ge=1, description="Cap on windowed chunks per text")
    keep_separator: bool = Field(default=True, description="Keep line separators inside chunks")
    encoding: str = Field(default="cl100k_base", min_length=1, description="tiktoken encoding name")
