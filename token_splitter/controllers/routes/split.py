"""POST /split: split one text into token-bounded chunks. Options from static.json profile plus overrides."""

from typing import Callable

from fastapi import APIRouter, Depends, HTTPException

from token_splitter.config.chunking.static import ACTIVE_PROFILE, get_active_profile_name, resolve_chunking_config
from token_splitter.config.logging import get_logger
from token_splitter.config.settings import Settings, get_settings
from token_splitter.controllers.schema.split import ChunkOut, SplitRequest, SplitResponse
from token_splitter.services.chunking.chunker import chunk_text_records
from token_splitter.services.chunking.tokenizer import Tokenizer, get_tokenizer
from token_splitter.utils.ids import generate_document_id

logger = get_logger(__name__)

router = APIRouter(prefix="/split", tags=["chunking"])

_OVERRIDE_FIELDS = (
    "chunk_size",
    "min_chunk_size_chars",
    "min_chunk_length_to_embed",
    "max_num_chunks",
    "keep_separator",
)


def get_tokenizer_factory() -> Callable[[str], Tokenizer]:
    """Dependency: maps an encoding name to a tokenizer. Overridden in tests."""
    return get_tokenizer


@router.post("", response_model=SplitResponse)
def split_text(
    body: SplitRequest,
    settings: Settings = Depends(get_settings),
    tokenizer_factory: Callable[[str], Tokenizer] = Depends(get_tokenizer_factory),
) -> SplitResponse:
    """
    Split body.text with the named (or configured) profile. Request fields that are set
    override the profile. Unknown profile is 400; oversized text is 413.
    """
    if len(body.text) > settings.max_text_chars:
        raise HTTPException(status_code=413, detail=f"Text exceeds {settings.max_text_chars} characters")

    profile = body.profile or settings.chunking_profile
    if profile == ACTIVE_PROFILE:
        profile = get_active_profile_name()
    try:
        base = resolve_chunking_config(profile)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    overrides = {name: getattr(body, name) for name in _OVERRIDE_FIELDS if getattr(body, name) is not None}
    inline_config = {**base.model_dump(), **overrides} if overrides else None
    config = resolve_chunking_config(profile, inline_config)

    document_id = body.document_id or generate_document_id()
    records = chunk_text_records(
        body.text,
        document_id=document_id,
        config=config,
        tokenizer=tokenizer_factory(config.encoding),
    )
    return SplitResponse(
        document_id=document_id,
        profile=profile,
        total_chunks=len(records),
        chunks=[ChunkOut(**r) for r in records],
    )
