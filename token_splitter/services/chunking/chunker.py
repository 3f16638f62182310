"""
Chunker: takes raw text + config and returns chunk records with chunk_hash.
Deterministic and idempotent: same text, document id and config give the same records.
"""

import hashlib
import json
from typing import Any

from token_splitter.config.chunking.models import ChunkingConfig
from token_splitter.config.logging import get_logger
from token_splitter.services.chunking.token_text_splitter import TokenTextSplitter
from token_splitter.services.chunking.tokenizer import Tokenizer, count_tokens
from token_splitter.utils.ids import generate_chunk_id

logger = get_logger(__name__)

STRATEGY_NAME = "token"


def compute_chunk_hash(chunk_text: str, config: ChunkingConfig) -> str:
    """Chunk hash = SHA-256(chunk_text + strategy + canonical config)."""
    config_canonical = json.dumps(config.model_dump(mode="json"), sort_keys=True)
    payload = f"{chunk_text}|{STRATEGY_NAME}|{config_canonical}"
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def chunk_text_records(
    text: str | None,
    document_id: str,
    config: ChunkingConfig,
    tokenizer: Tokenizer | None = None,
) -> list[dict[str, Any]]:
    """
    Split text and build one record per chunk with chunk_id, chunk_index, chunk_text,
    chunk_token_count (actual, from the tokenizer) and chunk_hash.
    """
    splitter = TokenTextSplitter(config, tokenizer)
    chunk_texts = splitter.split_text(text)
    records: list[dict[str, Any]] = []
    for i, chunk_text in enumerate(chunk_texts):
        chunk_hash = compute_chunk_hash(chunk_text, config)
        records.append({
            "chunk_id": generate_chunk_id(document_id, i, chunk_hash),
            "chunk_index": i,
            "chunk_text": chunk_text,
            "chunk_token_count": count_tokens(chunk_text, splitter.tokenizer),
            "chunk_hash": chunk_hash,
        })
    logger.info(
        "Chunked document",
        extra={"document_id": document_id, "chunks": len(records), "chunk_size": config.chunk_size},
    )
    return records
