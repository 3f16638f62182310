"""Id generation for documents and chunks. Deterministic where required."""

import hashlib
import uuid


def compute_text_hash(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def generate_chunk_id(document_id: str, chunk_index: int, chunk_hash: str) -> str:
    """Generate a deterministic chunk_id from document, index, and hash. Stable for idempotency."""
    payload = f"{document_id}:{chunk_index}:{chunk_hash}"
    digest = hashlib.sha256(payload.encode("utf-8")).hexdigest()[:24]
    return f"chunk_{digest}"


def generate_document_id() -> str:
    """Random document id, e.g. doc_<uuid>."""
    return f"doc_{uuid.uuid4().hex[:24]}"
