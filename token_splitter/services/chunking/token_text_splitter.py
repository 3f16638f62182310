"""
Token-aware text splitter. Cuts text into windows of chunk_size model tokens and
prefers to end each chunk at the last sentence-ending mark past min_chunk_size_chars.
"""

import re

from token_splitter.config.chunking.models import ChunkingConfig
from token_splitter.config.logging import get_logger
from token_splitter.services.chunking.base import BaseTextSplitter
from token_splitter.services.chunking.tokenizer import Tokenizer, get_tokenizer

logger = get_logger(__name__)

_BOUNDARY_CHARS = (".", "?", "!", "\n")
_LINE_SEPARATOR = re.compile(r"\r\n|\r|\n")


def _collapse_line_separators(text: str) -> str:
    return _LINE_SEPARATOR.sub(" ", text)


def _last_boundary(text: str) -> int:
    """Index of the last '.', '?', '!' or newline in text, -1 if none."""
    return max(text.rfind(ch) for ch in _BOUNDARY_CHARS)


class TokenTextSplitter(BaseTextSplitter):
    """Split text into chunks bounded by a token budget."""

    def __init__(self, config: ChunkingConfig | None = None, tokenizer: Tokenizer | None = None):
        self.config = config or ChunkingConfig()
        self.tokenizer = tokenizer or get_tokenizer(self.config.encoding)

    def split_text(self, text: str) -> list[str]:
        return self.split(text, self.config.chunk_size)

    def split(self, text: str | None, chunk_size: int) -> list[str]:
        """
        Split text into chunks of at most chunk_size tokens.

        Each window is decoded and, when a '.', '?', '!' or newline sits past
        min_chunk_size_chars, cut right after the last one. The tokens consumed are
        recounted from the cut text, since encode/decode do not round-trip on
        arbitrary substrings. After max_num_chunks windows, whatever is left is
        flushed as one final chunk, so up to max_num_chunks + 1 chunks come back.

        Raises ValueError if chunk_size is not positive.
        """
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be a positive integer, got {chunk_size}")
        if text is None or not text.strip():
            return []

        cfg = self.config
        tokens = self.tokenizer.encode(text)
        total = len(tokens)
        start = 0
        chunks: list[str] = []
        num_chunks = 0
        while start < total and num_chunks < cfg.max_num_chunks:
            window = tokens[start : start + chunk_size]
            chunk_text = self.tokenizer.decode(window)

            # Whitespace-only windows are dropped without counting toward the cap
            if not chunk_text.strip():
                start += len(window)
                continue

            last_punctuation = _last_boundary(chunk_text)
            if last_punctuation != -1 and last_punctuation > cfg.min_chunk_size_chars:
                chunk_text = chunk_text[: last_punctuation + 1]

            if cfg.keep_separator:
                candidate = chunk_text.strip()
            else:
                candidate = _collapse_line_separators(chunk_text).strip()
            if len(candidate) > cfg.min_chunk_length_to_embed:
                chunks.append(candidate)

            start += len(self.tokenizer.encode(chunk_text))
            num_chunks += 1

        if start < total:
            remaining_text = _collapse_line_separators(self.tokenizer.decode(tokens[start:])).strip()
            if len(remaining_text) > cfg.min_chunk_length_to_embed:
                chunks.append(remaining_text)
            logger.debug(
                "Chunk cap reached, flushed remaining tokens",
                extra={"max_num_chunks": cfg.max_num_chunks, "remaining_tokens": total - start},
            )

        logger.debug(
            "Split text into chunks",
            extra={"tokens": total, "chunk_size": chunk_size, "chunks": len(chunks)},
        )
        return chunks
