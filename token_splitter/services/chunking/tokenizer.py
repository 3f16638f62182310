"""Tokenizer used by the token splitter. Production encodings come from tiktoken."""

from functools import lru_cache
from typing import Protocol, Sequence

import tiktoken

from token_splitter.config.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ENCODING = "cl100k_base"


class Tokenizer(Protocol):
    """Anything that maps text to token ids and back. Both calls must be pure."""

    def encode(self, text: str) -> list[int]: ...

    def decode(self, tokens: Sequence[int]) -> str: ...


class TiktokenTokenizer:
    """Tokenizer backed by a tiktoken encoding (BPE vocabularies used by OpenAI models)."""

    def __init__(self, encoding_name: str = DEFAULT_ENCODING):
        self.encoding_name = encoding_name
        self._encoding = tiktoken.get_encoding(encoding_name)

    def encode(self, text: str) -> list[int]:
        # Special-token markers in user text are encoded as plain text, not rejected.
        return self._encoding.encode(text, disallowed_special=())

    def decode(self, tokens: Sequence[int]) -> str:
        return self._encoding.decode(list(tokens))

    def __repr__(self) -> str:
        return f"TiktokenTokenizer({self.encoding_name!r})"


@lru_cache
def get_tokenizer(encoding_name: str = DEFAULT_ENCODING) -> TiktokenTokenizer:
    """Load an encoding once per process. Unknown names raise ValueError from tiktoken."""
    logger.info("Loading tokenizer encoding", extra={"encoding": encoding_name})
    return TiktokenTokenizer(encoding_name)


def count_tokens(text: str, tokenizer: Tokenizer) -> int:
    """Return token count for text."""
    if not text:
        return 0
    return len(tokenizer.encode(text))
