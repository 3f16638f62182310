"""
Shared test fixtures.

Provides: deterministic in-memory tokenizers (no BPE download), chunking configs,
FastAPI TestClient with the tokenizer dependency overridden.
"""

import re
from typing import Sequence

import pytest
from fastapi.testclient import TestClient

from token_splitter.config.settings import get_settings
from token_splitter.controllers.routes.split import get_tokenizer_factory
from token_splitter.main import app


class CharTokenizer:
    """One token per character; encode/decode are exact inverses."""

    def encode(self, text: str) -> list[int]:
        return [ord(c) for c in text]

    def decode(self, tokens: Sequence[int]) -> str:
        return "".join(chr(t) for t in tokens)


class WordTokenizer:
    """One token per word, per whitespace char and per punctuation char. Ids assigned on first sight."""

    _pattern = re.compile(r"\w+|\s|[^\w\s]")

    def __init__(self):
        self._ids: dict[str, int] = {}
        self._pieces: list[str] = []

    def encode(self, text: str) -> list[int]:
        out = []
        for piece in self._pattern.findall(text):
            if piece not in self._ids:
                self._ids[piece] = len(self._pieces)
                self._pieces.append(piece)
            out.append(self._ids[piece])
        return out

    def decode(self, tokens: Sequence[int]) -> str:
        return "".join(self._pieces[t] for t in tokens)


@pytest.fixture
def char_tokenizer() -> CharTokenizer:
    return CharTokenizer()


@pytest.fixture
def word_tokenizer() -> WordTokenizer:
    return WordTokenizer()


@pytest.fixture
def client(char_tokenizer: CharTokenizer):
    """TestClient whose routes tokenize with CharTokenizer regardless of encoding."""
    get_settings.cache_clear()
    app.dependency_overrides[get_tokenizer_factory] = lambda: (lambda _encoding: char_tokenizer)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    get_settings.cache_clear()
