"""Tokenizer readiness probe."""

from typing import Any, Callable

from token_splitter.config.logging import get_logger
from token_splitter.services.chunking.tokenizer import Tokenizer

logger = get_logger(__name__)

_PROBE_TEXT = "Readiness probe. Is the encoding loaded?"


def ping_tokenizer(tokenizer_factory: Callable[[str], Tokenizer], encoding_name: str) -> dict[str, Any]:
    """
    Load the encoding and round-trip a probe string. Returns dict with 'ok' bool and
    optional 'error' string. A first load may download the BPE file, so network and
    cache failures land here as OSError.
    """
    try:
        tokenizer = tokenizer_factory(encoding_name)
        if tokenizer.decode(tokenizer.encode(_PROBE_TEXT)) != _PROBE_TEXT:
            return {"ok": False, "error": "round_trip_mismatch"}
        return {"ok": True}
    except (ValueError, KeyError) as e:
        logger.warning("Unknown tokenizer encoding", extra={"encoding": encoding_name, "error": type(e).__name__})
        return {"ok": False, "error": "unknown_encoding"}
    except OSError as e:
        logger.warning("Tokenizer load failed", extra={"encoding": encoding_name, "error": type(e).__name__})
        return {"ok": False, "error": "load_failed"}
