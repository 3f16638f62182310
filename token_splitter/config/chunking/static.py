"""Chunking profiles loaded from static.json. Read-only; no business logic."""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from token_splitter.config.chunking.models import ChunkingConfig

_config_path = Path(__file__).resolve().parent / "static.json"

ACTIVE_PROFILE = "active"


@lru_cache
def _load_raw_data() -> dict[str, Any]:
    """Parse static.json once; both profiles and the active marker come from here."""
    return json.loads(_config_path.read_text(encoding="utf-8"))


@lru_cache
def load_chunking_profiles() -> dict[str, ChunkingConfig]:
    """Validated profiles keyed by name."""
    profiles = _load_raw_data().get("profiles", {})
    return {name: ChunkingConfig.model_validate(raw) for name, raw in profiles.items()}


def get_chunking_config(profile_name: str) -> ChunkingConfig | None:
    return load_chunking_profiles().get(profile_name)


def get_active_profile_name() -> str:
    """Profile marked as active in static.json; 'default' if the key is missing."""
    return _load_raw_data().get("active", "default")


def resolve_chunking_config(profile_name: str, inline_config: dict[str, Any] | None = None) -> ChunkingConfig:
    """
    Resolve chunking config by profile name or inline config.
    A non-empty inline_config wins and is validated as a full ChunkingConfig.
    "active" resolves to the profile marked active in static.json.
    Raises ValueError if the profile does not exist.
    """
    if inline_config:
        return ChunkingConfig.model_validate(inline_config)
    if profile_name == ACTIVE_PROFILE:
        profile_name = get_active_profile_name()
    cfg = get_chunking_config(profile_name)
    if cfg is None:
        raise ValueError(f"Unknown chunking profile: {profile_name!r}")
    return cfg
