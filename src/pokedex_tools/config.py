"""Service URLs, cache paths, and client defaults.

This module defines the PokeAPI connection defaults, the validated
client configuration model, and platform-specific cache directory logic.
"""

from __future__ import annotations

import platform
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

#: Default scheme used to reach PokeAPI.
DEFAULT_PROTOCOL = "https"

#: Public PokeAPI host.
DEFAULT_HOST_NAME = "pokeapi.co"

#: Path prefix of the v2 REST API.
DEFAULT_VERSION_PATH = "/api/v2/"

#: Per-request timeout in seconds.
DEFAULT_TIMEOUT = 20.0

#: Lifetime of a cached response, in seconds (about 11.5 days).
DEFAULT_CACHE_TTL = 1_000_000

#: Default page size for list endpoints; large enough to return every entry.
DEFAULT_LIMIT = 100_000


class ClientConfig(BaseModel):
    """Connection, cache, and pagination settings shared by every request.

    Accepts both snake_case field names and the camelCase aliases used by
    the JavaScript wrappers (``hostName``, ``versionPath``, ``cacheTtl``).
    """

    model_config = {"populate_by_name": True, "frozen": True}

    protocol: Literal["http", "https"] = Field(default=DEFAULT_PROTOCOL)
    host_name: str = Field(default=DEFAULT_HOST_NAME, alias="hostName", min_length=1)
    version_path: str = Field(default=DEFAULT_VERSION_PATH, alias="versionPath")
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    cache: bool = Field(default=True)
    cache_ttl: float = Field(default=DEFAULT_CACHE_TTL, alias="cacheTtl", gt=0)
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)

    @field_validator("version_path")
    @classmethod
    def _normalize_version_path(cls, value: str) -> str:
        return "/" + value.strip("/") + "/" if value.strip("/") else "/"

    @field_validator("host_name")
    @classmethod
    def _strip_host_name(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def coerce(cls, config: ClientConfig | Mapping[str, Any] | None) -> ClientConfig:
        """Build a config from an instance, a plain mapping, or ``None``."""
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        return cls.model_validate(dict(config))

    @property
    def origin(self) -> str:
        """``protocol://host`` with no trailing slash."""
        return f"{self.protocol}://{self.host_name}"

    @property
    def base_url(self) -> str:
        """Root of the versioned API, always ending with ``/``."""
        return f"{self.origin}{self.version_path}"


def default_cache_dir() -> Path:
    """Platform-appropriate cache directory.

    Returns:
        ``~/AppData/Local/pokedex-tools`` on Windows,
        ``~/Library/Caches/pokedex-tools`` on macOS,
        ``~/.cache/pokedex-tools`` on Linux.
    """
    system = platform.system()
    if system == "Windows":
        base = Path.home() / "AppData" / "Local"
    elif system == "Darwin":
        base = Path.home() / "Library" / "Caches"
    else:
        base = Path.home() / ".cache"
    return base / "pokedex-tools"
