"""
Configuration loader and per-invocation hash settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from picugen.hashing import DEFAULT_ALGORITHM, DEFAULT_CHUNK_SIZE

DEFAULT_CONFIG_PATH = Path("picugen.yaml")
ENV_CONFIG_PATH = "PICUGEN_CONFIG"


@dataclass(frozen=True)
class AppConfig:
    """Container for raw configuration data and path helpers."""

    root_dir: Path
    raw: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Path | None = None) -> "AppConfig":
        """Load configuration from YAML.

        An explicit path (argument or ``PICUGEN_CONFIG``) must exist. When
        neither is given and ``picugen.yaml`` is absent, an empty
        configuration rooted at the working directory is returned.
        """
        config_value = os.environ.get(ENV_CONFIG_PATH)
        config_path = path
        if config_path is None and config_value:
            config_path = Path(config_value)
        explicit = config_path is not None
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        config_path = config_path.expanduser()
        if not config_path.is_absolute():
            config_path = (Path.cwd() / config_path).resolve()
        if not config_path.exists():
            if explicit:
                raise FileNotFoundError(f"Config file not found: {config_path}")
            return cls(root_dir=Path.cwd())
        with config_path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_path}")
        return cls(root_dir=config_path.parent, raw=data)

    def get(self, *keys: str, default: Any = None) -> Any:
        """Retrieve nested configuration values with an optional default."""
        node: Any = self.raw
        for key in keys:
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return node

    def resolve_path(self, *keys: str, default: str | None = None) -> Optional[Path]:
        """Resolve a configured path relative to the config file, or None."""
        value = self.get(*keys, default=default)
        if value is None:
            return None
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = (self.root_dir / path).resolve()
        return path


@dataclass(frozen=True)
class HashSettings:
    """Immutable inputs shared by every subject of one invocation."""

    algorithm: str = DEFAULT_ALGORITHM
    key: bytes = b""
    salt: bytes = b""
    chunk_size: int = DEFAULT_CHUNK_SIZE

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        algorithm: Optional[str] = None,
        key: Optional[str] = None,
        salt: Optional[str] = None,
    ) -> "HashSettings":
        """Merge command-line overrides on top of the ``hashing`` section."""
        if algorithm is None:
            algorithm = str(config.get("hashing", "algorithm") or DEFAULT_ALGORITHM)
        if key is None:
            key = str(config.get("hashing", "key") or "")
        if salt is None:
            salt = str(config.get("hashing", "salt") or "")
        chunk_size = int(config.get("hashing", "chunk_bytes", default=DEFAULT_CHUNK_SIZE))
        if chunk_size <= 0:
            raise ValueError(f"hashing.chunk_bytes must be positive, got {chunk_size}")
        return cls(
            algorithm=algorithm.lower(),
            key=key.encode("utf-8", "surrogateescape"),
            salt=salt.encode("utf-8", "surrogateescape"),
            chunk_size=chunk_size,
        )
