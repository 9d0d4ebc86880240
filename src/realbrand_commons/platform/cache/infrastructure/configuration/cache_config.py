"""Hybrid cache configuration management.

ONLY cache configuration functionality - handles remote tier, in-process
tier and write policy settings, with environment and file loading.
"""

import json
import os
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .....core.exceptions import CacheConfigurationError
from ...core.value_objects.write_policy import WritePolicy


class ConfigSource(Enum):
    """Configuration source types."""
    ENVIRONMENT = "environment"
    FILE = "file"
    DEFAULTS = "defaults"
    OVERRIDE = "override"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _parse_optional_int(value: str) -> Optional[int]:
    value = value.strip()
    if value == "" or value.lower() == "none":
        return None
    return int(value)


def _parse_optional_float(value: str) -> Optional[float]:
    value = value.strip()
    if value == "" or value.lower() == "none":
        return None
    return float(value)


@dataclass
class RemoteCacheConfig:
    """Remote key-value tier settings."""

    endpoint: str = "redis://localhost:6379"
    credentials: Optional[str] = None
    default_ttl_seconds: int = 3600  # 1 hour
    namespace: str = "realbrand"
    # None leaves timeouts to the caller
    socket_timeout_seconds: Optional[float] = None

    def __post_init__(self):
        if not self.endpoint:
            raise CacheConfigurationError("remote.endpoint must not be empty")
        if self.default_ttl_seconds <= 0:
            raise CacheConfigurationError(
                "remote.default_ttl_seconds must be positive",
                details={"default_ttl_seconds": self.default_ttl_seconds},
            )
        if not self.namespace:
            raise CacheConfigurationError("remote.namespace must not be empty")
        if self.socket_timeout_seconds is not None and self.socket_timeout_seconds <= 0:
            raise CacheConfigurationError("remote.socket_timeout_seconds must be positive")

    def get_connection_params(self) -> Dict[str, Any]:
        """Keyword arguments for ``redis.asyncio.from_url``."""
        params: Dict[str, Any] = {}
        if self.credentials:
            params["password"] = self.credentials
        if self.socket_timeout_seconds is not None:
            params["socket_timeout"] = self.socket_timeout_seconds
            params["socket_connect_timeout"] = self.socket_timeout_seconds
        return params

    def __repr__(self) -> str:
        # Never leak credentials into logs
        return (f"RemoteCacheConfig(endpoint={self.endpoint!r}, "
                f"namespace={self.namespace!r}, "
                f"ttl={self.default_ttl_seconds}s)")


@dataclass
class MemoryCacheConfig:
    """In-process tier settings."""

    max_entries: int = 1000
    default_ttl_seconds: Optional[float] = 1800  # 30 minutes, None = unbounded

    def __post_init__(self):
        if self.max_entries <= 0:
            raise CacheConfigurationError(
                "memory.max_entries must be positive",
                details={"max_entries": self.max_entries},
            )
        if self.default_ttl_seconds is not None and self.default_ttl_seconds <= 0:
            raise CacheConfigurationError(
                "memory.default_ttl_seconds must be positive or None",
                details={"default_ttl_seconds": self.default_ttl_seconds},
            )


@dataclass
class HybridCacheConfig:
    """Main hybrid cache configuration.

    Validated on construction; an invalid configuration means the
    coordinator refuses to start.
    """

    remote: RemoteCacheConfig = field(default_factory=RemoteCacheConfig)
    memory: MemoryCacheConfig = field(default_factory=MemoryCacheConfig)
    write_policy: WritePolicy = WritePolicy.WRITE_THROUGH
    fallback_on_remote_error: bool = True
    # None = unbounded detached write-behind writes
    max_pending_writes: Optional[int] = None

    config_source: ConfigSource = ConfigSource.DEFAULTS

    def __post_init__(self):
        if isinstance(self.remote, dict):
            self.remote = RemoteCacheConfig(**self.remote)
        if isinstance(self.memory, dict):
            self.memory = MemoryCacheConfig(**self.memory)
        self.write_policy = WritePolicy.parse(self.write_policy)
        if isinstance(self.config_source, str):
            self.config_source = ConfigSource(self.config_source)
        if self.max_pending_writes is not None and self.max_pending_writes <= 0:
            raise CacheConfigurationError(
                "max_pending_writes must be positive or None",
                details={"max_pending_writes": self.max_pending_writes},
            )

    @classmethod
    def from_environment(cls, prefix: str = "REALBRAND_CACHE") -> "HybridCacheConfig":
        """Create configuration from environment variables.

        Unset variables keep their defaults.
        """
        remote_mapping = {
            f"{prefix}_REDIS_URL": ("endpoint", str),
            f"{prefix}_REDIS_TOKEN": ("credentials", str),
            f"{prefix}_REDIS_TTL_SECONDS": ("default_ttl_seconds", int),
            f"{prefix}_REDIS_SOCKET_TIMEOUT": ("socket_timeout_seconds", _parse_optional_float),
            f"{prefix}_NAMESPACE": ("namespace", str),
        }
        memory_mapping = {
            f"{prefix}_MEMORY_MAX_ENTRIES": ("max_entries", int),
            f"{prefix}_MEMORY_TTL_SECONDS": ("default_ttl_seconds", _parse_optional_float),
        }
        top_mapping = {
            f"{prefix}_WRITE_POLICY": ("write_policy", WritePolicy.parse),
            f"{prefix}_FALLBACK": ("fallback_on_remote_error", _parse_bool),
            f"{prefix}_MAX_PENDING_WRITES": ("max_pending_writes", _parse_optional_int),
        }

        remote = cls._read_env(remote_mapping)
        memory = cls._read_env(memory_mapping)
        top = cls._read_env(top_mapping)

        return cls(
            remote=RemoteCacheConfig(**remote),
            memory=MemoryCacheConfig(**memory),
            config_source=ConfigSource.ENVIRONMENT,
            **top,
        )

    @staticmethod
    def _read_env(mapping: Dict[str, Any]) -> Dict[str, Any]:
        values: Dict[str, Any] = {}
        for env_var, (field_name, converter) in mapping.items():
            env_value = os.getenv(env_var)
            if env_value is None:
                continue
            try:
                values[field_name] = converter(env_value)
            except (ValueError, TypeError) as e:
                raise CacheConfigurationError(
                    f"Invalid value for {env_var}: {env_value} - {e}",
                    details={"variable": env_var},
                ) from e
        return values

    @classmethod
    def from_dict(
        cls,
        config_dict: Dict[str, Any],
        source: ConfigSource = ConfigSource.OVERRIDE
    ) -> "HybridCacheConfig":
        """Create configuration from a nested dictionary.

        Accepts ``writePolicy``/``fallbackOnRemoteError`` spellings as used
        by the brokerage front end configuration files.
        """
        aliases = {
            "writePolicy": "write_policy",
            "fallbackOnRemoteError": "fallback_on_remote_error",
            "maxPendingWrites": "max_pending_writes",
        }
        data = {aliases.get(key, key): value for key, value in config_dict.items()}

        remote = dict(data.pop("remote", None) or {})
        memory = dict(data.pop("memory", None) or {})
        for section, section_aliases in (
            (remote, {"defaultTtlSeconds": "default_ttl_seconds",
                      "socketTimeoutSeconds": "socket_timeout_seconds"}),
            (memory, {"maxEntries": "max_entries",
                      "defaultTtlSeconds": "default_ttl_seconds"}),
        ):
            for alias, name in section_aliases.items():
                if alias in section:
                    section[name] = section.pop(alias)

        data["config_source"] = source
        try:
            return cls(
                remote=RemoteCacheConfig(**remote),
                memory=MemoryCacheConfig(**memory),
                **data,
            )
        except TypeError as e:
            raise CacheConfigurationError(f"Unknown cache configuration option: {e}") from e

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "HybridCacheConfig":
        """Create configuration from a JSON or YAML file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r") as f:
            if file_path.suffix.lower() in [".yaml", ".yml"]:
                config_data = yaml.safe_load(f) or {}
            elif file_path.suffix.lower() == ".json":
                config_data = json.load(f)
            else:
                raise CacheConfigurationError(
                    f"Unsupported configuration file format: {file_path.suffix}"
                )

        return cls.from_dict(config_data, source=ConfigSource.FILE)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a plain dictionary (credentials redacted)."""
        config_dict = asdict(self)
        config_dict["write_policy"] = self.write_policy.value
        config_dict["config_source"] = self.config_source.value
        if config_dict["remote"].get("credentials"):
            config_dict["remote"]["credentials"] = "***"
        return config_dict

    def __str__(self) -> str:
        return (f"HybridCacheConfig(policy={self.write_policy.value}, "
                f"source={self.config_source.value})")


def create_cache_config(
    source: str = "environment",
    config_path: Optional[str] = None,
) -> HybridCacheConfig:
    """Factory function to create cache configuration.

    Args:
        source: Configuration source ("environment", "file", "defaults")
        config_path: Path to configuration file (if source="file")
    """
    if source == "environment":
        return HybridCacheConfig.from_environment()
    elif source == "file":
        if not config_path:
            raise CacheConfigurationError("config_path required when source='file'")
        return HybridCacheConfig.from_file(config_path)
    elif source == "defaults":
        return HybridCacheConfig()
    raise CacheConfigurationError(f"Invalid configuration source: {source}")
