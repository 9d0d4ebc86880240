"""Tests for hybrid cache configuration."""

import json

import pytest

from realbrand_commons.core.exceptions import CacheConfigurationError
from realbrand_commons.platform.cache import (
    ConfigSource,
    HybridCacheConfig,
    MemoryCacheConfig,
    RemoteCacheConfig,
    WritePolicy,
    create_cache_config,
)


class TestDefaults:
    """Default values and validation."""

    def test_defaults(self):
        config = HybridCacheConfig()

        assert config.remote.default_ttl_seconds == 3600
        assert config.remote.namespace == "realbrand"
        assert config.memory.max_entries == 1000
        assert config.memory.default_ttl_seconds == 1800
        assert config.write_policy is WritePolicy.WRITE_THROUGH
        assert config.fallback_on_remote_error is True
        assert config.max_pending_writes is None
        assert config.config_source is ConfigSource.DEFAULTS

    @pytest.mark.parametrize("kwargs", [
        {"max_entries": 0},
        {"max_entries": -5},
        {"default_ttl_seconds": 0},
    ])
    def test_invalid_memory_config(self, kwargs):
        with pytest.raises(CacheConfigurationError):
            MemoryCacheConfig(**kwargs)

    @pytest.mark.parametrize("kwargs", [
        {"endpoint": ""},
        {"namespace": ""},
        {"default_ttl_seconds": 0},
        {"socket_timeout_seconds": -1},
    ])
    def test_invalid_remote_config(self, kwargs):
        with pytest.raises(CacheConfigurationError):
            RemoteCacheConfig(**kwargs)

    def test_invalid_max_pending_writes(self):
        with pytest.raises(CacheConfigurationError):
            HybridCacheConfig(max_pending_writes=0)

    def test_connection_params(self):
        remote = RemoteCacheConfig(credentials="s3cret", socket_timeout_seconds=2.5)

        assert remote.get_connection_params() == {
            "password": "s3cret",
            "socket_timeout": 2.5,
            "socket_connect_timeout": 2.5,
        }
        assert RemoteCacheConfig().get_connection_params() == {}

    def test_credentials_never_rendered(self):
        config = HybridCacheConfig(remote=RemoteCacheConfig(credentials="s3cret"))

        assert "s3cret" not in repr(config.remote)
        assert config.to_dict()["remote"]["credentials"] == "***"
        assert config.to_dict()["write_policy"] == "write-through"


class TestEnvironment:
    """Environment variable loading."""

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("REALBRAND_CACHE_REDIS_URL", "redis://cache:6380/1")
        monkeypatch.setenv("REALBRAND_CACHE_REDIS_TOKEN", "token")
        monkeypatch.setenv("REALBRAND_CACHE_REDIS_TTL_SECONDS", "600")
        monkeypatch.setenv("REALBRAND_CACHE_NAMESPACE", "brand-a")
        monkeypatch.setenv("REALBRAND_CACHE_MEMORY_MAX_ENTRIES", "50")
        monkeypatch.setenv("REALBRAND_CACHE_MEMORY_TTL_SECONDS", "none")
        monkeypatch.setenv("REALBRAND_CACHE_WRITE_POLICY", "write_behind")
        monkeypatch.setenv("REALBRAND_CACHE_FALLBACK", "false")
        monkeypatch.setenv("REALBRAND_CACHE_MAX_PENDING_WRITES", "100")

        config = HybridCacheConfig.from_environment()

        assert config.remote.endpoint == "redis://cache:6380/1"
        assert config.remote.credentials == "token"
        assert config.remote.default_ttl_seconds == 600
        assert config.remote.namespace == "brand-a"
        assert config.memory.max_entries == 50
        assert config.memory.default_ttl_seconds is None
        assert config.write_policy is WritePolicy.WRITE_BEHIND
        assert config.fallback_on_remote_error is False
        assert config.max_pending_writes == 100
        assert config.config_source is ConfigSource.ENVIRONMENT

    def test_unset_variables_keep_defaults(self, monkeypatch):
        monkeypatch.delenv("REALBRAND_CACHE_WRITE_POLICY", raising=False)
        monkeypatch.delenv("REALBRAND_CACHE_MEMORY_MAX_ENTRIES", raising=False)

        config = HybridCacheConfig.from_environment()

        assert config.write_policy is WritePolicy.WRITE_THROUGH

    def test_malformed_number_is_configuration_error(self, monkeypatch):
        monkeypatch.setenv("REALBRAND_CACHE_MEMORY_MAX_ENTRIES", "lots")

        with pytest.raises(CacheConfigurationError):
            HybridCacheConfig.from_environment()

    def test_unknown_policy_is_configuration_error(self, monkeypatch):
        monkeypatch.setenv("REALBRAND_CACHE_WRITE_POLICY", "write-sideways")

        with pytest.raises(CacheConfigurationError):
            HybridCacheConfig.from_environment()


class TestDictAndFile:
    """Dictionary and file loading."""

    def test_from_dict_accepts_camel_case(self):
        config = HybridCacheConfig.from_dict({
            "remote": {"endpoint": "redis://r:6379", "defaultTtlSeconds": 120},
            "memory": {"maxEntries": 10, "defaultTtlSeconds": 5},
            "writePolicy": "write-around",
            "fallbackOnRemoteError": False,
        })

        assert config.remote.default_ttl_seconds == 120
        assert config.memory.max_entries == 10
        assert config.write_policy is WritePolicy.WRITE_AROUND
        assert config.fallback_on_remote_error is False
        assert config.config_source is ConfigSource.OVERRIDE

    def test_from_dict_unknown_option(self):
        with pytest.raises(CacheConfigurationError):
            HybridCacheConfig.from_dict({"memory": {"capacity": 10}})

    def test_from_yaml_file(self, tmp_path):
        path = tmp_path / "cache.yaml"
        path.write_text(
            "remote:\n"
            "  namespace: brand-b\n"
            "memory:\n"
            "  max_entries: 25\n"
            "write_policy: write-behind\n"
        )

        config = HybridCacheConfig.from_file(path)

        assert config.remote.namespace == "brand-b"
        assert config.memory.max_entries == 25
        assert config.write_policy is WritePolicy.WRITE_BEHIND
        assert config.config_source is ConfigSource.FILE

    def test_from_json_file(self, tmp_path):
        path = tmp_path / "cache.json"
        path.write_text(json.dumps({"maxPendingWrites": 8}))

        assert HybridCacheConfig.from_file(path).max_pending_writes == 8

    def test_unsupported_file_format(self, tmp_path):
        path = tmp_path / "cache.toml"
        path.write_text("")

        with pytest.raises(CacheConfigurationError):
            HybridCacheConfig.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            HybridCacheConfig.from_file(tmp_path / "absent.yaml")

    def test_create_cache_config(self, tmp_path):
        assert create_cache_config("defaults").config_source is ConfigSource.DEFAULTS

        with pytest.raises(CacheConfigurationError):
            create_cache_config("file")
        with pytest.raises(CacheConfigurationError):
            create_cache_config("vault")
