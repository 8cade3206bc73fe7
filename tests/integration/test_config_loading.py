"""Integration tests for configuration loading with layered precedence.

Tests the real load_config() function with actual YAML files, environment
variables, and CLI overrides to verify precedence: defaults < YAML < ENV < CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from torrentsrc.infrastructure.config import AppConfig
from torrentsrc.infrastructure.config.load import load_config
from torrentsrc.infrastructure.sources.constants import (
    DEFAULT_TRANSPORT_POLICY,
    PIRATEBAY_BASE_URL,
)

pytestmark = pytest.mark.integration


@pytest.fixture()
def yaml_config(tmp_path: Path) -> Path:
    """Write a minimal YAML config and return its path."""
    config = {
        "app_name": "torrentsrc-test",
        "environment": "test",
        "source": {
            "base_url": "https://mirror.example.com/api/piratebay/",
            "max_results": 10,
        },
        "http": {"timeout_seconds": 5.0, "user_agent": "TestAgent/1.0"},
        "logging": {"level": "DEBUG", "format": "console"},
    }
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump(config), encoding="utf-8")
    return path


class TestDefaultsOnly:
    def test_defaults_produce_valid_config(self) -> None:
        config = load_config()
        assert config.app_name == "torrentsrc"
        assert config.environment == "dev"
        assert config.source_base_url == PIRATEBAY_BASE_URL
        assert config.source_probe_query == "one piece"
        assert config.source_max_results == 30
        assert config.source_transport_policy == "lenient"
        assert config.source_lowercase_hash is False
        assert config.http_timeout_seconds == 15.0
        assert config.log_level == "INFO"
        assert config.log_format == "console"

    def test_model_defaults_match_source_constants(self) -> None:
        config = AppConfig()
        assert config.source_transport_policy == DEFAULT_TRANSPORT_POLICY
        assert config.source_base_url == PIRATEBAY_BASE_URL

    def test_prod_derives_json_log_format(self) -> None:
        config = load_config(cli_overrides={"environment": "prod"})
        assert config.log_format == "json"


class TestYamlOverrides:
    def test_yaml_overrides_defaults(self, yaml_config: Path) -> None:
        config = load_config(config_path=yaml_config)
        assert config.app_name == "torrentsrc-test"
        assert config.environment == "test"
        assert config.source_base_url == "https://mirror.example.com/api/piratebay/"
        assert config.source_max_results == 10
        assert config.http_user_agent == "TestAgent/1.0"
        assert config.log_level == "DEBUG"

    def test_yaml_keeps_unset_defaults(self, yaml_config: Path) -> None:
        config = load_config(config_path=yaml_config)
        assert config.source_probe_query == "one piece"
        assert config.source_transport_policy == "lenient"

    def test_empty_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(config_path=path).app_name == "torrentsrc"

    def test_non_mapping_yaml_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(config_path=path)

    def test_missing_yaml_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(config_path=tmp_path / "nope.yaml")


class TestEnvOverrides:
    def test_env_overrides_yaml(
        self, yaml_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TORRENTSRC_SOURCE_MAX_RESULTS", "20")
        monkeypatch.setenv("TORRENTSRC_SOURCE_TRANSPORT_POLICY", "strict")
        config = load_config(config_path=yaml_config)
        assert config.source_max_results == 20
        assert config.source_transport_policy == "strict"

    def test_dotenv_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        dotenv = tmp_path / ".env"
        dotenv.write_text("TORRENTSRC_LOG_LEVEL=WARNING\n", encoding="utf-8")
        # load_dotenv writes into os.environ; registered so teardown removes it.
        monkeypatch.setenv("TORRENTSRC_LOG_LEVEL", "")
        monkeypatch.delenv("TORRENTSRC_LOG_LEVEL")

        config = load_config(dotenv_path=dotenv)
        assert config.log_level == "WARNING"

    def test_missing_dotenv_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(dotenv_path=tmp_path / ".env")


class TestCliOverrides:
    def test_cli_overrides_env(
        self, yaml_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TORRENTSRC_LOG_LEVEL", "WARNING")
        config = load_config(
            config_path=yaml_config, cli_overrides={"log_level": "ERROR"}
        )
        assert config.log_level == "ERROR"


class TestValidation:
    def test_zero_max_results_rejected(self) -> None:
        with pytest.raises(ValidationError):
            load_config(cli_overrides={"source_max_results": 0})

    def test_negative_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            load_config(cli_overrides={"http_timeout_seconds": -1})

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValidationError):
            load_config(cli_overrides={"source_transport_policy": "maybe"})

    def test_non_http_base_url_rejected(self) -> None:
        with pytest.raises(ValidationError):
            load_config(cli_overrides={"source_base_url": "ftp://example.com/"})


class TestSectionedDump:
    def test_round_trips_through_loader(self, tmp_path: Path, yaml_config: Path) -> None:
        dumped = load_config(config_path=yaml_config).to_sectioned_dict()
        path = tmp_path / "dumped.yaml"
        path.write_text(yaml.dump(dumped), encoding="utf-8")

        assert load_config(config_path=path).to_sectioned_dict() == dumped
