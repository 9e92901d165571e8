"""Tests for configuration loading and validation in config.py."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
import yaml
from pydantic import ValidationError

from sqlens.config import (
    DEFAULT_DIALECT_ENV,
    Dialect,
    SqlensConfig,
    find_config,
    get_default_dialect,
    load_config,
)


class TestSqlensConfigFromYaml:
    """Tests for SqlensConfig.from_yaml parsing."""

    def test_minimal_valid_config(self) -> None:
        """Test parsing a config with only a dialect."""
        config = SqlensConfig.from_yaml("dialect: postgres\n")

        assert config.dialect == Dialect.POSTGRES
        assert config.limits.max_query_length == 100_000
        assert config.limits.complexity_threshold == 20

    def test_full_config(self) -> None:
        """Test parsing config with all sections."""
        content = """\
dialect: Snowflake

limits:
  max_query_length: 5000
  complexity_threshold: 8

server:
  host: 0.0.0.0
  port: 9000
"""
        config = SqlensConfig.from_yaml(content)

        assert config.dialect == Dialect.SNOWFLAKE
        assert config.limits.max_query_length == 5000
        assert config.limits.complexity_threshold == 8
        assert config.server.host == "0.0.0.0"
        assert config.server.port == 9000

    def test_empty_yaml_uses_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an empty file is a valid, all-defaults config."""
        monkeypatch.delenv(DEFAULT_DIALECT_ENV, raising=False)
        config = SqlensConfig.from_yaml("")

        assert config.dialect == Dialect.GENERIC
        assert config.server.port == 8000

    def test_invalid_dialect(self) -> None:
        """Test that an unknown dialect lists the valid ones."""
        with pytest.raises(ValidationError) as exc_info:
            SqlensConfig.from_yaml("dialect: oracle9i\n")

        assert "Invalid dialect 'oracle9i'" in str(exc_info.value)

    @pytest.mark.parametrize(
        "content",
        [
            "limits:\n  max_query_length: 0\n",
            "limits:\n  complexity_threshold: -1\n",
            "server:\n  port: 70000\n",
        ],
    )
    def test_invalid_limits(self, content: str) -> None:
        """Test that out-of-range limits are rejected."""
        with pytest.raises(ValidationError):
            SqlensConfig.from_yaml(content)

    def test_malformed_yaml(self) -> None:
        """Test that YAML syntax errors propagate."""
        with pytest.raises(yaml.YAMLError):
            SqlensConfig.from_yaml("limits: [unclosed\n")


class TestDefaultDialect:
    """Tests for the environment default dialect."""

    def test_env_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that SQLENS_DIALECT sets the default."""
        monkeypatch.setenv(DEFAULT_DIALECT_ENV, "BigQuery")

        assert get_default_dialect() == Dialect.BIGQUERY
        assert SqlensConfig().dialect == Dialect.BIGQUERY

    def test_unknown_env_value_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that a bad env value is ignored."""
        monkeypatch.setenv(DEFAULT_DIALECT_ENV, "nope")

        assert get_default_dialect() == Dialect.GENERIC

    def test_file_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an explicit dialect wins over the env default."""
        monkeypatch.setenv(DEFAULT_DIALECT_ENV, "mysql")

        assert SqlensConfig.from_yaml("dialect: duckdb").dialect == Dialect.DUCKDB


class TestFindConfig:
    """Tests for config file discovery."""

    def test_finds_in_start_dir(self) -> None:
        """Test finding sqlens.yml in the start directory."""
        with TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "sqlens.yml"
            config_path.write_text("dialect: generic\n", encoding="utf-8")

            assert find_config(tmpdir) == config_path.resolve()

    def test_finds_hidden_variant_in_parent(self) -> None:
        """Test finding .sqlens.yaml in a parent directory."""
        with TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            config_path = root / ".sqlens.yaml"
            config_path.write_text("dialect: generic\n", encoding="utf-8")
            nested = root / "a" / "b"
            nested.mkdir(parents=True)

            assert find_config(nested) == config_path.resolve()

    def test_sqlens_yml_preferred(self) -> None:
        """Test that sqlens.yml wins over the other names."""
        with TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / ".sqlens.yml").write_text("dialect: mysql\n", encoding="utf-8")
            (root / "sqlens.yml").write_text("dialect: tsql\n", encoding="utf-8")

            assert find_config(root) == (root / "sqlens.yml").resolve()


class TestLoadConfig:
    """Tests for load_config."""

    def test_load_explicit_path(self) -> None:
        """Test loading a config from an explicit path."""
        with TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "custom.yml"
            config_path.write_text("dialect: trino\n", encoding="utf-8")

            assert load_config(config_path).dialect == Dialect.TRINO

    def test_missing_config_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that no discoverable config raises FileNotFoundError."""
        with TemporaryDirectory() as tmpdir:
            monkeypatch.chdir(tmpdir)
            monkeypatch.setattr("sqlens.config.find_config", lambda: None)

            with pytest.raises(FileNotFoundError, match="sqlens init"):
                load_config()
