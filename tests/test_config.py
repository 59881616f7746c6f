"""Tests for environment-based configuration loading."""

import pytest
from pydantic import ValidationError

from infosquito.config import load_config

ENV_VARS = [
    "AMQP_URI",
    "AMQP_EXCHANGE_NAME",
    "AMQP_EXCHANGE_DURABLE",
    "AMQP_EXCHANGE_AUTO_DELETE",
    "AMQP_REINDEX_QUEUE",
    "REINDEX_COMMAND",
    "REINDEX_TIMEOUT_SECONDS",
    "RETRY_INTERVAL_SECONDS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("REINDEX_COMMAND", "reindex-data-store --full")


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        """Test defaults when only the reindex command is set."""
        config = load_config()

        assert config.rabbitmq.exchange_name == "de"
        assert config.rabbitmq.exchange_durable is True
        assert config.rabbitmq.exchange_auto_delete is False
        assert config.rabbitmq.queue_name == "infosquito.reindex"
        assert config.rabbitmq.uri.host == "rabbitmq"
        assert config.reindex.command == ["reindex-data-store", "--full"]
        assert config.reindex.timeout_seconds is None
        assert config.reindex.retry_interval_seconds == 60
        assert config.backoff.initial_delay == 5
        assert config.backoff.max_delay == 320

    def test_overrides(self, monkeypatch):
        """Test every variable is honored."""
        monkeypatch.setenv("AMQP_URI", "amqp://user:pw@mq.internal:5673/search")
        monkeypatch.setenv("AMQP_EXCHANGE_NAME", "events")
        monkeypatch.setenv("AMQP_EXCHANGE_DURABLE", "false")
        monkeypatch.setenv("AMQP_EXCHANGE_AUTO_DELETE", "true")
        monkeypatch.setenv("AMQP_REINDEX_QUEUE", "reindex")
        monkeypatch.setenv("REINDEX_TIMEOUT_SECONDS", "3600")
        monkeypatch.setenv("RETRY_INTERVAL_SECONDS", "2.5")

        config = load_config()

        assert config.rabbitmq.uri.host == "mq.internal"
        assert config.rabbitmq.uri.port == 5673
        assert config.rabbitmq.exchange_name == "events"
        assert config.rabbitmq.exchange_durable is False
        assert config.rabbitmq.exchange_auto_delete is True
        assert config.rabbitmq.queue_name == "reindex"
        assert config.reindex.timeout_seconds == 3600
        assert config.reindex.retry_interval_seconds == 2.5

    def test_quoted_command_arguments(self, monkeypatch):
        """Test the command is split like a shell would."""
        monkeypatch.setenv("REINDEX_COMMAND", "reindex --index 'data store'")

        assert load_config().reindex.command == ["reindex", "--index", "data store"]

    def test_missing_command_rejected(self, monkeypatch):
        """Test a missing reindex command fails validation."""
        monkeypatch.delenv("REINDEX_COMMAND")

        with pytest.raises(ValidationError):
            load_config()

    def test_non_amqp_uri_rejected(self, monkeypatch):
        """Test the broker URI must use an AMQP scheme."""
        monkeypatch.setenv("AMQP_URI", "http://rabbitmq:15672")

        with pytest.raises(ValidationError):
            load_config()

    def test_invalid_flag_rejected(self, monkeypatch):
        """Test unparseable boolean flags fail validation."""
        monkeypatch.setenv("AMQP_EXCHANGE_DURABLE", "sometimes")

        with pytest.raises(ValidationError):
            load_config()

    @pytest.mark.parametrize(
        "name", ["RETRY_INTERVAL_SECONDS", "REINDEX_TIMEOUT_SECONDS"]
    )
    def test_non_numeric_interval_rejected(self, monkeypatch, name):
        """Test non-numeric durations fail pydantic validation."""
        monkeypatch.setenv(name, "abc")

        with pytest.raises(ValidationError):
            load_config()
