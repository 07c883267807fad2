"""
Tests for configuration loading and logging setup.
"""
import logging

import pytest
from unittest.mock import patch

from solana_checker_bot.config import (
    COINGECKO_API_URL,
    Config,
    ConfigError,
    DEFAULT_SOLANA_RPC_URL,
    SOLSCAN_API_URL,
)
from solana_checker_bot.logging_setup import setup_logging

from helpers import ENV_VARS


@pytest.fixture
def clean_env(monkeypatch):
    """Empty environment; .env files are not read."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("solana_checker_bot.config.load_dotenv"):
        yield monkeypatch


class TestFromEnv:
    def test_defaults(self, clean_env):
        config = Config.from_env()

        assert config.SOLANA_RPC_URL == DEFAULT_SOLANA_RPC_URL
        assert config.SOLSCAN_API_KEY == ""
        assert config.SOLSCAN_API_URL == SOLSCAN_API_URL
        assert config.COINGECKO_API_URL == COINGECKO_API_URL
        assert config.LOG_FILE == "bot.log"
        assert config.RATE_LIMIT_MIN_TIME == 0.3
        assert config.RATE_LIMIT_MAX_CONCURRENT == 5

    def test_reads_environment(self, clean_env):
        clean_env.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
        clean_env.setenv("TELEGRAM_API_ID", "42")
        clean_env.setenv("TELEGRAM_API_HASH", "hash")
        clean_env.setenv("SOLANA_RPC_URL", "https://rpc.example.com")
        clean_env.setenv("SOLSCAN_API_KEY", "key")
        clean_env.setenv("LOG_LEVEL", "debug")
        clean_env.setenv("RATE_LIMIT_MIN_TIME", "0.5")
        clean_env.setenv("RATE_LIMIT_MAX_CONCURRENT", "2")

        config = Config.from_env()

        assert config.TELEGRAM_BOT_TOKEN == "123:abc"
        assert config.TELEGRAM_API_ID == 42
        assert config.TELEGRAM_API_HASH == "hash"
        assert config.SOLANA_RPC_URL == "https://rpc.example.com"
        assert config.SOLSCAN_API_KEY == "key"
        assert config.LOG_LEVEL == "DEBUG"
        assert config.RATE_LIMIT_MIN_TIME == 0.5
        assert config.RATE_LIMIT_MAX_CONCURRENT == 2

    def test_bot_token_alias(self, clean_env):
        clean_env.setenv("BOT_TOKEN", "legacy-token")
        assert Config.from_env().TELEGRAM_BOT_TOKEN == "legacy-token"

    def test_empty_rpc_url_uses_default(self, clean_env):
        clean_env.setenv("SOLANA_RPC_URL", "")
        assert Config.from_env().SOLANA_RPC_URL == DEFAULT_SOLANA_RPC_URL

    @pytest.mark.parametrize("name,value", [
        ("TELEGRAM_API_ID", "abc"),
        ("RATE_LIMIT_MIN_TIME", "x"),
        ("RATE_LIMIT_MAX_CONCURRENT", "2.5"),
        ("HTTP_TIMEOUT", "ten"),
    ])
    def test_malformed_number(self, clean_env, name, value):
        clean_env.setenv(name, value)
        with pytest.raises(ConfigError) as exc_info:
            Config.from_env()
        assert name in str(exc_info.value)

    def test_unknown_log_level(self, clean_env):
        clean_env.setenv("LOG_LEVEL", "verbose")
        with pytest.raises(ConfigError, match="LOG_LEVEL"):
            Config.from_env()

    def test_config_is_immutable(self, clean_env):
        config = Config.from_env()
        with pytest.raises(AttributeError):
            config.SOLANA_RPC_URL = "https://other"


class TestValidate:
    def test_missing_telegram_settings(self):
        assert Config().validate() == ["TELEGRAM_BOT_TOKEN", "TELEGRAM_API_ID", "TELEGRAM_API_HASH"]

    def test_complete(self, test_config):
        assert test_config.validate() == []


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        before, level = set(root.handlers), root.level
        yield
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(level)

    def test_writes_to_console_and_file(self, test_config, tmp_path):
        logger = setup_logging(test_config)
        logger.info("Bot is running")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = (tmp_path / "bot.log").read_text()
        assert "[INFO]: Bot is running" in content

        handler_types = {type(h) for h in logging.getLogger().handlers}
        assert logging.FileHandler in handler_types
        assert logging.StreamHandler in handler_types

    def test_file_is_appended(self, test_config, tmp_path):
        (tmp_path / "bot.log").write_text("previous line\n")

        setup_logging(test_config).error("Bot launch failed: test")
        for handler in logging.getLogger().handlers:
            handler.flush()

        content = (tmp_path / "bot.log").read_text()
        assert content.startswith("previous line\n")
        assert "[ERROR]: Bot launch failed: test" in content
