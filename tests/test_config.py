"""Tests for ClientConfig and logging setup."""

import logging

import httpx
import pytest

from typed_http import ClientConfig, HttpClient
from typed_http.utils import get_logger, setup_logging


class TestClientConfig:
    def test_defaults(self):
        config = ClientConfig()
        assert config.connect_timeout == ClientConfig.CONNECT_TIMEOUT
        assert config.read_timeout == ClientConfig.READ_TIMEOUT
        assert config.user_agent is None

    def test_timeout_property(self):
        config = ClientConfig(connect_timeout=1.0, read_timeout=2.0)
        timeout = config.timeout

        assert isinstance(timeout, httpx.Timeout)
        assert timeout.connect == 1.0
        assert timeout.read == 2.0
        assert timeout.write == ClientConfig.WRITE_TIMEOUT
        assert timeout.pool == ClientConfig.POOL_TIMEOUT

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"connect_timeout": -1.0},
            {"read_timeout": -5.0},
            {"write_timeout": -0.1},
            {"pool_timeout": -2.0},
            {"connect_timeout": 0},
            {"read_timeout": 0.0},
        ],
    )
    def test_negative_timeouts_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ClientConfig(**kwargs)

    def test_blank_user_agent_rejected(self):
        with pytest.raises(ValueError):
            ClientConfig(user_agent="   ")

    def test_log_level_normalized(self):
        assert ClientConfig(log_level="debug").log_level == "DEBUG"
        assert ClientConfig().log_level is None

    @pytest.mark.parametrize(
        "kwargs",
        [{"log_level": "VERBOSE"}, {"log_file": "typed_http.log"}],
    )
    def test_invalid_logging_options_rejected(self, kwargs):
        with pytest.raises(ValueError):
            ClientConfig(**kwargs)


class TestLogging:
    @pytest.fixture(autouse=True)
    def restore_package_logger(self):
        logger = logging.getLogger("typed_http")
        handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
        yield
        for handler in logger.handlers:
            if handler not in handlers:
                handler.close()
        logger.handlers = handlers
        logger.setLevel(level)
        logger.propagate = propagate

    def test_setup_logging_configures_package_logger(self):
        setup_logging(level="DEBUG")

        logger = logging.getLogger("typed_http")
        assert logger.level == logging.DEBUG
        assert not logger.propagate
        assert logger.handlers

    def test_setup_logging_with_file(self, tmp_path):
        log_file = tmp_path / "logs" / "typed_http.log"
        setup_logging(level="INFO", log_file=log_file)

        get_logger("typed_http.test").info("hello")
        for handler in logging.getLogger("typed_http").handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_get_logger(self):
        assert get_logger("typed_http.http").name == "typed_http.http"

    def test_client_configures_logging_from_config(self, tmp_path):
        log_file = tmp_path / "client.log"
        client = HttpClient(config=ClientConfig(log_level="debug", log_file=log_file))
        client.build_request("https://api.example.com/users")

        logger = logging.getLogger("typed_http")
        for handler in logger.handlers:
            handler.flush()

        assert logger.level == logging.DEBUG
        assert "Requisição construída" in log_file.read_text(encoding="utf-8")

    def test_client_leaves_logging_alone_by_default(self):
        logger = logging.getLogger("typed_http")
        handlers = logger.handlers[:]

        HttpClient()

        assert logger.handlers == handlers
