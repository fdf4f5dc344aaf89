import asyncio

import pytest

from config import log_config
from portfolio.database.conn import MongoDBClient
from portfolio.utils.errors import StorageUnavailableError
from portfolio.utils.logger_utils import configure_logging, logger


class _ClosableClient:
    def __init__(self):
        self.closed = False
        self.databases = {}

    def __getitem__(self, name):
        return self.databases.setdefault(name, object())

    def close(self):
        self.closed = True


def test_database_requires_connection():
    handle = MongoDBClient("mongodb://unused", "portfolio", timeout_ms=10)
    with pytest.raises(StorageUnavailableError):
        handle.database


def test_bind_then_close():
    handle = MongoDBClient("mongodb://unused", "portfolio", timeout_ms=10)
    fake = _ClosableClient()
    handle.bind(fake)
    assert handle.database is fake.databases["portfolio"]

    asyncio.run(handle.close())
    assert fake.closed is True
    with pytest.raises(StorageUnavailableError):
        handle.database


def test_file_sink_follows_config(tmp_path):
    log_file = tmp_path / "logs" / "portfolio.log"
    settings = {**log_config, "LEVEL": "INFO", "TO_FILE": True, "FILE_PATH": str(log_file)}
    try:
        sinks = configure_logging(settings)
        assert len(sinks) == 2
        logger.debug("below threshold")
        logger.info("saved contact")
    finally:
        configure_logging({**log_config, "TO_FILE": False})

    text = log_file.read_text()
    assert "saved contact" in text
    assert "below threshold" not in text


def test_console_only_when_file_disabled():
    assert len(configure_logging({**log_config, "TO_FILE": False})) == 1
