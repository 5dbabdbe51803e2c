#  Copyright 2026 Canonical Ltd.  This software is licensed under the
#  GNU Affero General Public License version 3 (see the file LICENSE).

import json
import logging

import pytest
import structlog

from dockernetservicelayer.logging.configure import (
    configure_logging,
    CustomJsonFormatter,
    HTTP_LOGGERS,
)
from dockernetservicelayer.settings import Config


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    http_levels = [logging.getLogger(name).level for name in HTTP_LOGGERS]
    yield
    root_logger.handlers = handlers
    root_logger.setLevel(level)
    for name, http_level in zip(HTTP_LOGGERS, http_levels):
        logging.getLogger(name).setLevel(http_level)
    structlog.reset_defaults()


def json_handlers():
    return [
        handler
        for handler in logging.getLogger().handlers
        if isinstance(handler.formatter, CustomJsonFormatter)
    ]


class TestConfigureLogging:
    def test_json_output(self, restore_logging, capsys):
        configure_logging(Config(debug=True))
        structlog.contextvars.bind_contextvars(req_id="abc")
        structlog.get_logger("dockernet.test").debug(
            "creating network", vlan_id=4
        )

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["message"] == "creating network"
        assert record["vlan_id"] == 4
        assert record["req_id"] == "abc"
        assert record["level"] == "DEBUG"
        assert record["logger"].startswith("dockernet.test:")
        assert "timestamp" in record

    def test_levels(self, restore_logging):
        configure_logging(Config())
        assert logging.getLogger().level == logging.INFO
        for name in HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_debug_levels(self, restore_logging):
        configure_logging(Config(debug=True))
        assert logging.getLogger().level == logging.DEBUG
        for name in HTTP_LOGGERS:
            assert logging.getLogger(name).level == logging.DEBUG

    def test_reconfigure_replaces_handler(self, restore_logging):
        configure_logging(Config())
        configure_logging(Config(debug=True))
        assert len(json_handlers()) == 1
