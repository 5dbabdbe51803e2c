# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

import logging
import sys

from pythonjsonlogger import jsonlogger
import structlog
from structlog.contextvars import merge_contextvars

from dockernetservicelayer.settings import Config
from dockernetservicelayer.utils.date import utcnow

# Loggers of the HTTP stack used to talk to NAPI.
HTTP_LOGGERS = ("aiohttp.client", "aiohttp.internal")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record: logging.LogRecord, message_dict):
        super(CustomJsonFormatter, self).add_fields(
            log_record, record, message_dict
        )

        log_record["logger"] = f"{record.name}:{record.lineno}"
        log_record["level"] = record.levelname
        if not log_record.get("timestamp"):
            # this doesn't use record.created, so it is slightly off
            log_record["timestamp"] = utcnow().strftime(
                "%Y-%m-%dT%H:%M:%S.%fZ"
            )


def configure_logging(config: Config) -> None:
    """Render structlog and standard library logs as JSON on stdout.

    With `config.debug` everything is logged, including the requests made
    to NAPI by aiohttp; otherwise INFO and above, and only warnings from
    aiohttp.

    Calling this again replaces the handler installed by the previous call.
    For more info, see
    https://www.structlog.org/en/stable/standard-library.html#rendering-using-logging-based-formatters.
    """
    level = logging.DEBUG if config.debug else logging.INFO
    http_level = logging.DEBUG if config.debug else logging.WARNING

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            # brings in the req_id bound by the request Context
            merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            # "event" becomes "msg" and the rest is passed as a dict in
            # "extra", which the JSON formatter renders.
            structlog.stdlib.render_to_log_kwargs,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        if isinstance(handler.formatter, CustomJsonFormatter):
            root_logger.removeHandler(handler)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(CustomJsonFormatter())
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)
