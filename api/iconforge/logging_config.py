"""
Structured logging configuration
"""
from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog


def setup_logging(stream: TextIO | None = None) -> None:
    level_name = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
    level = getattr(logging, level_name, logging.INFO)
    renderer = (
        structlog.dev.ConsoleRenderer()
        if os.environ.get("LOG_FORMAT", "").strip().lower() == "console"
        else structlog.processors.JSONRenderer()
    )

    logging.basicConfig(format="%(message)s", stream=stream or sys.stdout, level=level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
