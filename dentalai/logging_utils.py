# SPDX-License-Identifier: Apache-2.0
import logging
import os

import structlog

_CONFIGURED = False


def _configure() -> None:
    global _CONFIGURED
    level = getattr(logging, os.getenv("DENTALAI_LOG_LEVEL", "INFO").upper(), logging.INFO)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    _CONFIGURED = True


def get_logger(name: str = __name__):
    """Return a JSON structlog logger; the level comes from ``DENTALAI_LOG_LEVEL``."""
    if not _CONFIGURED:
        _configure()
    return structlog.get_logger(name)
