"""Structlog-based logging configuration with the proxy's log schema and stdlib bridge.

Provides:
- configure_logging(): structlog + stdlib setup, re-applied when the level changes
- get_logger(): returns a lazily bound structlog logger
- LoggerFactoryService: facade for modules that prefer stdlib loggers
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

from storefront_proxy.infrastructure.observability.logging.schema_processor import (
    proxy_schema_processor,
)

_CONFIGURED_LEVEL: int | None = None


def configure_logging(level: str | int | None = None) -> None:
    """Configure structlog and the stdlib bridge at ``level``.

    Without an explicit level, an existing configuration is left alone
    (first call defaults to INFO). An explicit level different from the
    active one re-applies the whole pipeline.
    Renderer is selected by LOG_FORMAT env (json|console) or APP_ENV.
    """
    global _CONFIGURED_LEVEL  # noqa: PLW0603
    if level is None:
        if _CONFIGURED_LEVEL is not None:
            return
        level = logging.INFO
    resolved = _resolve_level(level)
    if resolved == _CONFIGURED_LEVEL:
        return
    _CONFIGURED_LEVEL = resolved

    renderer = _select_renderer()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        proxy_schema_processor,
    ]

    # loggers are not cached so a later level change reaches module-level loggers
    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(resolved),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )

    # Stdlib bridge: uvicorn and httpx loggers go through the same pipeline
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *shared_processors,
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(resolved)


def get_logger(component: str) -> Any:
    """Return a structlog logger pre-bound with context_component."""
    return structlog.get_logger(context_component=component)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def _select_renderer() -> Any:
    """Choose renderer based on LOG_FORMAT env or APP_ENV."""
    log_format = os.environ.get("LOG_FORMAT", "").lower()
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)

    env = os.environ.get("APP_ENV", "local").lower()
    if env in ("qa", "staging", "prod", "production"):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


class LoggerFactoryService:
    """Stdlib-flavoured facade. Prefer get_logger() for new code."""

    @staticmethod
    def configure_root_logger(level: str | int | None = None) -> None:
        """Delegate to configure_logging()."""
        configure_logging(level)

    @staticmethod
    def build_logger(name: str) -> logging.Logger:
        """Return a stdlib logger (routed through structlog via ProcessorFormatter)."""
        configure_logging()
        return logging.getLogger(name)
