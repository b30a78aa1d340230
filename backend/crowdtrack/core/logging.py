"""Logging for crowdtrack.

Thin layer over the standard library: a ``ContextualLogger`` carries a set
of dimensions (``event``, ``sink``, ...) that are appended to every record,
and ``LoggerConfigurator`` builds such loggers with the level from settings.

Usage:
    from crowdtrack.core.logging import logger

    sink_logger = logger.with_context(sink="posthog")
    sink_logger.info("PostHog sink initialized")
"""

import logging
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

from crowdtrack.core.config import settings

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that renders its dimensions after each message."""

    def __init__(self, logger: logging.Logger, dimensions: Optional[Dict[str, str]] = None):
        """Wrap ``logger`` with a fixed set of dimensions."""
        super().__init__(logger, {})
        self.dimensions: Dict[str, str] = dict(dimensions or {})

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        """Append ``[key=value ...]`` to the message and expose dimensions as extras."""
        if not self.dimensions:
            return msg, kwargs
        extra = dict(kwargs.get("extra") or {})
        extra.update(self.dimensions)
        kwargs["extra"] = extra
        rendered = " ".join(f"{k}={v}" for k, v in self.dimensions.items())
        return f"{msg} [{rendered}]", kwargs

    def with_context(self, **dimensions: str) -> "ContextualLogger":
        """Return a new logger with ``dimensions`` merged over the current ones."""
        merged = {**self.dimensions, **{k: str(v) for k, v in dimensions.items()}}
        return ContextualLogger(self.logger, merged)


class LoggerConfigurator:
    """Builds contextual loggers with a shared handler setup."""

    _configured = False

    @classmethod
    def _configure_root(cls) -> None:
        if cls._configured:
            return
        root = logging.getLogger("crowdtrack")
        if not root.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(logging.Formatter(_FORMAT))
            root.addHandler(handler)
        root.setLevel(settings.LOG_LEVEL.value)
        cls._configured = True

    @classmethod
    def configure_logger(
        cls, name: str, dimensions: Optional[Dict[str, str]] = None
    ) -> ContextualLogger:
        """Get a contextual logger for ``name``.

        Args:
            name: Dotted logger name, normally under ``crowdtrack``.
            dimensions: Key/value pairs appended to every message.

        Returns:
            A ``ContextualLogger`` bound to the named standard logger.
        """
        cls._configure_root()
        return ContextualLogger(logging.getLogger(name), dimensions)


logger = LoggerConfigurator.configure_logger("crowdtrack")
