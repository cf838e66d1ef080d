"""Logging for the Linear trigger runtime.

Thin wrapper around the standard library logger that carries a set of
dimensions (key/value pairs such as ``trigger`` or ``team_id``) and an
optional message prefix. Dimensions are rendered after the message.

Usage:
    from linear_triggers.core.logging import logger

    poll_logger = logger.with_prefix("Issue poll: ").with_context(team_id=team_id)
    poll_logger.info("Fetched page")
"""

import logging
import sys
from typing import Any, Dict, MutableMapping, Optional, Tuple

from linear_triggers.core.config import Environment, settings

_ROOT_LOGGER_NAME = "linear_triggers"


class DimensionFormatter(logging.Formatter):
    """Formatter that appends the record's dimensions as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and append its dimensions."""
        message = super().format(record)
        dimensions = getattr(record, "dimensions", None)
        if not dimensions:
            return message
        rendered = " ".join(f"{key}={value}" for key, value in dimensions.items())
        return f"{message} [{rendered}]"


class ContextualLogger(logging.LoggerAdapter):
    """Logger adapter that carries dimensions and a message prefix."""

    def __init__(
        self,
        logger: logging.Logger,
        dimensions: Optional[Dict[str, Any]] = None,
        prefix: str = "",
    ):
        """Create a new ContextualLogger.

        Args:
            logger: Underlying standard library logger.
            dimensions: Key/value pairs attached to every record.
            prefix: Text prepended to every message.
        """
        super().__init__(logger, dimensions or {})
        self.dimensions: Dict[str, Any] = dict(dimensions or {})
        self.prefix = prefix

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> Tuple[Any, MutableMapping[str, Any]]:
        """Attach prefix and dimensions to the record."""
        extra = dict(kwargs.get("extra") or {})
        extra["dimensions"] = {**self.dimensions, **extra.get("dimensions", {})}
        kwargs["extra"] = extra
        return f"{self.prefix}{msg}", kwargs

    def with_context(self, **dimensions: Any) -> "ContextualLogger":
        """Return a new logger with additional dimensions."""
        return ContextualLogger(self.logger, {**self.dimensions, **dimensions}, self.prefix)

    def with_prefix(self, prefix: str) -> "ContextualLogger":
        """Return a new logger with the given message prefix."""
        return ContextualLogger(self.logger, self.dimensions, prefix)


class LoggerConfigurator:
    """Builds configured contextual loggers."""

    _configured = False

    @classmethod
    def _configure_root(cls) -> None:
        if cls._configured:
            return
        root = logging.getLogger(_ROOT_LOGGER_NAME)
        root.setLevel(settings.LOG_LEVEL.value)
        if not root.handlers:
            handler = logging.StreamHandler(sys.stdout)
            if settings.ENVIRONMENT == Environment.LOCAL:
                fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
            else:
                fmt = "%(levelname)s %(name)s: %(message)s"
            handler.setFormatter(DimensionFormatter(fmt))
            root.addHandler(handler)
        cls._configured = True

    @classmethod
    def configure_logger(
        cls, name: str, dimensions: Optional[Dict[str, Any]] = None
    ) -> ContextualLogger:
        """Return a contextual logger for ``name`` carrying ``dimensions``.

        Args:
            name: Logger name, normally a dotted module path under linear_triggers.
            dimensions: Key/value pairs attached to every record.

        Returns:
            ContextualLogger bound to the named logger.
        """
        cls._configure_root()
        return ContextualLogger(logging.getLogger(name), dimensions)


logger = LoggerConfigurator.configure_logger(_ROOT_LOGGER_NAME)
