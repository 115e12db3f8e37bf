"""structlog setup for the theme engine.

Engine modules log named events (`theme_path_not_found`,
`palette_shade_not_found`, `override_replaced_node`, ...) with keyword
context. Records are routed through the stdlib `theme_engine` logger and
written to stderr, which keeps stdout free for stylesheets and token maps
printed by the CLI.

Two renderings:
- console: colored key/value lines for local work
- json: one object per line, stamped with app name, version and environment
"""

import logging
import sys
from contextlib import AbstractContextManager
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

from theme_engine.config import Settings, get_settings

ROOT_LOGGER_NAME = "theme_engine"

# Marks file handlers installed here so reconfiguring replaces them
_FILE_HANDLER_ATTR = "_theme_engine_file_handler"


def _stamp_app(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    settings = get_settings()
    event_dict.setdefault("app", settings.app_name)
    event_dict.setdefault("version", settings.app_version)
    event_dict.setdefault("environment", settings.environment.value)
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def get_console_processors() -> list[Processor]:
    """Processor chain for human-readable output."""
    return [
        *_shared_processors(),
        structlog.dev.ConsoleRenderer(
            colors=sys.stderr.isatty(),
            exception_formatter=structlog.dev.plain_traceback,
        ),
    ]


def get_json_processors() -> list[Processor]:
    """Processor chain for machine-readable output."""
    return [
        *_shared_processors(),
        _stamp_app,
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(sort_keys=True),
    ]


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the `theme_engine` stdlib logger.

    Safe to call more than once; the latest settings win.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.value)

    structlog.configure(
        processors=(
            get_json_processors()
            if settings.log_format == "json"
            else get_console_processors()
        ),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        if getattr(handler, _FILE_HANDLER_ATTR, False):
            package_logger.removeHandler(handler)
            handler.close()
    if settings.log_file:
        package_logger.addHandler(_file_handler(settings.log_file, level))


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    setattr(handler, _FILE_HANDLER_ATTR, True)
    return handler


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger; pass __name__ from engine modules."""
    return structlog.stdlib.get_logger(name or ROOT_LOGGER_NAME)


def bind_context(**kwargs: Any) -> None:
    """Attach key/values to every later event in the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


class LogContext:
    """Bind context for the duration of a with block.

    Example:
        with LogContext(color_family="blue", direction="rtl"):
            logger.info("stylesheet_written", path="dist/theme.css")
    """

    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs
        self._bound: AbstractContextManager[Any] | None = None

    def __enter__(self) -> "LogContext":
        self._bound = structlog.contextvars.bound_contextvars(**self.kwargs)
        self._bound.__enter__()
        return self

    def __exit__(self, *args: Any) -> None:
        if self._bound is not None:
            self._bound.__exit__(*args)
            self._bound = None
