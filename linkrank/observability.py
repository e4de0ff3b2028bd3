'''Structured logging configuration.

Until the application calls ``configure_logging`` (or configures structlog
itself) the package only emits warnings and errors.
'''

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    '''Configure structlog for the ranking service.

    Args:
        level: Minimum level that gets rendered.
        output: Stream the rendered lines go to.
        json_format: JSON lines when True, plain console output otherwise.
    '''
    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=False,
    )


def quiet_defaults() -> None:
    '''Keep structlog's default output but drop everything below WARNING.'''
    if not structlog.is_configured():
        structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))


def get_logger(name: str | None = None) -> structlog.typing.BindableLogger:
    '''Get a lazily bound logger, optionally tagged with the component name.'''
    if name is None:
        return structlog.get_logger()
    return structlog.get_logger(component=name)


quiet_defaults()
