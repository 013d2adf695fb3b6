"""
Structured logging for the indicator engine.

Every module obtains its logger through ``get_logger`` (or one of the bound
variants below) so engine runs share one structlog processor chain and can be
rendered either for a console or as JSON lines for log shipping.
"""
import logging
import sys
from typing import TYPE_CHECKING, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger, Processor

if TYPE_CHECKING:
    from ..models.indicators import IndicatorResult


def _base_processors(include_timestamp: bool, include_caller: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    return processors


def _renderer(format_json: bool) -> Processor:
    # Signal text may be non-ASCII when providers localize it
    if format_json:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=True)


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog over the standard library logging module.

    Call once at process start, before the engine is constructed.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: Render JSON lines instead of console output
        include_timestamp: Add an ISO timestamp to every event
        include_caller: Add filename and line number to every event
        extra_processors: Processors inserted before the renderer
        stream: Output stream, stdout when omitted
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        stream=stream or sys.stdout,
        format="%(message)s",
    )

    processors = _base_processors(include_timestamp, include_caller)
    processors.extend(extra_processors or [])
    processors.append(_renderer(format_json))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_engine_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the indicator engine subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for engine runs
    """
    return get_logger(name).bind(subsystem="indicator_engine")


def log_indicator_result(
    logger: FilteringBoundLogger,
    result: "IndicatorResult",
    stock_code: str,
) -> None:
    """
    Log a computed indicator with standardized fields.

    Args:
        logger: Structlog logger instance
        result: Result returned by a calculator
        stock_code: Stock the context was built for
    """
    logger.debug(
        "Indicator calculated",
        indicator=result.name,
        category=result.category.value,
        direction=result.direction.value,
        score=result.score,
        signal=result.signal,
        stock_code=stock_code,
    )
