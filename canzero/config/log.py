import logging
import logging.handlers
import re
import sys
from pathlib import Path

import orjson
import structlog
from structlog.types import FilteringBoundLogger

from canzero.common.fs import ensure_directory
from canzero.config.models import LoggingConfig

_SIZE_MULTIPLIERS = {'B': 1, 'KB': 1024, 'MB': 1024**2, 'GB': 1024**3, 'TB': 1024**4}


def _parse_file_size(value: str) -> int:
    """Parse a size like "10MB" into bytes, defaulting to 10MB."""
    size_match = re.fullmatch(r'(\d+)\s*([KMGT]?B?)', value.strip().upper())
    if not size_match:
        return 10 * 1024 * 1024

    size_num = int(size_match.group(1))
    size_unit = size_match.group(2)
    if size_unit and not size_unit.endswith('B'):
        size_unit += 'B'
    return size_num * _SIZE_MULTIPLIERS.get(size_unit, _SIZE_MULTIPLIERS['MB'])


def _create_log_handlers(log_config: LoggingConfig, log_dir: Path | None) -> list:
    """Create logging handlers based on configuration."""
    handlers = []

    if log_config.console_enabled:
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, structlog.processors.format_exc_info, structlog.dev.ConsoleRenderer()]
        )
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    if log_config.file_enabled and log_dir is not None:
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(serializer=lambda *x, **y: orjson.dumps(*x, **y).decode('utf-8')),
            ]
        )
        file_handler = logging.handlers.RotatingFileHandler(
            log_dir / 'app.log',
            maxBytes=_parse_file_size(log_config.max_file_size),
            backupCount=log_config.backup_count,
            encoding='utf-8',
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    return handlers


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # Looked up per call so redirected streams are honoured.
    return structlog.PrintLogger(sys.stderr)


def configure_stderr_defaults() -> None:
    """Send logs to stderr until the application calls ``configure_structlog``."""
    structlog.configure(logger_factory=_stderr_logger_factory)


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a configured structlog logger."""
    return structlog.get_logger(name)


def configure_structlog(log_config: LoggingConfig | None = None) -> None:
    """Configure structlog with console and optional rotating file output on top of stdlib logging."""
    log_config = log_config or LoggingConfig()
    level = getattr(logging, log_config.level)

    from canzero.config.paths import get_app_dir

    log_dir = None
    if log_config.file_enabled:
        log_dir = Path(log_config.log_file_dir) if log_config.log_file_dir else get_app_dir() / 'logs'
        ensure_directory(log_dir)

    logging.basicConfig(
        level=level,
        handlers=_create_log_handlers(log_config, log_dir),
        format='%(message)s',  # structlog will handle formatting
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.TimeStamper(fmt='ISO', utc=True),
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_stderr_defaults()


__all__ = ['configure_stderr_defaults', 'configure_structlog', 'get_logger']
