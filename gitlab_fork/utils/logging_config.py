"""Logging configuration for the GitLab fork action."""

import logging
from typing import Optional, Union


# Log level constants
DEFAULT_LOG_LEVEL = logging.INFO
DEBUG_LOG_LEVEL = logging.DEBUG
PRODUCTION_LOG_LEVEL = logging.WARNING


def resolve_log_level(level: Union[int, str, None]) -> int:
    """Turn a level name such as 'debug' into its numeric value."""
    if level is None:
        return DEFAULT_LOG_LEVEL
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LOG_LEVEL


def setup_logging(log_level: Union[int, str, None] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the MCP server.

    Logs are written to a file or suppressed entirely to avoid interfering
    with MCP protocol communication on stdout/stderr.

    Args:
        log_level: Logging level, numeric or by name (DEBUG, INFO, WARNING, ...)
        log_file: Optional file path to write logs to. If not provided, logs are suppressed.
    """
    log_level = resolve_log_level(log_level)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Replace handlers installed by a previous call
    for handler in [h for h in root_logger.handlers if getattr(h, "_gitlab_fork", False)]:
        root_logger.removeHandler(handler)
        handler.close()

    # NullHandler keeps stdout/stderr clean for the MCP stdio transport
    null_handler = logging.NullHandler()
    null_handler._gitlab_fork = True
    root_logger.addHandler(null_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError:
            pass  # No usable log file; stay silent rather than write to stderr
        else:
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            file_handler._gitlab_fork = True
            root_logger.addHandler(file_handler)

    # Set specific loggers to WARNING to minimize noise
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__ from module)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
