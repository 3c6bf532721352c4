"""Logging setup for DrinkList using loguru."""
import sys
from typing import Optional
from loguru import logger

from drinklist.config.settings import DrinkListSettings, get_settings

_TIME = "<green>{time:YYYY-MM-DD HH:mm:ss}</green>"
_LEVEL = "<level>{level: <8}</level>"
_WHERE = "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan>"

_configured = False


def build_format(style: str) -> str:
    """Sink format for the "simple" or "detailed" LOG_FORMAT."""
    if style == "simple":
        parts = [_TIME, _LEVEL, "<level>{message}</level>"]
    else:
        parts = [_TIME, _LEVEL, _WHERE, "<level>{message}</level>", "<level>{extra}</level>"]
    return " | ".join(parts)


def setup_logging(settings: Optional[DrinkListSettings] = None, force: bool = False) -> None:
    """
    Replace loguru's default sink with the DrinkList sinks.

    Runs once per process unless force is set. The stderr sink is always
    added; the JSON file sink only when LOG_FILE is set.

    Args:
        settings: Settings to configure from (default: cached settings)
        force: Reconfigure even if logging was already set up
    """
    global _configured
    if _configured and not force:
        return

    settings = settings or get_settings()
    fmt = build_format(settings.LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        format=fmt,
        level=settings.LOG_LEVEL,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )
    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            format=fmt,
            level=settings.LOG_LEVEL,
            rotation=f"{settings.LOG_ROTATION_SIZE_MB} MB",
            retention=f"{settings.LOG_RETENTION_DAYS} days",
            compression="zip",
            serialize=True,
            enqueue=True,
        )
    _configured = True


def get_logger(name: str):
    """Get a logger bound to a drinklist.-prefixed component name.

    Args:
        name: Module or class name asking for the logger

    Returns:
        A loguru logger with `name` in its extra dict.
    """
    setup_logging()
    if not name.startswith("drinklist.") and name != "__main__":
        name = f"drinklist.{name}"
    return logger.bind(name=name)
