"""
Logging for Vibe Coder.

Every module logs under the "vibecoder" namespace. Output goes to stderr
so `vibecoder improve` can print the brief alone on stdout; the API
server shares the same handlers. Provider calls are timed through
`provider_attempt`, which is how the chain reports which remote step
answered and how long it took.
"""

import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional


DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ROOT_LOGGER_NAME = "vibecoder"

_configured = False


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[Path | str] = None,
    console: bool = True,
) -> None:
    """
    Configure the "vibecoder" logger.

    Called with defaults on first use, then again by the CLI once the
    configuration file has been read. Each call replaces the previous
    handlers.

    Args:
        level: Level name from `logging.level` (unknown names mean INFO)
        format_string: Record format (`logging.format`)
        log_file: Extra file destination (`logging.file`)
        console: Attach the stderr handler
    """
    global _configured

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under the "vibecoder" namespace."""
    if not _configured:
        setup_logging()

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


@contextmanager
def provider_attempt(logger: logging.Logger, provider: str, model: str) -> Iterator[None]:
    """
    Time one remote provider call.

    Logs the start and the elapsed time at DEBUG. An exception escaping
    the block is logged at ERROR with the elapsed time and re-raised.

    Example:
        with provider_attempt(logger, "openai", "gpt-3.5-turbo"):
            response = client.generate(prompt)
    """
    logger.debug(f"Calling {provider} ({model})")
    started = time.perf_counter()
    try:
        yield
    except Exception as e:
        elapsed = time.perf_counter() - started
        logger.error(f"{provider} raised after {elapsed:.2f}s: {type(e).__name__}: {e}")
        raise
    elapsed = time.perf_counter() - started
    logger.debug(f"{provider} answered in {elapsed:.2f}s")


def log_exception(logger: logging.Logger, message: str, exc: Exception) -> None:
    """Log `exc` at ERROR with its traceback."""
    logger.error(f"{message}: {type(exc).__name__}: {exc}", exc_info=exc)
