import logging
import os
import sys

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def setup_logger(level: int = logging.WARNING, name: str = "imgview") -> logging.Logger:
    """Create or update the project logger.

    - IMGVIEW_LOG_LEVEL overrides the level on every call, so late CLI
      parsing can still take effect.
    - Ensures there is exactly one stderr StreamHandler on the base logger
      and updates its formatter instead of adding another one.
    """
    logger = logging.getLogger(name)

    env_level = (os.getenv("IMGVIEW_LOG_LEVEL") or "").strip().lower()
    if env_level:
        level = LEVELS.get(env_level, level)
    logger.setLevel(level)

    stream_handler: logging.StreamHandler | None = None
    for h in logger.handlers:
        if isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is sys.stderr:
            stream_handler = h
            break

    if stream_handler is None:
        stream_handler = logging.StreamHandler(stream=sys.stderr)
        logger.addHandler(stream_handler)

    stream_handler.setFormatter(logging.Formatter(
        fmt="[%(asctime)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    ))

    return logger
