"""
Logging configuration for the API process.
"""
import logging
import sys

# Third-party loggers that are only interesting when debugging.
_NOISY_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """
    Configure the root logger with a single stderr handler.

    Call this once, before the application starts serving requests.
    Calling it again replaces the handler instead of adding a duplicate.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else level.upper())

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)
    root.addHandler(handler)

    if not debug:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.captureWarnings(True)
