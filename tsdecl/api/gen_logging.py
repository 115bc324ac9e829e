"""
Loggers for the declaration pipeline.

Modules log through `get_logger(__name__)`; all of them hang off the
"tsdecl.gen" logger, which only the CLI configures. Output is stderr,
stdout carries declarations.
"""

import logging
import sys

_LOGGER_NAME = "tsdecl.gen"

_LEVELS = {
    (True, False): logging.DEBUG,
    (False, False): logging.INFO,
    (False, True): logging.WARNING,
}


def get_logger(name: str = None) -> logging.Logger:
    """Map a module name such as "tsdecl.api.generator" to "tsdecl.gen.generator"."""
    if not name or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name.rsplit('.', 1)[-1]}")


def configure_gen_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Set the pipeline log level and attach one stderr handler.

    -v logs each struct and each skipped field, -q keeps warnings and errors,
    the default is the one-line run summary. -v wins over -q.
    """
    level = _LEVELS.get((verbose, quiet), logging.DEBUG)

    gen_logger = logging.getLogger(_LOGGER_NAME)
    gen_logger.setLevel(level)
    gen_logger.propagate = False

    # One handler, bound to whatever sys.stderr is right now
    for stale in list(gen_logger.handlers):
        gen_logger.removeHandler(stale)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_TaggedMessageFormatter())
    gen_logger.addHandler(handler)


class _TaggedMessageFormatter(logging.Formatter):
    """Messages already start with a [TAG]; emit them bare."""

    def format(self, record: logging.LogRecord) -> str:
        return record.getMessage()
