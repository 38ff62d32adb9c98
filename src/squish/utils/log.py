"""loguru sinks for the command-line tool."""

import sys
from typing import TextIO

from loguru import logger

PROGRESS_FORMAT = "<yellow>{message}</yellow>"
DIAGNOSTIC_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"


def configure_logging(
    *,
    verbose: bool,
    level: str = "WARNING",
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> None:
    """Replace loguru's default handler with squish's sinks.

    Diagnostics at ``level`` and above go to stderr. With ``verbose`` set,
    INFO records (the progress messages) move to stdout instead.
    """
    logger.remove()

    _ = logger.add(
        stderr if stderr is not None else sys.stderr,
        level=level,
        format=DIAGNOSTIC_FORMAT,
        filter=(lambda record: record["level"].name != "INFO") if verbose else None,
        diagnose=False,
    )

    if verbose:
        _ = logger.add(
            stdout if stdout is not None else sys.stdout,
            level="INFO",
            format=PROGRESS_FORMAT,
            filter=lambda record: record["level"].name == "INFO",
        )
