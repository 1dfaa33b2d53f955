"""structlog setup for shipctl.

Module code logs through stdlib ``logging.getLogger(__name__)``; records are
rendered by structlog on stderr, either for humans or as JSON lines
(``--log-json``). While ``shipctl init`` runs, every record also carries the
operation, the project directory and the pipeline stage in progress.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import structlog

# Libraries whose DEBUG chatter never helps when debugging an init run.
_QUIET_LOGGERS = ("pluggy", "dotenv")


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route all logging to a single structlog-formatted stderr handler.

    Args:
        verbose: Let ``shipctl.*`` DEBUG records through (stage transitions,
            hook taps, plugin resolution). Otherwise WARNING and above.
        log_json: One JSON object per record instead of console lines.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("shipctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@contextmanager
def init_log_context(root: Path) -> Iterator[None]:
    """Tag records logged inside the block with ``op``, ``project`` and ``stage``."""
    with structlog.contextvars.bound_contextvars(op="init", project=str(root), stage="start"):
        yield


def log_stage(logger: logging.Logger, stage: str) -> None:
    """Record that the init pipeline entered *stage*.

    The stage stays bound for the records that follow, so a failing hook's
    warning shows where in the pipeline it happened.
    """
    structlog.contextvars.bind_contextvars(stage=stage)
    logger.debug("Entering stage %s", stage)
