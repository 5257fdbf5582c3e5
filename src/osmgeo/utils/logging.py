"""Logging utilities for osmgeo."""

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

import structlog


@dataclass
class OperationStats:
    """Statistics from a command run."""

    entities_loaded: int = 0
    turns_computed: int = 0
    chains_joined: int = 0
    ways_reversed: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (auto-generated if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    if log_file is None:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = Path(f"osmgeo_{timestamp}.log")

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(getattr(logging, file_level.upper()))
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("osmgeo")
    logger.info("Logging initialized", log_file=str(log_file), level=file_level)

    return logger


class OperationLogger:
    """Logger for tracking command progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = OperationStats()

    def start(self, operation: str, **context: object) -> None:
        """Log start of an operation."""
        self._stats.start_time = time.monotonic()
        self._logger.info("Operation started", operation=operation, **context)

    def finish(self, operation: str) -> None:
        """Log end of an operation."""
        self._stats.end_time = time.monotonic()
        self._logger.info(
            "Operation finished",
            operation=operation,
            duration_ms=round(self._stats.duration_seconds * 1000, 2),
        )

    def log_graph_loaded(self, source: str, entity_count: int) -> None:
        """Log a graph load."""
        self._logger.info("Graph loaded", source=source, entities=entity_count)
        self._stats.entities_loaded += entity_count

    def log_turns(self, vertex_id: str, from_node_id: str, turn_count: int) -> None:
        """Log turns computed at a junction."""
        self._logger.debug(
            "Turns computed", vertex=vertex_id, from_node=from_node_id, turns=turn_count
        )
        self._stats.turns_computed += turn_count

    def log_join(self, member_count: int, chain_count: int) -> None:
        """Log a join result."""
        self._logger.debug("Ways joined", members=member_count, chains=chain_count)
        self._stats.chains_joined += chain_count

    def log_reverse(self, way_id: str) -> None:
        """Log a way reversal."""
        self._logger.debug("Way reversed", way=way_id)
        self._stats.ways_reversed += 1

    def log_error(self, subject: str, error: Exception) -> None:
        """Log a failed operation."""
        self._logger.error(
            "Operation failed",
            subject=subject,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((subject, str(error)))

    @property
    def stats(self) -> OperationStats:
        """Get current statistics."""
        return self._stats
