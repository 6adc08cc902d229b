"""Logging utilities for strokeskel."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from strokeskel.domain import IterationResult

_FILE_HANDLER = "strokeskel.file"
_CONSOLE_HANDLER = "strokeskel.console"
_HANDLER_NAMES = (_FILE_HANDLER, _CONSOLE_HANDLER)


@dataclass
class RunStats:
    """Statistics accumulated over thinning runs."""

    run_count: int = 0
    nonconverged_count: int = 0
    cancelled_count: int = 0
    total_iterations: int = 0
    run_timings_ms: list[float] = field(default_factory=list)

    @property
    def total_time_ms(self) -> float:
        """Sum of all run durations."""
        return sum(self.run_timings_ms)

    @property
    def avg_run_time_ms(self) -> float | None:
        """Average run duration, None before the first run."""
        if not self.run_timings_ms:
            return None
        return self.total_time_ms / len(self.run_timings_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces our handlers instead of stacking them
    for handler in list(root_logger.handlers):
        if handler.get_name() in _HANDLER_NAMES:
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_CONSOLE_HANDLER)
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
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

    logger = structlog.get_logger("strokeskel")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class ThinningLogger:
    """Diagnostics sink for thinning runs.

    Records, per run, the strategy, iteration count, changed pixels per
    sub-pass, elapsed time and whether a fixed point was reached.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("strokeskel")
        self._stats = RunStats()

    def log_run_start(self, source: str, width: int, height: int, strategy: str) -> None:
        """Log start of a thinning run."""
        self._logger.debug(
            "Thinning started",
            source=source,
            width=width,
            height=height,
            strategy=strategy,
        )

    def log_run_complete(
        self,
        source: str,
        result: IterationResult,
        point_count: int,
        duration_ms: float,
    ) -> None:
        """Log a finished run and update statistics."""
        self._stats.run_count += 1
        self._stats.total_iterations += result.iterations
        self._stats.run_timings_ms.append(duration_ms)

        fields = {
            "source": source,
            "strategy": result.strategy,
            "iterations": result.iterations,
            "converged": result.converged,
            "sub_pass_changes": list(result.sub_pass_changes),
            "points": point_count,
            "duration_ms": round(duration_ms, 2),
        }

        if result.cancelled:
            self._stats.cancelled_count += 1
            self._logger.warning("Thinning stopped early", **fields)
        elif not result.converged:
            self._stats.nonconverged_count += 1
            self._logger.warning("Thinning hit iteration bound", **fields)
        else:
            self._logger.info("Thinning complete", **fields)

    def log_invalid_input(self, source: str, error: Exception) -> None:
        """Log rejected input."""
        self._logger.error(
            "Input rejected",
            source=source,
            error=str(error),
            error_type=type(error).__name__,
        )

    @property
    def stats(self) -> RunStats:
        """Get current run statistics."""
        return self._stats
