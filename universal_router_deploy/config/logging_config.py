"""
Logging Configuration for Universal Router deployments

Provides a per-chain deployment logger with:
- ISO-8601 UTC timestamps
- Deployment levels (INFO, STEP, SUCCESS, DEPLOYMENT, WARN, ERROR)
- Coloured console output, warnings and errors on stderr
- A plain-text log file per chain, truncated at the start of every run
"""

from __future__ import annotations

import logging
import sys
import traceback
from collections.abc import Mapping
from datetime import datetime, timezone
from pathlib import Path
from types import TracebackType

from .constants import LOGS_DIR


# Custom levels, ordered between INFO (20) and WARNING (30)
STEP = 22
SUCCESS = 25
DEPLOYMENT = 26

logging.addLevelName(STEP, "STEP")
logging.addLevelName(SUCCESS, "SUCCESS")
logging.addLevelName(DEPLOYMENT, "DEPLOYMENT")

# Tags that differ from the stdlib level name
LEVEL_TAGS: dict[int, str] = {logging.WARNING: "WARN"}

ANSI_RESET = "\x1b[0m"
LEVEL_COLORS: dict[int, str] = {
    SUCCESS: "\x1b[32m",  # green
    DEPLOYMENT: "\x1b[32m",  # green
    logging.ERROR: "\x1b[31m",  # red
    logging.WARNING: "\x1b[33m",  # yellow
    STEP: "\x1b[36m",  # cyan
}

SUMMARY_WIDTH = 60


class DeploymentFormatter(logging.Formatter):
    """Render records as ``[<timestamp>] [<LEVEL>] <message>``."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def format(self, record: logging.LogRecord) -> str:
        level = LEVEL_TAGS.get(record.levelno, record.levelname)
        return f"[{self.formatTime(record)}] [{level}] {record.getMessage()}"


class ColorFormatter(DeploymentFormatter):
    """Console variant of :class:`DeploymentFormatter` wrapping lines in ANSI colours."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if color is None:
            return line
        return f"{color}{line}{ANSI_RESET}"


class _BelowLevelFilter(logging.Filter):
    def __init__(self, level: int):
        super().__init__()
        self.level = level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.level


class DeploymentLogger:
    """
    Logger for a single deployment run on one chain.

    Every line goes to the console (coloured) and to ``logs/<chain>.log``
    (plain). The log file is truncated when the logger is created.

    Example:
        >>> with DeploymentLogger("sepolia") as log:
        ...     log.step(1, "Deploying UnsupportedProtocol contract")
        ...     log.deployment("UnsupportedProtocol", "0xabc...", "0x123...")
    """

    def __init__(self, chain_name: str, logs_dir: Path | None = None):
        self.chain_name = chain_name

        logs_dir = Path(logs_dir) if logs_dir is not None else Path.cwd() / LOGS_DIR
        logs_dir.mkdir(parents=True, exist_ok=True)
        self.log_file_path = logs_dir / f"{chain_name}.log"

        self._logger = logging.getLogger(f"universal_router_deploy.{chain_name}")
        self._logger.setLevel(logging.INFO)
        self._logger.propagate = False

        # Handlers left over from an earlier run in the same process
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        # mode="w" gives every run a fresh file
        file_handler = logging.FileHandler(self.log_file_path, mode="w", encoding="utf-8")
        file_handler.setFormatter(DeploymentFormatter())
        self._logger.addHandler(file_handler)

        stdout_handler = logging.StreamHandler(sys.stdout)
        stdout_handler.addFilter(_BelowLevelFilter(logging.WARNING))
        stdout_handler.setFormatter(ColorFormatter())
        self._logger.addHandler(stdout_handler)

        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.WARNING)
        stderr_handler.setFormatter(ColorFormatter())
        self._logger.addHandler(stderr_handler)

    # ------------------------------------------------------------------ #
    # Levels                                                             #
    # ------------------------------------------------------------------ #

    def info(self, message: str) -> None:
        self._logger.info(message)

    def success(self, message: str) -> None:
        self._logger.log(SUCCESS, message)

    def warning(self, message: str) -> None:
        self._logger.warning(message)

    warn = warning

    def error(self, message: str, exc: BaseException | None = None) -> None:
        """Log an error, followed by the stack trace of ``exc`` when given."""
        self._logger.error(message)
        if exc is not None:
            trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            self._logger.error(f"Stack trace: {trace.rstrip()}")

    def step(self, step_number: int, message: str) -> None:
        self._logger.log(STEP, f"{step_number}: {message}")

    def deployment(self, contract_name: str, address: str, tx_hash: str) -> None:
        self._logger.log(DEPLOYMENT, f"{contract_name} deployed at {address} (tx: {tx_hash})")

    def summary(self, deployments: Mapping[str, str]) -> None:
        """Print a bordered block listing ``deployments`` in insertion order."""
        border = "=" * SUMMARY_WIDTH
        self.info(border)
        self.success("DEPLOYMENT SUMMARY")
        self.info(border)
        for contract_name, result in deployments.items():
            self.success(f"{contract_name}: {result}")
        self.info(border)
        self.info(f"Log file saved to: {self.log_file_path}")

    # ------------------------------------------------------------------ #
    # Lifecycle                                                          #
    # ------------------------------------------------------------------ #

    def close(self) -> None:
        for handler in list(self._logger.handlers):
            handler.flush()
            self._logger.removeHandler(handler)
            handler.close()

    def __enter__(self) -> DeploymentLogger:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
