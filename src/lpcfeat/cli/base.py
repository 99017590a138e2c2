from __future__ import annotations

import logging
import os
import sys
import traceback
from collections.abc import Callable, Generator
from contextlib import contextmanager
from datetime import datetime, timezone
from importlib.metadata import version
from typing import Any, TextIO

import typer

from ..global_config import DERIVED_LOGS_DIR

_LOGGING_CONFIGURED = False


def _get_lpcfeat_version() -> str:
    try:
        return version("lpcfeat")
    except Exception:  # noqa: BLE001
        return "unknown"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure CLI-wide logging once.

    Sets up basic logging configuration for the CLI. Safe to call multiple
    times; only configures on first call.

    Args:
        level: Logging level (defaults to INFO).

    Side Effects:
        - Configures Python logging module globally.
        - Sets module-level flag to prevent reconfiguration.
    """
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    _LOGGING_CONFIGURED = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger hooked into the shared CLI configuration.

    Args:
        name: Logger name. Uses module name if None.

    Returns:
        Configured Logger instance.

    Logs:
        None (this function only returns a logger, doesn't log itself).
    """
    return logging.getLogger(name)


@contextmanager
def handle_errors(
    operation: str,
    *,
    logger: logging.Logger | None = None,
    log_file: TextIO | None = None,
) -> Generator[None, None, None]:
    """Provide consistent exception handling for CLI operations.

    Context manager that catches exceptions, logs them, displays user-friendly
    error messages, and exits with code 1. Re-raises typer.Exit to allow
    normal CLI exit flow.

    Args:
        operation: Human-readable operation name for error messages.
        logger: Logger instance. Defaults to module logger if None.
        log_file: Optional file handle to write error message and traceback.

    Yields:
        None (used as context manager).

    Raises:
        typer.Exit: Always exits with code 1 on exception (except typer.Exit
            which is re-raised).

    Logs:
        - ERROR: "Error during {operation}" with full exception traceback.

    User Output:
        - Prints error message via typer.secho() in red: "✗ {operation} failed: {exc}".
    """
    logger = logger or get_logger(__name__)
    try:
        yield
    except typer.Exit:
        raise
    except Exception as exc:  # noqa: BLE001
        logger.exception("Error during %s", operation)
        typer.secho(f"✗ {operation} failed: {exc}", fg=typer.colors.RED)
        if log_file:
            log_file.write(f"\n✗ {operation} failed: {exc}\n")
            log_file.write(f"exception_type: {type(exc).__name__}\n")
            log_file.write(f"exception_message: {exc}\n")
            log_file.write("traceback:\n")
            log_file.write(traceback.format_exc())
            log_file.flush()
        raise typer.Exit(1) from exc


def format_result(result: dict[str, Any], *, operation: str | None = None) -> str:
    """Format a pipeline result dict into CLI-friendly text.

    Args:
        result: Result dict in the pipeline shape (success, total, succeeded,
            failed, skipped, message, items, failures).
        operation: Optional operation name to include in formatted output.

    Returns:
        Formatted string ready for CLI display.
    """
    return _format_result_dict(result, operation or "Result")


class BaseCLI:
    """Utility base class for CLI command groups."""

    def __init__(self, domain: str) -> None:
        self.domain = domain
        self.logger = get_logger(__name__)

    def handle_cli_operation(
        self,
        *,
        operation: str,
        op_callable: Callable[[], dict[str, Any]],
        pre_message: str | None = None,
        log_module: str | None = None,
        log_method: str | None = None,
        log_dry_run: bool = False,
        enable_log: bool = True,
        log_context: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Run an operation with consistent logging, formatting, and errors.

        Args:
            operation: Human-readable operation name for error handling.
            op_callable: Callable that performs the operation and returns
                a pipeline result dict.
            pre_message: Optional message to display before operation starts.
            log_module: Module name for log filename (e.g. lpc).
            log_method: Method name for log filename (e.g. levinson).
            log_dry_run: Whether this run is a dry run (for filename).
            enable_log: Whether to write to a log file (default True).
            log_context: Extra key-value pairs for metadata header.

        Returns:
            Result from op_callable.

        User Output:
            - Prints pre_message and the formatted result
              via typer.echo(), mirrored to the log file when enabled.
            - Error messages handled by handle_errors context manager.
        """
        log_file: TextIO | None = None
        use_log = enable_log and log_module is not None

        def _out(msg: str) -> None:
            typer.echo(msg)
            if log_file:
                log_file.write(msg + "\n")
                log_file.flush()

        if use_log:
            DERIVED_LOGS_DIR.mkdir(parents=True, exist_ok=True)
            ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
            parts = [ts, log_module]
            if log_method:
                parts.append(log_method)
            if log_dry_run:
                parts.append("dryrun")
            log_path = DERIVED_LOGS_DIR / f"{'_'.join(parts)}.log"
            log_file = open(log_path, "w", encoding="utf-8")  # noqa: SIM115
            header_lines = [
                "--- metadata ---",
                f"timestamp: {datetime.now(timezone.utc).isoformat()}",
                f"command: {log_module}",
                f"argv: {sys.argv}",
                f"cwd: {os.getcwd()}",
                f"lpcfeat_version: {_get_lpcfeat_version()}",
                f"python_version: {sys.version}",
            ]
            ctx = log_context or {}
            for k, v in ctx.items():
                header_lines.append(f"{k}: {v}")
            header_lines.append("---")
            log_file.write("\n".join(header_lines) + "\n")
            log_file.flush()

        try:
            if pre_message:
                _out(pre_message)

            with handle_errors(operation, logger=self.logger, log_file=log_file):
                result = op_callable()

            _out(format_result(result, operation=operation))
            return result
        finally:
            if log_file:
                log_file.close()


def _format_result_dict(result: dict[str, Any], op_label: str) -> str:
    """Format a dictionary result into CLI-friendly text.

    Formats structured result dictionaries with success status, statistics,
    messages, failures, and items into a multi-line formatted string.

    Args:
        result: Result dictionary with optional keys: success, total,
            succeeded, failed, skipped, message, failures, items.
        op_label: Operation label to display.

    Returns:
        Formatted multi-line string.
    """
    icon = "✓" if result.get("success", True) else "✗"
    lines = [f"{icon} {op_label}"]

    stats_order = [
        ("total", "total"),
        ("succeeded", "succeeded"),
        ("failed", "failed"),
        ("skipped", "skipped"),
    ]
    stats = [
        f"{label}: {result[key]}"
        for key, label in stats_order
        if key in result and result[key] is not None
    ]
    if stats:
        lines.append("  " + " | ".join(stats))

    message = result.get("message")
    if message:
        lines.append(f"  ℹ {message}")

    failures = result.get("failures") or []
    if failures:
        lines.append("  Failures:")
        for failure in failures:
            item = failure.get("item", "item")
            reason = failure.get("reason") or "Unknown error"
            lines.append(f"    • {item}: {reason}")

    items = result.get("items") or []
    if items:
        lines.append("  Items:")
        for item in items:
            name = item.get("file", "item")
            status = item.get("status", "success")
            detail = item.get("detail", "")
            extra = f" ({detail})" if detail else ""
            output_name = item.get("output")
            if output_name:
                lines.append(f"    • {name}: {status} -> {output_name}{extra}")
            else:
                lines.append(f"    • {name}: {status}{extra}")
            lpc_details = _format_lpc_item_details(item)
            if lpc_details:
                lines.append(f"      {lpc_details}")

    return "\n".join(lines)


def _format_lpc_item_details(item: dict[str, Any]) -> str | None:
    """Format optional LPC item details for CLI display."""
    sr = item.get("sample_rate_hz")
    num_samples = item.get("num_samples")
    num_frames = item.get("num_frames")
    poles = item.get("poles")
    window_length = item.get("window_length")

    if (
        sr is None
        or num_samples is None
        or num_frames is None
        or poles is None
        or window_length is None
    ):
        return None

    line = (
        f"audio: n={num_samples} @ {sr} Hz | "
        f"win: L={window_length} H={window_length // 2} | "
        f"frames: {num_frames} | poles: {poles}"
    )
    if num_frames == 0:
        line += " | sample shorter than window, features are zero"
    return line
