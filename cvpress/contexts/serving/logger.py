"""
Serving context logger.

Provides logging interface for serving context with automatic [serve] prefix.
All serving modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from cvpress.utils.logger import setup_logger as _setup_logger
from cvpress.utils.timestamp import format_elapsed

CONTEXT_PREFIX = "[serve]"


def setup_serving_logger(log_dir: Optional[Path] = None, extra_provenance: dict = None) -> Optional[Path]:
    """
    Setup logger for serving context.

    Args:
        log_dir: Directory for this server session (None for console only)
        extra_provenance: Server settings to record in the provenance header

    Returns:
        Path to log file
    """
    return _setup_logger(context_name="serve", log_dir=log_dir, extra_provenance=extra_provenance)


# Wrapper functions with automatic [serve] prefix


def _log_info(message: str) -> None:
    """Log info message with [serve] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [serve] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [serve] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [serve] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level serving-specific logging helpers


def log_request(remote_addr: str, method: str, path: str, status: int, elapsed_time: float) -> None:
    """Log one handled HTTP request (access-log style)."""
    _log_info(f'{remote_addr} "{method} {path}" {status} ({format_elapsed(elapsed_time)})')


def log_generation_start(template_id: str, layout: str, keyword_count: int) -> None:
    _log_info(f"Generating PDF for template {template_id}")
    _log_debug(f"  Layout: {layout}")
    _log_debug(f"  Keywords: {keyword_count}")


def log_generation_result(result) -> None:
    """Log a successful generation (GenerationResult)."""
    pages = result.page_count if result.page_count is not None else "?"
    _log_success(
        f"Generated {len(result.pdf_bytes)} bytes, {pages} page(s) "
        f"({format_elapsed(result.render_time_s)})"
    )


def log_generation_failure(template_id: str, error: Exception) -> None:
    _log_error(f"Failed to generate PDF for template {template_id}")
    _log_error(f"  {type(error).__name__}: {error}")
