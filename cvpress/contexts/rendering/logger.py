"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from cvpress.utils.logger import CONSOLE_LOG_LEVEL
from cvpress.utils.logger import setup_logger as _setup_logger
from cvpress.utils.timestamp import format_elapsed

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Optional[Path] = None, verbose: bool = False) -> Optional[Path]:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session (None for console only)
        verbose: Show DEBUG messages on the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        extra_provenance={"Browser": "chromium (playwright)"},
        console_level="DEBUG" if verbose else CONSOLE_LOG_LEVEL,
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_render_start(html_length: int, timeout_s: float) -> None:
    """Log start of a render with context."""
    _log_info("Starting PDF render")
    _log_debug(f"  HTML: {html_length} chars")
    _log_debug(f"  Timeout: {timeout_s}s")


def log_stage(stage: str) -> None:
    _log_debug(f"  Stage: {stage}")


def log_render_result(
    success: bool,
    elapsed_time: float,
    pdf_size: int = 0,
    error=None,  # RenderError
) -> None:
    """
    Log render result with diagnostics.

    Args:
        success: Whether a PDF was produced
        elapsed_time: Time taken to render
        pdf_size: Size of the PDF in bytes
        error: RenderError when the render failed
    """
    if success:
        _log_success(f"Render succeeded: {pdf_size} bytes ({format_elapsed(elapsed_time)})")
    else:
        _log_error(f"Render failed ({format_elapsed(elapsed_time)})")
        if error is not None:
            _log_error(f"  Stage: {error.stage}")
            _log_error(f"  Error: {error.message}")
            if error.original_error is not None:
                logger.opt(raw=True).debug(
                    f"\n{'=' * 80}\nBROWSER ERROR:\n{'=' * 80}\n{error.original_error}\n"
                )
