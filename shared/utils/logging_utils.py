"""
Logging utilities for product collectors.

Dual logging pattern:
- Short user-facing messages to an optional status callback (console/GUI)
- Detailed technical messages to the logging module (console and file)
"""

import logging
from typing import Callable, Optional


_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

SECTION_RULE = "=" * 80


def _notify(status_fn: Optional[Callable], ui_msg: str) -> None:
    """Send a message to the status callback; callback failures are only logged."""
    if not status_fn:
        return
    try:
        status_fn(ui_msg)
    except Exception as e:
        logging.warning(f"Status update failed: {e}")


def log_and_status(
    status_fn: Optional[Callable],
    msg: str,
    level: str = "info",
    ui_msg: Optional[str] = None
):
    """
    Log a technical message and forward a user message to the status callback.

    Args:
        status_fn: Status callback function (None to log only)
        msg: Detailed technical message for logs
        level: Log level ("info", "warning", "error", "debug")
        ui_msg: User-friendly message (defaults to msg)
    """
    logging.log(_LEVELS.get(level, logging.INFO), msg)
    _notify(status_fn, msg if ui_msg is None else ui_msg)


def log_section_header(status_fn: Optional[Callable], title: str):
    """Log a banner line around a section title."""
    banner = f"\n{SECTION_RULE}\n{title}\n{SECTION_RULE}"
    log_and_status(status_fn, banner)


def log_progress(
    status_fn: Optional[Callable],
    current: int,
    total: int,
    item_name: str,
    details: Optional[str] = None
):
    """
    Log a "[current/total]" progress line.

    Args:
        status_fn: Status callback function
        current: Current item number (1-based)
        total: Total items
        item_name: Name of item being processed
        details: Extra technical details, logs only
    """
    ui_msg = f"[{current}/{total}] Processing: {item_name}"
    tech_msg = ui_msg if not details else f"{ui_msg} | {details}"
    log_and_status(status_fn, tech_msg, ui_msg=ui_msg)


def log_success(
    status_fn: Optional[Callable],
    msg: str,
    details: Optional[str] = None
):
    """Log a success message."""
    tech_msg = f"SUCCESS: {msg}"
    if details:
        tech_msg += f" | {details}"
    log_and_status(status_fn, tech_msg, ui_msg=f"✅ {msg}")


def log_warning(
    status_fn: Optional[Callable],
    msg: str,
    details: Optional[str] = None
):
    """Log a non-fatal warning."""
    tech_msg = f"WARNING: {msg}"
    if details:
        tech_msg += f" | {details}"
    log_and_status(status_fn, tech_msg, level="warning", ui_msg=f"⚠ {msg}")


def log_error(
    status_fn: Optional[Callable],
    msg: str,
    details: Optional[str] = None,
    exc: Optional[BaseException] = None
):
    """
    Log an error message.

    Args:
        status_fn: Status callback function
        msg: User-friendly error message
        details: Additional technical details for logs
        exc: Exception object; its traceback is attached to the log record
    """
    tech_msg = f"ERROR: {msg}"
    if details:
        tech_msg += f" | {details}"
    if exc is not None:
        tech_msg += f" | Exception: {type(exc).__name__}: {exc}"
        logging.error(tech_msg, exc_info=exc)
    else:
        logging.error(tech_msg)

    _notify(status_fn, f"❌ {msg}")


def log_summary(
    status_fn: Optional[Callable],
    title: str,
    stats: dict
):
    """
    Log a completion summary with one "key: value" line per statistic.

    Args:
        status_fn: Status callback function
        title: Summary title
        stats: Statistics to display, in insertion order
    """
    lines = ["", SECTION_RULE, title, SECTION_RULE]
    lines.extend(f"{key}: {value}" for key, value in stats.items())
    lines.append(SECTION_RULE)

    log_and_status(status_fn, "\n".join(lines))
