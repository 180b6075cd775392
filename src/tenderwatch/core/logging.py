"""
Logging infrastructure for TenderWatch.

Provides:
- Structured JSON logging for file output
- Rich console output for terminal
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from rich.console import Console


# Extra attributes copied from log records into JSON output
CONTEXT_FIELDS = ("portal", "url", "page", "tender_no", "elapsed_ms", "retry_count")


def json_dumps(obj: Any) -> str:
    return json.dumps(obj, default=str, ensure_ascii=False)


# =============================================================================
# JSON Formatter for File Logging
# =============================================================================


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""
    
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        
        for key in CONTEXT_FIELDS:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)
        
        return json_dumps(log_data)


# =============================================================================
# Rich Console Handler
# =============================================================================


class RichConsoleHandler(logging.Handler):
    """Handler that outputs to Rich console with formatting."""
    
    def __init__(self, console: "Console | None" = None, level: int = logging.INFO):
        super().__init__(level)
        if console is None:
            from rich.console import Console
            console = Console(stderr=True)
        self.console = console
    
    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            
            style = {
                logging.DEBUG: "dim",
                logging.INFO: "default",
                logging.WARNING: "yellow",
                logging.ERROR: "red",
                logging.CRITICAL: "bold red",
            }.get(record.levelno, "default")
            
            prefix = ""
            if hasattr(record, "tender_no"):
                prefix = f"[cyan][{record.tender_no}][/cyan] "
            elif hasattr(record, "page"):
                prefix = f"[cyan][page {record.page}][/cyan] "
            elif hasattr(record, "portal"):
                prefix = f"[cyan][{record.portal}][/cyan] "
            
            self.console.print(f"{prefix}[{style}]{message}[/{style}]", highlight=False)
            
            if record.exc_info:
                self.console.print_exception()
                
        except Exception:
            self.handleError(record)


# =============================================================================
# Logger Configuration
# =============================================================================


def setup_logging(
    level: str = "INFO",
    log_file: Path | str | None = None,
    json_format: bool = True,
    rich_console: bool = True,
) -> logging.Logger:
    """Set up logging for TenderWatch.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file (optional)
        json_format: Use JSON format for file logs
        rich_console: Use Rich for console output
        
    Returns:
        Root logger for tenderwatch
    """
    logger = logging.getLogger("tenderwatch")
    logger.setLevel(getattr(logging, level.upper()))
    
    # Reconfiguring replaces handlers; close file handles of the old ones
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    
    if rich_console:
        console_handler: logging.Handler = RichConsoleHandler()
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    console_handler.setLevel(getattr(logging, level.upper()))
    logger.addHandler(console_handler)
    
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logger.level)
        
        if json_format:
            file_handler.setFormatter(JSONFormatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
        
        logger.addHandler(file_handler)
    
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance.
    
    Args:
        name: Logger name (will be prefixed with 'tenderwatch.')
        
    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"tenderwatch.{name}")
    return logging.getLogger("tenderwatch")
