# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Error handling utilities for the pdf_ua_generator package.

This module provides the exception hierarchy raised by the generator and the
logging helpers used to record failures consistently before they propagate.
"""

import logging
import sys
from typing import Optional, Type, Dict, Any


class PdfUaError(Exception):
    """Base exception class for all pdf_ua_generator errors."""



class DocumentGenerationError(PdfUaError):
    """Raised when a PDF document could not be generated."""



class ConfigurationError(DocumentGenerationError):
    """Raised when document settings are invalid or rejected by the engine."""



class RenderError(DocumentGenerationError):
    """Raised when the rendering engine rejects the markup or its output."""



class WriteError(DocumentGenerationError):
    """Raised when the generated PDF cannot be written to the output path."""



class InspectionError(PdfUaError):
    """Raised when a PDF cannot be read back for inspection."""



# Configure module-level logger
logger = logging.getLogger(__name__)


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Set up a logger with standardized formatting.

    Args:
        name: The logger name, typically __name__ of the calling module
        level: The logging level (default: inherited from the root logger)

    Returns:
        A configured logger instance
    """
    logger_obj = logging.getLogger(name)

    if level is not None:
        logger_obj.setLevel(level)

    logger_obj.propagate = True

    # Only attach a handler when nothing upstream will print the records
    if not logger_obj.handlers and not logging.getLogger().handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(formatter)
        handler.setLevel(logging.WARNING)
        logger_obj.addHandler(handler)

    return logger_obj


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    message: str = "An error occurred",
    level: int = logging.ERROR,
    include_traceback: bool = True,
) -> None:
    """
    Log an exception with consistent formatting.

    Args:
        logger: The logger instance to use
        exception: The exception to log
        message: Optional custom message
        level: The logging level to use
        include_traceback: Whether to include the full traceback
    """
    error_type = type(exception).__name__
    error_message = str(exception)

    log_msg = f"{message}: {error_type} - {error_message}"

    if include_traceback:
        logger.log(level, log_msg, exc_info=exception)
    else:
        logger.log(level, log_msg)


def handle_exception(
    exc: Exception,
    logger: logging.Logger,
    custom_message: str = None,
    reraise: bool = True,
    custom_exception: Type[Exception] = None,
    additional_data: Dict[str, Any] = None,
) -> Optional[Dict[str, Any]]:
    """
    Standardized exception handling.

    Args:
        exc: The caught exception
        logger: Logger to use for recording the error
        custom_message: Optional message to include
        reraise: Whether to reraise the exception (possibly wrapped)
        custom_exception: Exception type to raise instead of original
        additional_data: Additional context data to include

    Returns:
        If reraise is False, returns error information as a dict

    Raises:
        The original exception or a wrapped custom exception if reraise is True
    """
    message = custom_message if custom_message else str(exc)

    log_exception(logger, exc, message, include_traceback=False)

    error_info = {
        "error_type": type(exc).__name__,
        "error_message": str(exc),
        "original_exception": exc,
    }

    if additional_data:
        error_info.update(additional_data)

    if reraise:
        if custom_exception:
            # Keep the underlying cause attached for callers
            raise custom_exception(f"{message}: {exc}") from exc
        raise exc

    return error_info
