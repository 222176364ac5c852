"""File utilities for safe output and human-readable sizes."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

SIZE_UNITS = ["B", "KB", "MB", "GB"]


class FileWriteError(Exception):
    """Raised when an output file cannot be written."""


def validate_file_path(file_path: Path, must_exist: bool = True) -> bool:
    """
    Validate that a file path is safe to use.

    Args:
        file_path: Path to validate
        must_exist: Whether the file must exist

    Returns:
        True if the path is valid and safe
    """
    try:
        resolved_path = file_path.resolve()

        if ".." in file_path.parts:
            logger.warning(f"Path contains traversal attempt: {file_path}")
            return False

        if must_exist:
            if not resolved_path.exists():
                logger.warning(f"File does not exist: {resolved_path}")
                return False

            if not resolved_path.is_file():
                logger.warning(f"Path is not a file: {resolved_path}")
                return False

        return True

    except (OSError, ValueError) as e:
        logger.warning(f"Path validation failed for {file_path}: {e}")
        return False


def write_text_file_safe(file_path: Path, content: str, encoding: str = "utf-8") -> Path:
    """
    Write text to a file after validating the path.

    Args:
        file_path: Destination file
        content: Text to write
        encoding: Output encoding

    Returns:
        The resolved path that was written

    Raises:
        FileWriteError: If the path is unsafe or the write fails
    """
    if not validate_file_path(file_path, must_exist=False):
        raise FileWriteError(f"Invalid or unsafe output path: {file_path}")

    if file_path.exists() and not file_path.is_file():
        raise FileWriteError(f"Path is not a file: {file_path}")

    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding=encoding)
    except OSError as e:
        raise FileWriteError(f"Failed to write {file_path}: {e}") from e

    logger.info(f"Wrote {file_path}")
    return file_path.resolve()


def format_size(size: Optional[int]) -> str:
    """Format a byte count as B/KB/MB/GB, or N/A when unknown."""
    if not size or size <= 0:
        return "N/A"

    value = float(size)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS) - 1:
        value /= 1024
        index += 1

    return f"{value:.{2 if index > 0 else 0}f} {SIZE_UNITS[index]}"


def format_dimensions(width: Optional[int], height: Optional[int]) -> str:
    """Format dimensions as ``W × H``, or N/A unless both are known."""
    if width and height:
        return f"{width} × {height}"
    return "N/A"
