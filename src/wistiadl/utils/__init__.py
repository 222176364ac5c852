"""Utility modules for WistiaDL."""

from .file_utils import format_dimensions, format_size, write_text_file_safe
from .logging import setup_logging

__all__ = [
    "format_dimensions",
    "format_size",
    "setup_logging",
    "write_text_file_safe",
]
