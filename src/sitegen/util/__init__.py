"""
Shared utility helpers for filesystem and string handling.
"""

from .filesystem import ensure_directory, file_lock, write_text_file
from .text import slugify

__all__ = [
    "ensure_directory",
    "file_lock",
    "write_text_file",
    "slugify",
]
