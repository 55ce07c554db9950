"""
Project materialization: template cloning and artifact writing.
"""

from .materializer import (
    ConflictError,
    FileSystemError,
    MaterializeReport,
    TemplateMissingError,
    materialize,
    materialize_project,
    resolve_output_path,
)

__all__ = [
    "ConflictError",
    "FileSystemError",
    "MaterializeReport",
    "TemplateMissingError",
    "materialize",
    "materialize_project",
    "resolve_output_path",
]
