"""Logging package for netroles."""

from netroles.logger.base_logger import AlgorithmLogger
from netroles.logger.matrix_logger import MatrixLogger, format_matrix
from netroles.logger.combined_logger import Logger
from netroles.logger.formatting import format_set, format_cell, format_classes

# Unified singleton for tracing role computations
roles_logger = Logger("NetRoles")
roles_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "MatrixLogger",
    "Logger",
    "roles_logger",
    "format_matrix",
    "format_set",
    "format_cell",
    "format_classes",
]
