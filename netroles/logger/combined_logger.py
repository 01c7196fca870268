"""Combined logger with all functionality."""

from netroles.logger.base_logger import AlgorithmLogger
from netroles.logger.matrix_logger import MatrixLogger
from netroles.logger.formatting import format_classes


class Logger(MatrixLogger):
    """
    Combined logger that inherits all tracing capabilities.

    Usage:
        logger = Logger("my_algorithm")
        logger.section("Phase 1")
        logger.info("Starting phase 1...")
        logger.matrix(relation.to_matrix())
        logger.classes(partition.labels)
    """

    def __init__(self, name: str):
        """Initialize the combined logger."""
        AlgorithmLogger.__init__(self, name)

    def classes(self, labels, title: str = "") -> None:
        """Display a node labeling as its list of classes."""
        if self.disabled:
            return
        prefix = f"{title}: " if title else ""
        self.logger.info(prefix + format_classes(labels))
