"""Matrix display functionality for logs."""

from typing import Any, Callable, Optional, Sequence

from netroles.logger.base_logger import AlgorithmLogger
from netroles.logger.formatting import format_cell


def format_matrix(
    matrix: Sequence[Sequence[Any]],
    format_func: Optional[Callable[[Any], str]] = None,
) -> str:
    """
    Render a square matrix with bracket glyphs and a header row of column
    indices:

          0 1 2
      0 ⎡ 1 · 1 ⎤
      1 ⎢ · 1 · ⎥
      2 ⎣ · · 1 ⎦
    """
    if format_func is None:
        format_func = format_cell

    formatted = [[format_func(cell) for cell in row] for row in matrix]
    n_rows = len(formatted)
    n_cols = len(formatted[0]) if n_rows else 0
    width = max(
        [len(str(n_cols - 1))] + [len(cell) for row in formatted for cell in row]
    )
    label_width = len(str(max(n_rows - 1, 0)))

    header = " " * (label_width + 3) + " ".join(
        str(col).rjust(width) for col in range(n_cols)
    )
    lines = [header]
    for r_idx, row in enumerate(formatted):
        body = " ".join(cell.rjust(width) for cell in row)
        if n_rows == 1:
            left, right = "[", "]"
        elif r_idx == 0:
            left, right = "⎡", "⎤"
        elif r_idx == n_rows - 1:
            left, right = "⎣", "⎦"
        else:
            left, right = "⎢", "⎥"
        lines.append(f"{str(r_idx).rjust(label_width)} {left} {body} {right}")
    return "\n".join(lines)


class MatrixLogger(AlgorithmLogger):
    """Extension of AlgorithmLogger with matrix display support."""

    def matrix(
        self,
        matrix: Sequence[Sequence[Any]],
        format_func: Optional[Callable[[Any], str]] = None,
        title: str = "",
    ) -> None:
        """
        Display a relation or distance matrix with ASCII art in the terminal.
        """
        if self.disabled or len(matrix) == 0:
            return

        if title:
            self.logger.info(f"\n{title}:")
        self.logger.info(format_matrix(matrix, format_func))
