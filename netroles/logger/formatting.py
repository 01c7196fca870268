"""Text formatting utilities for logging."""

from typing import Any, Iterable, Sequence

import numpy as np


def format_set(s: Iterable[Any]) -> str:
    """Format set for consistent display."""
    items = sorted(s)
    if not items:
        return "∅"
    return "{" + ", ".join(str(x) for x in items) + "}"


def format_cell(value: Any) -> str:
    """Render a single relation or distance cell."""
    if isinstance(value, (bool, np.bool_)):
        return "1" if value else "·"
    return str(value)


def format_classes(labels: Sequence[int]) -> str:
    """Format a label array as its list of classes, e.g. '{0, 3} {1} {2}'."""
    classes: dict[int, list[int]] = {}
    for node, label in enumerate(labels):
        classes.setdefault(int(label), []).append(node)
    return " ".join(format_set(members) for _, members in sorted(classes.items()))
