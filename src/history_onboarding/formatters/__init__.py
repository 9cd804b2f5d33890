"""Output formatters for feature reports."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter, feature_to_dict
from .rich_formatter import RichFormatter


def get_formatter(name: str, include_empty: bool = False) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json"

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls(include_empty=include_empty)


__all__ = [
    "BaseFormatter",
    "JsonFormatter",
    "RichFormatter",
    "feature_to_dict",
    "get_formatter",
]
