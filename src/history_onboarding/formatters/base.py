"""Base formatter interface for feature report rendering."""

from abc import ABC, abstractmethod
from typing import List, Mapping

from ..models import Feature


def ordered_features(features: Mapping[str, Feature], include_empty: bool = False) -> List[Feature]:
    """Features sorted by name, optionally dropping those without commits."""
    return [
        features[name]
        for name in sorted(features)
        if include_empty or not features[name].is_empty
    ]


def ordered_owners(owners: Mapping[str, float]) -> List[tuple]:
    """Owner entries by descending share, then email."""
    return sorted(owners.items(), key=lambda item: (-item[1], item[0]))


class BaseFormatter(ABC):
    """Abstract base class for report formatters."""

    def __init__(self, include_empty: bool = False):
        self.include_empty = include_empty

    @abstractmethod
    def render(self, features: Mapping[str, Feature]) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, features: Mapping[str, Feature]) -> str:
        """Return the report as a string."""
