"""Commit classification and ownership attribution."""

from .bugs import BUG_KEYWORDS, is_bug_fix
from .classifier import FeatureClassifier, MatchSource
from .conventional import ConventionalCommit, parse_conventional_commit
from .ownership import OwnershipAttributor
from .pipeline import FeaturePipeline
from .taxonomy import DEFAULT_FEATURE_PATTERNS, FeatureTaxonomy

__all__ = [
    "BUG_KEYWORDS",
    "ConventionalCommit",
    "DEFAULT_FEATURE_PATTERNS",
    "FeatureClassifier",
    "FeaturePipeline",
    "FeatureTaxonomy",
    "MatchSource",
    "OwnershipAttributor",
    "is_bug_fix",
    "parse_conventional_commit",
]
