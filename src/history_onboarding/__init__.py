"""
git-history-onboarding - who owns what, learned from commit history.

Classifies a repository's commits into a taxonomy of application features
(Authentication, API, Database, ...) and reports, per feature, its primary
and backup owners, its age and its bug-fix history.
"""

__version__ = "0.1.0"

from .analysis import FeaturePipeline, FeatureTaxonomy, OwnershipAttributor
from .api import analyze
from .config import AnalysisConfig, OwnershipThresholds, load_config
from .history import CommitRecord
from .models import Bug, Feature

__all__ = [
    "analyze",
    "AnalysisConfig",
    "Bug",
    "CommitRecord",
    "Feature",
    "FeaturePipeline",
    "FeatureTaxonomy",
    "OwnershipAttributor",
    "OwnershipThresholds",
    "load_config",
]
