"""Feature pipeline: commits in, finalized features out."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from ..config import AnalysisConfig, OwnershipThresholds
from ..history.models import CommitRecord
from ..logging_config import get_logger
from ..models import Feature
from .classifier import FeatureClassifier
from .conventional import ConventionalCommit, parse_conventional_commit
from .ownership import OwnershipAttributor
from .taxonomy import FeatureTaxonomy

logger = get_logger(__name__)

ParsedCommit = tuple[CommitRecord, Optional[ConventionalCommit]]


class FeaturePipeline:
    """One-shot batch transform of a commit list into per-feature records.

    Every commit is parsed once, then offered to every feature of the
    taxonomy. Once all commits are classified, ownership is attributed per
    feature. Features never share mutable state, so with ``workers > 1``
    each feature is accumulated and finalized by a single pool task.
    """

    def __init__(
        self,
        taxonomy: Optional[FeatureTaxonomy] = None,
        thresholds: Optional[OwnershipThresholds] = None,
        workers: int = 1,
    ):
        if workers < 1:
            raise ValueError("workers must be at least 1")
        self.taxonomy = taxonomy if taxonomy is not None else FeatureTaxonomy.default()
        self.classifier = FeatureClassifier(self.taxonomy)
        self.attributor = OwnershipAttributor(thresholds)
        self.workers = workers

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> FeaturePipeline:
        taxonomy = (
            FeatureTaxonomy.from_mapping(config.taxonomy)
            if config.taxonomy is not None
            else FeatureTaxonomy.default()
        )
        return cls(taxonomy=taxonomy, thresholds=config.ownership, workers=config.workers)

    def run(self, commits: Sequence[CommitRecord]) -> dict[str, Feature]:
        """Classify ``commits`` and return features keyed by name."""
        parsed: list[ParsedCommit] = [
            (commit, parse_conventional_commit(commit.message)) for commit in commits
        ]
        logger.debug(
            "Parsed %d commits (%d conventional)",
            len(parsed),
            sum(1 for _, cc in parsed if cc is not None),
        )

        names = self.taxonomy.names
        if self.workers == 1 or len(names) < 2:
            built = [self._build_feature(name, parsed) for name in names]
        else:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                built = list(executor.map(lambda name: self._build_feature(name, parsed), names))

        features = {feature.name: feature for feature in built}
        logger.info(
            "Classified %d commits into %d/%d features",
            len(parsed),
            sum(1 for f in built if not f.is_empty),
            len(built),
        )
        return features

    def _build_feature(self, name: str, parsed: Sequence[ParsedCommit]) -> Feature:
        feature = Feature(name=name)
        for commit, conventional in parsed:
            self.classifier.classify(feature, commit, conventional)
        self.attributor.update_feature_ownership(feature)
        return feature
