#!/usr/bin/env python3
"""
Example: Basic usage of git-history-onboarding as a Python library
"""

from history_onboarding import FeaturePipeline, FeatureTaxonomy, OwnershipThresholds
from history_onboarding.history import GitExtractor

# Read the history of a local checkout (or pass a clone URL)
commits = GitExtractor("/path/to/project", max_commits=2000).extract()

# Classify with the built-in taxonomy and stricter ownership thresholds
pipeline = FeaturePipeline(
    taxonomy=FeatureTaxonomy.default(),
    thresholds=OwnershipThresholds(primary=0.4, backup=0.2),
)
features = pipeline.run(commits)

for name in sorted(features):
    feature = features[name]
    if feature.is_empty:
        continue
    owners = ", ".join(f"{email} ({share:.0%})" for email, share in sorted(feature.owners.items()))
    print(f"{name}: {feature.commit_count} commits, {feature.bug_count} bugs")
    print(f"  owners: {owners or '-'}")

print(f"Analysis complete: {len(commits)} commit(s) read")
