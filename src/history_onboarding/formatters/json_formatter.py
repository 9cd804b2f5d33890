"""JSON formatter for feature reports."""

import json
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from ..analysis.ownership import OwnershipAttributor
from ..models import Feature
from .base import BaseFormatter, ordered_features

TOP_CONTRIBUTORS = 3


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def feature_to_dict(feature: Feature) -> Dict[str, Any]:
    """Serializable view of a feature; owner maps keyed in email order."""
    return {
        "name": feature.name,
        "created_at": _iso(feature.created_at),
        "last_updated": _iso(feature.last_updated),
        "commit_count": feature.commit_count,
        "commits": [c.hash for c in feature.commits],
        "owners": {email: feature.owners[email] for email in sorted(feature.owners)},
        "backup_owners": {
            email: feature.backup_owners[email] for email in sorted(feature.backup_owners)
        },
        "top_contributors": OwnershipAttributor.top_owners(feature.commits, TOP_CONTRIBUTORS),
        "bugs": [
            {
                "commit_hash": bug.commit_hash,
                "description": bug.description,
                "fixed_at": _iso(bug.fixed_at),
                "affected_files": list(bug.affected_files),
                "author_email": bug.author_email,
            }
            for bug in feature.bugs
        ],
    }


class JsonFormatter(BaseFormatter):
    """Render features as a JSON document."""

    def render(self, features: Mapping[str, Feature]) -> None:
        print(self.format(features))

    def format(self, features: Mapping[str, Feature]) -> str:
        data = {
            "features": [
                feature_to_dict(f) for f in ordered_features(features, self.include_empty)
            ]
        }
        return json.dumps(data, indent=2)
