"""Feature taxonomy: named features defined by case-insensitive patterns.

A taxonomy is built once, compiles every pattern up front and is read-only
afterwards, so one instance can back any number of pipeline runs.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from ..exceptions import TaxonomyError

DEFAULT_FEATURE_PATTERNS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "Authentication": ("auth", "login", "oauth", "sign[ui][pn]", "signout"),
        "User Profile": (
            "profile",
            "user[-_]?(?:profile|settings|management|dashboard)?",
            "account",
        ),
        "API": ("api(?:[-_](?:gateway|client|server|docs|documentation))?", "graphql", "rest"),
        "Database": ("db", "database", "storage", "sql", "nosql", "orm", "migration"),
        "UI": (
            "ui",
            "interface",
            "component",
            "theme",
            "style",
            "css",
            "html",
            "javascript",
            "react",
            "vue",
            "angular",
            "svelte",
            "tailwind",
            "bootstrap",
        ),
        "Tests": ("test", "spec", r"_test\.go$"),
        "Security": (
            "auth",
            "security",
            "authentication",
            "authorization",
            "encrypt(?:ion)?",
            "hash(?:ing)?",
            "password",
            "token",
            "jwt",
            "api[-_](?:key|token|secret)",
        ),
        "Notifications": ("notification", "notifier", "notify", "alert", "toast", "snackbar"),
        "Analytics": ("analytics", "tracking", "telemetry", "metrics", "stats", "logger", "logging"),
        "Cache": ("cache", "memcached", "redis", "caching"),
        "Search": ("search", "indexing", "fulltext", "autocomplete", "filter", "sort"),
        "Payment": ("payment", "billing", "subscription", "invoice", "purchase"),
        "Admin": ("admin", "dashboard", "management", "control", "panel"),
        "Monitoring": ("monitor", "observe", "stats", "metrics", "logging", "tracing"),
        "Logging": ("log", "logger", "logging", "syslog", "journald"),
        "Configuration": ("config", "configuration", "settings", "properties"),
        "Scheduling": ("schedule", "scheduler", "cron", "job", "task"),
        "Caching": ("cache", "memcached", "redis", "caching"),
        "Rate Limiting": ("rate", "limit", "limiter", "throttle"),
        "Documentation": (
            "docs",
            "documentation",
            "readme",
            "changelog",
            "release",
            "upgrade",
            "migration",
        ),
    }
)


class FeatureTaxonomy:
    """Immutable mapping of feature name to compiled patterns.

    Raises:
        TaxonomyError: If a feature has no patterns or a pattern fails to compile
    """

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Mapping[str, Iterable[str]]):
        compiled: dict[str, tuple[re.Pattern[str], ...]] = {}
        for feature, raw_patterns in patterns.items():
            if isinstance(raw_patterns, str):
                raw_patterns = (raw_patterns,)
            feature_patterns = []
            for pattern in raw_patterns:
                try:
                    feature_patterns.append(re.compile(pattern, re.IGNORECASE))
                except (re.error, TypeError) as e:
                    raise TaxonomyError(feature, str(pattern), str(e)) from e
            if not feature_patterns:
                raise TaxonomyError(feature, "", "feature has no patterns")
            compiled[feature] = tuple(feature_patterns)
        object.__setattr__(self, "_patterns", MappingProxyType(compiled))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def default(cls) -> FeatureTaxonomy:
        """Build the built-in taxonomy of common application features."""
        return cls(DEFAULT_FEATURE_PATTERNS)

    @classmethod
    def from_mapping(cls, patterns: Mapping[str, Iterable[str]]) -> FeatureTaxonomy:
        return cls(patterns)

    @property
    def names(self) -> list[str]:
        """Feature names, sorted."""
        return sorted(self._patterns)

    def patterns_for(self, feature: str) -> tuple[re.Pattern[str], ...]:
        return self._patterns[feature]

    def matches(self, feature: str, text: str) -> bool:
        """True if any of the feature's patterns is found anywhere in ``text``."""
        return any(p.search(text) for p in self._patterns[feature])

    def __contains__(self, feature: object) -> bool:
        return feature in self._patterns

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"FeatureTaxonomy({len(self)} features)"
