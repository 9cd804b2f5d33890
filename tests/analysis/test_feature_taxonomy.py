"""Tests for the feature taxonomy."""

import re

import pytest

from history_onboarding.analysis.taxonomy import DEFAULT_FEATURE_PATTERNS, FeatureTaxonomy
from history_onboarding.exceptions import ConfigurationError, TaxonomyError

EXPECTED_FEATURES = [
    "Authentication",
    "User Profile",
    "API",
    "Database",
    "UI",
    "Tests",
    "Security",
    "Notifications",
    "Analytics",
    "Cache",
    "Search",
    "Payment",
    "Admin",
    "Monitoring",
    "Logging",
    "Configuration",
    "Scheduling",
    "Caching",
    "Rate Limiting",
    "Documentation",
]


class TestDefaultTaxonomy:
    def test_all_features_present(self):
        """The built-in taxonomy has all twenty features, each with patterns."""
        taxonomy = FeatureTaxonomy.default()
        assert len(taxonomy) == len(EXPECTED_FEATURES)
        for feature in EXPECTED_FEATURES:
            assert feature in taxonomy
            assert len(taxonomy.patterns_for(feature)) > 0

    def test_names_sorted(self):
        """Names and iteration are in sorted order."""
        taxonomy = FeatureTaxonomy.default()
        assert taxonomy.names == sorted(EXPECTED_FEATURES)
        assert list(taxonomy) == taxonomy.names

    def test_patterns_compiled_case_insensitive(self):
        """Patterns are compiled once, case-insensitive."""
        for pattern in FeatureTaxonomy.default().patterns_for("Database"):
            assert isinstance(pattern, re.Pattern)
            assert pattern.flags & re.IGNORECASE

    def test_default_mapping_is_read_only(self):
        """The built-in pattern table cannot be modified."""
        with pytest.raises(TypeError):
            DEFAULT_FEATURE_PATTERNS["New"] = ("x",)  # type: ignore[index]

    @pytest.mark.parametrize(
        "feature, text",
        [
            ("Authentication", "AUTH"),
            ("Authentication", "src/SignIn/view.tsx"),
            ("Authentication", "signup flow"),
            ("Database", "db/schema.go"),
            ("Tests", "internal/git/clone_test.go"),
            ("Security", "rotate JWT secret"),
            ("API", "api-gateway config"),
            ("Rate Limiting", "add throttle to uploads"),
        ],
    )
    def test_matches(self, feature, text):
        """Representative texts match their feature."""
        assert FeatureTaxonomy.default().matches(feature, text)

    @pytest.mark.parametrize(
        "feature, text",
        [
            ("Payment", "db/schema.go"),
            ("Authentication", "docs/readme.md"),
            ("Tests", "main.go"),
        ],
    )
    def test_does_not_match(self, feature, text):
        """Unrelated texts do not match."""
        assert not FeatureTaxonomy.default().matches(feature, text)

    def test_search_not_fullmatch(self):
        """A pattern inside a longer token still counts."""
        assert FeatureTaxonomy.default().matches("Authentication", "reauthorize_session")


class TestCustomTaxonomy:
    def test_from_mapping(self):
        """Custom features are built from a mapping."""
        taxonomy = FeatureTaxonomy.from_mapping({"Billing": ["invoice", "billing"]})
        assert taxonomy.names == ["Billing"]
        assert taxonomy.matches("Billing", "services/Invoice.py")
        assert not taxonomy.matches("Billing", "services/auth.py")

    def test_single_string_pattern(self):
        """A bare string is taken as a one-pattern list."""
        taxonomy = FeatureTaxonomy({"Search": "search"})
        assert taxonomy.matches("Search", "SearchBar.vue")

    def test_invalid_pattern_fails_fast(self):
        """A bad pattern raises at construction and names the feature."""
        with pytest.raises(TaxonomyError) as exc_info:
            FeatureTaxonomy({"Broken": ["ok", "unclosed(group"]})
        err = exc_info.value
        assert isinstance(err, ConfigurationError)
        assert err.feature == "Broken"
        assert err.pattern == "unclosed(group"

    def test_feature_without_patterns_rejected(self):
        """A feature needs at least one pattern."""
        with pytest.raises(TaxonomyError):
            FeatureTaxonomy({"Empty": []})

    def test_unknown_feature_raises_key_error(self):
        """Asking about an unknown feature is a KeyError."""
        with pytest.raises(KeyError):
            FeatureTaxonomy.default().matches("Nope", "x")

    def test_immutable(self):
        """Attributes cannot be reassigned after construction."""
        taxonomy = FeatureTaxonomy.default()
        with pytest.raises(AttributeError):
            taxonomy._patterns = {}

    def test_independent_instances(self):
        """Taxonomies share no state."""
        a = FeatureTaxonomy({"A": ["alpha"]})
        b = FeatureTaxonomy({"B": ["beta"]})
        assert "B" not in a
        assert "A" not in b
