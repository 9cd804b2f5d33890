"""Tests for per-feature commit classification."""

from history_onboarding.analysis.classifier import (
    FeatureClassifier,
    MatchSource,
    normalize_path,
)
from history_onboarding.analysis.conventional import parse_conventional_commit
from history_onboarding.analysis.taxonomy import FeatureTaxonomy
from history_onboarding.models import Feature

from conftest import make_commit


def classify(classifier, feature, commit):
    return classifier.classify(feature, commit, parse_conventional_commit(commit.message))


class TestMatchPrecedence:
    """Scope, then description/body, then file paths."""

    def setup_method(self):
        self.classifier = FeatureClassifier(FeatureTaxonomy.default())

    def match(self, feature, commit):
        return self.classifier.match(feature, commit, parse_conventional_commit(commit.message))

    def test_scope_match_wins(self):
        """A matching scope decides before the description."""
        commit = make_commit(
            message="feat(auth): implement login",
            files=["auth/login.go", "auth/middleware.go"],
        )
        assert self.match("Authentication", commit) == MatchSource.SCOPE

    def test_description_when_scope_does_not_match(self):
        """The description is checked when the scope misses."""
        commit = make_commit(message="feat(core): add oauth provider", files=["core/x.go"])
        assert self.match("Authentication", commit) == MatchSource.DESCRIPTION

    def test_body_after_description(self):
        """The body is checked after the description."""
        commit = make_commit(
            message="feat(core): add provider\n\nWires the new login screen",
            files=["core/x.go"],
        )
        assert self.match("Authentication", commit) == MatchSource.BODY

    def test_file_fallback_for_unstructured_message(self):
        """Free-form messages are classified by their paths."""
        commit = make_commit(message="update database schema", files=["db/schema.go"])
        # the message says "database" but free-form messages are only matched by path
        assert self.match("Database", commit) == MatchSource.FILE

    def test_unstructured_message_text_is_ignored(self):
        """Free-form message text never matches on its own."""
        commit = make_commit(message="update database schema", files=["main.go"])
        assert self.match("Database", commit) is None

    def test_file_fallback_when_conventional_text_misses(self):
        """Paths still count when the conventional text misses."""
        commit = make_commit(message="chore: tidy", files=["README.md", "src/payment/card.py"])
        assert self.match("Payment", commit) == MatchSource.FILE

    def test_no_match(self):
        """A commit matching nothing is reported as no match."""
        commit = make_commit(message="chore: tidy", files=["main.go"])
        assert self.match("Payment", commit) is None

    def test_windows_paths_normalized(self):
        """Backslash paths match forward-slash patterns."""
        taxonomy = FeatureTaxonomy({"Handlers": [r"api/handlers/"]})
        classifier = FeatureClassifier(taxonomy)
        commit = make_commit(message="tweak", files=["api\\handlers\\user.go"])
        assert classifier.match("Handlers", commit, None) == MatchSource.FILE

    def test_normalize_path(self):
        """Backslashes become forward slashes."""
        assert normalize_path("a\\b\\c.go") == "a/b/c.go"
        assert normalize_path("a/b") == "a/b"


class TestClassify:
    """Feature state updates on a match."""

    def setup_method(self):
        self.classifier = FeatureClassifier(FeatureTaxonomy.default())

    def test_match_appends_commit_and_sets_timestamps(self):
        """A match records the commit and its timestamp."""
        feature = Feature(name="Database")
        commit = make_commit(message="update database schema", hours_ago=5, files=["db/schema.go"])

        assert classify(self.classifier, feature, commit) == MatchSource.FILE
        assert feature.commits == [commit]
        assert feature.created_at == commit.timestamp
        assert feature.last_updated == commit.timestamp
        assert feature.bugs == []

    def test_miss_leaves_feature_untouched(self):
        """A miss changes nothing."""
        feature = Feature(name="Payment")
        assert classify(self.classifier, feature, make_commit(files=["main.go"])) is None
        assert feature.is_empty
        assert feature.created_at is None
        assert feature.last_updated is None

    def test_timestamps_are_min_and_max_regardless_of_order(self):
        """Created and updated are the earliest and latest times in any order."""
        feature = Feature(name="Database")
        middle = make_commit("b" * 40, "x", hours_ago=10, files=["db/a.go"])
        newest = make_commit("c" * 40, "x", hours_ago=1, files=["db/b.go"])
        oldest = make_commit("a" * 40, "x", hours_ago=30, files=["db/c.go"])

        for commit in (middle, newest, oldest):
            classify(self.classifier, feature, commit)

        assert feature.created_at == oldest.timestamp
        assert feature.last_updated == newest.timestamp
        assert [c.hash for c in feature.commits] == ["b" * 40, "c" * 40, "a" * 40]

    def test_fix_commit_records_bug(self):
        """A matched fix adds a bug."""
        feature = Feature(name="API")
        commit = make_commit(
            message="fix(api): handle nil response", email="jane@example.com", files=["api/h.go"]
        )
        classify(self.classifier, feature, commit)

        assert len(feature.bugs) == 1
        bug = feature.bugs[0]
        assert bug.commit_hash == commit.hash
        assert bug.author_email == "jane@example.com"
        assert bug.affected_files == ["api/h.go"]

    def test_bug_keyword_without_header_records_bug(self):
        """Bug keywords count without a conventional header."""
        feature = Feature(name="Authentication")
        commit = make_commit(message="Squash a nasty bug", files=["web/login.html"])
        classify(self.classifier, feature, commit)
        assert feature.bug_count == 1

    def test_unmatched_fix_records_nothing(self):
        """A fix for another feature adds nothing."""
        feature = Feature(name="Payment")
        classify(self.classifier, feature, make_commit(message="fix: typo", files=["main.go"]))
        assert feature.bugs == []


class TestMultiLabel:
    def test_commit_lands_in_every_matching_feature(self):
        """One commit can belong to several features."""
        classifier = FeatureClassifier(FeatureTaxonomy.default())
        commit = make_commit(message="fix(auth): expire sessions", files=["auth/session.go"])
        auth = Feature(name="Authentication")
        security = Feature(name="Security")
        payment = Feature(name="Payment")

        for feature in (auth, security, payment):
            classify(classifier, feature, commit)

        assert auth.commits == [commit]
        assert security.commits == [commit]
        assert payment.commits == []
        # one Bug per matched feature, identical content
        assert auth.bugs == security.bugs
        assert len(auth.bugs) == 1
