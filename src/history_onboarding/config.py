"""Configuration loading and management for git-history-onboarding.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.history-onboarding.toml)
    3. Project config (./history-onboarding.toml)
    4. Explicit config file
    5. Environment variables (ONBOARDING_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(workers=4)
    >>> config.workers
    4
    >>> config.ownership.primary
    0.2

A config file may carry two tables besides the top-level keys::

    [ownership]
    primary = 0.4
    backup = 0.2

    [taxonomy]
    Billing = ["billing", "invoice"]
    Search = ["search", "index"]
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Mapping, Optional, get_type_hints

from .exceptions import InvalidConfigError, OnboardingError

Verbosity = Literal["quiet", "normal", "verbose"]

ENV_PREFIX = "ONBOARDING_"


@dataclass(frozen=True)
class OwnershipThresholds:
    """Commit-share thresholds for ownership attribution.

    Attributes:
        primary: Share at or above which an author is a primary owner
        backup: Share at or above which an author is a backup owner
    """

    primary: float = 0.2
    backup: float = 0.1

    def __post_init__(self) -> None:
        for name in ("primary", "backup"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfigError(name, value, "must be a number")
            if not 0.0 < value <= 1.0:
                raise InvalidConfigError(name, value, "must be in (0, 1]")


DEFAULT_THRESHOLDS = OwnershipThresholds()


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        ownership: Primary/backup ownership thresholds
        taxonomy: Custom feature patterns (None = built-in taxonomy)
        workers: Threads for per-feature classification (1 = sequential)
        git_max_commits: Maximum commits to read (0 = unlimited)
        timeout_seconds: Timeout for git clone/log subprocesses
        verbosity: Logging verbosity level
    """

    ownership: OwnershipThresholds = field(default_factory=OwnershipThresholds)
    taxonomy: Optional[Mapping[str, tuple[str, ...]]] = None
    workers: int = 1
    git_max_commits: int = 0
    timeout_seconds: int = 300
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.git_max_commits < 0:
            raise InvalidConfigError("git_max_commits", self.git_max_commits, "must be non-negative")
        if self.timeout_seconds < 1:
            raise InvalidConfigError("timeout_seconds", self.timeout_seconds, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError("verbosity", self.verbosity, "expected quiet/normal/verbose")


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). Besides the
            AnalysisConfig fields, accepts ``primary_threshold``,
            ``backup_threshold``, ``verbose`` and ``quiet``.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        OnboardingError: If a config file is invalid or missing
        InvalidConfigError: If a value is out of range
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / ".history-onboarding.toml"
    if global_config.exists():
        _merge_file(merged, global_config, "global config")

    project_config = Path.cwd() / "history-onboarding.toml"
    if project_config.exists():
        _merge_file(merged, project_config, "project config")

    if config_file is not None:
        if not config_file.exists():
            raise OnboardingError(f"Config file not found: {config_file}")
        _merge_file(merged, config_file, "config file")

    merged.update(_load_env_vars())

    # Drop unset CLI options so they don't mask file values
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    ownership = dict(merged.pop("ownership", {}) or {})
    if "primary_threshold" in merged:
        ownership["primary"] = merged.pop("primary_threshold")
    if "backup_threshold" in merged:
        ownership["backup"] = merged.pop("backup_threshold")
    if "primary_threshold" in overrides:
        ownership["primary"] = overrides.pop("primary_threshold")
    if "backup_threshold" in overrides:
        ownership["backup"] = overrides.pop("backup_threshold")

    merged.update(overrides)

    try:
        merged["ownership"] = OwnershipThresholds(**ownership)
    except TypeError as e:
        raise OnboardingError(f"Invalid [ownership] config: {e}")

    taxonomy = merged.pop("taxonomy", None)
    if taxonomy is not None:
        merged["taxonomy"] = _normalize_taxonomy(taxonomy)

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        raise OnboardingError(f"Invalid configuration: {e}")


def _merge_file(merged: dict[str, Any], path: Path, label: str) -> None:
    try:
        data = _load_toml_file(path)
    except OnboardingError:
        raise
    except Exception as e:
        raise OnboardingError(f"Invalid {label} '{path}': {e}")

    ownership = data.pop("ownership", None)
    if ownership is not None:
        if not isinstance(ownership, dict):
            raise InvalidConfigError("ownership", ownership, "expected a table")
        merged.setdefault("ownership", {}).update(ownership)
    merged.update(data)


def _normalize_taxonomy(raw: Any) -> dict[str, tuple[str, ...]]:
    if not isinstance(raw, Mapping):
        raise InvalidConfigError("taxonomy", raw, "expected a table of feature = [patterns]")
    result: dict[str, tuple[str, ...]] = {}
    for feature, patterns in raw.items():
        if isinstance(patterns, str):
            patterns = [patterns]
        if not isinstance(patterns, (list, tuple)) or not all(
            isinstance(p, str) for p in patterns
        ):
            raise InvalidConfigError(f"taxonomy.{feature}", patterns, "expected a list of strings")
        result[str(feature)] = tuple(patterns)
    return result


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from ONBOARDING_* environment variables.

    Supported environment variables:
        ONBOARDING_WORKERS: int
        ONBOARDING_GIT_MAX_COMMITS: int
        ONBOARDING_TIMEOUT_SECONDS: int
        ONBOARDING_VERBOSITY: quiet/normal/verbose
        ONBOARDING_PRIMARY_THRESHOLD: float
        ONBOARDING_BACKUP_THRESHOLD: float
    """
    type_hints = get_type_hints(AnalysisConfig)
    scalar_fields = {
        name: type_hints[name]
        for name in ("workers", "git_max_commits", "timeout_seconds", "verbosity")
    }
    scalar_fields["primary_threshold"] = float
    scalar_fields["backup_threshold"] = float

    result: dict[str, Any] = {}
    for field_name, type_hint in scalar_fields.items():
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue
        try:
            result[field_name] = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise OnboardingError(f"Invalid {env_key}: {e}")
    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    if type_hint is int:
        return int(value)
    if type_hint is float:
        return float(value)
    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        OnboardingError: If tomllib/tomli not available
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise OnboardingError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
