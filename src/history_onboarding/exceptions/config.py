"""Configuration exceptions: settings values and the feature taxonomy."""

from typing import Any

from .base import OnboardingError


class ConfigurationError(OnboardingError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class TaxonomyError(ConfigurationError):
    """Raised when a feature taxonomy entry cannot be compiled."""

    def __init__(self, feature: str, pattern: str, reason: str):
        super().__init__(
            f"Invalid pattern for feature {feature!r}: {pattern!r}",
            details={"feature": feature, "pattern": pattern, "reason": reason},
        )
        self.feature = feature
        self.pattern = pattern
        self.reason = reason
