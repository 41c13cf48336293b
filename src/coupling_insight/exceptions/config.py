"""Configuration exceptions."""

from typing import Any

from .base import CouplingInsightError


class ConfigurationError(CouplingInsightError):
    """A configuration file, variable or option could not be used."""


class InvalidConfigError(ConfigurationError):
    """A single AnalysisConfig field failed validation."""

    def __init__(self, key: str, value: Any, reason: str):
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for {key}: {value!r}", details={"reason": reason})
