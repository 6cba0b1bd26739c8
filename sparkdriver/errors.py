"""
Launcher Error Taxonomy

Configuration errors abort a launch before the control plane is touched.
Remote call failures abort resource creation but are tolerated for the
job record and for deletes of resources that no longer exist.
"""

from typing import Optional


class LauncherError(Exception):
    """Base class for all driver launcher errors."""


class ConfigurationError(LauncherError):
    """A launch parameter is missing or unusable."""


class MissingRequiredField(ConfigurationError):
    """A required launch field is absent or empty."""

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Required field '{key}' is missing")


class MalformedValue(ConfigurationError):
    """An optional field is present but cannot be parsed."""

    def __init__(self, key: str, value: str, expected: str):
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid value for '{key}': {value!r} (expected {expected})"
        )


class RemoteCallFailure(LauncherError, RuntimeError):
    """A create or delete call against the control plane failed."""

    def __init__(
        self,
        operation: str,
        name: str,
        status: Optional[int] = None,
        reason: Optional[str] = None
    ):
        self.operation = operation
        self.name = name
        self.status = status
        self.reason = reason
        detail = reason or "unknown error"
        if status is not None:
            detail = f"HTTP {status}: {detail}"
        super().__init__(f"Failed to {operation} {name}: {detail}")


class LaunchStateError(LauncherError):
    """The orchestrator was asked to do something its state does not allow."""
