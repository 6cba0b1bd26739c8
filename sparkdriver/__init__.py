"""
Spark driver launcher for Kubernetes.

Creates a driver pod, a LoadBalancer service for the Spark UI and a job
record from a Spark configuration and a launch request, and deletes the
pod and service again on stop.
"""

from .errors import (
    ConfigurationError,
    LaunchStateError,
    LauncherError,
    MalformedValue,
    MissingRequiredField,
    RemoteCallFailure,
)
from .launch import DriverLaunchOrchestrator, LaunchRequest, LaunchState

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "LaunchStateError",
    "LauncherError",
    "MalformedValue",
    "MissingRequiredField",
    "RemoteCallFailure",
    "DriverLaunchOrchestrator",
    "LaunchRequest",
    "LaunchState",
]
