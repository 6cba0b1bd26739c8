"""
Kubernetes Module

Everything that talks to, or describes objects for, the control plane:
- KubernetesClient: pods, services and secret lookups
- SparkJobRegistry: job records stored as custom objects
- Manifest helpers for the driver pod and service

These are used internally by DriverLaunchOrchestrator.
"""

from .client import KubernetesClient, resolve_api_server_url
from .helpers import (
    get_driver_labels,
    create_driver_env,
    create_driver_pod_manifest,
    create_driver_service_manifest,
)
from .job_registry import JobState, SparkJobRegistry
from .outcome import CallOutcome, CallStatus

__all__ = [
    # Client
    "KubernetesClient",
    "resolve_api_server_url",
    # Manifest Helpers
    "get_driver_labels",
    "create_driver_env",
    "create_driver_pod_manifest",
    "create_driver_service_manifest",
    # Job records
    "JobState",
    "SparkJobRegistry",
    # Outcomes
    "CallOutcome",
    "CallStatus",
]
