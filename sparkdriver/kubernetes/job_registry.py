"""
Spark job records stored as custom objects in the cluster.

A job record tracks the lifecycle state of a submission independently of
the driver pod and service. Posting one is best-effort: the registry
reports the outcome and never raises for API errors.
"""

import logging
from enum import Enum
from typing import Any, Dict

from kubernetes import client
from kubernetes.client.rest import ApiException

from ..config import get_settings
from .outcome import CallOutcome

logger = logging.getLogger(__name__)


class JobState(str, Enum):
    """Lifecycle states of a Spark job record."""

    QUEUED = "QUEUED"
    SUBMITTED = "SUBMITTED"
    RUNNING = "RUNNING"
    FINISHED = "FINISHED"
    KILLED = "KILLED"
    FAILED = "FAILED"

    def __str__(self) -> str:
        return self.value


class SparkJobRegistry:
    """Creates SparkJob custom objects through the CustomObjectsApi."""

    def __init__(self, custom_objects: client.CustomObjectsApi):
        self.custom_objects = custom_objects
        self.settings = get_settings()

    def build_job_object(self, name: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Custom object body with the record fields under spec."""
        return {
            "apiVersion": f"{self.settings.k8s_job_resource_group}/{self.settings.k8s_job_resource_version}",
            "kind": self.settings.k8s_job_resource_kind,
            "metadata": {"name": name},
            "spec": {
                key: str(value) if isinstance(value, Enum) else value
                for key, value in fields.items()
            },
        }

    def create_job_object(
        self,
        name: str,
        fields: Dict[str, Any],
        namespace: str
    ) -> CallOutcome:
        """
        Post a job record.

        Args:
            name: Record name
            fields: Scalar fields, e.g. {"num-executors": 1, "image": "...", "state": JobState.QUEUED}
            namespace: Target namespace

        Returns:
            CallOutcome.success with the created object, or CallOutcome.failed
        """
        body = self.build_job_object(name, fields)
        try:
            created = self.custom_objects.create_namespaced_custom_object(
                group=self.settings.k8s_job_resource_group,
                version=self.settings.k8s_job_resource_version,
                namespace=namespace,
                plural=self.settings.k8s_job_resource_plural,
                body=body
            )
        except ApiException as e:
            logger.debug(f"[K8S] API rejected job record {name}: HTTP {e.status}")
            return CallOutcome.failed(e)
        except Exception as e:
            # Transport errors (connection refused, TLS) are urllib3 exceptions
            return CallOutcome.failed(e)

        logger.debug(f"[K8S] Posted {self.settings.k8s_job_resource_kind} {name} in {namespace}")
        return CallOutcome.success(created)
