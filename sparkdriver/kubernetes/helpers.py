"""
Kubernetes Manifests for the Spark Driver

Builds the two resources a launch creates:
- Driver Pod: single container running the image's driver shim
- Driver Service: LoadBalancer exposing the Spark UI port

Both carry the same labels so the service selector resolves to exactly
the launched driver pod.
"""

from kubernetes import client
from typing import Dict, List, Optional, Sequence

from ..constants import (
    DRIVER_CONTAINER_NAME,
    DRIVER_ENTRYPOINT,
    DRIVER_IMAGE_PULL_POLICY,
    DRIVER_RESTART_POLICY,
    DRIVER_SERVICE_TYPE,
    DRIVER_UI_PORT,
    ENV_IMAGE_PULL_SECRET,
    ENV_JOB_OBJECT_NAME,
)

DRIVER_LABEL_KEY = "type"
DRIVER_LABEL_VALUE = "spark-driver"


# =============================================================================
# Labels
# =============================================================================

def get_driver_labels() -> Dict[str, str]:
    """Labels shared by the driver pod and its service."""
    return {DRIVER_LABEL_KEY: DRIVER_LABEL_VALUE}


# =============================================================================
# Driver Pod
# =============================================================================

def create_driver_env(
    job_name: Optional[str] = None,
    image_pull_secret: Optional[str] = None
) -> List[client.V1EnvVar]:
    """Environment handed to the driver shim."""
    env = []
    if job_name:
        env.append(client.V1EnvVar(name=ENV_JOB_OBJECT_NAME, value=job_name))
    if image_pull_secret:
        env.append(client.V1EnvVar(name=ENV_IMAGE_PULL_SECRET, value=image_pull_secret))
    return env


def create_driver_pod_manifest(
    pod_name: str,
    namespace: str,
    service_account_name: str,
    image: str,
    args: Sequence[str],
    job_name: Optional[str] = None,
    image_pull_secret: Optional[str] = None,
    labels: Optional[Dict[str, str]] = None
) -> client.V1Pod:
    """
    Create the driver Pod manifest.

    Args:
        pod_name: Driver pod name
        namespace: Kubernetes namespace
        service_account_name: Service account the driver runs as
        image: Spark image (must ship /opt/driver.sh)
        args: Ordered entrypoint arguments
        job_name: Job record name, exported to the driver
        image_pull_secret: Pull secret name; only pass it if the secret exists
        labels: Pod labels (default: driver labels)

    Returns:
        V1Pod manifest
    """
    labels = labels or get_driver_labels()

    driver_container = client.V1Container(
        name=DRIVER_CONTAINER_NAME,
        image=image,
        image_pull_policy=DRIVER_IMAGE_PULL_POLICY,
        command=[DRIVER_ENTRYPOINT],
        args=list(args),
        env=create_driver_env(job_name, image_pull_secret) or None
    )

    pod_spec = client.V1PodSpec(
        restart_policy=DRIVER_RESTART_POLICY,
        service_account=service_account_name,
        containers=[driver_container]
    )

    # Add image pull secret if it exists in the namespace
    if image_pull_secret:
        pod_spec.image_pull_secrets = [
            client.V1LocalObjectReference(name=image_pull_secret)
        ]

    return client.V1Pod(
        metadata=client.V1ObjectMeta(
            name=pod_name,
            namespace=namespace,
            labels=dict(labels)
        ),
        spec=pod_spec
    )


# =============================================================================
# Driver Service
# =============================================================================

def create_driver_service_manifest(
    service_name: str,
    namespace: str,
    labels: Optional[Dict[str, str]] = None,
    port: Optional[int] = None
) -> client.V1Service:
    """
    Create the Service exposing the driver UI.

    Args:
        service_name: Service name
        namespace: Kubernetes namespace
        labels: Labels and selector (default: driver labels)
        port: Port mapped 1:1 to the container (default: 4040)

    Returns:
        V1Service manifest
    """
    labels = labels or get_driver_labels()
    port = port or DRIVER_UI_PORT

    return client.V1Service(
        metadata=client.V1ObjectMeta(
            name=service_name,
            namespace=namespace,
            labels=dict(labels)
        ),
        spec=client.V1ServiceSpec(
            selector=dict(labels),
            ports=[
                client.V1ServicePort(
                    port=port,
                    target_port=port,
                    protocol="TCP"
                )
            ],
            type=DRIVER_SERVICE_TYPE
        )
    )
