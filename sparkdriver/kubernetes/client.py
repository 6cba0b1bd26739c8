"""
Kubernetes Client for Launching Spark Drivers

Thin synchronous wrapper over the official kubernetes client. Every call
blocks on the caller's thread and relies on the transport's default
timeouts.

Create and delete failures raise RemoteCallFailure, whether the API
rejected the call or the transport failed. Deletes tolerate 404 so that
teardown can be repeated safely. Secret lookups never raise; they return
a CallOutcome.
"""

from kubernetes import client, config
from kubernetes.client.rest import ApiException
import logging
from typing import Optional
from urllib.parse import urlparse

from urllib3.exceptions import HTTPError

from ..config import get_settings
from ..constants import KUBERNETES_MASTER_PREFIX
from ..errors import RemoteCallFailure
from .outcome import CallOutcome, CallStatus

logger = logging.getLogger(__name__)


def resolve_api_server_url(spark_master: Optional[str]) -> Optional[str]:
    """
    Derive the API server URL from a "k8s://..." Spark master.

    Args:
        spark_master: Value of spark.master, e.g. "k8s://https://10.0.0.1:6443"

    Returns:
        URL to connect to, or None to keep the loaded configuration
        (unset master, or the "default" host)

    Examples:
        >>> resolve_api_server_url("k8s://https://10.0.0.1:6443")
        "https://10.0.0.1:6443"
        >>> resolve_api_server_url("k8s://kube.example.com")
        "https://kube.example.com"
        >>> resolve_api_server_url("k8s://default")
        None
    """
    if not spark_master:
        return None

    address = spark_master
    if address.startswith(KUBERNETES_MASTER_PREFIX):
        address = address[len(KUBERNETES_MASTER_PREFIX):]

    if "://" not in address:
        address = f"https://{address}"

    host = urlparse(address).hostname
    if not host or host == "default":
        return None
    return address


class KubernetesClient:
    """
    Pods, services and secrets in the target cluster.

    The API clients can be injected (tests); otherwise in-cluster
    configuration is tried first with kubeconfig as fallback.
    """

    def __init__(
        self,
        api_server_url: Optional[str] = None,
        api_client: Optional[client.ApiClient] = None
    ):
        self.settings = get_settings()

        if api_client is None:
            api_client = self._load_api_client(api_server_url)

        self.api_client = api_client
        self.core_v1 = client.CoreV1Api(api_client)
        self.custom_objects = client.CustomObjectsApi(api_client)

        logger.info(f"Kubernetes client initialized - API server: {self.api_client.configuration.host}")

    def _load_api_client(self, api_server_url: Optional[str]) -> client.ApiClient:
        configuration = client.Configuration()
        try:
            # Try in-cluster config first (driver launched from inside the cluster)
            config.load_incluster_config(client_configuration=configuration)
            logger.info("Loaded in-cluster Kubernetes configuration")
        except config.ConfigException:
            try:
                config.load_kube_config(
                    config_file=self.settings.k8s_kubeconfig_path or None,
                    context=self.settings.k8s_kubeconfig_context or None,
                    client_configuration=configuration
                )
                logger.info("Loaded kubeconfig")
            except config.ConfigException as e:
                logger.error(f"Failed to load Kubernetes config: {e}")
                raise RuntimeError("Cannot load Kubernetes configuration") from e

        if api_server_url:
            configuration.host = api_server_url
            logger.info(f"[K8S] Using API server override: {api_server_url}")

        return client.ApiClient(configuration)

    def get_master_host(self) -> str:
        """Host name of the API server this client talks to."""
        return urlparse(self.api_client.configuration.host).hostname or ""

    # =========================================================================
    # POD MANAGEMENT
    # =========================================================================

    def create_pod(self, pod: client.V1Pod, namespace: str) -> client.V1Pod:
        """Create a Pod. No retry, no update-on-conflict."""
        pod_name = pod.metadata.name
        try:
            created = self.core_v1.create_namespaced_pod(
                namespace=namespace,
                body=pod
            )
            logger.info(f"[K8S] ✅ Created pod: {pod_name}")
            return created
        except ApiException as e:
            logger.error(f"[K8S] Failed to create pod {pod_name}: {e.reason}")
            raise RemoteCallFailure("create pod", pod_name, e.status, e.reason) from e
        except HTTPError as e:
            logger.error(f"[K8S] Failed to create pod {pod_name}: {e}")
            raise RemoteCallFailure("create pod", pod_name, reason=str(e)) from e

    def delete_pod(self, name: str, namespace: str) -> bool:
        """Delete a Pod. Returns False if it did not exist."""
        try:
            self.core_v1.delete_namespaced_pod(
                name=name,
                namespace=namespace
            )
            logger.info(f"[K8S] Deleted pod: {name}")
            return True
        except ApiException as e:
            if e.status == 404:
                logger.debug(f"[K8S] Pod {name} not found, nothing to delete")
                return False
            raise RemoteCallFailure("delete pod", name, e.status, e.reason) from e
        except HTTPError as e:
            raise RemoteCallFailure("delete pod", name, reason=str(e)) from e

    # =========================================================================
    # SERVICE MANAGEMENT
    # =========================================================================

    def create_service(self, service: client.V1Service, namespace: str) -> client.V1Service:
        """Create a Service. No retry, no update-on-conflict."""
        service_name = service.metadata.name
        try:
            created = self.core_v1.create_namespaced_service(
                namespace=namespace,
                body=service
            )
            logger.info(f"[K8S] ✅ Created service: {service_name}")
            return created
        except ApiException as e:
            logger.error(f"[K8S] Failed to create service {service_name}: {e.reason}")
            raise RemoteCallFailure("create service", service_name, e.status, e.reason) from e
        except HTTPError as e:
            logger.error(f"[K8S] Failed to create service {service_name}: {e}")
            raise RemoteCallFailure("create service", service_name, reason=str(e)) from e

    def delete_service(self, name: str, namespace: str) -> bool:
        """Delete a Service. Returns False if it did not exist."""
        try:
            self.core_v1.delete_namespaced_service(
                name=name,
                namespace=namespace
            )
            logger.info(f"[K8S] Deleted service: {name}")
            return True
        except ApiException as e:
            if e.status == 404:
                logger.debug(f"[K8S] Service {name} not found, nothing to delete")
                return False
            raise RemoteCallFailure("delete service", name, e.status, e.reason) from e
        except HTTPError as e:
            raise RemoteCallFailure("delete service", name, reason=str(e)) from e

    # =========================================================================
    # SECRETS
    # =========================================================================

    def lookup_secret(self, name: str, namespace: str) -> CallOutcome:
        """Read a Secret, reporting found / not found / error."""
        try:
            secret = self.core_v1.read_namespaced_secret(
                name=name,
                namespace=namespace
            )
        except ApiException as e:
            if e.status == 404:
                return CallOutcome.not_found(e)
            return CallOutcome.failed(e)
        except HTTPError as e:
            return CallOutcome.failed(e)

        if secret is None:
            return CallOutcome.not_found()
        return CallOutcome.success(secret)

    def is_secret_present(self, name: str, namespace: str) -> bool:
        """
        Check whether a Secret exists.

        An empty name means the feature is not configured and returns False
        without calling the API. A failed lookup (permissions, network)
        also returns False, so it cannot be told apart from a missing
        secret; it is logged as a warning.
        """
        if not name:
            return False

        outcome = self.lookup_secret(name, namespace)
        if outcome.ok:
            return True

        if outcome.status == CallStatus.ERROR:
            logger.warning(
                f"[K8S] Lookup of secret {name} in {namespace} failed "
                f"({outcome.message}); treating it as absent"
            )
        else:
            logger.info(f"[K8S] Secret {name} not found in {namespace}")
        return False
