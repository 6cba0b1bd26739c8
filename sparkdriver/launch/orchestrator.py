"""
Driver Launch Orchestrator

Launches one Spark driver on Kubernetes and tears it down again.

Lifecycle:
    IDLE -> JOB_RECORD_POSTED -> DRIVER_POD_CREATED -> SERVICE_CREATED -> RUNNING
    any  -> STOPPED (stop)

Key rules:
1. Configuration problems (missing image, jar or main class, unparsable
   values) are raised before anything is sent to the control plane.
2. The job record is best-effort: a failed post is logged and the launch
   continues.
3. Pod and service creation are fatal on failure, with no retry and no
   rollback. A pod left behind by a failed service create is removed by
   stop(), which tolerates resources that do not exist.
4. Driver and service names are fixed when the orchestrator is built, so
   an orchestrator launches at most once. A second start() is refused.
"""

import logging
from enum import Enum
from typing import Mapping, Optional

from urllib3.exceptions import HTTPError

from ..config import get_settings
from ..constants import (
    CLIENT_JAR_PATH,
    DEFAULT_NAMESPACE,
    DEFAULT_SERVICE_ACCOUNT_NAME,
    K8S_IMAGE_PULL_SECRET,
    K8S_NAMESPACE,
    K8S_SERVICE_ACCOUNT_NAME,
    K8S_SPARK_IMAGE,
    KUBERNETES_MASTER_PREFIX,
    SPARK_MASTER,
)
from ..errors import LaunchStateError, MissingRequiredField, RemoteCallFailure
from ..kubernetes.client import KubernetesClient, resolve_api_server_url
from ..kubernetes.helpers import (
    create_driver_pod_manifest,
    create_driver_service_manifest,
    get_driver_labels,
)
from ..kubernetes.job_registry import JobState, SparkJobRegistry
from ..kubernetes.outcome import CallOutcome
from ..logging_config import configure_logging
from ..utils.resource_naming import (
    LaunchIdentities,
    NameGenerator,
    RandomNameGenerator,
    generate_driver_name,
    generate_job_name,
    generate_service_name,
)
from .conf_translator import (
    build_driver_args,
    conf_value,
    is_dynamic_allocation_enabled,
    resolve_instances,
)
from .description import DriverDescription, LaunchRequest, build_driver_description

logger = logging.getLogger(__name__)

# A failed job-record post does not abort the launch
JOB_RECORD_FAILURE_IS_FATAL = False


class LaunchState(str, Enum):
    IDLE = "idle"
    JOB_RECORD_POSTED = "job_record_posted"
    DRIVER_POD_CREATED = "driver_pod_created"
    SERVICE_CREATED = "service_created"
    RUNNING = "running"
    STOPPED = "stopped"

    def __str__(self) -> str:
        return self.value


class DriverLaunchOrchestrator:
    """
    Launches a Spark driver pod plus its UI service and job record.

    Not safe for concurrent use; call start() once per instance.
    """

    def __init__(
        self,
        conf: Mapping[str, object],
        k8s_client: Optional[KubernetesClient] = None,
        job_registry: Optional[SparkJobRegistry] = None,
        name_generator: Optional[NameGenerator] = None
    ):
        self.settings = get_settings()
        configure_logging(self.settings.log_level)
        self.conf = dict(conf)

        self.namespace = conf_value(self.conf, K8S_NAMESPACE, DEFAULT_NAMESPACE)
        self.service_account_name = conf_value(
            self.conf, K8S_SERVICE_ACCOUNT_NAME, DEFAULT_SERVICE_ACCOUNT_NAME
        )

        self.spark_image = conf_value(self.conf, K8S_SPARK_IMAGE)
        if not self.spark_image:
            raise MissingRequiredField(
                K8S_SPARK_IMAGE,
                f"Spark image is required: set {K8S_SPARK_IMAGE}"
            )

        self.image_pull_secret = conf_value(self.conf, K8S_IMAGE_PULL_SECRET, "")
        self.instances = resolve_instances(self.conf)
        self.dynamic_allocation_enabled = is_dynamic_allocation_enabled(self.conf)

        self.name_generator = name_generator or RandomNameGenerator()
        self.driver_name = generate_driver_name(self.name_generator)
        self.service_name = generate_service_name(self.name_generator)
        self.job_name: Optional[str] = None

        self._k8s_client = k8s_client
        self._job_registry = job_registry
        self.state = LaunchState.IDLE

        logger.info(
            f"[LAUNCHER] Orchestrator created - namespace: {self.namespace}, "
            f"driver: {self.driver_name}, service: {self.service_name}, "
            f"instances: {self.instances}, "
            f"dynamic allocation: {self.dynamic_allocation_enabled}"
        )

    @property
    def k8s_client(self) -> KubernetesClient:
        """Lazy load the Kubernetes client."""
        if self._k8s_client is None:
            self._k8s_client = KubernetesClient(
                api_server_url=resolve_api_server_url(conf_value(self.conf, SPARK_MASTER))
            )
        return self._k8s_client

    @property
    def job_registry(self) -> SparkJobRegistry:
        if self._job_registry is None:
            self._job_registry = SparkJobRegistry(self.k8s_client.custom_objects)
        return self._job_registry

    @property
    def identities(self) -> LaunchIdentities:
        return LaunchIdentities(
            driver_name=self.driver_name,
            service_name=self.service_name,
            job_name=self.job_name or ""
        )

    def resolve_master(self) -> str:
        """Master address handed to the driver: "k8s://<API server host>"."""
        return f"{KUBERNETES_MASTER_PREFIX}{self.k8s_client.get_master_host()}"

    # =========================================================================
    # LAUNCH
    # =========================================================================

    def start(self, request: LaunchRequest) -> LaunchIdentities:
        """
        Launch the driver.

        Args:
            request: Application jar, main class and program arguments

        Returns:
            Names of the job record, driver pod and service

        Raises:
            LaunchStateError: start() was already called on this orchestrator
            ConfigurationError: Missing or malformed launch parameters
            RemoteCallFailure: Pod or service creation failed
        """
        if self.state != LaunchState.IDLE:
            raise LaunchStateError(
                f"Orchestrator for driver {self.driver_name} already used "
                f"(state: {self.state}); create a new one per launch"
            )

        # Validate everything before the first remote call
        description = build_driver_description(self.conf, request)

        self.job_name = generate_job_name(self.name_generator, self.namespace)
        self._post_job_record(self.job_name)
        self.state = LaunchState.JOB_RECORD_POSTED

        self._start_driver(description)
        self.state = LaunchState.RUNNING

        logger.info(f"[LAUNCHER] ✅ Driver {self.driver_name} launched (job: {self.job_name})")
        return self.identities

    def _post_job_record(self, job_name: str) -> CallOutcome:
        fields = {
            "num-executors": self.instances,
            "image": self.spark_image,
            "state": JobState.QUEUED,
        }
        outcome = self.job_registry.create_job_object(job_name, fields, self.namespace)

        if outcome.ok:
            logger.info(f"[LAUNCHER] Job record {job_name} created")
        elif JOB_RECORD_FAILURE_IS_FATAL:
            raise RemoteCallFailure("post job record", job_name, reason=outcome.message)
        else:
            logger.warning(f"[LAUNCHER] Job record {job_name} not created ({outcome.message}), continuing")
        return outcome

    def _start_driver(self, description: DriverDescription) -> None:
        logger.info(f"[LAUNCHER] Starting driver {self.driver_name} in {self.namespace}")

        master = self.resolve_master()
        logger.info(f"[LAUNCHER] Driver master: {master}")

        submit_args = build_driver_args(
            conf=self.conf,
            app_resource=description.app_resource,
            main_class=description.command.main_class,
            app_args=description.command.arguments,
            master=master,
            memory_mb=description.memory_mb,
            instances=self.instances,
            namespace=self.namespace,
            image=self.spark_image,
            client_jar_path=CLIENT_JAR_PATH
        )

        pull_secret_present = self.k8s_client.is_secret_present(
            self.image_pull_secret, self.namespace
        )

        labels = get_driver_labels()
        pod = create_driver_pod_manifest(
            pod_name=self.driver_name,
            namespace=self.namespace,
            service_account_name=self.service_account_name,
            image=self.spark_image,
            args=submit_args,
            job_name=self.job_name,
            image_pull_secret=self.image_pull_secret if pull_secret_present else None,
            labels=labels
        )
        service = create_driver_service_manifest(
            service_name=self.service_name,
            namespace=self.namespace,
            labels=labels
        )

        self.k8s_client.create_pod(pod, self.namespace)
        self.state = LaunchState.DRIVER_POD_CREATED

        try:
            self.k8s_client.create_service(service, self.namespace)
        except RemoteCallFailure:
            logger.warning(
                f"[LAUNCHER] Service creation failed; driver pod {self.driver_name} "
                f"is left running until stop() is called"
            )
            raise
        self.state = LaunchState.SERVICE_CREATED

    # =========================================================================
    # TEARDOWN
    # =========================================================================

    def stop(self) -> None:
        """
        Delete the driver pod, then the service.

        Both deletes are always attempted, whatever start() managed to
        create. Missing resources are not an error. If a delete fails for
        another reason, the first failure is raised after both attempts.
        """
        logger.info(f"[LAUNCHER] Stopping driver {self.driver_name} in {self.namespace}")

        failures = []
        for operation, delete, name in (
            ("delete pod", self.k8s_client.delete_pod, self.driver_name),
            ("delete service", self.k8s_client.delete_service, self.service_name),
        ):
            try:
                delete(name, self.namespace)
            except RemoteCallFailure as e:
                logger.error(f"[LAUNCHER] {e}")
                failures.append(e)
            except HTTPError as e:
                failure = RemoteCallFailure(operation, name, reason=str(e))
                failure.__cause__ = e
                logger.error(f"[LAUNCHER] {failure}")
                failures.append(failure)

        self.state = LaunchState.STOPPED

        if failures:
            raise failures[0]
