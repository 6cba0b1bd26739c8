"""
Unit tests for the driver pod and service manifests.
"""

import pytest

pytest.importorskip("kubernetes")

from kubernetes import client
from sparkdriver.kubernetes.helpers import (
    create_driver_env,
    create_driver_pod_manifest,
    create_driver_service_manifest,
    get_driver_labels,
)


def _pod(**overrides):
    params = dict(
        pod_name="spark-driver-abcde",
        namespace="ns1",
        service_account_name="spark",
        image="img:1",
        args=["app.jar", "--class=Main"],
        job_name="spark-job-ns1-fghij",
    )
    params.update(overrides)
    return create_driver_pod_manifest(**params)


@pytest.mark.unit
@pytest.mark.kubernetes
class TestDriverPodManifest:

    def test_creates_valid_pod(self):
        pod = _pod()

        assert isinstance(pod, client.V1Pod)
        assert pod.metadata.name == "spark-driver-abcde"
        assert pod.metadata.namespace == "ns1"
        assert pod.metadata.labels == {"type": "spark-driver"}
        assert pod.spec.restart_policy == "OnFailure"
        assert pod.spec.service_account == "spark"

    def test_single_driver_container(self):
        pod = _pod()

        assert len(pod.spec.containers) == 1
        container = pod.spec.containers[0]
        assert container.name == "spark-driver"
        assert container.image == "img:1"
        assert container.image_pull_policy == "Always"
        assert container.command == ["/opt/driver.sh"]
        assert container.args == ["app.jar", "--class=Main"]

    def test_no_pull_secret_section_by_default(self):
        pod = _pod()

        assert pod.spec.image_pull_secrets is None
        env_names = [e.name for e in pod.spec.containers[0].env]
        assert env_names == ["SPARK_JOB_OBJECT_NAME"]

    def test_pull_secret_section_and_env(self):
        pod = _pod(image_pull_secret="regcred")

        assert pod.spec.image_pull_secrets == [client.V1LocalObjectReference(name="regcred")]
        env = {e.name: e.value for e in pod.spec.containers[0].env}
        assert env == {
            "SPARK_JOB_OBJECT_NAME": "spark-job-ns1-fghij",
            "SPARK_IMAGE_PULLSECRET": "regcred",
        }

    def test_no_env_when_nothing_to_pass(self):
        pod = _pod(job_name=None)

        assert pod.spec.containers[0].env is None
        assert create_driver_env() == []


@pytest.mark.unit
@pytest.mark.kubernetes
class TestDriverServiceManifest:

    def test_load_balancer_on_ui_port(self):
        service = create_driver_service_manifest("spark-svc-abcde", "ns1")

        assert isinstance(service, client.V1Service)
        assert service.metadata.name == "spark-svc-abcde"
        assert service.metadata.namespace == "ns1"
        assert service.spec.type == "LoadBalancer"
        assert len(service.spec.ports) == 1
        assert service.spec.ports[0].port == 4040
        assert service.spec.ports[0].target_port == 4040

    def test_selector_matches_pod_labels(self):
        pod = _pod()
        service = create_driver_service_manifest("spark-svc-abcde", "ns1")

        assert service.spec.selector == pod.metadata.labels
        assert service.metadata.labels == pod.metadata.labels
        assert service.spec.selector == get_driver_labels()

    def test_labels_are_copied(self):
        labels = get_driver_labels()
        service = create_driver_service_manifest("svc", "ns1", labels=labels)

        service.spec.selector["extra"] = "x"
        assert "extra" not in labels
        assert "extra" not in service.metadata.labels


@pytest.mark.unit
@pytest.mark.kubernetes
class TestFixedDriverShape:

    def test_environment_does_not_change_pod_or_service(self, monkeypatch):
        monkeypatch.setenv("K8S_DRIVER_IMAGE_PULL_POLICY", "IfNotPresent")
        monkeypatch.setenv("K8S_DRIVER_ENTRYPOINT", "/bin/sh")
        monkeypatch.setenv("K8S_DRIVER_RESTART_POLICY", "Never")
        monkeypatch.setenv("K8S_DRIVER_SERVICE_TYPE", "ClusterIP")
        monkeypatch.setenv("K8S_DRIVER_UI_PORT", "8080")

        pod = _pod()
        service = create_driver_service_manifest("spark-svc-abcde", "ns1")

        container = pod.spec.containers[0]
        assert container.image_pull_policy == "Always"
        assert container.command == ["/opt/driver.sh"]
        assert pod.spec.restart_policy == "OnFailure"
        assert service.spec.type == "LoadBalancer"
        assert service.spec.ports[0].port == 4040
