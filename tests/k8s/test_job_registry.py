"""
Unit tests for SparkJob records.
"""

import pytest
from unittest.mock import Mock

pytest.importorskip("kubernetes")

from kubernetes.client.rest import ApiException
from sparkdriver.kubernetes.job_registry import JobState, SparkJobRegistry
from sparkdriver.kubernetes.outcome import CallStatus


@pytest.fixture
def registry():
    return SparkJobRegistry(Mock())


@pytest.mark.unit
@pytest.mark.kubernetes
class TestSparkJobRegistry:

    def test_posts_custom_object(self, registry):
        fields = {"num-executors": 2, "image": "img:1", "state": JobState.QUEUED}

        outcome = registry.create_job_object("spark-job-ns1-abcde", fields, "ns1")

        assert outcome.ok
        kwargs = registry.custom_objects.create_namespaced_custom_object.call_args.kwargs
        assert kwargs["group"] == "apache.io"
        assert kwargs["version"] == "v1"
        assert kwargs["plural"] == "sparkjobs"
        assert kwargs["namespace"] == "ns1"
        assert kwargs["body"] == {
            "apiVersion": "apache.io/v1",
            "kind": "SparkJob",
            "metadata": {"name": "spark-job-ns1-abcde"},
            "spec": {"num-executors": 2, "image": "img:1", "state": "QUEUED"},
        }

    def test_api_error_is_reported_not_raised(self, registry):
        registry.custom_objects.create_namespaced_custom_object.side_effect = ApiException(
            status=404, reason="the server could not find the requested resource"
        )

        outcome = registry.create_job_object("spark-job-ns1-abcde", {}, "ns1")

        assert outcome.status == CallStatus.ERROR
        assert "could not find" in outcome.message

    def test_transport_error_is_reported_not_raised(self, registry):
        registry.custom_objects.create_namespaced_custom_object.side_effect = ConnectionError("refused")

        outcome = registry.create_job_object("spark-job-ns1-abcde", {}, "ns1")

        assert outcome.status == CallStatus.ERROR
        assert outcome.message == "refused"

    def test_job_state_values(self):
        assert str(JobState.QUEUED) == "QUEUED"
        assert JobState("RUNNING") is JobState.RUNNING
