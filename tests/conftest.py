"""
Test configuration and fixtures for pytest.

Fixtures include: deterministic name generators, a minimal Spark
configuration, a launch request, and call-recording stand-ins for the
Kubernetes client and job registry.
"""

import sys
from pathlib import Path
import pytest
from unittest.mock import Mock

# Add the project root to sys.path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))


def pytest_configure(config):
    """
    Pytest hook called before test collection.
    Registers custom markers.
    """
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "kubernetes: mark test as exercising Kubernetes models or clients")


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings fresh."""
    from sparkdriver.config import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class SequentialNameGenerator:
    """Deterministic names: spark-<kind>-00001, spark-<kind>-00002, ..."""

    def __init__(self):
        self.calls = []

    def generate(self, kind: str) -> str:
        self.calls.append(kind)
        return f"spark-{kind}-{len(self.calls):05d}"


@pytest.fixture
def name_generator():
    return SequentialNameGenerator()


@pytest.fixture
def spark_conf():
    """Smallest configuration a launch accepts."""
    return {
        "spark.kubernetes.sparkImage": "img:1",
        "spark.kubernetes.namespace": "ns1",
    }


@pytest.fixture
def launch_request():
    from sparkdriver.launch.description import LaunchRequest
    return LaunchRequest(user_jar="app.jar", user_class="Main", user_args=["a", "b"])


@pytest.fixture
def mock_k8s_client():
    """Stand-in for KubernetesClient that records every call."""
    k8s = Mock()
    k8s.get_master_host.return_value = "kube.example.com"
    k8s.is_secret_present.return_value = False
    k8s.delete_pod.return_value = True
    k8s.delete_service.return_value = True
    return k8s


@pytest.fixture
def mock_job_registry():
    from sparkdriver.kubernetes.outcome import CallOutcome
    registry = Mock()
    registry.create_job_object.return_value = CallOutcome.success({})
    return registry
