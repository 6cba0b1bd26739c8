from pydantic_settings import BaseSettings
from functools import lru_cache

class LauncherSettings(BaseSettings):
    # Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = "INFO"

    # ==========================================================================
    # Kubernetes Client Configuration
    # ==========================================================================
    # In-cluster config is tried first; this kubeconfig is the fallback
    # Empty string means the default ~/.kube/config location
    k8s_kubeconfig_path: str = ""
    k8s_kubeconfig_context: str = ""

    # ==========================================================================
    # Job Record (custom resource) Configuration
    # ==========================================================================
    k8s_job_resource_group: str = "apache.io"
    k8s_job_resource_version: str = "v1"
    k8s_job_resource_plural: str = "sparkjobs"
    k8s_job_resource_kind: str = "SparkJob"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields from .env file
        case_sensitive = False  # Allow lowercase env vars to match uppercase field names

@lru_cache()
def get_settings():
    return LauncherSettings()
