"""
Spark configuration keys and defaults understood by the driver launcher.
"""

# =============================================================================
# Configuration keys
# =============================================================================

SPARK_MASTER = "spark.master"
SPARK_APP_NAME = "spark.app.name"
SPARK_DEPLOY_MODE = "spark.submit.deployMode"
SPARK_EXECUTOR_JAR = "spark.executor.jar"
SPARK_EXECUTOR_INSTANCES = "spark.executor.instances"
SPARK_DYNAMIC_ALLOCATION_ENABLED = "spark.dynamicAllocation.enabled"
SPARK_SHUFFLE_SERVICE_ENABLED = "spark.shuffle.service.enabled"

SPARK_DRIVER_MEMORY = "spark.driver.memory"
SPARK_DRIVER_CORES = "spark.driver.cores"
SPARK_DRIVER_SUPERVISE = "spark.driver.supervise"
SPARK_DRIVER_EXTRA_JAVA_OPTIONS = "spark.driver.extraJavaOptions"
SPARK_DRIVER_EXTRA_CLASS_PATH = "spark.driver.extraClassPath"
SPARK_DRIVER_EXTRA_LIBRARY_PATH = "spark.driver.extraLibraryPath"

K8S_NAMESPACE = "spark.kubernetes.namespace"
K8S_SERVICE_ACCOUNT_NAME = "spark.kubernetes.serviceAccountName"
K8S_SPARK_IMAGE = "spark.kubernetes.sparkImage"
K8S_IMAGE_PULL_SECRET = "spark.kubernetes.imagePullSecret"

# Never forwarded to the driver: either redundant or re-injected explicitly
CONF_DENY_LIST = frozenset({
    SPARK_MASTER,
    SPARK_APP_NAME,
    SPARK_DEPLOY_MODE,
    SPARK_EXECUTOR_JAR,
    SPARK_DYNAMIC_ALLOCATION_ENABLED,
    SPARK_SHUFFLE_SERVICE_ENABLED,
})

# Consumed by the launcher itself
LAUNCHER_PRIVATE_KEYS = frozenset({
    K8S_NAMESPACE,
    K8S_SERVICE_ACCOUNT_NAME,
    K8S_SPARK_IMAGE,
    K8S_IMAGE_PULL_SECRET,
    SPARK_EXECUTOR_INSTANCES,
})

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_NAMESPACE = "default"
DEFAULT_SERVICE_ACCOUNT_NAME = "default"
DEFAULT_APP_NAME = "default"
DEFAULT_INSTANCES = 1
DEFAULT_DRIVER_MEMORY_MB = 1024
DEFAULT_DRIVER_CORES = 1.0
DEFAULT_SUPERVISE = False

KUBERNETES_MASTER_PREFIX = "k8s://"

# Pod environment variables read by the driver shim
ENV_JOB_OBJECT_NAME = "SPARK_JOB_OBJECT_NAME"
ENV_IMAGE_PULL_SECRET = "SPARK_IMAGE_PULLSECRET"

# =============================================================================
# Driver pod and service
# =============================================================================

# Entrypoint script and bootstrap jar baked into the Spark image
DRIVER_ENTRYPOINT = "/opt/driver.sh"
CLIENT_JAR_PATH = "/opt/spark/kubernetes/client.jar"

DRIVER_CONTAINER_NAME = "spark-driver"
DRIVER_RESTART_POLICY = "OnFailure"
DRIVER_IMAGE_PULL_POLICY = "Always"

DRIVER_UI_PORT = 4040
DRIVER_SERVICE_TYPE = "LoadBalancer"
