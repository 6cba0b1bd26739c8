"""
Spark Configuration Translator

Turns the flat Spark configuration mapping into the argument list consumed
by the driver image's entrypoint script. The entrypoint reads fixed
positional flags first and the bootstrap jar plus program arguments last,
so the ORDER of the returned list is part of the contract:

    1. fixed block        (jar, --class, --master, memory, executor conf)
    2. pass-through block (--conf=key=value for every forwardable key)
    3. dynamic allocation (only when spark.dynamicAllocation.enabled=true)
    4. trailing pair      (bootstrap jar, space-joined program arguments)
"""

from typing import Dict, List, Mapping, Sequence

from ..constants import (
    CONF_DENY_LIST,
    DEFAULT_INSTANCES,
    K8S_NAMESPACE,
    K8S_SPARK_IMAGE,
    LAUNCHER_PRIVATE_KEYS,
    SPARK_DYNAMIC_ALLOCATION_ENABLED,
    SPARK_EXECUTOR_INSTANCES,
    SPARK_EXECUTOR_JAR,
    SPARK_SHUFFLE_SERVICE_ENABLED,
)
from ..utils.conversions import parse_bool, parse_int


def conf_value(conf: Mapping[str, object], key: str, default: str = None):
    """Read a configuration value as a string, or default when unset."""
    value = conf.get(key)
    if value is None:
        return default
    return str(value)


def is_forwardable(key: str) -> bool:
    return key not in CONF_DENY_LIST and key not in LAUNCHER_PRIVATE_KEYS


def forwardable_conf(conf: Mapping[str, object]) -> Dict[str, str]:
    """Subset of the configuration that may be passed to the driver, sorted by key."""
    return {
        key: str(conf[key])
        for key in sorted(conf)
        if is_forwardable(key) and conf[key] is not None
    }


def spark_java_opts(conf: Mapping[str, object]) -> List[str]:
    """Render forwardable configuration as JVM system properties."""
    return [f"-D{key}={value}" for key, value in forwardable_conf(conf).items()]


def resolve_instances(conf: Mapping[str, object]) -> int:
    raw = conf_value(conf, SPARK_EXECUTOR_INSTANCES)
    if raw is None:
        return DEFAULT_INSTANCES
    return parse_int(SPARK_EXECUTOR_INSTANCES, raw)


def is_dynamic_allocation_enabled(conf: Mapping[str, object]) -> bool:
    raw = conf_value(conf, SPARK_DYNAMIC_ALLOCATION_ENABLED)
    if raw is None:
        return False
    return parse_bool(SPARK_DYNAMIC_ALLOCATION_ENABLED, raw)


def build_driver_args(
    conf: Mapping[str, object],
    app_resource: str,
    main_class: str,
    app_args: Sequence[str],
    master: str,
    memory_mb: int,
    instances: int,
    namespace: str,
    image: str,
    client_jar_path: str
) -> List[str]:
    """
    Build the ordered argument list for the driver entrypoint.

    Args:
        conf: Full Spark configuration
        app_resource: Application jar location
        main_class: Application main class
        app_args: Program arguments, joined into the final element
        master: Resolved master address ("k8s://<host>")
        memory_mb: Resolved driver memory in MB
        instances: Executor instance count
        namespace: Target namespace
        image: Spark container image
        client_jar_path: Bootstrap jar inside the image

    Returns:
        Argument list in entrypoint order
    """
    submit_args = [
        app_resource,
        f"--class={main_class}",
        f"--master={master}",
        f"--executor-memory={memory_mb}",
        f"--conf={SPARK_EXECUTOR_JAR}={app_resource}",
        f"--conf={SPARK_EXECUTOR_INSTANCES}={instances}",
        f"--conf={K8S_NAMESPACE}={namespace}",
        f"--conf={K8S_SPARK_IMAGE}={image}",
    ]

    submit_args.extend(
        f"--conf={key}={value}" for key, value in forwardable_conf(conf).items()
    )

    if is_dynamic_allocation_enabled(conf):
        submit_args.extend([
            f"--conf {SPARK_DYNAMIC_ALLOCATION_ENABLED}=true",
            f"--conf {SPARK_SHUFFLE_SERVICE_ENABLED}=true",
        ])

    # Entrypoint reads these two positionally after all flags
    submit_args.extend([client_jar_path, " ".join(app_args)])

    return submit_args
