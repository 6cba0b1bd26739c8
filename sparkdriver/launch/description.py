"""
Driver Description Builder

Validates the required launch fields and resolves every optional driver
setting against its default. The resulting DriverDescription is immutable
and built once per launch.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Mapping, Optional, Tuple

from ..constants import (
    DEFAULT_APP_NAME,
    DEFAULT_DRIVER_CORES,
    DEFAULT_DRIVER_MEMORY_MB,
    DEFAULT_SUPERVISE,
    SPARK_APP_NAME,
    SPARK_DRIVER_CORES,
    SPARK_DRIVER_EXTRA_CLASS_PATH,
    SPARK_DRIVER_EXTRA_JAVA_OPTIONS,
    SPARK_DRIVER_EXTRA_LIBRARY_PATH,
    SPARK_DRIVER_MEMORY,
    SPARK_DRIVER_SUPERVISE,
)
from ..errors import MissingRequiredField
from ..utils.conversions import (
    memory_string_to_mb,
    parse_bool,
    parse_float,
    split_command_string,
)
from .conf_translator import conf_value, spark_java_opts

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LaunchRequest:
    """What the submitter asked to run."""

    user_jar: Optional[str]
    user_class: Optional[str]
    user_args: Tuple[str, ...] = ()

    def __post_init__(self):
        # Accept any sequence but keep the stored value immutable
        object.__setattr__(self, "user_args", tuple(self.user_args or ()))


@dataclass(frozen=True)
class DriverCommand:
    main_class: str
    arguments: Tuple[str, ...]
    class_path_entries: Tuple[str, ...] = ()
    library_path_entries: Tuple[str, ...] = ()
    java_opts: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DriverDescription:
    name: str
    app_resource: str
    memory_mb: int
    cores: float
    supervise: bool
    command: DriverCommand
    submit_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


def _split_paths(value: Optional[str]) -> Tuple[str, ...]:
    if value is None:
        return ()
    return tuple(entry for entry in value.split(os.pathsep) if entry)


def _require(value: Optional[str], key: str, message: str) -> str:
    if not value:
        raise MissingRequiredField(key, message)
    return value


def build_driver_description(
    conf: Mapping[str, object],
    request: LaunchRequest
) -> DriverDescription:
    """
    Build the driver description for a launch request.

    Args:
        conf: Full Spark configuration
        request: Jar, main class and program arguments

    Returns:
        DriverDescription with every optional field resolved

    Raises:
        MissingRequiredField: Jar or main class is missing
        MalformedValue: An optional driver setting cannot be parsed
    """
    app_resource = _require(request.user_jar, "user_jar", "Application jar (user_jar) is missing")
    main_class = _require(request.user_class, "user_class", "Main class (user_class) is missing")

    name = conf_value(conf, SPARK_APP_NAME, DEFAULT_APP_NAME)

    raw_memory = conf_value(conf, SPARK_DRIVER_MEMORY)
    memory_mb = (
        memory_string_to_mb(SPARK_DRIVER_MEMORY, raw_memory)
        if raw_memory is not None else DEFAULT_DRIVER_MEMORY_MB
    )

    raw_cores = conf_value(conf, SPARK_DRIVER_CORES)
    cores = (
        parse_float(SPARK_DRIVER_CORES, raw_cores)
        if raw_cores is not None else DEFAULT_DRIVER_CORES
    )

    raw_supervise = conf_value(conf, SPARK_DRIVER_SUPERVISE)
    supervise = (
        parse_bool(SPARK_DRIVER_SUPERVISE, raw_supervise)
        if raw_supervise is not None else DEFAULT_SUPERVISE
    )

    raw_java_opts = conf_value(conf, SPARK_DRIVER_EXTRA_JAVA_OPTIONS)
    extra_java_opts: List[str] = (
        split_command_string(SPARK_DRIVER_EXTRA_JAVA_OPTIONS, raw_java_opts)
        if raw_java_opts is not None else []
    )

    command = DriverCommand(
        main_class=main_class,
        arguments=request.user_args,
        class_path_entries=_split_paths(conf_value(conf, SPARK_DRIVER_EXTRA_CLASS_PATH)),
        library_path_entries=_split_paths(conf_value(conf, SPARK_DRIVER_EXTRA_LIBRARY_PATH)),
        java_opts=tuple(spark_java_opts(conf) + extra_java_opts),
    )

    description = DriverDescription(
        name=name,
        app_resource=app_resource,
        memory_mb=memory_mb,
        cores=cores,
        supervise=supervise,
        command=command,
    )
    logger.debug(
        f"[LAUNCHER] Driver description for {name}: {memory_mb}MB, "
        f"{cores} cores, supervise={supervise}"
    )
    return description
