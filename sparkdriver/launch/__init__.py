"""
Launch Module

Pure configuration handling plus the orchestrator that drives a launch:
- conf_translator: Spark conf -> ordered driver entrypoint arguments
- description: LaunchRequest + conf -> immutable DriverDescription
- orchestrator: DriverLaunchOrchestrator (start / stop)
"""

from .conf_translator import (
    build_driver_args,
    forwardable_conf,
    is_dynamic_allocation_enabled,
    resolve_instances,
    spark_java_opts,
)
from .description import (
    DriverCommand,
    DriverDescription,
    LaunchRequest,
    build_driver_description,
)
from .orchestrator import DriverLaunchOrchestrator, LaunchState

__all__ = [
    # Configuration
    "build_driver_args",
    "forwardable_conf",
    "is_dynamic_allocation_enabled",
    "resolve_instances",
    "spark_java_opts",
    # Description
    "DriverCommand",
    "DriverDescription",
    "LaunchRequest",
    "build_driver_description",
    # Orchestrator
    "DriverLaunchOrchestrator",
    "LaunchState",
]
