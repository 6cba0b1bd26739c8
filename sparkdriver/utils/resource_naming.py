"""
Resource naming utilities for driver launches.

Names follow the pattern "spark-<kind>-<hash>", e.g. "spark-driver-k3x8n":
- Human-readable (kind prefix)
- DNS-1123 compliant (lowercase alphanumeric + hyphens)
- Random suffix, NOT checked for collisions

Collision probability (birthday paradox, 36^5 ~ 60M names):
    - ~1% after roughly 1,100 names in the same namespace
"""

from dataclasses import dataclass
from typing import Protocol

from nanoid import generate

NAME_ALPHABET = '0123456789abcdefghijklmnopqrstuvwxyz'
NAME_HASH_LENGTH = 5


def generate_short_hash(length: int = NAME_HASH_LENGTH) -> str:
    """
    Generate a short random hash from the lowercase alphanumeric alphabet.

    Args:
        length: Length of hash (default 5)

    Returns:
        Random hash string (e.g., "k3x8n")
    """
    return generate(NAME_ALPHABET, length)


def generate_resource_name(kind: str, hash_length: int = NAME_HASH_LENGTH) -> str:
    """
    Generate a resource name: "spark-<kind>-<hash>"

    Examples:
        "driver" -> "spark-driver-k3x8n"
        "svc" -> "spark-svc-a5b3c"
        "job-default" -> "spark-job-default-d7f9e"

    Args:
        kind: Resource kind, may itself contain hyphens
        hash_length: Length of random suffix (default 5)

    Returns:
        Lower-cased resource name
    """
    return f"spark-{kind}-{generate_short_hash(hash_length)}".lower()


class NameGenerator(Protocol):
    """Source of resource names; swap in a deterministic one for tests."""

    def generate(self, kind: str) -> str:
        ...


class RandomNameGenerator:
    """Production name generator backed by nanoid."""

    def __init__(self, hash_length: int = NAME_HASH_LENGTH):
        self.hash_length = hash_length

    def generate(self, kind: str) -> str:
        return generate_resource_name(kind, self.hash_length)


@dataclass(frozen=True)
class LaunchIdentities:
    """Names of everything a single launch creates."""

    driver_name: str
    service_name: str
    job_name: str


def generate_driver_name(generator: NameGenerator) -> str:
    return generator.generate("driver")


def generate_service_name(generator: NameGenerator) -> str:
    return generator.generate("svc")


def generate_job_name(generator: NameGenerator, namespace: str) -> str:
    return generator.generate(f"job-{namespace}")

