"""
Unit tests for resource name generation.
"""

import re

import pytest

from sparkdriver.utils.resource_naming import (
    RandomNameGenerator,
    generate_driver_name,
    generate_job_name,
    generate_resource_name,
    generate_service_name,
    generate_short_hash,
)


@pytest.mark.unit
class TestResourceNaming:

    def test_name_format(self):
        for _ in range(50):
            name = generate_resource_name("driver")
            assert re.fullmatch(r"spark-driver-[0-9a-z]{5}", name)

    def test_kind_is_lower_cased(self):
        name = generate_resource_name("Job-MyNamespace")
        assert name == name.lower()
        assert name.startswith("spark-job-mynamespace-")

    def test_short_hash_length(self):
        assert len(generate_short_hash()) == 5
        assert len(generate_short_hash(8)) == 8

    def test_random_generator(self):
        assert re.fullmatch(r"spark-svc-[0-9a-z]{5}", RandomNameGenerator().generate("svc"))

    def test_launch_names_with_injected_generator(self, name_generator):
        assert generate_driver_name(name_generator) == "spark-driver-00001"
        assert generate_service_name(name_generator) == "spark-svc-00002"
        assert generate_job_name(name_generator, "ns1") == "spark-job-ns1-00003"

    def test_launch_names_with_random_generator(self):
        generator = RandomNameGenerator()

        assert re.fullmatch(r"spark-driver-[0-9a-z]{5}", generate_driver_name(generator))
        assert re.fullmatch(r"spark-svc-[0-9a-z]{5}", generate_service_name(generator))
        assert re.fullmatch(r"spark-job-default-[0-9a-z]{5}", generate_job_name(generator, "default"))
