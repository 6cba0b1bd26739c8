"""
Unit tests for Spark configuration value parsing.
"""

import pytest

from sparkdriver.errors import MalformedValue
from sparkdriver.utils.conversions import (
    memory_string_to_mb,
    parse_bool,
    parse_float,
    parse_int,
    split_command_string,
)


@pytest.mark.unit
class TestMemoryStringToMb:

    @pytest.mark.parametrize("value,expected", [
        ("512m", 512),
        ("512mb", 512),
        ("2g", 2048),
        ("2G", 2048),
        ("1t", 1024 * 1024),
        ("1048576", 1),
        ("2048k", 2),
        ("1500k", 1),
    ])
    def test_converts_units(self, value, expected):
        assert memory_string_to_mb("spark.driver.memory", value) == expected

    @pytest.mark.parametrize("value", ["lots", "1.5g", "2x", ""])
    def test_rejects_malformed(self, value):
        with pytest.raises(MalformedValue) as exc_info:
            memory_string_to_mb("spark.driver.memory", value)

        assert exc_info.value.key == "spark.driver.memory"
        assert "spark.driver.memory" in str(exc_info.value)


@pytest.mark.unit
class TestScalarParsing:

    def test_parse_bool_is_case_insensitive(self):
        assert parse_bool("k", "TRUE") is True
        assert parse_bool("k", "false") is False

    def test_parse_bool_rejects_other_words(self):
        with pytest.raises(MalformedValue):
            parse_bool("spark.driver.supervise", "yes")

    def test_parse_float(self):
        assert parse_float("spark.driver.cores", "2.5") == 2.5

    def test_parse_float_names_key(self):
        with pytest.raises(MalformedValue, match="spark.driver.cores"):
            parse_float("spark.driver.cores", "many")

    def test_parse_int_rejects_float(self):
        with pytest.raises(MalformedValue):
            parse_int("spark.executor.instances", "1.5")

    def test_split_command_string_respects_quotes(self):
        assert split_command_string("k", '-Da=1 -Db="x y"') == ["-Da=1", "-Db=x y"]

    def test_split_command_string_unbalanced_quote(self):
        with pytest.raises(MalformedValue):
            split_command_string("spark.driver.extraJavaOptions", '-Da="oops')
