"""Tests for reading intersect3d configuration"""

from expression import result
from hypothesis import given, strategies as st
import pytest

from intersect3d import DEFAULT_PRECISION, ConfigurationValueError
from intersect3d.configuration import PRECISION_KEY, get_precision, read_configuration_file


@given(precision=st.floats(min_value=0, exclude_min=True, allow_infinity=False))
def test_positive_finite_precision__is_read(precision):
    match get_precision({PRECISION_KEY: precision}):
        case result.Result(tag="ok", ok=observed):
            assert observed == precision
        case result.Result(tag="error", error=err):
            pytest.fail(f"Failed to get precision: {err}")


@pytest.mark.parametrize("conf_data", [{}, {PRECISION_KEY: None}, {"other": 1e-3}])
def test_absent_precision__is_default(conf_data):
    match get_precision(conf_data):
        case result.Result(tag="ok", ok=observed):
            assert observed == DEFAULT_PRECISION
        case unexpected:
            pytest.fail(f"Expected default precision, but got: {unexpected}")


@pytest.mark.parametrize(["value", "expected_message"], [
    (0, "Precision ('precision') must be finite and positive: 0"),
    (-1e-6, "Precision ('precision') must be finite and positive: -1e-06"),
    (float("inf"), "Precision ('precision') must be finite and positive: inf"),
    ("1e-6", "Precision ('precision') has value of illegal type: str"),
    (True, "Precision ('precision') has value of illegal type: bool"),
    ([1e-6], "Precision ('precision') has value of illegal type: list"),
    ])
def test_illegal_precision__is_configuration_error(value, expected_message):
    match get_precision({PRECISION_KEY: value}):
        case result.Result(tag="error", error=err):
            assert isinstance(err, ConfigurationValueError)
            assert str(err) == expected_message
        case unexpected:
            pytest.fail(f"Expected configuration error, but got: {unexpected}")


def test_configuration_file__is_parsed(write_config_file):
    conf_data = read_configuration_file(write_config_file(f"{PRECISION_KEY}: 1.0e-3\n"))
    assert conf_data == {PRECISION_KEY: 1e-3}


def test_empty_configuration_file__is_empty_mapping(write_config_file):
    assert read_configuration_file(write_config_file("")) == {}


def test_non_mapping_configuration_file__is_error(write_config_file):
    with pytest.raises(ConfigurationValueError):
        read_configuration_file(write_config_file("- 1.0e-3\n"))
