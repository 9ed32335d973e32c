import pytest

from SGEN.SMM.errors import (
    SampleGenError, InvalidDepth, DepthTooLarge, InvalidColumnCount,
)
from SGEN.SGM.config import SampleConfig, validate, describe


def test_defaults():
    config = SampleConfig(depth=8, samples=16)
    assert config.cols == 1
    assert config.hex is False
    assert config.verbose is False


@pytest.mark.parametrize("depth", [1, 8, 16, 32])
def test_valid_depths_pass_through(depth):
    config = SampleConfig(depth=depth, samples=4)
    assert validate(config) is config


@pytest.mark.parametrize("config, error, code", [
    (SampleConfig(depth=0, samples=4), InvalidDepth, 1),
    (SampleConfig(depth=33, samples=4), DepthTooLarge, 2),
    (SampleConfig(depth=255, samples=4), DepthTooLarge, 2),
    (SampleConfig(depth=8, samples=4, cols=0), InvalidColumnCount, 3),
])
def test_invalid_configs(config, error, code):
    with pytest.raises(error) as info:
        validate(config)
    assert isinstance(info.value, SampleGenError)
    assert info.value.exit_code == code


def test_depth_errors_win_over_column_errors():
    with pytest.raises(InvalidDepth):
        validate(SampleConfig(depth=0, samples=4, cols=0))
    with pytest.raises(DepthTooLarge):
        validate(SampleConfig(depth=40, samples=4, cols=0))


def test_depth_too_large_message():
    message = str(DepthTooLarge(33))
    assert "33" in message
    assert "32" in message


def test_zero_sample_count_is_valid():
    validate(SampleConfig(depth=8, samples=0))


def test_describe_lists_every_field():
    text = describe(SampleConfig(depth=8, samples=16, cols=4, hex=True, verbose=True))
    lines = text.splitlines()
    assert lines[0] == "SampleConfig"
    assert "  depth   : 8" in lines
    assert "  samples : 16" in lines
    assert "  cols    : 4" in lines
    assert "  hex     : True" in lines
    assert "  verbose : True" in lines
