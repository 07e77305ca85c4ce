import pytest

from huewheel.wheel import WheelConfig


def test_defaults():
    config = WheelConfig()
    assert config.responsive_size() == 300
    assert config.initial_hsv == (0, 100, 100)


def test_size_is_capped():
    config = WheelConfig()
    assert config.responsive_size(500) == 350
    assert config.responsive_size(300, viewport_width=200) == 120
    assert config.responsive_size(100, viewport_width=1920) == 100


def test_size_never_collapses():
    config = WheelConfig()
    assert config.responsive_size(300, viewport_width=50) == config.min_size == 21


def test_invalid_config():
    with pytest.raises(ValueError):
        WheelConfig(rim_padding=-1)
    with pytest.raises(ValueError):
        WheelConfig(max_size=20)


def test_config_is_frozen():
    config = WheelConfig()
    with pytest.raises(AttributeError):
        config.max_size = 10
