import pytest
from gathio.core_config import get_cfg_defaults
from gathio.config import settings


def test_default_settings_loading():
    """Verify default values are loaded correctly."""
    cfg = get_cfg_defaults()
    assert cfg.SYSTEM.EXAMPLE_CONFIG_NAME == "config-example.toml"
    assert cfg.SYSTEM.VERSION_ENV == "GATHIO_VERSION"
    assert cfg.SYSTEM.UNKNOWN_VERSION == "unknown"
    assert cfg.SYSTEM.CONFIG_PATH.endswith("config.toml")


def test_settings_singleton_is_frozen():
    """Verify the singleton settings object is loaded and frozen."""
    assert settings.is_frozen()
    with pytest.raises(AttributeError):
        settings.SYSTEM.CONFIG_PATH = "elsewhere.toml"


def test_defaults_are_cloned():
    cfg = get_cfg_defaults()
    cfg.SYSTEM.DATA_DIR = "/tmp/other"
    assert get_cfg_defaults().SYSTEM.DATA_DIR != "/tmp/other"
