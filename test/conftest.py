import pytest

from enhanced_containers.configuration.config_loader import set_config
from enhanced_containers.configuration.default_config import DEFAULT_CONFIG


@pytest.fixture(autouse=True)
def default_configuration():
    """Every test starts and ends with the default configuration active."""
    set_config(DEFAULT_CONFIG)
    yield
    set_config(DEFAULT_CONFIG)
