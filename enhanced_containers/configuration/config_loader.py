from json import load
import os
from pathlib import Path
from typing import Optional, Union

from filelock import FileLock

from enhanced_containers.configuration.configuration_model import ContainersConfiguration
from enhanced_containers.configuration.default_config import DEFAULT_CONFIG
from enhanced_containers.constants import CONFIG_FILE, CONFIG_LOCK_FILE
from enhanced_containers.utils.logger import Logger

_active_config: ContainersConfiguration = DEFAULT_CONFIG
"""Configuration currently used by the items and containers."""


def _resolve_paths(directory: Optional[Union[str, os.PathLike]]):
    cwd = Path(directory) if directory is not None else Path(os.getcwd())
    return cwd / CONFIG_FILE, FileLock(cwd / CONFIG_LOCK_FILE, timeout=0.1)


def read_config(directory: Optional[Union[str, os.PathLike]] = None) -> Optional[ContainersConfiguration]:
    """Read the configuration file.

    Args:
        directory (Optional[str], optional): Folder holding the configuration file.
            Defaults to the current working directory.

    Returns:
        ContainersConfiguration: The configuration. None if the file does not exist.
    """
    config_file_path, lock = _resolve_paths(directory)
    config = None
    with lock:
        if config_file_path.is_file():
            with config_file_path.open('r') as f:
                config = load(f)

    return ContainersConfiguration(**config) if config is not None else None


def write_config(config: ContainersConfiguration, directory: Optional[Union[str, os.PathLike]] = None):
    """Write the configuration file.

    Args:
        config (ContainersConfiguration): The configuration to write.
        directory (Optional[str], optional): Folder to write the configuration file in.
            Defaults to the current working directory.
    """
    config_file_path, lock = _resolve_paths(directory)
    with lock:
        with config_file_path.open('w') as f:
            f.write(config.model_dump_json(indent=2))


def get_config() -> ContainersConfiguration:
    """Return the active configuration."""
    return _active_config


def set_config(config: ContainersConfiguration):
    """Make `config` the active configuration and apply its log level."""
    global _active_config
    _active_config = config
    Logger().set_level(config.log_level)


def load_config(directory: Optional[Union[str, os.PathLike]] = None) -> ContainersConfiguration:
    """Read the configuration file and make it active. Falls back on the defaults
    when there is no configuration file."""
    config = read_config(directory)
    if config is None:
        Logger().get_logger().debug("No configuration file found, using the default configuration")
        config = DEFAULT_CONFIG
    set_config(config)
    return config
