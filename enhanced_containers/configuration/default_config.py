from enhanced_containers.configuration.configuration_model import ContainersConfiguration

_DEFAULT_CONFIG = {
  "missing_id_policy": "generate",
  "log_level": "INFO"
}

DEFAULT_CONFIG = ContainersConfiguration(**_DEFAULT_CONFIG)
"""Default configuration"""
