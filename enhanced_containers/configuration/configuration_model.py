import logging
from typing import Literal

from pydantic import BaseModel, field_validator


class ContainersConfiguration(BaseModel):
    """Runtime behaviour of the items and containers."""
    missing_id_policy: Literal['generate', 'raise'] = 'generate'
    """What to do when serialized data holds no id.
    'generate' creates a new random id, 'raise' raises a MissingIdError."""
    log_level: str = 'INFO'
    """Level of the package logger, as a standard logging level name."""

    @field_validator('log_level')
    def validate_log_level(cls, v):
        """Ensure that the level is one known to the logging module."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level
