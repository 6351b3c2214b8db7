"""Logging utilities for the whole project. This allows callers of this library to use their own logger."""
import logging
import sys

from enhanced_containers.constants import LOGGER_NAME

_logger = None
"""The logger shared by every `Logger` instance."""


class Logger:
    def __init__(self):
        global _logger
        if _logger is None:
            _logger = logging.getLogger(LOGGER_NAME)
            _logger.setLevel(logging.INFO)
            if not _logger.handlers:
                _logger.addHandler(logging.StreamHandler(sys.stdout))
        self.logger = _logger

    def set_logger(self, logger):
        """Replace the logger used by the whole package."""
        global _logger
        _logger = logger
        self.logger = logger

    def set_level(self, level):
        self.logger.setLevel(level)

    def get_logger(self):
        return self.logger
