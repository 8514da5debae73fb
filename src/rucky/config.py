# src/rucky/config.py
"""Process-wide settings for the Rucky front end."""

import os

_TRUTHY = {"1", "true", "yes", "on"}

_LEVELS = {"minimal": 0, "normal": 1, "verbose": 2}


class Config:
    def __init__(self, enable_debug_logs=None, log_level="normal"):
        if enable_debug_logs is None:
            enable_debug_logs = os.environ.get("RUCKY_DEBUG", "").strip().lower() in _TRUTHY
        self.enable_debug_logs = enable_debug_logs
        self.log_level = log_level

    def should_log(self, level="normal"):
        """True when debug logging is on and ``level`` is within the configured verbosity."""
        if not self.enable_debug_logs:
            return False
        return _LEVELS.get(level, 1) <= _LEVELS.get(self.log_level, 1)

    def __repr__(self):
        return f"Config(enable_debug_logs={self.enable_debug_logs}, log_level={self.log_level!r})"


config = Config()
