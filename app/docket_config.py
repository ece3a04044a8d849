import logging
import os
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class ConfigurationError(Exception):
    """Raised when an environment variable holds an unusable value."""


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None):
        """Reads LOG_LEVEL, falling back to INFO."""
        environ = os.environ if environ is None else environ

        log_level = environ.get("LOG_LEVEL", cls.log_level).upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise ConfigurationError(f"Unknown LOG_LEVEL: {log_level!r}")

        return cls(log_level=log_level)
