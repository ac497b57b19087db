"""Configuration module using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from taskforce.config import GeneratorSettings, LoggingSettings

    settings = GeneratorSettings(build_priority=90)
    logging_settings = LoggingSettings(format="json")
"""

from taskforce.config.settings import GeneratorSettings, LoggingSettings

__all__ = [
    "GeneratorSettings",
    "LoggingSettings",
]
