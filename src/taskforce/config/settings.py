"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the task
generator's tunable constants and for logging.

Usage:
    from taskforce.config import GeneratorSettings, LoggingSettings

    # Load from environment variables (TASKFORCE_GENERATOR_*, TASKFORCE_LOG_*)
    generator_settings = GeneratorSettings()
    logging_settings = LoggingSettings()

    # Or override with explicit values
    generator_settings = GeneratorSettings(upgrade_critical_ticks=3000)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeneratorSettings(BaseSettings):  # type: ignore[misc]
    """Tunable constants for the task generator tiers.

    Every priority and demand formula reads its constants from here, so two
    generators built from equal settings produce identical tasks for the
    same snapshot.

    Environment Variables:
        TASKFORCE_GENERATOR_<FIELD_NAME>, e.g. TASKFORCE_GENERATOR_BUILD_PRIORITY
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKFORCE_GENERATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Tier 1: defense
    defense_base_priority: int = 95
    defense_threat_per_defender: int = Field(default=10, gt=0)

    # Tier 2: urgent energy
    pickup_priority: int = 84
    pickup_min_amount: int = 50
    harvest_priority: int = 80
    refill_spawn_priority: int = 82
    refill_spawn_bootstrap_priority: int = 98
    refill_spawn_energy_per_agent: int = Field(default=50, gt=0)
    refill_extension_priority: int = 81
    haul_priority: int = 83
    haul_min_energy: int = 100

    # Tier 3: critical-structure refill
    refill_tower_priority: int = 91
    tower_refill_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    tower_energy_per_agent: int = Field(default=500, gt=0)

    # Tier 4: construction
    build_priority: int = 85
    build_work_per_agent: int = Field(default=5000, gt=0)
    build_spawn_priority: int = 95
    build_spawn_min_demand: int = 2
    build_extension_priority: int = 93
    build_extension_min_demand: int = 3
    build_tower_priority: int = 92
    build_tower_min_demand: int = 2

    # Tiers 5 and 7: repair
    critical_repair_cutoff: int = 70
    repair_critical_structure_damaged: int = 90
    repair_critical_structure_worn: int = 70
    repair_critical_structure_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    repair_structure_damaged: int = 50
    repair_structure_worn: int = 30
    repair_structure_threshold: float = Field(default=0.3, ge=0.0, le=1.0)

    # Tier 6: objective upgrade
    upgrade_priority: int = 40
    upgrade_warning_priority: int = 50
    upgrade_critical_priority: int = 96
    upgrade_warning_ticks: int = 10000
    upgrade_critical_ticks: int = 5000

    # Tier 8: emergency reserve withdrawal
    withdraw_priority: int = 15
    withdraw_wasted_priority: int = 87
    withdraw_min_energy: int = 100
    withdraw_demand: int = 2
    replacement_latency_ticks: int = 30
    replacement_safety_buffer_ticks: int = 50
    default_ticks_to_live: int = 1500


class LoggingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for structured logging.

    Attributes:
        level: Minimum log level name.
        format: "json" for machine-readable lines, "console" for development.
        service_name: Bound to every log entry as `service`.

    Environment Variables:
        TASKFORCE_LOG_LEVEL
        TASKFORCE_LOG_FORMAT
        TASKFORCE_LOG_SERVICE_NAME
    """

    model_config = SettingsConfigDict(
        env_prefix="TASKFORCE_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"
    format: Literal["json", "console"] = "console"
    service_name: str = "taskforce"
