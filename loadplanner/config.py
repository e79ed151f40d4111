"""
Planner settings and logging configuration.

Settings are read from LOADPLAN_* environment variables, falling back to the
defaults below.
"""

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

ENV_PREFIX = "LOADPLAN_"


class PlannerSettings(BaseModel):
    """Application-level settings."""

    # Arm reference pairs used when a deck's arms must be regenerated
    main_fore_arm: float = 18.0
    main_aft_arm: float = 36.0
    lower_fore_arm: float = 12.0
    lower_aft_arm: float = 28.0

    # Nose/tail slots per deck when the aircraft profile leaves them unspecified
    default_restricted_slots: int = Field(default=1, ge=0)

    # Fixed balance reference; None scores against the mean slot arm
    target_arm: float | None = None

    catalog_path: Path | None = None
    aircraft_db_path: Path | None = None
    report_path: Path = Path("loadplan.txt")
    log_level: str = "INFO"

    model_config = {"frozen": True}


def _env(name: str) -> str | None:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return None
    return value.strip()


def get_settings() -> PlannerSettings:
    """
    Build settings from the environment.

    Supports:
    - LOADPLAN_MAIN_FORE_ARM / LOADPLAN_MAIN_AFT_ARM
    - LOADPLAN_LOWER_FORE_ARM / LOADPLAN_LOWER_AFT_ARM
    - LOADPLAN_DEFAULT_RESTRICTED_SLOTS
    - LOADPLAN_TARGET_ARM
    - LOADPLAN_CATALOG_PATH, LOADPLAN_AIRCRAFT_DB_PATH, LOADPLAN_REPORT_PATH
    - LOADPLAN_LOG_LEVEL
    """
    overrides = {
        field: _env(field.upper())
        for field in PlannerSettings.model_fields
    }
    return PlannerSettings(**{k: v for k, v in overrides.items() if v is not None})


def init_logging(settings: PlannerSettings) -> None:
    """Configure basic console logging."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
    logger.debug("Logging initialized at %s", settings.log_level)
