"""Runtime configuration resolved from environment variables and ``.env``."""

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

from renewal_costs import RenewalType
from renewal_fee_db import STANDARD_REMINDER_SCHEDULE

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def _parse_offsets(raw: str) -> List[int]:
    offsets = [int(part) for part in raw.split(",") if part.strip()]
    if not offsets or any(days <= 0 for days in offsets):
        raise ValueError(f"reminder offsets must be positive integers: {raw!r}")
    return offsets


@dataclass
class Settings:
    reminder_offsets: List[int] = field(
        default_factory=lambda: list(STANDARD_REMINDER_SCHEDULE)
    )
    default_renewal_type: str = "renewal"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        env_offsets = os.getenv("RENEWAL_REMINDER_OFFSETS")
        env_renewal_type = os.getenv("DEFAULT_RENEWAL_TYPE")
        env_log_level = os.getenv("LOG_LEVEL")

        if env_offsets:
            try:
                self.reminder_offsets = _parse_offsets(env_offsets)
            except ValueError as exc:
                logger.warning("Ignoring RENEWAL_REMINDER_OFFSETS: %s", exc)
        if env_renewal_type:
            try:
                self.default_renewal_type = RenewalType(env_renewal_type.strip().lower()).value
            except ValueError:
                logger.warning("Ignoring unknown DEFAULT_RENEWAL_TYPE %r", env_renewal_type)
        if env_log_level:
            self.log_level = env_log_level.strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load ``.env`` once and return the cached settings."""
    load_dotenv()
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Root logging setup for the runner and the Streamlit page."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
