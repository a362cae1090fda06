"""
Centralized configuration with environment variable overrides.

Practice details, the bookable calendar window, offered time slots and
console presentation settings are configurable here. Nothing is
hardcoded in the conversation or collector logic.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from therapy_booking.logging_context import ConversationIdFilter

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_TIME_SLOTS = "9:00 AM,10:00 AM,11:00 AM,1:00 PM,2:00 PM,3:00 PM,4:00 PM"
LOG_FORMAT = "%(asctime)s [%(name)s] [%(conversation_id)s] %(levelname)s: %(message)s"


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_float(env_var: str, default: str) -> float:
    """Parse a float from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return float(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid float for {env_var}: {raw!r}"
        ) from None


def _csv_list(env_var: str, default: str) -> tuple[str, ...]:
    """Split a comma separated env var into a tuple of non-empty labels."""
    raw = os.getenv(env_var, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@dataclass(frozen=True)
class BusinessConfig:
    """Practice-specific settings loaded from environment or defaults."""

    name: str = os.getenv("PRACTICE_NAME", "Harbor Light Counseling")
    assistant_name: str = os.getenv("ASSISTANT_NAME", "therapy scheduling assistant")
    cancellation_notice_hours: int = _safe_int("CANCELLATION_NOTICE_HOURS", "24")


@dataclass(frozen=True)
class SchedulingConfig:
    """Calendar window, time slots and chat presentation settings."""

    booking_window_months: int = _safe_int("BOOKING_WINDOW_MONTHS", "3")
    time_slots: tuple[str, ...] = _csv_list("TIME_SLOTS", DEFAULT_TIME_SLOTS)
    date_locale: str = os.getenv("DATE_LOCALE", "en-US")
    reply_delay_sec: float = _safe_float("REPLY_DELAY_SEC", "0.7")
    max_input_length: int = _safe_int("MAX_INPUT_LENGTH", "500")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    business: BusinessConfig = field(default_factory=BusinessConfig)
    scheduling: SchedulingConfig = field(default_factory=SchedulingConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.business.cancellation_notice_hours < 0:
        raise ValueError(
            "CANCELLATION_NOTICE_HOURS must be >= 0, "
            f"got {config.business.cancellation_notice_hours}"
        )
    if config.scheduling.booking_window_months < 1:
        raise ValueError(
            f"BOOKING_WINDOW_MONTHS must be >= 1, got {config.scheduling.booking_window_months}"
        )
    if not config.scheduling.time_slots:
        raise ValueError("TIME_SLOTS must contain at least one time label")
    if len(set(config.scheduling.time_slots)) != len(config.scheduling.time_slots):
        raise ValueError(f"TIME_SLOTS contains duplicates: {list(config.scheduling.time_slots)}")
    if config.scheduling.reply_delay_sec < 0:
        raise ValueError(
            f"REPLY_DELAY_SEC must be >= 0, got {config.scheduling.reply_delay_sec}"
        )
    if config.scheduling.max_input_length < 1:
        raise ValueError(
            f"MAX_INPUT_LENGTH must be >= 1, got {config.scheduling.max_input_length}"
        )


def _attach_conversation_filter(target: logging.Logger) -> None:
    """Give every handler on ``target`` a ConversationIdFilter, once."""
    for handler in target.handlers:
        if not any(isinstance(f, ConversationIdFilter) for f in handler.filters):
            handler.addFilter(ConversationIdFilter())


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    _attach_conversation_filter(logging.getLogger())
    logger.info("Configuration loaded for '%s'", config.business.name)
    return config


# Singleton instance
settings = load_config()
