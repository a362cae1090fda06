"""
Structured collectors for the values the chat does not parse from free text.

The date, time slot and contact details are gathered by dedicated input
widgets. Each collector refuses values offered at the wrong step, validates
the submitted value and returns the conversation advanced past its step:

    contact form  -> email + phone set, step = reason
    date picker   -> date set,          step = time
    time picker   -> time set,          step = confirmation

Usage:
    state, errors = collect_contact(state, "a@b.com", "(555) 123-4567")
    if not errors:
        state = collect_date(state, date(2024, 6, 1))
"""

import logging
import re
from datetime import date
from typing import Optional

from therapy_booking.prompts import bot_messages
from therapy_booking.schemas.conversation_schema import ConversationState, Step
from therapy_booking.tools.availability import (
    get_bookable_range,
    get_time_slots,
    is_bookable_date,
    is_offered_time,
)

logger = logging.getLogger(__name__)

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
# North American 10-digit number with optional parentheses and separators
PHONE_PATTERN = re.compile(r"^\(?([0-9]{3})\)?[-. ]?([0-9]{3})[-. ]?([0-9]{4})$")


class CollectorError(ValueError):
    """Raised when a collector receives a value it cannot accept."""


def validate_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.match(value))


def validate_phone(value: str) -> bool:
    return bool(PHONE_PATTERN.match(value))


def _require_step(state: ConversationState, expected: Step, what: str) -> None:
    if state.step != expected:
        raise CollectorError(
            f"Cannot accept {what} at step {state.step.value!r}; "
            f"expected step {expected.value!r}"
        )


def collect_contact(
    state: ConversationState, email: str, phone: str
) -> tuple[ConversationState, dict[str, str]]:
    """
    Validate a submitted email and phone pair.

    Returns:
        (state, errors). On success the advanced state and an empty dict;
        otherwise the unchanged state and a field name -> message dict.

    Raises:
        CollectorError: If the conversation is not at the contact step.
    """
    _require_step(state, Step.CONTACT, "contact details")

    errors: dict[str, str] = {}
    if not validate_email(email):
        errors["email"] = bot_messages.INVALID_EMAIL_TEXT
    if not validate_phone(phone):
        errors["phone"] = bot_messages.INVALID_PHONE_TEXT

    if errors:
        logger.debug("Contact details rejected: %s", sorted(errors))
        return state, errors

    return state.model_copy(
        update={"email": email, "phone": phone, "step": Step.REASON}
    ), errors


def collect_date(
    state: ConversationState, value: date, today: Optional[date] = None
) -> ConversationState:
    """
    Record the chosen appointment date and move on to time selection.

    Raises:
        CollectorError: If the conversation is not at the date step or the
            date is outside the bookable window.
    """
    _require_step(state, Step.DATE, "a date")
    if not is_bookable_date(value, today):
        start, end = get_bookable_range(today)
        raise CollectorError(
            f"Date {value.isoformat()} is not bookable; "
            f"choose a date between {start.isoformat()} and {end.isoformat()}"
        )
    return state.model_copy(update={"date": value, "step": Step.TIME})


def collect_time(state: ConversationState, label: str) -> ConversationState:
    """
    Record the chosen time slot and move on to confirmation.

    Raises:
        CollectorError: If the conversation is not at the time step or the
            label is not one of the offered time slots.
    """
    _require_step(state, Step.TIME, "a time slot")
    if not is_offered_time(label):
        raise CollectorError(
            f"Time {label!r} is not available. Valid times: {get_time_slots()}"
        )
    return state.model_copy(update={"time": label, "step": Step.CONFIRMATION})
