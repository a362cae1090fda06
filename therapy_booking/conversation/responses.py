"""
Bot response generation for each step of the booking flow.

``generate`` is a pure function of the conversation state: the same state
always yields the same text and options. Only the message id varies, and
callers may pin it by passing ``message_id``.

Usage:
    message = generate(get_initial_state())
    assert message.options == ("Yes, I'd like to schedule", "Just browsing")
"""

from typing import Callable, Optional

from therapy_booking.config import settings
from therapy_booking.prompts import bot_messages
from therapy_booking.schemas.conversation_schema import (
    ConversationState,
    Message,
    Sender,
    Step,
    new_message_id,
)
from therapy_booking.utils import format_short_date

# (text, options) produced for a given state
Reply = tuple[str, Optional[tuple[str, ...]]]


def _display_date(state: ConversationState, fallback: str) -> str:
    if state.date is None:
        return fallback
    return format_short_date(state.date, settings.scheduling.date_locale)


def _greeting(state: ConversationState) -> Reply:
    return bot_messages.GREETING_TEXT, bot_messages.GREETING_OPTIONS


def _name(state: ConversationState) -> Reply:
    return bot_messages.NAME_TEXT, None


def _contact(state: ConversationState) -> Reply:
    return bot_messages.CONTACT_TEXT.format(name=state.name), None


def _reason(state: ConversationState) -> Reply:
    return bot_messages.REASON_TEXT, bot_messages.REASON_OPTIONS


def _date(state: ConversationState) -> Reply:
    return bot_messages.DATE_TEXT, None


def _time(state: ConversationState) -> Reply:
    date_text = _display_date(state, bot_messages.TIME_DATE_FALLBACK)
    return bot_messages.TIME_TEXT.format(date=date_text), None


def _confirmation(state: ConversationState) -> Reply:
    text = bot_messages.CONFIRMATION_TEXT.format(
        name=state.name,
        email=state.email,
        phone=state.phone,
        date=_display_date(state, bot_messages.CONFIRMATION_DATE_FALLBACK),
        time=state.time,
        reason=state.reason,
    )
    return text, bot_messages.CONFIRMATION_OPTIONS


def _complete(state: ConversationState) -> Reply:
    return bot_messages.COMPLETE_TEXT.format(name=state.name), None


RESPONSE_BUILDERS: dict[Step, Callable[[ConversationState], Reply]] = {
    Step.GREETING: _greeting,
    Step.NAME: _name,
    Step.CONTACT: _contact,
    Step.REASON: _reason,
    Step.DATE: _date,
    Step.TIME: _time,
    Step.CONFIRMATION: _confirmation,
    Step.COMPLETE: _complete,
}


def generate(state: ConversationState, message_id: Optional[str] = None) -> Message:
    """
    Build the bot message for the state's current step.

    Args:
        state: Conversation snapshot to describe.
        message_id: Id for the new message; a fresh one is generated if omitted.

    Returns:
        A bot Message, with options when the step offers discrete choices.
    """
    builder = RESPONSE_BUILDERS.get(state.step)
    if builder is None:
        text, options = bot_messages.FALLBACK_TEXT, None
    else:
        text, options = builder(state)

    return Message(
        id=message_id or new_message_id(),
        text=text,
        sender=Sender.BOT,
        options=options,
    )
