"""
Turn-by-turn state transitions for the scripted booking flow.

The flow is linear: greeting -> name -> contact -> reason -> date -> time
-> confirmation -> complete, with a single regression from confirmation
back to name when the visitor rejects the summary. Each step has one
handler in ``STEP_HANDLERS``; steps without a handler (date, complete)
leave the state unchanged.

``transition`` never raises and never mutates its argument. Date and time
are normally filled in by the structured collectors in
``therapy_booking.conversation.collectors``.

Usage:
    state = transition("yes", get_initial_state())
    assert state.step == Step.NAME
"""

import logging
import re
from typing import Callable

from therapy_booking.schemas.conversation_schema import ConversationState, Step

logger = logging.getLogger(__name__)

STEP_ORDER: tuple[Step, ...] = (
    Step.GREETING,
    Step.NAME,
    Step.CONTACT,
    Step.REASON,
    Step.DATE,
    Step.TIME,
    Step.CONFIRMATION,
    Step.COMPLETE,
)

SCHEDULE_KEYWORDS = ("yes", "schedule")
CONFIRM_KEYWORDS = ("confirm", "yes", "correct")

_DIGIT = re.compile(r"\d")


def _contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    lower = text.lower()
    return any(k in lower for k in keywords)


def _handle_greeting(text: str, state: ConversationState) -> ConversationState:
    if _contains_any(text, SCHEDULE_KEYWORDS):
        return state.model_copy(update={"step": Step.NAME})
    return state


def _handle_name(text: str, state: ConversationState) -> ConversationState:
    return state.model_copy(update={"name": text.strip(), "step": Step.CONTACT})


def _handle_contact(text: str, state: ConversationState) -> ConversationState:
    # Best-effort split: anything with "@" is an email, otherwise anything with a digit is a phone.
    update: dict = {}
    if "@" in text:
        update["email"] = text.strip()
    elif _DIGIT.search(text):
        update["phone"] = text.strip()

    updated = state.model_copy(update=update)
    if updated.email and updated.phone:
        return updated.model_copy(update={"step": Step.REASON})
    return updated


def _handle_reason(text: str, state: ConversationState) -> ConversationState:
    return state.model_copy(update={"reason": text.strip(), "step": Step.DATE})


def _handle_time(text: str, state: ConversationState) -> ConversationState:
    return state.model_copy(update={"time": text.strip(), "step": Step.CONFIRMATION})


def _handle_confirmation(text: str, state: ConversationState) -> ConversationState:
    if _contains_any(text, CONFIRM_KEYWORDS):
        return state.model_copy(update={"step": Step.COMPLETE})
    # Collected fields are kept; the visitor re-walks the flow from the name step.
    return state.model_copy(update={"step": Step.NAME})


STEP_HANDLERS: dict[Step, Callable[[str, ConversationState], ConversationState]] = {
    Step.GREETING: _handle_greeting,
    Step.NAME: _handle_name,
    Step.CONTACT: _handle_contact,
    Step.REASON: _handle_reason,
    Step.TIME: _handle_time,
    Step.CONFIRMATION: _handle_confirmation,
}


def transition(user_input: str, state: ConversationState) -> ConversationState:
    """
    Apply one turn of user input to the conversation.

    Args:
        user_input: Free text typed by the visitor, or the exact text of a selected option.
        state: The current conversation snapshot.

    Returns:
        The next conversation snapshot. Unrecognized input or a step with no
        handler returns the state unchanged.
    """
    handler = STEP_HANDLERS.get(state.step)
    if handler is None:
        return state

    new_state = handler(user_input, state)
    if new_state.step != state.step:
        logger.debug(
            "State transition: %s -> %s", state.step.value, new_state.step.value,
        )
    return new_state


def is_terminal(state: ConversationState) -> bool:
    """Check if the booking flow has finished."""
    return state.step == Step.COMPLETE
