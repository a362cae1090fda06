"""
Single-conversation orchestration shell.

Holds the message log and the current state, feeds visitor input through
``transition`` and decides after each turn whether to ask a structured
collector for the next value or to append the generated bot reply.

Usage:
    chat = ChatSession()
    chat.start()
    chat.select_option("Yes, I'd like to schedule")
    chat.send("Jordan")
    assert chat.pending == Collector.CONTACT
"""

import uuid
from datetime import date
from enum import Enum
from typing import Any, Optional

from therapy_booking.config import settings
from therapy_booking.conversation.collectors import (
    collect_contact,
    collect_date,
    collect_time,
)
from therapy_booking.conversation.responses import generate
from therapy_booking.conversation.state_machine import is_terminal, transition
from therapy_booking.logging_context import get_conversation_logger, set_conversation_id
from therapy_booking.prompts import bot_messages
from therapy_booking.schemas.conversation_schema import (
    ConversationState,
    Message,
    Sender,
    Step,
    get_initial_state,
    new_message_id,
)
from therapy_booking.utils import format_short_date

logger = get_conversation_logger(__name__)


class Collector(str, Enum):
    """Structured input widget the front end should show next."""
    DATE = "date"
    TIME = "time"
    CONTACT = "contact"


class ChatSession:
    """
    Owns one visitor's message log and conversation state.

    Messages are append-only. The state is replaced, never mutated, on
    every turn.
    """

    def __init__(self, today: Optional[date] = None) -> None:
        self.conversation_id = f"CONV-{uuid.uuid4().hex[:8]}"
        self.state: ConversationState = get_initial_state()
        self.messages: list[Message] = []
        self.pending: Optional[Collector] = None
        self._today = today

    @property
    def is_complete(self) -> bool:
        return is_terminal(self.state)

    def start(self) -> Message:
        """Open the conversation with the greeting."""
        set_conversation_id(self.conversation_id)
        greeting = generate(self.state)
        self.messages.append(greeting)
        logger.info("Conversation started")
        return greeting

    def _add_user_message(self, text: str) -> Message:
        message = Message(id=new_message_id("user"), text=text, sender=Sender.USER)
        self.messages.append(message)
        return message

    def _add_bot_reply(self) -> Message:
        reply = generate(self.state)
        self.messages.append(reply)
        return reply

    def _collector_for(self, state: ConversationState) -> Optional[Collector]:
        if state.step == Step.DATE:
            return Collector.DATE
        if state.step == Step.TIME:
            return Collector.TIME
        if state.step == Step.CONTACT and (not state.email or not state.phone):
            return Collector.CONTACT
        return None

    def send(self, text: str) -> list[Message]:
        """
        Run one text turn.

        Blank input is ignored unless a collector is waiting. Returns the
        messages appended during the turn.
        """
        if not text.strip() and self.pending is None:
            return []

        set_conversation_id(self.conversation_id)
        new_messages = [self._add_user_message(text)]

        previous = self.state.step
        self.state = transition(text, self.state)
        self.pending = self._collector_for(self.state)
        logger.info("Turn processed: %s -> %s", previous.value, self.state.step.value)

        if self.pending is None:
            new_messages.append(self._add_bot_reply())
        else:
            logger.debug("Awaiting %s collector", self.pending.value)
        return new_messages

    def select_option(self, option: str) -> list[Message]:
        """Selecting an option is the same as typing its exact text."""
        return self.send(option)

    def submit_date(self, value: date) -> list[Message]:
        """
        Accept a date from the date picker and move on to time selection.

        Raises:
            CollectorError: If the date picker is not the current step or the
                date is outside the bookable window.
        """
        set_conversation_id(self.conversation_id)
        self.state = collect_date(self.state, value, today=self._today)
        self.pending = Collector.TIME
        logger.info("Date selected: %s", value.isoformat())

        date_text = format_short_date(value, settings.scheduling.date_locale)
        return [self._add_user_message(bot_messages.DATE_SELECTED_TEXT.format(date=date_text))]

    def submit_time(self, label: str) -> list[Message]:
        """
        Accept a time slot from the time picker and show the confirmation summary.

        Raises:
            CollectorError: If the time picker is not the current step or the
                label is not an offered time slot.
        """
        set_conversation_id(self.conversation_id)
        self.state = collect_time(self.state, label)
        self.pending = None
        logger.info("Time selected: %s", label)

        return [
            self._add_user_message(bot_messages.TIME_SELECTED_TEXT.format(time=label)),
            self._add_bot_reply(),
        ]

    def submit_contact(self, email: str, phone: str) -> tuple[list[Message], dict[str, str]]:
        """
        Accept the contact form.

        Returns:
            (messages, errors). On validation failure no messages are added
            and the form stays pending.

        Raises:
            CollectorError: If the conversation is not at the contact step.
        """
        set_conversation_id(self.conversation_id)
        state, errors = collect_contact(self.state, email, phone)
        if errors:
            logger.info("Contact form rejected: %s", ", ".join(sorted(errors)))
            return [], errors

        self.state = state
        self.pending = None
        logger.info("Contact details saved")
        return [
            self._add_user_message(
                bot_messages.CONTACT_SUBMITTED_TEXT.format(email=email, phone=phone)
            ),
            self._add_bot_reply(),
        ], errors

    def restart_collection(self) -> None:
        """Clear every collected field, keeping the current step."""
        self.state = get_initial_state().model_copy(update={"step": self.state.step})
        logger.info("Collected fields cleared at step %s", self.state.step.value)

    def transcript(self) -> list[dict[str, Any]]:
        """Export the message log as plain dicts."""
        return [m.model_dump(mode="json") for m in self.messages]
