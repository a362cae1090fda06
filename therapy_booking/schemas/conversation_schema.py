"""Conversation state and chat message schemas."""

import datetime as dt
import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Step(str, Enum):
    """Stages of the booking flow, in the order they are walked."""
    GREETING = "greeting"
    NAME = "name"
    CONTACT = "contact"
    REASON = "reason"
    DATE = "date"
    TIME = "time"
    CONFIRMATION = "confirmation"
    COMPLETE = "complete"


class Sender(str, Enum):
    BOT = "bot"
    USER = "user"


class ConversationState(BaseModel):
    """
    Snapshot of the fields collected so far and the current step.

    Frozen: every turn produces a new snapshot via ``model_copy(update=...)``
    and the previous one is left untouched.
    """

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    date: Optional[dt.date] = None
    time: str = ""
    reason: str = ""
    step: Step = Step.GREETING


class Message(BaseModel):
    """A single chat bubble in the message log."""

    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    sender: Sender
    options: Optional[tuple[str, ...]] = None

    @property
    def has_options(self) -> bool:
        return bool(self.options)


def get_initial_state() -> ConversationState:
    """Return a fresh state positioned at the greeting."""
    return ConversationState()


def new_message_id(prefix: str = "msg") -> str:
    """Generate a unique message id such as ``msg-1f2e3d4c5b6a``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"
