"""Shared test fixtures and helpers."""

from datetime import date
from typing import Optional

import pytest

from therapy_booking.conversation.session import ChatSession
from therapy_booking.schemas.conversation_schema import (
    ConversationState,
    Step,
    get_initial_state,
)

TODAY = date(2024, 5, 20)


@pytest.fixture
def initial_state():
    return get_initial_state()


@pytest.fixture
def chat_session():
    return ChatSession(today=TODAY)


@pytest.fixture
def filled_state():
    return make_state(
        Step.CONFIRMATION,
        name="Jordan",
        email="jordan@x.com",
        phone="555-000-1111",
        date=date(2024, 6, 1),
        time="2:00 PM",
        reason="Anxiety",
    )


def make_state(step: Step, date: Optional[date] = None, **fields: str) -> ConversationState:
    """Helper to create a ConversationState positioned at a given step."""
    return ConversationState(step=step, date=date, **fields)
