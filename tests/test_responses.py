"""Tests for bot response generation."""

from datetime import date

import pytest

from therapy_booking.conversation.responses import RESPONSE_BUILDERS, generate
from therapy_booking.prompts.bot_messages import FALLBACK_TEXT
from therapy_booking.schemas.conversation_schema import ConversationState, Sender, Step
from tests.conftest import make_state


class TestStepTable:
    def test_every_step_has_a_builder(self):
        assert set(RESPONSE_BUILDERS) == set(Step)

    @pytest.mark.parametrize("step", list(Step))
    def test_messages_come_from_the_bot(self, step):
        assert generate(make_state(step)).sender == Sender.BOT


class TestGreeting:
    def test_greeting_text_and_options(self, initial_state):
        message = generate(initial_state)
        assert message.text.startswith("Hello! I'm your therapy scheduling assistant.")
        assert message.text.endswith("Would you like to schedule an appointment?")
        assert message.options == ("Yes, I'd like to schedule", "Just browsing")


class TestCollectionPrompts:
    def test_name_prompt_has_no_options(self):
        message = generate(make_state(Step.NAME))
        assert message.text == "Great! Let's get started. What's your name?"
        assert message.options is None
        assert not message.has_options

    def test_contact_prompt_greets_by_name(self):
        message = generate(make_state(Step.CONTACT, name="Jordan"))
        assert message.text.startswith("Nice to meet you, Jordan!")
        assert "email and phone number" in message.text

    def test_reason_offers_fixed_choices(self):
        message = generate(make_state(Step.REASON))
        assert message.text == "Thank you. What's the primary reason for your visit?"
        assert message.options == (
            "Anxiety",
            "Depression",
            "Relationship issues",
            "Stress management",
            "Trauma/PTSD",
            "Other",
        )

    def test_date_prompt(self):
        message = generate(make_state(Step.DATE))
        assert message.text == "When would you like to schedule your appointment?"
        assert message.options is None

    def test_time_prompt_formats_selected_date(self):
        message = generate(make_state(Step.TIME, date=date(2024, 6, 1)))
        assert message.text == "What time works best for you on 6/1/2024?"

    def test_time_prompt_without_date_uses_fallback(self):
        message = generate(make_state(Step.TIME))
        assert message.text == "What time works best for you on your selected date?"


class TestConfirmation:
    def test_summary_lists_every_field(self, filled_state):
        message = generate(filled_state)
        lines = message.text.split("\n")
        assert lines[0] == "Great! Please confirm your appointment details:"
        assert "Name: Jordan" in lines
        assert "Email: jordan@x.com" in lines
        assert "Phone: 555-000-1111" in lines
        assert "Date: 6/1/2024" in lines
        assert "Time: 2:00 PM" in lines
        assert "Reason: Anxiety" in lines
        assert lines[-1] == "Is this information correct?"

    def test_summary_without_date(self, filled_state):
        message = generate(filled_state.model_copy(update={"date": None}))
        assert "Date: Not selected" in message.text.split("\n")

    def test_confirmation_options(self, filled_state):
        assert generate(filled_state).options == ("Confirm appointment", "Edit information")


class TestComplete:
    def test_thank_you_names_visitor(self, filled_state):
        message = generate(filled_state.model_copy(update={"step": Step.COMPLETE}))
        assert message.text.startswith("Thank you, Jordan!")
        assert "at least 24 hours before your appointment" in message.text
        assert message.text.endswith("See you soon!")
        assert message.options is None


class TestPurity:
    @pytest.mark.parametrize("step", list(Step))
    def test_same_state_same_text_and_options(self, filled_state, step):
        state = filled_state.model_copy(update={"step": step})
        first, second = generate(state), generate(state)
        assert first.text == second.text
        assert first.options == second.options

    def test_ids_are_unique(self, initial_state):
        assert generate(initial_state).id != generate(initial_state).id

    def test_caller_supplied_id_is_used(self, initial_state):
        assert generate(initial_state, message_id="msg-1").id == "msg-1"

    def test_options_cannot_be_mutated_through_a_message(self, initial_state):
        first = generate(initial_state)
        assert isinstance(first.options, tuple)
        with pytest.raises(AttributeError):
            first.options.append("Something else")
        assert generate(initial_state).options == ("Yes, I'd like to schedule", "Just browsing")


class TestUnknownStep:
    def test_unknown_step_gets_fallback_message(self):
        state = ConversationState.model_construct(step="bogus")
        message = generate(state)
        assert message.text == FALLBACK_TEXT
        assert message.options is None
        assert message.sender == Sender.BOT
