"""
Centralized bot message templates and option lists.

Practice-specific values are injected from configuration, not hardcoded.
Templates use ``str.format`` placeholders filled in by the response
generator.
"""

from therapy_booking.config import settings

_biz = settings.business

GREETING_TEXT = (
    f"Hello! I'm your {_biz.assistant_name}. I can help you book a session "
    "with our therapists. Would you like to schedule an appointment?"
)
GREETING_OPTIONS = ("Yes, I'd like to schedule", "Just browsing")

NAME_TEXT = "Great! Let's get started. What's your name?"

CONTACT_TEXT = (
    "Nice to meet you, {name}! I'll need your email and phone number "
    "to confirm the appointment."
)

REASON_TEXT = "Thank you. What's the primary reason for your visit?"
REASON_OPTIONS = (
    "Anxiety",
    "Depression",
    "Relationship issues",
    "Stress management",
    "Trauma/PTSD",
    "Other",
)

DATE_TEXT = "When would you like to schedule your appointment?"

TIME_TEXT = "What time works best for you on {date}?"
TIME_DATE_FALLBACK = "your selected date"

CONFIRMATION_TEXT = """Great! Please confirm your appointment details:

Name: {name}
Email: {email}
Phone: {phone}
Date: {date}
Time: {time}
Reason: {reason}

Is this information correct?"""
CONFIRMATION_DATE_FALLBACK = "Not selected"
CONFIRMATION_OPTIONS = ("Confirm appointment", "Edit information")

COMPLETE_TEXT = (
    "Thank you, {name}! Your appointment has been scheduled successfully. "
    "You'll receive a confirmation email shortly.\n\n"
    "If you need to reschedule or cancel, please contact us at least "
    f"{_biz.cancellation_notice_hours} hours before your appointment.\n\n"
    "See you soon!"
)

FALLBACK_TEXT = "I'm sorry, I didn't understand that. Let's try again."

# User-side echoes for structured collector submissions
DATE_SELECTED_TEXT = "I'd like to schedule on {date}"
TIME_SELECTED_TEXT = "I'd like the appointment at {time}"
CONTACT_SUBMITTED_TEXT = "My email is {email} and my phone is {phone}"

INVALID_EMAIL_TEXT = "Please enter a valid email address"
INVALID_PHONE_TEXT = "Please enter a valid phone number"
