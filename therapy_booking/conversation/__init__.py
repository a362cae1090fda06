from therapy_booking.conversation.collectors import (
    CollectorError,
    collect_contact,
    collect_date,
    collect_time,
)
from therapy_booking.conversation.responses import generate
from therapy_booking.conversation.session import ChatSession, Collector
from therapy_booking.conversation.state_machine import is_terminal, transition

__all__ = [
    "transition",
    "generate",
    "is_terminal",
    "ChatSession",
    "Collector",
    "CollectorError",
    "collect_contact",
    "collect_date",
    "collect_time",
]
