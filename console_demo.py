"""
Offline console demo: runs the booking chat in a terminal.

Renders bot messages with numbered options and stands in for the date
picker, time picker and contact form with plain prompts. Uses the real
state machine, response generator and collectors. No network calls.

Usage:
    python console_demo.py
    python console_demo.py --scenario booking
    python console_demo.py --scenario edit
"""

import argparse
import time
from datetime import date, timedelta
from typing import Optional, Union

from therapy_booking.config import settings
from therapy_booking.conversation.collectors import CollectorError
from therapy_booking.conversation.session import ChatSession, Collector
from therapy_booking.schemas.conversation_schema import Message, Sender
from therapy_booking.tools.availability import get_bookable_range, get_time_slots

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"

# A scripted step is either free text or a collector submission
ScriptStep = Union[str, tuple]

QUIT_WORDS = ("quit", "exit", "q")


class ConsoleChat:
    """Drives a ChatSession from the terminal."""

    def __init__(self, delay: Optional[float] = None) -> None:
        self.chat = ChatSession()
        self.delay = settings.scheduling.reply_delay_sec if delay is None else delay
        self._last_options: list[str] = []

    def render(self, messages: list[Message]) -> None:
        for message in messages:
            if message.sender == Sender.USER:
                print(f"{BLUE}[You] {RESET}{message.text}")
                continue
            if self.delay:
                time.sleep(self.delay)
            print(f"{GREEN}{BOLD}[Assistant]{RESET} {GREEN}{message.text}{RESET}")
            if message.has_options:
                self._last_options = list(message.options or [])
                for i, option in enumerate(self._last_options, start=1):
                    print(f"  {YELLOW}{i}. {option}{RESET}")
            else:
                self._last_options = []

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    # Pre-scripted scenarios for --scenario flag
    SCENARIOS: dict[str, list[ScriptStep]] = {
        "booking": [
            "Yes, I'd like to schedule",
            "Jordan",
            ("contact", "jordan@example.com", "555-000-1111"),
            "Anxiety",
            ("date", 7),
            ("time", "2:00 PM"),
            "Confirm appointment",
        ],
        "browsing": [
            "Just browsing",
            "Actually, yes please",
            "Sam",
            ("contact", "sam@example.com", "(555) 222-3333"),
            "Stress management",
            ("date", 3),
            ("time", "10:00 AM"),
            "Confirm appointment",
        ],
        "edit": [
            "Yes, I'd like to schedule",
            "Alex",
            ("contact", "alex@example", "123"),
            ("contact", "alex@example.com", "555.444.5555"),
            "Depression",
            ("date", 10),
            ("time", "9:00 AM"),
            "Edit information",
            "Alexandra",
            ("contact", "alexandra@example.com", "555.444.5555"),
            "Depression",
            ("date", 12),
            ("time", "11:00 AM"),
            "Looks correct",
        ],
    }

    def _banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {title}{RESET}")
        print(f"{BOLD}  Practice: {settings.business.name}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def _summary(self, headline: str) -> None:
        print(f"\n{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {headline}{RESET}")
        print(f"{DIM}  Final step: {self.chat.state.step.value}{RESET}")
        print(f"{DIM}  Messages: {len(self.chat.messages)}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")

    def run_scenario(self, scenario: str) -> None:
        """Auto-play a pre-scripted scenario for demo purposes."""
        steps = self.SCENARIOS.get(scenario)
        if not steps:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        self._banner(f"THERAPY BOOKING CHAT - Scenario: {scenario}")
        self.render([self.chat.start()])

        today = date.today()
        for step in steps:
            if self.chat.is_complete:
                break
            if isinstance(step, str):
                self.render(self.chat.send(step))
            elif step[0] == "contact":
                self._submit_contact(step[1], step[2])
            elif step[0] == "date":
                self._submit_date(today + timedelta(days=step[1]))
            elif step[0] == "time":
                self._submit_time(step[1])
            self.system_log(f"Step: {self.chat.state.step.value}")

        self._summary(f"Scenario '{scenario}' complete.")

    def run(self) -> None:
        self._banner("THERAPY BOOKING CHAT - Console Demo")
        print(f"{DIM}  Type 'quit' to exit, or a number to pick an option.{RESET}\n")
        self.render([self.chat.start()])

        while not self.chat.is_complete:
            if self.chat.pending == Collector.CONTACT:
                email = input(f"\n{BLUE}[Email] {RESET}").strip()
                if email.lower() in QUIT_WORDS:
                    print(f"\n{DIM}Session ended.{RESET}")
                    return
                phone = input(f"{BLUE}[Phone] {RESET}").strip()
                self._submit_contact(email, phone)
                continue
            if self.chat.pending == Collector.DATE:
                if not self._prompt_date():
                    print(f"\n{DIM}Session ended.{RESET}")
                    return
                continue
            if self.chat.pending == Collector.TIME:
                if not self._prompt_time():
                    print(f"\n{DIM}Session ended.{RESET}")
                    return
                continue

            user_input = input(f"\n{BLUE}[You] {RESET}").strip()
            if not user_input:
                continue
            if user_input.lower() in QUIT_WORDS:
                print(f"\n{DIM}Session ended.{RESET}")
                return
            if len(user_input) > settings.scheduling.max_input_length:
                print(f"{RED}That was quite long. Could you keep it brief?{RESET}")
                continue

            self.render(self.chat.send(self._resolve_option(user_input)))
            self.system_log(f"Step: {self.chat.state.step.value}")

        self._summary("Conversation complete.")

    def _resolve_option(self, text: str) -> str:
        """Map a typed option number to the option's exact text."""
        if text.isdigit() and 1 <= int(text) <= len(self._last_options):
            return self._last_options[int(text) - 1]
        return text

    def _prompt_date(self) -> bool:
        """Ask for a date. Returns False when the visitor quits."""
        start, end = get_bookable_range()
        raw = input(
            f"\n{BLUE}[Date YYYY-MM-DD, {start.isoformat()} to {end.isoformat()}] {RESET}"
        ).strip()
        if raw.lower() in QUIT_WORDS:
            return False
        try:
            value = date.fromisoformat(raw)
        except ValueError:
            print(f"{RED}Please enter a date like {start.isoformat()}{RESET}")
            return True
        self._submit_date(value)
        return True

    def _prompt_time(self) -> bool:
        """Ask for a time slot. Returns False when the visitor quits."""
        slots = get_time_slots()
        print(f"{YELLOW}Available Times:{RESET}")
        for i, slot in enumerate(slots, start=1):
            print(f"  {YELLOW}{i}. {slot}{RESET}")
        raw = input(f"\n{BLUE}[Time] {RESET}").strip()
        if raw.lower() in QUIT_WORDS:
            return False
        if raw.isdigit() and 1 <= int(raw) <= len(slots):
            raw = slots[int(raw) - 1]
        self._submit_time(raw)
        return True

    def _submit_date(self, value: date) -> None:
        try:
            self.render(self.chat.submit_date(value))
        except CollectorError as e:
            print(f"{RED}{e}{RESET}")
            return
        self.system_log(f"Date selected: {value.isoformat()}")

    def _submit_time(self, label: str) -> None:
        try:
            self.render(self.chat.submit_time(label))
        except CollectorError as e:
            print(f"{RED}{e}{RESET}")
            return
        self.system_log(f"Time selected: {label}")

    def _submit_contact(self, email: str, phone: str) -> None:
        try:
            messages, errors = self.chat.submit_contact(email, phone)
        except CollectorError as e:
            print(f"{RED}{e}{RESET}")
            return
        for field_name, error in errors.items():
            print(f"{RED}{field_name}: {error}{RESET}")
        if not errors:
            self.render(messages)
            self.system_log("Contact information saved")


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Offline booking chat demo")
    parser.add_argument(
        "--scenario",
        choices=sorted(ConsoleChat.SCENARIOS),
        default=None,
        help="Auto-play a pre-scripted scenario instead of interactive mode",
    )
    parser.add_argument(
        "--no-delay",
        action="store_true",
        help="Skip the pause before each assistant reply",
    )
    args = parser.parse_args(argv)

    console = ConsoleChat(delay=0.0 if args.no_delay else None)
    if args.scenario:
        console.run_scenario(args.scenario)
    else:
        console.run()


if __name__ == "__main__":
    main()
