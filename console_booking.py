"""
Console booking client: fills in and submits the repair booking form from a terminal.

Uses the real form controller and API client. By default it talks to the
API at API_BASE_URL; with --local it runs the API in-process against an
in-memory store, so no server is needed.

Usage:
    python console_booking.py
    python console_booking.py --local
    python console_booking.py --local --scenario booking
    python console_booking.py --repair-type "TV Repair" --description "No picture"
"""

import argparse
import asyncio
from datetime import date, timedelta
from typing import Optional

import httpx

from storefront.api import create_app
from storefront.catalog import (
    TIME_SLOTS,
    get_repair_categories,
    get_repair_details,
    get_time_slot_label,
)
from storefront.client import (
    FORM_FIELDS,
    BookingApiClient,
    BookingForm,
    ClientSession,
    NavigationContext,
    NotificationKind,
)
from storefront.config import settings
from storefront.store import RepairRecordStore

GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
DIM = "\033[2m"
RESET = "\033[0m"
BOLD = "\033[1m"


class ConsoleBooking:
    """Drives a BookingForm through prompts on stdin."""

    MAX_INPUT_LENGTH = 500

    def __init__(self, client: BookingApiClient, prefill: Optional[NavigationContext] = None) -> None:
        self.form = BookingForm(client, prefill)
        self.categories = get_repair_categories()
        self.slots = list(TIME_SLOTS)

    # Pre-scripted answers for --scenario, in form field order
    @staticmethod
    def scenarios() -> dict[str, dict[str, str]]:
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        return {
            "booking": {
                "name": "Jane Citizen",
                "contact": "555-1234",
                "address": "12 Elm St",
                "repairType": "Laptop Repair",
                "description": "Won't power on",
                "date": tomorrow,
                "time": "9:00 AM - 12:00 PM",
            },
            "missing-contact": {
                "name": "Jane Citizen",
                "contact": "",
                "address": "12 Elm St",
                "repairType": "Laptop Repair",
                "description": "Won't power on",
                "date": tomorrow,
                "time": "9:00 AM - 12:00 PM",
            },
        }

    def say(self, text: str) -> None:
        print(f"{GREEN}{text}{RESET}")

    def system_log(self, text: str) -> None:
        print(f"{DIM}  >> {text}{RESET}")

    def banner(self, title: str) -> None:
        print()
        print(f"{BOLD}{'=' * 60}{RESET}")
        print(f"{BOLD}  {settings.business.name.upper()} - {title}{RESET}")
        print(f"{BOLD}{'=' * 60}{RESET}")
        print()

    def _choose(self, label: str, options: list[str], current: str, display: list[str]) -> str:
        for i, shown in enumerate(display, start=1):
            print(f"  {i}. {shown}")
        hint = f" [{current}]" if current else ""
        raw = input(f"{label}{hint}: ").strip()
        if not raw:
            return current
        if raw.isdigit() and 1 <= int(raw) <= len(options):
            return options[int(raw) - 1]
        return raw

    def _category_display(self) -> list[str]:
        return [f"{c} ({get_repair_details(c)['price_range']})" for c in self.categories]

    def _ask(self, label: str, current: str) -> str:
        hint = f" [{current}]" if current else ""
        raw = input(f"{label}{hint}: ").strip()
        if len(raw) > self.MAX_INPUT_LENGTH:
            self.say("That's quite long, keeping the first 500 characters.")
            raw = raw[: self.MAX_INPUT_LENGTH]
        return raw or current

    def collect(self) -> None:
        for form_field in FORM_FIELDS:
            current = self.form.state.get(form_field.name)
            if form_field.name == "repairType":
                value = self._choose(form_field.label, self.categories, current, self._category_display())
            elif form_field.name == "time":
                value = self._choose(
                    form_field.label, self.slots, current, [get_time_slot_label(s) for s in self.slots]
                )
            elif form_field.name == "date":
                value = self._ask(f"{form_field.label} (YYYY-MM-DD, from {date.today()})", current)
            else:
                value = self._ask(form_field.label, current)
            self.form.update_field(form_field.name, value)

    async def submit(self) -> bool:
        missing = self.form.required_missing()
        if missing:
            print(f"{YELLOW}Please fill in: {', '.join(missing)}{RESET}")
            return False

        self.system_log("Scheduling...")
        await self.form.submit()
        notification = self.form.state.notification
        colour = GREEN if notification.kind == NotificationKind.SUCCESS else RED
        print(f"\n{colour}{BOLD}{notification.title}{RESET} {colour}{notification.message}{RESET}")
        self.form.dismiss_notification()
        return notification.kind == NotificationKind.SUCCESS

    async def run(self) -> None:
        self.banner("Schedule a Repair")
        print(f"{DIM}  Press Enter to keep a value in [brackets]. Ctrl-C to quit.{RESET}\n")
        while True:
            self.collect()
            if await self.submit():
                break
            again = input("\nTry again? [Y/n]: ").strip().lower()
            if again in ("n", "no", "q", "quit"):
                print(f"\n{DIM}Session ended.{RESET}")
                return

    async def run_scenario(self, scenario: str) -> None:
        answers = self.scenarios().get(scenario)
        if answers is None:
            print(f"{RED}Unknown scenario: {scenario}{RESET}")
            return

        self.banner(f"Scenario: {scenario}")
        for name, value in answers.items():
            print(f"  {name}: {value}")
            self.form.update_field(name, value)
        print()
        # bypass the local required check so the server-side rejection is shown
        await self.form.submit()
        notification = self.form.state.notification
        self.system_log(f"Result: {notification.kind.value} - {notification.message}")
        self.system_log(f"Form cleared: {self.form.state.is_empty()}")


def _build_client(local: bool) -> BookingApiClient:
    if local:
        app = create_app(RepairRecordStore())
        return BookingApiClient(
            ClientSession(base_url="http://storefront.local"),
            transport=httpx.ASGITransport(app=app),
        )
    return BookingApiClient(ClientSession.from_config())


def main() -> None:
    parser = argparse.ArgumentParser(description="Console repair booking")
    parser.add_argument("--local", action="store_true", help="Run the API in-process")
    parser.add_argument(
        "--scenario",
        choices=["booking", "missing-contact"],
        default=None,
        help="Auto-play a pre-scripted submission instead of interactive mode",
    )
    parser.add_argument("--repair-type", default=None, help="Pre-select a repair category")
    parser.add_argument("--description", default=None, help="Pre-fill the issue description")
    args = parser.parse_args()

    prefill = NavigationContext(repair_type=args.repair_type, description=args.description)
    console = ConsoleBooking(_build_client(args.local), prefill)
    try:
        if args.scenario:
            asyncio.run(console.run_scenario(args.scenario))
        else:
            asyncio.run(console.run())
    except (KeyboardInterrupt, EOFError):
        print(f"\n{DIM}Session ended.{RESET}")


if __name__ == "__main__":
    main()
