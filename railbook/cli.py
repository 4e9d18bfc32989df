"""Interactive console for signing in, managing trains and booking tickets."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .accounts import (
    MAX_ATTEMPTS_SIGN_IN,
    MAX_ATTEMPTS_SIGN_UP,
    OFFICER_USERNAME,
    AccountError,
    UserStore,
)
from .models import Train, TravelDate
from .railway import Railway, RailwayError, format_train_table
from .storage import DATES_PER_TRAIN
from .tickets import GENDERS, ReservationError, booking_details, cancel, reserve
from .validation import is_valid_date, is_valid_number, parse_int

TRAIN_FILE = "train_data.txt"
PASSENGER_FILE = "passenger_data.txt"
LOGIN_FILE = "usr_logins.txt"
LOCKOUT_SECONDS = 1

_SIGN_UP_PROMPT = (
    "Enter password (min 8 chars, mix of upper, lower, digit, special): "
)
_SIGN_IN_PROMPT = "Enter password:"

MAIN_MENU = (
    "-------------MENU-1-----------------",
    "1: Sign-Up",
    "2: Sign-In",
    "3: Quit",
)
USER_MENU = (
    "-------------MENU-2-----------------",
    "R/r: To Reserve Ticket",
    "C/c: To Cancel Ticket",
    "B/b: Booking Details",
    "Q/q: Quit from App",
)
OFFICER_MENU = (
    "\n----- Officer Menu -----",
    "1. Add Train",
    "2. Delete Train",
    "3. Display Trains",
    "4. Quit",
)


class _Console:
    """One interactive session over an input and an output stream."""

    def __init__(
        self, railway: Railway, users: UserStore, stdin: TextIO, stdout: TextIO
    ) -> None:
        self.railway = railway
        self.users = users
        self.stdin = stdin
        self.stdout = stdout
        self.current_user = ""

    # -- input and output -------------------------------------------------

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def ask_line(self, prompt: str, newline: bool = False) -> str:
        print(prompt, end="\n" if newline else "", file=self.stdout)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask_word(self, prompt: str, newline: bool = False) -> str:
        while True:
            words = self.ask_line(prompt, newline).split()
            if words:
                return words[0]

    def ask_char(self, prompt: str, newline: bool = False) -> str:
        return self.ask_line(prompt, newline).strip()[:1]

    def ask_number(
        self, prompt: str, newline: bool = False, minimum: Optional[int] = None
    ) -> int:
        while True:
            word = self.ask_word(prompt, newline)
            if is_valid_number(word) and word != "-":
                value = parse_int(word)
                if minimum is None or value >= minimum:
                    return value
            self.say("Please enter a valid number.")

    # -- accounts ---------------------------------------------------------

    def sign_up(self) -> bool:
        username = self.ask_line("Enter username (no spaces): ", newline=True).strip()
        if not username or any(ch.isspace() for ch in username):
            self.say("Username must be non-empty and contain no spaces.")
            return False
        if self.users.exists(username):
            self.say("Username already exists. Try another.")
            return False
        for _ in range(MAX_ATTEMPTS_SIGN_UP):
            typed = self.ask_line(_SIGN_UP_PROMPT, newline=True)
            try:
                self.users.register(username, typed)
            except AccountError:
                self.say("Invalid password. Try again.")
                continue
            return True
        self.say("Too many failed attempts.")
        return False

    def sign_in(self) -> bool:
        if not self.users.path.exists():
            self.say("Login file not found.")
            return False
        for attempt in range(1, MAX_ATTEMPTS_SIGN_IN + 1):
            username = self.ask_line("Enter username:", newline=True)
            typed = self.ask_line(_SIGN_IN_PROMPT, newline=True)
            if self.users.authenticate(username, typed):
                self.current_user = username
                if username == OFFICER_USERNAME:
                    self.officer_menu()
                    return False
                return True
            if attempt >= MAX_ATTEMPTS_SIGN_IN:
                self.say("Too many failed attempts. Please try again later.")
                time.sleep(LOCKOUT_SECONDS)
                return False
            self.say("Login failed. Try again.")
        return False

    # -- officer operations -----------------------------------------------

    def officer_menu(self) -> None:
        while True:
            for line in OFFICER_MENU:
                self.say(line)
            choice = self.ask_number("Choice: ")
            if choice == 1:
                if self.add_train():
                    self.say("Train added successfully.")
            elif choice == 2:
                if self.delete_train():
                    self.say("Train deleted successfully.")
            elif choice == 3:
                self.stdout.write(format_train_table(self.railway.trains))
            elif choice == 4:
                self.say("Returning to main menu...")
                return
            else:
                self.say("Invalid option.")

    def add_train(self) -> bool:
        name = self.ask_word("Enter Train Name: ")
        number = self.ask_number("Enter Train Number: ", minimum=0)
        source = self.ask_word("Enter Source: ")
        destination = self.ask_word("Enter Destination: ")
        self.say(f"Enter {DATES_PER_TRAIN} travel dates and total seats:")
        dates = []
        for index in range(1, DATES_PER_TRAIN + 1):
            while True:
                date = self.ask_word(f"Date {index} (dd/mm/yy): ")
                if is_valid_date(date):
                    break
                self.say("Invalid date format.")
            total = self.ask_number("Total seats: ", minimum=0)
            dates.append(TravelDate(date, total))
        try:
            self.railway.add_train(Train(number, name, source, destination, dates))
        except RailwayError as exc:
            self.say(str(exc))
            return False
        return True

    def delete_train(self) -> bool:
        number = self.ask_number("Enter the train number to delete: ", minimum=0)
        try:
            self.railway.delete_train(number)
        except RailwayError as exc:
            self.say(str(exc))
            return False
        return True

    # -- passenger operations ---------------------------------------------

    def ask_passenger(self, index: int) -> tuple[str, int, str]:
        self.say(f"Enter details for passenger {index}:")
        name = self.ask_word("Name: ")
        age = self.ask_number("Age: ", minimum=0)
        while True:
            gender = self.ask_char("Gender (M/F/O): ")
            if gender and gender in GENDERS:
                return name, age, gender
            self.say("invalid gender please enter again")

    def reserve_ticket(self) -> bool:
        self.stdout.write(format_train_table(self.railway.trains))
        number = self.ask_number("Enter the train number:", newline=True, minimum=0)
        train = self.railway.find_train(number)
        if train is None:
            self.say("Train number not found")
            return False
        date = self.ask_word("Enter the date (dd/mm/yy) of travelling:", newline=True)
        entry = train.find_date(date)
        if entry is None:
            self.say("Date not found")
            return False
        count = self.ask_number(
            "Enter the number of seats to reserve:", newline=True, minimum=0
        )
        if count > entry.available_seats:
            self.say(
                f"Only {entry.available_seats} seats available. "
                f"Cannot reserve {count} seats."
            )
            return False
        details = [self.ask_passenger(index) for index in range(1, count + 1)]
        try:
            reserve(self.railway, self.current_user, number, date, details)
        except (ReservationError, OSError) as exc:
            self.say(str(exc))
            return False
        self.say("Passenger data saved successfully.")
        return True

    def cancel_ticket(self) -> bool:
        number = self.ask_number("Enter Train Number: ", minimum=0)
        date = self.ask_word("Enter Travel Date (dd/mm/yy): ")
        seat = self.ask_number("Enter Seat Number to Cancel: ")
        try:
            cancel(self.railway, self.current_user, number, date, seat)
        except ReservationError as exc:
            self.say(str(exc))
            return False
        self.say(f"Seat {seat} cancelled successfully.")
        return True

    # -- menus ------------------------------------------------------------

    def user_menu(self) -> None:
        while True:
            for line in USER_MENU:
                self.say(line)
            choice = self.ask_char("Enter your option:", newline=True).upper()
            if choice == "R":
                if self.reserve_ticket():
                    self.say("Reservation successful.")
                else:
                    self.say("Reservation unsuccessful.")
            elif choice == "C":
                if self.cancel_ticket():
                    self.say("Cancellation successful.")
                else:
                    self.say("Cancellation unsuccessful.")
            elif choice == "B":
                self.stdout.write(booking_details(self.railway, self.current_user))
            elif choice == "Q":
                self.say("Quitting from App")
                return
            else:
                self.say("Invalid option. Please enter again.")

    def run(self) -> int:
        while True:
            for line in MAIN_MENU:
                self.say(line)
            choice = self.ask_char("Enter your choice:", newline=True)
            if choice == "1":
                if self.sign_up():
                    self.say("Sign up successful. Please login to proceed.")
            elif choice == "2":
                if self.sign_in():
                    self.say("Sign in successful.")
                    self.user_menu()
                    return 0
            elif choice == "3":
                self.say("Application closed.")
                return 0
            else:
                self.say("Invalid input. Try again.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the interactive booking console; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="railbook", description="Train reservation console."
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("."),
        help="directory holding the train, passenger and login files",
    )
    args = parser.parse_args(argv)
    data_dir: Path = args.data_dir

    railway = Railway(data_dir / TRAIN_FILE, data_dir / PASSENGER_FILE)
    for path in (railway.train_path, railway.passenger_path):
        if not path.exists():
            print(f"{path.name} not found.")
    try:
        railway.load()
    except (OSError, ValueError) as exc:
        print(f"Failed to load data: {exc}", file=sys.stderr)
        return 1

    console = _Console(railway, UserStore(data_dir / LOGIN_FILE), sys.stdin, sys.stdout)
    try:
        return console.run()
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())