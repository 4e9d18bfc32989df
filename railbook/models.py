"""Data records for trains, travel dates, passengers and reservations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class TravelDate:
    """Seat accounting for one train on one travel date."""

    date: str
    total_seats: int
    booked_seats: int = 0
    waiting_list: int = 0
    available_seats: Optional[int] = None

    def __post_init__(self) -> None:
        if self.available_seats is None:
            self.available_seats = self.total_seats - self.booked_seats


@dataclass
class Train:
    """A train and the dates it runs on."""

    number: int
    name: str
    source: str
    destination: str
    dates: list[TravelDate] = field(default_factory=list)

    def find_date(self, date: str) -> Optional[TravelDate]:
        """Return the travel date entry matching date, or None."""
        return next((entry for entry in self.dates if entry.date == date), None)


@dataclass
class Passenger:
    """A passenger holding one seat."""

    name: str
    age: int
    gender: str
    seat_no: int
    username: str


@dataclass
class Reservation:
    """A booking of seats on one train and date, made by one user."""

    train_number: int
    date: str
    seats: int
    username: str
    passengers: list[Passenger] = field(default_factory=list)