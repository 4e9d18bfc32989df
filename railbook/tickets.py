"""Reserving and cancelling seats, and listing a user's bookings."""

from __future__ import annotations

from typing import Iterable

from .models import Passenger, Reservation
from .railway import Railway
from .storage import MAX_NAME_LENGTH

GENDERS = frozenset("MFOmfo")
_RULE = "-" * 52


class ReservationError(Exception):
    """Raised when a reservation or cancellation cannot be made."""


def reserve(
    railway: Railway,
    user: str,
    train_number: int,
    date: str,
    passengers: Iterable[tuple[str, int, str]],
) -> Reservation:
    """Book one seat per (name, age, gender) entry and save both files."""
    train = railway.find_train(train_number)
    if train is None:
        raise ReservationError("Train number not found")
    entry = train.find_date(date)
    if entry is None:
        raise ReservationError("Date not found")

    details = list(passengers)
    for name, age, gender in details:
        if not name:
            raise ReservationError("Passenger name must not be empty.")
        if age < 0:
            raise ReservationError(f"Invalid age for {name}: {age}")
        if len(gender) != 1 or gender not in GENDERS:
            raise ReservationError(f"Invalid gender for {name}: {gender!r}")

    count = len(details)
    if count > entry.available_seats:
        raise ReservationError(
            f"Only {entry.available_seats} seats available. Cannot reserve {count} seats."
        )

    first_seat = entry.booked_seats + 1
    entry.booked_seats += count
    entry.available_seats -= count
    railway.save_trains()

    reservation = Reservation(
        train_number=train_number,
        date=date,
        seats=count,
        username=user,
        passengers=[
            Passenger(name[:MAX_NAME_LENGTH], age, gender, seat, user)
            for seat, (name, age, gender) in enumerate(details, start=first_seat)
        ],
    )
    railway.reservations.append(reservation)
    railway.save_reservations()
    return reservation


def cancel(
    railway: Railway, user: str, train_number: int, date: str, seat_no: int
) -> Passenger:
    """Cancel the user's seat on a train and date, save, and return the passenger."""
    for res in railway.reservations:
        if res.train_number != train_number or res.date != date or res.username != user:
            continue
        passenger = next((p for p in res.passengers if p.seat_no == seat_no), None)
        if passenger is None:
            continue
        res.passengers.remove(passenger)
        train = railway.find_train(train_number)
        entry = train.find_date(date) if train is not None else None
        if entry is not None:
            entry.booked_seats -= 1
            entry.available_seats += 1
        railway.save_trains()
        railway.save_reservations()
        return passenger
    raise ReservationError("No matching reservation found.")


def booking_details(railway: Railway, user: str) -> str:
    """Render every reservation made by user as text."""
    parts = [f"\n-------------------- Booking Details for {user} --------------------\n"]
    found = False
    for res in railway.reservations:
        if res.username != user:
            continue
        found = True
        parts.append(f"\nTrain No: {res.train_number}\nDate: {res.date}\n")
        parts.append("Passenger Details:\n")
        parts.append(f"{_RULE}\n")
        parts.append("Name\t\tAge\tGender\tSeat No\n")
        parts.append(f"{_RULE}\n")
        parts.extend(
            f"{p.name:<10}\t{p.age:>3}\t  {p.gender}\t   {p.seat_no}\n"
            for p in res.passengers
        )
    if not found:
        parts.append("No bookings found for you.\n")
    return "".join(parts)