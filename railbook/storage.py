"""Text file formats for the train list and the reservation list."""

from __future__ import annotations

import os
import re
from itertools import islice
from typing import Iterable, Optional, Union

from .models import Passenger, Reservation, Train, TravelDate

PathLike = Union[str, "os.PathLike[str]"]

DATES_PER_TRAIN = 3
MAX_NAME_LENGTH = 99
SEPARATOR = "-" * 40

_HEADER_FIELDS = 4
_DATE_FIELDS = 5

_RESERVATION_RE = re.compile(
    r"Train No:\s*(\d+), Date:\s*([^\s,]{1,8}), "
    r"Seats Reserved:\s*(\d+), usr_name:\s*(\S+)"
)
_AGE_RE = re.compile(r", Age:\s*(\d+)")
_GENDER_RE = re.compile(r", Gender:\s*(\S)")
_SEAT_RE = re.compile(r", Seat:\s*([-+]?\d+)")
_USER_RE = re.compile(r", User:\s*(\S+)")


def format_trains(trains: Iterable[Train]) -> str:
    """Render trains in the train data file format."""
    lines = []
    for train in trains:
        lines.append(f"{train.number} {train.name} {train.source} {train.destination}")
        lines.extend(
            f"{d.date} {d.total_seats} {d.booked_seats} {d.waiting_list} {d.available_seats}"
            for d in train.dates
        )
    return "".join(line + "\n" for line in lines)


def parse_trains(text: str) -> list[Train]:
    """Parse the train data file format; reading stops at the first bad header."""
    tokens = iter(text.split())
    trains = []
    while True:
        header = list(islice(tokens, _HEADER_FIELDS))
        if len(header) < _HEADER_FIELDS:
            break
        try:
            number = int(header[0])
        except ValueError:
            break
        dates = []
        for _ in range(DATES_PER_TRAIN):
            fields = list(islice(tokens, _DATE_FIELDS))
            if len(fields) < _DATE_FIELDS:
                raise ValueError(f"truncated record for train {number}")
            date, *counts = fields
            try:
                total, booked, waiting, available = (int(value) for value in counts)
            except ValueError as exc:
                raise ValueError(f"bad seat counts for train {number}: {counts}") from exc
            dates.append(TravelDate(date, total, booked, waiting, available))
        trains.append(Train(number, header[1], header[2], header[3], dates))
    return trains


def format_reservations(reservations: Iterable[Reservation]) -> str:
    """Render reservations in the passenger data file format."""
    lines = []
    for res in reservations:
        lines.append(
            f"Train No: {res.train_number}, Date: {res.date}, "
            f"Seats Reserved: {res.seats}, usr_name: {res.username}"
        )
        lines.extend(
            f" Passenger {count}: Name: {pax.name}, Age: {pax.age}, "
            f"Gender: {pax.gender}, Seat: {pax.seat_no}, User: {pax.username}"
            for count, pax in enumerate(res.passengers, start=1)
        )
        lines.append(SEPARATOR)
    return "".join(line + "\n" for line in lines)


def _parse_passenger(line: str) -> Optional[Passenger]:
    name_at = line.find("Name: ")
    age_at = line.find(", Age: ")
    gender_at = line.find(", Gender: ")
    seat_at = line.find(", Seat: ")
    user_at = line.find(", User: ")
    if -1 in (name_at, age_at, gender_at, seat_at, user_at):
        return None
    name = line[name_at + len("Name: "):age_at][:MAX_NAME_LENGTH]
    age = _AGE_RE.match(line, age_at)
    gender = _GENDER_RE.match(line, gender_at)
    seat = _SEAT_RE.match(line, seat_at)
    user = _USER_RE.match(line, user_at)
    if not (age and gender and seat and user):
        return None
    return Passenger(
        name=name,
        age=int(age.group(1)),
        gender=gender.group(1),
        seat_no=int(seat.group(1)),
        username=user.group(1),
    )


def parse_reservations(text: str) -> list[Reservation]:
    """Parse the passenger data file format, skipping malformed lines."""
    reservations: list[Reservation] = []
    for line in text.splitlines():
        if line.startswith("Train No:"):
            match = _RESERVATION_RE.match(line)
            if match is None:
                continue
            reservations.append(
                Reservation(
                    train_number=int(match.group(1)),
                    date=match.group(2),
                    seats=int(match.group(3)),
                    username=match.group(4),
                )
            )
        elif line.startswith(" Passenger"):
            if not reservations:
                continue
            passenger = _parse_passenger(line)
            if passenger is not None:
                reservations[-1].passengers.append(passenger)
    return reservations


def write_trains(trains: Iterable[Train], path: PathLike) -> None:
    """Write trains to path, replacing its contents."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(format_trains(trains))


def read_trains(path: PathLike) -> list[Train]:
    """Read trains from path."""
    with open(path, encoding="utf-8") as fh:
        return parse_trains(fh.read())


def write_reservations(reservations: Iterable[Reservation], path: PathLike) -> None:
    """Write reservations to path, replacing its contents."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(format_reservations(reservations))


def read_reservations(path: PathLike) -> list[Reservation]:
    """Read reservations from path."""
    with open(path, encoding="utf-8") as fh:
        return parse_reservations(fh.read())