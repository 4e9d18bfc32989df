"""The set of trains and reservations, persisted to two text files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional, Union

from .models import Reservation, Train
from .storage import (
    DATES_PER_TRAIN,
    read_reservations,
    read_trains,
    write_reservations,
    write_trains,
)
from .validation import is_valid_date

_RULE = "-" * 77


class RailwayError(Exception):
    """Raised when a train operation cannot be carried out."""


class Railway:
    """Trains and reservations together with the files that hold them."""

    def __init__(
        self,
        train_path: Union[str, "os.PathLike[str]"],
        passenger_path: Union[str, "os.PathLike[str]"],
    ) -> None:
        self.train_path = Path(train_path)
        self.passenger_path = Path(passenger_path)
        self.trains: list[Train] = []
        self.reservations: list[Reservation] = []

    def load(self) -> None:
        """Read trains and reservations from their files; missing files give empty lists."""
        self.trains = read_trains(self.train_path) if self.train_path.exists() else []
        self.reservations = (
            read_reservations(self.passenger_path) if self.passenger_path.exists() else []
        )

    def save_trains(self) -> None:
        """Write all trains to the train file."""
        write_trains(self.trains, self.train_path)

    def save_reservations(self) -> None:
        """Write all reservations to the passenger file."""
        write_reservations(self.reservations, self.passenger_path)

    def find_train(self, number: int) -> Optional[Train]:
        """Return the first train with this number, or None."""
        return next((train for train in self.trains if train.number == number), None)

    def add_train(self, train: Train) -> None:
        """Append a train and save the train file."""
        for text in (train.name, train.source, train.destination):
            if not text or any(ch.isspace() for ch in text):
                raise RailwayError(f"Invalid field {text!r}: must be one word.")
        if len(train.dates) != DATES_PER_TRAIN:
            raise RailwayError(f"A train needs exactly {DATES_PER_TRAIN} travel dates.")
        for entry in train.dates:
            if not is_valid_date(entry.date):
                raise RailwayError(f"Invalid date format: {entry.date!r}")
        self.trains.append(train)
        self.save_trains()

    def delete_train(self, number: int) -> Train:
        """Remove the first train with this number, save, and return it."""
        train = self.find_train(number)
        if train is None:
            raise RailwayError("Train not found.")
        self.trains.remove(train)
        self.save_trains()
        return train


def format_train_table(trains: Iterable[Train]) -> str:
    """Render trains and their seat counts as a text table."""
    parts = []
    for train in trains:
        parts.append(f"\n{_RULE}\n")
        parts.append("T-No    Train Name      Source     Destination\n")
        parts.append(
            f"{train.number:<7} {train.name:<15} {train.source:<10} {train.destination:<12}\n"
        )
        parts.append(f"{_RULE}\n")
        parts.append("Date         Total Seat   Waiting List   Booked   Available\n")
        parts.append(f"{_RULE}\n")
        parts.extend(
            f"{d.date:<12} {d.total_seats:<12} {d.waiting_list:<14} "
            f"{d.booked_seats:<8} {d.available_seats:<12}\n"
            for d in train.dates
        )
    return "".join(parts)