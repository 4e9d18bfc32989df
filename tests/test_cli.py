import io
from unittest.mock import patch

import pytest

from railbook.accounts import UserStore
from railbook.cli import LOGIN_FILE, PASSENGER_FILE, TRAIN_FILE, main
from railbook.models import Train, TravelDate
from railbook.railway import Railway
from railbook.storage import read_trains
from railbook.tickets import reserve


def strong_password():
    base = "password"
    return base.capitalize() + "_2025"


def run_cli(monkeypatch, data_dir, lines):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(line + "\n" for line in lines)))
    return main(["--data-dir", str(data_dir)])


def make_railway(data_dir):
    return Railway(data_dir / TRAIN_FILE, data_dir / PASSENGER_FILE)


@pytest.fixture
def with_train(tmp_path):
    railway = make_railway(tmp_path)
    railway.add_train(
        Train(
            101,
            "Express",
            "Pune",
            "Mumbai",
            [TravelDate("01/01/26", 10), TravelDate("02/01/26", 10), TravelDate("03/01/26", 10)],
        )
    )
    return tmp_path


@pytest.fixture
def with_user(with_train):
    UserStore(with_train / LOGIN_FILE).register("alice", strong_password())
    return with_train


@pytest.fixture
def with_officer(with_train):
    UserStore(with_train / LOGIN_FILE).register("officer", strong_password())
    return with_train


def test_quit_immediately(monkeypatch, capsys, tmp_path):
    assert run_cli(monkeypatch, tmp_path, ["3"]) == 0
    out = capsys.readouterr().out
    assert "Application closed." in out
    assert "train_data.txt not found." in out


def test_invalid_main_choice(monkeypatch, capsys, tmp_path):
    assert run_cli(monkeypatch, tmp_path, ["x", "3"]) == 0
    assert "Invalid input. Try again." in capsys.readouterr().out


def test_end_of_input_exits_cleanly(monkeypatch, tmp_path):
    assert run_cli(monkeypatch, tmp_path, []) == 0


def test_sign_up_retries_weak_password(monkeypatch, capsys, tmp_path):
    weak = "password"
    run_cli(monkeypatch, tmp_path, ["1", "bob", weak, strong_password(), "3"])
    out = capsys.readouterr().out
    assert "Invalid password. Try again." in out
    assert "Sign up successful. Please login to proceed." in out
    store = UserStore(tmp_path / LOGIN_FILE)
    assert store.authenticate("bob", strong_password()) is True
    assert store.authenticate("bob", weak) is False


def test_sign_up_existing_user(monkeypatch, capsys, with_user):
    run_cli(monkeypatch, with_user, ["1", "alice", "3"])
    assert "Username already exists. Try another." in capsys.readouterr().out


def test_sign_up_gives_up_after_five_attempts(monkeypatch, capsys, tmp_path):
    weak = "password"
    run_cli(monkeypatch, tmp_path, ["1", "carol"] + [weak] * 5 + ["3"])
    out = capsys.readouterr().out
    assert out.count("Invalid password. Try again.") == 5
    assert "Too many failed attempts." in out
    assert UserStore(tmp_path / LOGIN_FILE).exists("carol") is False


def test_sign_in_without_login_file(monkeypatch, capsys, tmp_path):
    run_cli(monkeypatch, tmp_path, ["2", "3"])
    assert "Login file not found." in capsys.readouterr().out


@patch("time.sleep")
def test_sign_in_locks_out_after_three_failures(sleep, monkeypatch, capsys, with_user):
    wrong = "password"
    lines = ["2"] + ["alice", wrong] * 3 + ["3"]
    assert run_cli(monkeypatch, with_user, lines) == 0
    out = capsys.readouterr().out
    assert out.count("Login failed. Try again.") == 2
    assert "Too many failed attempts. Please try again later." in out
    sleep.assert_called_once_with(1)


def test_reserve_and_booking_details(monkeypatch, capsys, with_user):
    lines = [
        "2", "alice", strong_password(),
        "r", "101", "01/01/26", "2",
        "Ann", "30", "X", "F",
        "Bob", "40", "m",
        "B", "Q",
    ]
    assert run_cli(monkeypatch, with_user, lines) == 0
    out = capsys.readouterr().out
    assert "Sign in successful." in out
    assert "invalid gender please enter again" in out
    assert "Reservation successful." in out
    assert "Booking Details for alice" in out
    assert "Quitting from App" in out

    railway = make_railway(with_user)
    railway.load()
    entry = railway.find_train(101).find_date("01/01/26")
    assert entry.booked_seats == 2
    assert entry.booked_seats + entry.available_seats == entry.total_seats
    [res] = railway.reservations
    assert res.username == "alice"
    assert [(p.name, p.seat_no) for p in res.passengers] == [("Ann", 1), ("Bob", 2)]


def test_reserve_more_than_available(monkeypatch, capsys, with_user):
    lines = ["2", "alice", strong_password(), "R", "101", "01/01/26", "11", "Q"]
    run_cli(monkeypatch, with_user, lines)
    out = capsys.readouterr().out
    assert "Only 10 seats available. Cannot reserve 11 seats." in out
    assert "Reservation unsuccessful." in out
    railway = make_railway(with_user)
    railway.load()
    assert railway.find_train(101).find_date("01/01/26").booked_seats == 0
    assert railway.reservations == []


def test_reserve_unknown_train(monkeypatch, capsys, with_user):
    lines = ["2", "alice", strong_password(), "R", "555", "Q"]
    run_cli(monkeypatch, with_user, lines)
    out = capsys.readouterr().out
    assert "Train number not found" in out
    assert "Reservation unsuccessful." in out


def test_booking_details_without_bookings(monkeypatch, capsys, with_user):
    run_cli(monkeypatch, with_user, ["2", "alice", strong_password(), "b", "q"])
    assert "No bookings found for you." in capsys.readouterr().out


def test_cancel_seat(monkeypatch, capsys, with_user):
    railway = make_railway(with_user)
    railway.load()
    reserve(railway, "alice", 101, "01/01/26", [("Ann", 30, "F"), ("Bob", 40, "M")])

    lines = ["2", "alice", strong_password(), "C", "101", "01/01/26", "1", "Q"]
    run_cli(monkeypatch, with_user, lines)
    out = capsys.readouterr().out
    assert "Seat 1 cancelled successfully." in out
    assert "Cancellation successful." in out

    reloaded = make_railway(with_user)
    reloaded.load()
    assert [p.name for p in reloaded.reservations[0].passengers] == ["Bob"]
    entry = reloaded.find_train(101).find_date("01/01/26")
    assert entry.booked_seats == 1
    assert entry.booked_seats + entry.available_seats == entry.total_seats


def test_cancel_without_reservation(monkeypatch, capsys, with_user):
    lines = ["2", "alice", strong_password(), "c", "101", "01/01/26", "3", "q"]
    run_cli(monkeypatch, with_user, lines)
    out = capsys.readouterr().out
    assert "No matching reservation found." in out
    assert "Cancellation unsuccessful." in out


def test_officer_adds_train(monkeypatch, capsys, with_officer):
    lines = [
        "2", "officer", strong_password(),
        "1", "Shatabdi", "202", "Pune", "Delhi",
        "32/01/26", "01/02/26", "50",
        "02/02/26", "50",
        "03/02/26", "50",
        "3", "4", "3",
    ]
    assert run_cli(monkeypatch, with_officer, lines) == 0
    out = capsys.readouterr().out
    assert "Invalid date format." in out
    assert "Train added successfully." in out
    assert "Returning to main menu..." in out
    assert "Shatabdi" in out
    trains = read_trains(with_officer / TRAIN_FILE)
    assert [t.number for t in trains] == [101, 202]
    assert [d.date for d in trains[1].dates] == ["01/02/26", "02/02/26", "03/02/26"]
    assert all(d.available_seats == d.total_seats for d in trains[1].dates)


def test_officer_deletes_train(monkeypatch, capsys, with_officer):
    lines = ["2", "officer", strong_password(), "2", "101", "4", "3"]
    run_cli(monkeypatch, with_officer, lines)
    assert "Train deleted successfully." in capsys.readouterr().out
    assert read_trains(with_officer / TRAIN_FILE) == []


def test_officer_deletes_missing_train(monkeypatch, capsys, with_officer):
    lines = ["2", "officer", strong_password(), "2", "999", "7", "4", "3"]
    run_cli(monkeypatch, with_officer, lines)
    out = capsys.readouterr().out
    assert "Train not found." in out
    assert "Invalid option." in out
    assert [t.number for t in read_trains(with_officer / TRAIN_FILE)] == [101]