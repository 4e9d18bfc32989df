import pytest

from railbook.models import Reservation, Train, TravelDate
from railbook.railway import Railway, RailwayError, format_train_table

DATES = ("01/01/26", "02/01/26", "03/01/26")


def _train(number=101, seats=5, dates=DATES, name="Express"):
    return Train(number, name, "Pune", "Delhi", [TravelDate(d, seats) for d in dates])


@pytest.fixture
def railway(tmp_path):
    return Railway(tmp_path / "train_data.txt", tmp_path / "passenger_data.txt")


def _reloaded(railway):
    other = Railway(railway.train_path, railway.passenger_path)
    other.load()
    return other


def test_add_train_persists(railway):
    train = _train()
    railway.add_train(train)
    assert _reloaded(railway).trains == [train]


def test_trains_keep_insertion_order(railway):
    railway.add_train(_train(7))
    railway.add_train(_train(3))
    assert [t.number for t in _reloaded(railway).trains] == [7, 3]


def test_find_train(railway):
    railway.add_train(_train(101))
    railway.add_train(_train(202))
    assert railway.find_train(202).number == 202
    assert railway.find_train(303) is None


def test_add_train_rejects_bad_date(railway):
    with pytest.raises(RailwayError):
        railway.add_train(_train(dates=("01/01/26", "32/01/26", "03/01/26")))
    assert railway.trains == []


def test_add_train_needs_three_dates(railway):
    with pytest.raises(RailwayError):
        railway.add_train(_train(dates=DATES[:2]))


def test_add_train_rejects_spaces(railway):
    with pytest.raises(RailwayError):
        railway.add_train(_train(name="Night Mail"))


def test_delete_train(railway):
    railway.add_train(_train(101))
    railway.add_train(_train(202))
    removed = railway.delete_train(101)
    assert removed.number == 101
    assert [t.number for t in _reloaded(railway).trains] == [202]


def test_delete_missing_train_raises(railway):
    railway.add_train(_train(101))
    with pytest.raises(RailwayError):
        railway.delete_train(999)
    assert len(railway.trains) == 1


def test_load_missing_files_gives_empty(railway):
    railway.load()
    assert railway.trains == []
    assert railway.reservations == []


def test_reservations_round_trip(railway):
    res = Reservation(101, "01/01/26", 0, "alice")
    railway.reservations.append(res)
    railway.save_reservations()
    assert _reloaded(railway).reservations == [res]


def test_format_train_table():
    table = format_train_table([_train()])
    lines = table.splitlines()
    assert "T-No    Train Name      Source     Destination" in lines
    assert "Date         Total Seat   Waiting List   Booked   Available" in lines
    date_rows = [line for line in lines if line.startswith(DATES)]
    assert len(date_rows) == 3
    assert date_rows[0].split() == ["01/01/26", "5", "0", "0", "5"]


def test_format_empty_table():
    assert format_train_table([]) == ""