# railbook

A console train reservation system. Passengers sign up, sign in, and then
reserve and cancel seats on trains. The `officer` account manages the list of
trains.

## Installation

```
pip install .
```

## Usage

```
railbook [--data-dir DIR]
```

`--data-dir` is the directory that holds the data files. The default is the
current directory. If the train or passenger file is missing, a "not found"
notice is printed and the program starts with an empty list.

The first menu offers:

1. Sign-Up. Choose a username with no spaces, then a password. The password
   must be at least 8 characters long and contain no spaces. It must include
   an upper-case letter, a lower-case letter, a digit and one of
   `@ # ! $ % & _`. You get five tries at the password.
2. Sign-In. You get three tries. After the third failure there is a one-second
   pause and you return to the menu. Sign-in needs the login file, so at least
   one account must have been created first.
3. Quit.

After a passenger signs in, the second menu offers these choices, in upper or
lower case:

- `R`: reserve seats. It shows all trains, then asks for a train number, one
  of that train's travel dates and the number of seats. For each passenger it
  asks for a name, an age and a gender (M/F/O). Seats are numbered on from the
  seats already booked on that date.
- `C`: cancel one of your own seats, given the train number, date and seat
  number.
- `B`: list your own bookings.
- `Q`: quit the application.

Signing in as `officer` opens the officer menu instead. From it you can add a
train, delete a train by number, or display all trains. A train's name, source
and destination are each a single word. Every train has exactly three travel
dates in `dd/mm/yy` form, each with its own seat count. A date needs a day from
1 to 31, a month from 1 to 12 and a year of 25 or later. Choosing "Quit" in the
officer menu returns to the first menu.

## Data files

All state is kept as plain text:

- `usr_logins.txt`: one `username password` pair per line
- `train_data.txt`: a line per train (`number name source destination`),
  followed by three lines of `date total booked waiting available`
- `passenger_data.txt`: each reservation, its passengers, and a separator
  line

## Library use

The pieces behind the console can be used on their own:

- `railbook.validation`: `is_valid_number`, `parse_int`, `is_valid_date`,
  `is_strong_password`
- `railbook.models`: the dataclasses `Train` (with `find_date`), `TravelDate`,
  `Passenger` and `Reservation`
- `railbook.storage`: `format_trains` / `parse_trains`,
  `format_reservations` / `parse_reservations`, and the file helpers
  `write_trains`, `read_trains`, `write_reservations`, `read_reservations`
- `railbook.accounts`: `UserStore` with `exists`, `register` and
  `authenticate`; `register` raises `AccountError`
- `railbook.railway`: `Railway` with `load`, `save_trains`,
  `save_reservations`, `find_train`, `add_train` and `delete_train`, which
  raise `RailwayError`; also `format_train_table`
- `railbook.tickets`: `reserve`, `cancel` and `booking_details`; the first two
  raise `ReservationError`

```python
from railbook.models import Train, TravelDate
from railbook.railway import Railway
from railbook.tickets import booking_details, reserve

railway = Railway("train_data.txt", "passenger_data.txt")
railway.load()
railway.add_train(Train(12345, "Express", "Alpha", "Beta", [
    TravelDate("01/06/25", 50),
    TravelDate("02/06/25", 50),
    TravelDate("03/06/25", 50),
]))
reserve(railway, "alice", 12345, "01/06/25", [("Alice", 30, "F")])
print(booking_details(railway, "alice"))
```

`reserve` and `cancel` update the seat counts and save both files.

## Limitations

- Passwords are stored in the login file as plain text.
- The waiting-list count is stored and shown, but no operation changes it. A
  reservation that needs more seats than are available is refused.
- There is no way to edit a train. An officer can only add or delete one.

## Tests

```
pip install .[test]
pytest
```