"""Console train reservation system: accounts, trains and seat bookings."""

__version__ = "0.1.0"