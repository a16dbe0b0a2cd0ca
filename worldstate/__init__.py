"""WorldState - live world event map backend and stream client."""

__version__ = "0.1.0"
