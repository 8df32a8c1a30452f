"""Student fees: tracks what a student owes, has paid, and has let lapse."""

__version__ = "0.1.0"
