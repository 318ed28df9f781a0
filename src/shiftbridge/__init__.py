"""shiftbridge - schema-validated agent actions over host session state."""

__version__ = "0.1.0"
