"""Bus route inventory with atomic seat reservation and booking notifications."""

__version__ = "1.0.0"
