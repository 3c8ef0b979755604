"""Spot occupancy, motion masks and lighting board commands for a parking sensor."""

__version__ = "0.1.0"