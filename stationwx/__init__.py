"""
stationwx - station weather advisory banner.

Fetches the latest NWS observation for one station, derives the flight
category and a runway preference, and renders both as a one-line banner.
"""

__version__ = "1.0.0"
