"""Diagnostics package.

- diagnostics: pretty_month needs nothing extra; sekki_drift and holiday_diff
  need the diagnostics extras (numpy, matplotlib, jpholiday)
- diagnostics.ephem: optional (requires ephemeris extras + a JPL kernel)
"""

__all__ = ["pretty_month", "sekki_drift", "holiday_diff"]
