"""Bookings app package.

Holds the hostel and auditorium booking tables, the display ID codec, date
normalization and the lookup that searches both tables with one key.
"""
