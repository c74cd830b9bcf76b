"""
Clinic Booking Backend

A FastAPI-based system for booking clinic appointments, with per-doctor
daily token queues, employee registration and doctor access.
"""

__version__ = "1.0.0"
