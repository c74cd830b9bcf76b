"""
Test suite for the Clinic Booking Backend.

Contains unit and integration tests for token assignment, the appointment
lifecycle and the employee and doctor endpoints.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
