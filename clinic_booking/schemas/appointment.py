"""Pydantic schemas for appointments."""

from datetime import date, datetime
from typing import Optional, Union
from pydantic import field_validator

from .base import CamelModel, code_as_text
from ..models.appointment import AppointmentStatus


class AppointmentCreate(CamelModel):
    """Booking request.

    Mandatory fields are optional here so that a missing one is reported by
    the scheduler as a 400 before anything touches the database.
    """
    employee_code: Optional[str] = None
    patient_name: Optional[str] = None
    patient_age: Optional[int] = None
    patient_gender: Optional[str] = None
    patient_relation: Optional[str] = None
    patient_phone: Optional[str] = None
    patient_address: Optional[str] = None
    appointment_date: Optional[Union[datetime, date]] = None
    appointment_time: Optional[str] = None
    doctor_code: Optional[str] = None
    notes: Optional[str] = None

    @field_validator("employee_code", "doctor_code", mode="before")
    @classmethod
    def codes_as_text(cls, value):
        return code_as_text(value)


class AppointmentUpdate(CamelModel):
    """Status and/or medical report change; nothing else is writable."""
    status: Optional[AppointmentStatus] = None
    medical_report: Optional[str] = None


class AppointmentResponse(CamelModel):
    id: str
    employee_code: str
    patient_name: str
    patient_age: Optional[int] = None
    patient_gender: Optional[str] = None
    patient_relation: Optional[str] = None
    patient_phone: Optional[str] = None
    patient_address: Optional[str] = None
    doctor_code: str
    appointment_date: date
    appointment_time: str
    token_number: int
    status: AppointmentStatus
    medical_report: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("appointment_date", mode="before")
    @classmethod
    def date_only(cls, value):
        if isinstance(value, datetime):
            return value.date()
        return value
