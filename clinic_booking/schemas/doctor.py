"""Pydantic schemas for doctors."""

from typing import Optional
from pydantic import field_validator

from .base import CamelModel, code_as_text


class DoctorLogin(CamelModel):
    doctor_code: Optional[str] = None
    password: Optional[str] = None

    @field_validator("doctor_code", mode="before")
    @classmethod
    def normalize_code(cls, value):
        return code_as_text(value)


class DoctorResponse(CamelModel):
    doctor_code: str
    name: str
    specialization: Optional[str] = None
    is_available: bool = True
