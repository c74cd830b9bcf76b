"""Pydantic schemas for employees."""

from datetime import date, datetime
from typing import List, Optional
from pydantic import Field, field_validator

from .base import CamelModel, code_as_text


class Dependent(CamelModel):
    name: str
    relation: str
    age: Optional[int] = None
    gender: Optional[str] = None


class EmployeeRegister(CamelModel):
    first_name: str = Field(..., min_length=1, alias="employeeFirstName")
    last_name: str = Field(..., min_length=1, alias="employeeLastName")
    gender: str = Field(..., min_length=1, alias="employeeGender")
    employee_code: str = Field(..., min_length=1)
    phone_number: str = Field(..., min_length=1, alias="employeePhoneNumber")
    date_of_birth: date = Field(..., alias="employeeDOB")
    password: str = Field(..., min_length=1, alias="employeePassword")
    dependents: List[Dependent] = []

    # Runs before min_length, so a blank code is rejected once trimmed
    @field_validator("employee_code", mode="before")
    @classmethod
    def normalize_code(cls, value):
        value = code_as_text(value)
        if isinstance(value, str):
            return value.strip()
        return value


class EmployeeLogin(CamelModel):
    employee_code: Optional[str] = None
    password: Optional[str] = None

    @field_validator("employee_code", mode="before")
    @classmethod
    def normalize_code(cls, value):
        return code_as_text(value)


class EmployeeResponse(CamelModel):
    employee_code: str
    first_name: str = Field(..., alias="employeeFirstName")
    last_name: str = Field(..., alias="employeeLastName")
    gender: str = Field(..., alias="employeeGender")
    phone_number: str = Field(..., alias="employeePhoneNumber")
    date_of_birth: date = Field(..., alias="employeeDOB")
    dependents: List[Dependent] = []
    created_at: Optional[datetime] = None

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def date_only(cls, value):
        if isinstance(value, datetime):
            return value.date()
        return value
