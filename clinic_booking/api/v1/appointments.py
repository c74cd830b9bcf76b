from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional

from ...api.deps import get_scheduler
from ...services.appointment_service import AppointmentScheduler
from ...schemas.appointment import (
    AppointmentCreate, AppointmentUpdate, AppointmentResponse
)

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.post("", response_model=AppointmentResponse, status_code=status.HTTP_201_CREATED)
async def create_appointment(
    appointment_data: AppointmentCreate,
    scheduler: AppointmentScheduler = Depends(get_scheduler)
):
    """Book an appointment and assign the doctor's next token for that day."""
    return scheduler.create_appointment(appointment_data)

@router.get("", response_model=List[AppointmentResponse])
async def list_patient_appointments(
    employee_code: Optional[str] = Query(None, alias="employeeCode"),
    patient_name: Optional[str] = Query(None, alias="patientName"),
    scheduler: AppointmentScheduler = Depends(get_scheduler)
):
    """List an employee's appointments for one patient."""
    return scheduler.list_by_employee_and_patient(employee_code, patient_name)

@router.get("/{appointment_id}", response_model=AppointmentResponse)
async def get_appointment(
    appointment_id: str,
    scheduler: AppointmentScheduler = Depends(get_scheduler)
):
    return scheduler.get_appointment(appointment_id)

@router.patch("/{appointment_id}", response_model=AppointmentResponse)
async def update_appointment(
    appointment_id: str,
    changes: AppointmentUpdate,
    scheduler: AppointmentScheduler = Depends(get_scheduler)
):
    """Update the status and/or medical report of an appointment."""
    return scheduler.update_status_or_report(appointment_id, changes)

@router.delete("/{appointment_id}")
async def delete_appointment(
    appointment_id: str,
    scheduler: AppointmentScheduler = Depends(get_scheduler)
):
    """Delete a cancelled appointment."""
    scheduler.delete_appointment(appointment_id)

    return {"message": "Appointment deleted"}
