from datetime import date
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...api.deps import get_scheduler, rate_limit_check
from ...services.appointment_service import AppointmentScheduler
from ...services.doctor_service import DoctorService
from ...schemas.appointment import AppointmentResponse
from ...schemas.doctor import DoctorLogin, DoctorResponse

router = APIRouter(prefix="/doctors", tags=["Doctors"])

@router.get("", response_model=List[DoctorResponse])
async def list_doctors(db: Session = Depends(get_db)):
    """List all doctors."""
    return DoctorService(db).list_doctors()

@router.post("/login", response_model=DoctorResponse)
async def doctor_login(
    login_data: DoctorLogin,
    db: Session = Depends(get_db),
    _: None = Depends(rate_limit_check)
):
    """Log a doctor in to the appointment console."""
    return DoctorService(db).authenticate_doctor(login_data)

@router.get("/{doctor_code}/appointments", response_model=List[AppointmentResponse])
async def list_doctor_appointments(
    doctor_code: str,
    day: Optional[date] = Query(None, alias="date"),
    scheduler: AppointmentScheduler = Depends(get_scheduler)
):
    """A doctor's appointments in queue order, optionally for a single day."""
    if day is not None:
        return scheduler.list_by_doctor_on_day(doctor_code, day)
    return scheduler.list_by_doctor(doctor_code)
