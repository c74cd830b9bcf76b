from contextlib import contextmanager
from datetime import date, datetime
from typing import List, Optional, Union
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.dates import day_bounds
from ..core.exceptions import (
    ValidationError, NotFoundError, ForbiddenError, ConflictError, StoreError
)
from ..models.appointment import Appointment, AppointmentStatus
from ..schemas.appointment import AppointmentCreate, AppointmentUpdate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "employee_code", "patient_name", "appointment_date", "appointment_time", "doctor_code"
)

# Queue order used by every listing
QUEUE_ORDER = (
    Appointment.appointment_date.asc(),
    Appointment.appointment_time.asc(),
    Appointment.token_number.asc(),
)

def patient_name_key(name: str) -> str:
    """Whole-name, case-insensitive lookup key (Unicode-aware)."""
    return name.strip().casefold()

def _is_blank(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()

class AppointmentScheduler:
    """Books appointments into per-doctor daily token queues.

    Token numbers are unique per (doctor, UTC calendar day). Two concurrent
    bookings may compute the same next token; the unique constraint on
    ``(doctor_code, appointment_date, token_number)`` lets only one of them
    commit and the loser retries with a fresh read, up to ``max_attempts``.
    """

    def __init__(self, db: Session, max_attempts: Optional[int] = None):
        self.db = db
        self.max_attempts = max_attempts or settings.TOKEN_ASSIGNMENT_MAX_ATTEMPTS

    def create_appointment(self, data: AppointmentCreate) -> Appointment:
        """Validate the request and book it under the next free token."""
        missing = [name for name in REQUIRED_FIELDS if _is_blank(getattr(data, name))]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")

        doctor_code = data.doctor_code.strip()
        day_start, day_end = day_bounds(data.appointment_date)

        for attempt in range(1, self.max_attempts + 1):
            try:
                appointment = self._book(data, doctor_code, day_start, day_end)
            except ConflictError as exc:
                logger.warning(f"{exc} (attempt {attempt}/{self.max_attempts}), retrying")
                continue

            logger.info(
                f"Booked token {appointment.token_number} with doctor {doctor_code} "
                f"on {day_start.date()}"
            )
            return appointment

        logger.error(
            f"Gave up assigning a token for doctor {doctor_code} on {day_start.date()} "
            f"after {self.max_attempts} attempts"
        )
        raise StoreError("Could not assign a token number, please retry")

    def list_by_employee_and_patient(
        self, employee_code: Optional[str], patient_name: Optional[str]
    ) -> List[Appointment]:
        """Appointments booked by an employee for one patient (name matched case-insensitively)."""
        if _is_blank(employee_code) or _is_blank(patient_name):
            raise ValidationError("Missing employeeCode or patientName")

        with self._store("list patient appointments"):
            return self.db.query(Appointment).filter(
                Appointment.employee_code == str(employee_code).strip(),
                Appointment.patient_name_key == patient_name_key(patient_name)
            ).order_by(*QUEUE_ORDER).all()

    def list_by_doctor(self, doctor_code: str) -> List[Appointment]:
        """Every appointment for a doctor, in queue order."""
        with self._store("list doctor appointments"):
            return self.db.query(Appointment).filter(
                Appointment.doctor_code == str(doctor_code).strip()
            ).order_by(*QUEUE_ORDER).all()

    def list_by_doctor_on_day(
        self, doctor_code: str, day: Union[date, datetime]
    ) -> List[Appointment]:
        """A doctor's queue for a single calendar day."""
        day_start, day_end = day_bounds(day)
        with self._store("list doctor appointments for day"):
            return self.db.query(Appointment).filter(
                Appointment.doctor_code == str(doctor_code).strip(),
                Appointment.appointment_date >= day_start,
                Appointment.appointment_date < day_end
            ).order_by(*QUEUE_ORDER).all()

    def get_appointment(self, appointment_id: str) -> Appointment:
        with self._store("fetch appointment"):
            appointment = self.db.get(Appointment, appointment_id)

        if not appointment:
            raise NotFoundError()
        return appointment

    def update_status_or_report(
        self, appointment_id: str, changes: AppointmentUpdate
    ) -> Appointment:
        """Change the status and/or medical report; every other field is write-once."""
        fields = changes.model_dump(exclude_unset=True)
        if fields.get("status") is None:
            fields.pop("status", None)
        if not fields:
            raise ValidationError("Provide status or medicalReport to update")

        appointment = self.get_appointment(appointment_id)

        with self._store("update appointment"):
            for field, value in fields.items():
                setattr(appointment, field, value)
            self.db.commit()
            self.db.refresh(appointment)

        logger.info(f"Updated appointment {appointment_id}: {', '.join(fields)}")
        return appointment

    def delete_appointment(self, appointment_id: str) -> None:
        """Remove an appointment; only cancelled appointments may be deleted."""
        appointment = self.get_appointment(appointment_id)

        if appointment.status != AppointmentStatus.CANCELLED:
            raise ForbiddenError()

        with self._store("delete appointment"):
            self.db.delete(appointment)
            self.db.commit()

        logger.info(f"Deleted cancelled appointment {appointment_id}")

    def _book(
        self,
        data: AppointmentCreate,
        doctor_code: str,
        day_start: datetime,
        day_end: datetime,
    ) -> Appointment:
        with self._store("book appointment"):
            token_number = self._next_token_number(doctor_code, day_start, day_end)

            appointment = Appointment(
                employee_code=data.employee_code.strip(),
                patient_name=data.patient_name.strip(),
                patient_name_key=patient_name_key(data.patient_name),
                patient_age=data.patient_age,
                patient_gender=data.patient_gender,
                patient_relation=data.patient_relation,
                patient_phone=data.patient_phone,
                patient_address=data.patient_address,
                doctor_code=doctor_code,
                appointment_date=day_start,
                appointment_time=data.appointment_time.strip(),
                token_number=token_number,
                status=AppointmentStatus.PENDING,
                notes=data.notes,
            )
            self.db.add(appointment)

            try:
                self.db.commit()
            except IntegrityError as exc:
                self.db.rollback()
                raise ConflictError(doctor_code, token_number) from exc

            self.db.refresh(appointment)
            return appointment

    def _next_token_number(
        self, doctor_code: str, day_start: datetime, day_end: datetime
    ) -> int:
        last_appointment = self.db.query(Appointment).filter(
            Appointment.doctor_code == doctor_code,
            Appointment.appointment_date >= day_start,
            Appointment.appointment_date < day_end
        ).order_by(Appointment.token_number.desc()).first()

        return last_appointment.token_number + 1 if last_appointment else 1

    @contextmanager
    def _store(self, action: str):
        """Roll back and raise StoreError when the database fails."""
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to {action}: {str(exc)}")
            raise StoreError(f"Failed to {action}") from exc
