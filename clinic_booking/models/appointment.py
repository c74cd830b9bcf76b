from sqlalchemy import Column, Integer, String, DateTime, Text, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.sql import func
import enum
import uuid

from ..core.database import Base

class AppointmentStatus(str, enum.Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"

class Appointment(Base):
    __tablename__ = "appointments"
    __table_args__ = (
        # One token number per doctor per calendar day
        UniqueConstraint(
            "doctor_code", "appointment_date", "token_number",
            name="uq_appointment_doctor_day_token"
        ),
    )

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))

    # Requester and target doctor
    employee_code = Column(String(50), nullable=False, index=True)
    doctor_code = Column(String(50), nullable=False, index=True)

    # Patient information
    patient_name = Column(String(100), nullable=False)
    # Case-folded name for lookups; SQLite's lower() only folds ASCII
    patient_name_key = Column(String(100), nullable=False, index=True)
    patient_age = Column(Integer, nullable=True)
    patient_gender = Column(String(20), nullable=True)
    patient_relation = Column(String(50), nullable=True)
    patient_phone = Column(String(20), nullable=True)
    patient_address = Column(String(255), nullable=True)

    # Scheduling; appointment_date holds UTC midnight of the booked day
    appointment_date = Column(DateTime, nullable=False, index=True)
    appointment_time = Column(String(20), nullable=False)
    token_number = Column(Integer, nullable=False)
    status = Column(
        SQLEnum(AppointmentStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=AppointmentStatus.PENDING
    )

    medical_report = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    # Tracking
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return (
            f"<Appointment(id={self.id}, doctor_code='{self.doctor_code}', "
            f"date='{self.appointment_date}', token={self.token_number})>"
        )
