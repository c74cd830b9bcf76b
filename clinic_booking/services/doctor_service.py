from typing import List
from sqlalchemy.orm import Session
import logging

from ..models.doctor import Doctor
from ..core.config import settings
from ..core.security import verify_shared_password
from ..core.exceptions import ValidationError, InvalidCredentialsError
from ..schemas.doctor import DoctorLogin

logger = logging.getLogger(__name__)

class DoctorService:
    def __init__(self, db: Session):
        self.db = db

    def authenticate_doctor(self, login_data: DoctorLogin) -> Doctor:
        """Check a doctor code against the shared doctor password."""
        doctor_code = (login_data.doctor_code or "").strip()
        if not doctor_code or not login_data.password:
            raise ValidationError("Doctor code and password are required")

        if not verify_shared_password(login_data.password, settings.DOCTOR_PASSWORD):
            logger.warning(f"Failed login for doctor code {doctor_code}")
            raise InvalidCredentialsError()

        doctor = self.db.query(Doctor).filter(
            Doctor.doctor_code == doctor_code
        ).first()
        if not doctor:
            raise InvalidCredentialsError()

        return doctor

    def list_doctors(self) -> List[Doctor]:
        return self.db.query(Doctor).order_by(Doctor.doctor_code).all()
