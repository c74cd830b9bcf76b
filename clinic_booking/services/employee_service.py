from datetime import datetime, time
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from ..models.employee import Employee
from ..core.security import verify_password, get_password_hash
from ..core.exceptions import ValidationError, DuplicateError, InvalidCredentialsError
from ..schemas.employee import EmployeeRegister, EmployeeLogin

logger = logging.getLogger(__name__)

class EmployeeService:
    def __init__(self, db: Session):
        self.db = db

    def register_employee(self, employee_data: EmployeeRegister) -> Employee:
        """Register a new employee."""
        if self._find_existing(employee_data):
            raise DuplicateError("Employee already exists")

        new_employee = Employee(
            employee_code=employee_data.employee_code,
            first_name=employee_data.first_name,
            last_name=employee_data.last_name,
            gender=employee_data.gender,
            phone_number=employee_data.phone_number,
            date_of_birth=datetime.combine(employee_data.date_of_birth, time.min),
            password_hash=get_password_hash(employee_data.password),
            dependents=[d.model_dump() for d in employee_data.dependents],
        )

        self.db.add(new_employee)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent registration took the code or phone after the check
            self.db.rollback()
            raise DuplicateError("Employee already exists")
        self.db.refresh(new_employee)

        logger.info(f"Registered employee {new_employee.employee_code}")
        return new_employee

    def authenticate_employee(self, login_data: EmployeeLogin) -> Employee:
        """Check an employee code and password."""
        employee_code = (login_data.employee_code or "").strip()
        if not employee_code or not login_data.password:
            raise ValidationError("Employee code and password are required")

        employee = self.db.query(Employee).filter(
            Employee.employee_code == employee_code
        ).first()

        # Same message for unknown code and wrong password
        if not employee or not verify_password(login_data.password, employee.password_hash):
            logger.warning(f"Failed login for employee code {employee_code}")
            raise InvalidCredentialsError("Invalid employee code or password")

        return employee

    def _find_existing(self, employee_data: EmployeeRegister):
        """Employee already holding the code or the phone number, if any."""
        return self.db.query(Employee).filter(
            or_(
                Employee.employee_code == employee_data.employee_code,
                Employee.phone_number == employee_data.phone_number
            )
        ).first()
