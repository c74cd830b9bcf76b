from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ...core.database import get_db
from ...api.deps import rate_limit_check
from ...services.employee_service import EmployeeService
from ...schemas.employee import EmployeeRegister, EmployeeLogin, EmployeeResponse

router = APIRouter(prefix="/employees", tags=["Employees"])

@router.post("/register", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def register(
    employee_data: EmployeeRegister,
    db: Session = Depends(get_db),
    _: None = Depends(rate_limit_check)
):
    """Register a new employee."""
    employee_service = EmployeeService(db)
    return employee_service.register_employee(employee_data)

@router.post("/login", response_model=EmployeeResponse)
async def login(
    login_data: EmployeeLogin,
    db: Session = Depends(get_db),
    _: None = Depends(rate_limit_check)
):
    """Check employee credentials and return the employee profile."""
    employee_service = EmployeeService(db)
    return employee_service.authenticate_employee(login_data)
