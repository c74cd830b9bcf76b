from typing import Optional
from passlib.context import CryptContext
import secrets

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Password utilities
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)

def verify_shared_password(password: str, expected: Optional[str]) -> bool:
    """Compare a password with a configured shared secret in constant time."""
    if not expected:
        return False
    return secrets.compare_digest(password.encode(), expected.encode())
