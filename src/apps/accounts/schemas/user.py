"""User and session schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict

from src.core.results import Invalid, Valid, ValidationResult

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


class UserRead(BaseModel):
    id: int
    email: str
    is_admin: bool = False


class AdminPrincipal(BaseModel):
    """Proof that the current request belongs to the admin.

    Only the session guard constructs one; admin operations take it as an
    argument.
    """

    model_config = ConfigDict(frozen=True)

    user_id: int
    email: str


class Credentials(BaseModel):
    email: str
    password: str


class LoginSubmission(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    redirect_to: Optional[str] = None

    def validate_fields(self) -> ValidationResult[Credentials]:
        email = (self.email or "").strip().lower()
        errors = {
            "email": None if "@" in email else "Email is invalid",
            "password": None if self.password else "Password is required",
        }
        if self.password and len(self.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            errors["password"] = "Password is too long"

        if any(errors.values()):
            return Invalid(errors=errors)
        return Valid(Credentials(email=email, password=self.password))
