"""User Schemas — Pydantic models for the /users API boundary.

Invariants:
    - CreateUserBody checks shape and types only: failures are decode errors (422)
    - CreateUserRequest checks field constraints: name 2-50 chars inclusive,
      syntactically valid email; failures are validation errors (400)
    - UserResponse serializes id as its canonical string form

Design Decisions:
    - Two models for one body: FastAPI decodes into CreateUserBody, the route then
      validates into CreateUserRequest, so the 422/400 split falls out of which model failed
    - email-validator for syntax only: the address is stored exactly as sent, never
      normalized; display-name forms ("Bob <bob@example.com>") are rejected
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, ValidationError, field_validator

from user_service.core.errors import FieldError, FieldValidationError
from user_service.core.user import User
from user_service.services.create_user import CreateUserInput


class CreateUserBody(BaseModel):
    """Wire shape of POST /users."""
    name: str
    email: str


class CreateUserRequest(BaseModel):
    """Semantic constraints on a decoded CreateUserBody."""
    name: str = Field(min_length=2, max_length=50)
    email: str

    @field_validator("email")
    @classmethod
    def check_email_syntax(cls, v: str) -> str:
        try:
            validate_email(
                v, check_deliverability=False, test_environment=True,
                allow_display_name=False,
            )
        except EmailNotValidError as e:
            raise ValueError(f"value is not a valid email address: {e}")
        return v

    @classmethod
    def from_body(cls, body: CreateUserBody) -> "CreateUserRequest":
        try:
            return cls.model_validate(body.model_dump())
        except ValidationError as exc:
            raise FieldValidationError(
                [FieldError.from_error_dict(e) for e in exc.errors()],
            )

    def to_input(self) -> CreateUserInput:
        return CreateUserInput(name=self.name, email=self.email)


class UserResponse(BaseModel):
    """Public-facing user data."""
    id: str
    name: str
    email: str

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(id=str(user.id), name=user.name, email=user.email)
