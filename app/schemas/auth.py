"""Registration, login and identity summary schemas."""
from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic.networks import validate_email


def _checked_email(value: str) -> str:
    # Validate the address but keep it as submitted; lookups are exact-match
    value = (value or "").strip()
    validate_email(value)
    return value


class UserCreate(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
    # Older frontends send the password as "pass"
    password: str = Field(min_length=1, validation_alias=AliasChoices("password", "pass"))

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        return _checked_email(v)


class UserLogin(BaseModel):
    email: str = Field(max_length=255)
    password: str = Field(min_length=1, validation_alias=AliasChoices("password", "pass"))

    @field_validator("email")
    @classmethod
    def email_valid(cls, v: str) -> str:
        return _checked_email(v)


class UserResponse(BaseModel):
    """Identity summary. Never carries the password hash."""
    id: int
    name: str
    email: str

    class Config:
        from_attributes = True


class RegisterResponse(BaseModel):
    message: str = "Registration successful"
    user: UserResponse


class MessageResponse(BaseModel):
    message: str
