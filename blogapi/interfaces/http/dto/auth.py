from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class CredentialsDTO(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    # No strength or length policy; an empty string is a valid password.
    password: str

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Username cannot be blank")
        return value


class RegisterRequestDTO(CredentialsDTO):
    pass


class LoginRequestDTO(CredentialsDTO):
    pass


class MessageDTO(BaseModel):
    message: str
