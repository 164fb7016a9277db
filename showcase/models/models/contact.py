import re

from pydantic import BaseModel, field_validator


class ContactMessage(BaseModel):
    name: str
    email: str
    subject: str | None = None
    message: str

    @field_validator("name", "message")
    def validate_not_empty(cls, v):
        if not v or not v.strip():
            raise ValueError("Field cannot be empty")
        return v.strip()

    @field_validator("email")
    def validate_email(cls, v):
        if not v:
            raise ValueError("Email cannot be empty")
        # check if the email is in the correct format
        pattern = r"^[a-zA-Z0-9_.+-]+@[a-zA-Z0-9-]+\.[a-zA-Z0-9-.]+$"
        if not re.match(pattern, v.strip()):
            raise ValueError("Invalid email format")
        return v.strip()
