from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def current_year() -> str:
    return str(datetime.now().year)


def match_enum_member(enum_cls: type[Enum], value: Any) -> Enum:
    """
    Resolve ``value`` to a member of ``enum_cls`` ignoring case and surrounding whitespace.

    Raises:
        ValueError: if ``value`` is empty or matches no member. The message
            lists every allowed value.
    """
    if isinstance(value, enum_cls):
        return value
    label = enum_cls.__name__
    text = str(value).strip() if value is not None else ""
    if not text:
        raise ValueError(f"{label} is required.")
    for member in enum_cls:
        if str(member.value).lower() == text.lower():
            return member
    allowed = ", ".join(str(m.value) for m in enum_cls)
    raise ValueError(f"Invalid {label.lower()} '{text}'. Please select one of: {allowed}")


class RecordModel(BaseModel):
    """
    Common shape of a media record as returned by the backend.

    The backend serializes identifiers as ``_id``; both spellings are accepted.
    ``image_url`` is derived client-side and never sent back.
    """

    id: str = Field(alias="_id")
    title: str = "Untitled"
    description: str = ""
    year: str = Field(default_factory=current_year)
    image: str | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")
    created_at: datetime | None = Field(default=None, alias="createdAt")

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        use_enum_values=False,
    )

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, v):
        if v is None or str(v).strip() == "":
            raise ValueError("Record id cannot be empty")
        return str(v)

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, v):
        if v is None or str(v).strip() == "":
            return "Untitled"
        return v

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, v):
        return "" if v is None else v

    @field_validator("year", mode="before")
    @classmethod
    def validate_year(cls, v):
        if v is None or str(v).strip() == "":
            return current_year()
        return str(v).strip()

    @classmethod
    def from_api(cls, data: dict[str, Any]):
        """Build a record from a raw backend document."""
        return cls.model_validate(data)
