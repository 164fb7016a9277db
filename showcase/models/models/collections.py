from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from showcase.models.models.base import RecordModel, current_year

RecordT = TypeVar("RecordT", bound=RecordModel)

MAX_IMAGE_SIZE = 5 * 1024 * 1024
ALLOWED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp", "image/gif")


class CollectionStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class Pagination(BaseModel):
    page: int = 1
    limit: int = 20
    total: int = 0
    pages: int = 1

    @field_validator("page", "limit", mode="before")
    @classmethod
    def validate_positive(cls, v):
        if v is None:
            return 1
        if int(v) < 1:
            raise ValueError("Pagination values must be at least 1")
        return v

    @field_validator("total", "pages", mode="before")
    @classmethod
    def validate_counts(cls, v):
        return 0 if v is None else v


class CollectionState(BaseModel, Generic[RecordT]):
    items: list[RecordT] = Field(default_factory=list)
    status: CollectionStatus = CollectionStatus.IDLE
    error: str | None = None
    pagination: Pagination = Field(default_factory=Pagination)

    @property
    def loading(self) -> bool:
        return self.status == CollectionStatus.LOADING


class FetchFilters(BaseModel):
    category: str | None = None
    section: str | None = None
    year: str | None = None
    search: str | None = None
    page: int | None = Field(default=None, ge=1)
    limit: int | None = Field(default=None, ge=1)

    model_config = ConfigDict(extra="forbid")

    def to_params(self) -> dict[str, Any]:
        """Query parameters with unset filters dropped."""
        return {key: value for key, value in self.model_dump().items() if value not in (None, "")}


class ImageUpload(BaseModel):
    filename: str
    content_type: str
    content: bytes = Field(repr=False)

    @property
    def size(self) -> int:
        return len(self.content)


class RecordPayload(BaseModel):
    """Fields submitted by the admin forms, before local validation."""

    title: str = ""
    description: str = ""
    category: str | None = None
    section: str | None = None
    completed: bool | None = None
    year: str = Field(default_factory=current_year)
    image: ImageUpload | None = None

    def form_fields(self, only_set: bool = False) -> dict[str, str]:
        """
        Multipart text fields, trimmed, with ``None`` values left out.

        With ``only_set`` the fields that were never explicitly given are left
        out too, so a partial update does not reset them to their defaults.
        """
        fields: dict[str, str] = {}
        for key in ("title", "description", "category", "section", "year"):
            if only_set and key not in self.model_fields_set:
                continue
            value = getattr(self, key)
            if value is not None:
                fields[key] = str(value).strip()
        if self.completed is not None:
            fields["completed"] = "true" if self.completed else "false"
        return fields
