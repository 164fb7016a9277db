from enum import Enum

from pydantic import field_validator

from showcase.models.models.base import RecordModel, match_enum_member


class ProjectSection(str, Enum):
    HOME = "Home"
    BANNER = "Banner"
    SECTION2 = "Section2"
    SECTION3 = "Section3"
    CAMEO = "Cameo"
    FEATURED = "Featured"
    REGULAR = "Regular"


class ProjectRecord(RecordModel):
    category: str = ""
    section: ProjectSection = ProjectSection.BANNER
    completed: bool = False

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v):
        return "" if v is None else str(v).strip()

    @field_validator("section", mode="before")
    @classmethod
    def validate_section(cls, v):
        if v is None or str(v).strip() == "":
            return ProjectSection.BANNER
        return match_enum_member(ProjectSection, v)

    @field_validator("completed", mode="before")
    @classmethod
    def validate_completed(cls, v):
        if v is None or v == "":
            return False
        return v
