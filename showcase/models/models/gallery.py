from enum import Enum

from pydantic import field_validator

from showcase.models.models.base import RecordModel, match_enum_member


class GalleryCategory(str, Enum):
    EVENTS = "events"
    MOVIES = "movies"
    CELEBRATIONS = "celebrations"
    AWARDS = "awards"
    BEHIND_THE_SCENES = "behind-the-scenes"
    OTHER = "other"


class GallerySection(str, Enum):
    HOME = "home"
    GALLERY = "gallery"
    ABOUT = "about"
    EVENTS = "events"


class GalleryRecord(RecordModel):
    category: GalleryCategory
    section: GallerySection = GallerySection.GALLERY

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v):
        return match_enum_member(GalleryCategory, v)

    @field_validator("section", mode="before")
    @classmethod
    def validate_section(cls, v):
        if v is None or str(v).strip() == "":
            return GallerySection.GALLERY
        return match_enum_member(GallerySection, v)
