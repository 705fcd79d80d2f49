"""
Data models for CV layout planning.

The document models mirror the CV JSON produced upstream (camelCase keys such
as ``personalDetails`` or ``additionalSections``). Python code uses the
snake_case attribute names; both spellings are accepted on input.
"""
from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _CVModel(BaseModel):
    """Base for document models: camelCase aliases, unknown keys ignored, nulls treated as absent.

    Extracted CVs often carry numeric years (``"year": 2021``) and null list
    items; numbers are read as strings and null items are dropped so such
    documents still validate.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # A null field falls back to its default (empty string / empty list)
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, list):
                value = [item for item in value if item is not None]
            cleaned[key] = value
        return cleaned


class PersonalDetails(_CVModel):
    """Header block. Rendered at a fixed height, never part of the body estimate."""
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: Optional[str] = None
    github: Optional[str] = None
    portfolio: Optional[str] = None


class ExperienceEntry(_CVModel):
    role: str = ""
    company: str = ""
    years: str = ""
    bullets: List[str] = Field(default_factory=list)


class EducationEntry(_CVModel):
    degree: str = ""
    institution: str = ""
    years: str = ""


class ProjectEntry(_CVModel):
    title: str = ""
    description: str = ""


class AwardEntry(_CVModel):
    title: str = ""
    issuer: Optional[str] = None
    year: Optional[str] = None


class CertificationEntry(_CVModel):
    name: str = ""
    issuer: Optional[str] = None
    year: Optional[str] = None


class PublicationEntry(_CVModel):
    title: str = ""
    journal: Optional[str] = None
    year: Optional[str] = None


class VolunteerEntry(_CVModel):
    organization: str = ""
    role: Optional[str] = None
    duration: Optional[str] = None
    description: Optional[str] = None


class AdditionalSection(_CVModel):
    """Free-text section whose identity (its name) comes from the data."""
    section_name: str = ""
    content: str = ""


class CVDocument(_CVModel):
    """Structured CV / cover-letter document to lay out on a single page."""
    personal_details: PersonalDetails = Field(default_factory=PersonalDetails)
    summary: str = ""
    roles: List[str] = Field(default_factory=list)
    experience: List[ExperienceEntry] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    skills: List[str] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    accomplishments: List[str] = Field(default_factory=list)
    awards: List[AwardEntry] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    publications: List[PublicationEntry] = Field(default_factory=list)
    volunteer_work: List[VolunteerEntry] = Field(default_factory=list)
    additional_sections: List[AdditionalSection] = Field(default_factory=list)


class PageBudget(BaseModel):
    """Vertical space (mm) of one page template family.

    No bounds are enforced here: a non-positive body height simply makes
    every document count as overflowing.
    """
    model_config = ConfigDict(frozen=True)

    page_height: float = 297.0
    header_height: float = 80.0
    bottom_margin: float = 10.0

    @property
    def available_body_height(self) -> float:
        return self.page_height - self.header_height - self.bottom_margin


class LayoutPlan(BaseModel):
    """Spacing decision handed to the markup layer. Single use, never cached across edits."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    spacing_mm: int = Field(..., serialization_alias="spacingMillimeters")
    distribute_evenly: bool = Field(..., serialization_alias="distributeEvenly")

    @property
    def justify_content(self) -> str:
        """CSS flex alignment for the section container."""
        return "space-between" if self.distribute_evenly else "flex-start"
