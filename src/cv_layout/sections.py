"""
Section catalogue for CV documents.

Defines the closed set of section types, the canonical order in which they
are laid out, and the single "which sections exist" walk shared by the
height estimator, the spacing planner and the markup helpers.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, NamedTuple, Optional, Tuple, Union

from cv_layout.models import AdditionalSection, CVDocument


class SectionType(str, Enum):
    """Section type tags, valued with the document's JSON keys."""
    SUMMARY = "summary"
    ROLES = "roles"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    ACCOMPLISHMENTS = "accomplishments"
    AWARDS = "awards"
    CERTIFICATIONS = "certifications"
    LANGUAGES = "languages"
    INTERESTS = "interests"
    PUBLICATIONS = "publications"
    VOLUNTEER_WORK = "volunteerWork"
    ADDITIONAL = "additionalSections"


# Fixed sections in layout order; additional sections always trail them
FIXED_SECTION_ORDER: Tuple[SectionType, ...] = (
    SectionType.SUMMARY,
    SectionType.ROLES,
    SectionType.EXPERIENCE,
    SectionType.EDUCATION,
    SectionType.SKILLS,
    SectionType.PROJECTS,
    SectionType.ACCOMPLISHMENTS,
    SectionType.AWARDS,
    SectionType.CERTIFICATIONS,
    SectionType.LANGUAGES,
    SectionType.INTERESTS,
    SectionType.PUBLICATIONS,
    SectionType.VOLUNTEER_WORK,
)

# SectionType -> CVDocument attribute
SECTION_FIELDS: Dict[SectionType, str] = {
    SectionType.SUMMARY: "summary",
    SectionType.ROLES: "roles",
    SectionType.EXPERIENCE: "experience",
    SectionType.EDUCATION: "education",
    SectionType.SKILLS: "skills",
    SectionType.PROJECTS: "projects",
    SectionType.ACCOMPLISHMENTS: "accomplishments",
    SectionType.AWARDS: "awards",
    SectionType.CERTIFICATIONS: "certifications",
    SectionType.LANGUAGES: "languages",
    SectionType.INTERESTS: "interests",
    SectionType.PUBLICATIONS: "publications",
    SectionType.VOLUNTEER_WORK: "volunteer_work",
    SectionType.ADDITIONAL: "additional_sections",
}

# Display titles used by the CV templates
SECTION_TITLES: Dict[SectionType, str] = {
    SectionType.SUMMARY: "Professional Summary",
    SectionType.ROLES: "Professional Roles",
    SectionType.EXPERIENCE: "Work Experience",
    SectionType.EDUCATION: "Education",
    SectionType.SKILLS: "Skills",
    SectionType.PROJECTS: "Projects",
    SectionType.ACCOMPLISHMENTS: "Key Accomplishments",
    SectionType.AWARDS: "Awards",
    SectionType.CERTIFICATIONS: "Certifications",
    SectionType.LANGUAGES: "Languages",
    SectionType.INTERESTS: "Interests",
    SectionType.PUBLICATIONS: "Publications",
    SectionType.VOLUNTEER_WORK: "Volunteer Work",
}


class SectionRef(NamedTuple):
    """One populated section of a document, in layout order."""
    section_type: SectionType
    section_key: Optional[str] = None
    additional: Optional[AdditionalSection] = None


def parse_section_type(value: Union[SectionType, str]) -> Optional[SectionType]:
    """Map a tag (enum or JSON key string) to a SectionType, None if unknown."""
    if isinstance(value, SectionType):
        return value
    try:
        return SectionType(value)
    except ValueError:
        return None


def is_section_populated(document: CVDocument, section_type: SectionType) -> bool:
    """True if the section exists and is non-empty (empty string and empty list do not count)."""
    if section_type is SectionType.ADDITIONAL:
        return any(is_additional_populated(section) for section in document.additional_sections)
    return bool(getattr(document, SECTION_FIELDS[section_type]))


def is_additional_populated(section: AdditionalSection) -> bool:
    # A named section without content would render as a bare header
    return bool(section.content)


def iter_populated_sections(document: CVDocument) -> Iterator[SectionRef]:
    """Yield every populated section in canonical layout order.

    Fixed sections come first in FIXED_SECTION_ORDER, then each populated
    additional section individually, in document order.
    """
    for section_type in FIXED_SECTION_ORDER:
        if is_section_populated(document, section_type):
            yield SectionRef(section_type)

    for section in document.additional_sections:
        if is_additional_populated(section):
            yield SectionRef(SectionType.ADDITIONAL, section.section_name, section)
