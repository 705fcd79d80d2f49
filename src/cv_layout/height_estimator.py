"""
Section height estimation for single-page CV layout.

Predicts how many millimetres each section occupies once rendered, without
running a text-layout pass. The numbers are an empirically tuned
approximation of the A4 templates (10pt body text, ~60 characters per
line, ~8 skill chips per line) and must stay as they are for output parity.
"""

from __future__ import annotations

import math
from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from cv_layout.logger import get_logger
from cv_layout.models import AdditionalSection, CVDocument
from cv_layout.sections import SECTION_FIELDS, SectionType, parse_section_type

logger = get_logger("height_estimator")

BASE_SECTION_HEIGHT = 8  # Title + padding
LINE_HEIGHT_MM = 4  # Average line height
CHARS_PER_LINE = 60


class SectionHeuristic(BaseModel):
    """Height model of one section type.

    Exactly one shape applies, checked in this order:
    - chars_per_line: free text, wrapped at chars_per_line characters
    - items_per_line: chips wrapped at items_per_line per line
    - fixed_lines: a constant number of lines
    - otherwise: per_entry mm for each entry plus per_bullet mm for each of its bullets
    """
    model_config = ConfigDict(frozen=True)

    per_entry: float = 0
    per_bullet: float = 0
    chars_per_line: int = 0
    items_per_line: int = 0
    min_lines: int = 0
    fixed_lines: int = 0


SECTION_HEURISTICS: Dict[SectionType, SectionHeuristic] = {
    SectionType.SUMMARY: SectionHeuristic(chars_per_line=CHARS_PER_LINE, min_lines=3),
    SectionType.ROLES: SectionHeuristic(per_entry=4),
    SectionType.EXPERIENCE: SectionHeuristic(per_entry=12, per_bullet=4),
    SectionType.EDUCATION: SectionHeuristic(per_entry=12),
    SectionType.SKILLS: SectionHeuristic(items_per_line=8, min_lines=1),
    SectionType.PROJECTS: SectionHeuristic(per_entry=8),
    SectionType.ACCOMPLISHMENTS: SectionHeuristic(per_entry=4),
    SectionType.AWARDS: SectionHeuristic(per_entry=6),
    SectionType.CERTIFICATIONS: SectionHeuristic(per_entry=6),
    # Chip lists assumed to fit on one wrapped line whatever their length
    SectionType.LANGUAGES: SectionHeuristic(fixed_lines=1),
    SectionType.INTERESTS: SectionHeuristic(fixed_lines=1),
    SectionType.PUBLICATIONS: SectionHeuristic(per_entry=6),
    SectionType.VOLUNTEER_WORK: SectionHeuristic(per_entry=10),
    SectionType.ADDITIONAL: SectionHeuristic(chars_per_line=CHARS_PER_LINE),
}

DEFAULT_HEURISTIC = SectionHeuristic(fixed_lines=2)


def _text_height(text: str, heuristic: SectionHeuristic) -> float:
    lines = max(heuristic.min_lines, math.ceil(len(text or "") / heuristic.chars_per_line))
    return BASE_SECTION_HEIGHT + lines * LINE_HEIGHT_MM


def _apply_heuristic(value, heuristic: SectionHeuristic) -> float:
    """Height of a section value (text or list of entries) under a heuristic."""
    if heuristic.chars_per_line:
        return _text_height(value if isinstance(value, str) else "", heuristic)

    items = value if isinstance(value, list) else []

    if heuristic.items_per_line:
        lines = max(heuristic.min_lines, math.ceil(len(items) / heuristic.items_per_line))
        return BASE_SECTION_HEIGHT + lines * LINE_HEIGHT_MM

    if heuristic.fixed_lines:
        return BASE_SECTION_HEIGHT + heuristic.fixed_lines * LINE_HEIGHT_MM

    height = BASE_SECTION_HEIGHT
    for item in items:
        height += heuristic.per_entry
        if heuristic.per_bullet:
            height += len(getattr(item, "bullets", None) or []) * heuristic.per_bullet
    return height


def estimate_additional_section(section: AdditionalSection) -> float:
    """Height of one free-text additional section."""
    return _text_height(section.content, SECTION_HEURISTICS[SectionType.ADDITIONAL])


def estimate_section_height(
    section_type: Union[SectionType, str],
    document: CVDocument,
    section_key: Optional[str] = None,
) -> float:
    """
    Estimate the rendered height of a section in millimetres.

    Never fails: missing data contributes nothing, unknown section types get
    a two-line default.

    Args:
        section_type: SectionType or its JSON key (e.g. "volunteerWork")
        document: Document holding the section content
        section_key: For additional sections, the name of the sub-section to measure

    Returns:
        Estimated height in mm
    """
    resolved = parse_section_type(section_type)

    if resolved is None:
        logger.debug(f"Unknown section type '{section_type}', using default height")
        return _apply_heuristic(None, DEFAULT_HEURISTIC)

    if resolved is SectionType.ADDITIONAL:
        match = next(
            (s for s in document.additional_sections if s.section_name == section_key),
            None,
        )
        if match is None:
            return BASE_SECTION_HEIGHT
        return estimate_additional_section(match)

    value = getattr(document, SECTION_FIELDS[resolved])
    return _apply_heuristic(value, SECTION_HEURISTICS[resolved])
