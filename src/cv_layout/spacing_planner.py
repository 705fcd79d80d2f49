"""
Spacing planner for single-page CV layout.

Sums the estimated height of every populated section, compares it with the
page's available body height and decides the uniform gap between sections
and whether the leftover space should be distributed between them.

Everything here is a pure function of its arguments: no document or plan is
cached, so independent documents can be planned concurrently.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from cv_layout.height_estimator import estimate_additional_section, estimate_section_height
from cv_layout.logger import get_logger
from cv_layout.models import CVDocument, LayoutPlan, PageBudget
from cv_layout.sections import SectionType, iter_populated_sections

logger = get_logger("spacing_planner")

# Spacing decision thresholds (mm); comparisons are strict
DISTRIBUTE_THRESHOLD_MM = 100
DISTRIBUTE_MAX_SECTIONS = 6  # exclusive
MODERATE_THRESHOLD_MM = 50
LIMITED_THRESHOLD_MM = 20

OVERFLOW_SPACING_MM = 10
TIGHT_SPACING_MM = 12
DISTRIBUTED_SPACING_RANGE = (15, 40)
MODERATE_SPACING_RANGE = (15, 25)


class SectionEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    section_type: SectionType
    section_key: Optional[str] = None
    height_mm: float


class LayoutAnalysis(BaseModel):
    """Result of walking a document's populated sections against a page budget."""
    model_config = ConfigDict(frozen=True)

    entries: Tuple[SectionEntry, ...] = ()
    available_body_height: float
    total_content_height: float

    @property
    def active_section_count(self) -> int:
        return len(self.entries)

    @property
    def gap_count(self) -> int:
        # At least one gap so a lone (or missing) section never divides by zero
        return max(1, self.active_section_count - 1)

    @property
    def extra_space(self) -> float:
        """Unused body height; negative when the content overflows the page."""
        return self.available_body_height - self.total_content_height

    def to_dict(self) -> dict:
        return {
            "sections": [
                {"type": e.section_type.value, "key": e.section_key, "height_mm": e.height_mm}
                for e in self.entries
            ],
            "available_body_height": self.available_body_height,
            "total_content_height": self.total_content_height,
            "active_section_count": self.active_section_count,
            "gap_count": self.gap_count,
            "extra_space": self.extra_space,
        }


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _as_document(document: Union[CVDocument, Mapping[str, Any]]) -> CVDocument:
    if isinstance(document, CVDocument):
        return document
    return CVDocument.model_validate(document)


def analyse_layout(
    document: Union[CVDocument, Mapping[str, Any]],
    page_budget: Optional[PageBudget] = None,
) -> LayoutAnalysis:
    """
    Estimate every populated section of a document, in canonical order.

    Args:
        document: CVDocument, or a CV JSON mapping validated into one
        page_budget: Page dimensions; defaults to A4 (207mm of body)

    Returns:
        LayoutAnalysis with one SectionEntry per populated section
    """
    document = _as_document(document)
    budget = page_budget or PageBudget()

    entries = []
    for ref in iter_populated_sections(document):
        if ref.additional is not None:
            height = estimate_additional_section(ref.additional)
        else:
            height = estimate_section_height(ref.section_type, document)
        logger.debug(f"Section {ref.section_type.value}{f' ({ref.section_key})' if ref.section_key else ''}: {height}mm")
        entries.append(SectionEntry(section_type=ref.section_type, section_key=ref.section_key, height_mm=height))

    return LayoutAnalysis(
        entries=tuple(entries),
        available_body_height=budget.available_body_height,
        total_content_height=sum(e.height_mm for e in entries),
    )


def choose_spacing(extra_space: float, active_section_count: int, gap_count: int) -> LayoutPlan:
    """
    Pick the section gap and distribution mode for the leftover body space.

    Rules are evaluated top to bottom, first match wins:
    - overflow (extra < 0): tightest gap, stacked; crowding is preferred to truncation
    - extra > 100 with fewer than 6 sections: distribute evenly, gap in [15, 40]
    - extra > 50: stacked, gap in [15, 25]
    - extra > 20: stacked, gap at least 12
    - otherwise: stacked, 12
    The gap is rounded half-up to a whole millimetre.
    """
    distribute = False

    if extra_space < 0:
        spacing = OVERFLOW_SPACING_MM
    elif extra_space > DISTRIBUTE_THRESHOLD_MM and active_section_count < DISTRIBUTE_MAX_SECTIONS:
        distribute = True
        spacing = _clamp(extra_space / gap_count, *DISTRIBUTED_SPACING_RANGE)
    elif extra_space > MODERATE_THRESHOLD_MM:
        spacing = _clamp(extra_space / gap_count, *MODERATE_SPACING_RANGE)
    elif extra_space > LIMITED_THRESHOLD_MM:
        spacing = max(TIGHT_SPACING_MM, extra_space / gap_count)
    else:
        spacing = TIGHT_SPACING_MM

    return LayoutPlan(spacing_mm=_round_half_up(spacing), distribute_evenly=distribute)


def compute_layout_plan(
    document: Union[CVDocument, Mapping[str, Any]],
    page_budget: Optional[PageBudget] = None,
) -> LayoutPlan:
    """
    Decide the uniform section spacing for a document on one page.

    Never raises for a valid document. Content taller than the page is
    signalled only by the tight 10mm stacked plan.
    """
    return plan_from_analysis(analyse_layout(document, page_budget))


def plan_from_analysis(analysis: LayoutAnalysis) -> LayoutPlan:
    """Decide the plan for an already analysed document, logging overflow."""
    if analysis.available_body_height <= 0:
        logger.warning(
            f"Page budget leaves no body space ({analysis.available_body_height:.1f}mm); "
            "any content will be planned as overflowing"
        )
    elif analysis.extra_space < 0:
        logger.warning(
            f"Estimated content ({analysis.total_content_height:.0f}mm) overflows the page body "
            f"by {-analysis.extra_space:.0f}mm; using tight spacing"
        )

    plan = choose_spacing(analysis.extra_space, analysis.active_section_count, analysis.gap_count)
    logger.info(
        f"Layout plan: {analysis.active_section_count} sections, "
        f"{analysis.total_content_height:.0f}/{analysis.available_body_height:.0f}mm used, "
        f"spacing {plan.spacing_mm}mm, {'distributed' if plan.distribute_evenly else 'stacked'}"
    )
    return plan


class SpacingPlanner:
    """Stateless planner bound to one page budget; safe to share between threads."""

    def __init__(self, page_budget: Optional[PageBudget] = None):
        self.page_budget = page_budget or PageBudget()

    def analyse(self, document: Union[CVDocument, Mapping[str, Any]]) -> LayoutAnalysis:
        return analyse_layout(document, self.page_budget)

    def compute(self, document: Union[CVDocument, Mapping[str, Any]]) -> LayoutPlan:
        return compute_layout_plan(document, self.page_budget)
