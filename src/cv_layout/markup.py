"""
Markup-layer helpers for consumers of a LayoutPlan.

Theme templates build their own HTML; this module gives them the pieces that
must agree with the planner: which section blocks exist (same walk as the
estimator), and the container CSS that applies the spacing decision.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from cv_layout.models import CVDocument, LayoutPlan, PageBudget
from cv_layout.sections import SECTION_TITLES, SectionType, iter_populated_sections

_HTML_ESCAPES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#039;'),
)


def html_escape(text: Optional[str]) -> str:
    """Escape text for HTML element content and attribute values."""
    if not text:
        return ''
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


class SectionBlock(NamedTuple):
    section_type: SectionType
    section_key: Optional[str]
    title: str


def section_blocks(document: CVDocument) -> List[SectionBlock]:
    """Section blocks to emit, in layout order.

    Built on the same populated-section walk as the spacing planner, so a
    template never emits a block the planner did not count (or vice versa).
    Titles are plain text; escape them before inserting into markup.
    """
    blocks = []
    for ref in iter_populated_sections(document):
        if ref.section_type is SectionType.ADDITIONAL:
            title = ref.section_key or ''
        else:
            title = SECTION_TITLES[ref.section_type]
        blocks.append(SectionBlock(ref.section_type, ref.section_key, title))
    return blocks


def _mm(value: float) -> str:
    return f"{value:g}mm"


def build_content_css(plan: LayoutPlan, page_budget: Optional[PageBudget] = None) -> str:
    """Build the CSS rules of the section container for a layout plan.

    The container has the page's fixed body height; sections are separated by
    ``--section-spacing`` and either stacked from the top or spread with
    ``space-between``. Overflow is clipped rather than spilling onto a second page.
    """
    budget = page_budget or PageBudget()
    body_height = _mm(budget.available_body_height)

    return "\n".join([
        ".content {",
        f"  --section-spacing: {plan.spacing_mm}mm;",
        f"  height: {body_height};",
        f"  max-height: {body_height};",
        "  display: flex;",
        "  flex-direction: column;",
        f"  justify-content: {plan.justify_content};",
        "  overflow: hidden;",
        "}",
        ".section { margin-bottom: var(--section-spacing); page-break-inside: avoid; }",
        ".section:last-child { margin-bottom: 0; }",
    ])
