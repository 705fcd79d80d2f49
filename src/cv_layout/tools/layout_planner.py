"""Tool exposing the CV spacing planner to agents.

Agents that assemble a CV pass the path of the structured CV JSON and get
back the spacing decision together with the per-section height estimates.
"""

from __future__ import annotations

import json
from typing import Optional, Type

from crewai.tools import BaseTool
from pydantic import BaseModel, Field, ConfigDict

from cv_layout.document_loader import load_cv_document
from cv_layout.logger import get_logger
from cv_layout.paths import resolve_under_root
from cv_layout.settings import load_page_budget
from cv_layout.spacing_planner import analyse_layout, plan_from_analysis

logger = get_logger("layout_planner_tool")


class LayoutPlannerInput(BaseModel):
    """Input schema for LayoutPlannerTool."""
    document_path: str = Field(..., description="Path to the structured CV JSON file (absolute or relative to project root).")
    page_family: Optional[str] = Field(None, description="Page family from page_budgets.yaml, e.g. 'a4'. Defaults to the configured family.")
    # Ignore any extra fields passed by upstream configs
    model_config = ConfigDict(extra="ignore")


class LayoutPlannerTool(BaseTool):
    """Compute the single-page spacing plan of a structured CV.

    Returns a JSON string. On failure the payload has "success": false and an
    "error" message the calling agent can reason about.
    """

    name: str = "cv_layout_planner"
    description: str = (
        "Estimate the height of every populated section of a structured CV JSON file and decide "
        "the uniform spacing between sections so the CV fills exactly one page. Returns "
        "spacingMillimeters, distributeEvenly, and the per-section estimates. If "
        "extra_space is negative the content is too long for one page and should be shortened."
    )
    args_schema: Type[BaseModel] = LayoutPlannerInput

    def _run(self, document_path: str, page_family: Optional[str] = None) -> str:  # type: ignore[override]
        try:
            document = load_cv_document(resolve_under_root(document_path))
            budget = load_page_budget(page_family)
        except ValueError as e:  # DocumentLoadError, PageBudgetConfigError, directory paths
            logger.warning(f"Layout planning failed for {document_path}: {e}")
            return json.dumps({"success": False, "error": str(e), "plan": None}, indent=2)

        analysis = analyse_layout(document, budget)
        plan = plan_from_analysis(analysis)

        return json.dumps({
            "success": True,
            "plan": plan.model_dump(by_alias=True),
            "fits_on_page": analysis.extra_space >= 0,
            "analysis": analysis.to_dict(),
        }, indent=2)
