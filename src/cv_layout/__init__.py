"""
Single-page CV layout planning.

Estimates the rendered height of each CV section and decides the uniform
spacing between sections so the document fills one page without overflow.
"""

from .models import CVDocument, LayoutPlan, PageBudget
from .height_estimator import estimate_section_height
from .spacing_planner import SpacingPlanner, analyse_layout, choose_spacing, compute_layout_plan, plan_from_analysis

__all__ = [
    'CVDocument',
    'LayoutPlan',
    'PageBudget',
    'estimate_section_height',
    'SpacingPlanner',
    'analyse_layout',
    'choose_spacing',
    'compute_layout_plan',
    'plan_from_analysis',
]
