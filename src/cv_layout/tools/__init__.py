from .layout_planner import LayoutPlannerTool

__all__ = [
    "LayoutPlannerTool",
]
