"""
Page budget and template configuration.

Page budgets are environment-shaped constants per template family, kept in
``config/page_budgets.yaml`` rather than in code so alternate page sizes or
header heights can be added without touching the planner.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ValidationError

from cv_layout.logger import get_logger
from cv_layout.models import PageBudget
from cv_layout.paths import PAGE_BUDGETS_FILE

logger = get_logger("settings")


class PageBudgetConfigError(ValueError):
    """Raised when the page budget configuration is missing, malformed or lacks a family."""


class CVTemplate(BaseModel):
    id: str
    name: str
    category: str
    family: str


def default_page_family(config: Optional[Dict[str, Any]] = None) -> str:
    """Family used when none is given: PAGE_FAMILY env var, then the config's default_family, then 'a4'."""
    configured = (config or {}).get("default_family")
    return os.getenv("PAGE_FAMILY") or configured or "a4"


def load_layout_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load and sanity-check the page budget YAML.

    Raises:
        PageBudgetConfigError: If the file is missing, is not valid YAML or has no families
    """
    path = Path(config_path) if config_path else PAGE_BUDGETS_FILE

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise PageBudgetConfigError(f"Page budget config not found: {path}") from e
    except yaml.YAMLError as e:
        raise PageBudgetConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise PageBudgetConfigError(f"Page budget config must be a mapping, got {type(data).__name__}")

    families = data.get("families")
    if not isinstance(families, dict) or not families:
        raise PageBudgetConfigError(f"Page budget config {path} has no 'families' mapping")

    return data


def available_families(config_path: Optional[Path] = None) -> List[str]:
    return list(load_layout_config(config_path)["families"].keys())


def load_page_budget(family: Optional[str] = None, config_path: Optional[Path] = None) -> PageBudget:
    """
    Build the PageBudget of a template family.

    Args:
        family: Family name (e.g. "a4"); defaults to default_page_family()
        config_path: Optional alternative YAML file

    Raises:
        PageBudgetConfigError: If the family is unknown or its values are not numbers
    """
    config = load_layout_config(config_path)
    family = family or default_page_family(config)

    raw = config["families"].get(family)
    if raw is None:
        known = ", ".join(config["families"].keys())
        raise PageBudgetConfigError(f"Unknown page family '{family}' (known: {known})")

    try:
        budget = PageBudget(**(raw or {}))
    except (TypeError, ValidationError) as e:
        raise PageBudgetConfigError(f"Invalid page budget for family '{family}': {e}") from e

    if budget.available_body_height <= 0:
        logger.warning(
            f"Page family '{family}' leaves no body space "
            f"({budget.available_body_height:.1f}mm); every document will be treated as overflowing"
        )

    return budget


def load_templates(config_path: Optional[Path] = None) -> List[CVTemplate]:
    config = load_layout_config(config_path)
    templates = config.get("templates") or {}
    try:
        return [CVTemplate(id=template_id, **fields) for template_id, fields in templates.items()]
    except (TypeError, ValidationError) as e:
        raise PageBudgetConfigError(f"Invalid template entry: {e}") from e


def page_budget_for_template(template_id: str, config_path: Optional[Path] = None) -> PageBudget:
    """PageBudget of the family a template renders onto; unknown ids use the fallback template."""
    config = load_layout_config(config_path)
    templates = {t.id: t for t in load_templates(config_path)}

    template = templates.get(template_id)
    if template is None:
        fallback_id = config.get("fallback_template", "template-1")
        logger.info(f"Unknown template '{template_id}', falling back to '{fallback_id}'")
        template = templates.get(fallback_id)

    if template is None:
        return load_page_budget(config_path=config_path)

    return load_page_budget(template.family, config_path)
