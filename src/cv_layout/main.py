#!/usr/bin/env python
"""
CV layout planner command-line entry point.

Reads a structured CV JSON file and prints the single-page spacing plan
(or the section container CSS) for a page family or CV template.
"""
from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from cv_layout.document_loader import DocumentLoadError, load_cv_document
from cv_layout.logger import get_logger, init_logger
from cv_layout.markup import build_content_css, section_blocks
from cv_layout.paths import LOG_DIR, resolve_under_root
from cv_layout.settings import PageBudgetConfigError, load_page_budget, page_budget_for_template
from cv_layout.spacing_planner import analyse_layout, plan_from_analysis


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cv-layout",
        description="Plan inter-section spacing so a structured CV fills exactly one page.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  cv-layout cv.json
  cv-layout cv.json --family letter
  cv-layout cv.json --template template-3 --css
""",
    )
    parser.add_argument("document", help="Path to the structured CV JSON file")
    target = parser.add_mutually_exclusive_group()
    target.add_argument("--family", help="Page family from page_budgets.yaml (default: PAGE_FAMILY or a4)")
    target.add_argument("--template", help="CV template id; uses the page family of that template")
    parser.add_argument("--css", action="store_true", help="Print the section container CSS instead of JSON")
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "WARNING"),
        help="Logging level (default: LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--log-file", action="store_true", help=f"Also write a detailed log under {LOG_DIR}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI. Returns the process exit code."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    init_logger(LOG_DIR, log_level=args.log_level, log_to_file=args.log_file)
    logger = get_logger()

    try:
        document = load_cv_document(resolve_under_root(args.document))
        if args.template:
            budget = page_budget_for_template(args.template)
        else:
            budget = load_page_budget(args.family)
    except (DocumentLoadError, PageBudgetConfigError) as e:
        logger.error(str(e))
        return 1
    except ValueError as e:
        logger.error(f"Invalid document path: {e}")
        return 1

    analysis = analyse_layout(document, budget)
    plan = plan_from_analysis(analysis)

    if args.css:
        print(build_content_css(plan, budget))
        return 0

    output = {
        "plan": plan.model_dump(by_alias=True),
        "sections": [block.title for block in section_blocks(document)],
        "analysis": analysis.to_dict(),
    }
    print(json.dumps(output, indent=2))
    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
