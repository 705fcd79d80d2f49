"""
Loading of CV documents from JSON.

RESPONSIBILITY: turn CV JSON (as stored or as produced by extraction) into a
validated CVDocument, or fail loudly with a DocumentLoadError. The layout
core itself never reads files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError

from cv_layout.logger import get_logger
from cv_layout.models import CVDocument
from cv_layout.utils import clean_json_content

logger = get_logger("document_loader")


class DocumentLoadError(ValueError):
    """Raised when a CV document cannot be read, parsed or validated."""


def parse_cv_document(data: Union[str, Dict[str, Any]]) -> CVDocument:
    """
    Validate CV data (JSON text or an already-parsed mapping) into a CVDocument.

    Raises:
        DocumentLoadError: If the text is not JSON or does not match the CV schema
    """
    if isinstance(data, str):
        try:
            data = json.loads(clean_json_content(data))
        except json.JSONDecodeError as e:
            logger.error(f"CV document: Invalid JSON - {e}")
            raise DocumentLoadError(f"Invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise DocumentLoadError(f"CV document must be a JSON object, got {type(data).__name__}")

    try:
        return CVDocument.model_validate(data)
    except ValidationError as e:
        logger.error(f"CV document does not match the schema: {e.error_count()} error(s)")
        raise DocumentLoadError(f"Invalid CV document: {e}") from e


def load_cv_document(file_path: Union[str, Path]) -> CVDocument:
    """
    Load a CV document from a JSON file.

    Raises:
        DocumentLoadError: If the file is missing, unreadable, not JSON or not a CV document
    """
    path = Path(file_path)
    try:
        raw_content = path.read_text(encoding='utf-8')
    except FileNotFoundError as e:
        logger.error(f"CV document not found: {path}")
        raise DocumentLoadError(f"File not found: {path}") from e
    except OSError as e:
        logger.error(f"CV document {path}: Error reading file - {e}")
        raise DocumentLoadError(f"Cannot read {path}: {e}") from e

    if not raw_content.strip():
        raise DocumentLoadError(f"CV document is empty: {path}")

    document = parse_cv_document(raw_content)
    logger.debug(f"Loaded CV document from {path}")
    return document
