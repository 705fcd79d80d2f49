"""Shared utility functions for the CV layout planner."""

from __future__ import annotations

import json
import re

_CONTROL_CHARS = re.compile(r'[\x00-\x08\x0B\x0C\x0E-\x1F]')


def clean_json_content(content: str) -> str:
    """
    Clean JSON text produced by upstream CV extraction before parsing.

    Extraction models sometimes wrap JSON in ```json ... ``` fences, emit stray
    control characters, or append commentary after the object. This strips the
    fences, replaces control characters (except tab, newline and carriage
    return) with spaces and, if the whole text is not valid JSON, keeps only
    the first complete top-level object or array.

    Args:
        content: Raw text that should contain one JSON document

    Returns:
        Cleaned text (unchanged apart from trimming if nothing needed fixing)
    """
    content = content.strip()

    if content.startswith('```'):
        lines = content.split('\n')[1:]
        if lines and lines[-1].strip() == '```':
            lines = lines[:-1]
        content = '\n'.join(lines)

    content = _CONTROL_CHARS.sub(' ', content).strip()

    try:
        json.loads(content)
        return content
    except json.JSONDecodeError:
        pass

    starts = [i for i in (content.find('{'), content.find('[')) if i != -1]
    if not starts:
        return content

    decoder = json.JSONDecoder()
    start = min(starts)
    try:
        _, end = decoder.raw_decode(content, start)
    except json.JSONDecodeError:
        return content
    return content[start:end]
