"""
JSON object extraction from noisy model output.

Models wrap their JSON in markdown fences, add prose after it, or get
truncated mid-object. extract_json_object returns the substring most
likely to parse as the first top-level object; json.loads on the result
still raises when nothing usable was found.
"""

import json
import re
from typing import Any, Dict

_FENCE_PATTERN = re.compile(r"```(?:json)?")


def strip_code_fences(text: str) -> str:
    """Remove ```json and bare ``` markers anywhere in the text."""
    return _FENCE_PATTERN.sub("", text)


def extract_json_object(text: str) -> str:
    """
    Find the first balanced JSON object in text.

    Braces inside string values (including escaped quotes) are not
    counted. When the object never closes, falls back to the span from the
    first '{' to the last '}'.

    Args:
        text: Raw model output

    Returns:
        Candidate JSON substring. If the text holds no '{' at all, the
        original text is returned unchanged.

    Examples:
        >>> extract_json_object('Sure! ```json\\n{"a": "}"}\\n``` hope that helps')
        '{"a": "}"}'
    """
    clean_text = strip_code_fences(text)

    start = clean_text.find("{")
    if start == -1:
        return text

    depth = 0
    in_string = False
    escaped = False

    for index in range(start, len(clean_text)):
        char = clean_text[index]

        if escaped:
            escaped = False
            continue
        if char == "\\":
            escaped = True
            continue
        if char == '"':
            in_string = not in_string
            continue

        if not in_string:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    return clean_text[start:index + 1]

    # Truncated or malformed: last-ditch span up to the final closing brace
    last = clean_text.rfind("}")
    if last > start:
        return clean_text[start:last + 1]

    return clean_text


def parse_json_object(text: str) -> Dict[str, Any]:
    """
    Extract and parse the JSON object in text.

    Raises:
        json.JSONDecodeError: If the extracted candidate is not valid JSON
    """
    return json.loads(extract_json_object(text))
