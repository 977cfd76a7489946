"""
Record Loader — Raw Text → Input Record

Accepts either a clean JSON document or text with a JSON object embedded in
it (log excerpts, copy-pasted snippets). In the second case the first
balanced {...} object is extracted and parsed.
"""

import json
from pathlib import Path
from typing import Any, Dict

from src.core.errors import MalformedInput


def extract_first_json_object(text: str) -> str:
    """
    First balanced {...} substring of text.

    Braces inside JSON string literals are ignored; backslash escapes inside
    strings are honoured.

    Raises:
        MalformedInput: if there is no "{" or no matching "}"
    """
    start = text.find("{")
    if start == -1:
        raise MalformedInput("No JSON object found in input.")

    depth = 0
    in_string = False
    escaped = False
    for index in range(start, len(text)):
        char = text[index]
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
            continue
        if char == '"':
            in_string = True
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start:index + 1]

    raise MalformedInput("Could not find matching closing brace for JSON object.")


def _reject_constant(name: str) -> Any:
    raise MalformedInput(f"Non-standard JSON constant {name} in input.")


def _decode(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def load_record(text: str) -> Dict[str, Any]:
    """
    Parse raw text into an input record.

    NaN, Infinity and -Infinity are not JSON and are rejected.

    Raises:
        MalformedInput: empty input, no parseable object, or a top level
                        that is not a JSON object
    """
    trimmed = text.strip()
    if not trimmed:
        raise MalformedInput("Input is empty.")

    try:
        parsed = _decode(trimmed)
    except MalformedInput:
        raise
    except ValueError:
        fragment = extract_first_json_object(trimmed)
        try:
            parsed = _decode(fragment)
        except MalformedInput:
            raise
        except ValueError as e:
            raise MalformedInput(f"Invalid JSON object in input: {e}") from e

    if not isinstance(parsed, dict):
        raise MalformedInput("Top-level JSON must be an object.")
    return parsed


def load_record_file(path: Path) -> Dict[str, Any]:
    """Read a UTF-8 file and parse it with load_record."""
    return load_record(Path(path).read_text(encoding="utf-8"))
