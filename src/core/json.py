"""JSON decoding and encoding for UI descriptions."""

import json
import re
from typing import Any

import msgspec
import orjson
from json_repair import repair_json

_FENCE = re.compile(r"```(?:json)?\s*\n?(.*?)```", re.DOTALL)


class JSONParseError(Exception):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def strip_code_fence(text: str) -> str:
    """Body of the first markdown code fence, or the text unchanged."""
    match = _FENCE.search(text)
    return match.group(1).strip() if match else text.strip()


def extract_object_text(text: str) -> str | None:
    """
    Slice from the first ``{`` to the last ``}``.

    Descriptions copied from agent transcripts often carry a sentence of prose
    or a code fence around the object.
    """
    body = strip_code_fence(text)
    start = body.find("{")
    end = body.rfind("}")
    if start == -1 or end < start:
        return None
    return body[start:end + 1]


def _expect_object(result: Any) -> dict[str, Any]:
    if not isinstance(result, dict):
        raise JSONParseError(f"Expected object, got {type(result).__name__}")
    return result


def extract_json(text: str, repair: bool = True) -> dict[str, Any]:
    """
    Extract and parse a JSON object from text.

    Args:
        text: Text containing JSON
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed JSON object

    Raises:
        JSONParseError: If no object can be recovered
    """
    json_str = extract_object_text(text)
    if json_str is None:
        raise JSONParseError("No JSON object found in text")

    try:
        return _expect_object(msgspec.json.decode(json_str.encode("utf-8")))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e

    try:
        return _expect_object(json.loads(repair_json(json_str)))
    except ValueError as e:
        raise JSONParseError(f"JSON repair failed: {e}", e) from e


def safe_json_dumps(obj: Any, indent: int = 0) -> str:
    """
    Encode with orjson, falling back to the stdlib for values orjson refuses
    (integers beyond 64 bits, non-string keys).

    Args:
        obj: Object to encode
        indent: 0 for compact output, 2 for pretty output

    Returns:
        JSON string
    """
    option = orjson.OPT_INDENT_2 if indent == 2 else None
    try:
        return orjson.dumps(obj, option=option).decode("utf-8")
    except TypeError:
        return json.dumps(obj, indent=indent or None, default=str)
