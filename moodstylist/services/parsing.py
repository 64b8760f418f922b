"""Extraction of outfit records from free-form model replies."""

from __future__ import annotations

import json
import re
from typing import Any, Mapping

from pydantic import ValidationError

from moodstylist.services.errors import ParseError
from moodstylist.services.models import OUTFIT_COUNT, Outfit

# Greedy on purpose: spans from the first "[" to the last "]" of the reply.
_ARRAY_PATTERN = re.compile(r"\[[\s\S]*\]")


def extract_json_array(text: str | None) -> list[Any]:
    """Return the JSON array embedded in ``text``.

    The model is asked for a bare JSON array but frequently wraps it in prose
    or Markdown fences, so only the bracketed part of the reply is parsed.
    """

    match = _ARRAY_PATTERN.search(text or "")
    if match is None:
        raise ParseError("Failed to parse outfit suggestions")
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise ParseError("Failed to parse outfit suggestions: malformed JSON") from exc


def parse_outfits(text: str | None, *, expected: int = OUTFIT_COUNT) -> list[Outfit]:
    """Validate the embedded array into exactly ``expected`` outfits.

    Fewer valid objects than ``expected`` is a ``ParseError``; suggestions
    beyond ``expected`` are dropped, keeping the model's order.
    """

    outfits: list[Outfit] = []
    for index, item in enumerate(extract_json_array(text), start=1):
        if not isinstance(item, Mapping):
            raise ParseError(f"Outfit suggestion {index} is not an object")
        try:
            outfits.append(Outfit.model_validate(item))
        except ValidationError as exc:
            raise ParseError(f"Outfit suggestion {index} is missing required fields") from exc

    if len(outfits) < expected:
        raise ParseError(f"Expected {expected} outfit suggestions, got {len(outfits)}")
    return outfits[:expected]
